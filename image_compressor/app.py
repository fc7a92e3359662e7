import customtkinter as ctk

from image_compressor.controllers.app_controller import AppController
from image_compressor.ui.bottom_bar import BottomBar
from image_compressor.ui.file_list import FileList
from image_compressor.ui.image_viewer import ImageViewer
from image_compressor.ui.sidebar import Sidebar
from image_compressor.utils.settings import CompressorSettings


class ImageCompressorApp(ctk.CTk):
    def __init__(self, settings: CompressorSettings) -> None:
        super().__init__()
        ctk.set_appearance_mode("system")
        ctk.set_default_color_theme("blue")

        self.title("Image Compressor")
        self.geometry("1000x650")
        self.minsize(900, 600)

        # root layout: file list, preview, options; buttons at the bottom
        self.grid_columnconfigure(0, weight=0)
        self.grid_columnconfigure(1, weight=1)
        self.grid_rowconfigure(0, weight=1)
        self.grid_rowconfigure(1, weight=0)

        self._file_list = FileList(self)
        self._file_list.grid(row=0, column=0, sticky="ns", padx=(12, 6), pady=(12, 6))

        self._viewer = ImageViewer(self)
        self._viewer.grid(row=0, column=1, sticky="nsew", padx=6, pady=(12, 6))

        self._sidebar = Sidebar(self)
        self._sidebar.grid(row=0, column=2, sticky="ns", padx=(6, 12), pady=(12, 6))

        self._bottom = BottomBar(self)
        self._bottom.grid(row=1, column=0, columnspan=3, sticky="ew", padx=12, pady=(0, 12))

        self._controller = AppController(
            viewer=self._viewer,
            sidebar=self._sidebar,
            bottom=self._bottom,
            file_list=self._file_list,
            window=self,
            settings=settings,
        )
        self._controller.bind_events()
