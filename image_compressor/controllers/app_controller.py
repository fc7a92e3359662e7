"""Контроллер приложения: оркестрация UI и сервисов сжатия.

SOLID:
- SRP: класс управляет связями между UI и сервисами (без логики обработки изображений).
- DIP: конвейер сжатия вызывается через `BatchService`; UI-состояние в него не попадает.
Clean Code:
- Обработчики компактны; тяжёлая логика вынесена в сервисы.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from tkinter import filedialog, messagebox, TclError
from typing import List

import customtkinter as ctk

from image_compressor.models.compression_model import CompressionResult
from image_compressor.models.errors import CompressorError
from image_compressor.services.batch_service import BatchService, IMAGE_EXTENSIONS, expand_inputs, list_images
from image_compressor.services.image_service import ImageService
from image_compressor.ui.bottom_bar import BottomBar
from image_compressor.ui.file_list import FileList
from image_compressor.ui.image_viewer import ImageViewer
from image_compressor.ui.sidebar import Sidebar
from image_compressor.utils.settings import CompressorSettings

logger = logging.getLogger(__name__)

_FILETYPES = (
    ("Images", " ".join(f"*{ext}" for ext in sorted(IMAGE_EXTENSIONS))),
    ("All files", "*.*"),
)


@dataclass
class AppController:
    """Связывает элементы UI с конвейером сжатия.

    Ответственности:
    - Инициализация и бинд событий (UI -> контроллер).
    - Ведение списка файлов и превью выбранного элемента.
    - Синхронный запуск пакета с обновлением прогресса между файлами.
    """
    viewer: ImageViewer
    sidebar: Sidebar
    bottom: BottomBar
    file_list: FileList
    window: ctk.CTk
    settings: CompressorSettings

    _image_service: ImageService = ImageService()
    _batch_service: BatchService = BatchService()
    _items: List[Path] = field(default_factory=list)
    _stop_requested: bool = False

    def bind_events(self) -> None:
        """Регистрирует обработчики событий между UI-компонентами.

        Сохраняет слабую связность: компоненты UI ничего не знают друг о друге,
        общаются через контроллер.
        """
        self.file_list.on_select = self._handle_select

        self.bottom.on_add_files = self._handle_add_files
        self.bottom.on_add_folder = self._handle_add_folder
        self.bottom.on_remove_selected = self._handle_remove_selected
        self.bottom.on_clear_all = self._handle_clear_all

        self.sidebar.on_browse_output = self._handle_browse_output
        self.sidebar.on_start = self._handle_start
        self.sidebar.on_stop = self._handle_stop

        s = self.settings
        self.sidebar.set_defaults(s.output_dir, s.target_size_kb, s.max_width, s.max_height)

    # ---- Handlers ----
    def _handle_add_files(self) -> None:
        try:
            paths = filedialog.askopenfilenames(title="Выберите изображения", filetypes=_FILETYPES)
        except TclError:
            # Silent fail if dialog cannot open
            return
        if not paths:
            return
        self._items.extend(Path(p) for p in paths)
        self._refresh_list()

    def _handle_add_folder(self) -> None:
        try:
            folder = filedialog.askdirectory(title="Выберите папку с изображениями")
        except TclError:
            return
        if not folder:
            return
        try:
            images = list_images(folder)
        except OSError as exc:
            self.sidebar.set_status(f"Не удалось прочитать папку: {exc}")
            return
        self._items.extend(images)
        self._refresh_list()
        self.sidebar.set_status(f"Добавлено из папки: {len(images)}")

    def _handle_remove_selected(self) -> None:
        index = self.file_list.selected_index()
        if index is None or not 0 <= index < len(self._items):
            return
        del self._items[index]
        self.file_list.clear_selection()
        self._refresh_list()
        self._reset_preview()

    def _handle_clear_all(self) -> None:
        self._items.clear()
        self._refresh_list()
        self._reset_preview()

    def _handle_select(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            return
        try:
            image_data = self._image_service.load_image(self._items[index])
        except CompressorError as exc:
            self.viewer.clear("Превью недоступно")
            self.sidebar.set_image_info(None)
            self.sidebar.set_status(str(exc))
            return
        self.viewer.set_image(image_data.pil_image)
        self.sidebar.set_image_info(image_data)

    def _handle_browse_output(self) -> None:
        try:
            folder = filedialog.askdirectory(title="Папка для результатов")
        except TclError:
            return
        if folder:
            self.sidebar.set_output_dir(folder)

    def _handle_stop(self) -> None:
        self._stop_requested = True
        self.sidebar.set_status("Остановка после текущего файла…")

    def _handle_start(self) -> None:
        if not self._items:
            messagebox.showinfo("Нет файлов", "Сначала добавьте файлы или папки.", parent=self.window)
            return
        out_folder = self.sidebar.get_output_dir()
        if not out_folder:
            messagebox.showinfo("Нет папки", "Выберите папку для результатов.", parent=self.window)
            return
        try:
            target_kb, max_w, max_h = self.sidebar.get_options()
        except ValueError:
            messagebox.showerror("Параметры", "Размер и границы должны быть целыми числами ≥ 0.", parent=self.window)
            return

        images = expand_inputs(self._items)
        if not images:
            messagebox.showinfo("Нет изображений", "Файлы изображений не найдены.", parent=self.window)
            return

        self._stop_requested = False
        self.sidebar.set_progress(0)
        self.sidebar.show_progress(True)
        self.sidebar.set_running(True)
        self.bottom.set_enabled(False)
        self.sidebar.set_status("Запуск…")
        self.window.update()

        try:
            results = self._batch_service.run(
                images,
                Path(out_folder),
                target_size_kb=target_kb,
                max_width=max_w,
                max_height=max_h,
                on_progress=self._on_progress,
                should_stop=lambda: self._stop_requested,
            )
        finally:
            self.sidebar.set_running(False)
            self.bottom.set_enabled(True)

        failed = sum(1 for r in results if not r.ok)
        done = "Остановлено" if len(results) < len(images) else "Готово"
        self.sidebar.set_status(f"{done}: {len(results) - failed} успешно, {failed} с ошибками")

    # ---- Helpers ----
    def _on_progress(self, done: int, total: int, result: CompressionResult) -> None:
        self.sidebar.set_status(result.summary())
        self.sidebar.set_progress(done / total)
        # process pending UI events (repaint, Stop click) between items
        self.window.update()

    def _refresh_list(self) -> None:
        self.file_list.set_items(self._items)
        self.bottom.set_item_count(len(self._items))

    def _reset_preview(self) -> None:
        self.viewer.clear()
        self.sidebar.set_image_info(None)
