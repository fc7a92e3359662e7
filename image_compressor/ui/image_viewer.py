"""Виджет превью: показывает выбранный файл, вписанный в доступную область.

Принципы:
- SRP: отвечает только за отображение; загрузку выполняет контроллер.
"""
from __future__ import annotations

from typing import Optional

import customtkinter as ctk
import tkinter as tk
from PIL import Image, ImageTk

PLACEHOLDER_TEXT = "Нет превью"


class ImageViewer(ctk.CTkFrame):
    """Канва с превью, масштаб которого подстраивается под размер окна."""
    def __init__(self, master: ctk.CTk | tk.Misc, **kwargs) -> None:
        super().__init__(master, **kwargs)
        self.grid_rowconfigure(1, weight=1)
        self.grid_columnconfigure(0, weight=1)

        self._title = ctk.CTkLabel(self, text="Превью", font=ctk.CTkFont(size=16, weight="bold"))
        self._title.grid(row=0, column=0, padx=8, pady=(8, 4), sticky="w")

        self._canvas = tk.Canvas(self, highlightthickness=0, bg=self._get_canvas_bg())
        self._canvas.grid(row=1, column=0, sticky="nsew", padx=8, pady=(0, 8))

        self._image: Optional[Image.Image] = None
        self._tk_image: Optional[ImageTk.PhotoImage] = None
        self._message: str = PLACEHOLDER_TEXT
        self._fit_scale_factor: float = 1.0

        self._canvas.bind("<Configure>", self._on_canvas_resize)

    # ---- Public API ----
    def set_image(self, image: Image.Image) -> None:
        """Показывает изображение, вписанное в канву."""
        self._image = image
        self._render()

    def clear(self, message: str = PLACEHOLDER_TEXT) -> None:
        """Убирает превью и показывает текст-заглушку."""
        self._image = None
        self._tk_image = None
        self._message = message
        self._render()

    # ---- Internals ----
    def _on_canvas_resize(self, _event: tk.Event) -> None:
        self._render()

    def _render(self) -> None:
        self._canvas.delete("all")
        canvas_w = int(self._canvas.winfo_width())
        canvas_h = int(self._canvas.winfo_height())

        if self._image is None:
            self._canvas.create_text(
                canvas_w // 2, canvas_h // 2, text=self._message, fill=self._get_text_color()
            )
            return

        self._compute_fit_scale()
        img_w, img_h = self._image.size
        scaled_w = max(1, int(img_w * self._fit_scale_factor))
        scaled_h = max(1, int(img_h * self._fit_scale_factor))
        preview = self._image.resize((scaled_w, scaled_h), Image.Resampling.LANCZOS)

        x = (canvas_w - scaled_w) // 2
        y = (canvas_h - scaled_h) // 2
        self._tk_image = ImageTk.PhotoImage(preview)
        self._canvas.create_image(x, y, image=self._tk_image, anchor="nw")

    def _compute_fit_scale(self) -> None:
        if self._image is None:
            self._fit_scale_factor = 1.0
            return
        canvas_w = max(1, int(self._canvas.winfo_width()))
        canvas_h = max(1, int(self._canvas.winfo_height()))
        img_w, img_h = self._image.size
        if img_w == 0 or img_h == 0:
            self._fit_scale_factor = 1.0
            return
        # preview never enlarges small images
        self._fit_scale_factor = min(1.0, canvas_w / img_w, canvas_h / img_h)

    def _get_canvas_bg(self) -> str:
        # CTk does not expose canvas theme, so pick neutral
        return "#1f1f1f" if ctk.get_appearance_mode().lower() == "dark" else "#f2f2f2"

    def _get_text_color(self) -> str:
        return "#cccccc" if ctk.get_appearance_mode().lower() == "dark" else "#444444"
