"""Боковая панель: информация о выбранном файле и параметры сжатия.

Принципы:
- SRP: управляет только UI параметров, не содержит алгоритмов.
- ISP: выдаёт параметры через компактные методы `get_*`, события через `on_*`.
"""
from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional, Tuple

import customtkinter as ctk

from image_compressor.models.image_model import ImageData


def _parse_non_negative(text: str) -> int:
    """Пустая строка — 0; иначе целое ≥ 0, иначе ValueError."""
    text = text.strip()
    if not text:
        return 0
    value = int(text)
    if value < 0:
        raise ValueError(f"отрицательное значение: {value}")
    return value


class Sidebar(ctk.CTkFrame):
    """Панель с блоками: информация, вывод, параметры, запуск и прогресс."""
    def __init__(self, master: ctk.CTk, **kwargs) -> None:
        super().__init__(master, width=300, **kwargs)

        self.grid_columnconfigure(0, weight=1)

        # Callbacks
        self.on_browse_output: Optional[Callable[[], None]] = None
        self.on_start: Optional[Callable[[], None]] = None
        self.on_stop: Optional[Callable[[], None]] = None

        # Info section
        self._info_title = ctk.CTkLabel(self, text="Информация", font=ctk.CTkFont(size=16, weight="bold"))
        self._info_title.grid(row=0, column=0, padx=8, pady=(8, 4), sticky="w")

        self._path_val = ctk.StringVar(value="—")
        self._size_val = ctk.StringVar(value="—")
        self._dims_val = ctk.StringVar(value="—")

        self._info_path = ctk.CTkLabel(self, textvariable=self._path_val, wraplength=270, anchor="w", justify="left")
        self._info_size = ctk.CTkLabel(self, textvariable=self._size_val, anchor="w", justify="left")
        self._info_dims = ctk.CTkLabel(self, textvariable=self._dims_val, anchor="w", justify="left")

        self._info_path.grid(row=1, column=0, padx=8, pady=(0, 2), sticky="ew")
        self._info_size.grid(row=2, column=0, padx=8, pady=(0, 2), sticky="ew")
        self._info_dims.grid(row=3, column=0, padx=8, pady=(0, 10), sticky="ew")

        # Output section
        self._out_title = ctk.CTkLabel(self, text="Папка вывода", font=ctk.CTkFont(size=16, weight="bold"))
        self._out_title.grid(row=4, column=0, padx=8, pady=(8, 4), sticky="w")

        self._out_entry = ctk.CTkEntry(self, placeholder_text="Выберите папку (Обзор…)")
        self._out_entry.grid(row=5, column=0, padx=8, pady=(0, 4), sticky="ew")
        self._browse_btn = ctk.CTkButton(self, text="Обзор…", command=self._emit_browse_output)
        self._browse_btn.grid(row=6, column=0, padx=8, pady=(0, 10), sticky="ew")

        # Options section
        self._opts_title = ctk.CTkLabel(self, text="Параметры", font=ctk.CTkFont(size=16, weight="bold"))
        self._opts_title.grid(row=7, column=0, padx=8, pady=(8, 4), sticky="w")

        self._target_entry = ctk.CTkEntry(self, placeholder_text="Целевой размер, КБ (0 = обычный JPEG)")
        self._target_entry.grid(row=8, column=0, padx=8, pady=(0, 4), sticky="ew")

        dims = ctk.CTkFrame(self, fg_color="transparent")
        dims.grid(row=9, column=0, padx=8, pady=(0, 10), sticky="ew")
        dims.grid_columnconfigure((0, 1), weight=1)
        self._width_entry = ctk.CTkEntry(dims, placeholder_text="Макс. ширина, px")
        self._height_entry = ctk.CTkEntry(dims, placeholder_text="Макс. высота, px")
        self._width_entry.grid(row=0, column=0, padx=(0, 4), sticky="ew")
        self._height_entry.grid(row=0, column=1, padx=(4, 0), sticky="ew")

        # filler
        self.grid_rowconfigure(99, weight=1)

        # Run section
        self._start_btn = ctk.CTkButton(self, text="Сжать (блокирующе)", command=self._emit_start)
        self._start_btn.grid(row=100, column=0, padx=8, pady=(8, 4), sticky="ew")
        self._stop_btn = ctk.CTkButton(self, text="Остановить", command=self._emit_stop, state="disabled")
        self._stop_btn.grid(row=101, column=0, padx=8, pady=(0, 8), sticky="ew")

        self._progress = ctk.CTkProgressBar(self)
        self._progress.set(0)
        self._status_val = ctk.StringVar(value="Ожидание")
        self._status = ctk.CTkLabel(self, textvariable=self._status_val, wraplength=270, anchor="w", justify="left")
        self._status.grid(row=103, column=0, padx=8, pady=(0, 8), sticky="ew")
        self.show_progress(False)

    # ---- Public API ----
    def set_image_info(self, image_data: Optional[ImageData]) -> None:
        """Отображает метаданные выбранного изображения (None — сброс)."""
        if image_data is None:
            self._path_val.set("—")
            self._size_val.set("—")
            self._dims_val.set("—")
            return
        self._path_val.set(str(image_data.path))
        self._size_val.set(self._format_size(image_data.size_bytes))
        self._dims_val.set(f"{image_data.width} × {image_data.height} px")

    def set_defaults(self, output_dir: Optional[Path], target_kb: int, max_width: int, max_height: int) -> None:
        """Заполняет поля значениями из конфига (нулевые значения оставляют поле пустым)."""
        if output_dir is not None:
            self.set_output_dir(str(output_dir))
        for entry, value in ((self._target_entry, target_kb), (self._width_entry, max_width), (self._height_entry, max_height)):
            if value:
                entry.insert(0, str(value))

    def set_output_dir(self, path: str) -> None:
        self._out_entry.delete(0, "end")
        self._out_entry.insert(0, path)

    def get_output_dir(self) -> str:
        return self._out_entry.get().strip()

    def get_options(self) -> Tuple[int, int, int]:
        """Возвращает (target_kb, max_width, max_height).

        Raises:
            ValueError: если одно из полей не является целым ≥ 0.
        """
        return (
            _parse_non_negative(self._target_entry.get()),
            _parse_non_negative(self._width_entry.get()),
            _parse_non_negative(self._height_entry.get()),
        )

    def set_running(self, running: bool) -> None:
        self._start_btn.configure(state="disabled" if running else "normal")
        self._stop_btn.configure(state="normal" if running else "disabled")

    def show_progress(self, visible: bool) -> None:
        if visible:
            self._progress.grid(row=102, column=0, padx=8, pady=(0, 4), sticky="ew")
        else:
            self._progress.grid_remove()

    def set_progress(self, fraction: float) -> None:
        self._progress.set(max(0.0, min(1.0, fraction)))

    def set_status(self, text: str) -> None:
        self._status_val.set(text)

    # ---- Events ----
    def _emit_browse_output(self) -> None:
        if self.on_browse_output:
            self.on_browse_output()

    def _emit_start(self) -> None:
        if self.on_start:
            self.on_start()

    def _emit_stop(self) -> None:
        if self.on_stop:
            self.on_stop()

    def _format_size(self, size_bytes: Optional[int]) -> str:
        if size_bytes is None:
            return "—"
        thresholds = [("Б", 1024), ("КБ", 1024**2), ("МБ", 1024**3), ("ГБ", 1024**4)]
        for label, limit in thresholds:
            if size_bytes < limit:
                if label == "Б":
                    return f"{size_bytes} {label}"
                value = size_bytes / (limit // 1024)
                return f"{value:.1f} {label}"
        value = size_bytes / (1024**4)
        return f"{value:.1f} ГБ"
