from __future__ import annotations

from typing import Callable, Optional

import customtkinter as ctk


class BottomBar(ctk.CTkFrame):
    def __init__(self, master: ctk.CTk, **kwargs) -> None:
        super().__init__(master, height=64, **kwargs)

        # callbacks
        self.on_add_files: Optional[Callable[[], None]] = None
        self.on_add_folder: Optional[Callable[[], None]] = None
        self.on_remove_selected: Optional[Callable[[], None]] = None
        self.on_clear_all: Optional[Callable[[], None]] = None

        # layout
        self.grid_rowconfigure(0, weight=1)
        self.grid_columnconfigure(4, weight=1)  # counter stretches

        self._add_files_btn = ctk.CTkButton(self, text="Добавить файлы…", command=lambda: self._emit(self.on_add_files))
        self._add_files_btn.grid(row=0, column=0, padx=(10, 6), pady=8, sticky="w")

        self._add_folder_btn = ctk.CTkButton(self, text="Добавить папку…", command=lambda: self._emit(self.on_add_folder))
        self._add_folder_btn.grid(row=0, column=1, padx=6, pady=8, sticky="w")

        self._remove_btn = ctk.CTkButton(self, text="Удалить выбранное", command=lambda: self._emit(self.on_remove_selected))
        self._remove_btn.grid(row=0, column=2, padx=6, pady=8, sticky="w")

        self._clear_btn = ctk.CTkButton(self, text="Очистить всё", command=lambda: self._emit(self.on_clear_all))
        self._clear_btn.grid(row=0, column=3, padx=6, pady=8, sticky="w")

        self._count_value = ctk.StringVar(value="Файлов: 0")
        self._count_label = ctk.CTkLabel(self, textvariable=self._count_value, anchor="e")
        self._count_label.grid(row=0, column=4, padx=(6, 12), pady=8, sticky="e")

    # public API (sync from controller)
    def set_item_count(self, count: int) -> None:
        self._count_value.set(f"Файлов: {count}")

    def set_enabled(self, enabled: bool) -> None:
        state = "normal" if enabled else "disabled"
        for btn in (self._add_files_btn, self._add_folder_btn, self._remove_btn, self._clear_btn):
            btn.configure(state=state)

    # helpers
    def _emit(self, callback: Optional[Callable[[], None]]) -> None:
        if callback:
            callback()
