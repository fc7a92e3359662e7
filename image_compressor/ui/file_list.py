"""Список файлов к сжатию с выбором элемента для превью."""
from __future__ import annotations

from pathlib import Path
from typing import Callable, List, Optional, Sequence

import customtkinter as ctk
import tkinter as tk


class FileList(ctk.CTkFrame):
    def __init__(self, master: ctk.CTk | tk.Misc, **kwargs) -> None:
        super().__init__(master, width=280, **kwargs)
        self.grid_rowconfigure(2, weight=1)
        self.grid_columnconfigure(0, weight=1)

        self.on_select: Optional[Callable[[int], None]] = None

        self._title = ctk.CTkLabel(self, text="Файлы для сжатия", font=ctk.CTkFont(size=16, weight="bold"))
        self._title.grid(row=0, column=0, padx=8, pady=(8, 0), sticky="w")
        self._hint = ctk.CTkLabel(self, text="Щёлкните элемент для превью", anchor="w")
        self._hint.grid(row=1, column=0, padx=8, pady=(0, 4), sticky="w")

        # CTk has no list widget; plain Listbox with a CTk scrollbar
        self._listbox = tk.Listbox(self, activestyle="none", exportselection=False, width=36, highlightthickness=0)
        self._listbox.grid(row=2, column=0, padx=(8, 0), pady=(0, 8), sticky="nsew")
        self._scrollbar = ctk.CTkScrollbar(self, command=self._listbox.yview)
        self._scrollbar.grid(row=2, column=1, padx=(0, 8), pady=(0, 8), sticky="ns")
        self._listbox.configure(yscrollcommand=self._scrollbar.set)

        self._listbox.bind("<<ListboxSelect>>", self._on_listbox_select)

    # ---- Public API ----
    def set_items(self, items: Sequence[Path]) -> None:
        """Перерисовывает список (показываются только имена файлов)."""
        self._listbox.delete(0, "end")
        for path in items:
            self._listbox.insert("end", Path(path).name)

    def selected_index(self) -> Optional[int]:
        selection: List[int] = list(self._listbox.curselection())
        return selection[0] if selection else None

    def clear_selection(self) -> None:
        self._listbox.selection_clear(0, "end")

    # ---- Internals ----
    def _on_listbox_select(self, _event: tk.Event) -> None:
        index = self.selected_index()
        if index is not None and self.on_select:
            self.on_select(index)
