"""Боковая панель: открытие файла, информация об изображении, пиксель под курсором.

Принципы:
- SRP: управляет только UI, не содержит логики загрузки.
- ISP: данные принимает через компактные методы `set_*`, события отдаёт через `on_*`.
"""
from __future__ import annotations

from typing import Callable, Optional, Tuple

import customtkinter as ctk

from ppmviewer.models.image_model import ImageData


def _bgrx_to_hex(bgrx: Tuple[int, int, int, int]) -> str:
    """Преобразует пиксель [B, G, R, 0] в HEX вида #RRGGBB."""
    b, g, r, _pad = bgrx
    return f"#{r:02X}{g:02X}{b:02X}"


def _format_size(size_bytes: Optional[int]) -> str:
    if size_bytes is None:
        return "Размер: —"
    if size_bytes < 1024:
        return f"Размер: {size_bytes} Б"
    if size_bytes < 1024 * 1024:
        return f"Размер: {size_bytes / 1024:.1f} КБ"
    return f"Размер: {size_bytes / (1024 * 1024):.1f} МБ"


class Sidebar(ctk.CTkFrame):
    """Панель с блоками: файл, информация, курсор."""
    def __init__(self, master: ctk.CTk, **kwargs) -> None:
        super().__init__(master, width=280, **kwargs)

        self.grid_columnconfigure(0, weight=1)

        self.on_open_file: Optional[Callable[[], None]] = None

        self._title = ctk.CTkLabel(self, text="Файл", font=ctk.CTkFont(size=16, weight="bold"))
        self._title.grid(row=0, column=0, padx=8, pady=(8, 4), sticky="w")

        self._open_btn = ctk.CTkButton(self, text="Открыть PPM…", command=self._emit_open_file)
        self._open_btn.grid(row=1, column=0, padx=8, pady=(0, 12), sticky="ew")

        # Info section
        self._info_title = ctk.CTkLabel(self, text="Информация", font=ctk.CTkFont(size=16, weight="bold"))
        self._info_title.grid(row=2, column=0, padx=8, pady=(8, 4), sticky="w")

        self._path_val = ctk.StringVar(value="—")
        self._size_val = ctk.StringVar(value="—")
        self._dims_val = ctk.StringVar(value="—")

        self._info_path = ctk.CTkLabel(self, textvariable=self._path_val, wraplength=250, anchor="w", justify="left")
        self._info_size = ctk.CTkLabel(self, textvariable=self._size_val, anchor="w", justify="left")
        self._info_dims = ctk.CTkLabel(self, textvariable=self._dims_val, anchor="w", justify="left")

        self._info_path.grid(row=3, column=0, padx=8, pady=(0, 2), sticky="ew")
        self._info_size.grid(row=4, column=0, padx=8, pady=(0, 2), sticky="ew")
        self._info_dims.grid(row=5, column=0, padx=8, pady=(0, 10), sticky="ew")

        # Cursor section
        self._cursor_title = ctk.CTkLabel(self, text="Курсор", font=ctk.CTkFont(size=16, weight="bold"))
        self._cursor_title.grid(row=6, column=0, padx=8, pady=(8, 4), sticky="w")

        self._cursor_xy_val = ctk.StringVar(value="—")
        self._cursor_rgb_val = ctk.StringVar(value="—")
        self._cursor_hex_val = ctk.StringVar(value="—")

        self._cursor_xy = ctk.CTkLabel(self, textvariable=self._cursor_xy_val, anchor="w", justify="left")
        self._cursor_rgb = ctk.CTkLabel(self, textvariable=self._cursor_rgb_val, anchor="w", justify="left")
        self._cursor_hex = ctk.CTkLabel(self, textvariable=self._cursor_hex_val, anchor="w", justify="left")

        self._cursor_xy.grid(row=7, column=0, padx=8, pady=(0, 2), sticky="ew")
        self._cursor_rgb.grid(row=8, column=0, padx=8, pady=(0, 2), sticky="ew")
        self._cursor_hex.grid(row=9, column=0, padx=8, pady=(0, 2), sticky="ew")

        # filler
        self.grid_rowconfigure(99, weight=1)

    # ---- Public API ----
    def set_image_info(self, data: ImageData) -> None:
        self._path_val.set(str(data.path) if data.path is not None else "Заглушка (файл не загружен)")
        self._size_val.set(_format_size(data.size_bytes))
        self._dims_val.set(f"Размеры: {data.width}×{data.height}")

    def update_cursor_info(
        self, x: Optional[int], y: Optional[int], bgrx: Optional[Tuple[int, int, int, int]]
    ) -> None:
        if x is None or y is None or bgrx is None:
            self._cursor_xy_val.set("—")
            self._cursor_rgb_val.set("—")
            self._cursor_hex_val.set("—")
            return
        b, g, r, _pad = bgrx
        self._cursor_xy_val.set(f"X: {x}, Y: {y}")
        self._cursor_rgb_val.set(f"RGB: {r}, {g}, {b}")
        self._cursor_hex_val.set(_bgrx_to_hex(bgrx))

    # ---- Events ----
    def _emit_open_file(self) -> None:
        if self.on_open_file:
            self.on_open_file()
