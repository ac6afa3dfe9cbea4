"""Канва с одним изображением: зум колесом, перетаскивание, курсор над пикселем.

Принципы:
- SRP: виджет переводит события tkinter в вызовы `Viewport` и рисует результат.
- Картинка масштабируется без сглаживания, чтобы были видны отдельные пиксели.
"""
from __future__ import annotations

from typing import Callable, Optional, Tuple

import customtkinter as ctk
import tkinter as tk
from PIL import Image, ImageTk

from ppmviewer.ui.viewport import Point, Size, Viewport

WHEEL_STEP = 1.1


class ImageViewer(ctk.CTkFrame):
    def __init__(self, master: ctk.CTk | tk.Misc, zoom_bounds: Tuple[int, int] = (10, 400), **kwargs) -> None:
        super().__init__(master, **kwargs)
        self.grid_rowconfigure(0, weight=1)
        self.grid_columnconfigure(0, weight=1)

        dark = ctk.get_appearance_mode().lower() == "dark"
        self._canvas = tk.Canvas(self, highlightthickness=0, bg="#1f1f1f" if dark else "#f2f2f2")
        self._canvas.grid(row=0, column=0, sticky="nsew")

        self._image: Optional[Image.Image] = None
        self._photo: Optional[ImageTk.PhotoImage] = None
        self._view = Viewport.from_percent(zoom_bounds)
        # (event point, offset) at ButtonPress-1
        self._drag: Optional[Tuple[Point, Point]] = None

        self.on_cursor_move: Optional[Callable[[Optional[int], Optional[int]], None]] = None
        self.on_zoom_change: Optional[Callable[[int], None]] = None

        bindings = {
            "<Configure>": lambda _e: self._redraw(),
            "<Motion>": self._on_motion,
            "<Leave>": lambda _e: self._report_cursor(None),
            "<MouseWheel>": self._on_wheel,
            "<Button-4>": self._on_wheel,
            "<Button-5>": self._on_wheel,
            "<ButtonPress-1>": self._on_drag_start,
            "<B1-Motion>": self._on_drag,
            "<ButtonRelease-1>": self._on_drag_end,
        }
        for sequence, handler in bindings.items():
            self._canvas.bind(sequence, handler)

    def set_image(self, image: Image.Image) -> None:
        self._image = image
        self.set_zoom_to_fit()

    def set_zoom_to_fit(self) -> None:
        if self._image is not None:
            self._view.fit(self._image.size, self._canvas_size())
        self._redraw()

    def set_zoom_percent(self, zoom_percent: int) -> None:
        self._view.set_percent(zoom_percent)
        self._redraw()

    def get_zoom_percent(self) -> int:
        return self._view.percent

    def _canvas_size(self) -> Size:
        return int(self._canvas.winfo_width()), int(self._canvas.winfo_height())

    def _redraw(self) -> None:
        self._canvas.delete("all")
        if self._image is None:
            return
        x, y = self._view.place(self._image.size, self._canvas_size())
        scaled = self._image.resize(self._view.scaled_size(self._image.size), Image.Resampling.NEAREST)
        self._photo = ImageTk.PhotoImage(scaled)
        self._canvas.create_image(x, y, image=self._photo, anchor="nw")

    def _report_cursor(self, pixel: Optional[Point]) -> None:
        if self.on_cursor_move is None:
            return
        if pixel is None:
            self.on_cursor_move(None, None)
        else:
            self.on_cursor_move(*pixel)

    def _on_motion(self, event: tk.Event) -> None:
        if self._image is not None:
            self._report_cursor(self._view.to_image((event.x, event.y), self._image.size))

    def _on_wheel(self, event: tk.Event) -> None:
        if self._image is None:
            return
        # X11 sends Button-4/5 with delta 0
        num = getattr(event, "num", None)
        if num in (4, 5):
            zoom_in = num == 4
        elif event.delta:
            zoom_in = event.delta > 0
        else:
            return
        factor = WHEEL_STEP if zoom_in else 1.0 / WHEEL_STEP
        if self._view.zoom_at((event.x, event.y), factor):
            self._redraw()
            if self.on_zoom_change:
                self.on_zoom_change(self._view.percent)

    def _on_drag_start(self, event: tk.Event) -> None:
        if self._view.offset is None:
            return
        self._canvas.focus_set()
        self._drag = ((event.x, event.y), self._view.offset)

    def _on_drag(self, event: tk.Event) -> None:
        if self._drag is None:
            return
        (sx, sy), origin = self._drag
        self._view.pan(origin, (event.x - sx, event.y - sy))
        self._redraw()

    def _on_drag_end(self, _event: tk.Event) -> None:
        self._drag = None
