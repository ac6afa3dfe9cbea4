"""Нижняя панель масштаба: ползунок, текущее значение и готовые уровни."""
from __future__ import annotations

from typing import Callable, Optional, Sequence, Tuple

import customtkinter as ctk

from ppmviewer.ui.viewport import FIT_LABEL, parse_preset, preset_labels


class BottomBar(ctk.CTkFrame):
    def __init__(
        self,
        master: ctk.CTk,
        zoom_bounds: Tuple[int, int] = (10, 400),
        presets: Sequence[int] = (25, 50, 100, 200, 400),
        **kwargs,
    ) -> None:
        super().__init__(master, height=64, **kwargs)
        self._presets = tuple(presets)

        self.on_zoom_change: Optional[Callable[[int], None]] = None
        self.on_zoom_preset: Optional[Callable[[int], None]] = None
        self.on_zoom_fit: Optional[Callable[[], None]] = None

        self.grid_rowconfigure(0, weight=1)
        self.grid_columnconfigure(1, weight=1)

        low, high = zoom_bounds
        ctk.CTkLabel(self, text="Масштаб").grid(row=0, column=0, padx=(10, 6), pady=8, sticky="w")
        self._slider = ctk.CTkSlider(self, from_=low, to=high, number_of_steps=high - low, command=self._on_slide)
        self._slider.grid(row=0, column=1, padx=6, pady=8, sticky="ew")
        self._readout = ctk.CTkLabel(self, text="", width=48, anchor="w")
        self._readout.grid(row=0, column=2, padx=(6, 12), pady=8, sticky="w")
        self._levels = ctk.CTkSegmentedButton(self, values=preset_labels(self._presets), command=self._on_level)
        self._levels.grid(row=0, column=3, padx=6, pady=8, sticky="w")

        self.set_zoom_percent(100)
        self._levels.set(FIT_LABEL)

    def set_zoom_percent(self, percent: int) -> None:
        """Синхронизирует панель с виджетом просмотра без обратного вызова."""
        self._slider.set(percent)
        self._readout.configure(text=f"{percent}%")
        self._levels.set(f"{percent}%" if percent in self._presets else "")

    def _on_slide(self, value: float) -> None:
        percent = int(round(value))
        self._readout.configure(text=f"{percent}%")
        if self.on_zoom_change:
            self.on_zoom_change(percent)

    def _on_level(self, label: str) -> None:
        percent = parse_preset(label)
        if percent is None:
            if label == FIT_LABEL and self.on_zoom_fit:
                self.on_zoom_fit()
        elif self.on_zoom_preset:
            self.on_zoom_preset(percent)
