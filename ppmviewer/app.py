from __future__ import annotations

from pathlib import Path
from typing import Optional

import customtkinter as ctk

from ppmviewer.config import DEFAULT_SETTINGS, ViewerSettings
from ppmviewer.controllers.app_controller import AppController
from ppmviewer.ui.bottom_bar import BottomBar
from ppmviewer.ui.image_viewer import ImageViewer
from ppmviewer.ui.sidebar import Sidebar


class PPMViewerApp(ctk.CTk):
    def __init__(self, file_path: Optional[str | Path] = None, settings: ViewerSettings = DEFAULT_SETTINGS) -> None:
        super().__init__()
        ctk.set_appearance_mode(settings.appearance_mode)
        ctk.set_default_color_theme(settings.color_theme)

        self.title(settings.title)
        self.minsize(*settings.min_size)

        # root layout: left viewer, right sidebar
        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(0, weight=1)
        self.grid_rowconfigure(1, weight=0)

        zoom_bounds = (settings.zoom_min_percent, settings.zoom_max_percent)
        self._viewer = ImageViewer(self, zoom_bounds=zoom_bounds)
        self._viewer.grid(row=0, column=0, sticky="nsew", padx=(12, 6), pady=(12, 6))

        self._sidebar = Sidebar(self)
        self._sidebar.grid(row=0, column=1, sticky="ns", padx=(6, 12), pady=(12, 6))

        self._bottom = BottomBar(self, zoom_bounds=zoom_bounds, presets=settings.zoom_presets)
        self._bottom.grid(row=1, column=0, columnspan=2, sticky="ew", padx=12, pady=(0, 12))

        self._controller = AppController(
            viewer=self._viewer, sidebar=self._sidebar, bottom=self._bottom, window=self, settings=settings
        )
        self._controller.bind_events()
        # wait for the first layout pass so fit-to-window sees real canvas size
        self.after_idle(self._controller.show_initial, file_path)
