"""Контроллер приложения: оркестрация UI и сервиса загрузки.

SOLID:
- SRP: класс управляет связями между UI и сервисами (без логики декодирования).
- DIP: зависит от сервиса как от роли; декодер скрыт за `ImageService`.
Clean Code:
- Обработчики компактны; тяжёлая логика вынесена в сервисы.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from tkinter import TclError, filedialog, messagebox
from typing import Optional

import customtkinter as ctk

from ppmviewer.config import DEFAULT_SETTINGS, ViewerSettings
from ppmviewer.models.image_model import ImageData
from ppmviewer.services.image_service import ImageService
from ppmviewer.ui.bottom_bar import BottomBar
from ppmviewer.ui.image_viewer import ImageViewer
from ppmviewer.ui.sidebar import Sidebar

log = logging.getLogger(__name__)


@dataclass
class AppController:
    """Связывает элементы UI с прикладной логикой.

    Ответственности:
    - Бинд событий (UI -> контроллер).
    - Загрузка изображений через `ImageService`; владение последним загруженным.
    - Синхронизация состояния зума между канвой и нижней панелью.
    """
    viewer: ImageViewer
    sidebar: Sidebar
    bottom: BottomBar
    window: ctk.CTk
    settings: ViewerSettings = DEFAULT_SETTINGS

    _image_service: ImageService = field(default_factory=ImageService)
    _current_image: Optional[ImageData] = None

    def bind_events(self) -> None:
        """Регистрирует обработчики событий между UI-компонентами."""
        self.sidebar.on_open_file = self._handle_open_file
        self.viewer.on_cursor_move = self._handle_cursor_move
        self.viewer.on_zoom_change = self._handle_viewer_zoom_changed

        self.bottom.on_zoom_change = self._handle_zoom_change
        self.bottom.on_zoom_preset = self._handle_zoom_change
        self.bottom.on_zoom_fit = self._handle_zoom_fit

    def show_initial(self, file_path: Optional[str | Path]) -> None:
        """Показывает файл из командной строки или градиент-заглушку."""
        data: Optional[ImageData] = None
        if file_path:
            try:
                data = self._image_service.load_image(file_path)
            except (FileNotFoundError, ValueError) as exc:
                log.warning("Не удалось загрузить %s: %s", file_path, exc)
        if data is None:
            width, height = self.settings.placeholder_size
            data = self._image_service.placeholder(width, height)
        self._show(data)

    # ---- Handlers ----
    def _handle_open_file(self) -> None:
        try:
            file_path = filedialog.askopenfilename(
                title="Выберите PPM-файл",
                filetypes=(
                    ("PPM Files", "*.ppm"),
                    ("All files", "*.*"),
                ),
            )
        except TclError:
            # Silent fail if dialog cannot open
            return

        if not file_path:
            return

        try:
            data = self._image_service.load_image(file_path)
        except (FileNotFoundError, ValueError) as exc:
            # previous image stays on screen
            messagebox.showerror("Ошибка загрузки", f"Не удалось загрузить выбранный PPM-файл.\n{exc}")
            return
        self._show(data)

    def _handle_cursor_move(self, x: Optional[int], y: Optional[int]) -> None:
        if x is None or y is None or self._current_image is None:
            self.sidebar.update_cursor_info(None, None, None)
            return
        self.sidebar.update_cursor_info(x, y, self._current_image.image.pixel_at(x, y))

    def _handle_zoom_change(self, zoom_percent: int) -> None:
        self.viewer.set_zoom_percent(zoom_percent)

    def _handle_viewer_zoom_changed(self, zoom_percent: int) -> None:
        # mouse wheel zoom -> slider
        self.bottom.set_zoom_percent(zoom_percent)

    def _handle_zoom_fit(self) -> None:
        self.viewer.set_zoom_to_fit()
        self.bottom.set_zoom_percent(self.viewer.get_zoom_percent())

    # ---- Helpers ----
    def _show(self, data: ImageData) -> None:
        self._current_image = data
        self.viewer.set_image(data.pil_image)
        self.sidebar.set_image_info(data)
        self.viewer.set_zoom_to_fit()
        self.bottom.set_zoom_percent(self.viewer.get_zoom_percent())
        name = data.path.name if data.path is not None else "заглушка"
        self.window.title(f"{self.settings.title}: {name}")
