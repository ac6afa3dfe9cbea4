"""Настройки декодера и окна просмотра.

Принципы:
- SRP: только значения по умолчанию, без логики.
- Неизменяемость (`frozen=True`): настройки передаются по значению и не мутируют.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class DecoderLimits:
    """Ограничения и размеры буферов декодера PPM.

    Fields:
        max_pixels: Верхняя граница width*height.
        chunk_size: Размер блока чтения токенизатора, байт.
        sample_size: Сколько первых байт потока сохранять для диагностики.
    """
    max_pixels: int = 100_000_000
    chunk_size: int = 1 << 20
    sample_size: int = 256


@dataclass(frozen=True)
class ViewerSettings:
    title: str = "PPM Viewer"
    min_size: Tuple[int, int] = (900, 600)
    appearance_mode: str = "system"
    color_theme: str = "blue"
    placeholder_size: Tuple[int, int] = (800, 600)
    zoom_min_percent: int = 10
    zoom_max_percent: int = 400
    zoom_presets: Tuple[int, ...] = (25, 50, 100, 200, 400)


DEFAULT_LIMITS = DecoderLimits()
DEFAULT_SETTINGS = ViewerSettings()
