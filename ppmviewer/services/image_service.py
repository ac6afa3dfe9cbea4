"""Загрузка изображений PPM с диска и упаковка метаданных.

Принципы:
- SRP: класс отвечает только за загрузку и базовое извлечение свойств.
- OCP: новые источники (стрим, URL) можно добавить отдельными методами.
- LSP/ISP: возвращает `ImageData` с предсказуемыми полями; интерфейс узкий и конкретный.
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional

import numpy as np

from ppmviewer.codec.decoder import load_ppm
from ppmviewer.codec.pixels import pack_bgrx
from ppmviewer.config import DEFAULT_LIMITS, DecoderLimits
from ppmviewer.models.image_model import ImageData, PixelImage


class ImageService:
    def __init__(self, limits: DecoderLimits = DEFAULT_LIMITS) -> None:
        self._limits = limits

    def load_image(self, file_path: str | Path) -> ImageData:
        """Загружает PPM с диска и возвращает его вместе с метаданными.

        Args:
            file_path: Путь до файла изображения.

        Returns:
            `ImageData` c декодированными пикселями, RGB-копией для PIL и размером файла.

        Raises:
            FileNotFoundError: если путь не существует или не указывает на файл.
            ValueError: если файл не удалось декодировать как PPM.
        """
        path = Path(file_path)
        if not path.exists() or not path.is_file():
            raise FileNotFoundError(f"Файл не найден: {path}")

        image = load_ppm(path, self._limits)
        if image.is_empty:
            raise ValueError(f"Файл не является корректным PPM: {path}")

        try:
            size_bytes: Optional[int] = path.stat().st_size
        except OSError:
            size_bytes = None

        return self._wrap(image, path=path, size_bytes=size_bytes)

    def placeholder(self, width: int, height: int) -> ImageData:
        """Градиент-заглушка: R растёт по x, G по y, B = 128."""
        image = make_gradient(width, height)
        return self._wrap(image, path=None, size_bytes=None)

    def _wrap(self, image: PixelImage, path: Optional[Path], size_bytes: Optional[int]) -> ImageData:
        return ImageData(
            path=path,
            image=image,
            pil_image=image.to_pil(),
            width=image.width,
            height=image.height,
            size_bytes=size_bytes,
        )


def make_gradient(width: int, height: int) -> PixelImage:
    if width <= 0 or height <= 0:
        raise ValueError(f"Недопустимые размеры заглушки: {width}x{height}")
    xs = np.arange(width, dtype=np.int64) * 255 // width
    ys = np.arange(height, dtype=np.int64) * 255 // height
    rgb = np.empty((height, width, 3), dtype=np.uint8)
    rgb[:, :, 0] = xs[np.newaxis, :]
    rgb[:, :, 1] = ys[:, np.newaxis]
    rgb[:, :, 2] = 128
    pixels = pack_bgrx(rgb.reshape(-1, 3))
    pixels.setflags(write=False)
    return PixelImage(width=width, height=height, pixels=pixels)
