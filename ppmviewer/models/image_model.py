"""Модели данных для изображений.

Принципы:
- SRP: только структура данных, без логики декодирования.
- Чистый код: неизменяемость (`frozen=True`, read-only буфер) для предсказуемости.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Tuple

import numpy as np
from PIL import Image

# byte0=B, byte1=G, byte2=R, byte3=0 независимо от порядка байт платформы
PIXEL_DTYPE = np.dtype("<u4")


def _empty_pixels() -> np.ndarray:
    pixels = np.zeros(0, dtype=PIXEL_DTYPE)
    pixels.setflags(write=False)
    return pixels


@dataclass(frozen=True, eq=False)
class PixelImage:
    """Декодированное изображение в раскладке экрана.

    Fields:
        width: Ширина, px (0 у пустого изображения).
        height: Высота, px (0 у пустого изображения).
        pixels: `width*height` упакованных значений `<u4`, байты [B, G, R, 0].

    Либо пустое (0x0, нет пикселей), либо заполнено полностью.
    """
    width: int = 0
    height: int = 0
    pixels: np.ndarray = field(default_factory=_empty_pixels)

    def __post_init__(self) -> None:
        if self.pixels.shape != (self.width * self.height,):
            raise ValueError(
                f"Размер буфера {self.pixels.shape} не совпадает с {self.width}x{self.height}"
            )

    @classmethod
    def empty(cls) -> "PixelImage":
        return cls()

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0 or self.pixels.size == 0

    def channels(self) -> np.ndarray:
        """Представление (height, width, 4) uint8 в порядке B, G, R, 0."""
        return self.pixels.view(np.uint8).reshape(self.height, self.width, 4)

    def as_bytes(self) -> bytes:
        return self.pixels.tobytes()

    def pixel_at(self, x: int, y: int) -> Tuple[int, int, int, int]:
        b, g, r, pad = self.channels()[y, x]
        return int(b), int(g), int(r), int(pad)

    def to_pil(self) -> Image.Image:
        """Возвращает RGB-изображение PIL для отображения."""
        if self.is_empty:
            raise ValueError("Пустое изображение нельзя отобразить")
        rgb = np.ascontiguousarray(self.channels()[:, :, 2::-1])
        return Image.fromarray(rgb)


@dataclass(frozen=True)
class ImageData:
    """Загруженное изображение и его метаданные для оболочки просмотра.

    Fields:
        path: Путь к исходному файлу (None для заглушки).
        image: Декодированные пиксели.
        pil_image: RGB-изображение PIL для канвы.
        width: Ширина, px.
        height: Высота, px.
        size_bytes: Размер файла, если доступен.
    """
    path: Optional[Path]
    image: PixelImage
    pil_image: Image.Image
    width: int
    height: int
    size_bytes: Optional[int]
