"""Геометрия области просмотра: масштаб, положение картинки, пересчёт координат.

Принципы:
- SRP: модуль ничего не рисует и не знает о tkinter; виджеты только
  передают сюда размеры канвы и события мыши.
- Состояние одно на виджет: `Viewport` хранит масштаб и левый верхний угол.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

Size = Tuple[int, int]
Point = Tuple[int, int]

FIT_LABEL = "Fit"


def clamp_offset(offset: Optional[int], content: int, canvas: int) -> int:
    """Положение содержимого по одной оси.

    Помещается целиком: по центру, прежнее смещение не важно.
    Не помещается: край картинки не отходит от края канвы, то есть
    смещение лежит в [canvas - content, 0]. `None` значит «с начала».
    """
    if content <= canvas:
        return (canvas - content) // 2
    if offset is None:
        return 0
    return max(canvas - content, min(0, offset))


def preset_labels(presets: Iterable[int]) -> List[str]:
    return [FIT_LABEL] + [f"{p}%" for p in presets]


def parse_preset(label: str) -> Optional[int]:
    """`"200%"` -> 200, `"Fit"` и мусор -> None."""
    if label == FIT_LABEL:
        return None
    digits = label.strip().rstrip("%")
    return int(digits) if digits.isdigit() else None


@dataclass
class Viewport:
    min_scale: float = 0.1
    max_scale: float = 4.0
    scale: float = 1.0
    offset: Optional[Point] = None

    @classmethod
    def from_percent(cls, bounds: Tuple[int, int]) -> "Viewport":
        low, high = bounds
        return cls(min_scale=low / 100.0, max_scale=high / 100.0)

    @property
    def percent(self) -> int:
        return int(round(self.scale * 100))

    def clamp_scale(self, scale: float) -> float:
        return max(self.min_scale, min(self.max_scale, scale))

    def set_percent(self, percent: int) -> None:
        self.scale = self.clamp_scale(percent / 100.0)

    def fit(self, image: Size, canvas: Size) -> None:
        """Подбирает масштаб «целиком в окне» и сбрасывает положение."""
        img_w, img_h = image
        canvas_w, canvas_h = max(1, canvas[0]), max(1, canvas[1])
        if img_w <= 0 or img_h <= 0:
            self.scale = 1.0
        else:
            self.scale = self.clamp_scale(min(canvas_w / img_w, canvas_h / img_h))
        self.offset = None

    def scaled_size(self, image: Size) -> Size:
        return max(1, int(image[0] * self.scale)), max(1, int(image[1] * self.scale))

    def place(self, image: Size, canvas: Size) -> Point:
        """Фиксирует положение картинки для текущего масштаба и размера канвы."""
        width, height = self.scaled_size(image)
        x, y = self.offset if self.offset is not None else (None, None)
        self.offset = (clamp_offset(x, width, canvas[0]), clamp_offset(y, height, canvas[1]))
        return self.offset

    def pan(self, start: Point, delta: Point) -> None:
        self.offset = (start[0] + delta[0], start[1] + delta[1])

    def zoom_at(self, point: Point, factor: float) -> bool:
        """Меняет масштаб так, что пиксель под `point` остаётся на месте.

        Returns:
            False, если масштаб упёрся в границу или картинка ещё не размещена.
        """
        if self.offset is None:
            return False
        new_scale = self.clamp_scale(self.scale * factor)
        if abs(new_scale - self.scale) < 1e-6:
            return False
        (px, py), (ox, oy) = point, self.offset
        ratio = new_scale / self.scale
        self.scale = new_scale
        self.offset = (int(round(px - (px - ox) * ratio)), int(round(py - (py - oy) * ratio)))
        return True

    def to_image(self, point: Point, image: Size) -> Optional[Point]:
        """Координаты канвы -> пиксель изображения или None вне картинки."""
        if self.offset is None:
            return None
        dx, dy = point[0] - self.offset[0], point[1] - self.offset[1]
        if dx < 0 or dy < 0:
            return None
        x, y = int(dx / self.scale), int(dy / self.scale)
        if x >= image[0] or y >= image[1]:
            return None
        return x, y
