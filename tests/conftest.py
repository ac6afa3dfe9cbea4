from __future__ import annotations

from pathlib import Path
from typing import Callable, Sequence, Tuple

import pytest

from ppmviewer.models.image_model import PixelImage

RGB = Tuple[int, int, int]


def encode_p3(width: int, height: int, pixels: Sequence[RGB], max_value: int = 255) -> bytes:
    """Кодирует пиксели в P3. Только для тестов: запись PPM вне задач проекта."""
    lines = ["P3", "# test image", f"{width} {height}", str(max_value)]
    for y in range(height):
        row = pixels[y * width:(y + 1) * width]
        lines.append("  ".join(f"{r} {g} {b}" for r, g, b in row))
    return ("\n".join(lines) + "\n").encode("ascii")


def bgrx_list(image: PixelImage):
    return [tuple(int(c) for c in px) for px in image.channels().reshape(-1, 4)]


@pytest.fixture
def ppm_file(tmp_path: Path) -> Callable[[bytes], Path]:
    """Фабрика временных файлов с заданным содержимым."""
    counter = {"n": 0}

    def _make(data: bytes, name: str = "") -> Path:
        counter["n"] += 1
        path = tmp_path / (name or f"image_{counter['n']}.ppm")
        path.write_bytes(data)
        return path

    return _make
