"""Декодирование пикселей P3/P6 в буфер BGRX.

Принципы:
- Буфер назначения выделяется целиком до чтения данных, остальное читается пачками.
- Масштабирование и упаковка векторизованы через numpy и общие для обоих путей.
"""
from __future__ import annotations

import numpy as np

from ppmviewer.codec.errors import SizeLimitError, TruncationError
from ppmviewer.codec.header import PPMHeader, parse_int
from ppmviewer.codec.tokenizer import TokenReader, normalize_token
from ppmviewer.models.image_model import PIXEL_DTYPE

_CHANNELS = ("r", "g", "b")
BATCH_PIXELS = 1 << 16


def rescale(values: np.ndarray, max_value: int) -> np.ndarray:
    """Приводит значения каналов к 0..255 и ограничивает диапазон.

    Если `max_value` не 255 и больше нуля: v' = v*255 / max_value (целочисленно),
    иначе v' = v. Результат зажимается в [0, 255].
    """
    values = values.astype(np.int64, copy=False)
    if max_value != 255 and max_value > 0:
        # floor == trunc after clipping: negatives end up at 0 either way
        values = values * 255 // max_value
    return np.clip(values, 0, 255).astype(np.uint8)


def pack_bgrx(rgb: np.ndarray, out: np.ndarray | None = None) -> np.ndarray:
    """Упаковывает массив (N, 3) RGB uint8 в N значений `<u4` с раскладкой BGRX."""
    count = rgb.shape[0]
    if out is None:
        out = np.zeros((count, 4), dtype=np.uint8)
    out[:, 0] = rgb[:, 2]
    out[:, 1] = rgb[:, 1]
    out[:, 2] = rgb[:, 0]
    out[:, 3] = 0
    return out.view(PIXEL_DTYPE).reshape(count)


def _allocate(count: int) -> np.ndarray:
    try:
        return np.zeros((count, 4), dtype=np.uint8)
    except MemoryError as exc:
        raise SizeLimitError(f"Не удалось выделить буфер на {count} пикселей") from exc


def _read_ascii_batch(reader: TokenReader, start: int, size: int) -> np.ndarray:
    values = np.empty((size, 3), dtype=np.int64)
    for i in range(size):
        for c, channel in enumerate(_CHANNELS):
            token = reader.next_token()
            token = normalize_token(token) if token is not None else b""
            if not token:
                raise TruncationError(
                    f"Неожиданный конец файла при чтении пикселя {start + i} (канал {channel})"
                )
            values[i, c] = parse_int(token, f"пикселя {start + i} ({channel})")
    return values


def _read_binary_batch(reader: TokenReader, start: int, size: int, count: int) -> np.ndarray:
    expected = size * 3
    data = reader.read(expected)
    if len(data) < expected:
        raise TruncationError(
            f"Неожиданный конец файла в бинарных данных: {start + len(data) // 3} из {count} пикселей"
        )
    return np.frombuffer(data, dtype=np.uint8).reshape(size, 3)


def decode_pixels(reader: TokenReader, header: PPMHeader) -> np.ndarray:
    """Читает `header.pixel_count` пикселей и возвращает read-only массив `<u4`.

    Данные читаются пачками по `BATCH_PIXELS`: кроме буфера назначения
    ничто не растёт вместе с заявленным размером.

    Raises:
        SizeLimitError: не хватило памяти под буфер.
        TruncationError: данных меньше, чем заявлено.
        FormatError: нечисловой токен в теле P3.
    """
    count = header.pixel_count
    out = _allocate(count)
    for start in range(0, count, BATCH_PIXELS):
        size = min(BATCH_PIXELS, count - start)
        if header.is_binary:
            raw = _read_binary_batch(reader, start, size, count)
        else:
            raw = _read_ascii_batch(reader, start, size)
        pack_bgrx(rescale(raw, header.max_value), out=out[start:start + size])
    pixels = out.view(PIXEL_DTYPE).reshape(count)
    pixels.setflags(write=False)
    return pixels
