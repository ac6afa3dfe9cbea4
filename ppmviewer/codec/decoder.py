"""Конвейер декодирования PPM: сниффер -> токенизатор -> заголовок -> пиксели.

Публичные функции `decode_ppm`, `decode_bytes` и `load_ppm` никогда не
пробрасывают `PPMError`: при любой ошибке возвращается пустое изображение
0x0, а подробности уходят в лог. `decode_ppm_strict` поднимает исключения
и нужен тем, кому важна причина отказа.
"""
from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO

from ppmviewer.codec.errors import FormatError, PPMError, SizeLimitError, StreamOpenError
from ppmviewer.codec.header import PPMHeader, parse_header
from ppmviewer.codec.pixels import decode_pixels
from ppmviewer.codec.sniffer import Encoding, open_source
from ppmviewer.config import DEFAULT_LIMITS, DecoderLimits
from ppmviewer.models.image_model import PixelImage

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class DecodedPPM:
    image: PixelImage
    header: PPMHeader
    encoding: Encoding


def hexdump(data: bytes, width: int = 16) -> str:
    """Форматирует байты как `offset  hex  |text|` построчно."""
    lines = []
    for offset in range(0, len(data), width):
        row = data[offset:offset + width]
        hex_part = " ".join(f"{b:02x}" for b in row)
        text_part = "".join(chr(b) if 0x20 <= b < 0x7F else "." for b in row)
        lines.append(f"{offset:08x}  {hex_part:<{width * 3 - 1}}  |{text_part}|")
    return "\n".join(lines)


def decode_ppm_strict(stream: BinaryIO, limits: DecoderLimits = DEFAULT_LIMITS) -> DecodedPPM:
    """Декодирует поток PPM целиком.

    Бинарный P6 внутри UTF-16 не принимается: перекодирование в UTF-8
    искажает байты пикселей больше 0x7F.

    Raises:
        EncodingError, FormatError, SizeLimitError, TruncationError.
    """
    try:
        source = open_source(stream, chunk_size=limits.chunk_size, sample_size=limits.sample_size)
    except MemoryError as exc:
        raise SizeLimitError(f"Недостаточно памяти для перекодирования текста: {exc}") from exc
    try:
        header = parse_header(source.reader, limits)
        if header.is_binary and source.encoding.is_wide:
            raise FormatError(f"Бинарный P6 не поддерживается в тексте {source.encoding.value}")
        pixels = decode_pixels(source.reader, header)
    except FormatError:
        log.debug("Начало потока (первые %d байт):\n%s", len(source.head), hexdump(source.head))
        raise
    except MemoryError as exc:
        raise SizeLimitError(f"Недостаточно памяти для декодирования: {exc}") from exc
    image = PixelImage(width=header.width, height=header.height, pixels=pixels)
    log.info("Загружено изображение %s: %dx%d", header.magic, header.width, header.height)
    return DecodedPPM(image=image, header=header, encoding=source.encoding)


def decode_ppm(stream: BinaryIO, limits: DecoderLimits = DEFAULT_LIMITS) -> PixelImage:
    try:
        return decode_ppm_strict(stream, limits).image
    except PPMError as exc:
        log.error("Ошибка декодирования PPM (%s): %s", type(exc).__name__, exc)
        return PixelImage.empty()


def decode_bytes(data: bytes, limits: DecoderLimits = DEFAULT_LIMITS) -> PixelImage:
    return decode_ppm(io.BytesIO(data), limits)


def open_stream(path: str | Path) -> BinaryIO:
    """Открывает файл на чтение в бинарном режиме.

    Raises:
        StreamOpenError: файл не существует или недоступен.
    """
    try:
        return open(path, "rb")
    except OSError as exc:
        raise StreamOpenError(f"Не удалось открыть файл {path}: {exc}") from exc


def load_ppm(path: str | Path, limits: DecoderLimits = DEFAULT_LIMITS) -> PixelImage:
    """Загружает PPM с диска; при любой ошибке возвращает пустое изображение."""
    try:
        stream = open_stream(path)
    except StreamOpenError as exc:
        log.error("%s", exc)
        return PixelImage.empty()
    with stream:
        try:
            return decode_ppm(stream, limits)
        except OSError as exc:
            log.error("Ошибка чтения файла %s: %s", path, exc)
            return PixelImage.empty()
