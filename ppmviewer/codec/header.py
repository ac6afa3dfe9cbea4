"""Разбор заголовка PPM: magic, ширина, высота, maxValue."""
from __future__ import annotations

import re
from dataclasses import dataclass

from ppmviewer.codec.errors import FormatError, SizeLimitError, TruncationError
from ppmviewer.codec.tokenizer import TokenReader, normalize_token
from ppmviewer.config import DEFAULT_LIMITS, DecoderLimits

MAGIC_ASCII = "P3"
MAGIC_BINARY = "P6"
SUPPORTED_MAGICS = (MAGIC_ASCII, MAGIC_BINARY)

_INT_PREFIX = re.compile(rb"[+-]?[0-9]+")
_INT32_MIN = -(2 ** 31)
_INT32_MAX = 2 ** 31 - 1


@dataclass(frozen=True)
class PPMHeader:
    magic: str
    width: int
    height: int
    max_value: int

    @property
    def pixel_count(self) -> int:
        return self.width * self.height

    @property
    def is_binary(self) -> bool:
        return self.magic == MAGIC_BINARY


def parse_int(token: bytes, what: str) -> int:
    """Разбирает целое как C `stoi`: знак, ведущие цифры, хвост игнорируется.

    Raises:
        FormatError: нет ведущих цифр или значение вне int32.
    """
    m = _INT_PREFIX.match(token)
    if m is None:
        raise FormatError(f"Нечисловое значение {what}: {token!r}")
    value = int(m.group())
    if not _INT32_MIN <= value <= _INT32_MAX:
        raise FormatError(f"Значение {what} вне диапазона: {token!r}")
    return value


def _next_field(reader: TokenReader, what: str) -> bytes:
    token = reader.next_token()
    token = normalize_token(token) if token is not None else b""
    if not token:
        raise FormatError(f"Отсутствует поле заголовка: {what}")
    return token


def parse_header(reader: TokenReader, limits: DecoderLimits = DEFAULT_LIMITS) -> PPMHeader:
    """Читает и проверяет четыре поля заголовка.

    Для P6 дополнительно съедает один байт-разделитель перед бинарными данными,
    после чего `reader` стоит ровно на первом байте пикселей.

    Raises:
        FormatError: неверный magic, пропущенное/нечисловое поле, размеры <= 0.
        SizeLimitError: width*height больше `limits.max_pixels`.
        TruncationError: P6 без байта-разделителя.
    """
    magic_token = _next_field(reader, "magic")
    magic = magic_token.decode("latin-1")
    if magic not in SUPPORTED_MAGICS:
        raise FormatError(f"Нераспознанный magic PPM (ожидается P3 или P6): {magic!r}")

    width = parse_int(_next_field(reader, "width"), "width")
    height = parse_int(_next_field(reader, "height"), "height")
    max_value = parse_int(_next_field(reader, "maxValue"), "maxValue")

    if width <= 0 or height <= 0:
        raise FormatError(f"Недопустимые размеры изображения: {width}x{height}")
    pixel_count = width * height
    if pixel_count == 0 or pixel_count > limits.max_pixels:
        raise SizeLimitError(
            f"Изображение слишком большое: {pixel_count} пикселей (максимум {limits.max_pixels})"
        )

    header = PPMHeader(magic=magic, width=width, height=height, max_value=max_value)
    if header.is_binary and not reader.read(1):
        raise TruncationError("Неожиданный конец файла перед бинарными данными P6")
    return header
