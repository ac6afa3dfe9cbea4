"""Определение текстовой обёртки потока по BOM.

Принципы:
- SRP: модуль только выбирает кодировку и готовит `TokenReader`;
  разбор заголовка и пикселей живёт дальше по конвейеру.
- Поток читается один раз: первые байты сохраняются как префикс,
  поэтому seek() не нужен.
"""
from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from enum import Enum
from typing import BinaryIO

from ppmviewer.codec.errors import EncodingError
from ppmviewer.codec.tokenizer import UTF8_BOM, TokenReader

log = logging.getLogger(__name__)

UTF16_LE_BOM = b"\xff\xfe"
UTF16_BE_BOM = b"\xfe\xff"


class Encoding(Enum):
    RAW = "raw"
    UTF8_BOM = "utf-8-sig"
    UTF16_LE = "utf-16-le"
    UTF16_BE = "utf-16-be"

    @property
    def is_wide(self) -> bool:
        return self in (Encoding.UTF16_LE, Encoding.UTF16_BE)


@dataclass(frozen=True)
class SniffedSource:
    """Результат сниффинга.

    Fields:
        reader: Источник токенов/байт для заголовка и пикселей.
        encoding: Обнаруженная обёртка.
        head: Первые байты исходного потока (для диагностики).
    """
    reader: TokenReader
    encoding: Encoding
    head: bytes


def sniff_encoding(head: bytes) -> Encoding:
    if head.startswith(UTF16_LE_BOM):
        return Encoding.UTF16_LE
    if head.startswith(UTF16_BE_BOM):
        return Encoding.UTF16_BE
    if head.startswith(UTF8_BOM):
        return Encoding.UTF8_BOM
    return Encoding.RAW


def utf16_to_utf8(body: bytes, encoding: Encoding) -> bytes:
    """Перекодирует тело UTF-16 (без BOM) в UTF-8.

    Нечётный хвостовой байт отбрасывается, непарные суррогаты заменяются
    на U+FFFD.

    Raises:
        EncodingError: пустой результат для непустого входа.
    """
    units = body[: len(body) - (len(body) % 2)]
    out = units.decode(encoding.value, errors="replace").encode("utf-8")
    if units and not out:
        raise EncodingError("Перекодирование UTF-16 в UTF-8 дало пустой результат")
    return out


def open_source(stream: BinaryIO, chunk_size: int = 1 << 20, sample_size: int = 256) -> SniffedSource:
    """Читает начало потока, определяет обёртку и возвращает готовый `TokenReader`."""
    head = stream.read(max(4, sample_size))
    encoding = sniff_encoding(head)
    log.debug("Обнаружена кодировка потока: %s", encoding.value)

    if encoding.is_wide:
        body = head[2:] + stream.read()
        text = utf16_to_utf8(body, encoding)
        reader = TokenReader(io.BytesIO(text), chunk_size=chunk_size)
    elif encoding is Encoding.UTF8_BOM:
        reader = TokenReader(stream, prefix=head[len(UTF8_BOM):], chunk_size=chunk_size)
    else:
        reader = TokenReader(stream, prefix=head, chunk_size=chunk_size)
    return SniffedSource(reader=reader, encoding=encoding, head=head)
