"""Токенизатор заголовка и тела PPM.

Один `TokenReader` обслуживает оба пути сниффера: сырой файловый поток и
буфер UTF-8 после перекодирования UTF-16. Читает блоками, отдаёт токены,
разделённые пробелами и комментариями `#`, и сырые байты с той же позиции.
"""
from __future__ import annotations

import re
from typing import BinaryIO, Iterator, Optional

UTF8_BOM = b"\xef\xbb\xbf"
UTF8_NBSP = b"\xc2\xa0"

# набор C isspace()
_WHITESPACE = frozenset(b" \t\n\v\f\r")
_TOKEN_END = re.compile(rb"[ \t\n\v\f\r#]")
_LINE_END = re.compile(rb"[\n\r]")
_COMMENT = 0x23  # '#'


def normalize_token(token: bytes) -> bytes:
    """Срезает с начала токена BOM, UTF-8 NBSP и управляющие байты (<= 0x20).

    Повторяет, пока токен меняется: артефакты перекодирования бывают
    вперемешку, например NBSP после BOM.
    """
    changed = True
    while changed and token:
        changed = False
        if token.startswith(UTF8_BOM):
            token = token[3:]
            changed = True
        elif token.startswith(UTF8_NBSP):
            token = token[2:]
            changed = True
        elif token[0] <= 0x20:
            token = token[1:]
            changed = True
    return token


class TokenReader:
    """Ленивый источник токенов и сырых байт поверх бинарного потока.

    Args:
        stream: Бинарный поток, читается блоками по `chunk_size`.
        prefix: Байты, уже прочитанные из потока (например, сниффером).
        chunk_size: Размер блока чтения.
    """

    def __init__(self, stream: BinaryIO, prefix: bytes = b"", chunk_size: int = 1 << 20) -> None:
        self._stream = stream
        self._buf = bytes(prefix)
        self._pos = 0
        self._chunk_size = max(1, chunk_size)
        self._eof = False

    # ---- Public API ----
    def next_token(self) -> Optional[bytes]:
        """Возвращает следующий токен или `None`, если токенов больше нет."""
        if not self._skip_separators():
            return None
        parts = []
        while True:
            m = _TOKEN_END.search(self._buf, self._pos)
            if m is not None:
                parts.append(self._buf[self._pos:m.start()])
                self._pos = m.start()
                break
            parts.append(self._buf[self._pos:])
            self._pos = len(self._buf)
            if not self._fill():
                break
        return b"".join(parts)

    def tokens(self) -> Iterator[bytes]:
        while True:
            token = self.next_token()
            if token is None:
                return
            yield token

    def read(self, size: int) -> bytes:
        """Читает до `size` сырых байт с текущей позиции (меньше только на EOF)."""
        if size <= 0:
            return b""
        available = len(self._buf) - self._pos
        if available >= size:
            out = self._buf[self._pos:self._pos + size]
            self._pos += size
            return out
        parts = [self._buf[self._pos:]]
        self._buf = b""
        self._pos = 0
        remaining = size - available
        while remaining > 0 and not self._eof:
            chunk = self._stream.read(remaining)
            if not chunk:
                self._eof = True
                break
            parts.append(chunk)
            remaining -= len(chunk)
        return b"".join(parts)

    # ---- Internals ----
    def _fill(self) -> bool:
        # drop consumed bytes, append the next chunk
        if self._eof:
            return False
        chunk = self._stream.read(self._chunk_size)
        if not chunk:
            self._eof = True
            return False
        self._buf = self._buf[self._pos:] + chunk
        self._pos = 0
        return True

    def _skip_separators(self) -> bool:
        """Пропускает пробелы и комментарии; False, если поток закончился."""
        while True:
            if self._pos >= len(self._buf) and not self._fill():
                return False
            b = self._buf[self._pos]
            if b in _WHITESPACE:
                self._pos += 1
            elif b == _COMMENT:
                self._skip_line()
            else:
                return True

    def _skip_line(self) -> None:
        while True:
            m = _LINE_END.search(self._buf, self._pos)
            if m is not None:
                self._pos = m.end()
                return
            self._pos = len(self._buf)
            if not self._fill():
                return
