"""Ошибки декодера PPM.

Все исключения поднимаются внутри `ppmviewer.codec` и перехватываются один раз
на публичной границе (`decode_ppm`, `load_ppm`), которая возвращает пустое
изображение.
"""
from __future__ import annotations


class PPMError(Exception):
    """Базовая ошибка декодирования PPM."""


class StreamOpenError(PPMError):
    """Источник не удалось открыть или прочитать."""


class FormatError(PPMError):
    """Повреждённый или нераспознанный заголовок, magic или токен."""


class SizeLimitError(FormatError):
    """Заявленные размеры превышают допустимое число пикселей."""


class TruncationError(PPMError):
    """Поток закончился раньше, чем прочитаны все заявленные пиксели."""


class EncodingError(PPMError):
    """Не удалось перекодировать UTF-16 текст в UTF-8."""
