import io

import pytest

from ppmviewer.codec.errors import FormatError, SizeLimitError, TruncationError
from ppmviewer.codec.header import parse_header, parse_int
from ppmviewer.codec.tokenizer import TokenReader
from ppmviewer.config import DecoderLimits


def _parse(data: bytes, limits: DecoderLimits = DecoderLimits()):
    reader = TokenReader(io.BytesIO(data))
    return parse_header(reader, limits), reader


def test_parses_p3_header_with_comments():
    header, _ = _parse(b"P3\n# made by hand\n640 480\n# max\n255\n")
    assert (header.magic, header.width, header.height, header.max_value) == ("P3", 640, 480, 255)
    assert header.pixel_count == 640 * 480
    assert not header.is_binary


def test_p6_consumes_exactly_one_separator():
    header, reader = _parse(b"P6 1 1 255\n\n\x01\x02\x03")
    assert header.is_binary
    assert reader.read(4) == b"\n\x01\x02\x03"


def test_p6_without_separator_is_truncation():
    with pytest.raises(TruncationError):
        _parse(b"P6 2 2 255")


def test_normalized_tokens_are_accepted():
    header, _ = _parse(b"\xef\xbb\xbfP3 \xc2\xa02 \xc2\xa03 255")
    assert (header.width, header.height) == (2, 3)


@pytest.mark.parametrize("data", [b"P5 1 1 255", b"p3 1 1 255", b"P33 1 1 255", b"GIF89a"])
def test_unknown_magic(data):
    with pytest.raises(FormatError, match="magic"):
        _parse(data)


@pytest.mark.parametrize("data", [b"", b"P3", b"P3 1", b"P3 1 1", b"# only a comment\n"])
def test_missing_fields(data):
    with pytest.raises(FormatError, match="Отсутствует"):
        _parse(data)


@pytest.mark.parametrize("data", [b"P3 w 1 255", b"P3 1 h 255", b"P3 1 1 max"])
def test_non_numeric_fields(data):
    with pytest.raises(FormatError, match="Нечисловое"):
        _parse(data)


@pytest.mark.parametrize("data", [b"P3 0 1 255", b"P3 1 0 255", b"P3 -4 2 255", b"P6 2 -1 255\n"])
def test_invalid_dimensions(data):
    with pytest.raises(FormatError, match="размеры"):
        _parse(data)


def test_too_many_pixels():
    with pytest.raises(SizeLimitError):
        _parse(b"P3 30000 10000 255")


def test_custom_pixel_limit():
    limits = DecoderLimits(max_pixels=10)
    _parse(b"P3 2 5 255", limits)
    with pytest.raises(SizeLimitError):
        _parse(b"P3 11 1 255", limits)


def test_size_limit_is_a_format_error():
    assert issubclass(SizeLimitError, FormatError)


@pytest.mark.parametrize(
    "token, expected",
    [(b"42", 42), (b"+7", 7), (b"-3", -3), (b"12abc", 12), (b"007", 7), (b"2147483647", 2 ** 31 - 1)],
)
def test_parse_int_like_stoi(token, expected):
    assert parse_int(token, "x") == expected


@pytest.mark.parametrize("token", [b"abc", b"-", b"+", b"x10", b"2147483648", b"-2147483649"])
def test_parse_int_rejects(token):
    with pytest.raises(FormatError):
        parse_int(token, "x")
