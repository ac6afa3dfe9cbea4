import numpy as np
import pytest

from ppmviewer.codec.pixels import pack_bgrx, rescale
from ppmviewer.models.image_model import PIXEL_DTYPE, PixelImage


def _image(rgb_rows):
    rgb = np.array(rgb_rows, dtype=np.uint8)
    height, width, _ = rgb.shape
    return PixelImage(width=width, height=height, pixels=pack_bgrx(rgb.reshape(-1, 3)))


def test_empty_image():
    image = PixelImage.empty()
    assert image.is_empty
    assert (image.width, image.height) == (0, 0)
    assert image.pixels.size == 0
    assert image.as_bytes() == b""


def test_size_mismatch_rejected():
    with pytest.raises(ValueError):
        PixelImage(width=2, height=2, pixels=np.zeros(3, dtype=PIXEL_DTYPE))


def test_packed_value_layout_is_little_endian_bgrx():
    image = _image([[(0x11, 0x22, 0x33)]])
    assert image.pixels.dtype == PIXEL_DTYPE
    assert int(image.pixels[0]) == 0x00112233
    assert image.as_bytes() == b"\x33\x22\x11\x00"


def test_pixel_at_and_channels():
    image = _image([[(1, 2, 3), (4, 5, 6)], [(7, 8, 9), (10, 11, 12)]])
    assert image.channels().shape == (2, 2, 4)
    assert image.pixel_at(1, 0) == (6, 5, 4, 0)
    assert image.pixel_at(0, 1) == (9, 8, 7, 0)


def test_to_pil_restores_rgb_order():
    image = _image([[(255, 0, 0), (0, 128, 0)]])
    pil = image.to_pil()
    assert pil.mode == "RGB"
    assert pil.size == (2, 1)
    assert pil.getpixel((0, 0)) == (255, 0, 0)
    assert pil.getpixel((1, 0)) == (0, 128, 0)


def test_to_pil_rejects_empty():
    with pytest.raises(ValueError):
        PixelImage.empty().to_pil()


def test_rescale_passthrough_for_255_and_non_positive():
    values = np.array([-3, 0, 200, 300])
    assert rescale(values, 255).tolist() == [0, 0, 200, 255]
    assert rescale(values, 0).tolist() == [0, 0, 200, 255]
    assert rescale(values, -10).tolist() == [0, 0, 200, 255]


def test_rescale_truncates():
    assert rescale(np.array([1, 2, 3]), 2).tolist() == [127, 255, 255]
