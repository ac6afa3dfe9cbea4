import pytest

from ppmviewer.ui.viewport import FIT_LABEL, Viewport, clamp_offset, parse_preset, preset_labels


@pytest.mark.parametrize(
    "offset, content, canvas, expected",
    [
        (None, 100, 300, 100),
        (-50, 100, 300, 100),  # fits: always centered
        (None, 500, 300, 0),
        (40, 500, 300, 0),
        (-120, 500, 300, -120),
        (-900, 500, 300, -200),
    ],
)
def test_clamp_offset(offset, content, canvas, expected):
    assert clamp_offset(offset, content, canvas) == expected


def test_fit_uses_smaller_ratio_and_bounds():
    view = Viewport.from_percent((10, 400))
    view.fit((200, 100), (800, 600))
    assert view.percent == 400
    view.fit((4000, 1000), (800, 600))
    assert view.percent == 20
    view.fit((100000, 10), (800, 600))
    assert view.percent == 10


def test_place_centers_small_image():
    view = Viewport(scale=2.0)
    assert view.place((10, 20), (100, 100)) == (40, 30)


def test_pan_is_clamped_on_next_place():
    view = Viewport(scale=1.0)
    view.place((500, 400), (300, 300))
    view.pan(view.offset, (-1000, 50))
    assert view.place((500, 400), (300, 300)) == (-200, 0)


def test_zoom_keeps_point_under_cursor():
    view = Viewport(scale=1.0, max_scale=4.0)
    view.place((1000, 1000), (200, 200))
    before = view.to_image((50, 70), (1000, 1000))
    assert view.zoom_at((50, 70), 2.0)
    assert view.scale == 2.0
    assert view.to_image((50, 70), (1000, 1000)) == before


def test_zoom_stops_at_bounds():
    view = Viewport(scale=4.0, max_scale=4.0, offset=(0, 0))
    assert not view.zoom_at((10, 10), 1.1)
    assert not Viewport().zoom_at((10, 10), 1.1)


def test_to_image_outside_picture():
    view = Viewport(scale=2.0, offset=(10, 10))
    assert view.to_image((9, 50), (5, 5)) is None
    assert view.to_image((20, 20), (5, 5)) is None
    assert view.to_image((19, 11), (5, 5)) == (4, 0)


def test_presets():
    assert preset_labels((50, 200)) == [FIT_LABEL, "50%", "200%"]
    assert parse_preset("200%") == 200
    assert parse_preset(FIT_LABEL) is None
    assert parse_preset("x%") is None
