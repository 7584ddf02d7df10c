import pytest

from cubengine.images import new_image
from cubengine.renderer import (
    Rect,
    clear_window,
    paint_anim_image,
    paint_image,
    paint_pixel,
)


def test_magenta_source_leaves_frame_untouched():
    frame = new_image(2, 2, 3)
    src = new_image(2, 2, 0xFF00FF)
    paint_image(frame, src, Rect(0, 0, 2, 2))
    assert frame.pixels == [3, 3, 3, 3]


def test_paint_pixel_sets_value():
    frame = new_image(3, 3)
    paint_pixel(frame, 2, 1, 42)
    assert frame.pixel(2, 1) == 42
    assert sum(1 for p in frame.pixels if p) == 1


def test_paint_pixel_out_of_bounds():
    frame = new_image(3, 3)
    with pytest.raises(IndexError):
        paint_pixel(frame, 3, 0, 1)


def test_paint_image_places_at_offset():
    frame = new_image(4, 4)
    src = new_image(2, 2, 9)
    paint_image(frame, src, Rect(1, 2, 2, 2))
    painted = {(x, y) for x in range(4) for y in range(4) if frame.pixel(x, y)}
    assert painted == {(1, 2), (2, 2), (1, 3), (2, 3)}


def test_paint_image_skips_magenta():
    frame = new_image(2, 1, 5)
    src = new_image(2, 1, 7)
    src.pixels[0] = 0xFF00FF
    paint_image(frame, src, Rect(0, 0, 2, 1))
    assert frame.pixels == [5, 7]


def test_paint_image_clips_to_frame():
    frame = new_image(2, 2)
    src = new_image(3, 3, 1)
    paint_image(frame, src, Rect(1, 1, 3, 3))
    assert frame.pixels == [0, 0, 0, 1]


def test_paint_anim_image_reads_source_region():
    frame = new_image(2, 1)
    src = new_image(4, 1)
    src.pixels[:] = [1, 2, 3, 4]
    paint_anim_image(frame, src, Rect(0, 0), Rect(2, 0, 2, 1))
    assert frame.pixels == [3, 4]


def test_clear_window_blacks_out_frame():
    frame = new_image(3, 2, 0xFFFFFF)
    clear_window(frame)
    assert frame.pixels == [0] * 6