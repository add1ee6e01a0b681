import numpy as np
import pytest

from raycube.config import Player, WorldMap
from raycube.raycasting import cast_ray
from raycube.render import FrameBuffer, column_span, draw_frame


def _room():
    grid = [
        [1, 1, 1, 1, 1],
        [1, 0, 0, 0, 1],
        [1, 0, 0, 0, 1],
        [1, 0, 0, 0, 1],
        [1, 1, 1, 1, 1],
    ]
    player = Player(pos_x=2.5, pos_y=2.5, dir_x=-1.0, dir_y=0.0, plane_x=0.0, plane_y=0.66)
    return WorldMap(grid), player


def test_new_frame_is_black():
    frame = FrameBuffer(4, 3)
    assert frame.pixels.shape == (3, 4)
    assert not frame.pixels.any()


def test_invalid_size_rejected():
    with pytest.raises(ValueError):
        FrameBuffer(0, 10)


def test_put_pixel_and_clear():
    frame = FrameBuffer(4, 3)
    frame.put_pixel(2, 1, 0xFF0000)
    assert frame.pixels[1, 2] == 0xFF0000
    assert int(frame.pixels.sum()) == 0xFF0000
    frame.clear()
    assert not frame.pixels.any()


def test_put_pixel_out_of_range():
    frame = FrameBuffer(4, 3)
    with pytest.raises(IndexError):
        frame.put_pixel(4, 0, 1)
    with pytest.raises(IndexError):
        frame.put_pixel(-1, 0, 1)


def test_draw_column_is_inclusive():
    frame = FrameBuffer(3, 6)
    frame.draw_column(1, 2, 4, 0x00FF00)
    column = frame.pixels[:, 1]
    assert list(column) == [0, 0, 0x00FF00, 0x00FF00, 0x00FF00, 0]
    assert not frame.pixels[:, 0].any()


def test_draw_column_empty_range_draws_nothing():
    frame = FrameBuffer(3, 6)
    frame.draw_column(1, 4, 2, 0xFFFFFF)
    assert not frame.pixels.any()


def test_column_span_clamps_to_screen():
    assert column_span(1.0, 1080) == (0, 1079)


def test_column_span_half_height():
    assert column_span(2.0, 1080) == (270, 810)


def test_column_span_far_wall_collapses_to_middle():
    assert column_span(1e9, 100) == (50, 50)


@pytest.mark.parametrize("dist", [0.3, 0.9, 1.7, 4.0, 25.0])
def test_column_span_within_bounds(dist):
    start, end = column_span(dist, 240)
    assert 0 <= start <= end <= 239


def test_draw_frame_matches_ray_spans():
    world, player = _room()
    frame = FrameBuffer(16, 12)
    frame.put_pixel(0, 0, 0x123456)
    draw_frame(frame, player, world)
    for x in range(frame.width):
        hit = cast_ray(x, player, world, frame.width)
        start, end = column_span(hit.perp_dist, frame.height)
        column = frame.pixels[:, x]
        assert np.all(column[start:end + 1] == hit.color)
        assert not column[:start].any()
        assert not column[end + 1:].any()