"""Software frame buffer and column drawing for the ray-cast view."""

from __future__ import annotations

from typing import Tuple

import numpy as np

from .config import SCREEN_HEIGHT, SCREEN_WIDTH, Player, WorldMap
from .raycasting import cast_ray


class FrameBuffer:
    """A ``height`` x ``width`` grid of 0xRRGGBB pixels."""

    def __init__(self, width: int = SCREEN_WIDTH, height: int = SCREEN_HEIGHT) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"invalid frame size {width}x{height}")
        self.width = width
        self.height = height
        self.pixels = np.zeros((height, width), dtype=np.uint32)

    def _check(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} frame")

    def clear(self) -> None:
        """Paint every pixel black."""
        self.pixels.fill(0)

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set the pixel at column ``x``, row ``y``."""
        self._check(x, y)
        self.pixels[y, x] = color & 0xFFFFFFFF

    def draw_column(self, x: int, start: int, end: int, color: int) -> None:
        """Fill rows ``start`` to ``end`` inclusive of column ``x``."""
        if end < start:
            return
        self._check(x, start)
        self._check(x, end)
        self.pixels[start:end + 1, x] = color & 0xFFFFFFFF


def column_span(perp_dist: float, screen_height: int) -> Tuple[int, int]:
    """Return the first and last row of a wall slice at ``perp_dist``.

    A non-positive distance fills the whole column.
    """
    line = int(screen_height / perp_dist) if perp_dist > 0 else screen_height
    half = screen_height // 2
    start = max(0, -(line // 2) + half)
    end = min(screen_height - 1, line // 2 + half)
    return start, end


def draw_frame(frame: FrameBuffer, player: Player, world: WorldMap) -> None:
    """Clear ``frame`` and draw one wall slice per screen column."""
    frame.clear()
    for x in range(frame.width):
        hit = cast_ray(x, player, world, frame.width)
        start, end = column_span(hit.perp_dist, frame.height)
        frame.draw_column(x, start, end, hit.color)