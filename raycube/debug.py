"""Diagnostic text: configuration dumps, on-screen debug lines and FPS."""

from __future__ import annotations

import time
from typing import List, Optional, Tuple

from .config import Config, Player, WorldMap


class FpsCounter:
    """Counts frames and reports the count when the wall-clock second changes."""

    def __init__(self) -> None:
        self._count = 0
        self._last = 0

    def tick(self, now: Optional[int] = None) -> str:
        """Register a frame at second ``now`` and return the text to show."""
        if now is None:
            now = int(time.time())
        text = str(self._count)
        self._count += 1
        if self._last and self._last != now:
            text = str(self._count)
            self._count = 0
        self._last = now
        return text


def format_texture_paths(config: Config) -> str:
    """The four texture paths, one per line."""
    return (
        f"North Texture: {config.north_texture}\n"
        f"South Texture: {config.south_texture}\n"
        f"West Texture: {config.west_texture}\n"
        f"East Texture: {config.east_texture}\n"
    )


def _rgb(color) -> str:
    return "".join(f" {component}" for component in (color or ()))


def format_colors(config: Config) -> str:
    """Floor and ceiling colours as space-separated components."""
    return f"Floor Color:{_rgb(config.floor_color)}\nCeiling Color:{_rgb(config.ceiling_color)}"


def format_map(world: WorldMap) -> str:
    """The cell values of the map, one row per line."""
    return "".join(
        "".join(f"{value} " for value in row) + "\n" for row in world.grid
    )


def debug_lines(player: Player, keycode: int) -> List[Tuple[int, str, str]]:
    """On-screen debug rows as ``(y, label, value)``; values are truncated integers."""
    return [
        (10, "posX", str(int(player.pos_x))),
        (30, "posY", str(int(player.pos_y))),
        (50, "keycode", str(int(keycode))),
        (90, "rayDirX", str(int(player.dir_x))),
        (110, "rayDirY", str(int(player.dir_y))),
    ]