"""Loading of scene configuration files: textures, colours, map and player."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Tuple, Union

SCREEN_WIDTH = 1920
SCREEN_HEIGHT = 1080

VOID = -1
FLOOR = 0
WALL = 1

Color = Tuple[int, int, int]

# direction -> (dir_x, dir_y, plane_x, plane_y)
_ORIENTATIONS = {
    "N": (-1.0, 0.0, 0.0, 0.66),
    "S": (1.0, 0.0, 0.0, -0.66),
    "E": (0.0, 1.0, 0.66, 0.0),
    "W": (0.0, -1.0, -0.66, 0.0),
}

_TEXTURE_KEYS = {
    "NO ": "north_texture",
    "SO ": "south_texture",
    "WE ": "west_texture",
    "EA ": "east_texture",
}

_COLOR_KEYS = {
    "F ": "floor_color",
    "C ": "ceiling_color",
}

_ATOI = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")


class ConfigError(Exception):
    """Raised when a scene configuration cannot be loaded."""


@dataclass
class Player:
    """Position, view direction and camera plane of the player.

    ``pos_x`` runs along map rows and ``pos_y`` along map columns.
    """

    pos_x: float = 0.0
    pos_y: float = 0.0
    dir_x: float = 0.0
    dir_y: float = 0.0
    plane_x: float = 0.0
    plane_y: float = 0.0
    move_speed: float = 0.20
    rot_speed: float = 0.05


@dataclass
class WorldMap:
    """Grid of cells: ``VOID`` (-1), ``FLOOR`` (0) or ``WALL`` (1)."""

    grid: list = field(default_factory=list)

    @property
    def height(self) -> int:
        return len(self.grid)

    @property
    def width(self) -> int:
        return len(self.grid[0]) if self.grid else 0

    def contains(self, x: int, y: int) -> bool:
        """Tell whether row ``x``, column ``y`` lies inside the grid."""
        return 0 <= x < len(self.grid) and 0 <= y < len(self.grid[x])

    def cell(self, x: int, y: int) -> int:
        """Return the value at row ``x``, column ``y``; outside cells are void."""
        if not self.contains(x, y):
            return VOID
        return self.grid[x][y]


@dataclass
class Config:
    """A fully parsed scene."""

    world: WorldMap
    player: Player
    north_texture: Optional[str] = None
    south_texture: Optional[str] = None
    west_texture: Optional[str] = None
    east_texture: Optional[str] = None
    floor_color: Optional[Color] = None
    ceiling_color: Optional[Color] = None


def _atoi(text: str) -> int:
    match = _ATOI.match(text)
    return int(match.group(1)) if match else 0


def parse_color(text: str) -> Color:
    """Parse ``"r,g,b"``; each part is read like C ``atoi``."""
    parts = text.split(",")
    if len(parts) < 3:
        raise ConfigError(f"colour needs three components: {text!r}")
    red, green, blue = (_atoi(part) for part in parts[:3])
    return (red, green, blue)


def is_map_closed(world: WorldMap) -> bool:
    """Tell whether every floor cell is enclosed, away from borders and voids."""
    last_row = world.height - 1
    last_col = world.width - 1
    for x, row in enumerate(world.grid):
        for y, value in enumerate(row):
            if value != FLOOR:
                continue
            if x in (0, last_row) or y in (0, last_col):
                return False
            neighbours = (
                world.cell(x - 1, y),
                world.cell(x + 1, y),
                world.cell(x, y - 1),
                world.cell(x, y + 1),
            )
            if VOID in neighbours:
                return False
    return True


def _apply_header_line(settings: dict, line: str) -> None:
    for prefix, name in _TEXTURE_KEYS.items():
        if line.startswith(prefix):
            settings[name] = line[len(prefix):]
            return
    for prefix, name in _COLOR_KEYS.items():
        if line.startswith(prefix):
            settings[name] = parse_color(line[len(prefix):])
            return


def _build_world(rows: list, width: int) -> Tuple[WorldMap, Player]:
    grid = []
    player = Player()
    players = 0
    for x, line in enumerate(rows):
        row = []
        for y, char in enumerate(line.ljust(width)[:width]):
            if char == "1":
                row.append(WALL)
            elif char == "0":
                row.append(FLOOR)
            elif char in _ORIENTATIONS:
                dir_x, dir_y, plane_x, plane_y = _ORIENTATIONS[char]
                player.pos_x = x + 0.5
                player.pos_y = y + 0.5
                player.dir_x, player.dir_y = dir_x, dir_y
                player.plane_x, player.plane_y = plane_x, plane_y
                row.append(FLOOR)
                players += 1
            else:
                row.append(VOID)
        grid.append(row)
    if players != 1:
        raise ConfigError("map must have exactly one player start position")
    return WorldMap(grid), player


def parse_config_text(text: str) -> Config:
    """Parse the contents of a scene file."""
    lines = [line.strip(" \t") for line in text.split("\n")]
    start = next(
        (index for index, line in enumerate(lines) if line.startswith("1")),
        len(lines),
    )
    settings: dict = {}
    for line in lines[:start]:
        _apply_header_line(settings, line)

    map_lines = lines[start:]
    with_walls = [line for line in map_lines if "1" in line]
    height = len(with_walls)
    width = max((len(line) for line in with_walls), default=0)

    world, player = _build_world(map_lines[:height], width)
    if not is_map_closed(world):
        raise ConfigError("map is not surrounded by walls")
    return Config(world=world, player=player, **settings)


def parse_config(path: Union[str, Path]) -> Config:
    """Read and parse a scene file."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"cannot read {path}: {exc}") from exc
    return parse_config_text(text)