"""DDA ray casting through the world grid."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .config import SCREEN_WIDTH, Player, WorldMap

WALL_COLORS = (0xFFFF00, 0xFF0000, 0x00FF00, 0x0000FF, 0xFFFFFF)

_FAR = 1e30


@dataclass(frozen=True)
class RayHit:
    """Result of casting one ray: wall distance, colour and the cell hit."""

    perp_dist: float
    color: int
    side: int
    map_x: int
    map_y: int


def ray_direction(player: Player, camera_x: float) -> Tuple[float, float, int, int]:
    """Return ``(ray_x, ray_y, step_x, step_y)`` for a camera-space offset."""
    ray_x = player.dir_x + player.plane_x * camera_x
    ray_y = player.dir_y + player.plane_y * camera_x
    step_x = -1 if ray_x < 0 else 1
    step_y = -1 if ray_y < 0 else 1
    return ray_x, ray_y, step_x, step_y


def wall_color(value: int, side: int) -> int:
    """Colour for a wall value; faces hit on side 1 are darkened."""
    if not 0 <= value < len(WALL_COLORS):
        value = 0
    color = WALL_COLORS[value]
    return color // 2 if side == 1 else color


def _delta(component: float) -> float:
    return _FAR if component == 0 else abs(1 / component)


def cast_ray(
    x: int, player: Player, world: WorldMap, screen_width: int = SCREEN_WIDTH
) -> RayHit:
    """Cast the ray for screen column ``x`` and report the first wall hit.

    A ray that leaves the grid stops there as if it hit a wall.
    """
    camera_x = 2 * x / float(screen_width) - 1
    ray_x, ray_y, step_x, step_y = ray_direction(player, camera_x)
    map_x = int(player.pos_x)
    map_y = int(player.pos_y)
    delta_x = _delta(ray_x)
    delta_y = _delta(ray_y)

    if ray_x < 0:
        side_x = (player.pos_x - map_x) * delta_x
    else:
        side_x = (map_x + 1.0 - player.pos_x) * delta_x
    if ray_y < 0:
        side_y = (player.pos_y - map_y) * delta_y
    else:
        side_y = (map_y + 1.0 - player.pos_y) * delta_y

    side = 0
    while True:
        if side_x < side_y:
            side_x += delta_x
            map_x += step_x
            side = 0
        else:
            side_y += delta_y
            map_y += step_y
            side = 1
        if not world.contains(map_x, map_y) or world.cell(map_x, map_y) > 0:
            break

    perp = side_x - delta_x if side == 0 else side_y - delta_y
    return RayHit(
        perp_dist=perp,
        color=wall_color(world.cell(map_x, map_y), side),
        side=side,
        map_x=map_x,
        map_y=map_y,
    )