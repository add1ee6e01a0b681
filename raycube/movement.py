"""Player movement and rotation."""

from __future__ import annotations

import math

from .config import FLOOR, Player, WorldMap


def move_player(player: Player, world: WorldMap, speed: float) -> None:
    """Step along the view direction, axis by axis, only onto floor cells."""
    next_x = player.pos_x + player.dir_x * speed
    if world.cell(int(next_x), int(player.pos_y)) == FLOOR:
        player.pos_x = next_x
    next_y = player.pos_y + player.dir_y * speed
    if world.cell(int(player.pos_x), int(next_y)) == FLOOR:
        player.pos_y = next_y


def rotate_player(player: Player, angle: float) -> None:
    """Rotate the view direction and camera plane by ``angle`` radians."""
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    dir_x, dir_y = player.dir_x, player.dir_y
    player.dir_x = dir_x * cos_a - dir_y * sin_a
    player.dir_y = dir_x * sin_a + dir_y * cos_a
    plane_x, plane_y = player.plane_x, player.plane_y
    player.plane_x = plane_x * cos_a - plane_y * sin_a
    player.plane_y = plane_x * sin_a + plane_y * cos_a