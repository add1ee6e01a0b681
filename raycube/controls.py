"""Keyboard handling: key codes and their effect on the player."""

from __future__ import annotations

from enum import IntEnum
from typing import Optional

from .config import Player, WorldMap
from .movement import move_player, rotate_player

# Event masks and event types of the window system.
PRESS_MASK = 1 << 0
RELEASE_MASK = 1 << 1
MOTION_MASK = 1 << 6
DESTROY_MASK = 1 << 17

PRESS_EVENT = 2
RELEASE_EVENT = 3
MOTION_EVENT = 6
DESTROY_EVENT = 17

# Mouse buttons.
MOUSE_LEFT = 1
MOUSE_MIDDLE = 2
MOUSE_RIGHT = 3
MOUSE_SCROLL_UP = 4
MOUSE_SCROLL_DOWN = 5


class Key(IntEnum):
    """X11 key symbols used by the game."""

    A = 97
    B = 98
    C = 99
    D = 100
    E = 101
    F = 102
    G = 103
    H = 104
    I = 105  # noqa: E741
    J = 106
    K = 107
    L = 108
    M = 109
    N = 110
    O = 111  # noqa: E741
    P = 112
    Q = 113
    R = 114
    S = 115
    T = 116
    U = 117
    V = 118
    W = 119
    X = 120
    Y = 121
    Z = 122
    LEFT = 65361
    UP = 65362
    RIGHT = 65363
    DOWN = 65364
    NUMPAD_DIV = 65455
    NUMPAD_MUL = 65450
    NUMPAD_MINUS = 65453
    NUMPAD_PLUS = 65451
    SPACE = 32
    ESC = 65307


_FORWARD = {Key.W, Key.UP}
_BACKWARD = {Key.S, Key.DOWN}
_TURN_LEFT = {Key.A, Key.LEFT}
_TURN_RIGHT = {Key.D, Key.RIGHT}


def handle_key(player: Player, world: WorldMap, keycode: int) -> bool:
    """Apply a key press to ``player``.

    Return False when the key asks to quit, True otherwise.
    """
    if keycode == Key.ESC:
        return False
    if keycode in _FORWARD:
        move_player(player, world, player.move_speed)
    elif keycode in _BACKWARD:
        move_player(player, world, -player.move_speed)
    elif keycode in _TURN_LEFT:
        rotate_player(player, player.rot_speed)
    elif keycode in _TURN_RIGHT:
        rotate_player(player, -player.rot_speed)
    return True


def describe_release(keycode: int) -> Optional[str]:
    """Message for a released key, or None for key code 0."""
    if not keycode:
        return None
    return f"[{keycode}] Key released."


def describe_motion(keycode: int, x: int, y: int) -> str:
    """Message for a pointer motion event."""
    return f"Keycode={keycode} | X={x} | Y={y}"