"""Extraction and validation of the map part of a scene file."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from .elements import ELEMENT_KEYS, SceneError

_WHITESPACE = " \t\n\v\f\r"
_VALID_CHARS = set("01NSEW ")
_PLAYER_CHARS = set("NSEW")
_OPEN_PAIRS = {(" ", "0"), ("0", " ")}


@dataclass
class MapInfo:
    """A validated map: its rectangular rows, size and player start."""

    rows: List[str]
    height: int
    width: int
    player_x: int
    player_y: int
    player_dir: str


def is_empty_line(line: str) -> bool:
    """Tell whether ``line`` holds nothing but whitespace."""
    return line.strip(_WHITESPACE) == ""


def find_starting_point(lines: Sequence[str]) -> int:
    """Index of the first map line: after the six elements and any blank lines."""
    index = 0
    found = 0
    for line in lines:
        if any(key in line for key in ELEMENT_KEYS):
            found += 1
        index += 1
        if found == 6:
            break
    while index < len(lines) and is_empty_line(lines[index]):
        index += 1
    return index


def _content(line: str) -> str:
    return line.split("\n", 1)[0]


def create_spaced_line(line: str, width: int) -> str:
    """Cut ``line`` at its newline and pad it with spaces to ``width``."""
    return _content(line).ljust(width, " ")


def make_rectangle(rows: Sequence[str]) -> List[str]:
    """Pad every row with spaces to the length of the longest one."""
    width = max((len(_content(row)) for row in rows), default=0)
    return [create_spaced_line(row, width) for row in rows]


def extract_map(lines: Sequence[str]) -> List[str]:
    """Return the map rows of a scene as a rectangle of equal-length strings."""
    rows = list(lines[find_starting_point(lines):])
    if not rows:
        return []
    return make_rectangle(rows)


def check_valid_characters(rows: Sequence[str]) -> None:
    """Reject any character other than ``01NSEW`` and space."""
    if any(char not in _VALID_CHARS for row in rows for char in row):
        raise SceneError("Invalid Character on map!")


def check_no_empty_lines(rows: Sequence[str]) -> None:
    """Reject rows that hold only whitespace."""
    if any(is_empty_line(row) for row in rows):
        raise SceneError("Invalid line on map!")


def find_player(rows: Sequence[str]) -> Tuple[int, int, str]:
    """Return ``(column, row, direction)`` of the single player start."""
    starts = [
        (x, y, char)
        for y, row in enumerate(rows)
        for x, char in enumerate(row)
        if char in _PLAYER_CHARS
    ]
    if len(starts) != 1:
        raise SceneError("Invalid player on map")
    return starts[0]


def check_last_column(rows: Sequence[str]) -> None:
    """Each row's last non-space character must be a wall."""
    for row in rows:
        content = row.rstrip(" ")
        if content and content[-1] != "1":
            raise SceneError("Map last column invalid!")


def check_horizontal_line(line: str) -> None:
    """Check a row: it opens with a wall and no floor touches a space sideways."""
    body = line.lstrip(" ")
    if body and body[0] != "1":
        raise SceneError("Map horizontal line invalid")
    for current, following in zip(body, body[1:]):
        if current in _PLAYER_CHARS:
            if following == " ":
                raise SceneError("Invalid Player Indication")
            continue
        if (current, following) in _OPEN_PAIRS:
            raise SceneError("Map horizontal line invalid")


def check_vertical(rows: Sequence[str]) -> None:
    """No floor cell may sit directly above or below a space."""
    for upper, lower in zip(rows, rows[1:]):
        if any(pair in _OPEN_PAIRS for pair in zip(upper, lower)):
            raise SceneError("Invalid Map")


def check_first_last(rows: Sequence[str]) -> None:
    """The first and last rows may hold no floor."""
    if "0" in rows[0]:
        raise SceneError("First map line invalid!")
    if "0" in rows[-1]:
        raise SceneError("Last map line invalid!")


def check_map_closed(rows: Sequence[str]) -> None:
    """Check that the map is surrounded by walls."""
    check_last_column(rows)
    check_vertical(rows)
    check_first_last(rows)
    for row in rows:
        check_horizontal_line(row)


def validate_map(rows: Sequence[str]) -> MapInfo:
    """Validate rectangular map rows and describe the map."""
    rows = list(rows)
    if not rows:
        raise SceneError("Empty Map!")
    check_valid_characters(rows)
    check_no_empty_lines(rows)
    player_x, player_y, player_dir = find_player(rows)
    check_map_closed(rows)
    return MapInfo(
        rows=rows,
        height=len(rows),
        width=max(len(row) for row in rows),
        player_x=player_x,
        player_y=player_y,
        player_dir=player_dir,
    )