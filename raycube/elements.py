"""Scene header elements: texture paths and floor/ceiling colours."""

from __future__ import annotations

import os
import string
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Tuple

ELEMENT_KEYS = ("NO ", "SO ", "WE ", "EA ", "F ", "C ")

_ATTRIBUTES = {
    "NO ": "north",
    "SO ": "south",
    "WE ": "west",
    "EA ": "east",
    "F ": "floor",
    "C ": "ceiling",
}

_BLANKS = " \t"


class SceneError(Exception):
    """Raised when a scene file does not describe a valid scene."""


def _unset_rgb() -> List[int]:
    return [-1, -1, -1]


@dataclass
class SceneElements:
    """Raw element strings of a scene header and the colours derived from them."""

    north: Optional[str] = None
    south: Optional[str] = None
    west: Optional[str] = None
    east: Optional[str] = None
    floor: Optional[str] = None
    ceiling: Optional[str] = None
    floor_rgb: List[int] = field(default_factory=_unset_rgb)
    ceiling_rgb: List[int] = field(default_factory=_unset_rgb)
    floor_hex: int = 0
    ceiling_hex: int = 0

    def values(self) -> Tuple[Optional[str], ...]:
        """The six element strings: floor, ceiling and the four textures."""
        return (self.floor, self.ceiling, self.north, self.south, self.east, self.west)

    def textures(self) -> Tuple[Optional[str], ...]:
        """The texture paths in north, south, east, west order."""
        return (self.north, self.south, self.east, self.west)


def _is_alpha(char: str) -> bool:
    return char in string.ascii_letters


def _is_digit(char: str) -> bool:
    return char in string.digits


def get_element_info(line: str) -> str:
    """Return the value after an element identifier, with outer spaces trimmed.

    The value stops at the first newline or tab.
    """
    rest = line.lstrip(_BLANKS)
    index = 0
    while index < len(rest) and _is_alpha(rest[index]):
        index += 1
    rest = rest[index:].lstrip(_BLANKS)
    end = len(rest)
    for stop in ("\n", "\t"):
        position = rest.find(stop)
        if position != -1:
            end = min(end, position)
    return rest[:end].strip(" ")


def get_texture_and_color(lines: Iterable[str]) -> SceneElements:
    """Collect the first occurrence of each element from the scene lines."""
    elements = SceneElements()
    for line in lines:
        for key in ELEMENT_KEYS:
            name = _ATTRIBUTES[key]
            if key in line and getattr(elements, name) is None:
                setattr(elements, name, get_element_info(line))
                break
    return elements


def is_spaced(text: Optional[str]) -> bool:
    """Tell whether a value holds a space followed by a letter after its start."""
    if text is None:
        return False
    body = text.lstrip(_BLANKS)
    return any(
        current == " " and _is_alpha(following)
        for current, following in zip(body, body[1:])
    )


def is_element_missing(elements: SceneElements) -> bool:
    """Tell whether any of the six elements was not found."""
    return any(value is None for value in elements.values())


def is_color_format_valid(text: str) -> bool:
    """Tell whether ``text`` looks like ``nbr, nbr, nbr``."""
    for index, char in enumerate(text):
        if _is_digit(char):
            continue
        if char not in ", ":
            return False
        if (
            char == " "
            and index > 0
            and _is_digit(text[index - 1])
            and index + 1 < len(text)
            and _is_digit(text[index + 1])
        ):
            return False
    return text.count(",") == 2


def extract_numbers(text: str) -> List[int]:
    """Return the first three runs of digits; missing ones are -1."""
    numbers: List[int] = []
    current = ""
    for char in text:
        if len(numbers) >= 3:
            break
        if _is_digit(char):
            current += char
        elif current:
            numbers.append(int(current))
            current = ""
    if current and len(numbers) < 3:
        numbers.append(int(current))
    return numbers + [-1] * (3 - len(numbers))


def rgb_to_hex(rgb: Sequence[int]) -> int:
    """Pack red, green and blue into one 0xRRGGBB value."""
    red, green, blue = rgb
    return (red << 16) | (green << 8) | blue


def validate_rgb(elements: SceneElements) -> None:
    """Check both colour strings and store their components and packed values."""
    if not is_color_format_valid(elements.floor or "") or not is_color_format_valid(
        elements.ceiling or ""
    ):
        raise SceneError("Color element format not valid, try nbr, nbr, nbr")
    elements.floor_rgb = extract_numbers(elements.floor or "")
    elements.ceiling_rgb = extract_numbers(elements.ceiling or "")
    components = elements.floor_rgb + elements.ceiling_rgb
    if -1 in components:
        raise SceneError("Need to have 3 colors rgb values")
    if any(value > 255 for value in components):
        raise SceneError("Color elements exceeds 255")
    elements.floor_hex = rgb_to_hex(elements.floor_rgb)
    elements.ceiling_hex = rgb_to_hex(elements.ceiling_rgb)


def validate_elements(elements: SceneElements, lines: Iterable[str]) -> None:
    """Check element count, spacing, presence and colours."""
    count = sum(1 for line in lines if any(key in line for key in ELEMENT_KEYS))
    if count > 6:
        raise SceneError("Duplicated Map Elements")
    if any(is_spaced(value) for value in elements.values()):
        raise SceneError("Invalid Map Element, space in between")
    if is_element_missing(elements):
        raise SceneError("Missing map element")
    validate_rgb(elements)


def check_openable_file(path: Optional[str], extension: Optional[str] = None) -> None:
    """Check that ``path`` can be opened for reading.

    When ``extension`` is given and the path is longer than it, the path must
    end with it.
    """
    message = f"{path} - Not a valid file!"
    if path is None:
        raise SceneError(message)
    if extension and len(path) > len(extension) and not path.endswith(extension):
        raise SceneError(message)
    try:
        descriptor = os.open(path, os.O_RDONLY)
    except OSError as exc:
        raise SceneError(message) from exc
    os.close(descriptor)