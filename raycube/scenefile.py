"""Reading and validating a whole scene file: header elements and map."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Union

from .elements import (
    SceneElements,
    SceneError,
    check_openable_file,
    get_texture_and_color,
    validate_elements,
)
from .mapcheck import MapInfo, extract_map, validate_map


@dataclass
class Scene:
    """A validated scene: its header elements and its map."""

    elements: SceneElements
    layout: MapInfo


def replace_tabs(lines: Iterable[str]) -> List[str]:
    """Turn tabs into spaces in each line, up to its newline."""
    result = []
    for line in lines:
        head, newline, tail = line.partition("\n")
        result.append(head.replace("\t", " ") + newline + tail)
    return result


def read_scene_lines(path: Union[str, Path]) -> List[str]:
    """Read a scene file as lines that keep their newlines."""
    try:
        with open(path, encoding="utf-8", newline="\n") as handle:
            return list(handle)
    except OSError as exc:
        raise SceneError(f"{path} - Not a valid file!") from exc


def parse_scene_lines(lines: Iterable[str]) -> Scene:
    """Validate the lines of a scene file and build the scene."""
    lines = replace_tabs(lines)
    elements = get_texture_and_color(lines)
    validate_elements(elements, lines)
    for texture in elements.textures():
        check_openable_file(texture)
    layout = validate_map(extract_map(lines))
    return Scene(elements=elements, layout=layout)


def parse_scene_file(path: Union[str, Path]) -> Scene:
    """Read and validate a scene file."""
    return parse_scene_lines(read_scene_lines(path))