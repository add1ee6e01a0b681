import pytest

from raycube.elements import SceneError
from raycube.mapcheck import (
    MapInfo,
    check_first_last,
    check_horizontal_line,
    check_last_column,
    check_map_closed,
    check_no_empty_lines,
    check_valid_characters,
    check_vertical,
    create_spaced_line,
    extract_map,
    find_player,
    find_starting_point,
    is_empty_line,
    make_rectangle,
    validate_map,
)

HEADER = [
    "NO ./north.xpm\n",
    "SO ./south.xpm\n",
    "WE ./west.xpm\n",
    "EA ./east.xpm\n",
    "F 220,100,0\n",
    "C 225,30,0\n",
]

GOOD = ["111111", "100001", "100N01", "111111"]


def test_is_empty_line():
    assert is_empty_line("   \t\n")
    assert is_empty_line("")
    assert not is_empty_line("  1 \n")


def test_find_starting_point_skips_blank_lines():
    lines = HEADER + ["\n", "   \n", "111\n", "1N1\n", "111"]
    assert find_starting_point(lines) == len(HEADER) + 2


def test_find_starting_point_without_elements_reaches_end():
    lines = ["111\n", "1N1\n"]
    assert find_starting_point(lines) == len(lines)


def test_create_spaced_line_pads_and_cuts_newline():
    assert create_spaced_line("10\n", 4) == "10  "
    assert create_spaced_line("1001", 4) == "1001"


def test_make_rectangle_equal_lengths():
    rows = make_rectangle(["11\n", "1111\n", "1"])
    assert rows == ["11  ", "1111", "1   "]
    assert len({len(row) for row in rows}) == 1


def test_extract_map_returns_rectangle():
    lines = HEADER + ["\n", "111\n", "1N11\n", "111"]
    assert extract_map(lines) == ["111 ", "1N11", "111 "]


def test_extract_map_empty_when_no_map():
    assert extract_map(HEADER + ["\n"]) == []


def test_validate_good_map():
    info = validate_map(GOOD)
    assert isinstance(info, MapInfo)
    assert info.height == len(GOOD)
    assert info.width == len(GOOD[0])
    assert (info.player_x, info.player_y, info.player_dir) == (3, 2, "N")
    assert info.rows == GOOD


def test_validate_empty_map():
    with pytest.raises(SceneError, match="Empty Map!"):
        validate_map([])


def test_invalid_character():
    with pytest.raises(SceneError, match="Invalid Character"):
        check_valid_characters(["111", "1X1", "111"])


def test_empty_line_in_map():
    with pytest.raises(SceneError, match="Invalid line on map!"):
        check_no_empty_lines(["111", "   ", "111"])


def test_find_player_requires_exactly_one():
    with pytest.raises(SceneError, match="Invalid player on map"):
        find_player(["1111", "1NS1", "1111"])
    with pytest.raises(SceneError, match="Invalid player on map"):
        find_player(["111", "101", "111"])


def test_last_column_must_be_wall():
    with pytest.raises(SceneError, match="last column"):
        check_last_column(["111", "100  ", "111"])
    check_last_column(["111  ", "1N1", "111"])


def test_horizontal_space_next_to_floor():
    with pytest.raises(SceneError, match="horizontal line invalid"):
        check_horizontal_line("1 01")
    with pytest.raises(SceneError, match="horizontal line invalid"):
        check_horizontal_line("  01")


def test_horizontal_player_next_to_space():
    with pytest.raises(SceneError, match="Invalid Player Indication"):
        check_horizontal_line("1N 1")


def test_vertical_open_cell():
    with pytest.raises(SceneError, match="Invalid Map"):
        check_vertical(["111", "101", "1 1"])


def test_first_and_last_rows():
    with pytest.raises(SceneError, match="First map line invalid!"):
        check_first_last(["101", "111"])
    with pytest.raises(SceneError, match="Last map line invalid!"):
        check_first_last(["111", " 101"])


def test_map_closed_rejects_open_map():
    with pytest.raises(SceneError):
        check_map_closed(["1111", "1N 1", "1111"])


def test_validate_map_with_leading_spaces():
    rows = make_rectangle(["  111", "  1N1", "11101", "10001", "11111"])
    info = validate_map(rows)
    assert info.player_dir == "N"
    assert info.height == 5