from raycube.config import Config, Player, WorldMap
from raycube.debug import (
    FpsCounter,
    debug_lines,
    format_colors,
    format_map,
    format_texture_paths,
)


def _config():
    return Config(
        world=WorldMap([[1, 0], [-1, 1]]),
        player=Player(),
        north_texture="a.xpm",
        south_texture="b.xpm",
        west_texture="c.xpm",
        east_texture="d.xpm",
        floor_color=(1, 2, 3),
        ceiling_color=(4, 5, 6),
    )


def test_fps_counts_within_one_second():
    counter = FpsCounter()
    assert counter.tick(100) == "0"
    assert counter.tick(100) == "1"
    assert counter.tick(100) == "2"


def test_fps_reports_and_resets_on_new_second():
    counter = FpsCounter()
    counter.tick(100)
    counter.tick(100)
    assert counter.tick(101) == "3"
    assert counter.tick(101) == "0"


def test_fps_default_clock_returns_digits():
    counter = FpsCounter()
    assert counter.tick().isdigit()


def test_format_texture_paths():
    assert format_texture_paths(_config()) == (
        "North Texture: a.xpm\n"
        "South Texture: b.xpm\n"
        "West Texture: c.xpm\n"
        "East Texture: d.xpm\n"
    )


def test_format_colors():
    assert format_colors(_config()) == "Floor Color: 1 2 3\nCeiling Color: 4 5 6"


def test_format_map():
    assert format_map(_config().world) == "1 0 \n-1 1 \n"


def test_debug_lines_truncate_toward_zero():
    player = Player(pos_x=2.7, pos_y=5.2, dir_x=-0.5, dir_y=1.0)
    lines = debug_lines(player, 119)
    assert [(label, value) for _, label, value in lines] == [
        ("posX", "2"),
        ("posY", "5"),
        ("keycode", "119"),
        ("rayDirX", "0"),
        ("rayDirY", "1"),
    ]


def test_debug_lines_rows_are_ordered():
    rows = [y for y, _, _ in debug_lines(Player(), 0)]
    assert rows == sorted(rows)
    assert len(set(rows)) == len(rows)