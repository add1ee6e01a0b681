"""Command-line entry point and game state."""

from __future__ import annotations

import sys
from typing import List, Optional, Sequence

from .config import SCREEN_HEIGHT, SCREEN_WIDTH, Config, ConfigError, parse_config
from .controls import Key, handle_key
from .debug import FpsCounter, debug_lines
from .render import FrameBuffer, draw_frame

_RED = (255, 0, 0)


class UsageError(Exception):
    """Raised when the command line is wrong."""


def is_cub_file(path: str) -> bool:
    """Tell whether ``path`` names a ``.cub`` file with a non-empty stem."""
    return bool(path) and len(path) >= 5 and path.endswith(".cub")


def validate_args(argv: Sequence[str]) -> str:
    """Check a full argument vector and return the scene path."""
    program = argv[0] if argv else "raycube"
    if len(argv) != 2:
        raise UsageError(f"Usage: {program} (<name>.cub)")
    if not is_cub_file(argv[1]):
        raise UsageError("Invalid argument! (<name>.cub)")
    return argv[1]


class Game:
    """The running game: scene, player, frame buffer and debug state."""

    def __init__(
        self, config: Config, width: int = SCREEN_WIDTH, height: int = SCREEN_HEIGHT
    ) -> None:
        self.config = config
        self.player = config.player
        self.world = config.world
        self.frame = FrameBuffer(width, height)
        self.fps = FpsCounter()
        self.fps_text = "0"
        self.last_key: Optional[int] = None

    def handle_key(self, keycode: int) -> bool:
        """Apply a key press and redraw; return False when asked to quit."""
        if not handle_key(self.player, self.world, keycode):
            return False
        self.last_key = keycode
        self.render()
        self.fps_text = self.fps.tick()
        return True

    def render(self) -> FrameBuffer:
        """Draw the current view into the frame buffer and return it."""
        draw_frame(self.frame, self.player, self.world)
        return self.frame

    def overlay(self) -> List[tuple]:
        """Debug rows shown after a key press, including the FPS row."""
        if self.last_key is None:
            return []
        rows = debug_lines(self.player, self.last_key)
        rows.append((70, "fps", self.fps_text))
        return sorted(rows)


def _present(pygame, screen, game: Game, font) -> None:
    pygame.surfarray.blit_array(screen, game.frame.pixels.T)
    for y, label, value in game.overlay():
        screen.blit(font.render(label, True, _RED), (10, y))
        screen.blit(font.render(value, True, _RED), (70, y))
    pygame.display.flip()


def _run_window(game: Game) -> int:
    import pygame

    pygame.init()
    try:
        screen = pygame.display.set_mode((game.frame.width, game.frame.height))
        pygame.display.set_caption("Raycaster")
        config = game.config
        for path in (
            config.north_texture,
            config.south_texture,
            config.west_texture,
            config.east_texture,
        ):
            try:
                if path is None:
                    raise FileNotFoundError(path)
                pygame.image.load(path)
            except (pygame.error, OSError):
                print(f"Error loading texture: {path}", file=sys.stderr)
                return 1
        font = pygame.font.Font(None, 20)
        keymap = {
            pygame.K_LEFT: Key.LEFT,
            pygame.K_RIGHT: Key.RIGHT,
            pygame.K_UP: Key.UP,
            pygame.K_DOWN: Key.DOWN,
            pygame.K_ESCAPE: Key.ESC,
        }
        clock = pygame.time.Clock()
        game.render()
        _present(pygame, screen, game, font)
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 0
                if event.type == pygame.KEYDOWN:
                    keycode = keymap.get(event.key, event.key)
                    if not game.handle_key(keycode):
                        return 0
                    _present(pygame, screen, game, font)
            clock.tick(60)
    finally:
        pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the game on the scene file named on the command line."""
    if argv is None:
        argv = sys.argv
    try:
        path = validate_args(list(argv))
    except UsageError as exc:
        print(exc)
        return 1
    try:
        config = parse_config(path)
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return _run_window(Game(config))