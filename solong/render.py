"""Drawing the map in a window and running the game loop."""

from __future__ import annotations

import os
import sys
from pathlib import Path

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .errors import MapError  # noqa: E402
from .game import Game, Key  # noqa: E402
from .gamemap import load_map  # noqa: E402

IMG_SIZE = 91
TITLE = "so_long"

SPRITE_FILES = {
    "1": "wall.xpm",
    "0": "space.xpm",
    "P": "player.xpm",
    "C": "collectable.xpm",
    "E": "exit.xpm",
}

_PYGAME_KEYS = {
    pygame.K_ESCAPE: Key.ESC,
    pygame.K_UP: Key.ARROW_UP,
    pygame.K_DOWN: Key.ARROW_DOWN,
    pygame.K_RIGHT: Key.ARROW_RIGHT,
    pygame.K_LEFT: Key.ARROW_LEFT,
    pygame.K_w: Key.W,
    pygame.K_s: Key.S,
    pygame.K_d: Key.D,
    pygame.K_a: Key.A,
}


class Renderer:
    """Shows a game in a window, one sprite per map cell."""

    def __init__(self, game: Game, asset_dir: str | os.PathLike = "assets") -> None:
        self.game = game
        self.asset_dir = Path(asset_dir)
        self.screen: pygame.Surface | None = None
        self.images: dict[str, pygame.Surface] = {}

    def window_size(self) -> tuple[int, int]:
        """Return the window size in pixels."""
        return IMG_SIZE * self.game.map.width, IMG_SIZE * self.game.map.height

    def sprite_positions(self) -> list[tuple[str, tuple[int, int]]]:
        """Return each drawable cell with the pixel position of its sprite."""
        return [
            (cell, (x * IMG_SIZE, y * IMG_SIZE))
            for y, row in enumerate(self.game.map.grid)
            for x, cell in enumerate(row)
            if cell in SPRITE_FILES
        ]

    def draw(self) -> None:
        """Blit every sprite onto the screen surface."""
        if self.screen is None:
            raise RuntimeError("the renderer has no screen to draw on")
        for cell, position in self.sprite_positions():
            self.screen.blit(self.images[cell], position)

    def _load_images(self) -> None:
        self.images = {
            cell: pygame.image.load(str(self.asset_dir / name))
            for cell, name in SPRITE_FILES.items()
        }

    def run(self) -> None:
        """Open the window and process events until the game ends."""
        pygame.init()
        try:
            self.screen = pygame.display.set_mode(self.window_size())
            pygame.display.set_caption(TITLE)
            self._load_images()
            clock = pygame.time.Clock()
            while not self.game.finished:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        self.game.finished = True
                    elif event.type == pygame.KEYUP:
                        key = _PYGAME_KEYS.get(event.key)
                        if key is not None:
                            self.game.press(key)
                if self.game.finished:
                    break
                self.draw()
                pygame.display.flip()
                clock.tick(60)
        finally:
            self.screen = None
            pygame.quit()


def main(argv: list[str] | None = None) -> int:
    """Load the map named on the command line and play it."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("Please, insert the map path")
        return 1
    try:
        game_map = load_map(args[0])
    except MapError as exc:
        print("Error")
        print(exc)
        return 0
    Renderer(Game(game_map), "assets").run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())