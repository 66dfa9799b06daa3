"""The playable game: key bindings, sprite loading and the window loop."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Mapping, Optional, Sequence, Union

import pygame

from solong.game import ENEMY_SPRITES, PLAYER_SPRITES, Direction, Game, MoveResult
from solong.mapfile import MapError, format_error, load_map
from solong.xpm import TRANSPARENT_PIXEL, XpmError, XpmImage, read_xpm_file

WINDOW_TITLE = "so_long"
DEFAULT_ASSET_DIR = Path("assets") / "sprites"
SPRITE_NAMES = ("wall", "ground", "collect", "exit", *PLAYER_SPRITES, *ENEMY_SPRITES)
STEPS_POSITION = (11, 11)
STEPS_COLOR = (0xFF, 0xFF, 0xFF)
EXIT_FAILURE = 255

_EINVAL = 22
_EIO = 5


class Action(Enum):
    """What a key press asks the game to do."""

    QUIT = "quit"
    RIGHT = "right"
    LEFT = "left"
    DOWN = "down"
    UP = "up"

    @property
    def direction(self) -> Optional[Direction]:
        """The step direction of a move action, or None for quitting."""
        return {
            Action.RIGHT: Direction.RIGHT,
            Action.LEFT: Direction.LEFT,
            Action.DOWN: Direction.DOWN,
            Action.UP: Direction.UP,
        }.get(self)


_KEY_ACTIONS = {
    pygame.K_q: Action.QUIT,
    pygame.K_ESCAPE: Action.QUIT,
    pygame.K_d: Action.RIGHT,
    pygame.K_RIGHT: Action.RIGHT,
    pygame.K_a: Action.LEFT,
    pygame.K_LEFT: Action.LEFT,
    pygame.K_s: Action.DOWN,
    pygame.K_DOWN: Action.DOWN,
    pygame.K_w: Action.UP,
    pygame.K_UP: Action.UP,
}


def key_action(key: int) -> Optional[Action]:
    """Return the action bound to a pygame key code, or None if unbound."""
    return _KEY_ACTIONS.get(key)


@dataclass(frozen=True)
class SpriteSet:
    """The decoded images of every sprite, by sprite name."""

    images: Mapping[str, XpmImage]

    def __getitem__(self, name: str) -> XpmImage:
        return self.images[name]

    @property
    def tile_size(self) -> tuple[int, int]:
        """The (width, height) of one map tile on screen."""
        return (
            max(image.width for image in self.images.values()),
            max(image.height for image in self.images.values()),
        )


def load_sprites(asset_dir: Union[str, Path]) -> SpriteSet:
    """Read ``<name>.xpm`` for every sprite from ``asset_dir``."""
    directory = Path(asset_dir)
    return SpriteSet({name: read_xpm_file(directory / f"{name}.xpm") for name in SPRITE_NAMES})


def steps_text(steps: int) -> str:
    """Return the step counter shown in the window's corner."""
    return f"STEPS: {steps}"


def _to_surface(image: XpmImage) -> pygame.Surface:
    data = bytearray()
    for row in image.pixels:
        for value in row:
            if value == TRANSPARENT_PIXEL:
                data += b"\x00\x00\x00\x00"
            else:
                data += bytes(((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF, 0xFF))
    return pygame.image.frombuffer(bytes(data), (image.width, image.height), "RGBA")


def _apply(game: Game, action: Action) -> Optional[MoveResult]:
    direction = action.direction
    if direction is None:
        return None
    result = game.move(direction)
    if result.banner:
        print(result.banner, end="", flush=True)
    return result


def _draw(screen: pygame.Surface, game: Game, surfaces: Mapping[str, pygame.Surface],
          tile: tuple[int, int], font: pygame.font.Font) -> None:
    screen.fill((0, 0, 0))
    tile_w, tile_h = tile
    for col, row, sprite in game.render():
        screen.blit(surfaces[sprite], (col * tile_w, row * tile_h))
    screen.blit(font.render(steps_text(game.steps), True, STEPS_COLOR), STEPS_POSITION)
    pygame.display.flip()


def run(map_path: Union[str, Path], asset_dir: Union[str, Path]) -> int:
    """Play the map at ``map_path`` until the window is closed; return 0."""
    game = Game(load_map(map_path))
    sprites = load_sprites(asset_dir)
    tile = sprites.tile_size

    pygame.init()
    try:
        screen = pygame.display.set_mode(
            (game.map.width * tile[0], game.map.height * tile[1])
        )
        pygame.display.set_caption(WINDOW_TITLE)
        surfaces = {name: _to_surface(sprites[name]).convert_alpha() for name in SPRITE_NAMES}
        font = pygame.font.Font(None, 20)
        clock = pygame.time.Clock()
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 0
                if event.type == pygame.KEYUP:
                    action = key_action(event.key)
                    if action is Action.QUIT:
                        return 0
                    if action is not None:
                        _apply(game, action)
                elif event.type == pygame.WINDOWFOCUSGAINED:
                    game.resume()
            _draw(screen, game, surfaces, tile, font)
            clock.tick(60)
    finally:
        pygame.quit()


def _report(message: str, errnum: int) -> int:
    print(format_error(f"{message}:{os.strerror(errnum)}"), end="", flush=True)
    return EXIT_FAILURE


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the game on the map named by the single command-line argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        return _report("Please run with a map path in the terminal!", _EINVAL)
    try:
        return run(args[0], DEFAULT_ASSET_DIR)
    except MapError as exc:
        return _report(exc.message, exc.errnum)
    except XpmError as exc:
        return _report(str(exc), _EIO)


if __name__ == "__main__":
    sys.exit(main())