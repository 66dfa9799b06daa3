"""Game state: player movement, collectibles and the sprites drawn per tile."""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Optional

from solong.mapfile import GameMap

GROUND = "0"
WALL = "1"
COLLECTIBLE = "C"
EXIT = "E"
PLAYER = "P"
ENEMY = "J"

PLAYER_SPRITES = ("player_0", "player_1", "player_2", "player_3")
ENEMY_SPRITES = ("enemy_0", "enemy_1", "enemy_2", "enemy_3")
STATIC_SPRITES = {
    GROUND: "ground",
    WALL: "wall",
    COLLECTIBLE: "collect",
    EXIT: "exit",
}

# How far, in columns, an enemy still looks up or down at the player.
ENEMY_SIGHT = 3

_GREEN = "\033[32m"
_RED = "\033[31m"
_RESET = "\033[0m"


class Direction(IntEnum):
    """A step direction; its value is the player sprite it turns to."""

    DOWN = 0
    LEFT = 1
    RIGHT = 2
    UP = 3

    @property
    def delta(self) -> tuple[int, int]:
        """The (dx, dy) of one step in this direction."""
        return {
            Direction.DOWN: (0, 1),
            Direction.LEFT: (-1, 0),
            Direction.RIGHT: (1, 0),
            Direction.UP: (0, -1),
        }[self]


class MoveResult(Enum):
    """What an attempted move led to."""

    MOVED = "moved"
    BLOCKED = "blocked"
    WON = "won"
    LOST = "lost"
    IGNORED = "ignored"

    @property
    def banner(self) -> Optional[str]:
        """The message printed when the move ends the game, if it does."""
        if self is MoveResult.WON:
            return f"{_GREEN}YOU WIN!\n{_RESET}"
        if self is MoveResult.LOST:
            return f"{_RED}GAME OVER!\n{_RESET}"
        return None


def enemy_sprite(col: int, row: int, player_x: int, player_y: int) -> str:
    """Return the enemy sprite facing the player from tile (``col``, ``row``)."""
    if abs(col - player_x) <= ENEMY_SIGHT:
        return ENEMY_SPRITES[0] if row <= player_y else ENEMY_SPRITES[3]
    return ENEMY_SPRITES[2] if col <= player_x else ENEMY_SPRITES[1]


def choose_sprite(tile: str, eye: int) -> str:
    """Return the sprite for a tile that does not depend on its position.

    Enemy tiles face the player and are chosen with ``enemy_sprite``.
    """
    if tile == PLAYER:
        return PLAYER_SPRITES[eye]
    try:
        return STATIC_SPRITES[tile]
    except KeyError:
        if tile == ENEMY:
            raise ValueError("enemy sprites depend on the player's position") from None
        raise ValueError("It is not possible to find the sprite!") from None


class Game:
    """A game in progress on a validated map."""

    def __init__(self, game_map: GameMap) -> None:
        self.map = game_map
        self.steps = 0
        self.eye = int(Direction.DOWN)
        self.coins_taken = 0
        self.coins_left = 0
        self.over = False
        self.player_x, self.player_y = self._find_player()
        self.render()

    def _find_player(self) -> tuple[int, int]:
        for y, row in enumerate(self.map.rows):
            for x, tile in enumerate(row):
                if tile == PLAYER:
                    return x, y
        raise ValueError("the map has no player")

    def render(self) -> list[tuple[int, int, str]]:
        """Return (column, row, sprite) for every tile, scanning row by row.

        Counts the collectibles left and records the player's position as
        the scan reaches it; enemies face the position known at that point.
        """
        self.coins_left = 0
        frame: list[tuple[int, int, str]] = []
        for row_index, row in enumerate(self.map.rows):
            for col, tile in enumerate(row):
                if tile == ENEMY:
                    sprite = enemy_sprite(col, row_index, self.player_x, self.player_y)
                else:
                    sprite = choose_sprite(tile, self.eye)
                    if tile == COLLECTIBLE:
                        self.coins_left += 1
                    elif tile == PLAYER:
                        self.player_x, self.player_y = col, row_index
                frame.append((col, row_index, sprite))
        return frame

    def move(self, direction: Direction) -> MoveResult:
        """Try to step the player one tile in ``direction``."""
        if self.over:
            return MoveResult.IGNORED
        direction = Direction(direction)
        dx, dy = direction.delta
        x, y = self.player_x + dx, self.player_y + dy
        target = self.map.tile(x, y)

        if target in (GROUND, COLLECTIBLE):
            if target == COLLECTIBLE:
                self.coins_taken += 1
            self.steps += 1
            self.eye = int(direction)
            self.map.set_tile(x, y, PLAYER)
            self.map.set_tile(self.player_x, self.player_y, GROUND)
            self.render()
            return MoveResult.MOVED
        if target == WALL or (target == EXIT and self.coins_left != 0):
            self.eye = int(direction)
            return MoveResult.BLOCKED
        self.over = True
        return MoveResult.WON if target == EXIT else MoveResult.LOST

    def resume(self) -> list[tuple[int, int, str]]:
        """Turn the player to face down again and redraw the map."""
        self.eye = int(Direction.DOWN)
        return self.render()