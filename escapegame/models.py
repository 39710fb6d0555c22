"""Lightweight data models used across the game."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .constants import (
    GRID_WIDTH, GRID_HEIGHT, PLAYER_MAX_HEALTH, LEVEL_ARRIVAL_HEAL, POTION_HEAL,
    MAX_SEEKERS, MAX_CHASERS, SEEKER_DAMAGE, CHASER_DAMAGE,
    SEEKER_MOVE_EVERY, CHASER_MOVE_EVERY, GHOST_EVERY_LEVELS,
)


class Tile(Enum):
    """
    Kinds of tile a level is made of.

    Declaration order matters: the level generator draws from every
    variant after CAR.
    """
    CAR = 0
    DIRT = 1
    NEST = 2
    GRASS = 3
    ROAD = 4
    WALL = 5


class Direction(Enum):
    """One of the four player commands, valued as (dx, dy)."""
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)


class GameState(Enum):
    """Turn controller states."""
    IDLE = "idle"
    RESOLVING = "resolving"
    MONSTER_PHASE = "monster_phase"
    CHECK_TERMINAL = "check_terminal"
    DEAD = "dead"


@dataclass(frozen=True)
class Position:
    """
    A single grid cell.

    Attributes
    ----------
    x : int
        Column, 0 on the left.
    y : int
        Row, 0 at the top.
    """
    x: int
    y: int

    def offset(self, dx: int, dy: int) -> Position:
        return Position(self.x + dx, self.y + dy)


class Grid:
    """
    Fixed-size tile map indexed by column then row.

    Cells are stored as ``cells[x][y]``; use ``grid[pos]`` or
    ``grid.tile_at(x, y)`` to read them.
    """

    def __init__(self, width: int = GRID_WIDTH, height: int = GRID_HEIGHT, fill: Tile = Tile.GRASS) -> None:
        self.width = width
        self.height = height
        self.cells: list[list[Tile]] = [[fill] * height for _ in range(width)]

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def tile_at(self, x: int, y: int) -> Tile:
        return self.cells[x][y]

    def set_tile(self, x: int, y: int, tile: Tile) -> None:
        self.cells[x][y] = tile

    def __getitem__(self, pos: Position) -> Tile:
        return self.cells[pos.x][pos.y]

    def __setitem__(self, pos: Position, tile: Tile) -> None:
        self.cells[pos.x][pos.y] = tile

    def positions(self):
        """Yield every cell position in row-major order."""
        for y in range(self.height):
            for x in range(self.width):
                yield Position(x, y)


@dataclass(frozen=True)
class GameSettings:
    """
    Tuning knobs the engine reads. Defaults mirror ``constants``.

    Attributes
    ----------
    max_seekers : int
        Seekers placed at the start of each level.
    max_chasers : int
        Hard cap on chasers alive in one level (the per-level cap is
        also bounded by the number of levels cleared).
    convert_nests : bool
        Turn a Nest tile into Dirt once it has produced a chaser.
    """
    max_health: int = PLAYER_MAX_HEALTH
    arrival_heal: int = LEVEL_ARRIVAL_HEAL
    potion_heal: int = POTION_HEAL
    max_seekers: int = MAX_SEEKERS
    max_chasers: int = MAX_CHASERS
    seeker_damage: int = SEEKER_DAMAGE
    chaser_damage: int = CHASER_DAMAGE
    seeker_move_every: int = SEEKER_MOVE_EVERY
    chaser_move_every: int = CHASER_MOVE_EVERY
    ghost_every_levels: int = GHOST_EVERY_LEVELS
    convert_nests: bool = False
