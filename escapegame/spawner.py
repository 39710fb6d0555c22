"""Spawn placement: a destructive pool of open cells.

Seekers, fuel, the health potion and the ghost power-up each consume one
candidate, so none of them can start on the same cell. The player (on the
Car) and chasers (next to the player) are placed outside the pool.
"""

from __future__ import annotations

import random

from .errors import SpawnPoolExhausted
from .models import Grid, Position, Tile

BLOCKED_SPAWN_TILES = {Tile.CAR, Tile.WALL, Tile.NEST}


def candidate_pool(grid: Grid) -> list[Position]:
    """Every cell that is not Car, Wall or Nest, in row-major order."""
    return [pos for pos in grid.positions() if grid[pos] not in BLOCKED_SPAWN_TILES]


class SpawnPool:
    """
    Candidate cells for one level, drawn without replacement.

    Notes
    - A level needs at most 8 draws against several hundred candidates,
      so exhaustion signals a broken grid rather than bad luck.
    """

    def __init__(self, grid: Grid, rng: random.Random) -> None:
        self.candidates = candidate_pool(grid)
        self.rng = rng

    def __len__(self) -> int:
        return len(self.candidates)

    def draw(self) -> Position:
        """Remove and return one uniformly random candidate."""
        if not self.candidates:
            raise SpawnPoolExhausted("no free cells left to spawn on")
        index = self.rng.randrange(len(self.candidates))
        return self.candidates.pop(index)

    def draw_many(self, count: int) -> list[Position]:
        return [self.draw() for _ in range(count)]
