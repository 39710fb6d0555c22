"""Procedural level generation.

Each level is a fresh GRID_WIDTH x GRID_HEIGHT map with exactly one Car tile
in the lower half. Every other cell is an independent draw, corrected by a
road cap and a wall cap. No connectivity guarantee is made.
"""

from __future__ import annotations

import random

from .constants import CAR_MIN_ROW, MAX_WALLS, MAX_ROADS, GRID_WIDTH, GRID_HEIGHT
from .models import Grid, Position, Tile

# Everything except the Car can be drawn for an ordinary cell
DRAWABLE_TILES = [t for t in Tile if t is not Tile.CAR]
FALLBACK_TILES = [Tile.GRASS, Tile.DIRT, Tile.NEST]


def generate_level(rng: random.Random, width: int = GRID_WIDTH, height: int = GRID_HEIGHT) -> Grid:
    """
    Build a new level map.

    Parameters
    ----------
    rng : random.Random
        Source of every draw; seed it for reproducible maps.

    Returns
    -------
    Grid
        Map with one Car, at most ``MAX_ROADS`` roads and at most
        ``MAX_WALLS`` walls.
    """
    car = Position(rng.randrange(width), rng.randrange(CAR_MIN_ROW, height))
    # Chosen once, used for every wall draw past the cap
    fallback = rng.choice(FALLBACK_TILES)

    grid = Grid(width, height)
    road_count = 0
    wall_count = 0
    for pos in grid.positions():
        if pos == car:
            continue
        tile = rng.choice(DRAWABLE_TILES)
        if tile is Tile.ROAD:
            road_count += 1
            if road_count > MAX_ROADS:
                tile = Tile.GRASS
        elif tile is Tile.WALL:
            wall_count += 1
            if wall_count > MAX_WALLS:
                tile = fallback
        grid[pos] = tile

    grid[car] = Tile.CAR
    return grid


def count_tiles(grid: Grid, tile: Tile) -> int:
    return sum(1 for pos in grid.positions() if grid[pos] is tile)


def find_tile(grid: Grid, tile: Tile) -> Position | None:
    """First position (row-major) holding ``tile``, or None."""
    for pos in grid.positions():
        if grid[pos] is tile:
            return pos
    return None
