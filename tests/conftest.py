"""Shared fixtures: recording collaborators and a hand-built open board."""

import pytest

from escapegame.engine import GameEngine
from escapegame.entities import Player
from escapegame.models import Grid, Tile


class RecordingRenderer:
    def __init__(self):
        self.updates = []

    def update(self, grid, player, seekers, chasers, fuel, potion, ghost):
        self.updates.append({
            "grid": grid, "player": player, "seekers": list(seekers), "chasers": list(chasers),
            "fuel": fuel, "potion": potion, "ghost": ghost,
        })


class RecordingAudio:
    def __init__(self):
        self.levels = []
        self.hits = 0

    def play_level_music(self, level):
        self.levels.append(level)

    def play_hit(self):
        self.hits += 1


@pytest.fixture
def renderer():
    return RecordingRenderer()


@pytest.fixture
def audio():
    return RecordingAudio()


@pytest.fixture
def engine(renderer, audio):
    game = GameEngine(renderer=renderer, audio=audio, seed=911)
    game.start_game()
    return game


@pytest.fixture
def open_board(engine):
    """
    Replace the generated level with an all-grass grid, remove every
    monster and item, and park the player. Returns the new grid.
    """
    def build(player=(5, 5), car=(0, 17)):
        grid = Grid()
        grid.set_tile(car[0], car[1], Tile.CAR)
        engine.grid = grid
        engine.player.set_position(*player)
        engine.seekers.clear()
        engine.chasers.clear()
        engine.fuel = None
        engine.potion = None
        engine.ghost = None
        engine.make_pursuit()
        return grid
    return build


@pytest.fixture
def player():
    return Player(100, 5, 5)
