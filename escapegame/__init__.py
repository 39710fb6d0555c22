"""EscapE: a turn-based tile-grid chase game."""

from .engine import GameEngine
from .models import Direction, GameSettings, GameState, Position, Tile

__all__ = ["GameEngine", "Direction", "GameSettings", "GameState", "Position", "Tile"]
