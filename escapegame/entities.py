"""Position-bearing actors: the player, monsters and pickups.

Entities carry state only. Movement, damage and pickup rules live in
``pursuit`` and ``engine``.
"""

from __future__ import annotations

from .models import Position


class Entity:
    """Anything that occupies a single grid cell."""

    def __init__(self, x: int, y: int) -> None:
        self.position = Position(x, y)

    @property
    def x(self) -> int:
        return self.position.x

    @property
    def y(self) -> int:
        return self.position.y

    def set_position(self, x: int, y: int) -> None:
        self.position = Position(x, y)

    def is_at(self, pos: Position) -> bool:
        return self.position == pos

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.x}, {self.y})"


class Player(Entity):
    """
    The human. Persists across levels, so health carries over.

    Attributes
    ----------
    health : int
        Current health; may exceed ``max_health`` after a level arrival.
    max_health : int
        Cap applied to pickups.
    ghost : bool
        Walls do not block movement while set. Cleared on each new level.
    """

    def __init__(self, max_health: int, x: int, y: int) -> None:
        super().__init__(x, y)
        self.max_health = max_health
        self.health = max_health
        self.ghost = False

    def change_health(self, amount: int, capped: bool = True) -> None:
        """Add ``amount`` (negative for damage). Healing stops at max when capped."""
        new_health = self.health + amount
        if capped and amount > 0:
            new_health = min(new_health, max(self.max_health, self.health))
        self.health = new_health

    def is_dead(self) -> bool:
        return self.health <= 0


class Monster(Entity):
    """A pursuer. ``alive`` replaces the empty slots of a fixed array."""

    kind = "monster"

    def __init__(self, x: int, y: int) -> None:
        super().__init__(x, y)
        self.alive = True


class Seeker(Monster):
    """Placed at level start; slow cadence, light hits."""
    kind = "seeker"


class Chaser(Monster):
    """Spawned next to the player from Nest tiles; fast cadence, heavy hits."""
    kind = "chaser"


class FuelItem(Entity):
    pass


class HealthPotion(Entity):
    pass


class GhostPowerUp(Entity):
    pass
