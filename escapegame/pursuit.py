"""Monster pursuit: single-axis steps toward the player, melee hits and
chaser spawning around Nest tiles.
"""

from __future__ import annotations

from .entities import Chaser, Monster, Player, Seeker
from .logger import GameLogger
from .models import GameSettings, Grid, Position, Tile

# Tried in order; the first legal one wins
PURSUIT_STEPS = [(-1, 0), (1, 0), (0, -1), (0, 1)]

# down, up, right, left, then the diagonals
CHASER_SPAWN_OFFSETS = [
    (0, 1), (0, -1), (1, 0), (-1, 0),
    (1, 1), (1, -1), (-1, 1), (-1, -1),
]

# right, left, down, up
RELOCATION_OFFSETS = [(1, 0), (-1, 0), (0, 1), (0, -1)]


class PursuitPolicy:
    """
    Moves the monsters of one level toward the player.

    A new policy is built for each level since the grid and both monster
    lists are replaced on every transition.

    Notes
    - A monster never steps onto the player. Reaching for the player's cell
      is a melee hit instead, and the monster stays put.
    - Only seeker hits raise the audio hit signal.
    """

    def __init__(self, grid: Grid, player: Player, seekers: list[Seeker], chasers: list[Chaser],
                 settings: GameSettings, audio, logger: GameLogger | None = None,
                 items=None) -> None:
        self.grid = grid
        self.player = player
        self.seekers = seekers
        self.chasers = chasers
        self.settings = settings
        self.audio = audio
        self.logger = logger
        # Callable returning the pickups still on the board
        self.items = items or (lambda: [])

    # ------------------------------- Queries ---------------------------------------

    def live_monsters(self) -> list[Monster]:
        return [m for m in self.seekers if m.alive] + [m for m in self.chasers if m.alive]

    def live_chasers(self) -> list[Chaser]:
        return [c for c in self.chasers if c.alive]

    def has_item(self, pos: Position) -> bool:
        return any(item is not None and item.is_at(pos) for item in self.items())

    def is_occupied(self, pos: Position) -> bool:
        """True when a live seeker or chaser stands on ``pos``."""
        return any(m.is_at(pos) for m in self.live_monsters())

    def can_step(self, monster: Monster, dx: int, dy: int) -> bool:
        dest = monster.position.offset(dx, dy)
        if not self.grid.in_bounds(dest.x, dest.y):
            return False
        if self.grid[dest] is Tile.WALL:
            return False
        return not self.is_occupied(dest)

    def choose_step(self, monster: Monster) -> tuple[int, int] | None:
        """
        Pick the first axis step that reduces the offset to the player and
        is not blocked, or None when the monster cannot move.
        """
        player = self.player
        wants = {
            (-1, 0): monster.x > player.x,
            (1, 0): monster.x < player.x,
            (0, -1): monster.y > player.y,
            (0, 1): monster.y < player.y,
        }
        for dx, dy in PURSUIT_STEPS:
            if wants[(dx, dy)] and self.can_step(monster, dx, dy):
                return dx, dy
        return None

    # ------------------------------- Movement --------------------------------------

    def damage_for(self, monster: Monster) -> int:
        if isinstance(monster, Chaser):
            return self.settings.chaser_damage
        return self.settings.seeker_damage

    def hit_player(self, monster: Monster) -> None:
        damage = self.damage_for(monster)
        self.player.change_health(-damage)
        if isinstance(monster, Seeker):
            self.audio.play_hit()
        if self.logger:
            self.logger.log_event("HIT", f"{monster.kind} at ({monster.x}, {monster.y}) dealt {damage}, "
                                         f"health {self.player.health}")

    def step(self, monster: Monster) -> bool:
        """
        Advance ``monster`` one tile toward the player.

        Returns
        -------
        bool
            True if the step turned into a melee hit.
        """
        move = self.choose_step(monster)
        if move is None:
            return False
        dest = monster.position.offset(*move)
        if self.player.is_at(dest):
            self.hit_player(monster)
            return True
        monster.set_position(dest.x, dest.y)
        return False

    def move_seekers(self) -> None:
        for seeker in self.seekers:
            if not seeker.alive:
                continue
            # Player walked into this seeker since its last move
            if seeker.is_at(self.player.position):
                self.hit_player(seeker)
            self.step(seeker)

    def move_chasers(self) -> None:
        for chaser in self.live_chasers():
            self.step(chaser)

    # ------------------------------- Chaser spawning -------------------------------

    def can_spawn_chaser(self, cleared: int) -> bool:
        grid = self.grid
        player = self.player
        if grid[player.position] is not Tile.NEST:
            return False
        count = len(self.live_chasers())
        if count >= cleared or count >= self.settings.max_chasers:
            return False
        # Chasers need a full ring of neighbours to pick from
        return 0 < player.x < grid.width - 1 and 0 < player.y < grid.height - 1

    def spawn_chaser(self, cleared: int) -> Chaser | None:
        """
        Create a chaser next to a player standing on a Nest.

        Parameters
        ----------
        cleared : int
            Levels cleared so far; the number of chasers in a level never
            exceeds it.

        Returns
        -------
        Chaser | None
            The new chaser, or None when nothing was spawned.
        """
        if not self.can_spawn_chaser(cleared):
            return None

        player = self.player
        for dx, dy in CHASER_SPAWN_OFFSETS:
            cell = player.position.offset(dx, dy)
            # Strict bounds: chasers never spawn on the outer ring
            if not (0 < cell.x < self.grid.width and 0 < cell.y < self.grid.height):
                continue
            if self.grid[cell] is Tile.WALL or self.is_occupied(cell) or self.has_item(cell):
                continue
            chaser = Chaser(cell.x, cell.y)
            self.chasers.append(chaser)
            self.check_spawn_place(chaser)
            if self.settings.convert_nests:
                self.grid[player.position] = Tile.DIRT
            if self.logger:
                self.logger.log_event("CHASER", f"spawned at ({chaser.x}, {chaser.y})")
            return chaser
        return None

    def is_free_for_chaser(self, chaser: Chaser, cell: Position) -> bool:
        if not self.grid.in_bounds(cell.x, cell.y):
            return False
        if self.grid[cell] in (Tile.WALL, Tile.CAR):
            return False
        if self.player.is_at(cell) or self.has_item(cell):
            return False
        return not any(m.is_at(cell) for m in self.live_monsters() if m is not chaser)

    def check_spawn_place(self, chaser: Chaser) -> None:
        """Move a chaser that landed on a Wall or the Car to a free neighbour."""
        if self.grid[chaser.position] not in (Tile.WALL, Tile.CAR):
            return
        for dx, dy in RELOCATION_OFFSETS:
            cell = chaser.position.offset(dx, dy)
            if self.is_free_for_chaser(chaser, cell):
                chaser.set_position(cell.x, cell.y)
                return
        self.step(chaser)
