"""Turn controller: owns the level, the player and the monsters, and runs one
discrete turn per directional command.

The engine never draws or plays anything itself. It hands state to a
renderer after each turn and signals an audio notifier on level changes and
seeker hits.
"""

from __future__ import annotations

import random

from .entities import Chaser, FuelItem, GhostPowerUp, HealthPotion, Player, Seeker
from .level import find_tile, generate_level
from .logger import GameLogger
from .models import Direction, GameSettings, GameState, Grid, Tile
from .pursuit import PursuitPolicy
from .spawner import SpawnPool


class NullRenderer:
    """Renderer that ignores every update."""

    def update(self, grid, player, seekers, chasers, fuel, potion, ghost) -> None:
        pass


class NullAudio:
    """Audio notifier that plays nothing."""

    def play_level_music(self, level: int) -> None:
        pass

    def play_hit(self) -> None:
        pass


class GameEngine:
    """
    Main simulation controller: generates levels, places entities, applies
    player moves and drives the monsters.

    States: IDLE -> RESOLVING -> MONSTER_PHASE -> CHECK_TERMINAL -> IDLE,
    or DEAD once health drops to zero. DEAD is terminal; further commands
    are ignored.
    """

    def __init__(self, renderer=None, audio=None, logger: GameLogger | None = None,
                 settings: GameSettings | None = None, rng: random.Random | None = None,
                 seed: int | None = None) -> None:
        self.renderer = renderer or NullRenderer()
        self.audio = audio or NullAudio()
        self.logger = logger
        self.settings = settings or GameSettings()
        self.rng = rng if rng is not None else random.Random(seed)

        self.state = GameState.IDLE
        self.cleared = 0
        self.turn_number = 1
        self.grid: Grid | None = None
        self.spawns: SpawnPool | None = None
        self.player: Player | None = None
        self.seekers: list[Seeker] = []
        self.chasers: list[Chaser] = []
        self.fuel: FuelItem | None = None
        self.potion: HealthPotion | None = None
        self.ghost: GhostPowerUp | None = None
        self.fuel_collected = False
        self.potion_collected = False
        self.pursuit: PursuitPolicy | None = None

    # --------------------------------- Setup ----------------------------------------

    def start_game(self) -> None:
        """Build the first level. The ghost power-up is always present here."""
        self.state = GameState.IDLE
        self.cleared = 0
        self.turn_number = 1
        self.reset_level_flags()
        self.build_level()
        self.seekers = self.spawn_seekers()
        self.chasers = []
        self.player = Player(self.settings.max_health, 0, 0)
        self.place_player()
        self.ghost = self.spawn_item(GhostPowerUp)
        self.fuel = self.spawn_item(FuelItem)
        self.potion = self.spawn_item(HealthPotion)
        self.make_pursuit()
        self.audio.play_level_music(self.cleared)
        self.update_display()

    def new_level(self) -> None:
        """Advance after returning to the Car with fuel."""
        self.cleared += 1
        self.reset_level_flags()
        self.build_level()
        if self.cleared % self.settings.ghost_every_levels == 0:
            self.ghost = self.spawn_item(GhostPowerUp)
        else:
            self.ghost = None
        self.seekers = self.spawn_seekers()
        self.chasers = []
        self.fuel = self.spawn_item(FuelItem)
        self.potion = self.spawn_item(HealthPotion)
        self.place_player()
        self.make_pursuit()
        self.audio.play_level_music(self.cleared)
        if self.logger:
            self.logger.log_level_up(self.cleared)

    def reset_level_flags(self) -> None:
        self.fuel_collected = False
        self.potion_collected = False
        if self.player is not None:
            self.player.ghost = False

    def build_level(self) -> None:
        self.grid = generate_level(self.rng)
        self.spawns = SpawnPool(self.grid, self.rng)

    def make_pursuit(self) -> None:
        self.pursuit = PursuitPolicy(self.grid, self.player, self.seekers, self.chasers,
                                     self.settings, self.audio, self.logger,
                                     items=lambda: [self.fuel, self.potion, self.ghost])

    def spawn_seekers(self) -> list[Seeker]:
        return [Seeker(pos.x, pos.y) for pos in self.spawns.draw_many(self.settings.max_seekers)]

    def spawn_item(self, item_cls):
        pos = self.spawns.draw()
        return item_cls(pos.x, pos.y)

    def place_player(self) -> None:
        """Put the player on the Car with the arrival bonus, which ignores max health."""
        car = find_tile(self.grid, Tile.CAR)
        self.player.set_position(car.x, car.y)
        self.player.change_health(self.settings.arrival_heal, capped=False)

    # --------------------------------- Movement -------------------------------------

    def move_player(self, direction: Direction) -> bool:
        """
        Try to move the player one tile.

        Returns
        -------
        bool
            True if the player moved. Off-grid moves and walls (without the
            ghost power-up) are rejected.
        """
        if self.state is GameState.DEAD:
            return False
        self.state = GameState.RESOLVING
        moved = self.resolve_move(direction)
        self.state = GameState.IDLE
        return moved

    def resolve_move(self, direction: Direction) -> bool:
        dx, dy = direction.value
        dest = self.player.position.offset(dx, dy)
        if not self.grid.in_bounds(dest.x, dest.y):
            return False
        if self.grid[dest] is Tile.WALL and not self.player.ghost:
            return False

        self.player.set_position(dest.x, dest.y)
        self.collect_items()
        if self.grid[dest] is Tile.CAR and self.fuel_collected:
            self.new_level()
        return True

    def move_player_up(self) -> bool:
        return self.move_player(Direction.UP)

    def move_player_down(self) -> bool:
        return self.move_player(Direction.DOWN)

    def move_player_left(self) -> bool:
        return self.move_player(Direction.LEFT)

    def move_player_right(self) -> bool:
        return self.move_player(Direction.RIGHT)

    def collect_items(self) -> None:
        player = self.player
        if self.fuel is not None and player.is_at(self.fuel.position):
            self.fuel_collected = True
            self.fuel = None
            self.log("FUEL", "fuel collected")
        if self.potion is not None and player.is_at(self.potion.position):
            self.potion_collected = True
            self.potion = None
            player.change_health(self.settings.potion_heal)
            self.log("POTION", f"health {player.health}")
        if self.ghost is not None and player.is_at(self.ghost.position):
            player.ghost = True
            self.ghost = None
            self.log("GHOST", "walls no longer block the player")

    # --------------------------------- Turn -----------------------------------------

    def do_turn(self) -> GameState:
        """Run the monster phase, check for death and redraw."""
        if self.state is GameState.DEAD:
            return self.state
        if self.logger:
            self.logger.set_turn(self.turn_number)

        self.state = GameState.MONSTER_PHASE
        if self.turn_number % self.settings.seeker_move_every == 0:
            self.pursuit.move_seekers()
        if self.turn_number % self.settings.chaser_move_every == 0:
            self.pursuit.spawn_chaser(self.cleared)
            self.pursuit.move_chasers()

        self.state = GameState.CHECK_TERMINAL
        if self.player.is_dead():
            self.state = GameState.DEAD
            if self.logger:
                self.logger.log_death()
        else:
            self.state = GameState.IDLE

        self.update_display()
        self.turn_number += 1
        return self.state

    def handle_command(self, direction: Direction) -> GameState:
        """One full turn for a directional command; blocked moves still count."""
        if self.state is GameState.DEAD:
            return self.state
        if self.logger:
            self.logger.set_turn(self.turn_number)
        self.move_player(direction)
        return self.do_turn()

    def update_display(self) -> None:
        self.renderer.update(self.grid, self.player,
                             [s for s in self.seekers if s.alive],
                             [c for c in self.chasers if c.alive],
                             self.fuel, self.potion, self.ghost)

    def log(self, event: str, details: str = "") -> None:
        if self.logger:
            self.logger.log_event(event, details)
