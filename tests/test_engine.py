from escapegame.engine import GameEngine
from escapegame.entities import Chaser, FuelItem, GhostPowerUp, HealthPotion, Seeker
from escapegame.level import find_tile
from escapegame.logger import GameLogger
from escapegame.models import Direction, GameState, Position, Tile


# ------------------------------- Game start -------------------------------------

def test_new_game_places_everything(engine, renderer, audio):
    car = find_tile(engine.grid, Tile.CAR)
    assert engine.player.position == car
    assert engine.player.health == 130
    assert engine.player.max_health == 100
    assert len(engine.seekers) == 5
    assert engine.fuel is not None
    assert engine.potion is not None
    assert engine.chasers == []
    assert engine.state is GameState.IDLE
    assert engine.turn_number == 1
    assert len(renderer.updates) == 1
    assert audio.levels == [0]


def test_game_start_always_has_ghost(engine):
    assert engine.cleared == 0
    assert isinstance(engine.ghost, GhostPowerUp)


def test_spawned_entities_never_share_a_cell(engine):
    cells = [s.position for s in engine.seekers]
    cells += [engine.fuel.position, engine.potion.position, engine.ghost.position]
    assert len(set(cells)) == len(cells)
    assert engine.player.position not in cells
    for pos in cells:
        assert engine.grid[pos] not in (Tile.CAR, Tile.WALL, Tile.NEST)


def test_same_seed_same_game():
    a = GameEngine(seed=7)
    b = GameEngine(seed=7)
    a.start_game()
    b.start_game()
    assert a.grid.cells == b.grid.cells
    assert [s.position for s in a.seekers] == [s.position for s in b.seekers]


# ------------------------------- Level transitions ------------------------------

def test_ghost_spawns_every_third_cleared_level(engine):
    engine.cleared = 2
    engine.new_level()
    assert engine.cleared == 3
    assert isinstance(engine.ghost, GhostPowerUp)


def test_no_ghost_on_other_levels(engine):
    engine.new_level()
    assert engine.cleared == 1
    assert engine.ghost is None


def test_reaching_car_with_fuel_clears_level(engine, open_board, audio):
    old_grid = open_board(player=(5, 5), car=(6, 5))
    engine.fuel_collected = True
    engine.player.ghost = True
    engine.chasers.append(Chaser(9, 9))
    health = engine.player.health

    assert engine.move_player(Direction.RIGHT) is True
    assert engine.cleared == 1
    assert engine.grid is not old_grid
    assert engine.player.position == find_tile(engine.grid, Tile.CAR)
    assert engine.player.health == health + 30
    assert engine.fuel_collected is False
    assert engine.player.ghost is False
    assert engine.chasers == []
    assert len(engine.seekers) == 5
    assert engine.fuel is not None and engine.potion is not None
    assert audio.levels == [0, 1]


def test_car_without_fuel_does_nothing(engine, open_board):
    open_board(player=(5, 5), car=(6, 5))
    assert engine.move_player(Direction.RIGHT) is True
    assert engine.cleared == 0
    assert engine.player.position == Position(6, 5)


# ------------------------------- Movement & pickups -----------------------------

def test_fuel_pickup(engine, open_board):
    open_board()
    engine.fuel = FuelItem(6, 5)
    health = engine.player.health
    engine.move_player_right()
    assert engine.fuel_collected is True
    assert engine.fuel is None
    assert engine.player.health == health
    assert engine.player.position == Position(6, 5)


def test_potion_is_capped_but_arrival_bonus_is_not(engine, open_board):
    open_board()
    engine.player.health = 95
    engine.potion = HealthPotion(6, 5)
    engine.move_player_right()
    assert engine.potion is None
    assert engine.potion_collected is True
    assert engine.player.health == 100

    engine.potion = HealthPotion(6, 6)
    engine.move_player_down()
    assert engine.player.health == 100

    engine.place_player()
    assert engine.player.health == 130
    assert engine.player.health > engine.player.max_health


def test_potion_never_lowers_boosted_health(engine, open_board):
    open_board()
    engine.player.health = 130
    engine.potion = HealthPotion(5, 4)
    engine.move_player_up()
    assert engine.player.health == 130


def test_ghost_pickup_lets_player_through_walls(engine, open_board):
    grid = open_board()
    engine.ghost = GhostPowerUp(4, 5)
    grid.set_tile(6, 5, Tile.WALL)

    assert engine.move_player_right() is False
    assert engine.player.position == Position(5, 5)

    engine.move_player_left()
    assert engine.player.ghost is True
    assert engine.ghost is None
    engine.move_player_right()
    assert engine.move_player_right() is True
    assert engine.player.position == Position(6, 5)


def test_moves_off_the_grid_are_rejected(engine, open_board):
    open_board(player=(0, 0))
    engine.player.ghost = True
    assert engine.move_player_left() is False
    assert engine.move_player_up() is False
    assert engine.player.position == Position(0, 0)

    open_board(player=(24, 17), car=(0, 9))
    assert engine.move_player_right() is False
    assert engine.move_player_down() is False


# ------------------------------- Turns ------------------------------------------

def test_seekers_move_every_fifth_turn(engine, open_board):
    open_board()
    seeker = Seeker(10, 5)
    engine.seekers.append(seeker)
    for _ in range(4):
        engine.do_turn()
    assert seeker.position == Position(10, 5)
    engine.do_turn()
    assert engine.turn_number == 6
    assert seeker.position == Position(9, 5)


def test_chasers_move_every_second_turn(engine, open_board):
    open_board()
    chaser = Chaser(10, 5)
    engine.chasers.append(chaser)
    engine.do_turn()
    assert chaser.position == Position(10, 5)
    engine.do_turn()
    assert chaser.position == Position(9, 5)


def test_blocked_command_still_takes_a_turn(engine, open_board, renderer):
    open_board(player=(0, 5))
    updates = len(renderer.updates)
    assert engine.handle_command(Direction.LEFT) is GameState.IDLE
    assert engine.turn_number == 2
    assert len(renderer.updates) == updates + 1


def test_standing_on_nest_spawns_a_chaser(engine, open_board):
    grid = open_board()
    grid.set_tile(5, 5, Tile.NEST)
    engine.cleared = 1
    engine.turn_number = 2
    engine.do_turn()
    assert len(engine.chasers) == 1
    # It spawned below the player and immediately reached for them
    assert engine.chasers[0].position == Position(5, 6)
    assert engine.player.health == 110


def test_chaser_hit_kills_weak_player(engine, open_board):
    open_board()
    engine.player.health = 10
    engine.chasers.append(Chaser(6, 5))
    engine.turn_number = 2

    assert engine.do_turn() is GameState.DEAD
    assert engine.player.health <= 0
    assert engine.state is GameState.DEAD

    # Dead is terminal: commands are ignored
    assert engine.handle_command(Direction.UP) is GameState.DEAD
    assert engine.turn_number == 3
    assert engine.player.position == Position(5, 5)


def test_renderer_only_sees_live_monsters(engine, open_board, renderer):
    open_board()
    live, dead = Seeker(10, 10), Seeker(12, 12)
    dead.alive = False
    engine.seekers.extend([live, dead])
    engine.do_turn()
    update = renderer.updates[-1]
    assert update["seekers"] == [live]
    assert update["grid"] is engine.grid
    assert update["player"] is engine.player


def test_events_are_logged(tmp_path, open_board, engine):
    log_file = tmp_path / "log.md"
    engine.logger = GameLogger(str(log_file))
    open_board(player=(5, 5), car=(7, 5))
    engine.make_pursuit()
    engine.fuel = FuelItem(6, 5)
    engine.handle_command(Direction.RIGHT)
    engine.handle_command(Direction.RIGHT)

    text = log_file.read_text(encoding="utf-8")
    assert "# EscapE Game Log" in text
    assert "| 1 | FUEL |" in text
    assert "| 2 | LEVEL UP |" in text
    assert "| 0 |" not in text


def test_engine_keeps_chasers_off_items(engine, open_board):
    grid = open_board()
    grid.set_tile(5, 5, Tile.NEST)
    engine.cleared = 1
    engine.fuel = FuelItem(5, 6)
    chaser = engine.pursuit.spawn_chaser(engine.cleared)
    assert chaser.position != engine.fuel.position
    assert chaser.position == Position(5, 4)


def test_blocked_move_returns_to_idle(engine, open_board):
    open_board(player=(0, 5))
    assert engine.move_player_left() is False
    assert engine.state is GameState.IDLE
    assert engine.move_player_right() is True
    assert engine.state is GameState.IDLE
