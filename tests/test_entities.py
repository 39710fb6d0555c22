from escapegame.entities import Chaser, Player, Seeker
from escapegame.models import Position


def test_player_damage_and_death():
    player = Player(100, 3, 4)
    player.change_health(-60)
    assert player.health == 40
    assert not player.is_dead()
    player.change_health(-40)
    assert player.is_dead()


def test_capped_heal_stops_at_max():
    player = Player(100, 0, 0)
    player.health = 90
    player.change_health(20)
    assert player.health == 100


def test_uncapped_heal_goes_past_max():
    player = Player(100, 0, 0)
    player.change_health(30, capped=False)
    assert player.health == 130


def test_position_updates():
    seeker = Seeker(1, 2)
    seeker.set_position(2, 2)
    assert seeker.position == Position(2, 2)
    assert (seeker.x, seeker.y) == (2, 2)
    assert seeker.is_at(Position(2, 2))


def test_monsters_start_alive():
    assert Seeker(0, 0).alive
    assert Chaser(0, 0).alive
    assert Chaser.kind == "chaser"
