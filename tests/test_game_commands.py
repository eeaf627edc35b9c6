from minidig.game_commands import Move, Pickup, Suicide
from minidig.gameobject import GameObject
from minidig.health import HealthComponent
from minidig.player import PlayerComponent


def test_move_offsets_local_position():
    actor = GameObject()
    actor.set_position(5.0, 5.0)
    command = Move(1, True, (1.0, -2.0))
    command.execute(actor)
    assert actor.local_transform.position == (6.0, 3.0, 0.0)
    assert command.input_value == 1
    assert command.using_gamepad is True


def test_move_accumulates():
    actor = GameObject()
    command = Move(26, False, (2.0, 0.0))
    for _ in range(3):
        command.execute(actor)
    assert actor.local_transform.x == 6.0


def test_pickup_adds_points():
    actor = GameObject()
    player = actor.add_component(PlayerComponent, "Player 1")
    command = Pickup(16384, True, 10)
    command.execute(actor)
    command.execute(actor)
    assert player.score == 20


def test_pickup_without_player_does_nothing():
    actor = GameObject()
    Pickup(29, False, 100).execute(actor)
    assert actor.get_component(PlayerComponent) is None


def test_suicide_costs_a_life():
    actor = GameObject()
    health = actor.add_component(HealthComponent, 1, 8)
    Suicide(32768, True).execute(actor)
    assert health.lives == 7
    assert health.health == 1


def test_suicide_without_health_does_nothing():
    actor = GameObject()
    Suicide(6, False).execute(actor)
    assert actor.get_component(HealthComponent) is None