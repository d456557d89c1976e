from racer.models import COLORS
from racer.services.race.registry import PlayerRegistry


def test_join_defaults():
    registry = PlayerRegistry()
    player = registry.join('sid-1', 'Alice')
    assert player.name == 'Alice'
    assert player.position == 0
    assert player.speed == 0
    assert player.current_lap == 1
    assert player.finished is False
    assert player.finish_time is None
    assert player.clicks == 0
    assert player.has_powerup is False
    assert player.is_invincible is False
    assert player.car_type == 'default'
    assert player.color in COLORS
    assert (player.total_races, player.wins, player.best_time) == (0, 0, None)


def test_default_names_use_registry_size():
    registry = PlayerRegistry()
    assert registry.join('a', '').name == 'Player0'
    assert registry.join('b', None).name == 'Player1'


def test_default_names_can_collide():
    registry = PlayerRegistry()
    registry.join('a', '')
    registry.join('b', '')
    registry.leave('a')
    assert registry.join('c', '').name == 'Player1'
    assert [p.name for p in registry] == ['Player1', 'Player1']


def test_leave_reports_empty():
    registry = PlayerRegistry()
    registry.join('a', 'A')
    registry.join('b', 'B')
    player, empty = registry.leave('a')
    assert player.name == 'A'
    assert empty is False
    player, empty = registry.leave('b')
    assert empty is True
    assert len(registry) == 0


def test_leave_unknown_sid():
    registry = PlayerRegistry()
    player, empty = registry.leave('ghost')
    assert player is None
    assert empty is True


def test_player_serialization_keys():
    registry = PlayerRegistry()
    data = registry.join('a', 'A').to_dict()
    assert set(data) == {
        'id', 'name', 'position', 'speed', 'currentLap', 'finished', 'finishTime',
        'color', 'clicks', 'hasPowerup', 'isInvincible', 'carType',
        'totalRaces', 'wins', 'bestTime',
    }
