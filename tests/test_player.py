import pytest

from planetside.planet import Planet, PlanetConfiguration
from planetside.player import Player, RunAnimation


@pytest.fixture
def planet():
    return Planet.from_configuration(PlanetConfiguration(seed=5, resolution=100))


def test_idle_player_does_not_move(planet):
    player = Player()
    assert player.update(planet, set(), 0.016) is None
    assert player.radians == 0.0
    assert player.speed == 10.0
    assert player.animation.index == 0


def test_moving_left_follows_surface(planet):
    player = Player()
    transform = player.update(planet, {"KeyA"}, 0.016)
    assert player.radians > 0.0
    assert transform == planet.radians_to_transform(player.radians, 0.0, 10.0)
    assert player.transform == transform


def test_left_then_right_returns_home(planet):
    player = Player()
    player.update(planet, {"KeyA"}, 0.0)
    player.update(planet, {"KeyD"}, 0.0)
    assert player.radians == pytest.approx(0.0)


def test_sprint_moves_further_than_sneak(planet):
    sprinter, sneaker = Player(), Player()
    sprinter.update(planet, {"KeyA", "ShiftLeft"}, 0.0)
    sneaker.update(planet, {"KeyA", "ControlLeft"}, 0.0)
    assert sprinter.speed == 20.0
    assert sneaker.speed == 3.0
    assert sprinter.radians > sneaker.radians
    assert sprinter.animation.frame_duration == 0.03
    assert sneaker.animation.frame_duration == 0.3


def test_both_directions_cancel_and_do_not_animate(planet):
    player = Player()
    player.update(planet, {"KeyA", "KeyD"}, 1.0)
    assert player.radians == pytest.approx(0.0)
    assert player.animation.index == 0


def test_walking_animates(planet):
    player = Player()
    player.update(planet, {"KeyD"}, 0.1)
    assert player.animation.index == 1


def test_animation_forward_wraps():
    animation = RunAnimation(index=8)
    assert animation.tick(0.1, backwards=False) == 0


def test_animation_backward_wraps_to_last():
    animation = RunAnimation()
    assert animation.tick(0.1, backwards=True) == 8


def test_animation_waits_for_frame_duration():
    animation = RunAnimation()
    assert animation.tick(0.05, backwards=False) == 0
    assert animation.tick(0.05, backwards=False) == 1
    assert animation.elapsed < animation.frame_duration