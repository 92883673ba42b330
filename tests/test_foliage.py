import random

import pytest

from planetside.foliage import (
    FoliageItem,
    Rotate,
    WindSway,
    generate_foliage_positions,
    grass_texture,
    rock_texture,
)
from planetside.planet import Planet, PlanetConfiguration, Transform


@pytest.fixture(scope="module")
def planet():
    return Planet.from_configuration(PlanetConfiguration(resolution=100, seed=5))


def test_same_seed_same_positions(planet):
    a = generate_foliage_positions(0.8, 0.5, 200, 7, planet, -1.0)
    b = generate_foliage_positions(0.8, 0.5, 200, 7, planet, -1.0)
    assert a == b


def test_certain_probability_places_every_point(planet):
    transforms = generate_foliage_positions(0.0, 1.0, 50, 3, planet, -1.0)
    assert len(transforms) == 50


def test_zero_probability_places_nothing(planet):
    assert generate_foliage_positions(0.0, 0.0, 50, 3, planet, -1.0) == []


def test_probability_above_one_rejected(planet):
    with pytest.raises(ValueError):
        generate_foliage_positions(0.0, 1.5, 10, 3, planet, -1.0)


def test_scale_and_depth_ranges(planet):
    transforms = generate_foliage_positions(0.8, 0.5, 200, 11, planet, -1.0)
    assert transforms
    for t in transforms:
        sx, sy, sz = t.scale
        assert 0.9 <= sx <= 1.1 and sx == sy and sz == 1.0
        assert -1.1 - 0.01 - 1e-9 <= t.translation[2] <= -1.1 + 0.01 + 1e-9


def test_grass_texture_choices():
    rng = random.Random(1)
    allowed = {f"foliage/grass/0{i}.png" for i in range(4)}
    seen = {grass_texture(rng) for _ in range(200)}
    assert seen == allowed


def test_rock_texture_choices():
    rng = random.Random(2)
    allowed = {f"foliage/rock/flat/{i}.png" for i in range(30)} | {
        f"foliage/rock/tall/{i}.png" for i in range(20)
    }
    for _ in range(300):
        assert rock_texture(rng) in allowed


def test_place_jitters_within_bounds():
    base = Transform(translation=(10.0, 20.0, 1.0))
    item = FoliageItem.place(base, "foliage/grass/00.png", random.Random(4))
    x, y, z = item.transform.translation
    assert abs(x - 10.0) <= 1.5 and abs(y - 20.0) <= 1.5
    assert z == pytest.approx(0.9)
    assert item.texture == "foliage/grass/00.png"


def test_wind_sway_random_ranges():
    rng = random.Random(9)
    for _ in range(50):
        sway = WindSway.random(rng)
        assert 0.7 <= sway.amplitude <= 1.3
        assert 0.0 <= sway.offset <= 5.0


def test_wind_sway_rotation_bounds():
    sway = WindSway(1.0, 0.5)
    amplitude = 0.01
    values = [sway.rotation_at(t / 10.0) for t in range(100)]
    assert all(-1.5 * amplitude - 1e-12 <= v <= 0.5 * amplitude + 1e-12 for v in values)
    assert max(values) > min(values)


def test_rotate_advance_is_additive():
    spin = Rotate(2.0)
    stepped = spin.advance(spin.advance(1.0, 0.25), 0.5)
    assert stepped == pytest.approx(spin.advance(1.0, 0.75))
    assert Rotate(0.0).advance(1.0, 5.0) == 1.0