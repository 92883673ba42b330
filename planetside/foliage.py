"""Scattering and animation of grass and rocks on the planet surface."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass

from .noise import Perlin
from .planet import Planet, Transform

ROCK_VARIANTS: tuple[tuple[int, str], ...] = (
    (30, "foliage/rock/flat/"),
    (20, "foliage/rock/tall/"),
)
GRASS_VARIANTS = 4


@dataclass(frozen=True)
class FoliageItem:
    """A placed piece of foliage: where it stands and what it looks like."""

    transform: Transform
    texture: str
    flip_x: bool = False

    @classmethod
    def place(cls, transform: Transform, texture: str, rng: random.Random) -> FoliageItem:
        """Jitter ``transform`` slightly and pick a random facing."""
        x, y, z = transform.translation
        dx = rng.uniform(-1.5, 1.5)
        dy = rng.uniform(-1.5, 1.5)
        return cls(
            transform=transform.with_translation((x + dx, y + dy, z - 0.1)),
            texture=texture,
            flip_x=rng.random() < 0.5,
        )


def generate_foliage_positions(
    probability_multiplier: float,
    min_prob: float,
    points: int,
    seed: int,
    planet: Planet,
    z_index: float,
) -> list[Transform]:
    """Transforms of foliage spread around the planet in noisy clusters."""
    rng = random.Random(seed)
    perlin = Perlin(seed)
    transforms = []
    for i in range(points):
        value = (
            perlin.get(
                (i / (points * 0.8)) * 5.123512,
                (i / (points * 1.25)) * 3.123512,
            )
            + 1.0
        ) / 2.0
        degree = (i / points) * math.tau
        probability = max(value**2 * probability_multiplier, min_prob)
        if not 0.0 <= probability <= 1.0:
            raise ValueError(f"probability {probability} is outside [0, 1]")
        if rng.random() >= probability:
            continue

        origin_offset = -6.0 - rng.random() * 5.0
        transform = planet.radians_to_transform(degree, origin_offset, -0.1)
        scale = rng.uniform(0.9, 1.1)
        x, y, z = transform.translation
        jitter = rng.uniform(-0.01, 0.01)
        transforms.append(
            transform.with_scale((scale, scale, 1.0)).with_translation(
                (x, y, z + z_index + jitter)
            )
        )
    return transforms


def grass_texture(rng: random.Random) -> str:
    """Path of a random grass sprite."""
    return f"foliage/grass/0{rng.randrange(GRASS_VARIANTS)}.png"


def rock_texture(rng: random.Random) -> str:
    """Path of a random flat or tall rock sprite."""
    count, path = rng.choice(ROCK_VARIANTS)
    return f"{path}{rng.randrange(count)}.png"


@dataclass(frozen=True)
class WindSway:
    """Swaying in the wind: ``amplitude * sin(2t + offset)``, recentred."""

    amplitude: float
    offset: float

    @classmethod
    def random(cls, rng: random.Random | None = None) -> WindSway:
        rng = rng or random.Random()
        return cls(rng.uniform(0.7, 1.3), rng.uniform(0.0, 5.0))

    def rotation_at(self, elapsed: float) -> float:
        """Rotation about z after ``elapsed`` seconds."""
        amplitude = 0.01 * self.amplitude
        return math.sin(elapsed * 2.0 + self.offset) * amplitude - amplitude / 2.0


@dataclass(frozen=True)
class Rotate:
    """Constant spin at ``speed`` radians per second."""

    speed: float

    def advance(self, rotation: float, delta: float) -> float:
        return rotation + self.speed * delta