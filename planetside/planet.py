"""Planet surface geometry, tile indexing and power-grid connections."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from typing import Any

from .noise import Perlin

TAU = math.tau
PLANET_ROTATION_SPEED = 1.5
TILE_SIZE = 16.0

Vec2 = tuple[float, float]
Vec3 = tuple[float, float, float]


@dataclass(frozen=True)
class Transform:
    """Position, rotation about the z axis (radians) and scale."""

    translation: Vec3 = (0.0, 0.0, 0.0)
    rotation: float = 0.0
    scale: Vec3 = (1.0, 1.0, 1.0)

    def with_translation(self, translation: Vec3) -> Transform:
        return replace(self, translation=tuple(translation))

    def with_scale(self, scale: Vec3) -> Transform:
        return replace(self, scale=tuple(scale))


@dataclass
class PlanetConfiguration:
    """Parameters that shape a generated planet."""

    seed: int = 11
    radius: float = 1400.0
    resolution: int = 500
    amplitude: float = 2000.0
    frequency: float = 80.0

    def __post_init__(self) -> None:
        if self.resolution < 1:
            raise ValueError("resolution must be at least 1")


def normalize_radians(angle: float) -> float:
    """Wrap an angle into ``[0, 2π)``."""
    return math.fmod(math.fmod(angle, TAU) + TAU, TAU)


def get_surface_radii(config: PlanetConfiguration) -> list[tuple[float, float]]:
    """Return ``(angle, radius)`` pairs evenly spaced around the planet."""
    perlin = Perlin(config.seed)
    frequency = config.frequency / 100.0
    amplitude = config.amplitude / 10.0
    step = TAU / config.resolution
    radii = []
    for i in range(config.resolution):
        angle = step * i
        noise = perlin.get(math.cos(angle) * frequency, math.sin(angle) * frequency)
        radii.append((angle, noise * amplitude + config.radius))
    return radii


def forward(transform: Transform) -> Vec3:
    """Unit vector pointing away from the planet centre for ``transform``."""
    x = -math.sin(transform.rotation)
    y = math.cos(transform.rotation)
    length = math.hypot(x, y)
    return (x / length, y / length, 0.0)


def _polar(angle: float, amplitude: float) -> Vec2:
    return (math.cos(angle) * amplitude, math.sin(angle) * amplitude)


@dataclass
class Planet:
    """A planet: its surface radii, tiles and points of interest.

    ``tiles`` maps a tile id to the list of tile ids it is connected to by
    cables.
    """

    id: int = 0
    tiles: dict[int, list[int]] = field(default_factory=dict)
    points_of_interest: dict[int, list[Any]] = field(default_factory=dict)
    planet_entity: int | None = None
    radius: float = 1400.0
    seed: int = 0
    amplitude: float = 2000.0
    frequency: float = 80.0
    resolution: int = 500
    radii: list[tuple[float, float]] = field(default_factory=list)
    tile_size: float = TILE_SIZE

    @classmethod
    def from_configuration(cls, config: PlanetConfiguration) -> Planet:
        return cls(
            radius=max(config.radius, 15.0),
            seed=config.seed,
            amplitude=config.amplitude,
            frequency=config.frequency,
            resolution=config.resolution,
            radii=get_surface_radii(config),
        )

    def diameter(self) -> float:
        return self.radius * 2.0

    def circumference(self) -> float:
        return self.diameter() * math.pi

    def rotation_speed(self) -> float:
        return PLANET_ROTATION_SPEED / self.radius

    def angular_step(self) -> float:
        """Angular distance between two neighbouring tile places."""
        return self.tile_size / self.radius

    def tile_places(self) -> int:
        return int(TAU / self.angular_step())

    def radians_to_radii(self, radians: float, origin_offset: float) -> tuple[Vec2, float]:
        """Surface point and surface slope angle at ``radians``."""
        radians = math.fmod(radians, TAU)
        normalized = (normalize_radians(radians) / self.angular_step()) / self.tile_places()
        index_float = self.resolution * normalized
        index = max(0, int(min(index_float, self.resolution - 1.0)))
        decimals = index_float - index

        count = len(self.radii)
        prev_angle, prev_height = self.radii[index - 1 if index > 0 else count - 1]
        curr_angle, curr_height = self.radii[index]
        next_angle, next_height = self.radii[(index + 1) % count]

        point_prev = _polar(prev_angle, prev_height + origin_offset)
        point_a = _polar(curr_angle, curr_height + origin_offset)
        point_b = _polar(next_angle, next_height + origin_offset)

        new = (
            point_a[0] + (point_b[0] - point_a[0]) * decimals,
            point_a[1] + (point_b[1] - point_a[1]) * decimals,
        )

        prev_surface = normalize_radians(
            math.atan2(point_a[1] - point_prev[1], point_a[0] - point_prev[0])
        )
        surface = normalize_radians(math.atan2(point_b[1] - point_a[1], point_b[0] - point_a[0]))

        delta = surface - prev_surface
        if delta > TAU / 2.0:
            delta -= TAU
        elif delta < -TAU / 2.0:
            delta += TAU

        result = math.fmod(prev_surface + delta * decimals, TAU)
        if result < 0.0:
            result += TAU
        return new, result

    def radians_to_transform(self, radians: float, origin_offset: float, z: float) -> Transform:
        (x, y), surface = self.radians_to_radii(radians, origin_offset)
        return Transform(translation=(x, y, z), rotation=surface + math.pi)

    def index_to_transform(
        self, index: int, origin_offset: float, z: float, tile_width: int
    ) -> Transform:
        if index >= self.tile_places():
            raise ValueError(
                "Index needs to be less than the amount of tile places on the planet"
            )
        shift = self.angular_step() / 2.0 if tile_width % 2 == 0 else 0.0
        return self.radians_to_transform(index * self.angular_step() + shift, origin_offset, z)

    def radians_to_index(self, radians: float) -> int:
        return min(int(normalize_radians(radians) / self.angular_step()), self.tile_places() - 1)

    def numbers_in_radius(self, position_index: int, radius: int) -> list[int]:
        """Tile indices within ``radius`` of ``position_index``, wrapping around."""
        places = self.tile_places()

        def wrap(i: int) -> int:
            if i < 0:
                return i + places
            if i >= places:
                return i - places
            return i

        return [wrap(i) for i in range(position_index - radius, position_index + radius + 1)]

    def number_is_in_radius(self, position_index: int, radius: int, number: int) -> bool:
        places = self.tile_places()
        clockwise = (position_index + places - number) % places
        counterclockwise = (number + places - position_index) % places
        return clockwise <= radius or counterclockwise <= radius

    def powergrid_tiles_are_connected(self, a: int, b: int) -> bool:
        return b in self.tiles.get(a, ())

    def powergrid_register_connection(self, a: int, b: int) -> None:
        if a in self.tiles:
            self.tiles[a].append(b)
        if b in self.tiles:
            self.tiles[b].append(a)