"""Points of interest: stones, copper and trees scattered over a planet."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from enum import Enum

from .noise import Perlin
from .planet import Planet, Transform

MAX_TREE_AGE = 3
TREE_INITIAL_AGES = 5
STONE_VARIANTS = 6
COPPER_VARIANTS = 2

Color = tuple[float, float, float]


class PointOfInterestType(Enum):
    """The kind of a point of interest."""

    STONE = "stone"
    COPPER = "copper"
    TREE = "tree"


@dataclass
class Tree:
    """Gives wood when destroyed and grows older over time."""

    age: int = 0

    def texture(self) -> str:
        return f"foliage/birch/0{self.age}.png"

    def increase_age(self) -> None:
        self.age = min(self.age + 1, MAX_TREE_AGE)


@dataclass
class PointOfInterest:
    """A point of interest placed at a tile position on a planet."""

    position_index: int
    poi_type: PointOfInterestType
    transform: Transform = field(default_factory=Transform)
    texture: str = ""
    flip_x: bool = False
    tree: Tree | None = None


def _spawn(
    poi_type: PointOfInterestType,
    position_index: int,
    transform: Transform,
    rng: random.Random,
) -> PointOfInterest:
    tree = None
    if poi_type is PointOfInterestType.STONE:
        texture = f"foliage/rock/big/0{rng.randrange(STONE_VARIANTS)}.png"
    elif poi_type is PointOfInterestType.COPPER:
        texture = f"foliage/resource/copper/0{rng.randrange(COPPER_VARIANTS)}.png"
    else:
        tree = Tree(age=rng.randrange(TREE_INITIAL_AGES))
        scale = rng.uniform(0.8, 1.2)
        transform = transform.with_scale((scale, scale, scale))
        texture = tree.texture()
    return PointOfInterest(
        position_index=position_index,
        poi_type=poi_type,
        transform=transform,
        texture=texture,
        flip_x=rng.random() < 0.5,
        tree=tree,
    )


def generate_position_indices(planet: Planet, local_seed: int, probability: float) -> list[int]:
    """Tile positions that receive a point of interest, in ascending order."""
    seed = planet.seed + local_seed
    noise = Perlin(seed)
    rng = random.Random(seed)
    places = planet.tile_places()
    indices = []
    for i in range(places):
        angle = i / places * math.tau
        value = (noise.get(math.cos(angle), math.sin(angle)) + 1.0) / 2.0
        if rng.random() < probability * value:
            indices.append(i)
    return indices


@dataclass
class PointOfInterestBuilder:
    """Configures and spawns a batch of weighted points of interest."""

    types: list[tuple[PointOfInterestType, float]] = field(default_factory=list)
    z_index: float = 0.0
    origin_offset: float = 0.0
    probability: float = 0.0
    local_seed: int = 0
    _rng: random.Random = field(default_factory=random.Random, repr=False)

    def add_type(self, poi_type: PointOfInterestType, weight: float) -> PointOfInterestBuilder:
        self.types.append((poi_type, weight))
        return self

    def with_local_seed(self, local_seed: int) -> PointOfInterestBuilder:
        self.local_seed = local_seed
        return self

    def with_z_index(self, z_index: float) -> PointOfInterestBuilder:
        self.z_index = z_index
        return self

    def with_origin_offset(self, origin_offset: float) -> PointOfInterestBuilder:
        self.origin_offset = origin_offset
        return self

    def with_probability(self, probability: float) -> PointOfInterestBuilder:
        self.probability = probability
        return self

    def _select(self, seed: int) -> PointOfInterestType:
        total_weight = sum(weight for _, weight in self.types)
        remaining = random.Random(seed).random() * total_weight
        for poi_type, weight in self.types:
            remaining -= weight
            if remaining <= 0.0:
                return poi_type
        return self.types[0][0]

    def spawn_all(self, planet: Planet) -> list[PointOfInterest]:
        """Spawn every point of interest and register it on ``planet``."""
        if not 0.0 <= self.probability <= 1.0:
            raise ValueError("Probability must be between 0.0 and 1.0")
        if not self.types:
            raise ValueError("At least one POI type must be added")

        spawned = []
        base_seed = planet.seed + self.local_seed
        for position_index in generate_position_indices(planet, self.local_seed, self.probability):
            selected = self._select(base_seed + position_index)
            z = self.z_index + self._rng.random() * 0.025 - 0.0125
            transform = planet.index_to_transform(position_index, self.origin_offset, z, 0)
            poi = _spawn(selected, position_index, transform, self._rng)
            planet.points_of_interest.setdefault(position_index, []).append(poi)
            spawned.append(poi)
        return spawned


def generate_pois(planet: Planet) -> list[PointOfInterest]:
    """Scatter the standard ores and trees over ``planet``."""
    ores = (
        PointOfInterestBuilder()
        .add_type(PointOfInterestType.STONE, 0.7)
        .add_type(PointOfInterestType.COPPER, 0.3)
        .with_origin_offset(-15.0)
        .with_z_index(-1.5)
        .with_probability(0.3)
        .with_local_seed(1)
        .spawn_all(planet)
    )
    trees = (
        PointOfInterestBuilder()
        .add_type(PointOfInterestType.TREE, 1.0)
        .with_origin_offset(-1.0)
        .with_z_index(-2.0)
        .with_probability(0.4)
        .with_local_seed(0)
        .spawn_all(planet)
    )
    return ores + trees


@dataclass
class PointOfInterestHighlight:
    """A short colour flash on a point of interest."""

    time: float = 0.0
    max_time: float = 0.05
    color: Color = (1.0, 1.0, 1.0)

    @classmethod
    def green(cls) -> PointOfInterestHighlight:
        return cls(color=(0.0, 1.2, 0.0))

    @classmethod
    def red(cls) -> PointOfInterestHighlight:
        return cls(color=(0xDB / 255.0, 0x1A / 255.0, 0x1A / 255.0))

    def advance(self, delta: float) -> bool:
        """Advance the flash; true once it has run its course."""
        self.time += delta
        return self.time > self.max_time