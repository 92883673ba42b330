"""Triangle meshes for the planet surface and the background quad."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

Vec2 = tuple[float, float]
Vec3 = tuple[float, float, float]


@dataclass
class Mesh:
    """An indexed triangle list with per-vertex attributes."""

    positions: list[Vec3] = field(default_factory=list)
    uvs: list[Vec2] = field(default_factory=list)
    normals: list[Vec3] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)

    @property
    def triangles(self) -> list[tuple[int, int, int]]:
        """The index list grouped into triangles."""
        it = iter(self.indices)
        return list(zip(it, it, it))


def generate_planet_mesh(radii: list[tuple[float, float]]) -> Mesh:
    """Build a triangle fan around the origin from ``(angle, radius)`` pairs."""
    if not radii:
        raise ValueError("radii must not be empty")

    positions: list[Vec3] = [(0.0, 0.0, 0.0)]
    uvs: list[Vec2] = [(0.5, 0.5)]
    for angle, radius in radii:
        cos_a, sin_a = math.cos(angle), math.sin(angle)
        positions.append((cos_a * radius, sin_a * radius, 0.0))
        uvs.append((0.5 + 0.5 * cos_a, 0.5 + 0.5 * sin_a))

    count = len(radii)
    indices: list[int] = []
    for i in range(count):
        indices.extend((0, i + 1, (i + 1) % count + 1))

    normals: list[Vec3] = [(0.0, 0.0, 1.0)] * len(positions)
    return Mesh(positions=positions, uvs=uvs, normals=normals, indices=indices)


def background_quad() -> Mesh:
    """A full-screen quad in normalised device coordinates."""
    return Mesh(
        positions=[
            (-1.0, -1.0, 0.0),
            (1.0, -1.0, 0.0),
            (-1.0, 1.0, 0.0),
            (1.0, 1.0, 0.0),
        ],
        uvs=[(0.0, 0.0), (1.0, 0.0), (0.0, 1.0), (1.0, 1.0)],
        indices=[0, 1, 2, 2, 1, 3],
    )