"""Seeded two-dimensional gradient (Perlin) noise."""

from __future__ import annotations

import math
import random

_DIAGONAL = 1.0 / math.sqrt(2.0)
_GRADIENTS: tuple[tuple[float, float], ...] = (
    (_DIAGONAL, _DIAGONAL),
    (-_DIAGONAL, _DIAGONAL),
    (_DIAGONAL, -_DIAGONAL),
    (-_DIAGONAL, -_DIAGONAL),
    (1.0, 0.0),
    (-1.0, 0.0),
    (0.0, 1.0),
    (0.0, -1.0),
)
# Maximum magnitude of unit-gradient 2D Perlin noise is sqrt(1/2).
_SCALE = math.sqrt(2.0)


def _fade(t: float) -> float:
    return t * t * t * (t * (t * 6.0 - 15.0) + 10.0)


def _lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


class Perlin:
    """Deterministic Perlin noise; ``get`` returns values in ``[-1, 1]``."""

    def __init__(self, seed: int = 0) -> None:
        self.seed = seed
        table = list(range(256))
        random.Random(seed).shuffle(table)
        self._perm = tuple(table + table)

    def _gradient(self, ix: int, iy: int) -> tuple[float, float]:
        h = self._perm[self._perm[ix & 255] + (iy & 255)]
        return _GRADIENTS[h % len(_GRADIENTS)]

    def _corner(self, ix: int, iy: int, dx: float, dy: float) -> float:
        gx, gy = self._gradient(ix, iy)
        return gx * dx + gy * dy

    def get(self, x: float, y: float) -> float:
        """Sample the noise field at ``(x, y)``."""
        x0 = math.floor(x)
        y0 = math.floor(y)
        fx = x - x0
        fy = y - y0
        u = _fade(fx)
        v = _fade(fy)

        n00 = self._corner(x0, y0, fx, fy)
        n10 = self._corner(x0 + 1, y0, fx - 1.0, fy)
        n01 = self._corner(x0, y0 + 1, fx, fy - 1.0)
        n11 = self._corner(x0 + 1, y0 + 1, fx - 1.0, fy - 1.0)

        value = _lerp(_lerp(n00, n10, u), _lerp(n01, n11, u), v) * _SCALE
        return max(-1.0, min(1.0, value))