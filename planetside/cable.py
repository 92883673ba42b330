"""Cable geometry between slots and the state of cable placement."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

CABLE_Z_INDEX = 3.0
CABLE_THICKNESS = 12.5
MIN_HEIGHT_CABLE = 1.2
MAX_HEIGHT_CABLE = 18.0
CABLE_COLOR = "#020410"
MAX_CABLE_LENGTH = 200.0

Vec2 = tuple[float, float]
Vec3 = tuple[float, float, float]


@dataclass(frozen=True)
class CableGeometry:
    """Placement of a cable quad: where it sits, how it turns, how big it is."""

    translation: Vec3
    rotation: float
    scale: Vec3
    length: float
    height: float
    exceeded_length: bool = False


@dataclass(frozen=True)
class Cable:
    """A cable connecting two slot entities that sit on two tiles."""

    start_entity: int
    end_entity: int
    start_tile_id: int
    end_tile_id: int


def cable_geometry(start: Vec2, end: Vec2) -> CableGeometry:
    """Geometry of a sagging cable hung between ``start`` and ``end``."""
    start_angle = math.atan2(start[1], start[0])
    end_angle = math.atan2(end[1], end[0])

    # Draw from the point further along the planet so the cable bows outwards.
    if math.fmod(end_angle - start_angle + 2.0 * math.pi, 2.0 * math.pi) < math.pi:
        left, right = end, start
    else:
        left, right = start, end

    dx, dy = left[0] - right[0], left[1] - right[1]
    length = math.hypot(dx, dy)
    height = MIN_HEIGHT_CABLE + (MAX_HEIGHT_CABLE - MIN_HEIGHT_CABLE) * (
        1.0 - math.exp(-length / 80.0)
    )
    height = min(max(height, MIN_HEIGHT_CABLE), MAX_HEIGHT_CABLE)
    angle = math.atan2(dy, dx)

    mid_x, mid_y = (right[0] + left[0]) / 2.0, (right[1] + left[1]) / 2.0
    if length > 0.0:
        off_x = -dy / length * height / 2.0
        off_y = dx / length * height / 2.0
    else:
        off_x = off_y = 0.0

    return CableGeometry(
        translation=(mid_x + off_x, mid_y + off_y, CABLE_Z_INDEX),
        rotation=angle,
        scale=(length, height, 1.0),
        length=length,
        height=height,
    )


def preview_geometry(start: Vec2, cursor: Vec2) -> CableGeometry:
    """Geometry of a preview cable to the cursor, flagged when too long."""
    geometry = cable_geometry(start, cursor)
    return CableGeometry(
        translation=geometry.translation,
        rotation=geometry.rotation,
        scale=geometry.scale,
        length=geometry.length,
        height=geometry.height,
        exceeded_length=geometry.length > MAX_CABLE_LENGTH,
    )


@dataclass
class SlotCablePlacement:
    """Tracks the slot a cable is being dragged from."""

    start_entity_pos: Vec2 = (0.0, 0.0)
    _active: tuple[int, int] | None = field(default=None, repr=False)

    def set_active(self, tile_id: int, entity: int, position: Vec3) -> None:
        self._active = (tile_id, entity)
        self.start_entity_pos = (position[0], position[1])

    def reset(self) -> None:
        self._active = None

    def active(self) -> tuple[int, int] | None:
        """The ``(tile_id, entity)`` being connected from, if any."""
        return self._active