"""Camera that follows the player around the planet, with panning and zoom."""

from __future__ import annotations

import math
from collections.abc import Collection, Sequence
from dataclasses import dataclass, field

from .planet import Planet, Transform, normalize_radians

RES_WIDTH = 640
RES_HEIGHT = 360

# 1 = no damping, 2 = fairly smooth; values below 1 misbehave.
CAMERA_DAMPING = 1.0
CAMERA_ELEVATION = 50.0
MIN_ELEVATION = -5.0
MAX_ELEVATION = 120.0
MIN_SCALE = 0.2
MAX_SCALE = 10.0
PAN_SPEED = 1.0
FOLLOW_RATE = 0.1
SCROLL_ZOOM = -0.04

KEY_RESET_ZOOM = "Backspace"
KEY_ZOOM_OUT = "KeyL"
KEY_ZOOM_IN = "KeyO"

Vec2 = tuple[float, float]


@dataclass
class CameraSettings:
    """How high above the surface the camera sits and whether it is panning."""

    elevation: float = CAMERA_ELEVATION
    is_panning: bool = False
    total_delta: Vec2 = (0.0, 0.0)
    start_transform: Transform = field(default_factory=Transform)


@dataclass
class CameraInput:
    """Input gathered over one frame."""

    right_mouse: bool = False
    mouse_delta: Vec2 = (0.0, 0.0)
    scroll: Sequence[float] = ()
    pressed: Collection[str] = frozenset()
    just_pressed: Collection[str] = frozenset()


def fit_canvas_scale(width: float, height: float) -> float:
    """Projection scale that fits the pixel canvas into a window of this size."""
    h_scale = width / RES_WIDTH
    v_scale = height / RES_HEIGHT
    factor = round(min(h_scale, v_scale))
    if factor == 0:
        return math.inf
    return 1.0 / factor


def update_camera_transform(
    planet: Planet, radians: float, transform: Transform, elevation: float
) -> Transform:
    """Place the camera above the surface at ``radians``, facing the planet."""
    camera_radians = normalize_radians(radians)
    (x, y), surface_angle = planet.radians_to_radii(camera_radians, elevation)
    mul = (CAMERA_DAMPING - 1.0) * (planet.radius + elevation)
    translation = (
        (x + mul * math.cos(camera_radians)) / CAMERA_DAMPING,
        (y + mul * math.sin(camera_radians)) / CAMERA_DAMPING,
        transform.translation[2],
    )
    return Transform(
        translation=translation,
        rotation=normalize_radians(surface_angle + math.pi),
        scale=transform.scale,
    )


def _rotate(angle: float, x: float, y: float) -> Vec2:
    c, s = math.cos(angle), math.sin(angle)
    return (c * x - s * y, s * x + c * y)


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


@dataclass
class CameraState:
    """The outer camera: its transform, zoom and post-processing parameters."""

    transform: Transform = field(default_factory=Transform)
    scale: float = 1.0
    settings: CameraSettings = field(default_factory=CameraSettings)
    rotation_radians: float = 0.0
    base_pixel_size: float = 1.0
    camera_scale: float = 1.0
    screen_width: float = 0.0
    screen_height: float = 0.0

    def resize(self, width: float, height: float) -> None:
        """Record a new window size."""
        self.screen_width = width
        self.screen_height = height

    def _set_scale(self, scale: float) -> None:
        self.scale = scale
        self.camera_scale = scale

    def _pan(self, planet: Planet, delta: Vec2) -> None:
        dx, dy = _rotate(
            self.transform.rotation,
            -delta[0] * self.scale * PAN_SPEED,
            delta[1] * self.scale * PAN_SPEED,
        )
        x, y, z = self.transform.translation
        x, y = x + dx, y + dy

        pos_angle = math.atan2(y, x)
        surface_pos, surface_angle = planet.radians_to_radii(pos_angle, 0.0)
        surface_radius = math.hypot(*surface_pos)
        distance = math.hypot(x, y)
        current = distance - surface_radius
        clamped = _clamp(current, MIN_ELEVATION, MAX_ELEVATION)
        if clamped != current and distance > 0.0:
            target = surface_radius + clamped
            x, y = x / distance * target, y / distance * target

        self.transform = Transform(
            translation=(x, y, z),
            rotation=normalize_radians(surface_angle + math.pi),
            scale=self.transform.scale,
        )

    def _finish_pan(self, planet: Planet) -> None:
        x, y, _ = self.transform.translation
        pos_angle = math.atan2(y, x)
        surface_pos, _ = planet.radians_to_radii(pos_angle, 0.0)
        self.settings.elevation = _clamp(
            math.hypot(x, y) - math.hypot(*surface_pos), MIN_ELEVATION, MAX_ELEVATION
        )
        self.rotation_radians = pos_angle

    def _follow(self, planet: Planet, target: float) -> None:
        delta = (target - self.rotation_radians + math.pi) % (2.0 * math.pi) - math.pi
        self.rotation_radians += delta * FOLLOW_RATE
        self.transform = update_camera_transform(
            planet, self.rotation_radians, self.transform, self.settings.elevation
        )

    def control(
        self,
        planet: Planet | None,
        player_radians: float | None,
        camera_input: CameraInput,
    ) -> None:
        """Apply one frame of panning, player following and zooming."""
        if camera_input.right_mouse:
            if planet is not None:
                self._pan(planet, camera_input.mouse_delta)
            self.settings.is_panning = True
        elif self.settings.is_panning:
            if planet is not None:
                self._finish_pan(planet)
            self.settings.is_panning = False
        elif player_radians is not None and planet is not None:
            self._follow(planet, player_radians)

        for y in camera_input.scroll:
            self._set_scale(_clamp(self.scale * (1.0 + y * SCROLL_ZOOM), MIN_SCALE, MAX_SCALE))

        if KEY_RESET_ZOOM in camera_input.just_pressed:
            self._set_scale(1.0)
        if KEY_ZOOM_OUT in camera_input.pressed:
            self._set_scale(self.scale * 1.01)
        elif KEY_ZOOM_IN in camera_input.pressed:
            self._set_scale(self.scale * 0.99)