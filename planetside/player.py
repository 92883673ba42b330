"""The player walking around the planet surface."""

from __future__ import annotations

from collections.abc import Collection
from dataclasses import dataclass, field

from .planet import Planet, Transform

KEY_LEFT = "KeyA"
KEY_RIGHT = "KeyD"
KEY_SPRINT = "ShiftLeft"
KEY_SNEAK = "ControlLeft"

WALK_SPEED = 10.0
SPRINT_SPEED = 20.0
SNEAK_SPEED = 3.0
PLAYER_Z = 10.0


@dataclass
class RunAnimation:
    """A repeating frame timer stepping through sprite-sheet frames."""

    first: int = 0
    last: int = 8
    frame_duration: float = 0.1
    index: int = 0
    elapsed: float = 0.0

    def set_frame_duration(self, seconds: float) -> None:
        self.frame_duration = seconds

    def tick(self, delta: float, backwards: bool) -> int:
        """Advance the timer, stepping a frame when it fires; return the frame."""
        self.elapsed += delta
        if self.elapsed >= self.frame_duration:
            self.elapsed %= self.frame_duration if self.frame_duration > 0 else 1.0
            if backwards:
                self.index = self.last if self.index == self.first else self.index - 1
            else:
                self.index = self.first if self.index == self.last else self.index + 1
        return self.index


@dataclass
class Player:
    """The player's angular position on the planet and movement speed."""

    radians: float = 0.0
    speed: float = WALK_SPEED
    transform: Transform | None = None
    animation: RunAnimation = field(default_factory=RunAnimation)

    def update(self, planet: Planet, pressed: Collection[str], delta: float) -> Transform | None:
        """Apply one frame of input; return the new transform if the player moved."""
        if KEY_SPRINT in pressed:
            self.speed = SPRINT_SPEED
            self.animation.set_frame_duration(0.03)
        elif KEY_SNEAK in pressed:
            self.speed = SNEAK_SPEED
            self.animation.set_frame_duration(0.3)
        else:
            self.speed = WALK_SPEED
            self.animation.set_frame_duration(0.1)

        left = KEY_LEFT in pressed
        right = KEY_RIGHT in pressed
        moved = None
        backwards = False

        if left:
            self.radians += self.speed / 10000.0
            moved = planet.radians_to_transform(self.radians, 0.0, PLAYER_Z)
            backwards = True
        if right:
            self.radians -= self.speed / 10000.0
            moved = planet.radians_to_transform(self.radians, 0.0, PLAYER_Z)
            backwards = False

        if moved is not None:
            self.transform = moved
        if left != right:
            self.animation.tick(delta, backwards)
        return moved