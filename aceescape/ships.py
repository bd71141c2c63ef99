"""Ship movement: the player's ship and the pursuing Deimos."""

from __future__ import annotations

import math
from collections.abc import Collection, Sequence
from dataclasses import dataclass, field
from enum import Enum, auto

BOUNDS = (1200.0, 640.0)
PLAYER_SIZE = (77.0, 41.0)
PLAYER_TEXTURE = "textures/player.png"
DEIMOS_TEXTURE = "textures/deimos.png"
CORRUPTION_SOUND = "sounds/corruption.ogg"
LISTENER_GAP = 100.0
FIXED_HZ = 60.0
DECAY_RATE = 1.0

_F32_EPSILON = 1.1920929e-07


class Key(Enum):
    """Keys the game reacts to."""

    LEFT = auto()
    RIGHT = auto()
    UP = auto()
    SPACE = auto()
    ESCAPE = auto()


@dataclass
class Transform:
    """Position and rotation (radians about the z axis) of a 2D object."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    angle: float = 0.0

    @property
    def translation(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def rotate_z(self, angle: float) -> None:
        self.angle += angle

    def forward(self) -> tuple[float, float]:
        """The unit +Y axis rotated by the current angle."""
        return (-math.sin(self.angle), math.cos(self.angle))

    def right(self) -> tuple[float, float]:
        """The unit +X axis rotated by the current angle."""
        return (math.cos(self.angle), math.sin(self.angle))


@dataclass
class Player:
    movement_speed: float = 500.0
    rotation_speed: float = field(default_factory=lambda: math.radians(360.0))


@dataclass
class Deimos:
    movement_speed: float = 1.0
    rotation_speed: float = field(default_factory=lambda: math.radians(360.0))


def move_player(
    player: Player, transform: Transform, keys: Collection[Key], dt: float
) -> Transform:
    """Turn and thrust the player's ship, keeping it inside the level bounds."""
    rotation_factor = 0.0
    movement_factor = 0.0
    if Key.LEFT in keys:
        rotation_factor += 1.0
    if Key.RIGHT in keys:
        rotation_factor -= 1.0
    if Key.UP in keys:
        movement_factor += 1.0

    transform.rotate_z(rotation_factor * player.rotation_speed * dt)

    dx, dy = transform.forward()
    distance = movement_factor * player.movement_speed * dt
    half_w, half_h = BOUNDS[0] / 2.0, BOUNDS[1] / 2.0
    transform.x = min(max(transform.x + dx * distance, -half_w), half_w)
    transform.y = min(max(transform.y + dy * distance, -half_h), half_h)
    transform.z = min(max(transform.z, 0.0), 0.0)
    return transform


def smooth_nudge(
    current: Sequence[float], target: Sequence[float], decay_rate: float, dt: float
) -> tuple[float, ...]:
    """Move ``current`` towards ``target`` by exponential decay over ``dt``."""
    t = 1.0 - math.exp(-decay_rate * dt)
    return tuple(c + (g - c) * t for c, g in zip(current, target))


def move_deimos(
    deimos: Deimos, transform: Transform, target: Transform, decay_rate: float, dt: float
) -> bool:
    """Turn the Deimos towards ``target`` and drift after it.

    Returns False when it already faces the target (or sits on it) and nothing moved.
    """
    dx, dy = target.x - transform.x, target.y - transform.y
    length = math.hypot(dx, dy)
    if length == 0.0:
        return False
    to_x, to_y = dx / length, dy / length

    fx, fy = transform.forward()
    forward_dot = fx * to_x + fy * to_y
    if abs(forward_dot - 1.0) < _F32_EPSILON:
        return False

    rx, ry = transform.right()
    right_dot = rx * to_x + ry * to_y
    rotation_sign = -math.copysign(1.0, right_dot)
    max_angle = math.acos(min(max(forward_dot, -1.0), 1.0))
    angle = rotation_sign * min(deimos.rotation_speed * dt, max_angle)

    transform.rotate_z(angle)
    transform.x, transform.y, transform.z = smooth_nudge(
        transform.translation, target.translation, decay_rate, deimos.movement_speed * dt
    )
    return True


def corruption_speed(elapsed: float) -> float:
    """Playback speed of the corruption sound after ``elapsed`` seconds."""
    return max(math.sin(elapsed / 5.0) + 1.0, 0.1)