#!/usr/bin/env python3
"""
Data models for Skidmark.

This module defines the vehicle tuning, the controlled Body and the result of
one Motion Model tick.

Units and usage
- positions are in pixels, velocities in pixels per tick, angles in radians.
- heading 0 points up the screen; positive headings turn clockwise.
- acceleration on Body is body-local (negative y is forward) and is rotated
  into world space by the Motion Model.
- Body instances are treated as immutable snapshots: each tick produces a new
  one and the frame driver swaps it in.
"""
import math
from dataclasses import dataclass, field, fields
from typing import Tuple

from . import constants as C
from .vector_utils import Vec2


class ConfigurationError(ValueError):
    """Raised when vehicle tuning cannot produce a finite top speed."""


@dataclass(frozen=True)
class VehicleConfig:
    """
    Constant vehicle tuning.

    Fields:
    - acceleration: speed added per tick while a throttle control is held
    - friction: fraction of velocity retained per tick, strictly in (0, 1)
    - agility: turn rate in radians per tick at full speed
    - width: rendered body width in pixels
    - stop_speed: speeds below this snap to zero
    - trail_speed_threshold: marks are left only above this speed
    - trail_corner_inset: inward offset of the rear-left mark in pixels
    """
    acceleration: float = C.ACCELERATION
    friction: float = C.FRICTION
    agility: float = C.AGILITY
    width: float = C.BODY_WIDTH
    stop_speed: float = C.STOP_SPEED
    trail_speed_threshold: float = C.TRAIL_SPEED_THRESHOLD
    trail_corner_inset: float = C.TRAIL_CORNER_INSET

    def __post_init__(self):
        for f in fields(self):
            if not math.isfinite(getattr(self, f.name)):
                raise ConfigurationError(f"{f.name} must be finite, got {getattr(self, f.name)}")
        if not 0.0 < self.friction < 1.0:
            raise ConfigurationError(f"friction must be in (0, 1), got {self.friction}")
        if self.acceleration <= 0:
            raise ConfigurationError(f"acceleration must be positive, got {self.acceleration}")
        if self.width <= 0:
            raise ConfigurationError(f"width must be positive, got {self.width}")
        if self.stop_speed < 0 or self.trail_speed_threshold < 0:
            raise ConfigurationError("stop_speed and trail_speed_threshold must be >= 0")
        if not math.isfinite(self.max_speed):
            raise ConfigurationError(f"max speed is not finite: {self.max_speed}")

    @property
    def max_speed(self) -> float:
        """Speed at which one tick of acceleration exactly offsets friction."""
        return self.acceleration / (1.0 - self.friction)

    def body_height(self, image_width: int, image_height: int) -> float:
        """Height that keeps the sprite's aspect ratio at the configured width."""
        if image_width <= 0 or image_height <= 0:
            raise ConfigurationError(f"invalid sprite size {image_width}x{image_height}")
        return image_height * (self.width / image_width)


@dataclass(frozen=True)
class Body:
    """
    Kinematic state of the controlled vehicle.

    Fields:
    - position: world position (pixels)
    - width, height: rendered size (pixels)
    - heading: render rotation in radians, 0 = up
    - turn_rate: signed angular rate applied to heading, scaled by speed
    - velocity: world-space velocity (pixels/tick)
    - acceleration: body-local acceleration chosen on the last tick
    """
    position: Vec2
    width: float
    height: float
    heading: float = 0.0
    turn_rate: float = 0.0
    velocity: Vec2 = field(default_factory=Vec2)
    acceleration: Vec2 = field(default_factory=Vec2)

    @classmethod
    def from_image_size(cls, position: Vec2, image_size: Tuple[int, int], config: VehicleConfig) -> "Body":
        w, h = image_size
        return cls(position=position, width=config.width, height=config.body_height(w, h))

    @property
    def speed(self) -> float:
        return self.velocity.magnitude()


@dataclass(frozen=True)
class StepResult:
    """Next body state plus the world points that get a trail mark this tick."""
    body: Body
    trail_points: Tuple[Vec2, ...] = ()
