#!/usr/bin/env python3
"""
Motion Model for Skidmark

Responsibilities
- Turn the held driving controls into a turn rate and a body-local acceleration.
- Advance heading, velocity and position by one tick with simple friction.
- Wrap the body around the world edges.
- Decide where tire marks are left on this tick.

Units and conventions
- Positions are in pixels, velocities in pixels per tick.
- Heading is in radians; 0 points up the screen and positive values turn clockwise.
- Body-local acceleration uses negative y for "forward".

Numerical notes
- Friction is a plain per-tick retention factor, so with constant throttle the
  pre-friction speed converges to max_speed = a / (1 - f) and the speed after
  friction to max_speed * f. Speed therefore never exceeds max_speed.
- Turning authority scales with speed / max_speed: no turning at rest.
- Very small speeds snap to zero so the body actually comes to rest.

State handling
- step() is pure: it takes a Body snapshot and returns a new one. The caller
  swaps the result in at the frame boundary.
"""

from dataclasses import replace
from typing import Optional, Tuple

from .data_models import Body, StepResult, VehicleConfig
from .input_state import Control, InputState
from .vector_utils import Vec2, ZERO


class MotionModel:
    """
    Per-tick control law for the single controlled body.

    The steps below run in a fixed order and each one sees the result of the
    previous one within the same tick.
    """

    def __init__(self, config: Optional[VehicleConfig] = None):
        self.config = config or VehicleConfig()

    def select_turn_rate(self, previous: float, inputs: InputState) -> float:
        """
        Pick the turn rate from the steering controls.

        Both held cancels out, a single direction sets +/- agility (negated while
        reversing so steering feels mirrored), neither keeps the previous rate.
        """
        left = inputs.is_control_held(Control.TURN_LEFT)
        right = inputs.is_control_held(Control.TURN_RIGHT)
        agility = self.config.agility
        if inputs.is_control_held(Control.BACKWARD):
            agility = -agility

        if left and right:
            return 0.0
        if left:
            return -agility
        if right:
            return agility
        return previous

    def advance_heading(self, heading: float, turn_rate: float, speed: float) -> float:
        if speed > 0:
            return heading + turn_rate * (speed / self.config.max_speed)
        return heading

    def select_acceleration(self, inputs: InputState) -> Vec2:
        """Body-local acceleration for the throttle controls."""
        forward = inputs.is_control_held(Control.FORWARD)
        backward = inputs.is_control_held(Control.BACKWARD)
        if forward and not backward:
            return Vec2(0.0, -self.config.acceleration)
        if backward and not forward:
            return Vec2(0.0, self.config.acceleration)
        return ZERO

    def integrate_velocity(self, velocity: Vec2, world_acceleration: Vec2) -> Vec2:
        velocity = (velocity + world_acceleration).scale(self.config.friction)
        if abs(velocity.magnitude()) < self.config.stop_speed:
            return ZERO
        return velocity

    @staticmethod
    def wrap(position: Vec2, bounds: Tuple[float, float]) -> Vec2:
        """
        Teleport to the opposite edge when leaving the world.

        The overflow is discarded: leaving past the right edge lands at exactly
        x = 0, not at x = overflow.
        """
        width, height = bounds
        x, y = position.x, position.y
        if x > width:
            x = 0.0
        if x < 0:
            x = float(width)
        if y > height:
            y = 0.0
        if y < 0:
            y = float(height)
        return Vec2(x, y)

    def trail_points(self, body: Body, inputs: InputState) -> Tuple[Vec2, ...]:
        """Rear corners of the body in world space, when it is skidding."""
        left = inputs.is_control_held(Control.TURN_LEFT)
        right = inputs.is_control_held(Control.TURN_RIGHT)
        if left == right or not body.speed > self.config.trail_speed_threshold:
            return ()

        pos = body.position
        half_w = body.width / 2
        rear_y = pos.y + body.height / 2
        rear_left = Vec2(pos.x - half_w + self.config.trail_corner_inset, rear_y)
        rear_right = Vec2(pos.x + half_w, rear_y)
        return (
            rear_left.rotate(pos, body.heading),
            rear_right.rotate(pos, body.heading),
        )

    def step(self, body: Body, inputs: InputState, bounds: Tuple[float, float]) -> StepResult:
        """
        Advance the body by one tick.

        Args:
            body: Current state (left untouched).
            inputs: Snapshot of held keys for this tick.
            bounds: (width, height) of the world used for wraparound.

        Returns:
            StepResult with the next body state and 0 or 2 trail points.
        """
        turn_rate = self.select_turn_rate(body.turn_rate, inputs)
        heading = self.advance_heading(body.heading, turn_rate, body.speed)

        acceleration = self.select_acceleration(inputs)
        throttle = inputs.is_control_held(Control.FORWARD) or inputs.is_control_held(Control.BACKWARD)
        steering = inputs.is_control_held(Control.TURN_LEFT) or inputs.is_control_held(Control.TURN_RIGHT)
        # Stale steering is dropped only while on the throttle; coasting keeps it
        if throttle and not steering:
            turn_rate = 0.0

        world_acceleration = acceleration.rotate(ZERO, heading)
        velocity = self.integrate_velocity(body.velocity, world_acceleration)
        position = self.wrap(body.position + velocity, bounds)

        next_body = replace(
            body,
            position=position,
            heading=heading,
            turn_rate=turn_rate,
            velocity=velocity,
            acceleration=acceleration,
        )
        return StepResult(body=next_body, trail_points=self.trail_points(next_body, inputs))
