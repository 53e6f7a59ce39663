#!/usr/bin/env python3
"""
Rendering for the car and its tire marks.

Two layers of the window size are kept:
- the body layer is cleared every frame and holds only the car;
- the trail layer is never cleared, so marks accumulate across frames.
"""
import math
from typing import Optional, Tuple

import pygame

from .constants import (
    SAFE_COORD_LIMIT,
    TRAIL_MARK_ALPHA,
    TRAIL_MARK_COLOR,
    TRAIL_MARK_SIZE,
)
from .data_models import Body
from .vector_utils import Vec2, ZERO


def _safe_point(pt) -> Optional[Tuple[int, int]]:
    try:
        x, y = int(pt[0]), int(pt[1])
    except (TypeError, ValueError, OverflowError):
        return None
    if -SAFE_COORD_LIMIT <= x <= SAFE_COORD_LIMIT and -SAFE_COORD_LIMIT <= y <= SAFE_COORD_LIMIT:
        return (x, y)
    return None


class TrailRenderer:
    """Draws the car on the body layer and stamps marks on the trail layer."""

    def __init__(self, size: Tuple[int, int]):
        self.size = size
        self.body_layer = pygame.Surface(size, pygame.SRCALPHA)
        self.trail_layer = pygame.Surface(size, pygame.SRCALPHA)
        self._mark = pygame.Surface((TRAIL_MARK_SIZE, TRAIL_MARK_SIZE), pygame.SRCALPHA)
        self._mark.fill((*TRAIL_MARK_COLOR, TRAIL_MARK_ALPHA))
        self._scaled_sprite: Optional[pygame.Surface] = None
        self._scaled_key = None

    def clear_body_layer(self) -> None:
        self.body_layer.fill((0, 0, 0, 0))

    def clear_trails(self) -> None:
        self.trail_layer.fill((0, 0, 0, 0))

    def _scaled(self, sprite: pygame.Surface, width: float, height: float) -> pygame.Surface:
        size = (max(1, round(width)), max(1, round(height)))
        key = (id(sprite), size)
        if self._scaled_key != key:
            # smoothscale only handles 24/32-bit surfaces
            if sprite.get_bitsize() in (24, 32):
                self._scaled_sprite = pygame.transform.smoothscale(sprite, size)
            else:
                self._scaled_sprite = pygame.transform.scale(sprite, size)
            self._scaled_key = key
        return self._scaled_sprite

    def draw_body(self, body: Body, sprite: pygame.Surface) -> pygame.Rect:
        """
        Draw the sprite rotated by the body's heading.

        The rotation pivot sits on the sprite's vertical axis a quarter of the
        way down from its front edge, and that pivot is placed on body.position.
        """
        scaled = self._scaled(sprite, body.width, body.height)
        # sprite centre relative to the pivot, in body-local axes
        centre_offset = Vec2(0.0, body.height / 4).rotate(ZERO, body.heading)
        centre = body.position + centre_offset
        # pygame rotates counter-clockwise; heading is clockwise on screen
        rotated = pygame.transform.rotate(scaled, -math.degrees(body.heading))
        rect = rotated.get_rect(center=(round(centre.x), round(centre.y)))
        self.body_layer.blit(rotated, rect)
        return rect

    def stamp_trail(self, point: Vec2) -> None:
        p = _safe_point(point.as_tuple())
        if p is None:
            return
        self.trail_layer.blit(self._mark, p)

    def compose(self, target: pygame.Surface, background) -> None:
        target.fill(background)
        target.blit(self.trail_layer, (0, 0))
        target.blit(self.body_layer, (0, 0))
