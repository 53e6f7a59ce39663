#!/usr/bin/env python3
"""
Sprite loading for the controlled car.

The Body cannot be built before its sprite is available: the sprite's pixel
size fixes the body's aspect ratio.
"""
import logging
import os
from typing import Optional

import pygame

from .constants import CAR_BODY_COLOR, CAR_GLASS_COLOR, CAR_WHEEL_COLOR

log = logging.getLogger(__name__)


class AssetLoadError(RuntimeError):
    """Raised when the car sprite cannot be loaded."""


def build_default_sprite(width: int = 50, height: int = 100) -> pygame.Surface:
    """Draw a top-down car facing up (front at the top of the surface)."""
    surf = pygame.Surface((width, height), pygame.SRCALPHA)
    wheel_w = max(2, width // 6)
    wheel_h = max(4, height // 6)
    for wx in (0, width - wheel_w):
        for wy in (height // 8, height - height // 8 - wheel_h):
            pygame.draw.rect(surf, CAR_WHEEL_COLOR, (wx, wy, wheel_w, wheel_h))
    body = pygame.Rect(wheel_w // 2, 0, width - wheel_w, height)
    pygame.draw.rect(surf, CAR_BODY_COLOR, body, border_radius=max(2, width // 5))
    windshield = pygame.Rect(body.x + body.w // 6, height // 5, body.w * 2 // 3, height // 6)
    pygame.draw.rect(surf, CAR_GLASS_COLOR, windshield, border_radius=2)
    return surf


def load_sprite(path: Optional[str] = None) -> pygame.Surface:
    """
    Load the car sprite from `path`, or draw the built-in one when no path is given.

    Raises:
        AssetLoadError: the file is missing or pygame cannot decode it.
    """
    if path is None:
        sprite = build_default_sprite()
        log.debug("using built-in car sprite %dx%d", *sprite.get_size())
    else:
        if not os.path.isfile(path):
            raise AssetLoadError(f"car sprite not found: {path}")
        try:
            sprite = pygame.image.load(path)
        except pygame.error as exc:
            raise AssetLoadError(f"could not load car sprite {path}: {exc}") from exc
        log.info("loaded car sprite %s (%dx%d)", path, *sprite.get_size())

    # convert_alpha needs a display mode
    if pygame.display.get_init() and pygame.display.get_surface() is not None:
        sprite = sprite.convert_alpha()
    return sprite
