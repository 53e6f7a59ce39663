#!/usr/bin/env python3
"""
Keyboard state tracking.

Keys are tracked by lower-cased identifiers ("w", "a", "arrowup", ...) so a
letter key and an arrow key can act as synonyms for one logical control.
"""
from enum import Enum
from typing import Dict, Set, Tuple

import pygame


class Control(Enum):
    """Logical driving controls."""
    TURN_LEFT = "turn_left"
    TURN_RIGHT = "turn_right"
    FORWARD = "forward"
    BACKWARD = "backward"


CONTROL_KEYS: Dict[Control, Tuple[str, ...]] = {
    Control.TURN_LEFT: ("a", "arrowleft"),
    Control.TURN_RIGHT: ("d", "arrowright"),
    Control.FORWARD: ("w", "arrowup"),
    Control.BACKWARD: ("s", "arrowdown"),
}

# pygame names the arrows "left", "up", ...; keep the arrow* identifiers
_NAMED_KEYS: Dict[int, str] = {
    pygame.K_LEFT: "arrowleft",
    pygame.K_RIGHT: "arrowright",
    pygame.K_UP: "arrowup",
    pygame.K_DOWN: "arrowdown",
}


def key_identifier(key: int) -> str:
    """Map a pygame key code to the identifier used by InputState."""
    named = _NAMED_KEYS.get(key)
    if named is not None:
        return named
    return pygame.key.name(key).lower()


class InputState:
    """Set of currently held key identifiers."""

    def __init__(self):
        self._held: Set[str] = set()

    def set_held(self, ident: str) -> None:
        self._held.add(ident.lower())

    def set_released(self, ident: str) -> None:
        self._held.discard(ident.lower())

    def clear(self) -> None:
        self._held.clear()

    def is_any_held(self, *idents: str) -> bool:
        return any(i.lower() in self._held for i in idents)

    def is_control_held(self, control: Control) -> bool:
        return self.is_any_held(*CONTROL_KEYS[control])

    def handle_event(self, event: pygame.event.Event) -> None:
        """Apply a KEYDOWN/KEYUP event; anything else is ignored."""
        if event.type == pygame.KEYDOWN:
            self.set_held(key_identifier(event.key))
        elif event.type == pygame.KEYUP:
            self.set_released(key_identifier(event.key))
