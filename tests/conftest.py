"""Shared fixtures; pygame runs headless for the whole suite."""
import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from skidmark.data_models import Body, VehicleConfig
from skidmark.input_state import InputState
from skidmark.vector_utils import Vec2


@pytest.fixture
def display():
    """Initialise a dummy display so event and key-name calls work."""
    pygame.display.init()
    screen = pygame.display.set_mode((800, 600))
    yield screen
    pygame.display.quit()


@pytest.fixture
def config():
    return VehicleConfig()


@pytest.fixture
def body():
    return Body(position=Vec2(400.0, 400.0), width=25.0, height=50.0)


@pytest.fixture
def held():
    """Factory for an InputState with the given identifiers held."""
    def _held(*idents: str) -> InputState:
        inputs = InputState()
        for ident in idents:
            inputs.set_held(ident)
        return inputs
    return _held
