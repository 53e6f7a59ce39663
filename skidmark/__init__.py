"""Skidmark: a keyboard-driven top-down car that leaves tire marks."""
from .data_models import Body, ConfigurationError, StepResult, VehicleConfig
from .input_state import Control, InputState
from .physics import MotionModel
from .vector_utils import Vec2

__all__ = [
    'Body', 'ConfigurationError', 'StepResult', 'VehicleConfig',
    'Control', 'InputState', 'MotionModel', 'Vec2',
]
