"""
Solar System Gesture Control

Recognizes webcam hand gestures with MediaPipe and turns them into
navigation commands for an interactive solar system view.
"""

__version__ = "0.1.0"

from .types import (
    GestureType,
    AdvancePlanetCommand,
    ToggleOverviewCommand,
    SetFastZoomCommand,
    CameraState,
    ControllerProto,
)
from .config import load_config, Cfg
from .classifier import MalformedLandmarksError, classify_gesture, finger_states, fingers_extended
from .gestures import DispatcherState, GestureDispatcher, GestureProcessor
from .controller import SceneController
from .planets import PLANETS, ORBITING_PLANET_INDICES

__all__ = [
    "GestureType",
    "AdvancePlanetCommand",
    "ToggleOverviewCommand",
    "SetFastZoomCommand",
    "CameraState",
    "ControllerProto",
    "load_config",
    "Cfg",
    "MalformedLandmarksError",
    "classify_gesture",
    "finger_states",
    "fingers_extended",
    "DispatcherState",
    "GestureDispatcher",
    "GestureProcessor",
    "SceneController",
    "PLANETS",
    "ORBITING_PLANET_INDICES",
]
