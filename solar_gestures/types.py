"""
Type definitions for the solar system gesture control system.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Protocol, Sequence, Tuple, Union, runtime_checkable


# Normalized (x, y, z) image coordinates; z is carried but never classified on
Landmark = Tuple[float, float, float]
HandLandmarks = Sequence[Landmark]


class GestureType(str, Enum):
    """Discrete gesture recognized from a single frame."""
    NONE = "NONE"
    OPEN_HAND = "OPEN_HAND"
    CLOSED_FIST = "CLOSED_FIST"
    VICTORY = "VICTORY"


@dataclass(frozen=True)
class AdvancePlanetCommand:
    """Command to move the camera to the next orbiting planet."""


@dataclass(frozen=True)
class ToggleOverviewCommand:
    """Command to flip between planet view and system overview."""


@dataclass(frozen=True)
class SetFastZoomCommand:
    """Command to engage zoom and speed-up while a fist is held."""


GestureCommand = Union[AdvancePlanetCommand, ToggleOverviewCommand, SetFastZoomCommand]


@dataclass
class CameraState:
    """Current navigation state of the solar system view."""
    target_planet_index: int
    zoom_level: float  # 1 = normal, 2 = close
    speed_multiplier: float  # orbit animation speed factor
    is_overview: bool


@runtime_checkable
class ControllerProto(Protocol):
    """Abstract protocol for controllers that execute gesture commands."""

    async def advance_planet(self) -> None:
        """Move to the next orbiting planet."""
        ...

    async def toggle_overview(self) -> None:
        """Enter or leave the overview."""
        ...

    async def set_fast_zoom(self) -> None:
        """Engage zoom and speed modifiers."""
        ...
