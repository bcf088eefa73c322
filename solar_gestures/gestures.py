"""
Gesture dispatch: turns the per-frame gesture stream into navigation commands.
"""
import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from .classifier import classify_gesture
from .config import Cfg
from .types import (
    AdvancePlanetCommand,
    GestureCommand,
    GestureType,
    HandLandmarks,
    SetFastZoomCommand,
    ToggleOverviewCommand,
)

logger = logging.getLogger(__name__)

DEFAULT_COOLDOWN_MS = 1000


@dataclass
class DispatcherState:
    """Timing state of one camera session."""
    last_action_time: Optional[float] = None  # seconds, None until a one-shot command fires
    last_gesture: GestureType = GestureType.NONE


class GestureDispatcher:
    """
    Rate-limits gestures into commands.

    Features:
    - OPEN_HAND and VICTORY are one-shot and share a single cooldown window
    - CLOSED_FIST is level-triggered and fires on every frame it is held
    - The last observed gesture is recorded on every frame for status display

    Not thread-safe: call on_frame from the frame loop only.
    """

    def __init__(self, cooldown_ms: int = DEFAULT_COOLDOWN_MS):
        """Initialize the dispatcher with an empty session state."""
        self.cooldown_ms = cooldown_ms
        self.state = DispatcherState()

    @classmethod
    def from_config(cls, cfg: Cfg) -> "GestureDispatcher":
        return cls(cooldown_ms=cfg.gestures.cooldown_ms)

    @property
    def last_gesture(self) -> GestureType:
        return self.state.last_gesture

    def reset(self) -> None:
        """Start a new session."""
        self.state = DispatcherState()

    def _cooldown_elapsed(self, t_now: float) -> bool:
        if self.state.last_action_time is None:
            return True
        elapsed_ms = (t_now - self.state.last_action_time) * 1000
        return elapsed_ms > self.cooldown_ms

    def on_frame(self, gesture: GestureType, t_now: float) -> Optional[GestureCommand]:
        """
        Process the gesture of a new frame.

        Args:
            gesture: Gesture classified for this frame
            t_now: Current timestamp in seconds

        Returns:
            Command to execute, or None
        """
        self.state.last_gesture = gesture

        if gesture == GestureType.CLOSED_FIST:
            return SetFastZoomCommand()

        if gesture == GestureType.OPEN_HAND:
            command: GestureCommand = AdvancePlanetCommand()
        elif gesture == GestureType.VICTORY:
            command = ToggleOverviewCommand()
        else:
            return None

        if not self._cooldown_elapsed(t_now):
            logger.debug("%s suppressed by cooldown", gesture.value)
            return None

        self.state.last_action_time = t_now
        logger.debug("%s accepted -> %s", gesture.value, type(command).__name__)
        return command


class GestureProcessor:
    """
    Per-frame pipeline: classify the observed hand, then dispatch.
    """

    def __init__(self, cfg: Cfg):
        """Initialize gesture processor with configuration."""
        self.cfg = cfg
        self.dispatcher = GestureDispatcher.from_config(cfg)

    def process_frame(self, landmarks: Optional[HandLandmarks],
                      t_now: float) -> Tuple[GestureType, Optional[GestureCommand]]:
        """
        Process a new frame.

        Args:
            landmarks: Hand landmarks (None if no hand detected)
            t_now: Current timestamp in seconds

        Returns:
            Tuple of (gesture, command)
        """
        if landmarks is None:
            gesture = GestureType.NONE
        else:
            gesture = classify_gesture(landmarks)

        return gesture, self.dispatcher.on_frame(gesture, t_now)
