"""
Scene controller that applies gesture commands to the camera state.
"""
import logging
from typing import Optional

from .config import SceneConfig
from .planets import PLANETS, ORBITING_PLANET_INDICES, PlanetConfig
from .types import (
    AdvancePlanetCommand,
    CameraState,
    GestureCommand,
    SetFastZoomCommand,
    ToggleOverviewCommand,
)

logger = logging.getLogger(__name__)


class SceneController:
    """Owns the navigation state consumed by the renderer."""

    def __init__(self, scene: Optional[SceneConfig] = None):
        """Initialize the controller at the configured start planet."""
        self.scene = scene or SceneConfig(
            start_planet_index=3,
            default_zoom=1.0,
            engaged_zoom=2.0,
            default_speed=1.0,
            engaged_speed=3.0,
        )
        self.state = CameraState(
            target_planet_index=self.scene.start_planet_index,
            zoom_level=self.scene.default_zoom,
            speed_multiplier=self.scene.default_speed,
            is_overview=False,
        )
        self.advance_count = 0
        self.overview_toggle_count = 0

    @property
    def current_planet(self) -> PlanetConfig:
        return PLANETS[self.state.target_planet_index]

    def _reset_modifiers(self) -> None:
        self.state.zoom_level = self.scene.default_zoom
        self.state.speed_multiplier = self.scene.default_speed

    async def advance_planet(self) -> None:
        """Leave the overview and move to the next orbiting planet."""
        self.state.is_overview = False
        try:
            position = ORBITING_PLANET_INDICES.index(self.state.target_planet_index)
        except ValueError:
            position = -1
        next_position = (position + 1) % len(ORBITING_PLANET_INDICES)
        self.state.target_planet_index = ORBITING_PLANET_INDICES[next_position]
        self._reset_modifiers()
        self.advance_count += 1
        logger.info("Advance to %s (call #%d)", self.current_planet.name, self.advance_count)

    async def toggle_overview(self) -> None:
        """Flip the overview flag."""
        self.state.is_overview = not self.state.is_overview
        self._reset_modifiers()
        self.overview_toggle_count += 1
        logger.info("Overview %s (call #%d)",
                    "on" if self.state.is_overview else "off", self.overview_toggle_count)

    async def set_fast_zoom(self) -> None:
        """Engage zoom and speed modifiers. Repeated calls are no-ops."""
        if (not self.state.is_overview
                and self.state.zoom_level == self.scene.engaged_zoom
                and self.state.speed_multiplier == self.scene.engaged_speed):
            return
        self.state.is_overview = False
        self.state.zoom_level = self.scene.engaged_zoom
        self.state.speed_multiplier = self.scene.engaged_speed
        logger.info("Fast zoom engaged on %s", self.current_planet.name)

    async def execute(self, command: GestureCommand) -> None:
        """Route a command to the matching action."""
        if isinstance(command, AdvancePlanetCommand):
            await self.advance_planet()
        elif isinstance(command, ToggleOverviewCommand):
            await self.toggle_overview()
        elif isinstance(command, SetFastZoomCommand):
            await self.set_fast_zoom()
        else:
            raise TypeError(f"Unsupported command: {command!r}")
