"""
Test cases for the scene controller.
"""
import unittest
import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from solar_gestures.config import load_config
from solar_gestures.controller import SceneController
from solar_gestures.planets import PLANETS, ORBITING_PLANET_INDICES
from solar_gestures.types import (
    AdvancePlanetCommand,
    ControllerProto,
    SetFastZoomCommand,
    ToggleOverviewCommand,
)


class TestPlanets(unittest.TestCase):
    """Test the planet catalogue."""

    def test_sun_is_not_orbiting(self):
        self.assertEqual(PLANETS[0].name, "SUN")
        self.assertNotIn(0, ORBITING_PLANET_INDICES)
        self.assertEqual(ORBITING_PLANET_INDICES, list(range(1, len(PLANETS))))

    def test_every_body_has_stats(self):
        for planet in PLANETS:
            with self.subTest(planet=planet.name):
                self.assertIsNotNone(planet.stats)
                self.assertIn(planet.stats.diameter, planet.stats_line())

    def test_earth_stats_and_moon(self):
        earth = PLANETS[3]
        self.assertEqual(earth.stats.day_length, "24 hours")
        self.assertEqual(earth.stats_line(),
                         "Diameter 12,742 km | Temp 15°C (average) | Day 24 hours | Orbit 365.25 days")
        self.assertEqual([moon.name for moon in earth.moons], ["MOON"])

    def test_body_without_stats_has_empty_line(self):
        self.assertEqual(PLANETS[3].moons[0].stats_line(), "")


class TestSceneController(unittest.IsolatedAsyncioTestCase):
    """Test how commands change the camera state."""

    def setUp(self):
        self.cfg = load_config()
        self.controller = SceneController(self.cfg.scene)

    def test_protocol_compliance(self):
        self.assertIsInstance(self.controller, ControllerProto)

    def test_initial_state(self):
        state = self.controller.state
        self.assertEqual(self.controller.current_planet.name, "EARTH")
        self.assertEqual(state.zoom_level, 1.0)
        self.assertEqual(state.speed_multiplier, 1.0)
        self.assertFalse(state.is_overview)

    async def test_advance_planet(self):
        await self.controller.advance_planet()
        self.assertEqual(self.controller.current_planet.name, "MARS")
        self.assertEqual(self.controller.advance_count, 1)

    async def test_advance_wraps_past_sun(self):
        self.controller.state.target_planet_index = ORBITING_PLANET_INDICES[-1]
        await self.controller.advance_planet()
        self.assertEqual(self.controller.state.target_planet_index, ORBITING_PLANET_INDICES[0])
        self.assertEqual(self.controller.current_planet.name, "MERCURY")

    async def test_advance_from_sun_goes_to_first_planet(self):
        self.controller.state.target_planet_index = 0
        await self.controller.advance_planet()
        self.assertEqual(self.controller.state.target_planet_index, ORBITING_PLANET_INDICES[0])

    async def test_advance_resets_modifiers_and_overview(self):
        await self.controller.set_fast_zoom()
        self.controller.state.is_overview = True
        await self.controller.advance_planet()
        state = self.controller.state
        self.assertFalse(state.is_overview)
        self.assertEqual(state.zoom_level, 1.0)
        self.assertEqual(state.speed_multiplier, 1.0)

    async def test_toggle_overview(self):
        await self.controller.set_fast_zoom()
        await self.controller.toggle_overview()
        self.assertTrue(self.controller.state.is_overview)
        self.assertEqual(self.controller.state.zoom_level, 1.0)
        self.assertEqual(self.controller.state.speed_multiplier, 1.0)

        await self.controller.toggle_overview()
        self.assertFalse(self.controller.state.is_overview)
        self.assertEqual(self.controller.overview_toggle_count, 2)

    async def test_fast_zoom_is_idempotent(self):
        for _ in range(3):
            await self.controller.set_fast_zoom()
        state = self.controller.state
        self.assertEqual(state.zoom_level, 2.0)
        self.assertEqual(state.speed_multiplier, 3.0)
        self.assertEqual(self.controller.current_planet.name, "EARTH")

    async def test_fast_zoom_leaves_overview(self):
        await self.controller.toggle_overview()
        await self.controller.set_fast_zoom()
        self.assertFalse(self.controller.state.is_overview)
        self.assertEqual(self.controller.state.zoom_level, 2.0)

    async def test_execute_routes_commands(self):
        await self.controller.execute(AdvancePlanetCommand())
        await self.controller.execute(ToggleOverviewCommand())
        self.assertEqual(self.controller.advance_count, 1)
        self.assertTrue(self.controller.state.is_overview)
        await self.controller.execute(SetFastZoomCommand())
        self.assertFalse(self.controller.state.is_overview)

    async def test_execute_rejects_unknown_command(self):
        with self.assertRaises(TypeError):
            await self.controller.execute("next")


if __name__ == '__main__':
    unittest.main()
