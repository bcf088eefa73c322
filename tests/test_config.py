"""
Test cases for configuration loading.
"""
import tempfile
import unittest
import sys
from pathlib import Path

import yaml

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from solar_gestures.config import DEFAULT_CONFIG_PATH, load_config


class TestLoadConfig(unittest.TestCase):
    """Test YAML configuration loading."""

    def test_default_config(self):
        cfg = load_config()
        self.assertEqual(cfg.gestures.cooldown_ms, 1000)
        self.assertEqual(cfg.mediapipe.max_num_hands, 1)
        self.assertEqual(cfg.scene.start_planet_index, 3)
        self.assertEqual(cfg.scene.engaged_zoom, 2.0)
        self.assertEqual(cfg.scene.engaged_speed, 3.0)
        self.assertEqual(cfg.logging.level, "INFO")

    def test_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            load_config("/nonexistent/config.yaml")

    def _write(self, data) -> str:
        tmp = tempfile.NamedTemporaryFile("w", suffix=".yaml", delete=False)
        with tmp:
            yaml.safe_dump(data, tmp)
        self.addCleanup(Path(tmp.name).unlink)
        return tmp.name

    def test_custom_values(self):
        with open(DEFAULT_CONFIG_PATH) as f:
            data = yaml.safe_load(f)
        data["gestures"]["cooldown_ms"] = 250
        data["logging"]["level"] = "debug"
        cfg = load_config(self._write(data))
        self.assertEqual(cfg.gestures.cooldown_ms, 250)
        self.assertEqual(cfg.logging.level, "DEBUG")

    def test_missing_section(self):
        with open(DEFAULT_CONFIG_PATH) as f:
            data = yaml.safe_load(f)
        del data["scene"]
        with self.assertRaises(KeyError):
            load_config(self._write(data))


if __name__ == '__main__':
    unittest.main()
