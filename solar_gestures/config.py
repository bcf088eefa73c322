"""
Configuration management for the solar system gesture control system.
"""
import yaml
from pathlib import Path
from typing import Optional, Dict, Any
from dataclasses import dataclass


DEFAULT_CONFIG_PATH = Path(__file__).parent / "config.default.yaml"


@dataclass
class CameraConfig:
    """Camera configuration settings."""
    index: int
    width: int
    height: int
    fps: int


@dataclass
class MediaPipeConfig:
    """MediaPipe Hands configuration settings."""
    max_num_hands: int
    min_detection_confidence: float
    min_tracking_confidence: float


@dataclass
class GesturesConfig:
    """Gesture dispatch configuration."""
    cooldown_ms: int


@dataclass
class SceneConfig:
    """Camera modifiers applied by navigation commands."""
    start_planet_index: int
    default_zoom: float
    engaged_zoom: float
    default_speed: float
    engaged_speed: float


@dataclass
class DisplayConfig:
    """Display configuration settings."""
    show_landmarks: bool
    mirror: bool
    window_name: str


@dataclass
class LoggingConfig:
    """Logging configuration settings."""
    level: str


@dataclass
class Cfg:
    """Main configuration class."""
    camera: CameraConfig
    mediapipe: MediaPipeConfig
    gestures: GesturesConfig
    scene: SceneConfig
    display: DisplayConfig
    logging: LoggingConfig


def load_config(path: Optional[str] = None) -> Cfg:
    """
    Load configuration from YAML file.

    Args:
        path: Path to config file. If None, uses the packaged config.default.yaml

    Returns:
        Configuration object with all settings
    """
    config_path = Path(path) if path is not None else DEFAULT_CONFIG_PATH
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, 'r') as f:
        data = yaml.safe_load(f)

    return _dict_to_config(data)


def _dict_to_config(data: Dict[str, Any]) -> Cfg:
    """Convert dictionary to configuration object."""
    camera_data = data['camera']
    camera = CameraConfig(
        index=camera_data['index'],
        width=camera_data['width'],
        height=camera_data['height'],
        fps=camera_data['fps']
    )

    mp_data = data['mediapipe']
    mediapipe = MediaPipeConfig(
        max_num_hands=mp_data['max_num_hands'],
        min_detection_confidence=mp_data['min_detection_confidence'],
        min_tracking_confidence=mp_data['min_tracking_confidence']
    )

    gestures = GesturesConfig(cooldown_ms=data['gestures']['cooldown_ms'])

    scene_data = data['scene']
    scene = SceneConfig(
        start_planet_index=scene_data['start_planet_index'],
        default_zoom=float(scene_data['default_zoom']),
        engaged_zoom=float(scene_data['engaged_zoom']),
        default_speed=float(scene_data['default_speed']),
        engaged_speed=float(scene_data['engaged_speed'])
    )

    display_data = data['display']
    display = DisplayConfig(
        show_landmarks=display_data['show_landmarks'],
        mirror=display_data['mirror'],
        window_name=display_data['window_name']
    )

    logging_config = LoggingConfig(level=str(data['logging']['level']).upper())

    return Cfg(
        camera=camera,
        mediapipe=mediapipe,
        gestures=gestures,
        scene=scene,
        display=display,
        logging=logging_config
    )
