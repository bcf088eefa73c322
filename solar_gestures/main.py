"""
Main application for gesture-driven solar system navigation.
"""
import argparse
import asyncio
import logging
import time
from typing import List, Optional

import cv2
import numpy as np

from .classifier import fingers_extended
from .config import Cfg, load_config
from .controller import SceneController
from .gestures import GestureProcessor
from .landmarks import HandsTracker
from .types import GestureType

logger = logging.getLogger(__name__)

GESTURE_LABELS = {
    GestureType.NONE: "No gesture",
    GestureType.OPEN_HAND: "OPEN HAND - Next planet",
    GestureType.CLOSED_FIST: "FIST - Zoom + speed up",
    GestureType.VICTORY: "VICTORY - Toggle overview",
}


class GestureRecognitionApp:
    """Main application class for gesture-driven navigation."""

    def __init__(self, config_path: Optional[str] = None, cfg: Optional[Cfg] = None):
        """Initialize the application with configuration."""
        self.config = cfg if cfg is not None else load_config(config_path)
        self.tracker = HandsTracker(
            max_num_hands=self.config.mediapipe.max_num_hands,
            min_detection_conf=self.config.mediapipe.min_detection_confidence,
            min_tracking_conf=self.config.mediapipe.min_tracking_confidence
        )
        self.gesture_processor = GestureProcessor(self.config)
        self.controller = SceneController(self.config.scene)

        # Initialize camera
        self.cap = cv2.VideoCapture(self.config.camera.index)
        self.cap.set(cv2.CAP_PROP_FRAME_WIDTH, self.config.camera.width)
        self.cap.set(cv2.CAP_PROP_FRAME_HEIGHT, self.config.camera.height)
        self.cap.set(cv2.CAP_PROP_FPS, self.config.camera.fps)

        if not self.cap.isOpened():
            raise RuntimeError(f"Failed to open camera {self.config.camera.index}")

    def _frame_timestamp_ms(self) -> float:
        # Webcams often report no position; fall back to the wall clock
        pos_ms = self.cap.get(cv2.CAP_PROP_POS_MSEC)
        if pos_ms and pos_ms > 0:
            return pos_ms
        return time.monotonic() * 1000

    def _draw_hud(self, frame: np.ndarray, landmarks: Optional[List]) -> np.ndarray:
        state = self.controller.state
        planet = self.controller.current_planet
        gesture = self.gesture_processor.dispatcher.last_gesture

        if landmarks:
            status_text = f"Hand: {fingers_extended(landmarks)} fingers"
        else:
            status_text = "No hand detected"

        if state.is_overview:
            view_text = "SYSTEM OVERVIEW"
            stats_text = ""
        else:
            view_text = f"{planet.name} - {planet.description}"
            stats_text = planet.stats_line()
        modifiers_text = f"Zoom x{state.zoom_level:.1f}  Speed x{state.speed_multiplier:.1f}"
        gesture_text = GESTURE_LABELS[gesture]

        cv2.putText(frame, view_text, (10, 30), cv2.FONT_HERSHEY_SIMPLEX, 0.7, (255, 255, 255), 2)
        cv2.putText(frame, stats_text, (10, 55), cv2.FONT_HERSHEY_SIMPLEX, 0.4, (200, 200, 200), 1)
        cv2.putText(frame, modifiers_text, (10, 80), cv2.FONT_HERSHEY_SIMPLEX, 0.5, (255, 255, 255), 1)
        cv2.putText(frame, status_text, (10, 105), cv2.FONT_HERSHEY_SIMPLEX, 0.5, (255, 255, 255), 1)
        cv2.putText(frame, gesture_text, (10, 135), cv2.FONT_HERSHEY_SIMPLEX, 0.6,
                    (0, 0, 255) if gesture == GestureType.NONE else (0, 255, 0), 2)

        height = frame.shape[0]
        cv2.putText(frame, "Open Hand = Next Planet", (10, height - 80), cv2.FONT_HERSHEY_SIMPLEX, 0.5, (255, 255, 255), 1)
        cv2.putText(frame, "Fist = Zoom + Speed", (10, height - 60), cv2.FONT_HERSHEY_SIMPLEX, 0.5, (255, 255, 255), 1)
        cv2.putText(frame, "Victory = Overview", (10, height - 40), cv2.FONT_HERSHEY_SIMPLEX, 0.5, (255, 255, 255), 1)
        cv2.putText(frame, "Press 'q' to quit", (10, height - 20), cv2.FONT_HERSHEY_SIMPLEX, 0.5, (255, 255, 255), 1)
        return frame

    async def run(self):
        """Run the main application loop."""
        logger.info("🚀 Starting %s", self.config.display.window_name)
        landmarks = None

        try:
            while True:
                ret, frame = self.cap.read()
                if not ret:
                    logger.error("❌ Failed to read frame from camera")
                    break

                # Stale frames are shown but never classified twice
                if self.tracker.is_new_frame(self._frame_timestamp_ms()):
                    landmarks = self.tracker.process(frame)
                    _, command = self.gesture_processor.process_frame(
                        landmarks=landmarks,
                        t_now=time.time()
                    )
                    if command is not None:
                        await self.controller.execute(command)

                mirror = self.config.display.mirror
                if mirror:
                    frame = cv2.flip(frame, 1)
                if landmarks and self.config.display.show_landmarks:
                    frame = self.tracker.draw_landmarks(frame, landmarks, mirrored=mirror)
                frame = self._draw_hud(frame, landmarks)

                cv2.imshow(self.config.display.window_name, frame)

                if cv2.waitKey(1) & 0xFF == ord('q'):
                    break
        finally:
            self.close()

    def close(self) -> None:
        """Release camera, detector and windows."""
        if self.cap.isOpened():
            self.cap.release()
        self.tracker.close()
        cv2.destroyAllWindows()


def get_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Navigate the solar system with hand gestures")
    parser.add_argument("--config", help="path to a YAML config file", default=None)
    parser.add_argument("--log-level", help="override the configured log level", default=None)
    return parser.parse_args(argv)


async def main(argv: Optional[List[str]] = None):
    """Entry point for the application."""
    args = get_args(argv)
    config = load_config(args.config)
    level = (args.log_level or config.logging.level).upper()
    logging.basicConfig(level=getattr(logging, level, logging.INFO),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        app = GestureRecognitionApp(cfg=config)
    except RuntimeError as e:
        logger.error("❌ %s", e)
        return 1

    try:
        await app.run()
    except KeyboardInterrupt:
        logger.info("Application interrupted by user")
    return 0


def cli() -> int:
    return asyncio.run(main())


if __name__ == "__main__":
    raise SystemExit(cli())
