"""
Hand landmark detection using MediaPipe.
"""
import logging
import cv2
import mediapipe as mp
import numpy as np
from typing import Optional, List

from .types import Landmark

logger = logging.getLogger(__name__)


class HandsTracker:
    """Hand landmark tracker using MediaPipe Hands."""

    def __init__(self, max_num_hands: int = 1, min_detection_conf: float = 0.5, min_tracking_conf: float = 0.5):
        """
        Initialize the hands tracker.

        Args:
            max_num_hands: Maximum number of hands to detect
            min_detection_conf: Minimum confidence for hand detection
            min_tracking_conf: Minimum confidence for hand tracking

        Raises:
            RuntimeError: if the MediaPipe model cannot be loaded
        """
        self.mp_hands = mp.solutions.hands
        try:
            self.hands = self.mp_hands.Hands(
                static_image_mode=False,
                max_num_hands=max_num_hands,
                min_detection_confidence=min_detection_conf,
                min_tracking_confidence=min_tracking_conf
            )
        except Exception as e:
            raise RuntimeError(f"Failed to initialize MediaPipe Hands: {e}") from e
        self.last_frame_time: Optional[float] = None

    def is_new_frame(self, timestamp_ms: float) -> bool:
        """
        Check whether a frame has not been seen yet.

        Frames repeating the previous source timestamp are stale and must not
        be classified again.

        Args:
            timestamp_ms: Source timestamp of the frame

        Returns:
            True if the frame is new
        """
        if timestamp_ms == self.last_frame_time:
            return False
        self.last_frame_time = timestamp_ms
        return True

    def process(self, frame_bgr: np.ndarray) -> Optional[List[Landmark]]:
        """
        Process a frame and return hand landmarks.

        Args:
            frame_bgr: Input frame in BGR format

        Returns:
            List of 21 (x, y, z) coordinates in [0..1] range, or None if no hand
            detected or the frame could not be processed
        """
        try:
            # MediaPipe expects RGB
            frame_rgb = cv2.cvtColor(frame_bgr, cv2.COLOR_BGR2RGB)
            results = self.hands.process(frame_rgb)
        except Exception as e:
            logger.warning("⚠️ Hand detection failed, treating frame as empty: %s", e)
            return None

        if results.multi_hand_landmarks:
            # Only the first detected hand drives navigation
            hand_landmarks = results.multi_hand_landmarks[0]
            return [(lm.x, lm.y, lm.z) for lm in hand_landmarks.landmark]

        return None

    def draw_landmarks(self, frame: np.ndarray, landmarks: List[Landmark],
                       mirrored: bool = False) -> np.ndarray:
        """
        Draw the hand skeleton on the frame.

        Args:
            frame: Input frame
            landmarks: List of (x, y, z) coordinates in [0..1] range
            mirrored: True if the frame was already flipped horizontally

        Returns:
            Frame with the skeleton drawn
        """
        height, width = frame.shape[:2]
        points = [
            (int(((1 - x) if mirrored else x) * width), int(y * height))
            for x, y, _z in landmarks
        ]

        for start, end in self.mp_hands.HAND_CONNECTIONS:
            cv2.line(frame, points[start], points[end], (255, 255, 255), 1)
        for point in points:
            cv2.circle(frame, point, 3, (0, 255, 0), -1)

        return frame

    def close(self) -> None:
        """Release the MediaPipe graph."""
        self.hands.close()
