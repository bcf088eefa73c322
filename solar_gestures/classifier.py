"""
Landmark-based finger extension tests and static gesture classification.

Extension is judged by radial distance from the wrist: a finger counts as
extended when its tip lies farther from the wrist than its reference joint.
The test assumes a roughly upright hand facing the camera. A hand rotated
sideways or pointing down can be misclassified; the gesture vocabulary is
tuned against this heuristic, so it is kept as is.
"""
from dataclasses import dataclass
from typing import Dict, Tuple

from .types import GestureType, HandLandmarks


NUM_LANDMARKS = 21
WRIST = 0

# (tip, reference joint) per finger
FINGER_JOINTS: Dict[str, Tuple[int, int]] = {
    "thumb": (4, 2),
    "index": (8, 6),
    "middle": (12, 10),
    "ring": (16, 14),
    "pinky": (20, 18),
}


class MalformedLandmarksError(ValueError):
    """Raised when a hand observation does not hold exactly 21 landmarks."""


@dataclass(frozen=True)
class FingerStates:
    """Extension state of each finger for one frame."""
    thumb: bool
    index: bool
    middle: bool
    ring: bool
    pinky: bool

    @property
    def count(self) -> int:
        return sum((self.thumb, self.index, self.middle, self.ring, self.pinky))


def _check_landmarks(landmarks: HandLandmarks) -> None:
    if len(landmarks) != NUM_LANDMARKS:
        raise MalformedLandmarksError(
            f"Expected {NUM_LANDMARKS} landmarks, got {len(landmarks)}"
        )


def wrist_distance_sq(landmarks: HandLandmarks, idx: int) -> float:
    """
    Squared distance in the image plane between the wrist and a landmark.

    Args:
        landmarks: List of 21 hand landmarks
        idx: Landmark index

    Returns:
        Squared x/y distance (depth is ignored)
    """
    wrist = landmarks[WRIST]
    point = landmarks[idx]
    dx = point[0] - wrist[0]
    dy = point[1] - wrist[1]
    return dx * dx + dy * dy


def is_finger_extended(landmarks: HandLandmarks, tip_idx: int, pip_idx: int) -> bool:
    """
    Check whether a finger is extended.

    Args:
        landmarks: List of 21 hand landmarks
        tip_idx: Index of the finger tip
        pip_idx: Index of the joint the tip is compared against

    Returns:
        True if the tip is strictly farther from the wrist than the joint
    """
    return wrist_distance_sq(landmarks, tip_idx) > wrist_distance_sq(landmarks, pip_idx)


def finger_states(landmarks: HandLandmarks) -> FingerStates:
    """
    Compute the extension state of all five fingers.

    Raises:
        MalformedLandmarksError: if the hand does not have 21 landmarks
    """
    _check_landmarks(landmarks)
    return FingerStates(**{
        name: is_finger_extended(landmarks, tip, pip)
        for name, (tip, pip) in FINGER_JOINTS.items()
    })


def fingers_extended(landmarks: HandLandmarks) -> int:
    """Number of extended fingers (0-5)."""
    return finger_states(landmarks).count


def classify_gesture(landmarks: HandLandmarks) -> GestureType:
    """
    Classify one hand observation into a gesture.

    Rules are checked in priority order, first match wins:
    index+middle up with ring+pinky down is VICTORY, four fingers down is
    CLOSED_FIST, all five up is OPEN_HAND. The thumb is ignored for
    VICTORY and CLOSED_FIST since its tracking is the noisiest.

    Args:
        landmarks: List of 21 hand landmarks

    Returns:
        Recognized gesture, GestureType.NONE if nothing matches

    Raises:
        MalformedLandmarksError: if the hand does not have 21 landmarks
    """
    fingers = finger_states(landmarks)

    if fingers.index and fingers.middle and not fingers.ring and not fingers.pinky:
        return GestureType.VICTORY

    if not (fingers.index or fingers.middle or fingers.ring or fingers.pinky):
        return GestureType.CLOSED_FIST

    if fingers.count == 5:
        return GestureType.OPEN_HAND

    return GestureType.NONE
