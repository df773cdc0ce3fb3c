"""
Gesture detection module for hand gestures.

Works on the 21 MediaPipe hand landmarks (normalized x/y, z ignored):
    Wrist: 0
    Thumb: 1 (cmc), 2 (mcp), 3 (ip), 4 (tip)
    Index: 5 (mcp), 6 (pip), 7 (dip), 8 (tip)
    Middle: 9, 10, 11, 12
    Ring: 13, 14, 15, 16
    Pinky: 17, 18, 19, 20
"""
import math
from collections import namedtuple
from enum import Enum


EXTENSION_THRESHOLD = 0.02  # Tip must clear the joint by this much
OPEN_RATIO = 1.6            # dist(tip, mcp) / dist(pip, mcp) above this = open
THUMB_OPEN_DISTANCE = 0.15  # Thumb tip to index mcp
PINCH_DISTANCE = 0.08       # Thumb tip to index tip

NUM_LANDMARKS = 21

THUMB_MCP, THUMB_IP, THUMB_TIP = 2, 3, 4
INDEX_MCP, INDEX_PIP, INDEX_TIP = 5, 6, 8
MIDDLE_MCP, MIDDLE_PIP, MIDDLE_TIP = 9, 10, 12
RING_MCP, RING_PIP, RING_TIP = 13, 14, 16
PINKY_MCP, PINKY_PIP, PINKY_TIP = 17, 18, 20


Landmark = namedtuple("Landmark", ["x", "y", "z"], defaults=[0.0])

FingerStates = namedtuple(
    "FingerStates",
    [
        "thumb_open",
        "index_open",
        "middle_open",
        "ring_open",
        "pinky_open",
        "thumb_up",
        "thumb_down",
        "pinch_distance",
    ],
)


class Gesture(Enum):
    MIDDLE_FINGER = "MIDDLE_FINGER"
    OK = "OK"
    GUN = "GUN"
    THUMBS_DOWN = "THUMBS_DOWN"


# Highlight panel metadata, in display order
GESTURE_LABELS = {
    Gesture.MIDDLE_FINGER: {"icon": "🖕", "label": "Middle finger", "color": "#ff4d4d"},
    Gesture.THUMBS_DOWN: {"icon": "👎", "label": "Thumbs down", "color": "#ffad33"},
    Gesture.OK: {"icon": "👌", "label": "OK", "color": "#33cc33"},
    Gesture.GUN: {"icon": "🔫", "label": "Gun", "color": "#ff4d4d"},
}


def distance(p1, p2):
    """2D distance between two landmarks, z is ignored."""
    return math.hypot(p1.x - p2.x, p1.y - p2.y)


def is_finger_extended(tip, pip):
    """Finger pointing up in image space (y grows downwards)."""
    return tip.y < pip.y - EXTENSION_THRESHOLD


def is_thumb_pointing_down(tip, ip):
    return tip.y > ip.y + EXTENSION_THRESHOLD


def is_finger_open(tip, pip, mcp):
    """
    A curled finger keeps its tip close to its own knuckle, an extended one
    reaches well past the pip. Exactly OPEN_RATIO counts as closed.
    """
    return distance(tip, mcp) > distance(pip, mcp) * OPEN_RATIO


def is_thumb_open(landmarks):
    # Approximation: thumb tip far from the index knuckle
    return distance(landmarks[THUMB_TIP], landmarks[INDEX_MCP]) > THUMB_OPEN_DISTANCE


def is_thumb_up(landmarks):
    return landmarks[THUMB_TIP].y < landmarks[THUMB_IP].y


def is_thumb_down(landmarks):
    # Not the complement of is_thumb_up: both are False when the y values match
    return landmarks[THUMB_TIP].y > landmarks[THUMB_IP].y


def finger_states(landmarks):
    """Snapshot of every finger signal the rules look at."""
    if len(landmarks) < NUM_LANDMARKS:
        raise ValueError(
            f"Expected {NUM_LANDMARKS} hand landmarks, got {len(landmarks)}"
        )

    return FingerStates(
        thumb_open=is_thumb_open(landmarks),
        index_open=is_finger_open(landmarks[INDEX_TIP], landmarks[INDEX_PIP], landmarks[INDEX_MCP]),
        middle_open=is_finger_open(landmarks[MIDDLE_TIP], landmarks[MIDDLE_PIP], landmarks[MIDDLE_MCP]),
        ring_open=is_finger_open(landmarks[RING_TIP], landmarks[RING_PIP], landmarks[RING_MCP]),
        pinky_open=is_finger_open(landmarks[PINKY_TIP], landmarks[PINKY_PIP], landmarks[PINKY_MCP]),
        thumb_up=is_thumb_up(landmarks),
        thumb_down=is_thumb_down(landmarks),
        pinch_distance=distance(landmarks[THUMB_TIP], landmarks[INDEX_TIP]),
    )


def _is_middle_finger(s):
    # Thumb state is irrelevant
    return s.middle_open and not s.index_open and not s.ring_open and not s.pinky_open


def _is_ok(s):
    # Index and thumb tips pinched, the rest open
    return s.pinch_distance < PINCH_DISTANCE and s.middle_open and s.ring_open and s.pinky_open


def _is_gun(s):
    return (
        s.thumb_open
        and s.index_open
        and not s.middle_open
        and not s.ring_open
        and not s.pinky_open
        and s.thumb_up
    )


def _is_thumbs_down(s):
    fingers_closed = not (s.index_open or s.middle_open or s.ring_open or s.pinky_open)
    return fingers_closed and s.thumb_open and s.thumb_down


# Checked in order, first match wins. The rules overlap, so order matters.
# A thumbs up matches none of them and is left alone.
GESTURE_RULES = (
    (Gesture.MIDDLE_FINGER, _is_middle_finger),
    (Gesture.OK, _is_ok),
    (Gesture.GUN, _is_gun),
    (Gesture.THUMBS_DOWN, _is_thumbs_down),
)


def classify(landmarks):
    """
    Classify a single hand.

    Args:
        landmarks: Sequence of 21 landmarks with .x and .y (MediaPipe
            NormalizedLandmark or Landmark)

    Returns:
        The matching Gesture, or None
    """
    states = finger_states(landmarks)
    for gesture, matches in GESTURE_RULES:
        if matches(states):
            return gesture
    return None
