"""
Shared fixtures: synthetic hands built from simple finger states.
"""
import sys
from pathlib import Path

import numpy as np
import pytest

# Modules live at the repository root
sys.path.insert(0, str(Path(__file__).parent.parent))

from gesture_detector import Landmark  # noqa: E402

FINGER_COLUMNS = {"index": 0.42, "middle": 0.50, "ring": 0.58, "pinky": 0.66}

# Thumb (cmc, mcp, ip, tip) per pose. Index mcp sits at (0.42, 0.60).
THUMB_POSES = {
    "up": [(0.40, 0.75), (0.36, 0.70), (0.30, 0.60), (0.28, 0.45)],
    "down": [(0.40, 0.75), (0.36, 0.70), (0.30, 0.75), (0.28, 0.85)],
    "tucked": [(0.40, 0.75), (0.36, 0.70), (0.40, 0.65), (0.43, 0.62)],
    "level": [(0.40, 0.75), (0.36, 0.70), (0.30, 0.60), (0.20, 0.60)],
    "pinch": [(0.40, 0.75), (0.36, 0.70), (0.40, 0.60), (0.44, 0.56)],
}


def create_mock_landmarks(index="closed", middle="closed", ring="closed", pinky="closed", thumb="tucked"):
    """
    Build 21 landmarks for a right hand held upright.

    Fingers are "open" (tip 0.2 above the mcp, twice the mcp-pip span) or
    "closed" (tip curled back to 0.05 from the mcp).
    """
    states = {"index": index, "middle": middle, "ring": ring, "pinky": pinky}

    landmarks = [Landmark(0.50, 0.80)]  # Wrist
    landmarks.extend(Landmark(x, y) for x, y in THUMB_POSES[thumb])

    for finger in ("index", "middle", "ring", "pinky"):
        x = FINGER_COLUMNS[finger]
        if states[finger] == "open":
            ys = [0.60, 0.50, 0.45, 0.40]
        else:
            ys = [0.60, 0.50, 0.52, 0.55]
        landmarks.extend(Landmark(x, y) for y in ys)

    return landmarks


@pytest.fixture
def make_hand():
    return create_mock_landmarks


@pytest.fixture
def checkerboard():
    """640x480 BGR frame of alternating black and white pixels."""
    pattern = (np.indices((480, 640)).sum(axis=0) % 2 * 255).astype(np.uint8)
    return np.dstack([pattern, pattern, pattern])


class FakeProvider:
    """Stands in for HandLandmarkProvider."""

    def __init__(self, landmarks=None, error=None):
        self.landmarks = landmarks
        self.error = error
        self.detect_calls = 0
        self.draw_calls = 0
        self.close_calls = 0

    def detect(self, image):
        self.detect_calls += 1
        if self.error is not None:
            raise self.error
        return self.landmarks

    def draw(self, image):
        self.draw_calls += 1
        return image

    def close(self):
        self.close_calls += 1


@pytest.fixture
def fake_provider():
    return FakeProvider
