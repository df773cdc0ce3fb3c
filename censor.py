"""
Censoring: find the hand's box and blur it when an obscene gesture shows up.
"""
import math
from collections import namedtuple

import cv2

from config import CensorConfig
from gesture_detector import classify

BoundingBox = namedtuple("BoundingBox", ["x", "y", "width", "height"])


def hand_bounding_box(landmarks, width, height, padding=0.05):
    """
    Pixel box around all landmarks, padded in normalized units and clipped
    to the frame.
    """
    xs = [p.x for p in landmarks]
    ys = [p.y for p in landmarks]

    min_x = max(0.0, min(xs) - padding)
    min_y = max(0.0, min(ys) - padding)
    max_x = min(1.0, max(xs) + padding)
    max_y = min(1.0, max(ys) + padding)

    return BoundingBox(
        x=min_x * width,
        y=min_y * height,
        width=(max_x - min_x) * width,
        height=(max_y - min_y) * height,
    )


def blur_region(image, box, sigma=30.0):
    """Blur the box region of a BGR image in place."""
    img_h, img_w = image.shape[:2]
    x0 = max(0, int(box.x))
    y0 = max(0, int(box.y))
    x1 = min(img_w, int(math.ceil(box.x + box.width)))
    y1 = min(img_h, int(math.ceil(box.y + box.height)))
    if x1 <= x0 or y1 <= y0:
        return image

    image[y0:y1, x0:x1] = cv2.GaussianBlur(image[y0:y1, x0:x1], (0, 0), sigma)
    return image


def process(image, provider, config=None):
    """
    Censor one BGR frame.

    Returns:
        (mirrored frame, Gesture or None)
    """
    config = config or CensorConfig()
    h, w = image.shape[:2]

    gesture = None
    landmarks = provider.detect(image)
    if landmarks:
        gesture = classify(landmarks)
        if config.draw_landmarks:
            provider.draw(image)
        if gesture is not None:
            box = hand_bounding_box(landmarks, w, h, padding=config.padding)
            blur_region(image, box, sigma=config.blur_sigma)

    # Selfie view
    return cv2.flip(image, 1), gesture
