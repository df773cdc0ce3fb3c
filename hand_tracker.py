"""
MediaPipe Hands wrapper: one BGR frame in, at most one hand's landmarks out.
"""
import logging

import cv2
import mediapipe as mp

from config import HandsConfig

logger = logging.getLogger(__name__)

MAX_NUM_HANDS = 1

mp_drawing = mp.solutions.drawing_utils
mp_drawing_styles = mp.solutions.drawing_styles
mp_hands = mp.solutions.hands


class HandLandmarkProvider:
    def __init__(self, config=None, hands=None):
        """
        Args:
            config: HandsConfig, defaults if None
            hands: Already built object with process()/close(), mainly for tests.
                A MediaPipe Hands graph is created when None.
        """
        self.config = config or HandsConfig()
        if hands is None:
            hands = mp_hands.Hands(
                static_image_mode=False,
                max_num_hands=MAX_NUM_HANDS,
                model_complexity=self.config.model_complexity,
                min_detection_confidence=self.config.min_detection_confidence,
                min_tracking_confidence=self.config.min_tracking_confidence,
            )
            logger.info(
                "MediaPipe Hands ready (complexity=%d, detection=%.2f, tracking=%.2f)",
                self.config.model_complexity,
                self.config.min_detection_confidence,
                self.config.min_tracking_confidence,
            )
        self.hands = hands
        self.closed = False
        self.last_results = None

    def detect(self, image):
        """
        Run hand detection on a BGR frame.

        Returns:
            List of 21 landmarks for the first hand, or None if no hand
        """
        if self.closed:
            raise RuntimeError("HandLandmarkProvider is closed")

        image_rgb = cv2.cvtColor(image, cv2.COLOR_BGR2RGB)
        # Lets MediaPipe read the buffer without copying
        image_rgb.flags.writeable = False
        results = self.hands.process(image_rgb)
        self.last_results = results

        if not results.multi_hand_landmarks:
            return None
        return list(results.multi_hand_landmarks[0].landmark)

    def draw(self, image):
        """Draw the skeleton of the last detected hand onto a BGR frame."""
        results = self.last_results
        if results is None or not results.multi_hand_landmarks:
            return image
        mp_drawing.draw_landmarks(
            image,
            results.multi_hand_landmarks[0],
            mp_hands.HAND_CONNECTIONS,
            mp_drawing_styles.get_default_hand_landmarks_style(),
            mp_drawing_styles.get_default_hand_connections_style())
        return image

    def close(self):
        if self.closed:
            return
        self.closed = True
        self.hands.close()
        logger.info("MediaPipe Hands closed")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
