"""
streamlit-webrtc video processor that censors each incoming frame.
"""
import logging
import threading
from collections import namedtuple

import av
import cv2
from streamlit_webrtc import VideoProcessorBase

from censor import process
from config import AppConfig
from errors import describe_error
from hand_tracker import HandLandmarkProvider

logger = logging.getLogger(__name__)

ProcessorState = namedtuple("ProcessorState", ["ready", "gesture", "error"])


class CensorVideoProcessor(VideoProcessorBase):
    """
    recv() runs on the webrtc worker thread, snapshot() on the Streamlit
    script thread. Only the latest gesture is shared, and it is overwritten
    every frame.
    """

    def __init__(self, config=None, provider_factory=HandLandmarkProvider):
        self.config = config or AppConfig()
        self.provider = None
        self.stopped = False

        # Held for a whole frame so the provider never has two in flight.
        # Reentrant because a failing frame stops the processor while holding it.
        self._process_lock = threading.RLock()
        self._state_lock = threading.Lock()
        self._ready = False
        self._gesture = None
        self._error = None

        try:
            self.provider = provider_factory(self.config.hands)
        except Exception as e:
            self._fail(e)

    def _fail(self, exc):
        error = describe_error(exc)
        logger.exception("[CensorVideoProcessor] %s", error.message)
        with self._state_lock:
            self._error = error
            self._gesture = None
        self.stop()

    def recv(self, frame):
        img = frame.to_ndarray(format="bgr24")

        with self._process_lock:
            if self.stopped or self.provider is None:
                return self._mirrored(frame)
            try:
                img, gesture = process(img, self.provider, self.config.censor)
            except Exception as e:
                self._fail(e)
                return self._mirrored(frame)

        with self._state_lock:
            previous = self._gesture
            self._gesture = gesture
            self._ready = True
        if gesture != previous:
            logger.info("Gesture: %s", gesture.value if gesture else "none")

        return av.VideoFrame.from_ndarray(img, format="bgr24")

    @staticmethod
    def _mirrored(frame):
        # Keeps the selfie view once processing has stopped
        return av.VideoFrame.from_ndarray(cv2.flip(frame.to_ndarray(format="bgr24"), 1), format="bgr24")

    def snapshot(self):
        with self._state_lock:
            return ProcessorState(ready=self._ready, gesture=self._gesture, error=self._error)

    def stop(self):
        """Release the hand model. Safe to call more than once."""
        with self._process_lock:
            if self.stopped:
                return
            self.stopped = True
            provider, self.provider = self.provider, None
            if provider is not None:
                provider.close()

    def on_ended(self):
        self.stop()
