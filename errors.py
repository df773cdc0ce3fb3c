"""
Errors surfaced to the user. Both kinds end the session, nothing is retried.

A camera refused in the browser is reported by the streamlit-webrtc
component itself; only errors raised in this process reach describe_error.
"""


class CensorError(Exception):
    """Base error with a message meant for the error banner."""

    message = "Something went wrong."

    def __init__(self, message=None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class CameraPermissionError(CensorError):
    message = "Camera permission denied. Please allow camera access and reload the page."


class CameraAccessError(CensorError):
    """Any other failure while opening the camera or loading the hand model."""

    def __init__(self, detail=""):
        message = "Error accessing the camera or loading the model"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


def describe_error(exc):
    """Map any exception raised during startup or processing to a CensorError."""
    if isinstance(exc, CensorError):
        return exc
    if isinstance(exc, PermissionError):
        return CameraPermissionError()
    return CameraAccessError(str(exc))
