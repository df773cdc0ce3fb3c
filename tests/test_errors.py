"""
Tests for the user-facing error mapping
"""

from errors import CameraAccessError, CameraPermissionError, CensorError, describe_error


class NotAllowedError(Exception):
    pass


class TestDescribeError:

    def test_permission_error(self):
        assert isinstance(describe_error(PermissionError("denied")), CameraPermissionError)

    def test_browser_error_names_are_not_special(self):
        # Browser-side refusals never reach Python, a same-named class is just an error
        error = describe_error(NotAllowedError("blocked"))
        assert isinstance(error, CameraAccessError)
        assert error.message.endswith(": blocked")

    def test_everything_else_is_access_error(self):
        error = describe_error(OSError("no such device"))
        assert isinstance(error, CameraAccessError)
        assert error.message == "Error accessing the camera or loading the model: no such device"

    def test_censor_errors_pass_through(self):
        original = CameraPermissionError()
        assert describe_error(original) is original

    def test_messages(self):
        assert "permission denied" in CameraPermissionError().message.lower()
        assert CameraAccessError().message == "Error accessing the camera or loading the model"
        assert str(CensorError("custom")) == "custom"
