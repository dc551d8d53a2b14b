"""Unit tests for DefaultAuthenticationProbe."""

from unittest.mock import MagicMock

from auth.observability import DefaultAuthenticationProbe
from shared_kernel.observability_context import ObservationContext


class TestDefaultAuthenticationProbe:
    """Tests for authentication event logging."""

    def test_login_succeeded_logs_info(self):
        logger = MagicMock()
        probe = DefaultAuthenticationProbe(logger=logger)

        probe.login_succeeded(profile_id=1, user_name="iamyourfather")

        logger.info.assert_called_once_with(
            "login_succeeded", profile_id=1, user_name="iamyourfather"
        )

    def test_login_failed_logs_warning_without_password(self):
        logger = MagicMock()
        probe = DefaultAuthenticationProbe(logger=logger)

        probe.login_failed(user_name="chewy", reason="wrong_password")

        logger.warning.assert_called_once_with(
            "login_failed", user_name="chewy", reason="wrong_password"
        )

    def test_authentication_failed_includes_context(self):
        logger = MagicMock()
        probe = DefaultAuthenticationProbe(logger=logger).with_context(
            ObservationContext(request_id="abc")
        )

        probe.authentication_failed(reason="Token has expired")

        logger.warning.assert_called_once_with(
            "authentication_failed", reason="Token has expired", request_id="abc"
        )

    def test_caller_authenticated_logs_debug(self):
        logger = MagicMock()
        probe = DefaultAuthenticationProbe(logger=logger)

        probe.caller_authenticated(subject="3")

        logger.debug.assert_called_once_with("caller_authenticated", subject="3")
