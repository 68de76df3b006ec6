"""Tests for platform strategies and token acquisition."""

from unittest.mock import Mock

import pytest

from adservices.attribution import (
    DevicePlatform,
    StaticTokenPlatform,
    TokenProvider,
    TokenUnavailable,
    UnsupportedPlatform,
)


class PlatformError(Exception):
    """Stand-in for a native platform error carrying a code."""

    def __init__(self, message: str, code: int) -> None:
        super().__init__(message)
        self.code = code


def _device(os_version=(17, 4), simulator=False, token_source=None):
    return DevicePlatform(
        os_version=os_version,
        simulator=simulator,
        token_source=token_source or (lambda: "device-token"),
    )


class TestDevicePlatform:
    """Tests for version gating."""

    @pytest.mark.parametrize(
        ("version", "supported"),
        [((14, 2), False), ((14, 3), True), ((14, 3, 1), True), ((13,), False), ((18, 0), True)],
    )
    def test_version_gate(self, version, supported):
        assert _device(os_version=version).platform_supports_attribution() is supported


class TestTokenProvider:
    """Tests for acquire_token."""

    def test_static_token(self):
        assert TokenProvider(StaticTokenPlatform("abc")).acquire_token() == "abc"

    def test_device_token(self):
        assert TokenProvider(_device()).acquire_token() == "device-token"

    def test_simulator_checked_before_acquisition(self):
        """GIVEN a simulator SHOULD fail without calling the platform token API."""
        source = Mock(return_value="token")
        provider = TokenProvider(_device(simulator=True, token_source=source))

        with pytest.raises(TokenUnavailable, match="Simulator"):
            provider.acquire_token()
        source.assert_not_called()

    def test_old_os_checked_before_acquisition(self):
        source = Mock(return_value="token")
        provider = TokenProvider(_device(os_version=(14, 2), token_source=source))

        with pytest.raises(TokenUnavailable, match="pre iOS 14.3"):
            provider.acquire_token()
        source.assert_not_called()

    def test_unsupported_platform(self):
        with pytest.raises(TokenUnavailable):
            TokenProvider(UnsupportedPlatform()).acquire_token()

    def test_unsupported_platform_direct_call(self):
        with pytest.raises(TokenUnavailable):
            UnsupportedPlatform().attribution_token()

    def test_platform_error_wrapped(self):
        """GIVEN a failing platform call
        WHEN acquiring a token
        SHOULD wrap it, keeping the message and native code."""
        cause = PlatformError("The operation couldn't be completed", code=3)
        provider = TokenProvider(_device(token_source=Mock(side_effect=cause)))

        with pytest.raises(TokenUnavailable) as exc_info:
            provider.acquire_token()

        assert exc_info.value.message == "The operation couldn't be completed"
        assert exc_info.value.native_error_code == 3
        assert exc_info.value.code == 100
        assert exc_info.value.domain == "RNAAAErrorDomain"
        assert exc_info.value.__cause__ is cause

    def test_os_error_errno(self):
        cause = OSError(5, "I/O error")
        provider = TokenProvider(_device(token_source=Mock(side_effect=cause)))

        with pytest.raises(TokenUnavailable) as exc_info:
            provider.acquire_token()

        assert exc_info.value.native_error_code == 5

    def test_empty_token(self):
        with pytest.raises(TokenUnavailable):
            TokenProvider(StaticTokenPlatform("")).acquire_token()

    def test_no_retry(self):
        source = Mock(side_effect=RuntimeError("boom"))
        with pytest.raises(TokenUnavailable):
            TokenProvider(_device(token_source=source)).acquire_token()
        assert source.call_count == 1
