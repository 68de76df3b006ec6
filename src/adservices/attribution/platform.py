"""Platform identity service strategies and the token provider."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol

from adservices.attribution.errors import TokenUnavailable, native_code_of
from adservices.attribution.schema import AttributionToken

MIN_OS_VERSION = (14, 3)


class Platform(Protocol):
    """Capability checks and token issuance offered by the host platform."""

    def running_in_emulated_environment(self) -> bool: ...

    def platform_supports_attribution(self) -> bool: ...

    def attribution_token(self) -> str: ...


@dataclass(frozen=True)
class DevicePlatform:
    """
    A device whose OS issues attribution tokens from ``MIN_OS_VERSION`` on.

    Attributes:
        os_version: Parsed OS version, e.g. ``(17, 4)``.
        simulator: True when running under a simulator.
        token_source: Callable returning a fresh token; may raise.
    """

    os_version: tuple[int, ...]
    simulator: bool
    token_source: Callable[[], str]

    def running_in_emulated_environment(self) -> bool:
        return self.simulator

    def platform_supports_attribution(self) -> bool:
        return self.os_version >= MIN_OS_VERSION

    def attribution_token(self) -> str:
        return self.token_source()


@dataclass(frozen=True)
class StaticTokenPlatform:
    """Relays a token that was obtained elsewhere, e.g. posted by an app to a backend."""

    token: str

    def running_in_emulated_environment(self) -> bool:
        return False

    def platform_supports_attribution(self) -> bool:
        return True

    def attribution_token(self) -> str:
        return self.token


class UnsupportedPlatform:
    """A platform without an attribution capability."""

    def running_in_emulated_environment(self) -> bool:
        return False

    def platform_supports_attribution(self) -> bool:
        return False

    def attribution_token(self) -> str:
        """Unreachable through ``TokenProvider``; guards direct callers only."""
        raise TokenUnavailable("AdServices not available on this platform")


class TokenProvider:
    """Obtains attribution tokens from a ``Platform``. Never retries."""

    def __init__(self, platform: Platform, logger: logging.Logger | None = None) -> None:
        self.platform = platform
        self.logger = logger or logging.getLogger("adservices.attribution")

    def acquire_token(self) -> AttributionToken:
        """Return a token from the platform.

        Raises:
            TokenUnavailable: In an emulated environment, below the minimum
                platform version, or when the platform call fails.
        """
        if self.platform.running_in_emulated_environment():
            raise TokenUnavailable("Error getting token, not available in Simulator")

        if not self.platform.platform_supports_attribution():
            raise TokenUnavailable("Error getting token, AdServices not available pre iOS 14.3")

        try:
            token = self.platform.attribution_token()
        except TokenUnavailable:
            raise
        except Exception as exc:
            raise TokenUnavailable(str(exc), native_error_code=native_code_of(exc)) from exc

        if not token:
            raise TokenUnavailable("Platform returned an empty attribution token")

        self.logger.debug("Attribution token acquired")
        return AttributionToken(token)
