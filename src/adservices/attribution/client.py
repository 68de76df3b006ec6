"""AdServices attribution API client."""

import asyncio
import logging

import httpx

from adservices.attribution.config import AttributionSettings
from adservices.attribution.errors import (
    HttpStatus,
    NetworkFailure,
    RetriesExhausted,
    native_code_of,
)
from adservices.attribution.schema import AttributionToken

# The API answers 404 until attribution data is ready, and 500 on hiccups.
_TRANSIENT_STATUS_CODES = {404, 500}


class AttributionClient:
    """
    Async client exchanging attribution tokens for attribution data.

    Usage:
        from adservices.attribution import AttributionClient

        async with AttributionClient() as client:
            body = await client.fetch(token)
    """

    def __init__(
        self,
        settings: AttributionSettings | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            settings: Endpoint and retry policy; defaults to ``AttributionSettings()``.
            logger: Logger instance; defaults to ``logging.getLogger("adservices.attribution")``.
        """
        self.settings = settings or AttributionSettings()
        self.logger = logger or logging.getLogger("adservices.attribution")
        self.client = httpx.AsyncClient(
            timeout=self.settings.timeout,
            headers={"Content-Type": "text/plain"},
        )

    async def fetch(self, token: AttributionToken) -> bytes:
        """POST the token to the attribution endpoint and return the response body.

        Only 404 and 500 responses are retried, after a fixed delay and with
        the same token. Transport errors are never retried.

        Raises:
            NetworkFailure: On transport or body decoding errors, or an empty 2xx body.
            HttpStatus: On a non-2xx, non-transient status.
            RetriesExhausted: When a transient status outlasts ``max_retries``.
        """
        url = self.settings.endpoint_url
        retries_left = self.settings.max_retries
        total = self.settings.max_retries + 1

        while True:
            try:
                response = await self.client.request("POST", url, content=token.encode("utf-8"))
            except httpx.RequestError as exc:
                raise NetworkFailure(
                    f"Request to Adservices API failed: {exc}",
                    native_error_code=native_code_of(exc),
                ) from exc

            status = response.status_code
            if response.is_success:
                break

            if status not in _TRANSIENT_STATUS_CODES:
                raise HttpStatus(status)

            if retries_left == 0:
                raise RetriesExhausted(self.settings.max_retries, status)

            delay = self.settings.retry_delay_seconds
            self.logger.warning(
                "Transient HTTP %s from %s (attempt %d/%d), retrying in %.1fs",
                status,
                url,
                total - retries_left,
                total,
                delay,
            )
            await asyncio.sleep(delay)
            retries_left -= 1

        if not response.content:
            raise NetworkFailure("Request to Adservices API failed with unknown error")
        return response.content

    async def close(self) -> None:
        """Close the HTTP client."""
        await self.client.aclose()

    async def __aenter__(self) -> "AttributionClient":
        """Context manager entry."""
        return self

    async def __aexit__(self, *args: object) -> None:
        """Context manager exit."""
        await self.close()
