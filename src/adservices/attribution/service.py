"""Attribution service: token -> fetch -> decode."""

import logging

from adservices.attribution.client import AttributionClient
from adservices.attribution.config import AttributionSettings
from adservices.attribution.decoder import decode
from adservices.attribution.errors import TokenUnavailable
from adservices.attribution.platform import Platform, TokenProvider
from adservices.attribution.schema import AttributionRecord


class AttributionService:
    """
    Fetches Apple Search Ads attribution data for the current install.

    Usage:
        from adservices.attribution import AttributionService, DevicePlatform

        platform = DevicePlatform(os_version=(17, 4), simulator=False, token_source=read_token)
        async with AttributionService(platform) as service:
            record = await service.get_attribution_data()
            print(record.campaign_id)
    """

    def __init__(
        self,
        platform: Platform,
        settings: AttributionSettings | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        """Initialize the service.

        Args:
            platform: Platform strategy issuing attribution tokens.
            settings: Endpoint and retry policy; defaults to ``AttributionSettings()``.
            logger: Logger instance; defaults to ``logging.getLogger("adservices.attribution")``.
        """
        self.platform = platform
        self.logger = logger or logging.getLogger("adservices.attribution")
        self.tokens = TokenProvider(platform, logger=self.logger)
        self.client = AttributionClient(settings, logger=self.logger)

    async def get_attribution_data(self) -> AttributionRecord:
        """Acquire a token, exchange it and decode the response.

        Each stage runs only after the previous one succeeded; the first
        failure propagates unchanged.

        Raises:
            AttributionError: The failing stage's error.
        """
        if not self.platform.platform_supports_attribution():
            raise TokenUnavailable("AdServices not available pre iOS 14.3")

        self.logger.debug("Acquiring attribution token")
        token = self.tokens.acquire_token()

        self.logger.debug("Fetching attribution data")
        body = await self.client.fetch(token)

        self.logger.debug("Decoding attribution data")
        return decode(body)

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self.client.close()

    async def __aenter__(self) -> "AttributionService":
        """Context manager entry."""
        return self

    async def __aexit__(self, *args: object) -> None:
        """Context manager exit."""
        await self.close()
