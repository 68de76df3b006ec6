"""
AdServices Attribution - SDK for Apple Search Ads install attribution.

Exchanges a platform-issued attribution token with the AdServices API and
decodes the response into a typed record.

Example:
    >>> from adservices.attribution import AttributionService, StaticTokenPlatform
    >>> async with AttributionService(StaticTokenPlatform(token)) as service:
    ...     record = await service.get_attribution_data()
    ...     record.campaign_id
"""

from adservices.attribution.client import AttributionClient
from adservices.attribution.config import AttributionSettings
from adservices.attribution.decoder import decode
from adservices.attribution.errors import (
    AttributionError,
    HttpStatus,
    MalformedJson,
    NetworkFailure,
    RetriesExhausted,
    TokenUnavailable,
    ValidationFailure,
)
from adservices.attribution.platform import (
    DevicePlatform,
    Platform,
    StaticTokenPlatform,
    TokenProvider,
    UnsupportedPlatform,
)
from adservices.attribution.schema import AttributionRecord, AttributionToken
from adservices.attribution.service import AttributionService

__all__ = [
    # Service
    "AttributionService",
    # Pipeline stages
    "TokenProvider",
    "AttributionClient",
    "decode",
    # Platforms
    "Platform",
    "DevicePlatform",
    "StaticTokenPlatform",
    "UnsupportedPlatform",
    # Configuration
    "AttributionSettings",
    # Models
    "AttributionToken",
    "AttributionRecord",
    # Errors
    "AttributionError",
    "TokenUnavailable",
    "NetworkFailure",
    "HttpStatus",
    "RetriesExhausted",
    "MalformedJson",
    "ValidationFailure",
]

__version__ = "0.1.0"
