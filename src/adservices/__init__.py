"""
AdServices - Python SDK for Apple Search Ads attribution.

Example:
    >>> from adservices.attribution import AttributionService, StaticTokenPlatform
    >>> async with AttributionService(StaticTokenPlatform(token)) as service:
    ...     record = await service.get_attribution_data()
"""
