"""
AdServices Attribution Schema

Data types exchanged with the AdServices attribution API. The token is an
opaque string issued by the platform identity service; the record is the
decoded response body.
"""

from typing import Annotated, Any, NewType

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

AttributionToken = NewType("AttributionToken", str)
"""
Opaque, single-use attribution token.

Obtained once per service invocation and sent as the raw request body.
Never cached or persisted.
"""


def _coerce_number(value: Any) -> Any:
    """Accept a JSON number or a numeric string; leave anything else to strict validation."""
    # bool is an int subclass but never a valid id
    if isinstance(value, bool):
        raise ValueError("boolean is not a number")
    if isinstance(value, (int, float, str)):
        try:
            return float(value)
        except OverflowError as exc:
            raise ValueError("number out of range") from exc
    return value


def _optional_string(value: Any) -> str | None:
    return value if isinstance(value, str) else None


Number = Annotated[float, BeforeValidator(_coerce_number)]
"""Numeric id: a JSON number, or a string parseable as one. Must be finite."""


class AttributionRecord(BaseModel):
    """
    Attribution data returned by the AdServices API.

    Every field except ``click_date`` is required; ``click_date`` is None when
    absent or not a string. Attribute names are snake_case; the wire keys
    (``orgId``, ``campaignId``, ...) are the aliases. Fields are declared in
    wire order so the first validation error names the first bad key.

    Attributes:
        attribution: Whether the install is attributed to a Search Ads campaign.
        org_id: Search Ads organisation identifier.
        campaign_id: Campaign identifier.
        conversion_type: "Download" or "Redownload".
        click_date: Click timestamp, present only when the user consented.
        ad_group_id: Ad group identifier.
        country_or_region: Storefront country or region.
        keyword_id: Keyword identifier.
        ad_id: Ad identifier.

    Example:
        >>> record = AttributionRecord(
        ...     attribution=True,
        ...     orgId=40669820,
        ...     campaignId=542370539,
        ...     conversionType="Download",
        ...     adGroupId=542317095,
        ...     countryOrRegion="US",
        ...     keywordId=87675432,
        ...     adId=542317136,
        ... )
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        strict=True,
        allow_inf_nan=False,
    )

    attribution: bool
    org_id: Number = Field(alias="orgId")
    campaign_id: Number = Field(alias="campaignId")
    conversion_type: str = Field(alias="conversionType")
    click_date: Annotated[str | None, BeforeValidator(_optional_string)] = Field(
        default=None, alias="clickDate"
    )
    ad_group_id: Number = Field(alias="adGroupId")
    country_or_region: str = Field(alias="countryOrRegion")
    keyword_id: Number = Field(alias="keywordId")
    ad_id: Number = Field(alias="adId")

    def to_wire(self) -> dict[str, Any]:
        """Return the record in the API's JSON shape, omitting an absent click date."""
        return self.model_dump(by_alias=True, exclude_none=True)
