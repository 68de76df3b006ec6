"""Decoding of AdServices API responses into attribution records."""

from typing import Any

from pydantic import ValidationError
from pydantic_core import from_json

from adservices.attribution.errors import MalformedJson, ValidationFailure
from adservices.attribution.schema import AttributionRecord


def parse_object(data: bytes) -> dict[str, Any]:
    """Parse ``data`` as a JSON object. ``NaN`` and ``Infinity`` are not JSON.

    Raises:
        MalformedJson: If the body is not valid JSON or not an object.
    """
    try:
        payload = from_json(data, allow_inf_nan=False)
    except ValueError as exc:
        raise MalformedJson("Error parsing JSON data from AdServices API") from exc

    if not isinstance(payload, dict):
        raise MalformedJson("Error parsing JSON data from AdServices API")
    return payload


def decode(data: bytes) -> AttributionRecord:
    """Decode an API response body into an ``AttributionRecord``.

    Raises:
        MalformedJson: If the body is not a JSON object.
        ValidationFailure: Naming the first missing or invalid required field.
    """
    payload = parse_object(data)
    try:
        return AttributionRecord.model_validate(payload)
    except ValidationError as exc:
        raise ValidationFailure(str(exc.errors()[0]["loc"][0])) from exc
