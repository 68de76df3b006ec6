"""Errors raised by the attribution pipeline.

Every failure surfaces as a subclass of ``AttributionError``. Wrapped
underlying errors are chained with ``raise ... from`` so their message and
type stay available as ``__cause__``.
"""

ERROR_DOMAIN = "RNAAAErrorDomain"


class AttributionError(Exception):
    """Base class for attribution failures.

    Attributes:
        message: Human-readable description.
        code: Error code within ``ERROR_DOMAIN``.
        native_error_code: Code of the underlying platform or transport error, if any.
    """

    domain = ERROR_DOMAIN

    def __init__(
        self,
        message: str,
        code: int = 100,
        native_error_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.native_error_code = native_error_code


class TokenUnavailable(AttributionError):
    """The environment or platform cannot supply an attribution token."""


class NetworkFailure(AttributionError):
    """Transport-level failure, or a successful response without a body."""


class HttpStatus(AttributionError):
    """Non-2xx response outside the transient set."""

    def __init__(self, status_code: int) -> None:
        super().__init__(
            f"Request to get data from Adservices API failed with status code {status_code}"
        )
        self.status_code = status_code


class RetriesExhausted(AttributionError):
    """A transient status persisted past the retry budget."""

    def __init__(self, attempts: int, last_status_code: int) -> None:
        super().__init__(
            f"Request to get data from Adservices API failed with status code "
            f"{last_status_code}. Re-tried {attempts} times"
        )
        self.attempts = attempts
        self.last_status_code = last_status_code


class MalformedJson(AttributionError):
    """Response body is not a parseable JSON object."""


class ValidationFailure(AttributionError):
    """A required field is missing or has the wrong type."""

    def __init__(self, field: str) -> None:
        super().__init__(f"Missing or invalid value for key '{field}'")
        self.field = field


def native_code_of(exc: BaseException) -> int | None:
    """Best-effort integer code of an underlying error (``errno`` or ``code``)."""
    for attr in ("errno", "code"):
        value = getattr(exc, attr, None)
        if isinstance(value, int) and not isinstance(value, bool):
            return value
    return None
