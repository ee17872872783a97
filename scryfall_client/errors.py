"""
Exceptions raised by the Scryfall client.

Every failure is returned to the caller immediately. Nothing here is
retried or recovered internally.

Failure kinds:
- ConfigurationError: invalid client configuration (before any network call)
- URLResolutionError: a path cannot be resolved against the base URL
- ScryfallAPIError: non-200 response with a well-formed error body
- ErrorDecodeError: non-200 response whose body is not the error shape

Transport failures (httpx.TransportError, httpx.TimeoutException) and
cancellation propagate verbatim. A round trip that outlasts the configured
total timeout, headers and body included, raises httpx.TimeoutException.
A 200 response that does not match the requested shape raises
pydantic.ValidationError unchanged.
"""


class ScryfallClientError(Exception):
    """Base class for all errors raised by this library."""

    pass


class ConfigurationError(ScryfallClientError):
    """Raised when a client configuration is invalid."""

    pass


class MultipleSecretsError(ConfigurationError):
    """
    Raised when both an application secret and a grant secret are set.

    A client authenticates either as an application or as a grant account,
    never both.
    """

    def __init__(self) -> None:
        super().__init__("multiple secrets configured")


class URLResolutionError(ScryfallClientError):
    """Raised when a relative path cannot be resolved against the base URL."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot resolve {path!r}: {reason}")


class ScryfallAPIError(ScryfallClientError):
    """
    A Scryfall API error response.

    Raised for any non-200 status whose body decodes as an error object.
    Callers are expected to branch on `code` or `status`.

    Attributes:
        status: HTTP status reported by the API
        code: Short machine-readable code (e.g., "not_found", "bad_request")
        details: Human-readable explanation
        type: Optional category label (e.g., "ambiguous")
        warnings: Non-fatal issues the API found with the request
    """

    def __init__(
        self,
        status: int,
        code: str,
        details: str,
        type: str | None = None,
        warnings: list[str] | None = None,
    ):
        self.status = status
        self.code = code
        self.details = details
        self.type = type
        self.warnings = warnings or []
        super().__init__(f"{code}: {details}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ScryfallAPIError):
            return NotImplemented
        return (
            self.status == other.status
            and self.code == other.code
            and self.details == other.details
            and self.type == other.type
            and self.warnings == other.warnings
        )

    __hash__ = Exception.__hash__

    def __repr__(self) -> str:
        return (
            f"ScryfallAPIError(status={self.status!r}, code={self.code!r}, "
            f"details={self.details!r}, type={self.type!r}, warnings={self.warnings!r})"
        )


class ErrorDecodeError(ScryfallClientError):
    """
    Raised when a non-200 response body is not a Scryfall error object.

    Indicates a protocol mismatch rather than an expected API failure.
    """

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"Could not decode error response (HTTP {status_code})")
