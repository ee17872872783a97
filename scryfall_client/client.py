"""
Scryfall API transport.

Every endpoint accessor goes through the three primitives here:
- get: authenticated GET decoded into a destination type
- post: authenticated POST with an optional JSON body
- list_get: GET of a list envelope, unwrapped into a destination type

DECODING CONTRACT:
- HTTP 200: the body is decoded into the destination type. A shape
  mismatch raises pydantic.ValidationError unchanged.
- Anything else: the body is decoded as a Scryfall error and raised as
  ScryfallAPIError, or ErrorDecodeError if it is not an error object.

Each call makes at most one HTTP request. Nothing is retried.
"""

import asyncio
import json
import logging
from functools import lru_cache
from typing import Any, NoReturn, TypeVar

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from scryfall_client.config import ClientConfig, ScryfallSettings
from scryfall_client.errors import ErrorDecodeError, ScryfallAPIError, URLResolutionError
from scryfall_client.models.common import ErrorBody, ListEnvelope

logger = logging.getLogger(__name__)

T = TypeVar("T")


@lru_cache(maxsize=128)
def _adapter(target: Any) -> TypeAdapter[Any]:
    """Get a cached TypeAdapter for a destination type."""
    return TypeAdapter(target)


class ScryfallClient:
    """
    Async Scryfall API client.

    Owns its httpx client unless one is supplied in the config. Use as an
    async context manager, or call aclose() when done.

    The configured timeout bounds each whole round trip (connect, send and
    the full response body). It does not include the rate-limiter wait.

    Cancellation: wrap a call in asyncio.timeout() or cancel the task. Both
    the rate-limiter wait and the HTTP round trip abort promptly.
    """

    def __init__(self, config: ClientConfig | None = None):
        self.config = config or ClientConfig()
        self._base_url = httpx.URL(self.config.base_url)
        self._owns_http_client = self.config.http_client is None
        self._http = self.config.http_client or httpx.AsyncClient(timeout=self.config.timeout)

    @classmethod
    def from_secrets(
        cls,
        client_secret: str | None = None,
        grant_secret: str | None = None,
        **kwargs: Any,
    ) -> "ScryfallClient":
        """
        Create a client from raw secrets plus any other ClientConfig fields.

        Raises:
            MultipleSecretsError: If both secrets are set
        """
        return cls(ClientConfig.from_secrets(client_secret, grant_secret, **kwargs))

    @classmethod
    def from_settings(cls, settings: ScryfallSettings | None = None) -> "ScryfallClient":
        """Create a client configured from SCRYFALL_* environment variables."""
        return cls(ClientConfig.from_settings(settings))

    async def __aenter__(self) -> "ScryfallClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this client created it."""
        if self._owns_http_client:
            await self._http.aclose()

    def resolve(self, path: str) -> httpx.URL:
        """
        Resolve a path against the base URL.

        Relative paths ("cards/named?exact=...") are joined per RFC 3986.
        Absolute URLs, such as a list's next_page, are returned as-is.

        Raises:
            URLResolutionError: If the path is malformed
        """
        try:
            return self._base_url.join(path)
        except httpx.InvalidURL as e:
            raise URLResolutionError(path, str(e)) from e

    def _headers(self) -> dict[str, str]:
        headers = {
            "User-Agent": self.config.user_agent,
            "Accept": "application/json",
        }
        authorization = self.config.authorization
        if authorization is not None:
            headers["Authorization"] = authorization
        return headers

    async def _send(self, request: httpx.Request, target: Any) -> Any:
        """Admit, send, and decode one request."""
        if self.config.rate_limiter is not None:
            await self.config.rate_limiter.acquire()

        logger.debug("%s %s", request.method, request.url)
        try:
            async with asyncio.timeout(self.config.timeout):
                response = await self._http.send(request)
        except TimeoutError as e:
            raise httpx.TimeoutException(
                f"Request exceeded {self.config.timeout}s total timeout", request=request
            ) from e
        logger.debug("%s %s -> %d", request.method, request.url, response.status_code)

        if response.status_code != httpx.codes.OK:
            self._raise_api_error(response)

        return _adapter(target).validate_json(response.content)

    @staticmethod
    def _raise_api_error(response: httpx.Response) -> NoReturn:
        """Raise the exception describing a non-200 response."""
        try:
            body = ErrorBody.model_validate_json(response.content)
        except ValidationError as e:
            logger.warning(
                "SCRYFALL_ERROR_UNDECODABLE",
                extra={"status_code": response.status_code, "url": str(response.request.url)},
            )
            raise ErrorDecodeError(response.status_code, response.text) from e

        logger.warning(
            "SCRYFALL_API_ERROR",
            extra={
                "status": body.status,
                "code": body.code,
                "url": str(response.request.url),
            },
        )
        raise ScryfallAPIError(
            status=body.status,
            code=body.code,
            details=body.details,
            type=body.type,
            warnings=body.warnings,
        )

    async def get(self, path: str, target: type[T]) -> T:
        """
        GET a path and decode the response into `target`.

        Args:
            path: Path relative to the base URL, optionally with a query string
            target: Destination type (a model, list[Model], etc)

        Returns:
            The decoded response

        Raises:
            URLResolutionError: If the path cannot be resolved
            ScryfallAPIError: If the API returns an error object
            ErrorDecodeError: If a non-200 body is not an error object
            pydantic.ValidationError: If a 200 body does not match `target`
            httpx.HTTPError: On network failures and timeouts
        """
        url = self.resolve(path)
        request = self._http.build_request("GET", url, headers=self._headers())
        return await self._send(request, target)

    async def post(self, path: str, body: Any, target: type[T]) -> T:
        """
        POST a JSON body to a path and decode the response into `target`.

        Args:
            path: Path relative to the base URL
            body: Request payload. Models are dumped in JSON mode. None sends
                  no body and no Content-Type.
            target: Destination type

        Raises:
            Same as get(), plus TypeError if the body is not JSON serializable
        """
        url = self.resolve(path)
        headers = self._headers()

        content = None
        if body is not None:
            if isinstance(body, BaseModel):
                body = body.model_dump(mode="json", by_alias=True)
            content = json.dumps(body).encode("utf-8")
            headers["Content-Type"] = "application/json"

        request = self._http.build_request("POST", url, headers=headers, content=content)
        return await self._send(request, target)

    async def list_get(self, path: str, target: type[T]) -> T:
        """
        GET a list envelope and decode its `data` array into `target`.

        Pagination metadata is dropped. Callers that need has_more,
        next_page, total_cards or warnings should get() a ListEnvelope or a
        typed envelope such as CardList instead.
        """
        envelope = await self.get(path, ListEnvelope)
        return _adapter(target).validate_python(envelope.data)
