"""Short.io REST API client.

Provides the async HTTP transport shared by all endpoint functions:
authentication, host selection, request building and response decoding.
HTTP error statuses are not exceptions here; the decoded error body is
handed back in :class:`ApiResult` and the caller decides what to do.
"""

import time
from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path
from typing import Any, TypeVar

import httpx
import pydantic
import structlog

from .query import QueryPairs

logger = structlog.get_logger(__name__)

DEFAULT_BASE_URL = "https://api.short.io"

DEFAULT_STATISTICS_URL = "https://api-v2.short.cm/statistics"

DEFAULT_TIMEOUT = 30.0

ModelT = TypeVar("ModelT", bound=pydantic.BaseModel)


class Host(StrEnum):
    """Which of the two Short.io hosts a request goes to."""

    API = "api"
    STATISTICS = "statistics"


class ResultKind(StrEnum):
    """How a successful response body is decoded."""

    JSON = "json"
    BINARY = "binary"


class ShortioError(Exception):
    """Base class for errors raised by this library."""


class ApiError(ShortioError):
    """Raised for a non-2xx response when the caller asked for it.

    Attributes:
        status_code: HTTP status of the response.
        body: Decoded error body (JSON value, text, or None when empty).
    """

    def __init__(self, status_code: int, body: Any, method: str, url: str):
        self.status_code = status_code
        self.body = body
        self.method = method
        self.url = url
        super().__init__(f"{method} {url} failed with HTTP {status_code}: {body!r}")


@dataclass
class ApiResult:
    """Outcome of a single API call.

    Exactly one of ``data`` and ``error`` is populated for a non-empty body:
    ``data`` for 2xx responses, ``error`` otherwise. Neither is transformed;
    they hold the decoded body as the service sent it.
    """

    status_code: int
    kind: ResultKind = ResultKind.JSON
    data: Any = None
    error: Any = None
    response: httpx.Response | None = field(default=None, repr=False)

    @property
    def ok(self) -> bool:
        """True if the response status is in the 2xx range."""
        return 200 <= self.status_code < 300  # noqa: PLR2004

    def parsed(self, model: type[ModelT]) -> ModelT | None:
        """Validate ``data`` into a pydantic model.

        Returns:
            The validated model, or None if there is no data.

        Raises:
            pydantic.ValidationError: If the data does not fit the model.
        """
        if self.data is None:
            return None
        return model.model_validate(self.data)

    def raise_for_error(self) -> "ApiResult":
        """Raise :class:`ApiError` unless the response was successful."""
        if not self.ok:
            request = self.response.request if self.response is not None else None
            raise ApiError(
                self.status_code,
                self.error,
                method=request.method if request else "",
                url=str(request.url) if request else "",
            )
        return self


class ShortioRestApiClient:
    """HTTP client for the Short.io REST and statistics APIs.

    Holds the API key, the two base URLs and the default headers. Headers are
    copied into every request when it is built, so changing the key only
    affects requests built afterwards. Several clients with different keys
    can be used side by side.

    Can be used as an async context manager for automatic cleanup.
    """

    def __init__(
        self,
        api_key: str | None = None,
        api_key_file: str | Path | None = None,
        base_url: str = DEFAULT_BASE_URL,
        statistics_url: str = DEFAULT_STATISTICS_URL,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize the REST API client.

        Args:
            api_key: Secret API key sent verbatim in the Authorization header.
            api_key_file: Path to a file containing the API key. Used when
                ``api_key`` is not given.
            base_url: Base URL of the REST API.
            statistics_url: Base URL of the statistics API.
            timeout: Request timeout in seconds (default: 30.0).
            transport: Optional httpx transport (for testing/DI).

        Raises:
            ValueError: If a URL is empty, timeout is not positive, or no
                API key is available.
            FileNotFoundError: If api_key_file is specified but doesn't exist.
        """
        if not base_url or not statistics_url:
            msg = "base_url and statistics_url cannot be empty"
            raise ValueError(msg)
        if timeout <= 0:
            msg = "timeout must be positive"
            raise ValueError(msg)

        if api_key is None and api_key_file:
            key_path = Path(api_key_file)
            if not key_path.exists():
                msg = f"API key file not found: {api_key_file}"
                raise FileNotFoundError(msg)
            api_key = key_path.read_text().strip()
        if not api_key:
            msg = "an API key is required"
            raise ValueError(msg)

        self._base_urls = {
            Host.API: base_url.rstrip("/"),
            Host.STATISTICS: statistics_url.rstrip("/"),
        }
        self._timeout = timeout
        self._transport = transport
        self._headers = {
            "Accept": "application/json",
            "Content-Type": "application/json",
            "Authorization": api_key,
        }
        self._client: httpx.AsyncClient | None = None

    @property
    def base_url(self) -> str:
        return self._base_urls[Host.API]

    @property
    def statistics_url(self) -> str:
        return self._base_urls[Host.STATISTICS]

    @property
    def headers(self) -> dict[str, str]:
        """Copy of the default headers sent with every request."""
        return dict(self._headers)

    def set_api_key(self, api_key: str) -> None:
        """Replace the API key used by requests built from now on."""
        if not api_key:
            msg = "api_key cannot be empty"
            raise ValueError(msg)
        self._headers["Authorization"] = api_key
        logger.debug("API key replaced")

    @property
    def client(self) -> httpx.AsyncClient:
        """Get or create the underlying httpx client.

        Created lazily and recreated if it has been closed.
        """
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=self._timeout,
                transport=self._transport,
            )
        return self._client

    async def __aenter__(self):
        """Enter async context manager."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Exit async context manager and cleanup resources."""
        await self.aclose()

    async def aclose(self):
        """Close the HTTP client if open."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()

    def url_for(self, path: str, host: Host = Host.API) -> str:
        """Join an endpoint path onto the base URL of a host."""
        return f"{self._base_urls[host]}/{path.lstrip('/')}"

    def build_request(  # noqa: PLR0913
        self,
        method: str,
        path: str,
        *,
        host: Host = Host.API,
        params: QueryPairs | None = None,
        json: Any = None,
        api_key: str | None = None,
    ) -> httpx.Request:
        """Build a request, capturing the current headers.

        Args:
            method: HTTP method.
            path: Endpoint path relative to the host base URL.
            host: Target host.
            params: Ordered query parameters.
            json: JSON body, omitted when None.
            api_key: Key overriding the default one for this request only.

        Returns:
            A ready-to-send httpx.Request.
        """
        headers = self.headers
        if api_key is not None:
            headers["Authorization"] = api_key
        return self.client.build_request(
            method,
            self.url_for(path, host),
            params=params or None,
            json=json,
            headers=headers,
        )

    async def request(  # noqa: PLR0913
        self,
        method: str,
        path: str,
        *,
        host: Host = Host.API,
        params: QueryPairs | None = None,
        json: Any = None,
        kind: ResultKind = ResultKind.JSON,
        api_key: str | None = None,
        throw_on_error: bool = False,
    ) -> ApiResult:
        """Make an HTTP request to the Short.io API.

        Args:
            method: HTTP method.
            path: Endpoint path relative to the host base URL.
            host: Target host.
            params: Ordered query parameters.
            json: JSON body, omitted when None.
            kind: How to decode a successful body.
            api_key: Key overriding the default one for this request only.
            throw_on_error: Raise ApiError instead of returning a non-2xx result.

        Returns:
            ApiResult holding the decoded body.

        Raises:
            httpx.HTTPError: If the request could not be completed.
            ApiError: If throw_on_error is set and the status is not 2xx.
        """
        request = self.build_request(
            method,
            path,
            host=host,
            params=params,
            json=json,
            api_key=api_key,
        )
        start_time = time.time()
        try:
            logger.debug(
                "Making API request",
                method=method,
                url=str(request.url),
            )
            response = await self.client.send(request)
        except httpx.HTTPError:
            duration = time.time() - start_time
            logger.exception(
                "API request failed",
                method=method,
                url=str(request.url),
                duration_seconds=round(duration, 3),
            )
            raise

        duration = time.time() - start_time
        logger.debug(
            "API request completed",
            status_code=response.status_code,
            duration_seconds=round(duration, 3),
        )

        result = ApiResult(status_code=response.status_code, kind=kind, response=response)
        if result.ok:
            result.data = _decode_body(response, kind)
        else:
            result.error = _decode_error(response)
            logger.warning(
                "API error response",
                method=method,
                url=str(request.url),
                status_code=response.status_code,
            )
            if throw_on_error:
                result.raise_for_error()
        return result


def _decode_body(response: httpx.Response, kind: ResultKind) -> Any:
    """Decode a successful response body according to its result kind."""
    if kind is ResultKind.BINARY:
        return response.content
    if not response.content:
        return None
    return response.json()


def _decode_error(response: httpx.Response) -> Any:
    """Decode an error body, falling back to text when it is not JSON."""
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text
