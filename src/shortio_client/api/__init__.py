"""Short.io REST API client package.

Provides an async HTTP client for the Short.io API that returns decoded
response bodies untouched, plus pydantic models describing the wire types.
Endpoint functions live in :mod:`shortio_client.endpoints`.

Exports:
    ShortioRestApiClient: HTTP client with authentication and host selection.
    ApiResult: Outcome of a call holding either data or error.
    ApiError: Raised for non-2xx responses when requested.
    types: Module containing Pydantic models for requests and responses.
    schemas: Module containing request/response validators.
"""

from . import schemas, types
from .client import (
    DEFAULT_BASE_URL,
    DEFAULT_STATISTICS_URL,
    DEFAULT_TIMEOUT,
    ApiError,
    ApiResult,
    Host,
    ResultKind,
    ShortioError,
    ShortioRestApiClient,
)

__all__ = [
    "DEFAULT_BASE_URL",
    "DEFAULT_STATISTICS_URL",
    "DEFAULT_TIMEOUT",
    "ApiError",
    "ApiResult",
    "Host",
    "ResultKind",
    "ShortioError",
    "ShortioRestApiClient",
    "schemas",
    "types",
]
