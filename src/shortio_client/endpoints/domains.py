"""Domain endpoints."""

from typing import Any

from ..api import ApiResult, ShortioRestApiClient, types
from . import coerce_options, dump_options


async def list_domains(
    client: ShortioRestApiClient,
    *,
    throw_on_error: bool = False,
) -> ApiResult:
    """Fetch all domains of the account."""
    return await client.request(
        "GET",
        "/api/domains",
        throw_on_error=throw_on_error,
    )


async def get_domain(
    client: ShortioRestApiClient,
    domain_id: int,
    *,
    throw_on_error: bool = False,
) -> ApiResult:
    return await client.request(
        "GET",
        f"/domains/{domain_id}",
        throw_on_error=throw_on_error,
    )


async def create_domain(
    client: ShortioRestApiClient,
    hostname: str,
    options: types.DomainCreateOptions | dict[str, Any] | None = None,
    *,
    throw_on_error: bool = False,
) -> ApiResult:
    """Register a new domain with the account.

    Args:
        client: REST API client to use.
        hostname: Hostname to register.
        options: Optional domain settings.
        throw_on_error: Raise ApiError for non-2xx responses.

    Returns:
        Result whose data is the created Domain.
    """
    options = coerce_options(options, types.DomainCreateOptions)
    return await client.request(
        "POST",
        "/domains",
        json={"hostname": hostname, **dump_options(options)},
        throw_on_error=throw_on_error,
    )
