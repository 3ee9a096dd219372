"""Region rule endpoints.

Like country rules, but keyed by a region within a country.
"""

from typing import Any

from ..api import ApiResult, ShortioRestApiClient, types
from . import check_bulk_size, coerce_options, dump_options


async def list_link_regions(
    client: ShortioRestApiClient,
    link_id: str,
    *,
    throw_on_error: bool = False,
) -> ApiResult:
    """Fetch the region rules of a link."""
    return await client.request(
        "GET",
        f"/link_region/{link_id}",
        throw_on_error=throw_on_error,
    )


async def list_regions(
    client: ShortioRestApiClient,
    country: str,
    *,
    throw_on_error: bool = False,
) -> ApiResult:
    """Fetch the region codes the service knows for a country."""
    return await client.request(
        "GET",
        f"/link_region/list_regions/{country}",
        throw_on_error=throw_on_error,
    )


async def create_link_region(
    client: ShortioRestApiClient,
    link_id: str,
    options: types.LinkRegionCreateOptions | dict[str, Any],
    *,
    throw_on_error: bool = False,
) -> ApiResult:
    """Create a region rule for a link."""
    options = coerce_options(options, types.LinkRegionCreateOptions)
    return await client.request(
        "POST",
        f"/link_region/{link_id}",
        json=dump_options(options),
        throw_on_error=throw_on_error,
    )


async def create_link_regions_bulk(
    client: ShortioRestApiClient,
    link_id: str,
    rules: list[types.LinkRegionCreateOptions | dict[str, Any]],
    *,
    throw_on_error: bool = False,
) -> ApiResult:
    """Create several region rules for a link in one call.

    Raises:
        ValueError: If rules is empty or longer than 1000 entries.
    """
    check_bulk_size(rules, "region rule")
    body = [
        dump_options(coerce_options(rule, types.LinkRegionCreateOptions))
        for rule in rules
    ]
    return await client.request(
        "POST",
        f"/link_region/bulk/{link_id}",
        json=body,
        throw_on_error=throw_on_error,
    )


async def delete_link_region(
    client: ShortioRestApiClient,
    link_id: str,
    country: str,
    region: str,
    *,
    throw_on_error: bool = False,
) -> ApiResult:
    return await client.request(
        "DELETE",
        f"/link_region/{link_id}/{country}/{region}",
        throw_on_error=throw_on_error,
    )
