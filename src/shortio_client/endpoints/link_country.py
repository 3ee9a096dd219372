"""Country rule endpoints.

A country rule redirects visitors from one country to a different URL than
the link's original one.
"""

from typing import Any

from ..api import ApiResult, ShortioRestApiClient, types
from . import check_bulk_size, coerce_options, dump_options


async def list_link_countries(
    client: ShortioRestApiClient,
    link_id: str,
    *,
    throw_on_error: bool = False,
) -> ApiResult:
    """Fetch the country rules of a link."""
    return await client.request(
        "GET",
        f"/link_country/{link_id}",
        throw_on_error=throw_on_error,
    )


async def create_link_country(
    client: ShortioRestApiClient,
    link_id: str,
    options: types.LinkCountryCreateOptions | dict[str, Any],
    *,
    throw_on_error: bool = False,
) -> ApiResult:
    """Create a country rule for a link.

    Args:
        client: REST API client to use.
        link_id: Link id string.
        options: Country code and the URL to redirect to.
        throw_on_error: Raise ApiError for non-2xx responses.

    Returns:
        Result whose data is the created LinkCountry.
    """
    options = coerce_options(options, types.LinkCountryCreateOptions)
    return await client.request(
        "POST",
        f"/link_country/{link_id}",
        json=dump_options(options),
        throw_on_error=throw_on_error,
    )


async def create_link_countries_bulk(
    client: ShortioRestApiClient,
    link_id: str,
    rules: list[types.LinkCountryCreateOptions | dict[str, Any]],
    *,
    throw_on_error: bool = False,
) -> ApiResult:
    """Create several country rules for a link in one call.

    Raises:
        ValueError: If rules is empty or longer than 1000 entries.
    """
    check_bulk_size(rules, "country rule")
    body = [
        dump_options(coerce_options(rule, types.LinkCountryCreateOptions))
        for rule in rules
    ]
    return await client.request(
        "POST",
        f"/link_country/bulk/{link_id}",
        json=body,
        throw_on_error=throw_on_error,
    )


async def delete_link_country(
    client: ShortioRestApiClient,
    link_id: str,
    country: str,
    *,
    throw_on_error: bool = False,
) -> ApiResult:
    return await client.request(
        "DELETE",
        f"/link_country/{link_id}/{country}",
        throw_on_error=throw_on_error,
    )
