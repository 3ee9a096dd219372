"""Link endpoints.

Create, look up, update, archive and delete short links, generate QR codes
and manage OpenGraph data. All requests go to the REST API host.
"""

from typing import Any

from ..api import ApiResult, ResultKind, ShortioRestApiClient, types
from ..api.query import build_query, options_to_pairs
from . import check_bulk_size, coerce_options, dump_options


async def list_links(
    client: ShortioRestApiClient,
    domain_id: int,
    options: types.LinkListOptions | dict[str, Any] | None = None,
    *,
    throw_on_error: bool = False,
) -> ApiResult:
    """Fetch links of a domain.

    The API returns 150 links by default; pass ``limit`` to change it and
    ``pageToken`` (from a previous ``nextPageToken``) to fetch the next page.

    Args:
        client: REST API client to use.
        domain_id: Domain id.
        options: Optional query options.
        throw_on_error: Raise ApiError for non-2xx responses.

    Returns:
        Result whose data is a LinksAndCount body.
    """
    options = coerce_options(options, types.LinkListOptions)
    params = build_query([("domain_id", domain_id), *options_to_pairs(options)])
    return await client.request(
        "GET",
        "/api/links",
        params=params,
        throw_on_error=throw_on_error,
    )


async def get_link(
    client: ShortioRestApiClient,
    link_id: str,
    *,
    throw_on_error: bool = False,
) -> ApiResult:
    """Fetch a link by its id string."""
    return await client.request(
        "GET",
        f"/links/{link_id}",
        throw_on_error=throw_on_error,
    )


async def get_link_by_path(
    client: ShortioRestApiClient,
    hostname: str,
    path: str,
    *,
    throw_on_error: bool = False,
) -> ApiResult:
    """Fetch a link by domain hostname and path."""
    return await client.request(
        "GET",
        "/links/expand",
        params=build_query([("domain", hostname), ("path", path)]),
        throw_on_error=throw_on_error,
    )


async def get_link_by_original_url(
    client: ShortioRestApiClient,
    hostname: str,
    original_url: str,
    *,
    throw_on_error: bool = False,
) -> ApiResult:
    """Fetch a link by domain hostname and the URL it points to."""
    return await client.request(
        "GET",
        "/links/by-original-url",
        params=build_query([("domain", hostname), ("originalURL", original_url)]),
        throw_on_error=throw_on_error,
    )


async def create_link(
    client: ShortioRestApiClient,
    hostname: str,
    original_url: str,
    options: types.LinkCreateOptions | dict[str, Any] | None = None,
    *,
    throw_on_error: bool = False,
) -> ApiResult:
    """Shorten a URL.

    If ``path`` is not given the service generates one using the algorithm
    configured for the domain.

    Args:
        client: REST API client to use.
        hostname: Domain hostname.
        original_url: URL the short link redirects to.
        options: Optional link attributes.
        throw_on_error: Raise ApiError for non-2xx responses.

    Returns:
        Result whose data is the created Link.
    """
    options = coerce_options(options, types.LinkCreateOptions)
    body = {"domain": hostname, "originalURL": original_url, **dump_options(options)}
    return await client.request(
        "POST",
        "/links",
        json=body,
        throw_on_error=throw_on_error,
    )


async def create_link_public(  # noqa: PLR0913
    client: ShortioRestApiClient,
    hostname: str,
    original_url: str,
    public_api_key: str,
    options: types.LinkCreateOptions | dict[str, Any] | None = None,
    *,
    throw_on_error: bool = False,
) -> ApiResult:
    """Shorten a URL using a public API key.

    The public key replaces the client's key for this request only.
    """
    options = coerce_options(options, types.LinkCreateOptions)
    body = {"domain": hostname, "originalURL": original_url, **dump_options(options)}
    return await client.request(
        "POST",
        "/links/public",
        json=body,
        api_key=public_api_key,
        throw_on_error=throw_on_error,
    )


async def bulk_create_links(
    client: ShortioRestApiClient,
    hostname: str,
    links: list[types.LinkBulkCreateOptions | dict[str, Any]],
    allow_duplicates: bool = False,  # noqa: FBT001, FBT002
    *,
    throw_on_error: bool = False,
) -> ApiResult:
    """Shorten up to 1000 URLs in one call.

    Args:
        client: REST API client to use.
        hostname: Domain hostname.
        links: Links to create, each with at least ``originalURL``.
        allow_duplicates: Create a new link even if one already exists for
            the same original URL.
        throw_on_error: Raise ApiError for non-2xx responses.

    Returns:
        Result whose data is a list of created links, or an error/status body.

    Raises:
        ValueError: If links is empty or longer than 1000 entries.
    """
    check_bulk_size(links, "link")
    entries = [
        dump_options(coerce_options(link, types.LinkBulkCreateOptions))
        for link in links
    ]
    return await client.request(
        "POST",
        "/links/bulk",
        json={
            "domain": hostname,
            "links": entries,
            "allowDuplicates": allow_duplicates,
        },
        throw_on_error=throw_on_error,
    )


async def update_link(
    client: ShortioRestApiClient,
    link_id: str,
    options: types.LinkUpdateOptions | dict[str, Any],
    *,
    throw_on_error: bool = False,
) -> ApiResult:
    """Update an existing link.

    Fields explicitly set to None are sent as JSON null, which clears them
    on the service side.

    Returns:
        Result whose data is the updated link with its owner, or whose
        error names the offending ``field``.
    """
    options = coerce_options(options, types.LinkUpdateOptions)
    return await client.request(
        "POST",
        f"/links/{link_id}",
        json=dump_options(options),
        throw_on_error=throw_on_error,
    )


async def delete_link(
    client: ShortioRestApiClient,
    link_id: str,
    *,
    throw_on_error: bool = False,
) -> ApiResult:
    """Delete a link by its id string."""
    return await client.request(
        "DELETE",
        f"/links/{link_id}",
        throw_on_error=throw_on_error,
    )


async def archive_link(
    client: ShortioRestApiClient,
    link_id: str,
    *,
    throw_on_error: bool = False,
) -> ApiResult:
    return await client.request(
        "POST",
        "/links/archive",
        json={"link_id": link_id},
        throw_on_error=throw_on_error,
    )


async def unarchive_link(
    client: ShortioRestApiClient,
    link_id: str,
    *,
    throw_on_error: bool = False,
) -> ApiResult:
    return await client.request(
        "POST",
        "/links/unarchive",
        json={"link_id": link_id},
        throw_on_error=throw_on_error,
    )


async def archive_links_bulk(
    client: ShortioRestApiClient,
    link_ids: list[str],
    *,
    throw_on_error: bool = False,
) -> ApiResult:
    """Archive up to 1000 links in one call.

    Raises:
        ValueError: If link_ids is empty or longer than 1000 entries.
    """
    check_bulk_size(link_ids, "link id")
    return await client.request(
        "POST",
        "/links/archive_bulk",
        json={"link_ids": list(link_ids)},
        throw_on_error=throw_on_error,
    )


async def unarchive_links_bulk(
    client: ShortioRestApiClient,
    link_ids: list[str],
    *,
    throw_on_error: bool = False,
) -> ApiResult:
    """Unarchive up to 1000 links in one call.

    Raises:
        ValueError: If link_ids is empty or longer than 1000 entries.
    """
    check_bulk_size(link_ids, "link id")
    return await client.request(
        "POST",
        "/links/unarchive_bulk",
        json={"link_ids": list(link_ids)},
        throw_on_error=throw_on_error,
    )


async def generate_qr_code(
    client: ShortioRestApiClient,
    link_id: str,
    options: types.GetLinkQRCodeOptions | dict[str, Any] | None = None,
    *,
    throw_on_error: bool = False,
) -> ApiResult:
    """Generate a QR code image for a link.

    Returns:
        Result whose data is the raw image bytes. Error bodies are still
        decoded as JSON.
    """
    options = coerce_options(options, types.GetLinkQRCodeOptions)
    return await client.request(
        "POST",
        f"/links/qr/{link_id}",
        json=dump_options(options) if options is not None else None,
        kind=ResultKind.BINARY,
        throw_on_error=throw_on_error,
    )


async def get_open_graph(
    client: ShortioRestApiClient,
    domain_id: int,
    link_id: str,
    *,
    throw_on_error: bool = False,
) -> ApiResult:
    """Fetch OpenGraph properties of a link as ``[property, value]`` pairs."""
    return await client.request(
        "GET",
        f"/links/opengraph/{domain_id}/{link_id}",
        throw_on_error=throw_on_error,
    )


async def update_open_graph(
    client: ShortioRestApiClient,
    domain_id: int,
    link_id: str,
    data: types.LinkOpenGraphData | list[tuple[str, str]] | list[list[str]],
    *,
    throw_on_error: bool = False,
) -> ApiResult:
    """Replace OpenGraph properties of a link."""
    if not isinstance(data, types.LinkOpenGraphData):
        data = types.LinkOpenGraphData.model_validate(data)
    return await client.request(
        "PUT",
        f"/links/opengraph/{domain_id}/{link_id}",
        json=data.model_dump(mode="json"),
        throw_on_error=throw_on_error,
    )
