"""Statistics endpoints.

Click statistics for links and domains. These requests go to the separate
statistics host. The GET variants carry their options in the query string,
so they only accept primitive options; use the POST variants to pass
``include``/``exclude`` filters.
"""

from typing import Any

from ..api import ApiResult, Host, ShortioRestApiClient, types
from ..api.query import build_query, options_to_pairs
from . import coerce_options, dump_options


async def get_link_statistics(
    client: ShortioRestApiClient,
    link_id: str,
    options: types.GetStatisticsOptions | dict[str, Any] | None = None,
    *,
    throw_on_error: bool = False,
) -> ApiResult:
    """Fetch click statistics of a link.

    Args:
        client: REST API client to use.
        link_id: Link id string.
        options: Optional period, date range, timezone and chart interval.
        throw_on_error: Raise ApiError for non-2xx responses.

    Returns:
        Result whose data is a LinkStatistics body.

    Raises:
        TypeError: If an option value cannot be put in a query string.
    """
    options = coerce_options(options, types.GetStatisticsOptions)
    return await client.request(
        "GET",
        f"/link/{link_id}",
        host=Host.STATISTICS,
        params=build_query(options_to_pairs(options)),
        throw_on_error=throw_on_error,
    )


async def get_link_statistics_post(
    client: ShortioRestApiClient,
    link_id: str,
    options: types.FilteredStatisticsOptions | dict[str, Any] | None = None,
    *,
    throw_on_error: bool = False,
) -> ApiResult:
    """Same as get_link_statistics, with every option in the request body."""
    options = coerce_options(options, types.FilteredStatisticsOptions)
    return await client.request(
        "POST",
        f"/link/{link_id}",
        host=Host.STATISTICS,
        json=dump_options(options),
        throw_on_error=throw_on_error,
    )


async def get_domain_statistics(
    client: ShortioRestApiClient,
    domain_id: int,
    options: types.GetStatisticsOptions | dict[str, Any] | None = None,
    *,
    throw_on_error: bool = False,
) -> ApiResult:
    """Fetch click statistics of a domain.

    Raises:
        TypeError: If an option value cannot be put in a query string.
    """
    options = coerce_options(options, types.GetStatisticsOptions)
    return await client.request(
        "GET",
        f"/domain/{domain_id}",
        host=Host.STATISTICS,
        params=build_query(options_to_pairs(options)),
        throw_on_error=throw_on_error,
    )


async def get_domain_statistics_post(
    client: ShortioRestApiClient,
    domain_id: int,
    options: types.FilteredStatisticsOptions | dict[str, Any] | None = None,
    *,
    throw_on_error: bool = False,
) -> ApiResult:
    """Same as get_domain_statistics, with every option in the request body."""
    options = coerce_options(options, types.FilteredStatisticsOptions)
    return await client.request(
        "POST",
        f"/domain/{domain_id}",
        host=Host.STATISTICS,
        json=dump_options(options),
        throw_on_error=throw_on_error,
    )


async def get_link_clicks(
    client: ShortioRestApiClient,
    domain_id: int,
    options: types.LinkClicksOptions | dict[str, Any],
    *,
    throw_on_error: bool = False,
) -> ApiResult:
    """Fetch click counts for a comma separated list of link ids.

    Returns:
        Result whose data maps link id strings to click counts.
    """
    options = coerce_options(options, types.LinkClicksOptions)
    return await client.request(
        "GET",
        f"/domain/{domain_id}/link_clicks",
        host=Host.STATISTICS,
        params=build_query(options_to_pairs(options)),
        throw_on_error=throw_on_error,
    )


async def get_link_clicks_by_path_dates(
    client: ShortioRestApiClient,
    domain_id: int,
    path_dates: list[types.PathDate | dict[str, Any]],
    options: types.StartEndDate | dict[str, Any] | None = None,
    *,
    throw_on_error: bool = False,
) -> ApiResult:
    """Fetch click counts for links identified by path and creation date.

    Returns:
        Result whose data maps link paths to click counts.
    """
    options = coerce_options(options, types.StartEndDate)
    paths_dates = [
        dump_options(coerce_options(item, types.PathDate)) for item in path_dates
    ]
    return await client.request(
        "POST",
        f"/domain/{domain_id}/link_clicks",
        host=Host.STATISTICS,
        params=build_query(options_to_pairs(options)),
        json={"pathsDates": paths_dates},
        throw_on_error=throw_on_error,
    )


async def get_top_by_column(
    client: ShortioRestApiClient,
    domain_id: int,
    column: types.Column | str,
    options: types.TopByColumnOptions | dict[str, Any] | None = None,
    *,
    throw_on_error: bool = False,
) -> ApiResult:
    """Fetch the top values of a column, ordered by clicks descending."""
    options = coerce_options(options, types.TopByColumnOptions)
    return await client.request(
        "POST",
        f"/domain/{domain_id}/top",
        host=Host.STATISTICS,
        json={"column": str(column), **dump_options(options)},
        throw_on_error=throw_on_error,
    )


async def get_top_by_interval(
    client: ShortioRestApiClient,
    domain_id: int,
    column: types.Column | str,
    options: types.TopByIntervalOptions | dict[str, Any] | None = None,
    *,
    throw_on_error: bool = False,
) -> ApiResult:
    """Fetch the values of a column with their counts per time interval."""
    options = coerce_options(options, types.TopByIntervalOptions)
    return await client.request(
        "POST",
        f"/domain/{domain_id}/top_by_interval",
        host=Host.STATISTICS,
        json={"column": str(column), **dump_options(options)},
        throw_on_error=throw_on_error,
    )


async def get_last_clicks(
    client: ShortioRestApiClient,
    domain_id: int,
    options: types.GetLastClicksOptions | dict[str, Any] | None = None,
    *,
    throw_on_error: bool = False,
) -> ApiResult:
    """Fetch the latest raw clicks of a domain."""
    options = coerce_options(options, types.GetLastClicksOptions)
    return await client.request(
        "POST",
        f"/domain/{domain_id}/last_clicks",
        host=Host.STATISTICS,
        json=dump_options(options) if options is not None else None,
        throw_on_error=throw_on_error,
    )


async def clear_domain_statistics(
    client: ShortioRestApiClient,
    domain_id: int,
    *,
    throw_on_error: bool = False,
) -> ApiResult:
    """Delete all collected statistics of a domain."""
    return await client.request(
        "DELETE",
        f"/domain/{domain_id}/statistics",
        host=Host.STATISTICS,
        throw_on_error=throw_on_error,
    )
