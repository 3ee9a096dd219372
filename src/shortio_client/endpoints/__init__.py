"""Endpoint functions for the Short.io API.

One module per resource family. Every function takes a
:class:`~shortio_client.api.ShortioRestApiClient` as its first argument,
issues exactly one request and returns an
:class:`~shortio_client.api.ApiResult`.
"""

from typing import Any, TypeVar

from pydantic import BaseModel

from ..api import types

OptionsT = TypeVar("OptionsT", bound=BaseModel)


def coerce_options(
    options: OptionsT | dict[str, Any] | None,
    model: type[OptionsT],
) -> OptionsT | None:
    """Accept either a typed options model or a plain mapping.

    Raises:
        pydantic.ValidationError: If the mapping does not fit the model.
    """
    if options is None or isinstance(options, model):
        return options
    return model.model_validate(options)


def dump_options(options: BaseModel | None) -> dict[str, Any]:
    """Dump only the fields the caller set, as JSON-ready values."""
    if options is None:
        return {}
    return options.model_dump(mode="json", exclude_unset=True)


def check_bulk_size(items: list[Any], what: str) -> None:
    """Reject empty batches and batches above the bulk limit."""
    if not items:
        msg = f"at least one {what} is required"
        raise ValueError(msg)
    if len(items) > types.MAX_BULK_SIZE:
        msg = f"at most {types.MAX_BULK_SIZE} {what}s per request, got {len(items)}"
        raise ValueError(msg)
