"""Query string construction.

Queries are built from an explicit, ordered sequence of ``(key, value)``
pairs so the resulting URL is deterministic. Only primitive values can be
expressed in a query string; anything else has to go into a request body.
Percent-encoding is left to httpx.
"""

from collections.abc import Iterable, Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel

QueryPairs = list[tuple[str, str]]


def format_value(value: Any) -> str:
    """Render a primitive value the way the API expects it in a query.

    Raises:
        TypeError: If the value is a container or otherwise not primitive.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, int | float | str):
        return str(value)
    msg = f"Cannot encode {type(value).__name__} value in a query string"
    raise TypeError(msg)


def build_query(pairs: Iterable[tuple[str, Any]]) -> QueryPairs:
    """Build query parameters from ordered ``(key, value)`` pairs.

    Pairs whose value is ``None`` are skipped. Order is preserved and keys
    are not de-duplicated.

    Args:
        pairs: Ordered key/value pairs.

    Returns:
        List of ``(key, str)`` pairs ready to hand to httpx.

    Raises:
        TypeError: If a value is not a primitive.
    """
    return [(key, format_value(value)) for key, value in pairs if value is not None]


def options_to_pairs(options: BaseModel | None) -> list[tuple[str, Any]]:
    """List the set fields of an options model in declaration order.

    Declared fields come first, in the order the model declares them,
    followed by any extra fields in insertion order.
    """
    if options is None:
        return []
    pairs = [
        (name, getattr(options, name))
        for name in type(options).model_fields
        if name in options.model_fields_set
    ]
    extra: Mapping[str, Any] = options.model_extra or {}
    pairs.extend(extra.items())
    return pairs
