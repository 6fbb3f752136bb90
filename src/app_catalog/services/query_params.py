"""Normalization of raw ``/apps`` query string values into a ``ListQuery``.

All parameters arrive as optional strings. Numeric parameters are always
coerced (never rejected); the sort field is the only parameter that can make a
request invalid.
"""

from __future__ import annotations

import re
from typing import Mapping

from ..domain.errors import InvalidParameterError
from ..domain.models import SORT_FIELDS, ListQuery

_INTEGER_RE = re.compile(r"^[+-]?\d+$")

# BSON stores skip/limit as 8-byte ints
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def parse_int(value: str | None) -> int | None:
    """Return ``value`` as an int clamped to the int64 range, or None when it is absent or not an integer literal."""
    if value is None:
        return None
    text = value.strip()
    if not _INTEGER_RE.match(text):
        return None
    return max(INT64_MIN, min(int(text), INT64_MAX))


def normalize_limit(value: str | None, max_limit: int | None = None) -> int | None:
    limit = parse_int(value)
    if limit is not None and limit <= 0:
        limit = None
    if max_limit is not None and (limit is None or limit > max_limit):
        return max_limit
    return limit


def normalize_skip(value: str | None) -> int:
    skip = parse_int(value)
    if skip is None or skip < 0:
        return 0
    return skip


def normalize_sort(value: str | None, default: str = "size") -> str:
    if value is None or value == "":
        return default
    if value not in SORT_FIELDS:
        raise InvalidParameterError(
            "sort",
            value,
            f"Invalid sort field '{value}'. Allowed: {', '.join(SORT_FIELDS)}",
        )
    return value


def normalize_order(value: str | None) -> str:
    # closed two-way choice: only the literal "asc" is ascending
    return "asc" if value == "asc" else "desc"


def normalize_list_params(
    params: Mapping[str, str | None],
    *,
    default_sort: str = "size",
    max_limit: int | None = None,
) -> ListQuery:
    """
    Validate and default the raw list parameters.

    Args:
        params: Raw query values keyed by ``limit``, ``skip``, ``sort``, ``order``, ``search``.
            Missing keys and None values are treated as absent.
        default_sort: Sort field used when ``sort`` is absent or empty
        max_limit: Optional upper bound applied to the limit (also to an absent one)

    Returns:
        A frozen ListQuery

    Raises:
        InvalidParameterError: If ``sort`` names a field outside the allow-list
    """
    return ListQuery(
        limit=normalize_limit(params.get("limit"), max_limit),
        skip=normalize_skip(params.get("skip")),
        sort=normalize_sort(params.get("sort"), default_sort),
        order=normalize_order(params.get("order")),
        search=params.get("search") or "",
    )
