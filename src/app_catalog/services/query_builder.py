from __future__ import annotations

import re
from typing import Any, Sequence

from ..domain.models import ListQuery

SEARCH_FIELD = "title"
DEFAULT_TIE_BREAK_FIELD = "_id"


def build_filter(search: str) -> dict[str, Any]:
    """Return the predicate shared by the count and the page fetch.

    Empty search matches every record; otherwise the title must contain the
    search text, case-insensitively. The text is matched literally.
    """
    if not search:
        return {}
    return {SEARCH_FIELD: {"$regex": re.escape(search), "$options": "i"}}


def build_sort(query: ListQuery, tie_break_field: str = DEFAULT_TIE_BREAK_FIELD) -> list[tuple[str, int]]:
    """Return the primary sort key followed by a unique tie-break key in the same direction."""
    direction = query.direction
    sort = [(query.sort, direction)]
    if tie_break_field != query.sort:
        sort.append((tie_break_field, direction))
    return sort


def build_projection(exclude: Sequence[str]) -> dict[str, int] | None:
    if not exclude:
        return None
    return {field: 0 for field in exclude}
