from __future__ import annotations

from typing import Any, Literal, get_args

from pydantic import BaseModel, Field

SortField = Literal["rating", "size", "downloads"]
SortOrder = Literal["asc", "desc"]

SORT_FIELDS: tuple[str, ...] = get_args(SortField)

ASCENDING = 1
DESCENDING = -1


class ListQuery(BaseModel):
    """
    Normalized parameters for one list request.

    Produced once per request from the raw query string values, before any
    store access. Every field is already defaulted and validated, so the
    query builders downstream never have to re-check them.

    Attributes:
        limit: Maximum number of records to return. None means "all remaining matches".
        skip: Number of matching records to drop from the front of the ordered set.
        sort: Primary sort field, always one of SORT_FIELDS.
        order: "asc" or "desc".
        search: Case-insensitive substring matched against the title. Empty means no filter.
    """

    limit: int | None = Field(default=None, ge=1)
    skip: int = Field(default=0, ge=0)
    sort: SortField = "size"
    order: SortOrder = "desc"
    search: str = ""

    model_config = {"frozen": True}

    @property
    def direction(self) -> int:
        return ASCENDING if self.order == "asc" else DESCENDING


class AppPage(BaseModel):
    """One page of projected app records plus the total number of matches."""

    items: list[dict[str, Any]] = Field(default_factory=list)
    total: int = Field(default=0, ge=0)

    def to_response(self) -> dict[str, Any]:
        return {"apps": self.items, "total": self.total}
