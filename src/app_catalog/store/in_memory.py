from __future__ import annotations

import copy
import re
from typing import Any, Iterable, Mapping
from uuid import uuid4

from ..application.interfaces import AppStore, Predicate, Projection, SortSpec


def _matches_condition(value: Any, condition: Any) -> bool:
    if isinstance(condition, Mapping) and "$regex" in condition:
        if not isinstance(value, str):
            return False
        flags = re.IGNORECASE if "i" in condition.get("$options", "") else 0
        return re.search(condition["$regex"], value, flags) is not None
    return value == condition


def matches(record: Mapping[str, Any], predicate: Predicate) -> bool:
    """Evaluate the subset of MongoDB filters produced by the query builder."""
    return all(_matches_condition(record.get(field), condition) for field, condition in predicate.items())


def _sort_key(record: Mapping[str, Any], field: str) -> tuple:
    # missing and null values order before everything else, like MongoDB
    value = record.get(field)
    if value is None:
        return (0,)
    return (1, value)


class InMemoryAppStore(AppStore):
    """Development-friendly store that keeps app records in memory."""

    def __init__(self, records: Iterable[Mapping[str, Any]] | None = None) -> None:
        self._records: list[dict[str, Any]] = []
        if records:
            self.insert_many(records)

    def insert_many(self, records: Iterable[Mapping[str, Any]]) -> list[str]:
        inserted: list[str] = []
        for record in records:
            document = copy.deepcopy(dict(record))
            # ids are kept as strings so the tie-break sort never compares mixed types
            document["_id"] = str(document["_id"]) if document.get("_id") is not None else str(uuid4())
            self._records.append(document)
            inserted.append(document["_id"])
        return inserted

    def clear(self) -> None:
        self._records.clear()

    def count(self, predicate: Predicate) -> int:  # noqa: D401
        return sum(1 for record in self._records if matches(record, predicate))

    def find(
        self,
        predicate: Predicate,
        *,
        sort: SortSpec,
        skip: int = 0,
        limit: int | None = None,
        projection: Projection | None = None,
    ) -> list[dict[str, Any]]:
        selected = [record for record in self._records if matches(record, predicate)]
        # stable sorts applied from the least significant key keep earlier keys dominant
        for field, direction in reversed(list(sort)):
            selected.sort(key=lambda record: _sort_key(record, field), reverse=direction < 0)

        page = selected[skip:] if limit is None else selected[skip : skip + limit]
        excluded = {field for field, flag in (projection or {}).items() if not flag}
        return [
            {key: copy.deepcopy(value) for key, value in record.items() if key not in excluded}
            for record in page
        ]
