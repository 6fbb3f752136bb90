from __future__ import annotations

import logging
from typing import Mapping, Sequence

from ...domain.errors import InternalFailureError, StoreError
from ...domain.models import AppPage, ListQuery
from ...services.query_builder import (
    DEFAULT_TIE_BREAK_FIELD,
    build_filter,
    build_projection,
    build_sort,
)
from ...services.query_params import normalize_list_params
from ..interfaces import AppStore, NullObservabilityRecorder, ObservabilityRecorder

logger = logging.getLogger(__name__)


class ListAppsUseCase:
    """Use case returning one filtered, sorted page of apps plus the total match count.

    The count and the page fetch are two independent store reads that share the
    same predicate. Writes landing between them can make ``total`` momentarily
    disagree with the pages; callers tolerate that.
    """

    def __init__(
        self,
        store: AppStore,
        *,
        observability: ObservabilityRecorder | None = None,
        default_sort: str = "size",
        max_limit: int | None = None,
        tie_break_field: str = DEFAULT_TIE_BREAK_FIELD,
        projection_exclude: Sequence[str] = ("description", "ratings"),
    ) -> None:
        self.store = store
        self.observability = observability or NullObservabilityRecorder()
        self.default_sort = default_sort
        self.max_limit = max_limit
        self.tie_break_field = tie_break_field
        self.projection = build_projection(projection_exclude)

    def parse(self, params: Mapping[str, str | None]) -> ListQuery:
        return normalize_list_params(
            params,
            default_sort=self.default_sort,
            max_limit=self.max_limit,
        )

    def execute(self, params: Mapping[str, str | None]) -> AppPage:
        """
        Execute the list apps use case.

        Args:
            params: Raw query string values (limit, skip, sort, order, search)

        Returns:
            AppPage with the projected records and the total match count

        Raises:
            InvalidParameterError: If the sort field is not allow-listed
            InternalFailureError: If the store cannot be read
        """
        return self.run(self.parse(params))

    def run(self, query: ListQuery) -> AppPage:
        predicate = build_filter(query.search)
        sort = build_sort(query, self.tie_break_field)

        try:
            total = self.store.count(predicate)
            items = self.store.find(
                predicate,
                sort=sort,
                skip=query.skip,
                limit=query.limit,
                projection=self.projection,
            )
        except StoreError as exc:
            logger.error("List apps query failed: query=%s, error=%s", query.model_dump(), exc)
            raise InternalFailureError() from exc

        self.observability.record_event(
            stage="list_apps",
            details={
                **query.model_dump(),
                "total": total,
                "returned": len(items),
            },
        )
        return AppPage(items=items, total=total)
