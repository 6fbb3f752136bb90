from __future__ import annotations

from typing import Any, Mapping, Protocol, Sequence, runtime_checkable

Predicate = Mapping[str, Any]
SortSpec = Sequence[tuple[str, int]]
Projection = Mapping[str, int]


@runtime_checkable
class AppStore(Protocol):
    """Port describing the read primitives the list query needs from a document store.

    Adapters raise ``StoreError`` when the store is unreachable or a query fails.
    """

    def count(self, predicate: Predicate) -> int:
        """Return the number of records matching the predicate."""

    def find(
        self,
        predicate: Predicate,
        *,
        sort: SortSpec,
        skip: int = 0,
        limit: int | None = None,
        projection: Projection | None = None,
    ) -> list[dict[str, Any]]:
        """Return matching records ordered by ``sort``, after dropping ``skip`` and keeping at most ``limit``.

        Args:
            predicate: Filter built by ``build_filter``
            sort: Ordered (field, direction) pairs; direction is 1 or -1
            skip: Number of ordered matches to drop
            limit: Maximum number of records to return, None for no bound
            projection: Exclusion projection ({field: 0}) applied after filtering and sorting
        """


class ObservabilityRecorder(Protocol):
    """Port describing how domain events are emitted."""

    def record_event(
        self,
        stage: str,
        details: Mapping[str, Any] | None = None,
        trace_id: str | None = None,
    ) -> None:
        """Emit a structured event for the given stage.

        Args:
            stage: Name of the operation
            details: Optional structured details about the event
            trace_id: Optional trace ID for linking events
        """


class NullObservabilityRecorder(ObservabilityRecorder):
    """No-op recorder used by default in tests and as a fallback."""

    def record_event(
        self,
        stage: str,
        details: Mapping[str, Any] | None = None,
        trace_id: str | None = None,
    ) -> None:  # noqa: D401
        """No-op implementation that does nothing."""
        return None
