from __future__ import annotations

from typing import Any


class AppCatalogError(Exception):
    """Base class for errors raised by the app catalog."""


class InvalidParameterError(AppCatalogError):
    """A query parameter was present but not acceptable."""

    def __init__(self, parameter: str, value: Any, message: str | None = None) -> None:
        self.parameter = parameter
        self.value = value
        super().__init__(message or f"Invalid value for '{parameter}': {value!r}")


class InternalFailureError(AppCatalogError):
    """The list query could not be executed. Carries no store detail."""

    def __init__(self, message: str = "Failed to fetch apps") -> None:
        super().__init__(message)


class StoreError(AppCatalogError):
    """Raised by store adapters when the backing store is unreachable or a query fails."""
