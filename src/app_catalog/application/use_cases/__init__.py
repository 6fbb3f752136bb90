from __future__ import annotations

from .list_apps_use_case import ListAppsUseCase

__all__ = [
    "ListAppsUseCase",
]
