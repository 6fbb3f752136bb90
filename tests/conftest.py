from __future__ import annotations

import os
from typing import Any

import pytest

# Force the in-memory store *before* any application modules are imported so the
# container never tries to reach a real MongoDB during unit tests.
os.environ["STORE__DRIVER"] = "in_memory"
os.environ.pop("STORE__MONGODB_URI", None)
os.environ.pop("STORE__SEED_PATH", None)

from src.app_catalog.store import InMemoryAppStore  # noqa: E402

TITLES = [
    "Calculator Pro",
    "Photo Editor",
    "Weather Now",
    "Budget Tracker",
    "calc lite",
]


def build_app(index: int, **overrides: Any) -> dict[str, Any]:
    app = {
        "_id": f"app-{index:03d}",
        "title": f"App {index:03d}",
        "rating": round(1 + (index % 5) * 0.9, 1),
        "size": (index * 37) % 11,  # many ties on purpose
        "downloads": 1000 - index * 10,
        "description": "A long marketing description " * 20,
        "ratings": {"5": index, "4": 1, "3": 0, "2": 0, "1": 0},
    }
    app.update(overrides)
    return app


@pytest.fixture
def app_factory():
    return build_app


@pytest.fixture
def sample_apps() -> list[dict[str, Any]]:
    apps = [build_app(i) for i in range(20)]
    for offset, title in enumerate(TITLES):
        apps.append(build_app(100 + offset, title=title))
    return apps


@pytest.fixture
def store(sample_apps) -> InMemoryAppStore:
    return InMemoryAppStore(sample_apps)
