from __future__ import annotations

import logging
from functools import lru_cache

from .application.interfaces import AppStore
from .application.use_cases import ListAppsUseCase
from .config import Settings, settings
from .observability.logger import LoggingObservabilityRecorder
from .store import InMemoryAppStore, MongoAppStore, load_seed_records

logger = logging.getLogger(__name__)


class AppContainer:
    """Application composition root wiring the store, observability, and use cases."""

    def __init__(self, app_settings: Settings | None = None, store: AppStore | None = None) -> None:
        self.settings = app_settings or settings
        self.observability = LoggingObservabilityRecorder()
        self.app_store = store if store is not None else self._create_app_store()

        query_settings = self.settings.query
        self.list_apps_use_case = ListAppsUseCase(
            store=self.app_store,
            observability=self.observability,
            default_sort=query_settings.default_sort,
            max_limit=query_settings.max_limit,
            tie_break_field=query_settings.tie_break_field,
            projection_exclude=query_settings.projection_exclude,
        )

    def _create_app_store(self) -> AppStore:
        """
        Factory method to create the app store adapter based on configuration.

        Returns:
            AppStore instance (InMemoryAppStore or MongoAppStore)
        """
        store_settings = self.settings.store
        driver = store_settings.driver

        if driver == "mongodb":
            logger.info("Initializing MongoDB app store")
            try:
                return MongoAppStore(
                    uri=store_settings.mongodb_uri,
                    database_name=store_settings.mongodb_database,
                    collection_name=store_settings.mongodb_collection,
                    server_selection_timeout_ms=store_settings.server_selection_timeout_ms,
                )
            except ValueError as exc:
                logger.error(
                    "Failed to initialize MongoDB app store: %s. Falling back to in-memory store.",
                    exc,
                )
                return self._create_in_memory_store()
        elif driver == "in_memory":
            logger.info("Using in-memory app store")
            return self._create_in_memory_store()
        else:
            logger.warning(
                "Unknown app store driver '%s', falling back to in-memory store",
                driver,
            )
            return self._create_in_memory_store()

    def _create_in_memory_store(self) -> InMemoryAppStore:
        seed_path = self.settings.store.seed_path
        if seed_path is None:
            return InMemoryAppStore()
        return InMemoryAppStore(load_seed_records(seed_path))


@lru_cache
def get_app_container() -> AppContainer:
    """Return a cached container instance so FastAPI dependencies share services."""

    return AppContainer()
