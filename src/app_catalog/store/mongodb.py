from __future__ import annotations

import logging
from typing import Any, Sequence

from pymongo import ASCENDING, MongoClient
from pymongo.collection import Collection
from pymongo.errors import PyMongoError, ServerSelectionTimeoutError

from ..application.interfaces import AppStore, Predicate, Projection, SortSpec
from ..domain.errors import StoreError
from ..domain.models import SORT_FIELDS

logger = logging.getLogger(__name__)


class MongoAppStore(AppStore):
    """
    App store adapter for a MongoDB (or MongoDB-compatible) collection.

    Features:
    - Lazy connection on first query, verified with ``ping``
    - Connection pooling via pymongo
    - Every pymongo failure surfaces as ``StoreError``
    - ``_id`` values are returned as strings so records serialize to JSON
    """

    def __init__(
        self,
        uri: str | None,
        database_name: str | None,
        collection_name: str = "apps",
        server_selection_timeout_ms: int = 5000,
        client: MongoClient | None = None,
    ) -> None:
        """
        Initialize the MongoDB app store adapter.

        Args:
            uri: MongoDB connection URI. Required unless ``client`` is given
            database_name: Database holding the apps collection
            collection_name: Collection name. Default: "apps"
            server_selection_timeout_ms: How long pymongo waits for a server before failing
            client: Pre-built client, used instead of connecting to ``uri``
        """
        if not uri and client is None:
            raise ValueError(
                "MongoDB URI is required. Set STORE__MONGODB_URI environment variable "
                "or pass uri parameter to MongoAppStore."
            )
        if not database_name:
            raise ValueError(
                "MongoDB database name is required. Set STORE__MONGODB_DATABASE environment variable "
                "or pass database_name parameter to MongoAppStore."
            )

        self.uri = uri or ""
        self.database_name = database_name
        self.collection_name = collection_name
        self.server_selection_timeout_ms = server_selection_timeout_ms

        self._client: MongoClient | None = client
        self._collection: Collection | None = None

        logger.info(
            "MongoAppStore initialized: database=%s, collection=%s",
            self.database_name,
            self.collection_name,
        )

    def _ensure_connection(self) -> Collection:
        """Establish the connection if not already connected and return the collection."""
        if self._collection is not None:
            return self._collection
        try:
            if self._client is None:
                logger.debug("Connecting to MongoDB: %s", self._masked_uri())
                self._client = MongoClient(
                    self.uri,
                    serverSelectionTimeoutMS=self.server_selection_timeout_ms,
                )
            self._client.admin.command("ping")
        except ServerSelectionTimeoutError as exc:
            logger.error("Failed to connect to MongoDB: %s", exc)
            raise StoreError(f"Cannot connect to MongoDB: {exc}") from exc
        except PyMongoError as exc:
            logger.error("Unexpected error connecting to MongoDB: %s", exc)
            raise StoreError(f"Cannot connect to MongoDB: {exc}") from exc

        self._collection = self._client[self.database_name][self.collection_name]
        logger.info("Successfully connected to MongoDB")
        return self._collection

    def _masked_uri(self) -> str:
        """Return URI with password masked for logging."""
        if "@" not in self.uri:
            return self.uri
        credentials, host = self.uri.rsplit("@", 1)
        if "://" in credentials:
            scheme, user_pass = credentials.split("://", 1)
            if ":" in user_pass:
                user = user_pass.split(":", 1)[0]
                return f"{scheme}://{user}:****@{host}"
        return self.uri

    def ensure_indexes(self, fields: Sequence[str] = SORT_FIELDS, tie_break_field: str = "_id") -> None:
        """Create one compound index per sort field, paired with the tie-break field."""
        collection = self._ensure_connection()
        try:
            for field in fields:
                name = collection.create_index([(field, ASCENDING), (tie_break_field, ASCENDING)])
                logger.info("Ensured index %s", name)
        except PyMongoError as exc:
            logger.error("Failed to create indexes: %s", exc)
            raise StoreError(f"Cannot create indexes: {exc}") from exc

    def count(self, predicate: Predicate) -> int:
        collection = self._ensure_connection()
        try:
            return collection.count_documents(dict(predicate))
        except PyMongoError as exc:
            logger.error("Failed to count apps: %s", exc)
            raise StoreError(f"Count failed: {exc}") from exc

    def find(
        self,
        predicate: Predicate,
        *,
        sort: SortSpec,
        skip: int = 0,
        limit: int | None = None,
        projection: Projection | None = None,
    ) -> list[dict[str, Any]]:
        collection = self._ensure_connection()
        try:
            cursor = collection.find(dict(predicate), dict(projection) if projection else None)
            cursor = cursor.sort(list(sort)).skip(skip)
            if limit:
                cursor = cursor.limit(limit)
            records = list(cursor)
        except PyMongoError as exc:
            logger.error("Failed to fetch apps: %s", exc)
            raise StoreError(f"Find failed: {exc}") from exc

        for record in records:
            if "_id" in record:
                record["_id"] = str(record["_id"])
        logger.debug("Fetched %d apps (skip=%d, limit=%s)", len(records), skip, limit)
        return records

    def close(self) -> None:
        """Close the MongoDB connection."""
        if self._client:
            self._client.close()
            self._client = None
            self._collection = None
            logger.info("MongoDB connection closed")

    def __enter__(self) -> MongoAppStore:
        """Context manager entry."""
        return self

    def __exit__(self, exc_type: type[BaseException] | None, exc_val: BaseException | None, exc_tb: Any) -> None:
        """Context manager exit."""
        self.close()
