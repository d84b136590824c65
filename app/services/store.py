"""MongoDB store service exposing a cached connection state."""

import logging

from pymongo import MongoClient, monitoring
from pymongo.errors import PyMongoError

from app.config import settings

logger = logging.getLogger(__name__)


class _HeartbeatListener(monitoring.ServerHeartbeatListener):
    """Keeps the store's connection flag in step with driver heartbeats."""

    def __init__(self, store: "StoreService"):
        self.store = store

    def started(self, event: monitoring.ServerHeartbeatStartedEvent) -> None:
        pass

    def succeeded(self, event: monitoring.ServerHeartbeatSucceededEvent) -> None:
        if not self.store.connected:
            logger.info(f"MongoDB reachable at {event.connection_id}")
        self.store.connected = True

    def failed(self, event: monitoring.ServerHeartbeatFailedEvent) -> None:
        if self.store.connected:
            logger.warning(f"MongoDB heartbeat failed: {event.reply}")
        self.store.connected = False


class StoreService:
    """Process-wide MongoDB connection. Nothing is persisted yet."""

    def __init__(self, mongo_uri: str | None = None, timeout_ms: int | None = None):
        self.mongo_uri = mongo_uri or settings.mongo_uri
        self.timeout_ms = timeout_ms or settings.mongo_timeout_ms
        self.client: MongoClient | None = None
        self.connected = False

    @property
    def is_connected(self) -> bool:
        """Cached connection state; never performs I/O."""
        return self.client is not None and self.connected

    def connect(self) -> None:
        """Connect to MongoDB. Failures are logged and never raised."""
        try:
            self.client = MongoClient(
                self.mongo_uri,
                serverSelectionTimeoutMS=self.timeout_ms,
                event_listeners=[_HeartbeatListener(self)],
            )
            self.client.admin.command("ping")
            self.connected = True
            logger.info("MongoDB connected")
        except PyMongoError as e:
            self.connected = False
            logger.warning(f"MongoDB connection failed: {e}")

    def close(self) -> None:
        """Close MongoDB connection."""
        if self.client:
            self.client.close()
            self.client = None
        self.connected = False
