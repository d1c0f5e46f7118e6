"""
Storage Dependencies

Startup selection of the transaction store and FastAPI dependency access to
the collector service.
"""

import logging

from fastapi import HTTPException, Request

from api.config import Settings
from api.database.connection import MongoDatabaseManager
from api.database.repositories import InMemoryTransactionStore, MongoTransactionStore, TransactionStore
from api.services.transaction_service import TransactionCollectorService

logger = logging.getLogger(__name__)


async def create_transaction_store(settings: Settings) -> tuple[TransactionStore, MongoDatabaseManager | None]:
    """
    Pick the store for this process

    MongoDB is used when configured and reachable; otherwise records stay in memory.

    Returns:
        Store and the database manager to close on shutdown (None in memory mode)
    """
    if not settings.mongo_configured:
        logger.info("No MONGODB_URI provided. Running with in-memory storage only.")
        return InMemoryTransactionStore(), None

    db_manager = MongoDatabaseManager(settings.mongodb_uri, settings.mongodb_database, settings.mongodb_timeout_ms)
    try:
        await db_manager.initialize()
    except Exception as e:
        logger.error(f"Failed to connect to MongoDB: {e}")
        logger.error("Continuing without MongoDB (in-memory storage only)...")
        return InMemoryTransactionStore(), None

    return MongoTransactionStore(), db_manager


def build_collector_service(store: TransactionStore, settings: Settings) -> TransactionCollectorService:
    return TransactionCollectorService(
        store,
        default_network=settings.default_network,
        history_limit=settings.history_limit,
    )


def get_transaction_service(request: Request) -> TransactionCollectorService:
    """Collector service created during application startup"""
    service = getattr(request.app.state, "transaction_service", None)
    if service is None:
        raise HTTPException(status_code=503, detail="Service is starting up")
    return service
