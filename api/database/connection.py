"""
Database Connection Management

Handles the optional MongoDB connection and Beanie initialization.
"""

import logging
from typing import Optional

from beanie import init_beanie
from motor.motor_asyncio import AsyncIOMotorClient

from api.database.models import TransactionRecordMongo

logger = logging.getLogger(__name__)


class MongoDatabaseManager:
    """MongoDB client lifecycle for the collector"""

    def __init__(self, connection_string: str, database_name: str, timeout_ms: int = 5000):
        """
        Initialize database manager

        Args:
            connection_string: MongoDB URI
            database_name: Database used when the URI names none
            timeout_ms: Server selection timeout
        """
        self.connection_string = connection_string
        self.database_name = database_name
        self.timeout_ms = timeout_ms
        self.client: Optional[AsyncIOMotorClient] = None
        self._initialized = False

    @property
    def initialized(self) -> bool:
        return self._initialized

    async def initialize(self) -> None:
        """
        Connect, check the server answers and register document models

        Raises:
            Exception: MongoDB is unreachable or rejected the connection
        """
        if self._initialized:
            return

        self.client = AsyncIOMotorClient(self.connection_string, serverSelectionTimeoutMS=self.timeout_ms)
        try:
            await self.client.admin.command("ping")
            database = self.client.get_default_database(default=self.database_name)
            await init_beanie(database=database, document_models=[TransactionRecordMongo])
        except Exception:
            self.client.close()
            self.client = None
            raise

        self._initialized = True
        logger.info(f"Connected to MongoDB database '{database.name}'")

    async def close(self) -> None:
        """Close database connections"""
        if self.client:
            self.client.close()
            self.client = None
        self._initialized = False
