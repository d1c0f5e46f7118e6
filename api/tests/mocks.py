"""
Mock Stores for API Testing

Provides stand-in TransactionStore implementations and an in-process MongoDB
for isolated testing.
"""

from beanie import init_beanie
from mongomock_motor import AsyncMongoMockClient

from api.database.models import TransactionRecordMongo
from api.database.repositories.base import TransactionStore
from api.enums import StorageSource
from api.schemas.transaction import NewTransaction, TransactionRecord


async def init_mock_mongo(database_name: str = "cardano_dapp_test") -> AsyncMongoMockClient:
    """Register the document models against a fresh in-process MongoDB"""
    client = AsyncMongoMockClient()
    await init_beanie(database=client[database_name], document_models=[TransactionRecordMongo])
    return client


class FailingTransactionStore(TransactionStore):
    """Store that behaves like an unreachable database"""

    source = StorageSource.MONGO

    def __init__(self, error: Exception | None = None):
        self.error = error or ConnectionError("MongoDB server selection timed out")
        self.calls = 0

    async def add(self, transaction: NewTransaction) -> TransactionRecord:
        self.calls += 1
        raise self.error

    async def recent(self, limit: int) -> list[TransactionRecord]:
        self.calls += 1
        raise self.error
