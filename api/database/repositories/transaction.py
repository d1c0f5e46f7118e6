"""
Transaction Stores

MongoDB-backed and in-memory implementations of TransactionStore.
"""

import threading
from datetime import datetime, timezone

from api.database.models import TransactionRecordMongo
from api.database.repositories.base import TransactionStore
from api.enums import StorageSource
from api.schemas.transaction import NewTransaction, TransactionRecord


class MongoTransactionStore(TransactionStore):
    """Durable store using the `transactions` collection"""

    source = StorageSource.MONGO

    async def add(self, transaction: NewTransaction) -> TransactionRecord:
        document = TransactionRecordMongo(
            tx_hash=transaction.tx_hash,
            wallet_address=transaction.wallet_address,
            network=transaction.network,
        )
        await document.insert()
        return document.to_record()

    async def recent(self, limit: int) -> list[TransactionRecord]:
        documents = await TransactionRecordMongo.find_all().sort("-created_at").limit(limit).to_list()
        return [document.to_record() for document in documents]


class InMemoryTransactionStore(TransactionStore):
    """
    Process-local store, cleared when the process restarts

    Records are only appended; the lock keeps appends safe under threaded servers.
    """

    source = StorageSource.MEMORY

    def __init__(self):
        self._records: list[TransactionRecord] = []
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._records)

    async def add(self, transaction: NewTransaction) -> TransactionRecord:
        record = TransactionRecord(
            tx_hash=transaction.tx_hash,
            wallet_address=transaction.wallet_address,
            network=transaction.network,
            created_at=datetime.now(timezone.utc),
        )
        with self._lock:
            self._records.append(record)
        return record

    async def recent(self, limit: int) -> list[TransactionRecord]:
        if limit <= 0:
            return []
        with self._lock:
            latest = self._records[-limit:]
        return list(reversed(latest))
