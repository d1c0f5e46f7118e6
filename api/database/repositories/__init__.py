"""Transaction record stores"""

from .base import TransactionStore
from .transaction import InMemoryTransactionStore, MongoTransactionStore


__all__ = [
    "InMemoryTransactionStore",
    "MongoTransactionStore",
    "TransactionStore",
]
