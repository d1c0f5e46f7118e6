"""
Base Transaction Store

Storage strategy for transaction records. The collector picks one
implementation at startup and uses it for every request.
"""

from abc import ABC, abstractmethod

from api.enums import StorageSource
from api.schemas.transaction import NewTransaction, TransactionRecord


class TransactionStore(ABC):
    """Append-only store of transaction records"""

    source: StorageSource

    @abstractmethod
    async def add(self, transaction: NewTransaction) -> TransactionRecord:
        """
        Store a new record

        Args:
            transaction: Validated record data

        Returns:
            Stored record with its creation timestamp
        """

    @abstractmethod
    async def recent(self, limit: int) -> list[TransactionRecord]:
        """
        Get the most recent records

        Args:
            limit: Maximum number of records

        Returns:
            Records, newest first
        """
