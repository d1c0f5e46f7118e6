"""
Transaction Collector Service

Validation and storage of transaction records reported by the dApp.
"""

import logging
from typing import Any

from pydantic import ValidationError

from api.database.repositories.base import TransactionStore
from api.enums import StorageSource
from api.schemas.transaction import CreateTransactionRequest, NewTransaction, TransactionRecord

logger = logging.getLogger(__name__)


INVALID_TX_HASH_MESSAGE = "txHash is required and must be a non-empty string."
INVALID_BODY_MESSAGE = "Request body must be valid JSON."


# Custom exceptions
class TransactionValidationError(Exception):
    """Request body rejected, nothing was stored"""
    pass


class TransactionStorageError(Exception):
    """The backing store failed"""
    pass


class TransactionCollectorService:
    """Create and list transaction records over the configured store"""

    def __init__(self, store: TransactionStore, default_network: str = "preprod", history_limit: int = 20):
        """
        Initialize collector service

        Args:
            store: Storage strategy chosen at startup
            default_network: Network label used when the request has none
            history_limit: Maximum number of records returned by list
        """
        self.store = store
        self.default_network = default_network
        self.history_limit = history_limit

    @property
    def source(self) -> StorageSource:
        return self.store.source

    def validate(self, payload: Any) -> NewTransaction:
        """
        Validate a create request body

        Raises:
            TransactionValidationError: txHash missing, not a string or blank, or body malformed
        """
        if not isinstance(payload, dict):
            raise TransactionValidationError(INVALID_TX_HASH_MESSAGE)

        try:
            request = CreateTransactionRequest.model_validate(payload)
        except ValidationError as e:
            field = ".".join(str(part) for part in e.errors()[0]["loc"])
            raise TransactionValidationError(f"Invalid field '{field}': must be a string.") from e

        if not isinstance(request.tx_hash, str) or not request.tx_hash.strip():
            raise TransactionValidationError(INVALID_TX_HASH_MESSAGE)

        return NewTransaction(
            tx_hash=request.tx_hash.strip(),
            wallet_address=request.wallet_address or "",
            network=request.network or self.default_network,
        )

    async def create(self, payload: Any) -> TransactionRecord:
        """
        Validate and store a transaction record

        Args:
            payload: Decoded JSON body

        Returns:
            Stored record

        Raises:
            TransactionValidationError: Invalid body
            TransactionStorageError: Store failure
        """
        transaction = self.validate(payload)
        try:
            record = await self.store.add(transaction)
        except Exception as e:
            logger.exception(f"Error saving transaction: {e}")
            raise TransactionStorageError("Failed to save transaction.") from e

        logger.info(f"Stored transaction {record.tx_hash} ({self.source.value})")
        return record

    async def list_recent(self) -> list[TransactionRecord]:
        """
        Most recent records, newest first

        Raises:
            TransactionStorageError: Store failure
        """
        try:
            return await self.store.recent(self.history_limit)
        except Exception as e:
            logger.exception(f"Error fetching transactions: {e}")
            raise TransactionStorageError("Failed to fetch transaction history.") from e
