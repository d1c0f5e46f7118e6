"""
Database Models

MongoDB/Beanie Document models for the collector service.
"""

from datetime import datetime, timezone
from typing import Annotated

from beanie import Document, Indexed
from pydantic import Field as BeanieField
from pymongo import DESCENDING

from api.schemas.transaction import TransactionRecord


def utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


class TransactionRecordMongo(Document):
    """
    Transaction hash reported by the dApp after a successful submission

    Records are only ever inserted; they are never updated or deleted.
    """

    tx_hash: str
    wallet_address: str = ""
    network: str = "preprod"

    # Timestamps (naive UTC, as stored by MongoDB)
    created_at: Annotated[datetime, Indexed(index_type=DESCENDING)] = BeanieField(default_factory=utcnow)
    updated_at: datetime = BeanieField(default_factory=utcnow)

    class Settings:
        name = "transactions"

    def to_record(self) -> TransactionRecord:
        return TransactionRecord(
            id=str(self.id) if self.id is not None else None,
            tx_hash=self.tx_hash,
            wallet_address=self.wallet_address,
            network=self.network,
            created_at=self.created_at.replace(tzinfo=timezone.utc),
            updated_at=self.updated_at.replace(tzinfo=timezone.utc),
        )
