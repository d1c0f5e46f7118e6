"""
Transaction Schemas

Pydantic models for transaction record requests and responses.
Field names on the wire are camelCase to match the dApp front-end.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from api.enums import StorageSource


class CreateTransactionRequest(BaseModel):
    """Body of POST /api/transactions"""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    # Validated by the service so a bad hash is a 400, not a 422
    tx_hash: Any = Field(None, alias="txHash", description="Transaction hash (required)")
    wallet_address: str | None = Field(None, alias="walletAddress", description="Sender address")
    network: str | None = Field(None, description="Network label, defaults to preprod")


class NewTransaction(BaseModel):
    """Validated record ready to be stored"""

    tx_hash: str
    wallet_address: str = ""
    network: str


class TransactionRecord(BaseModel):
    """Stored transaction record"""

    model_config = ConfigDict(populate_by_name=True)

    id: str | None = Field(None, alias="_id", description="MongoDB document id")
    tx_hash: str = Field(alias="txHash", description="Transaction hash")
    wallet_address: str = Field("", alias="walletAddress", description="Sender address")
    network: str = Field(description="Network label")
    created_at: datetime = Field(alias="createdAt", description="When the record was created")
    updated_at: datetime | None = Field(None, alias="updatedAt", description="Last update (MongoDB only)")

    def to_response(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, mode="json", exclude_none=True)


class TransactionListResponse(BaseModel):
    """Response of GET /api/transactions"""

    ok: bool = True
    source: StorageSource
    items: list[dict[str, Any]]


class TransactionCreatedResponse(BaseModel):
    """Response of POST /api/transactions"""

    ok: bool = True
    source: StorageSource
    item: dict[str, Any]


class ErrorResponse(BaseModel):
    """Error body shared by all endpoints"""

    ok: bool = False
    message: str


class HealthResponse(BaseModel):
    """Response of GET /api/health"""

    ok: bool = True
    message: str
    mongoConnected: bool
