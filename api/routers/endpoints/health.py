"""
Health Endpoint
"""

from fastapi import APIRouter, Depends

from api.dependencies.storage import get_transaction_service
from api.enums import StorageSource
from api.schemas.transaction import HealthResponse
from api.services.transaction_service import TransactionCollectorService


router = APIRouter()


@router.get("/health", response_model=HealthResponse, summary="Service health")
async def health_check(
    service: TransactionCollectorService = Depends(get_transaction_service),
) -> HealthResponse:
    """Reports that the service is up and whether MongoDB is in use."""
    return HealthResponse(
        message="Cardano dApp backend is running.",
        mongoConnected=service.source == StorageSource.MONGO,
    )
