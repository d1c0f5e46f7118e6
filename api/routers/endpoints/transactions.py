"""
Transaction Endpoints

Create and list the transaction records reported by the dApp.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse

from api.dependencies.storage import get_transaction_service
from api.schemas.transaction import ErrorResponse, TransactionCreatedResponse, TransactionListResponse
from api.services.transaction_service import (
    TransactionCollectorService,
    TransactionStorageError,
    TransactionValidationError,
)


router = APIRouter()


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(message=message).model_dump())


@router.get(
    "",
    response_model=TransactionListResponse,
    summary="List recent transactions",
    description="Returns the 20 most recent transaction records, newest first.",
    responses={500: {"model": ErrorResponse, "description": "Storage failure"}},
)
async def list_transactions(
    service: TransactionCollectorService = Depends(get_transaction_service),
):
    try:
        records = await service.list_recent()
    except TransactionStorageError as e:
        return error_response(500, str(e))

    return TransactionListResponse(source=service.source, items=[record.to_response() for record in records])


@router.post(
    "",
    status_code=201,
    response_model=TransactionCreatedResponse,
    summary="Record a transaction",
    description="Stores the hash of a transaction sent from the dApp.",
    responses={
        400: {"model": ErrorResponse, "description": "txHash missing or empty"},
        500: {"model": ErrorResponse, "description": "Storage failure"},
    },
)
async def create_transaction(
    payload: Any = Body(None),
    service: TransactionCollectorService = Depends(get_transaction_service),
):
    """
    Record a transaction.

    Request body example:
        {"txHash": "1234...", "walletAddress": "addr_test1...", "network": "preprod"}
    """
    try:
        record = await service.create(payload)
    except TransactionValidationError as e:
        return error_response(400, str(e))
    except TransactionStorageError as e:
        return error_response(500, str(e))

    return TransactionCreatedResponse(source=service.source, item=record.to_response())
