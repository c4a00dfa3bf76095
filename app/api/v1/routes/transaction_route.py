import logging
from typing import List

from fastapi import APIRouter, Depends, Request, status

from app.core.dsa.transaction_dsa import TransactionDSA
from app.core.errors import NotFoundError, ValidationError
from app.db.models.transaction_model import MUTABLE_FIELDS
from app.schemas.transaction_schema import (
    MessageResponse,
    SummaryResponse,
    TransactionIn,
    TransactionResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Transactions"])


def get_transaction_dsa(request: Request) -> TransactionDSA:
    """Return the store built during startup."""
    return request.app.state.transaction_dsa


@router.post(
    "/transactions",
    status_code=status.HTTP_201_CREATED,
    response_model=MessageResponse,
)
async def create_transaction(
    data: TransactionIn,
    dsa: TransactionDSA = Depends(get_transaction_dsa),
):
    fields = data.model_dump()

    # Falsy values count as missing, so an amount of 0 is rejected too
    if not all(fields[name] for name in MUTABLE_FIELDS):
        raise ValidationError("All fields are required")

    transaction_id = await dsa.create(fields)
    logger.info("Transaction %s added", transaction_id)

    return {"message": "Transaction added successfully"}


@router.get("/transactions", response_model=List[TransactionResponse])
async def list_transactions(dsa: TransactionDSA = Depends(get_transaction_dsa)):
    return await dsa.list_all()


@router.get("/transactions/{transaction_id}", response_model=TransactionResponse)
async def get_transaction(
    transaction_id: str,
    dsa: TransactionDSA = Depends(get_transaction_dsa),
):
    transaction = await dsa.get_by_id(transaction_id)
    if transaction is None:
        raise NotFoundError()

    return transaction


@router.put("/transactions/{transaction_id}", response_model=MessageResponse)
async def update_transaction(
    transaction_id: str,
    data: TransactionIn,
    dsa: TransactionDSA = Depends(get_transaction_dsa),
):
    fields = data.model_dump()

    if not any(fields[name] for name in MUTABLE_FIELDS):
        raise ValidationError("At least one field is required to update")

    # No existence check: an unknown id is still answered with 200
    await dsa.update_by_id(transaction_id, fields)

    return {"message": "Transaction updated successfully"}


@router.delete("/transactions/{transaction_id}", response_model=MessageResponse)
async def delete_transaction(
    transaction_id: str,
    dsa: TransactionDSA = Depends(get_transaction_dsa),
):
    if not await dsa.delete_by_id(transaction_id):
        raise NotFoundError()

    logger.info("Transaction %s deleted", transaction_id)
    return {"message": "Transaction deleted successfully"}


@router.get("/summary", response_model=SummaryResponse)
async def get_summary(dsa: TransactionDSA = Depends(get_transaction_dsa)):
    return await dsa.summarize()
