# app/schemas/transaction_schema.py

from typing import Optional
from pydantic import BaseModel


# Request body for both POST and PUT. Every field is optional here so the
# route can apply its own presence rules and answer 400 instead of 422.
class TransactionIn(BaseModel):
    type: Optional[str] = None
    category: Optional[str] = None
    amount: Optional[float] = None
    date: Optional[str] = None
    description: Optional[str] = None


class TransactionResponse(BaseModel):
    id: int
    type: Optional[str] = None
    category: Optional[str] = None
    amount: Optional[float] = None
    date: Optional[str] = None
    description: Optional[str] = None


class SummaryResponse(BaseModel):
    totalIncome: float
    totalExpenses: float
    balance: float


class MessageResponse(BaseModel):
    message: str
