# backend/app/schemas/transaction.py
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from backend.app.core.crypto import CryptoType


class DepositRequest(BaseModel):
    amount: float = Field(..., gt=0)
    user_email: str
    crypto_type: CryptoType


class WithdrawalRequest(BaseModel):
    amount: float = Field(..., gt=0)
    user_email: str
    crypto_type: CryptoType
    # Destination address supplied by the user
    wallet_address: str = Field(..., min_length=1)


class PaymentDetails(BaseModel):
    crypto_type: CryptoType
    wallet_address: Optional[str]
    amount: float
    reference: str
    transaction_id: str


class TransactionCreatedResponse(BaseModel):
    success: bool
    details: PaymentDetails


# What a user sees in their own transaction history
class TransactionResponse(BaseModel):
    type: str
    crypto_type: str
    amount: float
    status: str
    reference: str
    created_at: Optional[datetime]

    class Config:
        from_attributes = True


# Full row, for the admin approval screen
class AdminTransactionResponse(TransactionResponse):
    id: str
    user_id: str
    user_email: Optional[str]
    wallet_address: Optional[str]
    processed_at: Optional[datetime]


class TransactionStatusResponse(BaseModel):
    success: bool
    transaction_id: str
    status: str
