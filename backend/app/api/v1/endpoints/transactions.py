# backend/app/api/v1/endpoints/transactions.py
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.api import deps
from backend.app.core.config import settings
from backend.app.crud import transaction as crud_transaction
from backend.app.db.base import get_db
from backend.app.models.transaction import (
    CryptoTransaction,
    STATUS_PENDING,
    TRANSACTION_DEPOSIT,
    TRANSACTION_WITHDRAWAL,
)
from backend.app.schemas.transaction import (
    DepositRequest,
    PaymentDetails,
    TransactionCreatedResponse,
    TransactionResponse,
    WithdrawalRequest,
)
from backend.app.services import notify

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=List[TransactionResponse])
async def read_transactions(
        user_id: str = Depends(deps.get_current_user_id),
        db: AsyncSession = Depends(get_db),
):
    return await crud_transaction.list_for_user(db, user_id)


@router.post("/deposit", response_model=TransactionCreatedResponse)
async def initiate_deposit(
        request: DepositRequest,
        user_id: str = Depends(deps.get_current_user_id),
        db: AsyncSession = Depends(get_db),
):
    if request.amount < settings.MIN_DEPOSIT_AMOUNT:
        raise HTTPException(status_code=400, detail=f"Minimum deposit is {settings.MIN_DEPOSIT_AMOUNT:g}")

    crypto_type = request.crypto_type.value
    deposit_address = settings.DEPOSIT_WALLETS.get(crypto_type)
    txn = CryptoTransaction(
        user_id=user_id,
        type=TRANSACTION_DEPOSIT,
        crypto_type=crypto_type,
        amount=request.amount,
        status=STATUS_PENDING,
        reference=crud_transaction.make_reference(crud_transaction.DEPOSIT_REFERENCE_PREFIX),
        user_email=request.user_email,
        wallet_address=deposit_address,
    )
    txn = await crud_transaction.create_transaction(db, txn, "Failed to initiate deposit")
    logger.info(f"Deposit {txn.reference} recorded for user {user_id}")

    notify.send_deposit_email_to_admin(
        user_email=request.user_email,
        amount=request.amount,
        reference=txn.reference,
        user_id=user_id,
        crypto_type=crypto_type,
        transaction_id=txn.id,
    )

    return TransactionCreatedResponse(
        success=True,
        details=PaymentDetails(
            crypto_type=request.crypto_type,
            wallet_address=deposit_address,
            amount=request.amount,
            reference=txn.reference,
            transaction_id=txn.id,
        ),
    )


@router.post("/withdrawal", response_model=TransactionCreatedResponse)
async def initiate_withdrawal(
        request: WithdrawalRequest,
        user_id: str = Depends(deps.get_current_user_id),
        db: AsyncSession = Depends(get_db),
):
    # No balance check: the request is only recorded for an admin to act on
    if request.amount < settings.MIN_WITHDRAWAL_AMOUNT:
        raise HTTPException(status_code=400, detail=f"Minimum withdrawal is {settings.MIN_WITHDRAWAL_AMOUNT:g}")

    crypto_type = request.crypto_type.value
    txn = CryptoTransaction(
        user_id=user_id,
        type=TRANSACTION_WITHDRAWAL,
        crypto_type=crypto_type,
        amount=request.amount,
        status=STATUS_PENDING,
        reference=crud_transaction.make_reference(crud_transaction.WITHDRAWAL_REFERENCE_PREFIX),
        user_email=request.user_email,
        wallet_address=request.wallet_address,
    )
    txn = await crud_transaction.create_transaction(db, txn, "Failed to initiate withdrawal")
    logger.info(f"Withdrawal {txn.reference} recorded for user {user_id}")

    notify.send_withdrawal_email_to_admin(
        user_email=request.user_email,
        amount=request.amount,
        reference=txn.reference,
        user_id=user_id,
        crypto_type=crypto_type,
        transaction_id=txn.id,
        wallet_address=request.wallet_address,
    )

    return TransactionCreatedResponse(
        success=True,
        details=PaymentDetails(
            crypto_type=request.crypto_type,
            wallet_address=request.wallet_address,
            amount=request.amount,
            reference=txn.reference,
            transaction_id=txn.id,
        ),
    )
