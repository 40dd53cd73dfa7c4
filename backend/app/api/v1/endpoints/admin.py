# backend/app/api/v1/endpoints/admin.py
"""
Admin screens: pending transaction approval, user balances, phrases.

Approve/reject is a single status update on the row. Only pending rows
can be moved, so a decision cannot be reversed through this API.
Balances are not credited or debited here.
"""
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.api import deps
from backend.app.crud import auth as crud_auth
from backend.app.crud import phrase as crud_phrase
from backend.app.crud import profile as crud_profile
from backend.app.crud import transaction as crud_transaction
from backend.app.db.base import get_db
from backend.app.models.transaction import STATUS_COMPLETED, STATUS_PENDING, STATUS_REJECTED
from backend.app.schemas.account import MessageResponse
from backend.app.schemas.admin import AdminUserResponse, UserBalancesUpdate
from backend.app.schemas.phrase import PhraseRecord
from backend.app.schemas.transaction import AdminTransactionResponse, TransactionStatusResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/transactions/pending", response_model=List[AdminTransactionResponse])
async def read_pending_transactions(
        admin_id: str = Depends(deps.get_admin_user_id),
        db: AsyncSession = Depends(get_db),
):
    return await crud_transaction.list_pending(db)


async def _decide(db: AsyncSession, transaction_id: str, new_status: str) -> TransactionStatusResponse:
    txn = await crud_transaction.get_transaction(db, transaction_id)
    if not txn:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Transaction not found")

    if txn.status != STATUS_PENDING:
        logger.warning(f"Transaction {transaction_id} already processed with status: {txn.status}")
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Transaction already processed (status: {txn.status})",
        )

    txn = await crud_transaction.set_status(db, txn, new_status)
    logger.info(f"Transaction {transaction_id} marked {new_status}")
    return TransactionStatusResponse(success=True, transaction_id=txn.id, status=txn.status)


@router.post("/transactions/{transaction_id}/approve", response_model=TransactionStatusResponse)
async def approve_transaction(
        transaction_id: str,
        admin_id: str = Depends(deps.get_admin_user_id),
        db: AsyncSession = Depends(get_db),
):
    return await _decide(db, transaction_id, STATUS_COMPLETED)


@router.post("/transactions/{transaction_id}/reject", response_model=TransactionStatusResponse)
async def reject_transaction(
        transaction_id: str,
        admin_id: str = Depends(deps.get_admin_user_id),
        db: AsyncSession = Depends(get_db),
):
    return await _decide(db, transaction_id, STATUS_REJECTED)


@router.get("/users", response_model=List[AdminUserResponse])
async def read_users(
        admin_id: str = Depends(deps.get_admin_user_id),
        db: AsyncSession = Depends(get_db),
):
    return await crud_profile.list_profiles(db)


@router.patch("/users/{user_id}/balances", response_model=AdminUserResponse)
async def update_user_balances(
        user_id: str,
        balances_in: UserBalancesUpdate,
        admin_id: str = Depends(deps.get_admin_user_id),
        db: AsyncSession = Depends(get_db),
):
    fields = balances_in.model_dump(exclude_unset=True, exclude_none=True)
    if not fields:
        raise HTTPException(status_code=400, detail="No balances to update")

    matched = await crud_profile.update_profile_fields(db, user_id, fields)
    if not matched:
        raise HTTPException(status_code=404, detail="User profile not found")
    return await crud_profile.get_profile(db, user_id)


@router.delete("/users/{user_id}", response_model=MessageResponse)
async def delete_user(
        user_id: str,
        admin_id: str = Depends(deps.get_admin_user_id),
        db: AsyncSession = Depends(get_db),
):
    # Profile first, then credentials; two separate writes
    deleted = await crud_profile.delete_profile(db, user_id)
    if not deleted:
        raise HTTPException(status_code=404, detail="User profile not found")
    await crud_auth.delete_auth_user(db, user_id)
    logger.info(f"User {user_id} deleted by {admin_id}")
    return MessageResponse(message="User deleted successfully")


# Plaintext phrases of every user
@router.get("/phrases", response_model=List[PhraseRecord])
async def read_all_phrases(
        admin_id: str = Depends(deps.get_admin_user_id),
        db: AsyncSession = Depends(get_db),
):
    return await crud_phrase.list_phrases(db)
