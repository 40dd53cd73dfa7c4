# backend/app/crud/transaction.py
import random
import time
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.core.errors import store_operation
from backend.app.db.base import utcnow
from backend.app.models.transaction import CryptoTransaction, STATUS_PENDING

DEPOSIT_REFERENCE_PREFIX = "CRYPTO-DEP"
WITHDRAWAL_REFERENCE_PREFIX = "CRYPTO-WDL"


def make_reference(prefix: str) -> str:
    """<prefix>-<epoch millis>-<0..999>; not guaranteed unique."""
    return f"{prefix}-{int(time.time() * 1000)}-{random.randint(0, 999)}"


async def list_for_user(db: AsyncSession, user_id: str) -> List[CryptoTransaction]:
    async with store_operation(db, "Failed to fetch transactions"):
        result = await db.execute(
            select(CryptoTransaction)
            .where(CryptoTransaction.user_id == user_id)
            .order_by(CryptoTransaction.created_at.desc())
        )
        return list(result.scalars().all())


async def list_pending(db: AsyncSession) -> List[CryptoTransaction]:
    async with store_operation(db, "Failed to load transactions"):
        result = await db.execute(
            select(CryptoTransaction)
            .where(CryptoTransaction.status == STATUS_PENDING)
            .order_by(CryptoTransaction.created_at.desc())
        )
        return list(result.scalars().all())


async def get_transaction(db: AsyncSession, transaction_id: str) -> Optional[CryptoTransaction]:
    async with store_operation(db, "Failed to fetch transaction"):
        result = await db.execute(select(CryptoTransaction).where(CryptoTransaction.id == transaction_id))
        return result.scalars().first()


async def create_transaction(db: AsyncSession, txn: CryptoTransaction, error_message: str) -> CryptoTransaction:
    async with store_operation(db, error_message):
        db.add(txn)
        await db.commit()
        await db.refresh(txn)
        return txn


async def set_status(db: AsyncSession, txn: CryptoTransaction, status: str) -> CryptoTransaction:
    """Move a row to a new status and stamp processed_at. No transition rules here."""
    async with store_operation(db, f"Failed to mark transaction {status}"):
        txn.status = status
        txn.processed_at = utcnow()
        db.add(txn)
        await db.commit()
        await db.refresh(txn)
        return txn
