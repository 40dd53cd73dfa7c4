# backend/app/crud/phrase.py
from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.core.errors import store_operation
from backend.app.models.wallet_phrase import WalletPhrase


async def get_phrase(db: AsyncSession, user_id: str) -> Optional[WalletPhrase]:
    async with store_operation(db, "Failed to fetch secret phrase"):
        result = await db.execute(select(WalletPhrase).where(WalletPhrase.user_id == user_id))
        return result.scalars().first()


async def create_phrase(db: AsyncSession, user_id: str, phrase_text: str) -> WalletPhrase:
    # user_id is unique: a second create fails in the store
    async with store_operation(db, "Failed to save secret phrase"):
        record = WalletPhrase(user_id=user_id, phrase_text=phrase_text)
        db.add(record)
        await db.commit()
        await db.refresh(record)
        return record


async def update_phrase(db: AsyncSession, record: WalletPhrase, phrase_text: str) -> WalletPhrase:
    async with store_operation(db, "Failed to update secret phrase"):
        record.phrase_text = phrase_text
        db.add(record)
        await db.commit()
        await db.refresh(record)
        return record


async def delete_phrase(db: AsyncSession, user_id: str) -> None:
    async with store_operation(db, "Failed to delete secret phrase"):
        await db.execute(delete(WalletPhrase).where(WalletPhrase.user_id == user_id))
        await db.commit()


async def list_phrases(db: AsyncSession) -> List[WalletPhrase]:
    async with store_operation(db, "Failed to fetch phrases"):
        result = await db.execute(select(WalletPhrase).order_by(WalletPhrase.created_at.desc()))
        return list(result.scalars().all())
