# backend/app/crud/referral.py
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.core.errors import store_operation
from backend.app.models.referral import Referral


async def create_referral(db: AsyncSession, referrer_id: str, referee_id: str, level: int) -> Referral:
    async with store_operation(db, f"Level {level} referral creation failed"):
        referral = Referral(referrer_id=referrer_id, referee_id=referee_id, level=level)
        db.add(referral)
        await db.commit()
        await db.refresh(referral)
        return referral


async def get_direct_referrer(db: AsyncSession, referee_id: str) -> Optional[str]:
    """Id of whoever referred `referee_id` directly, if anyone."""
    async with store_operation(db, "Failed to look up referrer"):
        result = await db.execute(
            select(Referral.referrer_id).where(
                Referral.referee_id == referee_id,
                Referral.level == 1,
            )
        )
        return result.scalars().first()
