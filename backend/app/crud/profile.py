# backend/app/crud/profile.py
"""
Accessor for the trading profile table.

Every call is a single round trip keyed by the caller-supplied id.
Updates are plain UPDATE ... WHERE id = :id statements: an id that
matches no row is not an error, the statement simply changes nothing.
"""
from typing import Any, Dict, List, Optional

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.core.errors import store_operation
from backend.app.models.profile import TradingProfile


async def get_profile(db: AsyncSession, user_id: str) -> Optional[TradingProfile]:
    async with store_operation(db, "Failed to fetch trading profile"):
        # populate_existing: UPDATE statements bypass the identity map
        result = await db.execute(
            select(TradingProfile)
            .where(TradingProfile.id == user_id)
            .execution_options(populate_existing=True)
        )
        return result.scalars().first()


async def update_profile_fields(db: AsyncSession, user_id: str, fields: Dict[str, Any]) -> int:
    """
    Write the given columns for one profile and return the matched row count.

    Column names are taken as-is; a name that is not on the table is
    rejected by the store and surfaces as StoreError.
    """
    async with store_operation(db, "Database update failed"):
        result = await db.execute(
            update(TradingProfile)
            .where(TradingProfile.id == user_id)
            .values(**fields)
            .execution_options(synchronize_session=False)
        )
        await db.commit()
        return result.rowcount


async def create_profile(db: AsyncSession, profile: TradingProfile) -> TradingProfile:
    async with store_operation(db, "Failed to create profile"):
        db.add(profile)
        await db.commit()
        await db.refresh(profile)
        return profile


async def get_by_referral_code(db: AsyncSession, code: str) -> Optional[TradingProfile]:
    async with store_operation(db, "Failed to look up referral code"):
        result = await db.execute(select(TradingProfile).where(TradingProfile.referral_code == code))
        return result.scalars().first()


async def get_by_phone(db: AsyncSession, phone: str) -> Optional[TradingProfile]:
    async with store_operation(db, "Failed to look up phone number"):
        result = await db.execute(select(TradingProfile).where(TradingProfile.phone_number == phone))
        return result.scalars().first()


async def email_in_use(db: AsyncSession, email: str, exclude_id: str) -> bool:
    async with store_operation(db, "Error checking email availability"):
        result = await db.execute(
            select(TradingProfile.id).where(
                TradingProfile.email == email,
                TradingProfile.id != exclude_id,
            )
        )
        return result.first() is not None


async def list_profiles(db: AsyncSession) -> List[TradingProfile]:
    async with store_operation(db, "Failed to fetch users"):
        result = await db.execute(select(TradingProfile).order_by(TradingProfile.created_at.desc()))
        return list(result.scalars().all())


async def delete_profile(db: AsyncSession, user_id: str) -> int:
    async with store_operation(db, "Failed to delete user"):
        result = await db.execute(delete(TradingProfile).where(TradingProfile.id == user_id))
        await db.commit()
        return result.rowcount
