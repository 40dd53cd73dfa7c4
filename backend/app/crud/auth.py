# backend/app/crud/auth.py
"""Accessor for the authentication store (auth_users)."""
from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.core.errors import store_operation
from backend.app.models.auth_user import AuthUser


async def get_auth_user(db: AsyncSession, user_id: str) -> Optional[AuthUser]:
    async with store_operation(db, "Failed to fetch user"):
        result = await db.execute(select(AuthUser).where(AuthUser.id == user_id))
        return result.scalars().first()


async def get_by_email(db: AsyncSession, email: str) -> Optional[AuthUser]:
    async with store_operation(db, "Failed to fetch user"):
        result = await db.execute(select(AuthUser).where(AuthUser.email == email))
        return result.scalars().first()


async def create_auth_user(db: AsyncSession, email: str, hashed_password: str) -> AuthUser:
    async with store_operation(db, "Signup failed"):
        user = AuthUser(email=email, hashed_password=hashed_password)
        db.add(user)
        await db.commit()
        await db.refresh(user)
        return user


async def set_email(db: AsyncSession, user: AuthUser, email: str) -> AuthUser:
    async with store_operation(db, "Failed to update authentication email"):
        user.email = email
        db.add(user)
        await db.commit()
        await db.refresh(user)
        return user


async def set_password_hash(db: AsyncSession, user: AuthUser, hashed_password: str) -> AuthUser:
    async with store_operation(db, "Failed to update password"):
        user.hashed_password = hashed_password
        db.add(user)
        await db.commit()
        await db.refresh(user)
        return user


async def delete_auth_user(db: AsyncSession, user_id: str) -> None:
    async with store_operation(db, "Failed to delete user"):
        await db.execute(delete(AuthUser).where(AuthUser.id == user_id))
        await db.commit()
