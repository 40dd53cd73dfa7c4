# backend/app/api/v1/endpoints/account.py
"""
Email and password changes.

Email lives in two stores: the auth record and the trading profile.
They are written in two separate commits. If the second write fails
the first is NOT undone and the caller is told so.
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.api import deps
from backend.app.core.config import settings
from backend.app.core.errors import StoreError
from backend.app.crud import auth as crud_auth
from backend.app.crud import profile as crud_profile
from backend.app.db.base import get_db, utcnow
from backend.app.schemas.account import ChangeEmailRequest, ChangePasswordRequest, MessageResponse
from backend.app.security import hashing

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/change-email", response_model=MessageResponse)
async def change_email(
        request: ChangeEmailRequest,
        user_id: str = Depends(deps.get_current_user_id),
        db: AsyncSession = Depends(get_db),
):
    new_email = request.new_email.strip()
    if not new_email or "@" not in new_email:
        raise HTTPException(status_code=400, detail="Valid email is required")

    profile = await crud_profile.get_profile(db, user_id)
    if not profile:
        raise HTTPException(status_code=404, detail="User profile not found")

    if profile.email == new_email:
        raise HTTPException(status_code=400, detail="New email must be different from current email")

    if await crud_profile.email_in_use(db, new_email, exclude_id=user_id):
        raise HTTPException(status_code=400, detail="Email is already in use by another account")

    # 1. Auth store
    fields = {"email": new_email, "updated_at": utcnow()}
    auth_user = await crud_auth.get_auth_user(db, user_id)
    if auth_user and profile.auth_email and "@" in profile.auth_email:
        await crud_auth.set_email(db, auth_user, new_email)
        fields["auth_email"] = new_email

    # 2. Profile store, independent of step 1
    try:
        await crud_profile.update_profile_fields(db, user_id, fields)
    except StoreError as e:
        logger.error(f"Email updated in auth, but failed in profile for user {user_id}: {e.message}")
        raise HTTPException(
            status_code=500,
            detail=f"Email updated in auth, but failed in profile: {e.message}",
        )

    logger.info(f"Email updated for user: {user_id}")
    return MessageResponse(message="Email updated successfully")


@router.post("/change-password", response_model=MessageResponse)
async def change_password(
        request: ChangePasswordRequest,
        user_id: str = Depends(deps.get_current_user_id),
        db: AsyncSession = Depends(get_db),
):
    if len(request.new_password) < settings.MIN_CHANGED_PASSWORD_LENGTH:
        raise HTTPException(
            status_code=400,
            detail=f"Password must be at least {settings.MIN_CHANGED_PASSWORD_LENGTH} characters",
        )
    if request.new_password != request.confirm_password:
        raise HTTPException(status_code=400, detail="Passwords do not match")

    auth_user = await crud_auth.get_auth_user(db, user_id)
    if not auth_user:
        raise HTTPException(status_code=404, detail="User not found")

    if not hashing.verify_password(request.current_password, auth_user.hashed_password):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Current password is incorrect",
        )

    await crud_auth.set_password_hash(db, auth_user, hashing.get_password_hash(request.new_password))
    return MessageResponse(message="Password changed successfully")
