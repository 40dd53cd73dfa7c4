# backend/app/api/v1/endpoints/auth.py
import logging
import uuid
from typing import Optional, Tuple

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.core.config import settings
from backend.app.core.errors import StoreError
from backend.app.crud import auth as crud_auth
from backend.app.crud import profile as crud_profile
from backend.app.crud import referral as crud_referral
from backend.app.db.base import get_db
from backend.app.models.profile import TradingProfile
from backend.app.schemas.auth import SignInRequest, SignInResponse, SignUpRequest, SignUpResponse
from backend.app.security import hashing, jwt

logger = logging.getLogger(__name__)

router = APIRouter()


def _short_uuid() -> str:
    return str(uuid.uuid4()).split("-")[0]


async def _resolve_referrer(db: AsyncSession, referred_code: Optional[str]) -> Tuple[Optional[str], int]:
    """Return (referrer id, referral level for the new user). Unknown codes are ignored."""
    if not referred_code:
        return None, 0
    referrer = await crud_profile.get_by_referral_code(db, referred_code)
    if not referrer:
        return None, 0
    return referrer.id, (referrer.referral_level or 0) + 1


async def _record_referrals(db: AsyncSession, referrer_id: str, referee_id: str) -> None:
    # Referral rows are best effort: a failure is logged, signup still succeeds
    try:
        await crud_referral.create_referral(db, referrer_id, referee_id, level=1)
    except StoreError as e:
        logger.error(f"Level 1 referral creation failed: {e.message}")

    try:
        indirect_referrer = await crud_referral.get_direct_referrer(db, referrer_id)
        if indirect_referrer:
            await crud_referral.create_referral(db, indirect_referrer, referee_id, level=2)
    except StoreError as e:
        logger.error(f"Level 2 referral creation failed: {e.message}")


@router.post("/signup", response_model=SignUpResponse)
async def signup(user_in: SignUpRequest, db: AsyncSession = Depends(get_db)):
    if not user_in.email and not user_in.phone:
        raise HTTPException(status_code=400, detail="Email or phone is required")
    if len(user_in.password) < settings.MIN_SIGNUP_PASSWORD_LENGTH:
        raise HTTPException(
            status_code=400,
            detail=f"Password must be at least {settings.MIN_SIGNUP_PASSWORD_LENGTH} characters long",
        )

    # Phone-only users get a synthetic address for the auth store
    auth_email = user_in.email or f"{_short_uuid()}_{user_in.phone}@temp.domain"

    if await crud_auth.get_by_email(db, auth_email):
        raise HTTPException(status_code=400, detail="User already registered")

    auth_user = await crud_auth.create_auth_user(
        db, auth_email, hashing.get_password_hash(user_in.password)
    )
    user_id = auth_user.id
    referral_code = _short_uuid() + user_id[:4]

    referred_by, referral_level = await _resolve_referrer(db, user_in.referred_code)
    if referred_by == user_id:
        await crud_auth.delete_auth_user(db, user_id)
        raise HTTPException(status_code=400, detail="Cannot refer yourself")

    profile = TradingProfile(
        id=user_id,
        first_name=user_in.first_name,
        last_name=user_in.last_name,
        email=user_in.email or None,
        phone_number=user_in.phone or None,
        balance=settings.SIGNUP_BONUS,
        referral_code=referral_code,
        referred_by=referred_by,
        referral_level=referral_level,
        is_phone_user=not user_in.email,
        auth_email=auth_email,
    )
    try:
        await crud_profile.create_profile(db, profile)
    except StoreError as e:
        await crud_auth.delete_auth_user(db, user_id)
        raise HTTPException(status_code=500, detail=f"Failed to create profile: {e.message}")

    if referred_by:
        await _record_referrals(db, referred_by, user_id)

    logger.info(f"Signup successful for user: {user_id}")
    return SignUpResponse(
        user_id=user_id,
        referral_code=referral_code,
        referred_by=referred_by,
        message="Signup successful",
    )


@router.post("/signin", response_model=SignInResponse)
async def signin(form: SignInRequest, response: Response, db: AsyncSession = Depends(get_db)):
    if not form.email and not form.phone:
        raise HTTPException(status_code=400, detail="Email or phone is required")
    if not form.password:
        raise HTTPException(status_code=400, detail="Password is required")

    auth_email = form.email
    if form.phone:
        profile = await crud_profile.get_by_phone(db, form.phone)
        if not profile:
            logger.warning(f"Phone lookup failed for: {form.phone}")
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Invalid phone number or password",
            )
        auth_email = profile.auth_email
        if not auth_email:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Phone-based login not supported for this user",
            )

    user = await crud_auth.get_by_email(db, auth_email)
    if not user or not user.is_active or not hashing.verify_password(form.password, user.hashed_password):
        logger.warning(f"Authentication failed for: {auth_email}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
        )

    access_token = jwt.create_access_token(data={"sub": user.id})
    refresh_token = jwt.generate_refresh_token()
    secure = settings.is_production

    response.set_cookie(
        settings.ACCESS_COOKIE_NAME, access_token,
        max_age=settings.COOKIE_MAX_AGE, path="/", httponly=True, secure=secure, samesite="lax",
    )
    response.set_cookie(
        settings.REFRESH_COOKIE_NAME, refresh_token,
        max_age=settings.COOKIE_MAX_AGE, path="/", httponly=True, secure=secure, samesite="lax",
    )
    # Readable by the browser; this is the cookie every privileged route trusts
    response.set_cookie(
        settings.SESSION_COOKIE_NAME, user.id,
        max_age=settings.COOKIE_MAX_AGE, path="/", httponly=False, secure=secure, samesite="lax",
    )

    logger.info(f"Login successful for user: {user.id}")
    return SignInResponse(user_id=user.id, access_token=access_token, message="Login successful")


@router.post("/signout")
async def signout(response: Response):
    for name in (settings.ACCESS_COOKIE_NAME, settings.REFRESH_COOKIE_NAME, settings.SESSION_COOKIE_NAME):
        response.delete_cookie(name, path="/")
    return {"message": "Signed out"}
