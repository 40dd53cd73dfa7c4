# backend/app/api/v1/endpoints/profile.py
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.api import deps
from backend.app.core.crypto import balances_by_symbol
from backend.app.crud import profile as crud_profile
from backend.app.db.base import get_db, utcnow
from backend.app.schemas.profile import (
    BalanceResponse,
    ProfileResponse,
    ProfileUpdate,
    WalletBalancesResponse,
)

router = APIRouter()


@router.get("", response_model=ProfileResponse)
async def read_profile(
        user_id: str = Depends(deps.get_current_user_id),
        db: AsyncSession = Depends(get_db),
):
    profile = await crud_profile.get_profile(db, user_id)
    if not profile:
        raise HTTPException(status_code=404, detail="Profile not found")
    return profile


@router.patch("", response_model=ProfileResponse)
async def update_profile(
        profile_in: ProfileUpdate,
        user_id: str = Depends(deps.get_current_user_id),
        db: AsyncSession = Depends(get_db),
):
    fields = profile_in.model_dump(exclude_unset=True)
    if not fields:
        raise HTTPException(status_code=400, detail="No fields to update")
    fields["updated_at"] = utcnow()

    await crud_profile.update_profile_fields(db, user_id, fields)

    profile = await crud_profile.get_profile(db, user_id)
    if not profile:
        raise HTTPException(status_code=404, detail="Profile not found")
    return profile


@router.get("/balance", response_model=BalanceResponse)
async def read_balance(
        user_id: str = Depends(deps.get_current_user_id),
        db: AsyncSession = Depends(get_db),
):
    profile = await crud_profile.get_profile(db, user_id)
    if not profile:
        raise HTTPException(status_code=404, detail="Balance not found")
    return BalanceResponse(balance=profile.balance or 0)


@router.get("/wallet-balances", response_model=WalletBalancesResponse)
async def read_wallet_balances(
        user_id: str = Depends(deps.get_current_user_id),
        db: AsyncSession = Depends(get_db),
):
    profile = await crud_profile.get_profile(db, user_id)
    if not profile:
        raise HTTPException(status_code=404, detail="Wallet balances not found")
    return WalletBalancesResponse(balances=balances_by_symbol(profile.as_dict()))
