# backend/app/api/v1/endpoints/wallets.py
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.api import deps
from backend.app.core.crypto import CryptoType, filter_wallet_addresses, wallet_address_field
from backend.app.crud import profile as crud_profile
from backend.app.db.base import get_db
from backend.app.schemas.wallet import WalletResponse, WalletsResponse, WalletUpdate

router = APIRouter()


@router.get("", response_model=WalletsResponse)
async def list_wallets(
        user_id: str = Depends(deps.get_current_user_id),
        db: AsyncSession = Depends(get_db),
):
    profile = await crud_profile.get_profile(db, user_id)
    if not profile:
        raise HTTPException(status_code=404, detail="User profile not found")
    return WalletsResponse(success=True, wallets=filter_wallet_addresses(profile.as_dict()))


# Writes exactly one column. An id with no profile row is a silent no-op.
@router.put("/{crypto_type}", response_model=WalletResponse)
async def create_or_update_wallet(
        crypto_type: CryptoType,
        wallet_in: WalletUpdate,
        user_id: str = Depends(deps.get_current_user_id),
        db: AsyncSession = Depends(get_db),
):
    await crud_profile.update_profile_fields(
        db, user_id, {wallet_address_field(crypto_type): wallet_in.wallet_address}
    )
    return WalletResponse(success=True, crypto_type=crypto_type, wallet_address=wallet_in.wallet_address)


@router.delete("/{crypto_type}", response_model=WalletResponse)
async def delete_wallet(
        crypto_type: CryptoType,
        user_id: str = Depends(deps.get_current_user_id),
        db: AsyncSession = Depends(get_db),
):
    await crud_profile.update_profile_fields(db, user_id, {wallet_address_field(crypto_type): None})
    return WalletResponse(success=True, crypto_type=crypto_type)
