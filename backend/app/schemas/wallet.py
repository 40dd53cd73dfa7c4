# backend/app/schemas/wallet.py
from typing import Dict, Optional

from pydantic import BaseModel, Field

from backend.app.core.crypto import CryptoType


class WalletUpdate(BaseModel):
    # Stored as given: no format or checksum validation
    wallet_address: str = Field(..., min_length=1)


class WalletResponse(BaseModel):
    success: bool
    crypto_type: CryptoType
    wallet_address: Optional[str] = None


class WalletsResponse(BaseModel):
    success: bool
    # "{symbol}wallet_address" -> address or null
    wallets: Dict[str, Optional[str]]
