# backend/app/schemas/profile.py
from datetime import datetime
from typing import Dict, Optional

from pydantic import BaseModel, Field, field_validator


# Identity projection of the profile row (no wallets, no per-asset balances)
class ProfileResponse(BaseModel):
    first_name: str
    last_name: str
    email: Optional[str]
    phone_number: Optional[str]
    balance: float
    referral_code: Optional[str]
    referral_level: int
    auth_email: Optional[str]
    created_at: Optional[datetime]
    updated_at: Optional[datetime]

    class Config:
        from_attributes = True


class ProfileUpdate(BaseModel):
    """Omitted fields are left alone; names cannot be cleared."""
    first_name: Optional[str] = Field(None, min_length=1, max_length=100)
    last_name: Optional[str] = Field(None, min_length=1, max_length=100)
    phone_number: Optional[str] = None

    @field_validator("first_name", "last_name")
    @classmethod
    def names_not_null(cls, v: Optional[str]) -> str:
        if v is None:
            raise ValueError("must not be null")
        return v


class BalanceResponse(BaseModel):
    balance: float


class WalletBalancesResponse(BaseModel):
    # symbol -> amount, every symbol present
    balances: Dict[str, float]
