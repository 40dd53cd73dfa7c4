# backend/app/schemas/admin.py
from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class AdminUserResponse(BaseModel):
    id: str
    first_name: str
    last_name: str
    email: Optional[str]
    phone_number: Optional[str]
    balance: float
    usdcwallet_balance: float
    usdtwallet_balance: float
    dotwallet_balance: float
    xrpwallet_balance: float
    ethwallet_balance: float
    avaxwallet_balance: float
    adawallet_balance: float
    solwallet_balance: float
    btcwallet_balance: float
    bnbwallet_balance: float
    created_at: Optional[datetime]

    class Config:
        from_attributes = True


# Admin balance edit; only the fields sent are written
class UserBalancesUpdate(BaseModel):
    balance: Optional[float] = None
    usdcwallet_balance: Optional[float] = None
    usdtwallet_balance: Optional[float] = None
    dotwallet_balance: Optional[float] = None
    xrpwallet_balance: Optional[float] = None
    ethwallet_balance: Optional[float] = None
    avaxwallet_balance: Optional[float] = None
    adawallet_balance: Optional[float] = None
    solwallet_balance: Optional[float] = None
    btcwallet_balance: Optional[float] = None
    bnbwallet_balance: Optional[float] = None
