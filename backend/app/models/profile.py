# backend/app/models/profile.py
from typing import Any, Dict

from sqlalchemy import Column, Integer, String, Float, Boolean, DateTime

from backend.app.db.base import Base, utcnow


class TradingProfile(Base):
    """One wide row per user: identity, balances and wallet addresses."""
    __tablename__ = "tradingprofile"

    id = Column(String(36), primary_key=True, index=True)

    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    email = Column(String(255), nullable=True, index=True)
    phone_number = Column(String(32), nullable=True, index=True)
    is_phone_user = Column(Boolean, nullable=False, default=False)
    auth_email = Column(String(255), nullable=True)

    # Primary (USD) balance
    balance = Column(Float, nullable=False, default=0)

    # Per-asset balances, one per CryptoType
    usdcwallet_balance = Column(Float, nullable=False, default=0)
    usdtwallet_balance = Column(Float, nullable=False, default=0)
    dotwallet_balance = Column(Float, nullable=False, default=0)
    xrpwallet_balance = Column(Float, nullable=False, default=0)
    ethwallet_balance = Column(Float, nullable=False, default=0)
    avaxwallet_balance = Column(Float, nullable=False, default=0)
    adawallet_balance = Column(Float, nullable=False, default=0)
    solwallet_balance = Column(Float, nullable=False, default=0)
    btcwallet_balance = Column(Float, nullable=False, default=0)
    bnbwallet_balance = Column(Float, nullable=False, default=0)

    # User's own receiving addresses; stored as given, no format checks
    usdcwallet_address = Column(String(255), nullable=True)
    usdtwallet_address = Column(String(255), nullable=True)
    dotwallet_address = Column(String(255), nullable=True)
    xrpwallet_address = Column(String(255), nullable=True)
    ethwallet_address = Column(String(255), nullable=True)
    avaxwallet_address = Column(String(255), nullable=True)
    adawallet_address = Column(String(255), nullable=True)
    solwallet_address = Column(String(255), nullable=True)
    btcwallet_address = Column(String(255), nullable=True)
    bnbwallet_address = Column(String(255), nullable=True)

    referral_code = Column(String(32), unique=True, index=True, nullable=True)
    referred_by = Column(String(36), nullable=True)
    referral_level = Column(Integer, nullable=False, default=0)

    created_at = Column(DateTime(timezone=True), default=utcnow)
    # Set explicitly by the writes that mean to touch it
    updated_at = Column(DateTime(timezone=True), default=utcnow)

    def as_dict(self) -> Dict[str, Any]:
        """Full row projection, column name -> value."""
        return {c.name: getattr(self, c.key) for c in self.__table__.columns}
