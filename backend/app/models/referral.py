# backend/app/models/referral.py
from sqlalchemy import Column, Integer, String, DateTime

from backend.app.db.base import Base, utcnow


class Referral(Base):
    __tablename__ = "referrals"

    id = Column(Integer, primary_key=True, index=True)
    referrer_id = Column(String(36), index=True, nullable=False)
    referee_id = Column(String(36), index=True, nullable=False)

    # 1 = direct referral, 2 = referrer's own referrer
    level = Column(Integer, nullable=False, default=1)

    created_at = Column(DateTime(timezone=True), default=utcnow)
