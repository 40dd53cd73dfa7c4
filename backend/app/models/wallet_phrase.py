# backend/app/models/wallet_phrase.py
"""
ORM model for connected-wallet secret phrases.

The phrase is stored in plaintext and returned as-is to its owner and
to the admin listing. Nothing encrypts it.
"""
from sqlalchemy import Column, Integer, String, Text, DateTime

from backend.app.db.base import Base, utcnow


class WalletPhrase(Base):
    __tablename__ = "wallet_phrases"

    id = Column(Integer, primary_key=True, index=True)

    # One phrase per user
    user_id = Column(String(36), unique=True, index=True, nullable=False)

    # 12 whitespace-separated words
    phrase_text = Column(Text, nullable=False)

    created_at = Column(DateTime(timezone=True), default=utcnow)
    updated_at = Column(DateTime(timezone=True), onupdate=utcnow)
