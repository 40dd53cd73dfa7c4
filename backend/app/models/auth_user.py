# backend/app/models/auth_user.py
from sqlalchemy import Column, String, Boolean, DateTime

from backend.app.db.base import Base, new_uuid, utcnow


class AuthUser(Base):
    """
    Login credentials, kept apart from the trading profile.

    The id is shared with TradingProfile.id but there is no foreign key:
    the two records are written independently (see change-email).
    """
    __tablename__ = "auth_users"

    id = Column(String(36), primary_key=True, default=new_uuid)

    # For phone sign-ups this is a synthetic address, never shown to the user
    email = Column(String(255), unique=True, index=True, nullable=False)

    hashed_password = Column(String(255), nullable=False)

    is_active = Column(Boolean, nullable=False, default=True)

    created_at = Column(DateTime(timezone=True), default=utcnow)
