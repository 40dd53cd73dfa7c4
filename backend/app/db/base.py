# backend/app/db/base.py
"""
SQLAlchemy declarative base plus re-exports of the session components,
so models and endpoints can import everything from db.base.
"""
import uuid
from datetime import datetime, timezone

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """
    Base class for all ORM models.

    Usage:
        class TradingProfile(Base):
            __tablename__ = "tradingprofile"
            id = Column(String(36), primary_key=True)
            ...
    """
    pass


# Column defaults are computed in Python so async sessions never need to
# reload server-generated values after a flush.
def new_uuid() -> str:
    return str(uuid.uuid4())


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


from backend.app.db.session import (  # noqa: E402
    engine,
    AsyncSessionLocal,
    get_db,
)

__all__ = [
    "Base",
    "new_uuid",
    "utcnow",
    "engine",
    "AsyncSessionLocal",
    "get_db",
]
