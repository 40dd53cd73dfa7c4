# backend/app/core/errors.py
"""
Store failures surfaced to callers.

Accessors wrap every SQLAlchemy error in StoreError carrying a short,
caller-facing message. main.py turns it into a 500 response; nothing
retries.
"""
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """Opaque upstream failure from the relational store."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


@asynccontextmanager
async def store_operation(db: AsyncSession, message: str) -> AsyncIterator[None]:
    try:
        yield
    except SQLAlchemyError as e:
        logger.error(f"{message}: {e}")
        await db.rollback()
        raise StoreError(message) from e
