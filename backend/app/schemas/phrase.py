# backend/app/schemas/phrase.py
"""
Schemas for the connected-wallet secret phrase.

Unlike a recovery verifier, the phrase itself travels in both
directions and is returned in plaintext.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class PhraseRequest(BaseModel):
    phrase: str


class PhraseRecord(BaseModel):
    id: int
    user_id: str
    phrase_text: str
    created_at: Optional[datetime]
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class PhraseResponse(BaseModel):
    success: bool
    message: Optional[str] = None
    data: Optional[PhraseRecord] = None
