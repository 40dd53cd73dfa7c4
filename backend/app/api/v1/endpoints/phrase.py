# backend/app/api/v1/endpoints/phrase.py
"""
Secret phrase endpoints.

Endpoints:
- POST   /phrase - Save the caller's 12-word phrase
- GET    /phrase - Return it
- PUT    /phrase - Replace it
- DELETE /phrase - Remove it

Only the word count is validated. The phrase is stored and returned in
plaintext.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.api import deps
from backend.app.crud import phrase as crud_phrase
from backend.app.db.base import get_db
from backend.app.schemas.phrase import PhraseRecord, PhraseRequest, PhraseResponse
from backend.app.security import phrase as phrase_security

router = APIRouter()

WORD_COUNT_ERROR = f"Secret phrase must contain exactly {phrase_security.PHRASE_WORD_COUNT} words"


@router.post("", response_model=PhraseResponse)
async def create_secret_phrase(
        request: PhraseRequest,
        user_id: str = Depends(deps.get_current_user_id),
        db: AsyncSession = Depends(get_db),
):
    if not phrase_security.validate_phrase_format(request.phrase):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=WORD_COUNT_ERROR)

    record = await crud_phrase.create_phrase(db, user_id, request.phrase)
    return PhraseResponse(
        success=True,
        message="Wallet connected successfully",
        data=PhraseRecord.model_validate(record),
    )


@router.get("", response_model=PhraseResponse)
async def get_secret_phrase(
        user_id: str = Depends(deps.get_current_user_id),
        db: AsyncSession = Depends(get_db),
):
    record = await crud_phrase.get_phrase(db, user_id)
    if not record:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No secret phrase found")
    return PhraseResponse(success=True, data=PhraseRecord.model_validate(record))


@router.put("", response_model=PhraseResponse)
async def update_secret_phrase(
        request: PhraseRequest,
        user_id: str = Depends(deps.get_current_user_id),
        db: AsyncSession = Depends(get_db),
):
    if not phrase_security.validate_phrase_format(request.phrase):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=WORD_COUNT_ERROR)

    record = await crud_phrase.get_phrase(db, user_id)
    if not record:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No secret phrase found")

    record = await crud_phrase.update_phrase(db, record, request.phrase)
    return PhraseResponse(
        success=True,
        message="Secret phrase updated successfully",
        data=PhraseRecord.model_validate(record),
    )


@router.delete("", response_model=PhraseResponse)
async def delete_secret_phrase(
        user_id: str = Depends(deps.get_current_user_id),
        db: AsyncSession = Depends(get_db),
):
    await crud_phrase.delete_phrase(db, user_id)
    return PhraseResponse(success=True, message="Secret phrase deleted successfully")
