# backend/app/api/deps.py
from fastapi import Depends, HTTPException, Request, status

from backend.app.core.config import settings


async def get_current_user_id(request: Request) -> str:
    """
    Resolve the caller from the user_id cookie.

    Presence of the cookie is the whole check: no signature, no expiry,
    no lookup. Endpoints declare this dependency before get_db so a
    missing cookie is rejected before a session is opened.
    """
    user_id = request.cookies.get(settings.SESSION_COOKIE_NAME)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not authenticated",
        )
    return user_id


async def get_admin_user_id(user_id: str = Depends(get_current_user_id)) -> str:
    # An empty allow-list leaves admin routes open to any session
    admin_ids = settings.ADMIN_IDS
    if admin_ids and user_id not in admin_ids:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required",
        )
    return user_id
