# backend/app/web/pages.py
"""
Server-rendered pages: marketing content, the user area and the admin
approval screen.

User pages read through the same accessors as the JSON API and show
store failures as plain text on the page. Forms post to the JSON API
from the browser (see static/app.js).
"""
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.core.config import settings
from backend.app.core.crypto import CRYPTO_LABELS, CryptoType, wallet_address_field, wallet_balance_field
from backend.app.core.errors import StoreError
from backend.app.crud import phrase as crud_phrase
from backend.app.crud import profile as crud_profile
from backend.app.crud import transaction as crud_transaction
from backend.app.db.base import get_db
from backend.app.models.profile import TradingProfile
from backend.app.security.phrase import PHRASE_WORD_COUNT
from backend.app.web import content

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

DEFAULT_NEXT = "/user/dashboard"

router = APIRouter()


def _render(request: Request, name: str, status_code: int = 200, **context) -> HTMLResponse:
    context.update(
        request=request,
        project_name=settings.PROJECT_NAME,
        support_email=settings.SUPPORT_EMAIL,
        api_prefix=settings.API_V1_STR,
        nav_links=content.NAV_LINKS,
        dashboard_links=content.DASHBOARD_LINKS,
        signed_in=bool(request.cookies.get(settings.SESSION_COOKIE_NAME)),
        year=datetime.now(timezone.utc).year,
    )
    return templates.TemplateResponse(request, name, context, status_code=status_code)


def safe_next(next_url: Optional[str]) -> str:
    """Only same-site paths are followed after sign-in."""
    if (
        next_url
        and next_url.startswith("/")
        and not next_url.startswith("//")
        and "\\" not in next_url
    ):
        return next_url
    return DEFAULT_NEXT


def _signin_redirect(path: str) -> RedirectResponse:
    return RedirectResponse(url=f"/signin?next={path}", status_code=303)


def _assets(profile: TradingProfile) -> List[Dict[str, Any]]:
    row = profile.as_dict()
    return [
        {
            "symbol": c.value,
            "label": CRYPTO_LABELS[c],
            "balance": row.get(wallet_balance_field(c)) or 0,
            "address": row.get(wallet_address_field(c)),
        }
        for c in CryptoType
    ]


async def _load_profile(db: AsyncSession, user_id: str):
    """Return (profile, error text)."""
    try:
        profile = await crud_profile.get_profile(db, user_id)
    except StoreError as e:
        return None, e.message
    if not profile:
        return None, "Profile not found"
    return profile, None


@router.get("/", response_class=HTMLResponse)
async def home(request: Request):
    return _render(request, "home.html", plans=content.PLANS, faqs=content.FAQS)


@router.get("/about", response_class=HTMLResponse)
async def about(request: Request):
    return _render(request, "about.html")


@router.get("/services", response_class=HTMLResponse)
async def services(request: Request):
    return _render(request, "services.html", services=content.SERVICES)


@router.get("/plan", response_class=HTMLResponse)
async def plans(request: Request):
    return _render(request, "plan.html", plans=content.PLANS)


@router.get("/privacy-policy", response_class=HTMLResponse)
async def privacy_policy(request: Request):
    return _render(request, "privacy.html", effective_date=datetime.now(timezone.utc).strftime("%B %d, %Y"))


@router.get("/terms", response_class=HTMLResponse)
async def terms(request: Request):
    return _render(request, "terms.html")


@router.get("/signin", response_class=HTMLResponse)
async def signin_page(request: Request, next: Optional[str] = None):
    return _render(request, "signin.html", next_url=safe_next(next))


@router.get("/user/dashboard", response_class=HTMLResponse)
async def dashboard(request: Request, db: AsyncSession = Depends(get_db)):
    user_id = request.cookies.get(settings.SESSION_COOKIE_NAME)
    if not user_id:
        return _signin_redirect("/user/dashboard")

    profile, error = await _load_profile(db, user_id)
    transactions = []
    if profile:
        try:
            transactions = await crud_transaction.list_for_user(db, user_id)
        except StoreError as e:
            error = e.message

    return _render(
        request,
        "dashboard.html",
        profile=profile,
        assets=_assets(profile) if profile else [],
        transactions=transactions[:10],
        error=error,
    )


@router.get("/user/profile", response_class=HTMLResponse)
async def profile_page(request: Request, db: AsyncSession = Depends(get_db)):
    user_id = request.cookies.get(settings.SESSION_COOKIE_NAME)
    if not user_id:
        return _signin_redirect("/user/profile")

    profile, error = await _load_profile(db, user_id)
    return _render(request, "profile.html", profile=profile, error=error)


@router.get("/user/wallets", response_class=HTMLResponse)
async def wallets_page(request: Request, db: AsyncSession = Depends(get_db)):
    user_id = request.cookies.get(settings.SESSION_COOKIE_NAME)
    if not user_id:
        return _signin_redirect("/user/wallets")

    profile, error = await _load_profile(db, user_id)
    return _render(
        request,
        "wallets.html",
        assets=_assets(profile) if profile else [],
        error=error,
    )


@router.get("/user/deposit", response_class=HTMLResponse)
async def deposit_page(request: Request, db: AsyncSession = Depends(get_db)):
    user_id = request.cookies.get(settings.SESSION_COOKIE_NAME)
    if not user_id:
        return _signin_redirect("/user/deposit")

    profile, error = await _load_profile(db, user_id)
    return _render(
        request,
        "deposit.html",
        profile=profile,
        cryptos=[(c.value, CRYPTO_LABELS[c]) for c in CryptoType],
        min_deposit=settings.MIN_DEPOSIT_AMOUNT,
        min_withdrawal=settings.MIN_WITHDRAWAL_AMOUNT,
        error=error,
    )


@router.get("/user/transactions", response_class=HTMLResponse)
async def transactions_page(request: Request, db: AsyncSession = Depends(get_db)):
    user_id = request.cookies.get(settings.SESSION_COOKIE_NAME)
    if not user_id:
        return _signin_redirect("/user/transactions")

    error = None
    transactions = []
    try:
        transactions = await crud_transaction.list_for_user(db, user_id)
    except StoreError as e:
        error = e.message
    return _render(request, "transactions.html", transactions=transactions, error=error)


@router.get("/user/phrase", response_class=HTMLResponse)
async def phrase_page(request: Request, db: AsyncSession = Depends(get_db)):
    user_id = request.cookies.get(settings.SESSION_COOKIE_NAME)
    if not user_id:
        return _signin_redirect("/user/phrase")

    error = None
    record = None
    try:
        record = await crud_phrase.get_phrase(db, user_id)
    except StoreError as e:
        error = e.message
    return _render(
        request,
        "phrase.html",
        record=record,
        word_count=PHRASE_WORD_COUNT,
        error=error,
    )


@router.get("/user/account", response_class=HTMLResponse)
async def account_page(request: Request, db: AsyncSession = Depends(get_db)):
    user_id = request.cookies.get(settings.SESSION_COOKIE_NAME)
    if not user_id:
        return _signin_redirect("/user/account")

    profile, error = await _load_profile(db, user_id)
    return _render(
        request,
        "account.html",
        profile=profile,
        min_password_length=settings.MIN_CHANGED_PASSWORD_LENGTH,
        error=error,
    )


@router.get("/admin/deposits", response_class=HTMLResponse)
async def admin_deposits_page(request: Request, db: AsyncSession = Depends(get_db)):
    user_id = request.cookies.get(settings.SESSION_COOKIE_NAME)
    if not user_id:
        return _signin_redirect("/admin/deposits")

    admin_ids = settings.ADMIN_IDS
    if admin_ids and user_id not in admin_ids:
        return _render(request, "admin_deposits.html", status_code=403, transactions=[],
                       error="Admin access required")

    error = None
    transactions = []
    try:
        transactions = await crud_transaction.list_pending(db)
    except StoreError as e:
        error = e.message
    return _render(request, "admin_deposits.html", transactions=transactions, error=error)


def render_not_found(request: Request) -> HTMLResponse:
    return _render(request, "not_found.html", status_code=404)
