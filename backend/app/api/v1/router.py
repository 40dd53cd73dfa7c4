# backend/app/api/v1/router.py
from fastapi import APIRouter
from backend.app.api.v1.endpoints import account, admin, auth, phrase, profile, transactions, wallets

api_router = APIRouter()
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(profile.router, prefix="/profile", tags=["profile"])
api_router.include_router(wallets.router, prefix="/wallets", tags=["wallets"])
api_router.include_router(account.router, prefix="/account", tags=["account"])
api_router.include_router(phrase.router, prefix="/phrase", tags=["phrase"])
api_router.include_router(transactions.router, prefix="/transactions", tags=["transactions"])
api_router.include_router(admin.router, prefix="/admin", tags=["admin"])
