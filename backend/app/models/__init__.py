from backend.app.models.auth_user import AuthUser
from backend.app.models.profile import TradingProfile
from backend.app.models.transaction import CryptoTransaction
from backend.app.models.wallet_phrase import WalletPhrase
from backend.app.models.referral import Referral

__all__ = [
    "AuthUser",
    "TradingProfile",
    "CryptoTransaction",
    "WalletPhrase",
    "Referral",
]
