# backend/app/services/notify.py
"""
Admin notifications for new deposit and withdrawal requests.

No mail transport is configured; the notification is written to the
application log addressed to ADMIN_EMAIL.
"""
import logging
from typing import Any, Dict, Optional

from backend.app.core.config import settings

logger = logging.getLogger(__name__)


def _notify_admin(subject: str, payload: Dict[str, Any]) -> Dict[str, Any]:
    message = {"to": settings.ADMIN_EMAIL, "subject": subject, **payload}
    logger.info(f"Admin notification sent: {message}")
    return message


def send_deposit_email_to_admin(
    user_email: str,
    amount: float,
    reference: str,
    user_id: str,
    crypto_type: str,
    transaction_id: str,
) -> Dict[str, Any]:
    return _notify_admin(
        f"New deposit request - {reference}",
        {
            "user_email": user_email,
            "amount": amount,
            "reference": reference,
            "user_id": user_id,
            "crypto_type": crypto_type,
            "transaction_id": transaction_id,
        },
    )


def send_withdrawal_email_to_admin(
    user_email: str,
    amount: float,
    reference: str,
    user_id: str,
    crypto_type: str,
    transaction_id: str,
    wallet_address: Optional[str],
) -> Dict[str, Any]:
    return _notify_admin(
        f"New withdrawal request - {reference}",
        {
            "user_email": user_email,
            "amount": amount,
            "reference": reference,
            "user_id": user_id,
            "crypto_type": crypto_type,
            "wallet_address": wallet_address,
            "transaction_id": transaction_id,
        },
    )
