import re

from backend.app.models import CryptoTransaction
from backend.app.services import notify


def test_deposit_below_minimum_is_rejected(make_user, signed_in):
    user = make_user()
    response = signed_in(user.id).post(
        "/api/v1/transactions/deposit",
        json={"amount": 299, "user_email": "ada@example.com", "crypto_type": "BTC"},
    )
    assert response.status_code == 400
    assert response.json()["detail"] == "Minimum deposit is 300"


def test_deposit_creates_pending_row_and_notifies_admin(make_user, signed_in, fetch, monkeypatch):
    sent = []
    monkeypatch.setattr(notify, "send_deposit_email_to_admin", lambda **kwargs: sent.append(kwargs))
    user = make_user()

    response = signed_in(user.id).post(
        "/api/v1/transactions/deposit",
        json={"amount": 500, "user_email": "ada@example.com", "crypto_type": "ETH"},
    )

    assert response.status_code == 200
    details = response.json()["details"]
    assert details["crypto_type"] == "ETH"
    assert details["wallet_address"] == "0x..."
    assert re.fullmatch(r"CRYPTO-DEP-\d+-\d{1,3}", details["reference"])

    txn = fetch(CryptoTransaction, details["transaction_id"])
    assert txn.user_id == user.id
    assert txn.type == "deposit"
    assert txn.status == "pending"
    assert txn.amount == 500
    assert txn.processed_at is None

    assert len(sent) == 1
    assert sent[0]["transaction_id"] == txn.id


def test_withdrawal_records_destination_address(make_user, signed_in, fetch):
    user = make_user()

    response = signed_in(user.id).post(
        "/api/v1/transactions/withdrawal",
        json={"amount": 300, "user_email": "ada@example.com", "crypto_type": "BTC", "wallet_address": "bc1dest"},
    )

    assert response.status_code == 200
    details = response.json()["details"]
    assert details["reference"].startswith("CRYPTO-WDL-")
    txn = fetch(CryptoTransaction, details["transaction_id"])
    assert txn.type == "withdrawal"
    assert txn.wallet_address == "bc1dest"
    assert txn.status == "pending"


def test_withdrawal_below_minimum_is_rejected(make_user, signed_in):
    user = make_user()
    response = signed_in(user.id).post(
        "/api/v1/transactions/withdrawal",
        json={"amount": 100, "user_email": "a@b.c", "crypto_type": "BTC", "wallet_address": "bc1"},
    )
    assert response.status_code == 400
    assert response.json()["detail"] == "Minimum withdrawal is 300"


def test_list_returns_only_callers_rows_newest_first(make_user, make_transaction, signed_in):
    from datetime import datetime, timedelta, timezone

    user = make_user()
    other = make_user()
    now = datetime.now(timezone.utc)
    make_transaction(user.id, reference="OLD", created_at=now - timedelta(days=1))
    make_transaction(user.id, reference="NEW", created_at=now, status="completed")
    make_transaction(other.id, reference="NOT-MINE")

    response = signed_in(user.id).get("/api/v1/transactions")

    assert response.status_code == 200
    rows = response.json()
    assert [row["reference"] for row in rows] == ["NEW", "OLD"]
    assert set(rows[0]) == {"type", "crypto_type", "amount", "status", "reference", "created_at"}
