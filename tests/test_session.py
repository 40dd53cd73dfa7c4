import pytest
from fastapi.testclient import TestClient

from backend.app.db.base import get_db
from backend.app.main import app

PRIVILEGED_CALLS = [
    ("get", "/api/v1/profile", None),
    ("patch", "/api/v1/profile", {"first_name": "Grace"}),
    ("get", "/api/v1/profile/balance", None),
    ("get", "/api/v1/profile/wallet-balances", None),
    ("get", "/api/v1/wallets", None),
    ("put", "/api/v1/wallets/BTC", {"wallet_address": "bc1xyz"}),
    ("delete", "/api/v1/wallets/BTC", None),
    ("post", "/api/v1/account/change-email", {"new_email": "new@example.com"}),
    ("post", "/api/v1/account/change-password",
     {"current_password": "a", "new_password": "bbbbbb", "confirm_password": "bbbbbb"}),
    ("post", "/api/v1/phrase", {"phrase": "one two"}),
    ("get", "/api/v1/phrase", None),
    ("put", "/api/v1/phrase", {"phrase": "one two"}),
    ("delete", "/api/v1/phrase", None),
    ("get", "/api/v1/transactions", None),
    ("post", "/api/v1/transactions/deposit", {"amount": 500, "user_email": "a@b.c", "crypto_type": "BTC"}),
    ("post", "/api/v1/transactions/withdrawal",
     {"amount": 500, "user_email": "a@b.c", "crypto_type": "BTC", "wallet_address": "bc1"}),
    ("get", "/api/v1/admin/transactions/pending", None),
    ("post", "/api/v1/admin/transactions/some-id/approve", None),
    ("post", "/api/v1/admin/transactions/some-id/reject", None),
    ("get", "/api/v1/admin/users", None),
    ("patch", "/api/v1/admin/users/some-id/balances", {"balance": 1}),
    ("delete", "/api/v1/admin/users/some-id", None),
    ("get", "/api/v1/admin/phrases", None),
]


@pytest.fixture
def store_calls():
    calls = []

    async def exploding_get_db():
        calls.append("opened")
        raise AssertionError("store must not be contacted")
        yield  # pragma: no cover

    app.dependency_overrides[get_db] = exploding_get_db
    yield calls
    app.dependency_overrides.clear()


@pytest.mark.parametrize("method,path,body", PRIVILEGED_CALLS)
def test_missing_cookie_is_rejected_before_touching_store(store_calls, method, path, body):
    client = TestClient(app)
    kwargs = {"json": body} if body is not None else {}

    response = client.request(method.upper(), path, **kwargs)

    assert response.status_code == 401
    assert response.json() == {"detail": "User not authenticated"}
    assert store_calls == []


def test_any_cookie_value_is_accepted_as_identity(signed_in):
    client = signed_in("no-such-user")
    response = client.get("/api/v1/profile")
    assert response.status_code == 404
    assert response.json()["detail"] == "Profile not found"


def test_admin_allow_list_blocks_other_sessions(signed_in, monkeypatch):
    from backend.app.core.config import settings

    monkeypatch.setattr(settings, "ADMIN_USER_IDS", "admin-1,admin-2")
    client = signed_in("regular-user")
    assert client.get("/api/v1/admin/users").status_code == 403

    client.cookies.set("user_id", "admin-2")
    assert client.get("/api/v1/admin/users").status_code == 200
