import pytest

from backend.app.core.errors import StoreError
from backend.app.crud import profile as crud_profile
from backend.app.models import TradingProfile


def test_list_wallets_returns_only_address_fields(make_user, signed_in):
    user = make_user(btcwallet_address="bc1qexample", ethwallet_balance=2.0)
    client = signed_in(user.id)

    response = client.get("/api/v1/wallets")

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert len(body["wallets"]) == 10
    assert body["wallets"]["btcwallet_address"] == "bc1qexample"
    assert body["wallets"]["ethwallet_address"] is None
    assert all(key.endswith("wallet_address") for key in body["wallets"])


def test_list_wallets_without_profile(signed_in):
    response = signed_in("ghost").get("/api/v1/wallets")
    assert response.status_code == 404
    assert response.json()["detail"] == "User profile not found"


def test_updating_one_wallet_changes_only_that_column(make_user, fetch, signed_in):
    user = make_user()
    other = make_user()
    before = fetch(TradingProfile, user.id).as_dict()
    other_before = fetch(TradingProfile, other.id).as_dict()

    response = signed_in(user.id).put("/api/v1/wallets/SOL", json={"wallet_address": "So1anaAddr"})

    assert response.status_code == 200
    assert response.json() == {"success": True, "crypto_type": "SOL", "wallet_address": "So1anaAddr"}

    after = fetch(TradingProfile, user.id).as_dict()
    changed = {key for key in before if before[key] != after[key]}
    assert changed == {"solwallet_address"}
    assert after["solwallet_address"] == "So1anaAddr"
    assert fetch(TradingProfile, other.id).as_dict() == other_before


def test_address_is_stored_without_validation(make_user, fetch, signed_in):
    user = make_user()
    signed_in(user.id).put("/api/v1/wallets/BTC", json={"wallet_address": "not really an address"})
    assert fetch(TradingProfile, user.id).btcwallet_address == "not really an address"


def test_delete_wallet_sets_address_to_null(make_user, fetch, signed_in):
    user = make_user(xrpwallet_address="rXRP")
    response = signed_in(user.id).delete("/api/v1/wallets/XRP")

    assert response.status_code == 200
    assert response.json()["success"] is True
    assert fetch(TradingProfile, user.id).xrpwallet_address is None


def test_unknown_symbol_is_rejected_at_the_boundary(make_user, signed_in):
    user = make_user()
    response = signed_in(user.id).put("/api/v1/wallets/DOGE", json={"wallet_address": "D123"})
    assert response.status_code == 422


def test_unknown_column_is_rejected_by_the_store(make_user, db_run):
    user = make_user()
    with pytest.raises(StoreError) as exc_info:
        db_run(lambda session: crud_profile.update_profile_fields(
            session, user.id, {"dogewallet_address": "D123"}
        ))
    assert exc_info.value.message == "Database update failed"


def test_wallet_update_for_missing_profile_is_a_silent_no_op(signed_in):
    response = signed_in("ghost").put("/api/v1/wallets/ETH", json={"wallet_address": "0xabc"})
    assert response.status_code == 200
    assert response.json()["success"] is True
