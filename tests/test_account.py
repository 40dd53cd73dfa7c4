from backend.app.core.errors import StoreError
from backend.app.crud import profile as crud_profile
from backend.app.models import AuthUser, TradingProfile
from backend.app.security import hashing


def test_change_email_updates_auth_and_profile(make_user, signed_in, fetch):
    user = make_user(email="old@example.com")

    response = signed_in(user.id).post("/api/v1/account/change-email", json={"new_email": "new@example.com"})

    assert response.status_code == 200
    assert response.json()["message"] == "Email updated successfully"
    assert fetch(AuthUser, user.id).email == "new@example.com"
    profile = fetch(TradingProfile, user.id)
    assert profile.email == "new@example.com"
    assert profile.auth_email == "new@example.com"


def test_change_email_validation(make_user, signed_in):
    user = make_user(email="same@example.com")
    make_user(email="taken@example.com")
    client = signed_in(user.id)

    invalid = client.post("/api/v1/account/change-email", json={"new_email": "not-an-email"})
    assert invalid.status_code == 400
    assert invalid.json()["detail"] == "Valid email is required"

    same = client.post("/api/v1/account/change-email", json={"new_email": "same@example.com"})
    assert same.json()["detail"] == "New email must be different from current email"

    taken = client.post("/api/v1/account/change-email", json={"new_email": "taken@example.com"})
    assert taken.json()["detail"] == "Email is already in use by another account"


def test_profile_failure_after_auth_update_is_not_rolled_back(make_user, signed_in, fetch, monkeypatch):
    user = make_user(email="old@example.com")

    async def failing_update(db, user_id, fields):
        raise StoreError("Database update failed")

    monkeypatch.setattr(crud_profile, "update_profile_fields", failing_update)

    response = signed_in(user.id).post("/api/v1/account/change-email", json={"new_email": "new@example.com"})

    assert response.status_code == 500
    assert response.json()["detail"] == "Email updated in auth, but failed in profile: Database update failed"
    # the two stores now disagree
    assert fetch(AuthUser, user.id).email == "new@example.com"
    assert fetch(TradingProfile, user.id).email == "old@example.com"


def test_change_password(make_user, signed_in, fetch):
    user = make_user(password="old-password")

    response = signed_in(user.id).post(
        "/api/v1/account/change-password",
        json={"current_password": "old-password", "new_password": "brand-new", "confirm_password": "brand-new"},
    )

    assert response.status_code == 200
    stored = fetch(AuthUser, user.id)
    assert hashing.verify_password("brand-new", stored.hashed_password)
    assert not hashing.verify_password("old-password", stored.hashed_password)


def test_change_password_checks(make_user, signed_in):
    user = make_user(password="old-password")
    client = signed_in(user.id)

    short = client.post(
        "/api/v1/account/change-password",
        json={"current_password": "old-password", "new_password": "abc", "confirm_password": "abc"},
    )
    assert short.status_code == 400
    assert short.json()["detail"] == "Password must be at least 6 characters"

    mismatch = client.post(
        "/api/v1/account/change-password",
        json={"current_password": "old-password", "new_password": "abcdef", "confirm_password": "abcdeg"},
    )
    assert mismatch.json()["detail"] == "Passwords do not match"

    wrong = client.post(
        "/api/v1/account/change-password",
        json={"current_password": "nope", "new_password": "abcdef", "confirm_password": "abcdef"},
    )
    assert wrong.status_code == 401
