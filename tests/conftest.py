import asyncio
import os
import uuid

# Must be set before the app (and its settings) are imported
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///./test_ttrade.db"
os.environ["ADMIN_USER_IDS"] = ""
os.environ["ENVIRONMENT"] = "testing"

import pytest
from fastapi.testclient import TestClient

from backend.app.db import init_models
from backend.app.db.base import get_db
from backend.app.db.session import build_engine, build_sessionmaker
from backend.app.main import app
from backend.app.models import AuthUser, CryptoTransaction, TradingProfile, WalletPhrase
from backend.app.security import hashing


@pytest.fixture
def engine(tmp_path):
    """A fresh SQLite database per test."""
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}", echo=False)
    asyncio.run(init_models(engine))
    yield engine
    asyncio.run(engine.dispose())


@pytest.fixture
def session_factory(engine):
    return build_sessionmaker(engine)


@pytest.fixture
def client(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def db_run(session_factory):
    """Run `fn(session)` in its own session and event loop, return the result."""
    def _run(fn):
        async def _inner():
            async with session_factory() as session:
                return await fn(session)
        return asyncio.run(_inner())
    return _run


@pytest.fixture
def fetch(db_run):
    def _fetch(model, pk):
        return db_run(lambda session: session.get(model, pk))
    return _fetch


@pytest.fixture
def make_user(db_run):
    """Create an auth record and a matching profile; returns the profile."""
    def _make(password="correct-horse", email=None, **fields):
        user_id = fields.pop("id", None) or str(uuid.uuid4())
        email = email if email is not None else f"{user_id[:8]}@example.com"

        async def _create(session):
            session.add(AuthUser(id=user_id, email=email, hashed_password=hashing.get_password_hash(password)))
            profile = TradingProfile(
                id=user_id,
                first_name=fields.pop("first_name", "Ada"),
                last_name=fields.pop("last_name", "Lovelace"),
                email=email,
                auth_email=email,
                balance=fields.pop("balance", 10),
                referral_code=fields.pop("referral_code", user_id[:8]),
                **fields,
            )
            session.add(profile)
            await session.commit()
            return profile

        return db_run(_create)
    return _make


@pytest.fixture
def make_transaction(db_run):
    def _make(user_id, **fields):
        async def _create(session):
            txn = CryptoTransaction(
                user_id=user_id,
                type=fields.pop("type", "deposit"),
                crypto_type=fields.pop("crypto_type", "BTC"),
                amount=fields.pop("amount", 500),
                status=fields.pop("status", "pending"),
                reference=fields.pop("reference", f"CRYPTO-DEP-{uuid.uuid4().hex[:8]}"),
                user_email=fields.pop("user_email", "ada@example.com"),
                **fields,
            )
            session.add(txn)
            await session.commit()
            return txn
        return db_run(_create)
    return _make


@pytest.fixture
def make_phrase(db_run):
    def _make(user_id, phrase_text):
        async def _create(session):
            record = WalletPhrase(user_id=user_id, phrase_text=phrase_text)
            session.add(record)
            await session.commit()
            return record
        return db_run(_create)
    return _make


@pytest.fixture
def signed_in(client):
    """Attach the user_id session cookie to the test client."""
    def _sign_in(user_id):
        client.cookies.set("user_id", user_id)
        return client
    return _sign_in
