# tests/conftest.py
from __future__ import annotations

import os
from collections.abc import Callable, Generator, Iterator
from datetime import timedelta
from itertools import count
from typing import Any

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

TEST_SECRET = "test-session-secret"

os.environ.setdefault("SESSION_SECRET", TEST_SECRET)
os.environ.setdefault("DATABASE_URL", "sqlite://")

from civicos.api.v1.dependencies import get_token_verifier
from civicos.core.security import TokenVerifier, hash_password
from civicos.db.session import Base
from civicos.db.session import get_db as app_get_session
from civicos.db.time import utcnow
from civicos.main import app as fastapi_app
from civicos.models import Bill, Petition, Politician, User

TEST_DB_URL = "sqlite://"
TEST_PASSWORD = "correct-horse-battery"

_USER_COUNTER = count(1)


@pytest.fixture(scope="session")
def engine() -> Generator[Engine, None, None]:
    engine = create_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # pysqlite defers BEGIN on its own; take it over so SAVEPOINTs nest correctly.
    @event.listens_for(engine, "connect")
    def _disable_pysqlite_begin(dbapi_connection, connection_record) -> None:
        dbapi_connection.isolation_level = None

    @event.listens_for(engine, "begin")
    def _emit_begin(conn) -> None:
        conn.exec_driver_sql("BEGIN")

    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def db_session(engine: Engine) -> Iterator[Session]:
    connection = engine.connect()
    transaction = connection.begin()
    # Commits inside the code under test release a SAVEPOINT, never the outer transaction.
    session = Session(
        bind=connection,
        autoflush=False,
        expire_on_commit=False,
        join_transaction_mode="create_savepoint",
    )
    try:
        yield session
    finally:
        session.close()

        if transaction.is_active:
            transaction.rollback()
        connection.close()

        # Ensure each test sees a clean database even if commits leaked out.
        with engine.begin() as cleanup_conn:
            for table in reversed(Base.metadata.sorted_tables):
                cleanup_conn.execute(table.delete())


@pytest.fixture(scope="session")
def app() -> FastAPI:
    return fastapi_app


@pytest.fixture(scope="session")
def token_verifier() -> TokenVerifier:
    """Verifier built from an explicit secret rather than the environment."""
    return TokenVerifier(TEST_SECRET, expire_minutes=30)


@pytest.fixture(autouse=True)
def override_dependencies(
    app: FastAPI,
    db_session: Session,
    token_verifier: TokenVerifier,
) -> Iterator[None]:
    def _get_session_override() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[app_get_session] = _get_session_override
    app.dependency_overrides[get_token_verifier] = lambda: token_verifier
    try:
        yield
    finally:
        app.dependency_overrides.pop(app_get_session, None)
        app.dependency_overrides.pop(get_token_verifier, None)


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test", raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture()
def make_user(db_session: Session) -> Callable[..., User]:
    """Return a factory that persists users with unique names."""

    def _make_user(**overrides: Any) -> User:
        n = next(_USER_COUNTER)
        fields: dict[str, Any] = {
            "username": f"citizen{n}",
            "email": f"citizen{n}@example.org",
            "password_hash": hash_password(TEST_PASSWORD),
            "first_name": "Test",
            "last_name": f"Citizen {n}",
        }
        fields.update(overrides)
        user = User(**fields)
        db_session.add(user)
        db_session.flush()
        db_session.refresh(user)
        return user

    return _make_user


@pytest.fixture()
def test_user(make_user: Callable[..., User]) -> User:
    """Create and return a persisted test user."""
    return make_user()


@pytest.fixture()
def other_user(make_user: Callable[..., User]) -> User:
    """Create and return a second persisted user."""
    return make_user()


@pytest.fixture()
def auth_token(test_user: User, token_verifier: TokenVerifier) -> dict[str, str]:
    """Return authorization headers for the primary test user."""
    return {"Authorization": f"Bearer {token_verifier.issue(test_user.id)}"}


@pytest.fixture()
def other_auth_token(other_user: User, token_verifier: TokenVerifier) -> dict[str, str]:
    """Return authorization headers for the secondary test user."""
    return {"Authorization": f"Bearer {token_verifier.issue(other_user.id)}"}


@pytest.fixture()
def make_bill(db_session: Session) -> Callable[..., Bill]:
    def _make_bill(**overrides: Any) -> Bill:
        fields: dict[str, Any] = {
            "bill_number": "C-1",
            "title": "Test Bill",
            "description": "A bill used in tests",
            "status": "Active",
            "category": "Economy",
        }
        fields.update(overrides)
        bill = Bill(**fields)
        db_session.add(bill)
        db_session.flush()
        db_session.refresh(bill)
        return bill

    return _make_bill


@pytest.fixture()
def test_bill(make_bill: Callable[..., Bill]) -> Bill:
    return make_bill()


@pytest.fixture()
def make_petition(db_session: Session) -> Callable[..., Petition]:
    def _make_petition(**overrides: Any) -> Petition:
        fields: dict[str, Any] = {
            "title": "Fund public libraries",
            "description": "Keep branches open on weekends",
            "target_signatures": 500,
            "current_signatures": 0,
            "deadline": utcnow() + timedelta(days=10),
        }
        fields.update(overrides)
        petition = Petition(**fields)
        db_session.add(petition)
        db_session.flush()
        db_session.refresh(petition)
        return petition

    return _make_petition


@pytest.fixture()
def test_petition(make_petition: Callable[..., Petition]) -> Petition:
    return make_petition()


@pytest.fixture()
def test_politician(db_session: Session) -> Politician:
    politician = Politician(
        name="Alex Tremblay",
        party="Independent",
        position="Member of Parliament",
        riding="Ottawa Centre",
        level="federal",
        jurisdiction="federal",
        parliament_member_id="mp-1001",
    )
    db_session.add(politician)
    db_session.flush()
    db_session.refresh(politician)
    return politician


@pytest.fixture()
def test_password() -> str:
    """Plain-text password of every user built by ``make_user``."""
    return TEST_PASSWORD
