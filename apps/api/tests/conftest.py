"""Pytest fixtures: an in-memory SQLite store and a TestClient wired to it."""

import os

# Set test environment variables before importing app modules
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("AUTO_CREATE_TABLES", "false")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from employee_api.core.config import Settings
from employee_api.core.database import get_db, init_db
from employee_api.main import create_app
from employee_api.repositories.employees import SqlAlchemyEmployeeRepository


@pytest.fixture()
def engine():
    # StaticPool keeps a single connection so every session sees the same
    # in-memory database
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(eng)
    yield eng
    eng.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, autocommit=False)


@pytest.fixture()
def db_session(session_factory):
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def repo(db_session):
    return SqlAlchemyEmployeeRepository(db_session)


@pytest.fixture()
def app(session_factory):
    app = create_app(Settings(auto_create_tables=False))

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    return app


@pytest.fixture()
def client(app):
    return TestClient(app)


@pytest.fixture()
def jane():
    return {"name": "Jane Doe", "email": "jane@example.com", "phone": "1234567890"}
