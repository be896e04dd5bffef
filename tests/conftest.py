"""Test configuration and fixtures for the stock API."""

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("DATABASE_CREATE_TABLES", "false")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from stockapp.database.database import get_db, init_db
from stockapp.main import app
from stockapp.models.database_models import Base
from stockapp.services.product import ProductService


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture(name="engine")
def engine_fixture():
    """Fresh in-memory database per test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture(name="session_factory")
def session_factory_fixture(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(name="db")
def db_fixture(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(name="service")
def service_fixture(db):
    return ProductService(db)


@pytest.fixture(name="client")
def client_fixture(session_factory):
    """Test client whose requests run against the per-test database."""

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
