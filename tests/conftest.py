import os

# Point the app at an in-memory SQLite database before anything imports settings
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["STRICT_NOT_FOUND"] = "false"
# Errors go through the exception handlers instead of the debug traceback page
os.environ["DEBUG"] = "false"

import pytest
from fastapi.testclient import TestClient

from app.core.database import SessionLocal, create_database_tables, drop_database_tables
from app.main import app


@pytest.fixture(autouse=True)
def reset_db():
    """Give every test empty tables."""
    create_database_tables()
    yield
    drop_database_tables()


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def lenient_client():
    """Client that returns 500 responses instead of re-raising server errors."""
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c
