import os

os.environ.setdefault("DB_USER", "murmur")
os.environ.setdefault("DB_PASS", "murmur")
os.environ.setdefault("DB_HOST", "localhost")
os.environ.setdefault("DB_NAME", "murmur_test")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import event
from sqlalchemy.pool import StaticPool
from sqlmodel import create_engine

from main import app
from store import Store


def enable_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


@pytest.fixture
def test_db_engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    event.listen(engine, "connect", enable_foreign_keys)
    yield engine
    engine.dispose()

@pytest.fixture
def store(test_db_engine):
    store = Store(test_db_engine)
    store.initialize()
    return store

@pytest.fixture
def client(store):
    app.state.store = store
    with TestClient(app) as test_client:
        yield test_client
    app.state.store = None

@pytest.fixture
def user_id(store):
    return store.create_user("test@example.com", "testpass123")

@pytest.fixture
def auth_client(client, store, user_id):
    client.cookies.set("session_id", store.create_session(user_id))
    return client
