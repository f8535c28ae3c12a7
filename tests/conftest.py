import pytest
from fastapi.testclient import TestClient

from savings_tracker.database import Database
from savings_tracker.main import create_app


@pytest.fixture
def database():
    db = Database("sqlite://")
    db.init_db()
    yield db
    db.dispose()


@pytest.fixture
def session(database):
    session = database.session()
    yield session
    session.close()


@pytest.fixture
def client(database):
    return TestClient(create_app(database))
