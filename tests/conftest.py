import pytest
from fastapi.testclient import TestClient

from fintrack.config import Settings
from fintrack.database import Database
from fintrack.main import create_app


@pytest.fixture
def database():
    db = Database("sqlite://")
    db.create_all()
    yield db
    db.dispose()


@pytest.fixture
def session(database):
    session = database.session()
    yield session
    session.rollback()
    session.close()


@pytest.fixture
def client(database):
    app = create_app(Settings(database_url="sqlite://"), database=database)
    with TestClient(app) as client:
        yield client
