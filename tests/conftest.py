import os

# Keep test runs from writing log files into the working directory.
os.environ.setdefault("LOG_TO_FILE", "false")

import pytest
from fastapi.testclient import TestClient

from task_tracker.cmd.api.main import create_app
from task_tracker.core.config import Settings
from task_tracker.core.database import SQLiteDatabase
from task_tracker.repositories import SQLiteTaskRepository


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "data" / "tasks.db"


@pytest.fixture
def database(db_path):
    db = SQLiteDatabase(db_path)
    db.connect()
    yield db
    db.disconnect()


@pytest.fixture
def repository(database):
    return SQLiteTaskRepository(database)


@pytest.fixture
def settings(db_path):
    return Settings(DB_PATH=str(db_path), LOG_TO_FILE=False)


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    # Entering the client runs the lifespan (store init / shutdown).
    with TestClient(app) as test_client:
        yield test_client
