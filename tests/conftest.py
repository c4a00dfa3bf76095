import sys
import os

import pytest
from fastapi.testclient import TestClient

# Ensure package root is on sys.path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.core.config import Settings
from app.main import create_app


def sqlite_url(path) -> str:
    return f"sqlite+aiosqlite:///{path}"


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "expense-tracker-test.db"


@pytest.fixture
def test_settings(db_path):
    return Settings(DATABASE_URL=sqlite_url(db_path))


@pytest.fixture
def client(test_settings):
    with TestClient(create_app(test_settings)) as c:
        yield c
