import os

os.environ.setdefault("LOG_FILE_PATH", "")

import pytest
from fastapi.testclient import TestClient

from frappuccino.core.dependencies import db_dependency
from frappuccino.db.database import get_connection
from frappuccino.db.schema import create_tables
from frappuccino.main import app
from frappuccino.repositories.inventory_repository import InventoryRepository
from frappuccino.repositories.menu_repository import MenuRepository


@pytest.fixture
def conn():
    connection = get_connection(":memory:")
    create_tables(connection)
    yield connection
    connection.close()


@pytest.fixture
def inventory_repo(conn):
    return InventoryRepository(conn)


@pytest.fixture
def menu_repo(conn):
    return MenuRepository(conn)


@pytest.fixture
def client(conn):
    def _override():
        try:
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise

    app.dependency_overrides[db_dependency] = _override
    yield TestClient(app)
    app.dependency_overrides.clear()
