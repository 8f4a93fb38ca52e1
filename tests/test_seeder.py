from frappuccino.db import seeder
from frappuccino.repositories.inventory_repository import InventoryRepository
from frappuccino.repositories.menu_repository import MenuRepository


def test_seed_demo_data_populates_empty_database(conn):
    assert seeder.seed_demo_data(conn) is True
    assert InventoryRepository(conn).count() == len(seeder.DEMO_INVENTORY)
    menu = MenuRepository(conn).retrieve_all()
    assert [m.name for m in menu] == [entry[0] for entry in seeder.DEMO_MENU]
    assert all(m.ingredients for m in menu)


def test_seed_demo_data_is_idempotent(conn):
    seeder.seed_demo_data(conn)
    assert seeder.seed_demo_data(conn) is False
    assert InventoryRepository(conn).count() == len(seeder.DEMO_INVENTORY)


def test_seed_if_enabled_respects_setting(monkeypatch):
    calls = []
    monkeypatch.setattr(seeder.settings, "SEED_DEMO_DATA", False)
    monkeypatch.setattr(seeder, "seed_demo_data", lambda conn: calls.append(conn))
    seeder.seed_if_enabled()
    assert calls == []
