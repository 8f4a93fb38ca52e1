import pytest

from frappuccino.core.config import settings
from frappuccino.core.errors import (
    InvalidIDError,
    InvalidPaginationError,
    InvalidSortColumnError,
    MissingFieldsError,
    NegativeQuantityError,
    NoRecordError,
)
from frappuccino.schemas.inventory import InventoryPayload
from frappuccino.schemas.menu import MenuItemPayload
from frappuccino.services.inventory_service import InventoryService
from frappuccino.services.menu_service import MenuService
from frappuccino.services.parsing import parse_id, parse_positive_int


def test_parse_id():
    assert parse_id("12") == 12
    for raw in ("abc", "1.5", "", None):
        with pytest.raises(InvalidIDError):
            parse_id(raw)


def test_parse_positive_int():
    assert parse_positive_int(None, "page", 1) == 1
    assert parse_positive_int("", "page", 3) == 3
    assert parse_positive_int("4", "page", 1) == 4
    for raw in ("0", "-2", "x"):
        with pytest.raises(InvalidPaginationError):
            parse_positive_int(raw, "page", 1)


def test_inventory_insert_and_lookup(conn):
    service = InventoryService(conn)
    item = service.insert(InventoryPayload(name=" Milk ", quantity=10, unit="l"))
    assert item.name == "Milk"
    assert service.retrieve_by_id(str(item.id)) == item
    assert service.retrieve_all() == [item]


def test_inventory_missing_fields(conn):
    with pytest.raises(MissingFieldsError) as excinfo:
        InventoryService(conn).insert(InventoryPayload(name="Milk"))
    assert excinfo.value.errors == {
        "unit": "unit is required",
        "quantity": "quantity is required",
    }


def test_inventory_database_errors_pass_through(conn):
    with pytest.raises(NegativeQuantityError):
        InventoryService(conn).insert(InventoryPayload(name="Milk", quantity=-1, unit="l"))


def test_inventory_invalid_id_checked_before_payload(conn):
    service = InventoryService(conn)
    with pytest.raises(InvalidIDError):
        service.update("one", InventoryPayload())
    with pytest.raises(InvalidIDError):
        service.delete("one")
    with pytest.raises(InvalidIDError):
        service.retrieve_by_id("one")


def test_inventory_update_missing_record(conn):
    with pytest.raises(NoRecordError):
        InventoryService(conn).update("3", InventoryPayload(name="Milk", quantity=1, unit="l"))


def test_get_leftovers_defaults(conn):
    service = InventoryService(conn)
    for index in range(3):
        service.insert(InventoryPayload(name=f"Syrup {index}", quantity=index, unit="ml"))

    page = service.get_leftovers()
    assert page["current_page"] == 1
    assert page["page_size"] == settings.DEFAULT_PAGE_SIZE
    assert page["total_pages"] == 1
    assert page["has_next_page"] is False
    assert [i.name for i in page["data"]] == ["Syrup 2", "Syrup 1", "Syrup 0"]


def test_get_leftovers_caps_page_size(conn, monkeypatch):
    monkeypatch.setattr(settings, "MAX_PAGE_SIZE", 2)
    service = InventoryService(conn)
    for index in range(3):
        service.insert(InventoryPayload(name=f"Syrup {index}", quantity=index, unit="ml"))

    page = service.get_leftovers("name", "1", "50")
    assert page["page_size"] == 2
    assert page["total_pages"] == 2
    assert page["has_next_page"] is True


def test_get_leftovers_rejects_bad_input(conn):
    service = InventoryService(conn)
    with pytest.raises(InvalidPaginationError):
        service.get_leftovers(page="0")
    with pytest.raises(InvalidPaginationError):
        service.get_leftovers(page_size="ten")
    with pytest.raises(InvalidSortColumnError):
        service.get_leftovers(sort_by="price")


def test_menu_service_round_trip(conn):
    beans = InventoryService(conn).insert(InventoryPayload(name="Beans", quantity=100, unit="g"))
    service = MenuService(conn)
    payload = MenuItemPayload(
        name="Espresso",
        description="Single shot",
        price=2.5,
        ingredients=[{"ingredient_id": beans.id, "quantity": 18}],
    )
    created = service.insert(payload)
    assert service.retrieve_by_id(str(created.id)) == created

    payload.price = 2.8
    updated = service.update(str(created.id), payload)
    assert updated.price == 2.8

    service.delete(str(created.id))
    assert service.retrieve_all() == []


def test_menu_service_validation(conn):
    service = MenuService(conn)
    with pytest.raises(MissingFieldsError) as excinfo:
        service.insert(MenuItemPayload(name="Mocha"))
    assert set(excinfo.value.errors) == {"description", "price", "ingredients"}
    with pytest.raises(InvalidIDError):
        service.retrieve_by_id("mocha")


def test_parse_id_outside_sqlite_range():
    assert parse_id(str(2**63 - 1)) == 2**63 - 1
    assert parse_id(str(-(2**63))) == -(2**63)
    for raw in (str(2**63), "-9223372036854775809", "99999999999999999999"):
        with pytest.raises(NoRecordError):
            parse_id(raw)


def test_get_leftovers_page_past_the_end(conn):
    service = InventoryService(conn)
    service.insert(InventoryPayload(name="Milk", quantity=1, unit="l"))
    page = service.get_leftovers(page=str(10**19))
    assert page["data"] == []
    assert page["total_pages"] == 1
    assert page["has_next_page"] is False
