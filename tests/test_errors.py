import sqlite3

from fastapi import status

from frappuccino.core.errors import (
    DuplicateInventoryError,
    InvalidEnumTypeInventoryError,
    InventoryInUseError,
    MissingFieldsError,
    NegativeQuantityError,
    NoRecordError,
    translate_integrity_error,
)
from frappuccino.core.exception_handlers import field_name

CHECKS = {
    "inventory_quantity_check": NegativeQuantityError,
    "inventory_unit_check": InvalidEnumTypeInventoryError,
}


def _translate(message):
    return translate_integrity_error(
        sqlite3.IntegrityError(message),
        unique=DuplicateInventoryError,
        checks=CHECKS,
        foreign_key=InventoryInUseError,
    )


def test_unique_violation_maps_to_duplicate():
    assert isinstance(_translate("UNIQUE constraint failed: inventory.name"), DuplicateInventoryError)


def test_named_check_violations():
    assert isinstance(
        _translate("CHECK constraint failed: inventory_quantity_check"), NegativeQuantityError
    )
    assert isinstance(
        _translate("CHECK constraint failed: inventory_unit_check"),
        InvalidEnumTypeInventoryError,
    )


def test_foreign_key_violation():
    assert isinstance(_translate("FOREIGN KEY constraint failed"), InventoryInUseError)


def test_unrecognised_failures_are_not_translated():
    assert _translate("NOT NULL constraint failed: inventory.name") is None
    assert _translate("CHECK constraint failed: something_else") is None
    assert translate_integrity_error(
        sqlite3.IntegrityError("UNIQUE constraint failed: inventory.name")
    ) is None


def test_errors_carry_status_and_default_message():
    error = NoRecordError()
    assert error.status_code == status.HTTP_404_NOT_FOUND
    assert str(error) == "No matching record found"
    assert DuplicateInventoryError().status_code == status.HTTP_409_CONFLICT
    assert NoRecordError("gone").message == "gone"


def test_missing_fields_error_keeps_field_map():
    error = MissingFieldsError({"name": "name is required"})
    assert error.errors == {"name": "name is required"}
    assert error.status_code == status.HTTP_400_BAD_REQUEST


def test_field_name_rendering():
    assert field_name(("body", "quantity")) == "quantity"
    assert field_name(("body", "ingredients", 0, "quantity")) == "ingredients[0].quantity"
    assert field_name(("query", "page")) == "page"
