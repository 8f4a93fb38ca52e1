"""
Domain errors raised by repositories and services.

Every error carries the HTTP status the API answers with, so routers never
need to know which layer raised it (see ``core/exception_handlers.py``).
"""
import sqlite3
from typing import Optional, Type

from fastapi import status


class FrappuccinoError(Exception):
    """Base class for all domain errors."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    message: str = "Request could not be processed"

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or self.message)
        self.message = message or self.message


# ---------------------------------------------------------------------------
# Lookups
# ---------------------------------------------------------------------------

class NoRecordError(FrappuccinoError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "No matching record found"


class InvalidIDError(FrappuccinoError):
    message = "Identifier must be an integer"


# ---------------------------------------------------------------------------
# Inventory constraints
# ---------------------------------------------------------------------------

class DuplicateInventoryError(FrappuccinoError):
    status_code = status.HTTP_409_CONFLICT
    message = "Inventory item with this name already exists"


class NegativeQuantityError(FrappuccinoError):
    message = "Quantity cannot be negative"


class InvalidEnumTypeInventoryError(FrappuccinoError):
    message = "Unit is not a valid inventory unit"


class InventoryInUseError(FrappuccinoError):
    status_code = status.HTTP_409_CONFLICT
    message = "Inventory item is used by a menu item"


# ---------------------------------------------------------------------------
# Menu constraints
# ---------------------------------------------------------------------------

class DuplicateMenuItemError(FrappuccinoError):
    status_code = status.HTTP_409_CONFLICT
    message = "Menu item with this name already exists"


class NegativePriceError(FrappuccinoError):
    message = "Price cannot be negative"


class UnknownIngredientError(FrappuccinoError):
    message = "Menu item references an unknown inventory item"


class DuplicateIngredientError(FrappuccinoError):
    message = "Ingredient is listed more than once"


# ---------------------------------------------------------------------------
# Request validation
# ---------------------------------------------------------------------------

class MissingFieldsError(FrappuccinoError):
    """Raised when a payload fails the required-field checks.

    ``errors`` maps each offending field name to a human readable message.
    """

    message = "Missing or invalid fields"

    def __init__(self, errors: dict[str, str], message: Optional[str] = None) -> None:
        super().__init__(message)
        self.errors = errors


class InvalidPaginationError(FrappuccinoError):
    message = "page and pageSize must be positive integers"


class InvalidSortColumnError(FrappuccinoError):
    message = "Unsupported sort column"


# ---------------------------------------------------------------------------
# Driver error translation
# ---------------------------------------------------------------------------

def translate_integrity_error(
    exc: sqlite3.IntegrityError,
    *,
    unique: Optional[Type[FrappuccinoError]] = None,
    checks: Optional[dict[str, Type[FrappuccinoError]]] = None,
    foreign_key: Optional[Type[FrappuccinoError]] = None,
) -> Optional[FrappuccinoError]:
    """
    Map a sqlite3 integrity failure to a domain error.

    sqlite reports the violated constraint in the message, e.g.
    ``UNIQUE constraint failed: inventory.name`` or
    ``CHECK constraint failed: inventory_quantity_check``. ``checks`` maps
    named CHECK constraints to the error they stand for. Returns None when
    the failure is not one the caller asked to translate.
    """
    text = str(exc)
    if text.startswith("UNIQUE constraint failed") and unique is not None:
        return unique()
    if text.startswith("CHECK constraint failed") and checks:
        constraint = text.partition(":")[2].strip()
        for name, error_cls in checks.items():
            if constraint == name:
                return error_cls()
    if text.startswith("FOREIGN KEY constraint failed") and foreign_key is not None:
        return foreign_key()
    return None
