"""
Repository layer for inventory persistence.
All SQL for the `inventory` table lives here.

Design rules enforced at DB level:
  - name is UNIQUE               →  DuplicateInventoryError
  - quantity >= 0                →  NegativeQuantityError
  - unit in the Unit enum        →  InvalidEnumTypeInventoryError
  - referenced by a menu recipe  →  InventoryInUseError on delete
"""
import json
import logging
import sqlite3
from typing import Optional

from frappuccino.core.errors import (
    DuplicateInventoryError,
    InvalidEnumTypeInventoryError,
    InvalidSortColumnError,
    InventoryInUseError,
    NegativeQuantityError,
    NoRecordError,
    translate_integrity_error,
)
from frappuccino.core.logging_config import log_db_timing
from frappuccino.core.pagination import PageInfo
from frappuccino.db.schema import INVENTORY_QUANTITY_CHECK, INVENTORY_UNIT_CHECK
from frappuccino.models.inventory import Inventory, InventoryLeftOverItem

logger = logging.getLogger(__name__)

# Columns the leftovers listing may be ordered by. The column name is
# interpolated into SQL, so nothing outside this set reaches the query.
LEFTOVER_SORT_COLUMNS = ("quantity", "name")

_CONSTRAINT_ERRORS = {
    INVENTORY_QUANTITY_CHECK: NegativeQuantityError,
    INVENTORY_UNIT_CHECK: InvalidEnumTypeInventoryError,
}


def _translate(exc: sqlite3.IntegrityError):
    return translate_integrity_error(
        exc,
        unique=DuplicateInventoryError,
        checks=_CONSTRAINT_ERRORS,
    )


class InventoryRepository:
    """Data access layer for inventory records."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        logger.trace("Initializing InventoryRepository")
        self._conn = conn

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    @log_db_timing
    def retrieve_by_id(self, inventory_id: int) -> Inventory:
        """Return an inventory item by id or raise NoRecordError."""
        logger.trace("Fetching inventory id=%s", inventory_id)
        row = self._conn.execute(
            "SELECT id, name, quantity, unit, categories FROM inventory WHERE id = ?",
            (inventory_id,),
        ).fetchone()
        if row is None:
            raise NoRecordError(f"Inventory item with id={inventory_id} not found")
        return Inventory.from_row(row)

    @log_db_timing
    def retrieve_all(self) -> list[Inventory]:
        """Return every inventory item ordered by id."""
        logger.trace("Listing inventory")
        rows = self._conn.execute(
            "SELECT id, name, quantity, unit, categories FROM inventory ORDER BY id"
        ).fetchall()
        return [Inventory.from_row(r) for r in rows]

    @log_db_timing
    def count(self) -> int:
        """Return the number of inventory rows."""
        return self._conn.execute("SELECT COUNT(*) FROM inventory").fetchone()[0]

    @log_db_timing
    def get_leftovers(
        self,
        sort_column: str,
        page: int,
        page_size: int,
    ) -> tuple[list[InventoryLeftOverItem], PageInfo]:
        """
        Return one page of (name, quantity) pairs ordered by ``sort_column``
        descending, plus the page bookkeeping (offset, total pages).
        """
        if sort_column not in LEFTOVER_SORT_COLUMNS:
            raise InvalidSortColumnError(
                f"Cannot sort by '{sort_column}'; "
                f"expected one of: {', '.join(LEFTOVER_SORT_COLUMNS)}"
            )

        info = PageInfo(page=page, page_size=page_size, total_items=self.count())
        if page > info.total_pages:
            logger.trace("Page %s is past the last page %s", page, info.total_pages)
            return [], info
        logger.trace(
            "Fetching leftovers sort=%s page=%s size=%s offset=%s",
            sort_column,
            page,
            page_size,
            info.offset,
        )
        rows = self._conn.execute(
            f"SELECT name, quantity FROM inventory "
            f"ORDER BY {sort_column} DESC, id ASC LIMIT ? OFFSET ?",
            (page_size, info.offset),
        ).fetchall()
        return [InventoryLeftOverItem.from_row(r) for r in rows], info

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    @log_db_timing
    def insert(
        self,
        name: str,
        unit: str,
        quantity: float,
        categories: Optional[list[str]] = None,
    ) -> Inventory:
        """Insert an inventory row and return it."""
        logger.info("Creating inventory item name=%s", name)
        try:
            cursor = self._conn.execute(
                "INSERT INTO inventory (name, quantity, unit, categories) VALUES (?, ?, ?, ?)",
                (name, quantity, unit, json.dumps(categories or [])),
            )
        except sqlite3.IntegrityError as exc:
            error = _translate(exc)
            if error is None:
                raise
            raise error from exc
        return self.retrieve_by_id(cursor.lastrowid)

    @log_db_timing
    def update(
        self,
        inventory_id: int,
        name: str,
        unit: str,
        quantity: float,
        categories: Optional[list[str]] = None,
    ) -> Inventory:
        """Overwrite every column of an inventory row and return it."""
        logger.info("Updating inventory id=%s", inventory_id)
        try:
            cursor = self._conn.execute(
                "UPDATE inventory SET name = ?, unit = ?, quantity = ?, categories = ? WHERE id = ?",
                (name, unit, quantity, json.dumps(categories or []), inventory_id),
            )
        except sqlite3.IntegrityError as exc:
            error = _translate(exc)
            if error is None:
                raise
            raise error from exc
        if cursor.rowcount == 0:
            raise NoRecordError(f"Inventory item with id={inventory_id} not found")
        return self.retrieve_by_id(inventory_id)

    @log_db_timing
    def delete(self, inventory_id: int) -> None:
        """Delete an inventory row or raise NoRecordError."""
        logger.info("Deleting inventory id=%s", inventory_id)
        try:
            cursor = self._conn.execute(
                "DELETE FROM inventory WHERE id = ?", (inventory_id,)
            )
        except sqlite3.IntegrityError as exc:
            error = translate_integrity_error(exc, foreign_key=InventoryInUseError)
            if error is None:
                raise
            raise error from exc
        logger.info("Inventory delete affected %s rows", cursor.rowcount)
        if cursor.rowcount == 0:
            raise NoRecordError(f"Inventory item with id={inventory_id} not found")
