"""
Repository layer for MenuItem persistence.
All SQL for the `menu_items` and `menu_item_ingredients` tables lives here.

A menu item and its ingredient lines are written with consecutive statements
on the same connection; the request-scoped transaction in ``db.database.get_db``
commits or rolls them back together.
"""
import json
import logging
import sqlite3
from typing import Optional

from frappuccino.core.errors import (
    DuplicateIngredientError,
    DuplicateMenuItemError,
    NegativePriceError,
    NegativeQuantityError,
    NoRecordError,
    UnknownIngredientError,
    translate_integrity_error,
)
from frappuccino.core.logging_config import log_db_timing
from frappuccino.db.schema import MENU_INGREDIENT_QUANTITY_CHECK, MENU_PRICE_CHECK
from frappuccino.models.menu_item import MenuItem, MenuItemIngredient

logger = logging.getLogger(__name__)


class MenuRepository:
    """Data access layer for menu item records."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        logger.trace("Initializing MenuRepository")
        self._conn = conn

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def _ingredient_rows(self, menu_item_id: int) -> list[sqlite3.Row]:
        return self._conn.execute(
            """
            SELECT ingredient_id, quantity
              FROM menu_item_ingredients
             WHERE menu_item_id = ?
             ORDER BY ingredient_id
            """,
            (menu_item_id,),
        ).fetchall()

    @log_db_timing
    def retrieve_by_id(self, menu_item_id: int) -> MenuItem:
        """Return a menu item with its ingredients or raise NoRecordError."""
        logger.trace("Fetching menu item id=%s", menu_item_id)
        row = self._conn.execute(
            "SELECT id, name, description, price, categories FROM menu_items WHERE id = ?",
            (menu_item_id,),
        ).fetchone()
        if row is None:
            raise NoRecordError(f"Menu item with id={menu_item_id} not found")
        return MenuItem.from_row(row, self._ingredient_rows(menu_item_id))

    @log_db_timing
    def retrieve_all(self) -> list[MenuItem]:
        """Return all menu items ordered by id."""
        logger.trace("Listing menu items")
        rows = self._conn.execute(
            "SELECT id, name, description, price, categories FROM menu_items ORDER BY id"
        ).fetchall()
        return [MenuItem.from_row(r, self._ingredient_rows(r["id"])) for r in rows]

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    def _insert_ingredients(
        self, menu_item_id: int, ingredients: list[MenuItemIngredient]
    ) -> None:
        try:
            self._conn.executemany(
                """
                INSERT INTO menu_item_ingredients (menu_item_id, ingredient_id, quantity)
                VALUES (?, ?, ?)
                """,
                [(menu_item_id, i.ingredient_id, i.quantity) for i in ingredients],
            )
        except sqlite3.IntegrityError as exc:
            error = translate_integrity_error(
                exc,
                unique=DuplicateIngredientError,
                checks={MENU_INGREDIENT_QUANTITY_CHECK: NegativeQuantityError},
                foreign_key=UnknownIngredientError,
            )
            if error is None:
                raise
            raise error from exc

    @log_db_timing
    def insert_menu_item(
        self,
        name: str,
        description: str,
        price: float,
        categories: Optional[list[str]],
        ingredients: list[MenuItemIngredient],
    ) -> MenuItem:
        """Insert a menu item plus its ingredient lines and return it."""
        logger.info("Creating menu item name=%s", name)
        try:
            cursor = self._conn.execute(
                """
                INSERT INTO menu_items (name, description, price, categories)
                VALUES (?, ?, ?, ?)
                """,
                (name, description, price, json.dumps(categories or [])),
            )
        except sqlite3.IntegrityError as exc:
            error = translate_integrity_error(
                exc,
                unique=DuplicateMenuItemError,
                checks={MENU_PRICE_CHECK: NegativePriceError},
            )
            if error is None:
                raise
            raise error from exc
        self._insert_ingredients(cursor.lastrowid, ingredients)
        return self.retrieve_by_id(cursor.lastrowid)

    @log_db_timing
    def update_menu_item(
        self,
        menu_item_id: int,
        name: str,
        description: str,
        price: float,
        categories: Optional[list[str]],
        ingredients: list[MenuItemIngredient],
    ) -> MenuItem:
        """Overwrite a menu item and replace its ingredient lines."""
        logger.info("Updating menu item id=%s", menu_item_id)
        try:
            cursor = self._conn.execute(
                """
                UPDATE menu_items
                   SET name = ?, description = ?, price = ?, categories = ?
                 WHERE id = ?
                """,
                (name, description, price, json.dumps(categories or []), menu_item_id),
            )
        except sqlite3.IntegrityError as exc:
            error = translate_integrity_error(
                exc,
                unique=DuplicateMenuItemError,
                checks={MENU_PRICE_CHECK: NegativePriceError},
            )
            if error is None:
                raise
            raise error from exc
        if cursor.rowcount == 0:
            raise NoRecordError(f"Menu item with id={menu_item_id} not found")

        self._conn.execute(
            "DELETE FROM menu_item_ingredients WHERE menu_item_id = ?", (menu_item_id,)
        )
        self._insert_ingredients(menu_item_id, ingredients)
        return self.retrieve_by_id(menu_item_id)

    @log_db_timing
    def delete(self, menu_item_id: int) -> None:
        """Delete a menu item (ingredient lines cascade) or raise NoRecordError."""
        logger.info("Deleting menu item id=%s", menu_item_id)
        cursor = self._conn.execute(
            "DELETE FROM menu_items WHERE id = ?", (menu_item_id,)
        )
        logger.info("Menu item delete affected %s rows", cursor.rowcount)
        if cursor.rowcount == 0:
            raise NoRecordError(f"Menu item with id={menu_item_id} not found")
