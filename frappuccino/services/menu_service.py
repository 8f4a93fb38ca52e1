"""
Menu management service.

Business rules:
  - Identifiers arrive as strings and must parse as integers.
  - A menu item needs a name, a description, a non-negative price and at
    least one ingredient; every problem is reported in one field map.
  - Ingredients must reference existing inventory items (checked by the
    database foreign key).
"""
import logging
import sqlite3

from frappuccino.core.errors import MissingFieldsError
from frappuccino.models.menu_item import MenuItem, MenuItemIngredient
from frappuccino.models.validators import MenuItemValidator
from frappuccino.repositories.menu_repository import MenuRepository
from frappuccino.schemas.menu import MenuItemPayload
from frappuccino.services.parsing import parse_id

logger = logging.getLogger(__name__)


class MenuService:
    """Business logic for menu item operations."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        logger.trace("Initializing MenuService")
        self._repo = MenuRepository(conn)

    def _validate(self, data: MenuItemPayload) -> None:
        errors = MenuItemValidator(data).validate()
        if errors:
            logger.warning("Menu item payload rejected: %s", errors)
            raise MissingFieldsError(errors)

    @staticmethod
    def _ingredients(data: MenuItemPayload) -> list[MenuItemIngredient]:
        return [
            MenuItemIngredient(ingredient_id=i.ingredient_id, quantity=i.quantity)
            for i in data.ingredients
        ]

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def retrieve_all(self) -> list[MenuItem]:
        """Return every menu item with its ingredients."""
        logger.info("Listing menu items")
        return self._repo.retrieve_all()

    def retrieve_by_id(self, menu_item_id: str) -> MenuItem:
        """Return one menu item; raises InvalidIDError or NoRecordError."""
        logger.info("Fetching menu item id=%s", menu_item_id)
        return self._repo.retrieve_by_id(parse_id(menu_item_id))

    # ------------------------------------------------------------------
    # Create
    # ------------------------------------------------------------------

    def insert(self, data: MenuItemPayload) -> MenuItem:
        """Validate the payload and add the item to the menu."""
        logger.info("Adding menu item %s", data.name)
        self._validate(data)
        menu_item = self._repo.insert_menu_item(
            name=data.name.strip(),
            description=data.description,
            price=data.price,
            categories=data.categories,
            ingredients=self._ingredients(data),
        )
        logger.info("Menu item created id=%s", menu_item.id)
        return menu_item

    # ------------------------------------------------------------------
    # Update
    # ------------------------------------------------------------------

    def update(self, menu_item_id: str, data: MenuItemPayload) -> MenuItem:
        """Replace a menu item, including its ingredient list."""
        logger.info("Updating menu item id=%s", menu_item_id)
        item_id = parse_id(menu_item_id)
        self._validate(data)
        menu_item = self._repo.update_menu_item(
            item_id,
            name=data.name.strip(),
            description=data.description,
            price=data.price,
            categories=data.categories,
            ingredients=self._ingredients(data),
        )
        logger.info("Menu item updated id=%s", item_id)
        return menu_item

    # ------------------------------------------------------------------
    # Delete
    # ------------------------------------------------------------------

    def delete(self, menu_item_id: str) -> None:
        """Remove an item from the menu; raises NoRecordError if missing."""
        logger.info("Removing menu item id=%s", menu_item_id)
        item_id = parse_id(menu_item_id)
        self._repo.delete(item_id)
        logger.info("Menu item removed id=%s", item_id)
