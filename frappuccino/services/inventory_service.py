"""
Inventory management service.

Business rules:
  - Identifiers arrive as strings and must parse as integers.
  - name, unit and quantity are required; the database enforces the rest
    (unique names, non-negative quantities, the unit enum).
  - Leftovers are listed page by page, sorted by quantity or name.
"""
import logging
import sqlite3
from typing import Optional

from frappuccino.core.config import settings
from frappuccino.core.errors import MissingFieldsError
from frappuccino.models.inventory import Inventory
from frappuccino.models.validators import InventoryValidator
from frappuccino.repositories.inventory_repository import InventoryRepository
from frappuccino.schemas.inventory import InventoryPayload
from frappuccino.services.parsing import parse_id, parse_positive_int

logger = logging.getLogger(__name__)

DEFAULT_SORT_COLUMN = "quantity"


class InventoryService:
    """Business logic for inventory operations."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        logger.trace("Initializing InventoryService")
        self._repo = InventoryRepository(conn)

    def _validate(self, data: InventoryPayload) -> None:
        errors = InventoryValidator(data).validate()
        if errors:
            logger.warning("Inventory payload rejected: %s", errors)
            raise MissingFieldsError(errors)

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def retrieve_all(self) -> list[Inventory]:
        logger.info("Listing inventory")
        return self._repo.retrieve_all()

    def retrieve_by_id(self, inventory_id: str) -> Inventory:
        logger.info("Fetching inventory id=%s", inventory_id)
        return self._repo.retrieve_by_id(parse_id(inventory_id))

    def get_leftovers(
        self,
        sort_by: Optional[str] = None,
        page: Optional[str] = None,
        page_size: Optional[str] = None,
    ) -> dict:
        """
        Return one page of remaining stock.

        ``page`` and ``page_size`` are raw query-string values; the page size
        is capped at ``settings.MAX_PAGE_SIZE``.
        """
        page_number = parse_positive_int(page, "page", 1)
        size = min(
            parse_positive_int(page_size, "pageSize", settings.DEFAULT_PAGE_SIZE),
            settings.MAX_PAGE_SIZE,
        )
        sort_column = sort_by or DEFAULT_SORT_COLUMN
        logger.info(
            "Listing leftovers sort=%s page=%s size=%s", sort_column, page_number, size
        )

        items, info = self._repo.get_leftovers(sort_column, page_number, size)
        return {
            "current_page": info.page,
            "has_next_page": info.has_next_page,
            "page_size": info.page_size,
            "total_pages": info.total_pages,
            "data": items,
        }

    # ------------------------------------------------------------------
    # Create
    # ------------------------------------------------------------------

    def insert(self, data: InventoryPayload) -> Inventory:
        logger.info("Creating inventory item %s", data.name)
        self._validate(data)
        item = self._repo.insert(
            name=data.name.strip(),
            unit=data.unit,
            quantity=data.quantity,
            categories=data.categories,
        )
        logger.info("Inventory item created id=%s", item.id)
        return item

    # ------------------------------------------------------------------
    # Update
    # ------------------------------------------------------------------

    def update(self, inventory_id: str, data: InventoryPayload) -> Inventory:
        logger.info("Updating inventory id=%s", inventory_id)
        item_id = parse_id(inventory_id)
        self._validate(data)
        item = self._repo.update(
            item_id,
            name=data.name.strip(),
            unit=data.unit,
            quantity=data.quantity,
            categories=data.categories,
        )
        logger.info("Inventory item updated id=%s", item_id)
        return item

    # ------------------------------------------------------------------
    # Delete
    # ------------------------------------------------------------------

    def delete(self, inventory_id: str) -> None:
        logger.info("Deleting inventory id=%s", inventory_id)
        item_id = parse_id(inventory_id)
        self._repo.delete(item_id)
        logger.info("Inventory item deleted id=%s", item_id)
