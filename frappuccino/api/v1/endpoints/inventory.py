"""
Inventory endpoints:
  POST   /inventory                – Create an inventory item
  GET    /inventory                – List inventory items
  GET    /inventory/getLeftOvers   – Paginated remaining stock, sorted descending
  GET    /inventory/{id}           – Get an inventory item
  PUT    /inventory/{id}           – Replace an inventory item
  DELETE /inventory/{id}           – Delete an inventory item
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from frappuccino.core.dependencies import db_dependency
from frappuccino.schemas.inventory import (
    InventoryPayload,
    InventoryResponse,
    LeftOversPage,
)
from frappuccino.services.inventory_service import InventoryService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/inventory", tags=["Inventory"])


@router.post(
    "",
    response_model=InventoryResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create an inventory item",
)
def create_inventory(data: InventoryPayload, conn=Depends(db_dependency)):
    """
    Create a stocked ingredient.

    - Duplicate `name` → **409 Conflict**.
    - Negative `quantity` or unknown `unit` → **400 Bad Request**.
    """
    logger.info("Creating inventory item %s", data.name)
    return InventoryService(conn).insert(data)


@router.get("", response_model=list[InventoryResponse], summary="List inventory items")
def list_inventory(conn=Depends(db_dependency)):
    logger.info("Listing inventory")
    return InventoryService(conn).retrieve_all()


@router.get(
    "/getLeftOvers",
    response_model=LeftOversPage,
    summary="Paginated leftovers",
)
def get_leftovers(
    sort_by: Optional[str] = Query(None, alias="sortBy"),
    page: Optional[str] = Query(None),
    page_size: Optional[str] = Query(None, alias="pageSize"),
    conn=Depends(db_dependency),
):
    """
    Return remaining quantities one page at a time, sorted descending by
    `sortBy` (`quantity` or `name`).
    """
    logger.info("Listing leftovers sortBy=%s page=%s pageSize=%s", sort_by, page, page_size)
    return InventoryService(conn).get_leftovers(sort_by, page, page_size)


@router.get("/{inventory_id}", response_model=InventoryResponse, summary="Get an inventory item")
def get_inventory(inventory_id: str, conn=Depends(db_dependency)):
    logger.info("Fetching inventory id=%s", inventory_id)
    return InventoryService(conn).retrieve_by_id(inventory_id)


@router.put("/{inventory_id}", response_model=InventoryResponse, summary="Replace an inventory item")
def update_inventory(inventory_id: str, data: InventoryPayload, conn=Depends(db_dependency)):
    logger.info("Updating inventory id=%s", inventory_id)
    return InventoryService(conn).update(inventory_id, data)


@router.delete(
    "/{inventory_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete an inventory item",
)
def delete_inventory(inventory_id: str, conn=Depends(db_dependency)):
    """Delete an inventory item; **409** if a menu item still uses it."""
    logger.info("Deleting inventory id=%s", inventory_id)
    InventoryService(conn).delete(inventory_id)
