"""
Menu management endpoints:
  POST   /menu          – Add an item to the menu
  GET    /menu          – List menu items
  GET    /menu/{id}     – Get a menu item
  PUT    /menu/{id}     – Replace a menu item and its ingredients
  DELETE /menu/{id}     – Remove an item from the menu
"""
from fastapi import APIRouter, Depends, status
import logging

from frappuccino.core.dependencies import db_dependency
from frappuccino.schemas.menu import MenuItemPayload, MenuItemResponse
from frappuccino.services.menu_service import MenuService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/menu", tags=["Menu"])


@router.post(
    "",
    response_model=MenuItemResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add an item to the menu",
)
def add_menu_item(data: MenuItemPayload, conn=Depends(db_dependency)):
    """
    Add a menu item with its ingredient list.

    - Missing fields → **400** with an `errors` map keyed by field.
    - Unknown `ingredient_id` → **400**; duplicate `name` → **409**.
    """
    logger.info("Adding menu item %s", data.name)
    return MenuService(conn).insert(data)


@router.get("", response_model=list[MenuItemResponse], summary="List menu items")
def list_menu_items(conn=Depends(db_dependency)):
    logger.info("Listing menu items")
    return MenuService(conn).retrieve_all()


@router.get("/{menu_item_id}", response_model=MenuItemResponse, summary="Get a menu item")
def get_menu_item(menu_item_id: str, conn=Depends(db_dependency)):
    logger.info("Fetching menu item id=%s", menu_item_id)
    return MenuService(conn).retrieve_by_id(menu_item_id)


@router.put("/{menu_item_id}", response_model=MenuItemResponse, summary="Replace a menu item")
def update_menu_item(menu_item_id: str, data: MenuItemPayload, conn=Depends(db_dependency)):
    logger.info("Updating menu item id=%s", menu_item_id)
    return MenuService(conn).update(menu_item_id, data)


@router.delete(
    "/{menu_item_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Remove an item from the menu",
)
def remove_menu_item(menu_item_id: str, conn=Depends(db_dependency)):
    logger.info("Removing menu item id=%s", menu_item_id)
    MenuService(conn).delete(menu_item_id)
