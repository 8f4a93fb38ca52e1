"""
Demo data seeder.

Fills an empty database with a few ingredients and drinks so the API has
something to show. Runs only when ``settings.SEED_DEMO_DATA`` is enabled and
is a no-op once the inventory table holds any row.
"""
import logging
import sqlite3

from frappuccino.core.config import settings
from frappuccino.db.database import get_db
from frappuccino.models.menu_item import MenuItemIngredient
from frappuccino.repositories.inventory_repository import InventoryRepository
from frappuccino.repositories.menu_repository import MenuRepository

logger = logging.getLogger(__name__)

DEMO_INVENTORY = [
    # (name, unit, quantity, categories)
    ("Espresso Beans", "g", 5000, ["coffee"]),
    ("Whole Milk", "ml", 20000, ["dairy"]),
    ("Oat Milk", "ml", 8000, ["dairy-free"]),
    ("Caramel Syrup", "ml", 1500, ["syrup", "sweetener"]),
    ("Vanilla Syrup", "ml", 1200, ["syrup", "sweetener"]),
    ("Whipped Cream", "g", 2000, ["dairy", "topping"]),
    ("Paper Cups", "pcs", 500, ["packaging"]),
]

DEMO_MENU = [
    # (name, description, price, categories, [(ingredient name, quantity)])
    (
        "Espresso",
        "A single shot of our house blend.",
        2.50,
        ["coffee", "hot"],
        [("Espresso Beans", 18), ("Paper Cups", 1)],
    ),
    (
        "Caffe Latte",
        "Espresso with steamed milk.",
        3.75,
        ["coffee", "hot"],
        [("Espresso Beans", 18), ("Whole Milk", 220), ("Paper Cups", 1)],
    ),
    (
        "Caramel Frappuccino",
        "Blended iced coffee with caramel and whipped cream.",
        4.95,
        ["coffee", "cold"],
        [
            ("Espresso Beans", 18),
            ("Whole Milk", 180),
            ("Caramel Syrup", 30),
            ("Whipped Cream", 25),
            ("Paper Cups", 1),
        ],
    ),
]


def seed_demo_data(conn: sqlite3.Connection) -> bool:
    """Insert the demo rows on ``conn``; returns False if data already exists."""
    inventory_repo = InventoryRepository(conn)
    if inventory_repo.count() > 0:
        logger.info("Inventory already populated, skipping demo seed")
        return False

    ids_by_name = {}
    for name, unit, quantity, categories in DEMO_INVENTORY:
        item = inventory_repo.insert(name, unit, quantity, categories)
        ids_by_name[name] = item.id

    menu_repo = MenuRepository(conn)
    for name, description, price, categories, recipe in DEMO_MENU:
        menu_repo.insert_menu_item(
            name=name,
            description=description,
            price=price,
            categories=categories,
            ingredients=[
                MenuItemIngredient(ingredient_id=ids_by_name[ingredient], quantity=qty)
                for ingredient, qty in recipe
            ],
        )
    logger.info(
        "Seeded %s inventory items and %s menu items",
        len(DEMO_INVENTORY),
        len(DEMO_MENU),
    )
    return True


def seed_if_enabled() -> None:
    """Seed the configured database when SEED_DEMO_DATA is on."""
    if not settings.SEED_DEMO_DATA:
        logger.trace("Demo seeding disabled")
        return
    with get_db() as conn:
        seed_demo_data(conn)
