"""
SQL DDL statements for all application tables.
Tables are created in dependency order so foreign keys resolve correctly.

Domain invariants (unique names, non-negative quantities, the unit enum)
live here as named constraints; repositories translate their violations
into domain errors by constraint name.
"""
import logging
import sqlite3

from frappuccino.models.inventory import Unit

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constraint names
# ---------------------------------------------------------------------------

INVENTORY_QUANTITY_CHECK = "inventory_quantity_check"
INVENTORY_UNIT_CHECK = "inventory_unit_check"
MENU_PRICE_CHECK = "menu_items_price_check"
MENU_INGREDIENT_QUANTITY_CHECK = "menu_item_ingredients_quantity_check"

_UNIT_VALUES = ", ".join(f"'{unit.value}'" for unit in Unit)

# ---------------------------------------------------------------------------
# DDL
# ---------------------------------------------------------------------------

CREATE_INVENTORY_TABLE = f"""
CREATE TABLE IF NOT EXISTS inventory (
    id          INTEGER PRIMARY KEY AUTOINCREMENT,
    name        TEXT    NOT NULL UNIQUE,
    quantity    REAL    NOT NULL DEFAULT 0
                        CONSTRAINT {INVENTORY_QUANTITY_CHECK} CHECK(quantity >= 0),
    unit        TEXT    NOT NULL
                        CONSTRAINT {INVENTORY_UNIT_CHECK} CHECK(unit IN ({_UNIT_VALUES})),
    categories  TEXT    NOT NULL DEFAULT '[]'
);
"""

CREATE_MENU_ITEMS_TABLE = f"""
CREATE TABLE IF NOT EXISTS menu_items (
    id          INTEGER PRIMARY KEY AUTOINCREMENT,
    name        TEXT    NOT NULL UNIQUE,
    description TEXT    NOT NULL,
    price       REAL    NOT NULL
                        CONSTRAINT {MENU_PRICE_CHECK} CHECK(price >= 0),
    categories  TEXT    NOT NULL DEFAULT '[]'
);
"""

CREATE_MENU_ITEM_INGREDIENTS_TABLE = f"""
CREATE TABLE IF NOT EXISTS menu_item_ingredients (
    menu_item_id  INTEGER NOT NULL REFERENCES menu_items(id) ON DELETE CASCADE,
    ingredient_id INTEGER NOT NULL REFERENCES inventory(id) ON DELETE RESTRICT,
    quantity      REAL    NOT NULL
                          CONSTRAINT {MENU_INGREDIENT_QUANTITY_CHECK} CHECK(quantity > 0),
    PRIMARY KEY (menu_item_id, ingredient_id)
);
"""

ALL_TABLES = [
    CREATE_INVENTORY_TABLE,
    CREATE_MENU_ITEMS_TABLE,
    CREATE_MENU_ITEM_INGREDIENTS_TABLE,
]


def create_tables(conn: sqlite3.Connection) -> None:
    """Create all tables (IF NOT EXISTS – safe on every restart)."""
    logger.info("Creating %s tables", len(ALL_TABLES))
    cursor = conn.cursor()
    for ddl in ALL_TABLES:
        cursor.execute(ddl)
    conn.commit()
