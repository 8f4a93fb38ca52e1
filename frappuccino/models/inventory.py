"""
Domain models representing rows of the `inventory` table.
"""
import json
from dataclasses import dataclass, field
from enum import Enum


class Unit(str, Enum):
    GRAM = "g"
    KILOGRAM = "kg"
    MILLILITRE = "ml"
    LITRE = "l"
    SHOT = "shots"
    PIECE = "pcs"


@dataclass
class Inventory:
    id: int
    name: str
    quantity: float
    unit: str
    categories: list[str] = field(default_factory=list)

    @classmethod
    def from_row(cls, row) -> "Inventory":
        """Build an Inventory item from a sqlite3.Row object."""
        return cls(
            id=row["id"],
            name=row["name"],
            quantity=row["quantity"],
            unit=row["unit"],
            categories=json.loads(row["categories"]),
        )


@dataclass
class InventoryLeftOverItem:
    """Name/quantity pair reported by the leftovers listing."""

    name: str
    quantity: float

    @classmethod
    def from_row(cls, row) -> "InventoryLeftOverItem":
        return cls(name=row["name"], quantity=row["quantity"])
