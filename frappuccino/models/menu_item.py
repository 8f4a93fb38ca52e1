"""
Domain models representing a menu_items row and its ingredient lines.
"""
import json
from dataclasses import dataclass, field


@dataclass
class MenuItemIngredient:
    ingredient_id: int
    quantity: float

    @classmethod
    def from_row(cls, row) -> "MenuItemIngredient":
        return cls(ingredient_id=row["ingredient_id"], quantity=row["quantity"])


@dataclass
class MenuItem:
    id: int
    name: str
    description: str
    price: float
    categories: list[str] = field(default_factory=list)
    ingredients: list[MenuItemIngredient] = field(default_factory=list)

    @classmethod
    def from_row(cls, row, ingredients=None) -> "MenuItem":
        """Build a MenuItem from a sqlite3.Row object plus its ingredient rows."""
        return cls(
            id=row["id"],
            name=row["name"],
            description=row["description"],
            price=row["price"],
            categories=json.loads(row["categories"]),
            ingredients=[MenuItemIngredient.from_row(r) for r in ingredients or []],
        )
