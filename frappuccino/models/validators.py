"""
Required-field validators for inventory and menu payloads.

Each validator wraps a payload and returns ``None`` from ``validate()`` when
it passes, or a mapping of field name to message describing every problem.
Range and enum rules that the schema already enforces (negative quantity,
unknown unit) are left to the database.
"""
from typing import Any, Optional


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


class InventoryValidator:
    """Checks that an inventory payload carries name, unit and quantity."""

    def __init__(self, payload: Any) -> None:
        self._payload = payload

    def validate(self) -> Optional[dict[str, str]]:
        errors: dict[str, str] = {}
        if _is_blank(self._payload.name):
            errors["name"] = "name is required"
        if _is_blank(self._payload.unit):
            errors["unit"] = "unit is required"
        if self._payload.quantity is None:
            errors["quantity"] = "quantity is required"
        return errors or None


class MenuItemValidator:
    """Checks the required fields of a menu item payload and its ingredients."""

    def __init__(self, payload: Any) -> None:
        self._payload = payload

    def validate(self) -> Optional[dict[str, str]]:
        errors: dict[str, str] = {}
        menu = self._payload

        if _is_blank(menu.name):
            errors["name"] = "name is required"
        if _is_blank(menu.description):
            errors["description"] = "description is required"
        if menu.price is None:
            errors["price"] = "price is required"
        elif menu.price < 0:
            errors["price"] = "price cannot be negative"

        if not menu.ingredients:
            errors["ingredients"] = "at least one ingredient is required"
        else:
            seen: set[int] = set()
            for index, ingredient in enumerate(menu.ingredients):
                prefix = f"ingredients[{index}]"
                if ingredient.ingredient_id is None or ingredient.ingredient_id <= 0:
                    errors[f"{prefix}.ingredient_id"] = "ingredient_id must be a positive integer"
                elif ingredient.ingredient_id in seen:
                    errors[f"{prefix}.ingredient_id"] = "ingredient is listed more than once"
                else:
                    seen.add(ingredient.ingredient_id)
                if ingredient.quantity is None or ingredient.quantity <= 0:
                    errors[f"{prefix}.quantity"] = "quantity must be greater than zero"

        return errors or None
