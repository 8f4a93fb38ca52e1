import pytest

from frappuccino.core.errors import (
    DuplicateIngredientError,
    DuplicateMenuItemError,
    NegativePriceError,
    NoRecordError,
    UnknownIngredientError,
)
from frappuccino.models.menu_item import MenuItemIngredient


@pytest.fixture
def ingredients(inventory_repo):
    beans = inventory_repo.insert("Espresso Beans", "g", 500)
    milk = inventory_repo.insert("Milk", "ml", 2000)
    return beans.id, milk.id


def test_insert_menu_item_with_ingredients(menu_repo, ingredients):
    beans, milk = ingredients
    item = menu_repo.insert_menu_item(
        name="Latte",
        description="Espresso with steamed milk",
        price=3.75,
        categories=["coffee"],
        ingredients=[MenuItemIngredient(beans, 18), MenuItemIngredient(milk, 220)],
    )
    assert item.id > 0
    assert item.price == 3.75
    assert item.categories == ["coffee"]
    assert item.ingredients == [MenuItemIngredient(beans, 18), MenuItemIngredient(milk, 220)]
    assert menu_repo.retrieve_by_id(item.id) == item
    assert menu_repo.retrieve_all() == [item]


def test_insert_duplicate_name(menu_repo, ingredients):
    beans, _ = ingredients
    menu_repo.insert_menu_item("Espresso", "Shot", 2.5, [], [MenuItemIngredient(beans, 18)])
    with pytest.raises(DuplicateMenuItemError):
        menu_repo.insert_menu_item("Espresso", "Again", 3, [], [MenuItemIngredient(beans, 18)])


def test_insert_negative_price(menu_repo, ingredients):
    beans, _ = ingredients
    with pytest.raises(NegativePriceError):
        menu_repo.insert_menu_item("Espresso", "Shot", -1, [], [MenuItemIngredient(beans, 18)])


def test_insert_unknown_ingredient(menu_repo):
    with pytest.raises(UnknownIngredientError):
        menu_repo.insert_menu_item("Espresso", "Shot", 2.5, [], [MenuItemIngredient(404, 18)])


def test_retrieve_missing_id(menu_repo):
    with pytest.raises(NoRecordError):
        menu_repo.retrieve_by_id(1)


def test_update_replaces_ingredients(menu_repo, ingredients):
    beans, milk = ingredients
    item = menu_repo.insert_menu_item(
        "Latte", "Milky", 3.5, [], [MenuItemIngredient(beans, 18), MenuItemIngredient(milk, 200)]
    )
    updated = menu_repo.update_menu_item(
        item.id, "Flat White", "Less milk", 3.9, ["coffee"], [MenuItemIngredient(milk, 120)]
    )
    assert updated.name == "Flat White"
    assert updated.description == "Less milk"
    assert updated.ingredients == [MenuItemIngredient(milk, 120)]


def test_update_missing_id(menu_repo, ingredients):
    beans, _ = ingredients
    with pytest.raises(NoRecordError):
        menu_repo.update_menu_item(7, "Mocha", "Chocolate", 4, [], [MenuItemIngredient(beans, 18)])


def test_delete_cascades_ingredients(conn, menu_repo, ingredients):
    beans, _ = ingredients
    item = menu_repo.insert_menu_item("Espresso", "Shot", 2.5, [], [MenuItemIngredient(beans, 18)])
    menu_repo.delete(item.id)
    remaining = conn.execute("SELECT COUNT(*) FROM menu_item_ingredients").fetchone()[0]
    assert remaining == 0
    with pytest.raises(NoRecordError):
        menu_repo.delete(item.id)


def test_insert_repeated_ingredient_line(menu_repo, ingredients):
    beans, _ = ingredients
    with pytest.raises(DuplicateIngredientError):
        menu_repo.insert_menu_item(
            "Doppio",
            "Two shots",
            3,
            [],
            [MenuItemIngredient(beans, 18), MenuItemIngredient(beans, 18)],
        )
