"""
Pydantic schemas for MenuItem request/response validation.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------

class MenuItemIngredientPayload(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    ingredient_id: Optional[int] = None
    quantity: Optional[float] = None


class MenuItemPayload(BaseModel):
    """Body of POST /menu and PUT /menu/{id}; presence checked by MenuItemValidator."""

    model_config = ConfigDict(allow_inf_nan=False)

    name: Optional[str] = Field(None, max_length=200)
    description: Optional[str] = Field(None, max_length=2000)
    price: Optional[float] = None
    categories: list[str] = Field(default_factory=list)
    ingredients: list[MenuItemIngredientPayload] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------

class MenuItemIngredientResponse(BaseModel):
    ingredient_id: int
    quantity: float

    model_config = {"from_attributes": True}


class MenuItemResponse(BaseModel):
    id: int
    name: str
    description: str
    price: float
    categories: list[str]
    ingredients: list[MenuItemIngredientResponse]

    model_config = {"from_attributes": True}
