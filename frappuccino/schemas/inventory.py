"""
Pydantic schemas for inventory request/response validation.

Request fields are optional at the schema level: presence is checked by
``InventoryValidator`` so the client gets one field-to-message map, and the
unit enum plus the non-negative quantity rule are enforced by the database.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------

class InventoryPayload(BaseModel):
    """Body of POST /inventory and PUT /inventory/{id}."""

    model_config = ConfigDict(allow_inf_nan=False)

    name: Optional[str] = Field(None, max_length=200)
    quantity: Optional[float] = None
    unit: Optional[str] = Field(None, max_length=20)
    categories: list[str] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------

class InventoryResponse(BaseModel):
    id: int
    name: str
    quantity: float
    unit: str
    categories: list[str]

    model_config = {"from_attributes": True}


class LeftOverItem(BaseModel):
    name: str
    quantity: float

    model_config = {"from_attributes": True}


class LeftOversPage(BaseModel):
    """One page of the leftovers listing, serialised with camelCase keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    current_page: int
    has_next_page: bool
    page_size: int
    total_pages: int
    data: list[LeftOverItem]
