# src/inventory_tracker/domain/models.py
from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field, computed_field, field_validator

_CENT = Decimal("0.01")


def format_amount(value: float) -> str:
    """Zwei Nachkommastellen, kaufmännisch gerundet (0.125 -> "0.13")."""
    return str(Decimal(repr(value)).quantize(_CENT, rounding=ROUND_HALF_UP))


# ---------------------------------------------------------------------------
# Aggregate: Product
# Kernkonzept: unveränderlicher Snapshot eines Lagerartikels.
# ---------------------------------------------------------------------------


class ProductDraft(BaseModel):
    """
    Produkt ohne ID, wie es an den Store übergeben wird.
    Der Store validiert nicht; das passiert vorher in validate_product_input().
    """

    name: str
    description: str = ""
    category: str = ""
    quantity: int
    price: float

    model_config = {"frozen": True}


class Product(BaseModel):
    id: int = Field(description="Vom Store vergebene, nie wiederverwendete ID")
    name: str
    description: str = ""
    category: str = ""
    quantity: int
    price: float

    @computed_field  # type: ignore[prop-decorator]
    @property
    def stock_value(self) -> float:
        """Lagerwert dieses Artikels (Preis x Menge)."""
        return self.price * self.quantity

    @classmethod
    def from_draft(cls, product_id: int, draft: ProductDraft) -> Product:
        return cls(id=product_id, **draft.model_dump())

    model_config = {"frozen": True}


# ---------------------------------------------------------------------------
# Events
# ---------------------------------------------------------------------------


class EventKind(StrEnum):
    CREATED = "created"
    UPDATED = "updated"
    DELETED = "deleted"


class InventoryEvent(BaseModel):
    kind: EventKind
    product: Product

    model_config = {"frozen": True}


# ---------------------------------------------------------------------------
# Statistics
# ---------------------------------------------------------------------------


class InventoryStats(BaseModel):
    total_count: int = 0
    total_quantity: int = 0
    total_value: float = 0.0

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_value_display(self) -> str:
        return format_amount(self.total_value)

    model_config = {"frozen": True}


# ---------------------------------------------------------------------------
# API Request Schemas
# ---------------------------------------------------------------------------


class ProductInput(BaseModel):
    """
    Rohe Formulareingabe. Menge und Preis kommen als Text an und werden erst
    in validate_product_input() geparst.
    """

    name: str = ""
    description: str = ""
    category: str = ""
    quantity: str = ""
    price: str = ""

    @field_validator("quantity", "price", mode="before")
    @classmethod
    def numbers_as_text(cls, value: Any) -> Any:
        if isinstance(value, int | float) and not isinstance(value, bool):
            return str(value)
        return value

    model_config = {"frozen": True}
