# src/inventory_tracker/domain/validation.py
from __future__ import annotations

import math
from enum import StrEnum

from inventory_tracker.domain.models import ProductDraft, ProductInput

# Quantities are 32-bit signed integers
MAX_QUANTITY = 2**31 - 1


class ValidationIssue(StrEnum):
    EMPTY_NAME = "empty_name"
    INVALID_QUANTITY = "invalid_quantity"
    INVALID_PRICE = "invalid_price"


_MESSAGES = {
    ValidationIssue.EMPTY_NAME: "Name must not be empty",
    ValidationIssue.INVALID_QUANTITY: "Quantity must be a whole number greater than zero",
    ValidationIssue.INVALID_PRICE: "Price must be a number greater than zero",
}


class ProductValidationError(ValueError):
    def __init__(self, issues: list[ValidationIssue]):
        super().__init__("; ".join(_MESSAGES[issue] for issue in issues))
        self.issues = issues


def parse_quantity(text: str) -> int | None:
    """Parses quantity text as a 32-bit integer, or returns None."""
    if "_" in text:
        return None
    try:
        value = int(text.strip())
    except ValueError:
        return None
    return value if -MAX_QUANTITY - 1 <= value <= MAX_QUANTITY else None


def parse_price(text: str) -> float | None:
    """Parses price text as a finite float, or returns None."""
    if "_" in text:
        return None
    try:
        value = float(text.strip())
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def validate_product_input(payload: ProductInput) -> ProductDraft:
    """
    Checks all fields independently and raises ProductValidationError listing
    every violated rule. Nothing is returned unless all checks pass.
    """
    quantity = parse_quantity(payload.quantity)
    price = parse_price(payload.price)

    issues: list[ValidationIssue] = []
    if not payload.name.strip():
        issues.append(ValidationIssue.EMPTY_NAME)
    if quantity is None or quantity <= 0:
        issues.append(ValidationIssue.INVALID_QUANTITY)
    if price is None or price <= 0:
        issues.append(ValidationIssue.INVALID_PRICE)

    if issues or quantity is None or price is None:
        raise ProductValidationError(issues)

    return ProductDraft(
        name=payload.name,
        description=payload.description,
        category=payload.category,
        quantity=quantity,
        price=price,
    )
