# tests/unit/test_models.py
import pytest
from pydantic import ValidationError

from inventory_tracker.domain.models import InventoryStats, Product, ProductDraft, format_amount


def _make_product(quantity: int = 5, price: float = 1200.0) -> Product:
    return Product(
        id=1,
        name="Laptop Dell",
        description="Laptop para oficina",
        category="Electrónicos",
        quantity=quantity,
        price=price,
    )


# ---------------------------------------------------------------------------
# Product
# ---------------------------------------------------------------------------


def test_stock_value_is_price_times_quantity() -> None:
    assert _make_product(quantity=8, price=80.0).stock_value == 640.0


def test_stock_value_is_serialized() -> None:
    data = _make_product().model_dump()
    assert data["stock_value"] == 6000.0


def test_product_is_frozen() -> None:
    product = _make_product()
    with pytest.raises(ValidationError):
        product.quantity = 10  # type: ignore[misc]


def test_from_draft_and_back() -> None:
    draft = ProductDraft(name="Bolt", quantity=2, price=0.1)
    product = Product.from_draft(7, draft)
    assert product.id == 7
    assert product.description == ""
    assert product.category == ""
    assert product.model_dump(exclude={"id", "stock_value"}) == draft.model_dump()


def test_product_accepts_its_own_dump() -> None:
    product = _make_product()
    assert Product.model_validate(product.model_dump()) == product


# ---------------------------------------------------------------------------
# InventoryStats
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    ("value", "display"),
    [
        (0.0, "0.00"),
        (7015.0, "7015.00"),
        (2.5, "2.50"),
        (0.125, "0.13"),
        (2.675, "2.68"),
        (1.005, "1.01"),
        (1 / 3, "0.33"),
    ],
)
def test_total_value_display_has_two_decimals(value: float, display: str) -> None:
    assert InventoryStats(total_value=value).total_value_display == display


def test_stats_dump_contains_display() -> None:
    stats = InventoryStats(total_count=3, total_quantity=28, total_value=7015.0)
    assert stats.model_dump() == {
        "total_count": 3,
        "total_quantity": 28,
        "total_value": 7015.0,
        "total_value_display": "7015.00",
    }


def test_format_amount_rounds_half_up() -> None:
    assert format_amount(2.675) == "2.68"
    assert format_amount(0.005) == "0.01"
    assert format_amount(1200.0) == "1200.00"
    assert format_amount(19.994) == "19.99"
