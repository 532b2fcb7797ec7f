# src/inventory_tracker/services/inventory_service.py
from __future__ import annotations

import logging
from collections.abc import Iterable

from inventory_tracker.core.metrics import VALIDATION_FAILURES
from inventory_tracker.domain.models import InventoryStats, Product, ProductDraft, ProductInput
from inventory_tracker.domain.validation import ProductValidationError, validate_product_input
from inventory_tracker.repositories.inventory_store import InventoryStore

logger = logging.getLogger(__name__)


def compute_stats(products: Iterable[Product]) -> InventoryStats:
    """Pure summary over any product snapshot."""
    total_count = 0
    total_quantity = 0
    total_value = 0.0
    for p in products:
        total_count += 1
        total_quantity += p.quantity
        total_value += p.price * p.quantity
    return InventoryStats(
        total_count=total_count,
        total_quantity=total_quantity,
        total_value=total_value,
    )


class InventoryService:
    def __init__(self, store: InventoryStore) -> None:
        self._store = store

    def add_product(self, payload: ProductInput) -> Product:
        draft = self._validate(payload)
        product = self._store.create(draft)
        logger.info("Product %d added: %s", product.id, product.name)
        return product

    def edit_product(self, product_id: int, payload: ProductInput) -> Product | None:
        draft = self._validate(payload)
        product = Product.from_draft(product_id, draft)
        if not self._store.update(product):
            logger.warning("Update ignored, product %d does not exist", product_id)
            return None
        return product

    def remove_product(self, product_id: int) -> bool:
        removed = self._store.delete(product_id)
        if not removed:
            logger.warning("Delete ignored, product %d does not exist", product_id)
        return removed

    def get_product(self, product_id: int) -> Product | None:
        return self._store.get_by_id(product_id)

    def list_products(self, query: str | None = None) -> list[Product]:
        products = self._store.list_products()
        if not query:
            return list(products)
        query_lower = query.lower()
        return [
            p
            for p in products
            if query_lower in p.name.lower() or query_lower in p.category.lower()
        ]

    def get_stats(self) -> InventoryStats:
        return compute_stats(self._store.list_products())

    def _validate(self, payload: ProductInput) -> ProductDraft:
        try:
            return validate_product_input(payload)
        except ProductValidationError as e:
            for issue in e.issues:
                VALIDATION_FAILURES.labels(issue=issue.value).inc()
            raise
