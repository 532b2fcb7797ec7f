# src/inventory_tracker/repositories/inventory_store.py
from __future__ import annotations

import logging
import threading
from collections.abc import Callable

from inventory_tracker.core.metrics import STORE_OPERATIONS
from inventory_tracker.domain.models import EventKind, InventoryEvent, Product, ProductDraft

logger = logging.getLogger(__name__)

InventoryListener = Callable[[InventoryEvent], None]

EXAMPLE_PRODUCTS: tuple[ProductDraft, ...] = (
    ProductDraft(
        name="Laptop Dell",
        description="Laptop para oficina",
        quantity=5,
        price=1200.0,
        category="Electrónicos",
    ),
    ProductDraft(
        name="Mouse Logitech",
        description="Mouse inalámbrico",
        quantity=15,
        price=25.0,
        category="Accesorios",
    ),
    ProductDraft(
        name="Teclado Mecánico",
        description="Teclado gaming",
        quantity=8,
        price=80.0,
        category="Accesorios",
    ),
)


class InventoryStore:
    """
    In-memory owner of the product list and the id counter.

    Ids are assigned from a counter starting at 1 and are never reused, even
    after deletion. Insertion order is the display order. Every operation runs
    under one lock, so create/update/delete/list are atomic relative to each
    other. Callers only ever receive frozen Product instances and tuple
    snapshots.

    "Not found" on update/delete is a no-op reported through the return value.
    No input validation happens here; see validate_product_input().
    """

    def __init__(self, seed: bool = True) -> None:
        self._products: list[Product] = []
        self._next_id = 1
        self._lock = threading.Lock()
        self._listeners: list[InventoryListener] = []
        if seed:
            for draft in EXAMPLE_PRODUCTS:
                self.create(draft)

    def create(self, draft: ProductDraft) -> Product:
        with self._lock:
            product = Product.from_draft(self._next_id, draft)
            self._products.append(product)
            self._next_id += 1
        logger.debug("Created product %d (%s)", product.id, product.name)
        STORE_OPERATIONS.labels(operation="create", outcome="applied").inc()
        self._publish(InventoryEvent(kind=EventKind.CREATED, product=product))
        return product

    def update(self, product: Product) -> bool:
        with self._lock:
            index = self._index_of(product.id)
            if index is not None:
                self._products[index] = product
        if index is None:
            STORE_OPERATIONS.labels(operation="update", outcome="noop").inc()
            return False
        logger.debug("Updated product %d", product.id)
        STORE_OPERATIONS.labels(operation="update", outcome="applied").inc()
        self._publish(InventoryEvent(kind=EventKind.UPDATED, product=product))
        return True

    def delete(self, product_id: int) -> bool:
        with self._lock:
            index = self._index_of(product_id)
            removed = self._products.pop(index) if index is not None else None
        if removed is None:
            STORE_OPERATIONS.labels(operation="delete", outcome="noop").inc()
            return False
        logger.debug("Deleted product %d", product_id)
        STORE_OPERATIONS.labels(operation="delete", outcome="applied").inc()
        self._publish(InventoryEvent(kind=EventKind.DELETED, product=removed))
        return True

    def get_by_id(self, product_id: int) -> Product | None:
        with self._lock:
            index = self._index_of(product_id)
            return self._products[index] if index is not None else None

    def list_products(self) -> tuple[Product, ...]:
        with self._lock:
            return tuple(self._products)

    def subscribe(self, listener: InventoryListener) -> Callable[[], None]:
        """Registers a change listener and returns a callable that removes it again."""
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    def _index_of(self, product_id: int) -> int | None:
        # Caller must hold the lock.
        for index, product in enumerate(self._products):
            if product.id == product_id:
                return index
        return None

    def _publish(self, event: InventoryEvent) -> None:
        with self._lock:
            listeners = list(self._listeners)
        for listener in listeners:
            try:
                listener(event)
            except Exception:
                logger.exception("Inventory listener failed for %s event", event.kind)
