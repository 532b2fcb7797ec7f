# src/inventory_tracker/api/dependencies.py
from functools import lru_cache

import httpx
from fastapi import Depends, Request

from inventory_tracker.repositories.inventory_store import InventoryStore
from inventory_tracker.services.export_service import ExportService
from inventory_tracker.services.inventory_service import InventoryService


# Shared HTTP Client (Connection Pooling)
@lru_cache
def get_http_client() -> httpx.AsyncClient:
    return httpx.AsyncClient(
        headers={"User-Agent": "InventoryTracker/1.0"},
        follow_redirects=True,
    )


def get_inventory_store(request: Request) -> InventoryStore:
    # Constructed once per application in the lifespan (see main.py).
    store: InventoryStore = request.app.state.inventory_store
    return store


def get_inventory_service(
    store: InventoryStore = Depends(get_inventory_store),
) -> InventoryService:
    return InventoryService(store=store)


def get_export_service() -> ExportService:
    return ExportService()
