# src/inventory_tracker/api/v1/router.py
from fastapi import APIRouter

from inventory_tracker.api.v1 import products, stats

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(products.router)
api_router.include_router(stats.router)
