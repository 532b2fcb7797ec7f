from typing import Annotated

from fastapi import APIRouter, Depends, Request, Security

from inventory_tracker.api.dependencies import get_inventory_service
from inventory_tracker.core.rate_limit import api_rate_limit, limiter
from inventory_tracker.core.security import get_client_id
from inventory_tracker.domain.models import InventoryStats
from inventory_tracker.services.inventory_service import InventoryService

router = APIRouter(prefix="/stats", tags=["Statistics"])

ClientDep = Annotated[str, Security(get_client_id)]
ServiceDep = Annotated[InventoryService, Depends(get_inventory_service)]


@router.get("/", response_model=InventoryStats)
@limiter.limit(api_rate_limit)
async def get_stats(
    request: Request, client_id: ClientDep, service: ServiceDep
) -> InventoryStats:
    """Totals over the current inventory: products, units and stock value."""
    return service.get_stats()
