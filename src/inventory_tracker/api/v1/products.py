# src/inventory_tracker/api/v1/products.py
import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Security, status
from fastapi.responses import StreamingResponse

from inventory_tracker.api.dependencies import get_export_service, get_inventory_service
from inventory_tracker.core.rate_limit import api_rate_limit, limiter
from inventory_tracker.core.security import get_client_id
from inventory_tracker.domain.models import Product, ProductInput
from inventory_tracker.domain.validation import ProductValidationError
from inventory_tracker.services.export_service import ExportService
from inventory_tracker.services.inventory_service import InventoryService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/products", tags=["Products"])

ClientDep = Annotated[str, Security(get_client_id)]
ServiceDep = Annotated[InventoryService, Depends(get_inventory_service)]
ExportServiceDep = Annotated[ExportService, Depends(get_export_service)]


def _unprocessable(e: ProductValidationError) -> HTTPException:
    return HTTPException(
        status_code=422,
        detail={"message": str(e), "errors": [issue.value for issue in e.issues]},
    )


@router.get("/", response_model=list[Product])
@limiter.limit(api_rate_limit)
async def list_products(
    request: Request,
    client_id: ClientDep,
    service: ServiceDep,
    q: str | None = Query(default=None, max_length=128),
) -> list[Product]:
    """Alle Produkte in Einfügereihenfolge, optional nach Name/Kategorie gefiltert."""
    return service.list_products(query=q)


@router.get("/export/csv")
@limiter.limit(api_rate_limit)
async def export_products_csv(
    request: Request,
    client_id: ClientDep,
    service: ServiceDep,
    export_service: ExportServiceDep,
) -> StreamingResponse:
    content = export_service.generate_csv(service.list_products())
    return StreamingResponse(
        content,
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="inventory.csv"'},
    )


@router.get("/{product_id}", response_model=Product)
@limiter.limit(api_rate_limit)
async def get_product(
    request: Request, product_id: int, client_id: ClientDep, service: ServiceDep
) -> Product:
    product = service.get_product(product_id)
    if not product:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Product not found.")
    return product


@router.post("/", response_model=Product, status_code=status.HTTP_201_CREATED)
@limiter.limit(api_rate_limit)
async def create_product(
    request: Request,
    payload: ProductInput,
    client_id: ClientDep,
    service: ServiceDep,
) -> Product:
    try:
        product = service.add_product(payload)
    except ProductValidationError as e:
        raise _unprocessable(e)
    logger.info("Client %s added product %d", client_id, product.id)
    return product


@router.put("/{product_id}", response_model=Product)
@limiter.limit(api_rate_limit)
async def update_product(
    request: Request,
    product_id: int,
    payload: ProductInput,
    client_id: ClientDep,
    service: ServiceDep,
) -> Product:
    try:
        updated = service.edit_product(product_id, payload)
    except ProductValidationError as e:
        raise _unprocessable(e)
    if not updated:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Product not found.")
    return updated


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
@limiter.limit(api_rate_limit)
async def delete_product(
    request: Request, product_id: int, client_id: ClientDep, service: ServiceDep
) -> None:
    if not service.remove_product(product_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Product not found.")
