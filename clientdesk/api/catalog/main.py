# clientdesk/api/catalog/main.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Request, status

from ...core.audit import log_action
from ...models import ServiceOffering
from ...services.catalog_service import ServiceCatalogService
from ..dependencies import get_catalog_service
from .models import ServiceOfferingCreate, ServiceOfferingUpdate

router = APIRouter()


@router.get("/services", response_model=List[ServiceOffering])
async def api_get_services(
    q: str = "",
    category: Optional[str] = None,
    service: ServiceCatalogService = Depends(get_catalog_service),
):
    """Whole catalog, or a filtered view when `q` or `category` is given."""
    if q or category:
        return await service.search(q, category)
    return await service.get_all()


@router.get("/services/category/{category}", response_model=List[ServiceOffering])
async def api_get_services_by_category(
    category: str, service: ServiceCatalogService = Depends(get_catalog_service)
):
    return await service.get_by_category(category)


@router.get("/services/{service_id}", response_model=ServiceOffering)
async def api_get_service(service_id: int, service: ServiceCatalogService = Depends(get_catalog_service)):
    return await service.get_by_id(service_id)


@router.post("/services", response_model=ServiceOffering, status_code=status.HTTP_201_CREATED)
async def api_create_service(
    offering: ServiceOfferingCreate, service: ServiceCatalogService = Depends(get_catalog_service)
):
    return await service.create(offering.model_dump())


@router.put("/services/{service_id}", response_model=ServiceOffering)
async def api_update_service(
    service_id: int,
    offering: ServiceOfferingUpdate,
    service: ServiceCatalogService = Depends(get_catalog_service),
):
    return await service.update(service_id, offering.model_dump(exclude_unset=True))


@router.delete("/services/{service_id}", response_model=ServiceOffering)
async def api_delete_service(
    service_id: int,
    request: Request,
    service: ServiceCatalogService = Depends(get_catalog_service),
):
    deleted = await service.delete(service_id)
    log_action("DELETE", "service", str(service_id), request=request)
    return deleted
