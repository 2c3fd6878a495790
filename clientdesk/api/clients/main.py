# clientdesk/api/clients/main.py
from typing import List

from fastapi import APIRouter, Depends, Request, status

from ...core.audit import log_action
from ...models import Client, ClientServiceAssignment
from ...schemas import ClientDetail
from ...services.assignment_service import ClientServiceAssignmentService
from ...services.client_service import ClientService
from ...services.dashboard_service import DashboardService
from ..dependencies import get_assignment_service, get_client_service, get_dashboard_service
from .models import ClientCreate, ClientUpdate

router = APIRouter()


# --- Client Endpoints ---


@router.get("/clients", response_model=List[Client])
async def api_get_all_clients(service: ClientService = Depends(get_client_service)):
    return await service.get_all()


@router.get("/clients/search", response_model=List[Client])
async def api_search_clients(q: str = "", service: ClientService = Depends(get_client_service)):
    return await service.search(q)


@router.get("/clients/{client_id}", response_model=Client)
async def api_get_client(client_id: int, service: ClientService = Depends(get_client_service)):
    return await service.get_by_id(client_id)


@router.get("/clients/{client_id}/detail", response_model=ClientDetail)
async def api_get_client_detail(
    client_id: int, dashboard: DashboardService = Depends(get_dashboard_service)
):
    """Client with its enriched services and its tickets."""
    return await dashboard.get_client_detail(client_id)


@router.get("/clients/{client_id}/assignments", response_model=List[ClientServiceAssignment])
async def api_get_client_assignments(
    client_id: int,
    service: ClientServiceAssignmentService = Depends(get_assignment_service),
):
    return await service.get_by_client_id(client_id)


@router.post("/clients", response_model=Client, status_code=status.HTTP_201_CREATED)
async def api_create_client(client: ClientCreate, service: ClientService = Depends(get_client_service)):
    return await service.create(client.model_dump())


@router.put("/clients/{client_id}", response_model=Client)
async def api_update_client(
    client_id: int,
    client_update: ClientUpdate,
    service: ClientService = Depends(get_client_service),
):
    return await service.update(client_id, client_update.model_dump(exclude_unset=True))


@router.delete("/clients/{client_id}", response_model=Client)
async def api_delete_client(
    client_id: int,
    request: Request,
    service: ClientService = Depends(get_client_service),
):
    deleted = await service.delete(client_id)
    log_action("DELETE", "client", str(client_id), request=request)
    return deleted
