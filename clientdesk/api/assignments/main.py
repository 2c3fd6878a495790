# clientdesk/api/assignments/main.py
from typing import List

from fastapi import APIRouter, Depends, Query, Request, status

from ...core.audit import log_action
from ...core.constants import MAX_EXPIRING_WINDOW_DAYS
from ...models import ClientServiceAssignment
from ...services.assignment_service import ClientServiceAssignmentService
from ..dependencies import get_assignment_service
from .models import AssignmentCreate, AssignmentUpdate

router = APIRouter()


@router.get("/assignments", response_model=List[ClientServiceAssignment])
async def api_get_assignments(service: ClientServiceAssignmentService = Depends(get_assignment_service)):
    return await service.get_all()


@router.get("/assignments/expiring", response_model=List[ClientServiceAssignment])
async def api_get_expiring_assignments(
    days: int = Query(30, ge=0, le=MAX_EXPIRING_WINDOW_DAYS),
    service: ClientServiceAssignmentService = Depends(get_assignment_service),
):
    """Active services ending within the next `days` days (overdue ones included)."""
    return await service.get_expiring_services(days)


@router.get("/assignments/{assignment_id}", response_model=ClientServiceAssignment)
async def api_get_assignment(
    assignment_id: int, service: ClientServiceAssignmentService = Depends(get_assignment_service)
):
    return await service.get_by_id(assignment_id)


@router.post("/assignments", response_model=ClientServiceAssignment, status_code=status.HTTP_201_CREATED)
async def api_create_assignment(
    assignment: AssignmentCreate,
    service: ClientServiceAssignmentService = Depends(get_assignment_service),
):
    return await service.create(assignment.model_dump())


@router.put("/assignments/{assignment_id}", response_model=ClientServiceAssignment)
async def api_update_assignment(
    assignment_id: int,
    assignment: AssignmentUpdate,
    service: ClientServiceAssignmentService = Depends(get_assignment_service),
):
    return await service.update(assignment_id, assignment.model_dump(exclude_unset=True))


@router.delete("/assignments/{assignment_id}", response_model=ClientServiceAssignment)
async def api_delete_assignment(
    assignment_id: int,
    request: Request,
    service: ClientServiceAssignmentService = Depends(get_assignment_service),
):
    deleted = await service.delete(assignment_id)
    log_action("DELETE", "assignment", str(assignment_id), request=request)
    return deleted
