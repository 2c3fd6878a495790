# clientdesk/api/tickets/main.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Request, status

from ...core.audit import log_action
from ...core.constants import TicketPriority, TicketStatus
from ...core.exceptions import ValidationError
from ...models import Ticket, TicketMessage
from ...schemas import TicketDetail, TicketWithClient
from ...services.dashboard_service import DashboardService
from ...services.ticket_message_service import TicketMessageService
from ...services.ticket_service import TicketService
from ..dependencies import get_dashboard_service, get_message_service, get_ticket_service
from .models import TicketCreate, TicketReply, TicketUpdate

router = APIRouter()


@router.get("/tickets", response_model=List[TicketWithClient])
async def api_list_tickets(
    status: Optional[TicketStatus] = None,
    priority: Optional[TicketPriority] = None,
    q: Optional[str] = None,
    dashboard: DashboardService = Depends(get_dashboard_service),
):
    """Tickets with their client's name, newest first."""
    return await dashboard.list_tickets(status=status, priority=priority, query=q)


@router.get("/tickets/open", response_model=List[Ticket])
async def api_get_open_tickets(service: TicketService = Depends(get_ticket_service)):
    return await service.get_open_tickets()


@router.get("/tickets/{ticket_id}", response_model=Ticket)
async def api_get_ticket(ticket_id: int, service: TicketService = Depends(get_ticket_service)):
    return await service.get_by_id(ticket_id)


@router.get("/tickets/{ticket_id}/detail", response_model=TicketDetail)
async def api_get_ticket_detail(
    ticket_id: int, dashboard: DashboardService = Depends(get_dashboard_service)
):
    return await dashboard.get_ticket_detail(ticket_id)


@router.post("/tickets", response_model=Ticket, status_code=status.HTTP_201_CREATED)
async def api_create_ticket(ticket: TicketCreate, service: TicketService = Depends(get_ticket_service)):
    return await service.create(ticket.model_dump())


@router.put("/tickets/{ticket_id}", response_model=Ticket)
async def api_update_ticket(
    ticket_id: int,
    ticket_update: TicketUpdate,
    service: TicketService = Depends(get_ticket_service),
):
    return await service.update(ticket_id, ticket_update.model_dump(exclude_unset=True))


@router.delete("/tickets/{ticket_id}", response_model=Ticket)
async def api_delete_ticket(
    ticket_id: int,
    request: Request,
    service: TicketService = Depends(get_ticket_service),
):
    deleted = await service.delete(ticket_id)
    log_action("DELETE", "ticket", str(ticket_id), request=request)
    return deleted


# --- Thread Endpoints ---


@router.get("/tickets/{ticket_id}/messages", response_model=List[TicketMessage])
async def api_get_ticket_messages(
    ticket_id: int, messages: TicketMessageService = Depends(get_message_service)
):
    return await messages.get_by_ticket_id(ticket_id)


@router.post(
    "/tickets/{ticket_id}/messages",
    response_model=TicketMessage,
    status_code=status.HTTP_201_CREATED,
)
async def api_reply_ticket(
    ticket_id: int,
    reply: TicketReply,
    tickets: TicketService = Depends(get_ticket_service),
    messages: TicketMessageService = Depends(get_message_service),
):
    if not reply.message.strip():
        raise ValidationError("Message cannot be empty")
    # 404 for replies to a ticket that does not exist
    await tickets.get_by_id(ticket_id)
    return await messages.create({**reply.model_dump(), "ticket_id": ticket_id})


@router.delete("/messages/{message_id}", response_model=TicketMessage)
async def api_delete_message(
    message_id: int,
    request: Request,
    messages: TicketMessageService = Depends(get_message_service),
):
    deleted = await messages.delete(message_id)
    log_action("DELETE", "ticket_message", str(message_id), request=request)
    return deleted
