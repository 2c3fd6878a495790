# clientdesk/schemas/views.py
"""
Pydantic schemas for the composed views (dashboard, detail pages, portal).
These join records of several repositories; soft references that point
nowhere are filled with placeholder values instead of failing.
"""
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel

from ..models import Client, ClientServiceAssignment, Ticket, TicketMessage


class TicketWithClient(Ticket):
    client_name: str


class AssignmentDetail(ClientServiceAssignment):
    service_name: str
    service_price: Decimal
    service_category: str


class PortalAssignment(AssignmentDetail):
    days_until_expiry: int


class DashboardSummary(BaseModel):
    active_clients: int
    open_tickets: int
    expiring_services: int
    monthly_revenue: Decimal
    recent_activity: List[TicketWithClient]


class ClientDetail(BaseModel):
    client: Client
    services: List[AssignmentDetail]
    tickets: List[Ticket]


class TicketDetail(BaseModel):
    ticket: Ticket
    messages: List[TicketMessage]
    client: Optional[Client] = None


class PortalOverview(BaseModel):
    """Read-only view a client gets of its own account."""

    client: Client
    services: List[PortalAssignment]
    tickets: List[Ticket]
    active_services: int
    open_tickets: int
    expiring_services: int


class PortalTicketThread(BaseModel):
    ticket: Ticket
    messages: List[TicketMessage]
