# clientdesk/services/dashboard_service.py
"""
Back-office views composed from several repositories.

The reads behind each view run concurrently with asyncio.gather and the
joins are done here; missing clients or offerings never raise.
"""
import asyncio
import logging
from decimal import Decimal
from typing import Any, Dict, Iterable, List, Optional

from ..core.constants import (
    OPEN_TICKET_STATUSES,
    UNKNOWN_CLIENT_NAME,
    UNKNOWN_SERVICE_CATEGORY,
    UNKNOWN_SERVICE_NAME,
    AssignmentStatus,
    BillingCycle,
    ClientStatus,
)
from ..models import Client, ClientServiceAssignment, ServiceOffering, Ticket
from ..schemas import AssignmentDetail, ClientDetail, DashboardSummary, TicketDetail, TicketWithClient
from .registry import ServiceRegistry

logger = logging.getLogger(__name__)


def enrich_assignment(
    assignment: ClientServiceAssignment, offerings: Dict[int, ServiceOffering]
) -> Dict[str, Any]:
    """Assignment fields plus the name, price and category of its offering."""
    offering = offerings.get(assignment.service_id)
    return {
        **assignment.model_dump(),
        "service_name": offering.name if offering else UNKNOWN_SERVICE_NAME,
        "service_price": offering.price if offering else Decimal("0"),
        "service_category": offering.category if offering else UNKNOWN_SERVICE_CATEGORY,
    }


def with_client_name(ticket: Ticket, clients: Dict[int, Client]) -> TicketWithClient:
    client = clients.get(ticket.client_id)
    return TicketWithClient(
        **ticket.model_dump(),
        client_name=client.company_name if client else UNKNOWN_CLIENT_NAME,
    )


def by_id(records: Iterable[Any]) -> Dict[int, Any]:
    return {r.id: r for r in records}


class DashboardService:
    def __init__(self, registry: ServiceRegistry, expiring_window_days: int = 30, recent_limit: int = 5):
        self.registry = registry
        self.expiring_window_days = expiring_window_days
        self.recent_limit = recent_limit

    async def get_summary(self) -> DashboardSummary:
        """
        Headline numbers of the dashboard.

        - active_clients: clients with status active
        - open_tickets: tickets open or inProgress
        - expiring_services: active assignments ending inside the window
        - monthly_revenue: price of the monthly offerings of active assignments
        - recent_activity: newest tickets with their client's company name
        """
        r = self.registry
        clients, offerings, tickets, assignments, expiring = await asyncio.gather(
            r.clients.get_all(),
            r.catalog.get_all(),
            r.tickets.get_all(),
            r.assignments.get_all(),
            r.assignments.get_expiring_services(self.expiring_window_days),
        )

        offerings_by_id = by_id(offerings)
        monthly_revenue = Decimal("0")
        for assignment in assignments:
            if assignment.status != AssignmentStatus.ACTIVE:
                continue
            offering = offerings_by_id.get(assignment.service_id)
            if offering and offering.billing_cycle == BillingCycle.MONTHLY:
                monthly_revenue += offering.price

        clients_by_id = by_id(clients)
        recent = sorted(tickets, key=lambda t: t.created_at, reverse=True)[: self.recent_limit]

        return DashboardSummary(
            active_clients=sum(1 for c in clients if c.status == ClientStatus.ACTIVE),
            open_tickets=sum(1 for t in tickets if t.status in OPEN_TICKET_STATUSES),
            expiring_services=len(expiring),
            monthly_revenue=monthly_revenue,
            recent_activity=[with_client_name(t, clients_by_id) for t in recent],
        )

    async def get_client_detail(self, client_id: Any) -> ClientDetail:
        """Client with its contracted services and its tickets. NotFound if the client is missing."""
        r = self.registry
        client, assignments, tickets, offerings = await asyncio.gather(
            r.clients.get_by_id(client_id),
            r.assignments.get_by_client_id(client_id),
            r.tickets.get_by_client_id(client_id),
            r.catalog.get_all(),
        )
        offerings_by_id = by_id(offerings)
        return ClientDetail(
            client=client,
            services=[AssignmentDetail(**enrich_assignment(a, offerings_by_id)) for a in assignments],
            tickets=tickets,
        )

    async def get_ticket_detail(self, ticket_id: Any) -> TicketDetail:
        """Ticket, its thread (internal notes included) and its client when it still exists."""
        r = self.registry
        ticket, messages = await asyncio.gather(
            r.tickets.get_by_id(ticket_id),
            r.messages.get_by_ticket_id(ticket_id),
        )
        clients = by_id(await r.clients.get_all())
        client = clients.get(ticket.client_id)
        if client is None:
            logger.warning(f"Ticket {ticket.id} points to missing client {ticket.client_id}")
        return TicketDetail(ticket=ticket, messages=messages, client=client)

    async def list_tickets(
        self,
        status: Optional[str] = None,
        priority: Optional[str] = None,
        query: Optional[str] = None,
    ) -> List[TicketWithClient]:
        """
        Ticket list of the back office, newest first.
        `query` matches subject, description or client name, case-insensitive.
        """
        r = self.registry
        tickets, clients = await asyncio.gather(r.tickets.get_all(), r.clients.get_all())
        clients_by_id = by_id(clients)
        rows = [with_client_name(t, clients_by_id) for t in tickets]

        if status:
            rows = [t for t in rows if t.status == status]
        if priority:
            rows = [t for t in rows if t.priority == priority]
        needle = (query or "").strip().lower()
        if needle:
            rows = [
                t
                for t in rows
                if needle in t.subject.lower()
                or needle in t.description.lower()
                or needle in t.client_name.lower()
            ]
        return sorted(rows, key=lambda t: t.created_at, reverse=True)
