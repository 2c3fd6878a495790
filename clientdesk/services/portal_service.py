# clientdesk/services/portal_service.py
"""
Client self-service portal: read-only views scoped to one client.
Internal support notes never leave this service.
"""
import asyncio
from datetime import date
from typing import Any, Optional

from ..core.constants import OPEN_TICKET_STATUSES, AssignmentStatus
from ..core.exceptions import NotFoundError
from ..schemas import PortalAssignment, PortalOverview, PortalTicketThread
from ..utils.clock import today
from .base_service import to_int
from .dashboard_service import by_id, enrich_assignment
from .registry import ServiceRegistry


class PortalService:
    def __init__(self, registry: ServiceRegistry, expiring_window_days: int = 30):
        self.registry = registry
        self.expiring_window_days = expiring_window_days

    async def get_overview(self, client_id: Any, as_of: Optional[date] = None) -> PortalOverview:
        r = self.registry
        client, assignments, tickets, offerings = await asyncio.gather(
            r.clients.get_by_id(client_id),
            r.assignments.get_by_client_id(client_id),
            r.tickets.get_by_client_id(client_id),
            r.catalog.get_all(),
        )
        reference = as_of or today()
        offerings_by_id = by_id(offerings)
        services = [
            PortalAssignment(
                **enrich_assignment(a, offerings_by_id),
                days_until_expiry=(a.end_date - reference).days,
            )
            for a in assignments
        ]
        active = [s for s in services if s.status == AssignmentStatus.ACTIVE]

        return PortalOverview(
            client=client,
            services=services,
            tickets=sorted(tickets, key=lambda t: t.created_at, reverse=True),
            active_services=len(active),
            open_tickets=sum(1 for t in tickets if t.status in OPEN_TICKET_STATUSES),
            expiring_services=sum(1 for s in active if s.days_until_expiry <= self.expiring_window_days),
        )

    async def get_ticket_thread(self, client_id: Any, ticket_id: Any) -> PortalTicketThread:
        """
        One ticket of the client with its public messages.

        Raises:
            NotFoundError: if the ticket does not exist or belongs to another client.
        """
        r = self.registry
        ticket, messages = await asyncio.gather(
            r.tickets.get_by_id(ticket_id),
            r.messages.get_by_ticket_id(ticket_id),
        )
        if ticket.client_id != to_int(client_id):
            raise NotFoundError("Ticket not found")
        return PortalTicketThread(
            ticket=ticket,
            messages=[m for m in messages if not m.is_internal],
        )
