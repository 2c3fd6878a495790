# clientdesk/services/ticket_service.py
"""
Support tickets. New tickets always start open; the status then moves
through inProgress, resolved and closed by plain updates.
"""
from typing import Any, Dict, Iterable, List, Optional

from ..core.constants import OPEN_TICKET_STATUSES, TicketStatus
from ..models import Ticket
from .base_service import BaseCRUDService, to_int
from .identity import IdPolicy
from .latency import LatencyPolicy


class TicketService(BaseCRUDService[Ticket]):
    resource_name = "Ticket"
    delays = {**BaseCRUDService.delays, "get_all": 300}

    def __init__(
        self,
        records: Iterable[Any] = (),
        latency: Optional[LatencyPolicy] = None,
        id_policy: Optional[IdPolicy] = None,
    ):
        super().__init__(Ticket, records, latency, id_policy)

    def _before_create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return {**data, "status": TicketStatus.OPEN}

    async def get_by_client_id(self, client_id: Any) -> List[Ticket]:
        await self._wait("query")
        client_id = to_int(client_id)
        return self._filter(lambda t: t.client_id == client_id)

    async def get_by_status(self, status: str) -> List[Ticket]:
        await self._wait("query")
        return self._filter(lambda t: t.status == status)

    async def get_open_tickets(self) -> List[Ticket]:
        """Tickets still waiting on support (open or inProgress)."""
        await self._wait("query")
        return self._filter(lambda t: t.status in OPEN_TICKET_STATUSES)
