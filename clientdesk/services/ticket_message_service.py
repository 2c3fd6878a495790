# clientdesk/services/ticket_message_service.py
from typing import Any, Iterable, List, Optional

from ..models import TicketMessage
from .base_service import BaseCRUDService, to_int
from .identity import IdPolicy
from .latency import LatencyPolicy


class TicketMessageService(BaseCRUDService[TicketMessage]):
    """Messages of the ticket threads."""

    resource_name = "Message"
    delays = {**BaseCRUDService.delays, "create": 300, "delete": 200}

    def __init__(
        self,
        records: Iterable[Any] = (),
        latency: Optional[LatencyPolicy] = None,
        id_policy: Optional[IdPolicy] = None,
    ):
        super().__init__(TicketMessage, records, latency, id_policy)

    async def get_by_ticket_id(self, ticket_id: Any) -> List[TicketMessage]:
        """Messages of one ticket, oldest first whatever the insertion order."""
        await self._wait("query")
        ticket_id = to_int(ticket_id)
        messages = self._filter(lambda m: m.ticket_id == ticket_id)
        return sorted(messages, key=lambda m: m.created_at)
