# clientdesk/services/assignment_service.py
"""
Services contracted by clients (client x catalog offering).
"""
from datetime import date, timedelta
from typing import Any, Iterable, List, Optional

from ..core.constants import AssignmentStatus
from ..core.exceptions import ValidationError
from ..models import ClientServiceAssignment
from ..utils.clock import today
from .base_service import BaseCRUDService, to_int
from .identity import IdPolicy
from .latency import LatencyPolicy


class ClientServiceAssignmentService(BaseCRUDService[ClientServiceAssignment]):
    resource_name = "Client service"

    def __init__(
        self,
        records: Iterable[Any] = (),
        latency: Optional[LatencyPolicy] = None,
        id_policy: Optional[IdPolicy] = None,
    ):
        super().__init__(ClientServiceAssignment, records, latency, id_policy)

    async def get_by_client_id(self, client_id: Any) -> List[ClientServiceAssignment]:
        await self._wait("query")
        client_id = to_int(client_id)
        return self._filter(lambda a: a.client_id == client_id)

    async def get_expiring_services(
        self, window_days: int = 30, as_of: Optional[date] = None
    ) -> List[ClientServiceAssignment]:
        """
        Active assignments whose end_date falls on or before as_of + window_days.
        Assignments already past their end date but still active are included.
        """
        await self._wait("query")
        try:
            limit = (as_of or today()) + timedelta(days=window_days)
        except OverflowError:
            raise ValidationError(f"Expiry window of {window_days} days is out of range") from None
        return self._filter(
            lambda a: a.status == AssignmentStatus.ACTIVE and a.end_date <= limit
        )
