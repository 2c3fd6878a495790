# clientdesk/services/client_service.py
"""
Client service layer over the in-memory client collection.
"""
import logging
from typing import Any, Dict, Iterable, List, Optional

from ..core.exceptions import DuplicateEmailError, ValidationError
from ..models import Client
from .base_service import BaseCRUDService
from .identity import IdPolicy
from .latency import LatencyPolicy

logger = logging.getLogger(__name__)


class ClientService(BaseCRUDService[Client]):
    """
    CRUD over clients.
    Creation requires company_name and email, and the email must not be in
    use by another client (case-insensitive). Updates do not re-check email.
    """

    resource_name = "Client"
    delays = {**BaseCRUDService.delays, "get_all": 300}

    def __init__(
        self,
        records: Iterable[Any] = (),
        latency: Optional[LatencyPolicy] = None,
        id_policy: Optional[IdPolicy] = None,
    ):
        super().__init__(Client, records, latency, id_policy)

    def _before_create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        if not data.get("company_name") or not data.get("email"):
            raise ValidationError("Company name and email are required")

        email = str(data["email"]).lower()
        if any(c.email.lower() == email for c in self._records):
            logger.warning(f"Rejected client with duplicate email {email}")
            raise DuplicateEmailError("A client with this email already exists")
        return data

    async def search(self, query: str) -> List[Client]:
        """Case-insensitive match on company name, contact name or email."""
        await self._wait("query")
        needle = query.strip().lower()
        return self._filter(
            lambda c: needle in c.company_name.lower()
            or needle in c.contact_name.lower()
            or needle in c.email.lower()
        )
