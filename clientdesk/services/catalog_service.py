# clientdesk/services/catalog_service.py
from typing import Any, Iterable, List, Optional

from ..models import ServiceOffering
from .base_service import BaseCRUDService
from .identity import IdPolicy
from .latency import LatencyPolicy


class ServiceCatalogService(BaseCRUDService[ServiceOffering]):
    """CRUD over the service catalog. New offerings are active unless told otherwise."""

    resource_name = "Service"

    def __init__(
        self,
        records: Iterable[Any] = (),
        latency: Optional[LatencyPolicy] = None,
        id_policy: Optional[IdPolicy] = None,
    ):
        super().__init__(ServiceOffering, records, latency, id_policy)

    async def get_by_category(self, category: str) -> List[ServiceOffering]:
        """Active offerings of one category."""
        await self._wait("query")
        return self._filter(lambda s: s.category == category and s.is_active)

    async def search(self, query: str = "", category: Optional[str] = None) -> List[ServiceOffering]:
        """
        Catalog browsing: optional category, then a case-insensitive match on
        name or description. Inactive offerings are included.
        """
        await self._wait("query")
        needle = query.strip().lower()
        return self._filter(
            lambda s: (category is None or s.category == category)
            and (not needle or needle in s.name.lower() or needle in s.description.lower())
        )
