# clientdesk/services/registry.py
"""
ServiceRegistry: the set of repositories used by one process (or one test).

Built explicitly with build_registry() and injected where needed; nothing is
created at import time. Each repository gets its own id policy instance.
"""
import logging
from dataclasses import dataclass
from typing import Optional

from ..core.config import Settings, get_settings
from ..db.seed import load_seed
from .assignment_service import ClientServiceAssignmentService
from .catalog_service import ServiceCatalogService
from .client_service import ClientService
from .identity import build_id_policy
from .latency import LatencyPolicy, NoLatency, SimulatedLatency
from .ticket_message_service import TicketMessageService
from .ticket_service import TicketService

logger = logging.getLogger(__name__)


@dataclass
class ServiceRegistry:
    clients: ClientService
    catalog: ServiceCatalogService
    assignments: ClientServiceAssignmentService
    tickets: TicketService
    messages: TicketMessageService


def build_latency(settings: Settings) -> LatencyPolicy:
    if settings.simulated_latency:
        return SimulatedLatency(settings.latency_scale)
    return NoLatency()


def build_registry(
    settings: Optional[Settings] = None,
    latency: Optional[LatencyPolicy] = None,
    seed: bool = True,
) -> ServiceRegistry:
    """
    Build the five repositories.

    Args:
        settings: Configuration; defaults to the process settings.
        latency: Delay policy shared by every repository; derived from the
            settings when omitted.
        seed: Load the fixtures. With False every collection starts empty.
    """
    settings = settings or get_settings()
    latency = latency or build_latency(settings)

    def records(name: str):
        return load_seed(name, settings.seed_dir) if seed else []

    def ids():
        return build_id_policy(settings.id_strategy)

    registry = ServiceRegistry(
        clients=ClientService(records("clients"), latency, ids()),
        catalog=ServiceCatalogService(records("services"), latency, ids()),
        assignments=ClientServiceAssignmentService(records("client_services"), latency, ids()),
        tickets=TicketService(records("tickets"), latency, ids()),
        messages=TicketMessageService(records("ticket_messages"), latency, ids()),
    )
    logger.info(
        f"Registry ready: {len(registry.clients)} clients, {len(registry.catalog)} services, "
        f"{len(registry.assignments)} assignments, {len(registry.tickets)} tickets, "
        f"{len(registry.messages)} messages"
    )
    return registry
