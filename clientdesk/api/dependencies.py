# clientdesk/api/dependencies.py
"""Shared dependencies for the API endpoints."""

from fastapi import Depends, Request

from ..core.config import Settings, get_settings
from ..services.assignment_service import ClientServiceAssignmentService
from ..services.catalog_service import ServiceCatalogService
from ..services.client_service import ClientService
from ..services.dashboard_service import DashboardService
from ..services.portal_service import PortalService
from ..services.registry import ServiceRegistry
from ..services.ticket_message_service import TicketMessageService
from ..services.ticket_service import TicketService


def get_app_settings(request: Request) -> Settings:
    return getattr(request.app.state, "settings", None) or get_settings()


def get_registry(request: Request) -> ServiceRegistry:
    """The registry built for this application in create_app()."""
    return request.app.state.registry


def get_client_service(registry: ServiceRegistry = Depends(get_registry)) -> ClientService:
    return registry.clients


def get_catalog_service(registry: ServiceRegistry = Depends(get_registry)) -> ServiceCatalogService:
    return registry.catalog


def get_assignment_service(
    registry: ServiceRegistry = Depends(get_registry),
) -> ClientServiceAssignmentService:
    return registry.assignments


def get_ticket_service(registry: ServiceRegistry = Depends(get_registry)) -> TicketService:
    return registry.tickets


def get_message_service(registry: ServiceRegistry = Depends(get_registry)) -> TicketMessageService:
    return registry.messages


def get_dashboard_service(
    registry: ServiceRegistry = Depends(get_registry),
    settings: Settings = Depends(get_app_settings),
) -> DashboardService:
    return DashboardService(registry, settings.expiring_window_days, settings.recent_activity_limit)


def get_portal_service(
    registry: ServiceRegistry = Depends(get_registry),
    settings: Settings = Depends(get_app_settings),
) -> PortalService:
    return PortalService(registry, settings.expiring_window_days)
