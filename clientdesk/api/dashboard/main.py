# clientdesk/api/dashboard/main.py
from fastapi import APIRouter, Depends

from ...schemas import DashboardSummary, PortalOverview, PortalTicketThread
from ...services.dashboard_service import DashboardService
from ...services.portal_service import PortalService
from ..dependencies import get_dashboard_service, get_portal_service

router = APIRouter()


@router.get("/dashboard", response_model=DashboardSummary)
async def api_get_dashboard(dashboard: DashboardService = Depends(get_dashboard_service)):
    return await dashboard.get_summary()


# --- Client self-service portal (read-only) ---


@router.get("/portal/{client_id}", response_model=PortalOverview)
async def api_get_portal(client_id: int, portal: PortalService = Depends(get_portal_service)):
    return await portal.get_overview(client_id)


@router.get("/portal/{client_id}/tickets/{ticket_id}", response_model=PortalTicketThread)
async def api_get_portal_ticket(
    client_id: int,
    ticket_id: int,
    portal: PortalService = Depends(get_portal_service),
):
    return await portal.get_ticket_thread(client_id, ticket_id)
