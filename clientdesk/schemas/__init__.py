# clientdesk/schemas/__init__.py
"""Pydantic schemas package"""
from .views import (
    AssignmentDetail,
    ClientDetail,
    DashboardSummary,
    PortalAssignment,
    PortalOverview,
    PortalTicketThread,
    TicketDetail,
    TicketWithClient,
)

__all__ = [
    "AssignmentDetail",
    "ClientDetail",
    "DashboardSummary",
    "PortalAssignment",
    "PortalOverview",
    "PortalTicketThread",
    "TicketDetail",
    "TicketWithClient",
]
