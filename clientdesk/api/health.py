# clientdesk/api/health.py
from fastapi import APIRouter, Depends

from ..services.registry import ServiceRegistry
from .dependencies import get_registry

router = APIRouter()


@router.get("/health", tags=["System"])
async def get_system_health(registry: ServiceRegistry = Depends(get_registry)):
    """
    Returns the system health status including the size of every collection.
    """
    return {
        "status": "ok",
        "collections": {
            "clients": len(registry.clients),
            "services": len(registry.catalog),
            "assignments": len(registry.assignments),
            "tickets": len(registry.tickets),
            "messages": len(registry.messages),
        },
    }
