"""
Status and health check endpoints.

WHAT: Health monitoring and live chat room diagnostics
WHY: Quick diagnostics for frontend and ops
HOW: FastAPI endpoints reading catalog and coordinator state
"""

from fastapi import APIRouter, Depends

from ...core.catalog import CatalogRepository, get_catalog
from ...core.config import settings
from ...realtime.coordinator import ChatCoordinator, get_coordinator
from ...utils.logger import get_logger

logger = get_logger(__name__)

router = APIRouter()


@router.get("/health")
async def health_check(
    catalog: CatalogRepository = Depends(get_catalog),
    coordinator: ChatCoordinator = Depends(get_coordinator),
):
    """
    Overall application health check.

    WHAT: Health status including version
    WHY: Ops and monitoring tools need simple health endpoint
    HOW: Aggregate catalog and chat status with app metadata

    Returns:
        JSON with overall health status
    """
    product_count = len(catalog.search_products(""))
    catalog_available = product_count > 0

    return {
        "status": "healthy" if catalog_available else "degraded",
        "version": settings.APP_VERSION,
        "app_name": settings.APP_NAME,
        "components": {
            "catalog": {
                "available": catalog_available,
                "products": product_count
            },
            "chat": {
                "rooms": len(coordinator.registry.rooms()),
                "participants": len(coordinator.participants)
            }
        }
    }


@router.get("/chat/rooms")
async def list_chat_rooms(coordinator: ChatCoordinator = Depends(get_coordinator)):
    """List live chat rooms with member counts, deal state and pending replies."""
    rooms = coordinator.room_snapshot()
    return {"rooms": rooms, "total": len(rooms)}
