"""
API router aggregation.

WHAT: Combine all endpoint routers
WHY: Single place to register all API routes
HOW: Include routers from endpoints with prefixes
"""

from fastapi import APIRouter

from .endpoints import status, products, chat

# Create main router
api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    status.router,
    prefix="/api",
    tags=["status"]
)

api_router.include_router(
    products.router,
    prefix="/api",
    tags=["products"]
)

# WebSocket lives at the root: /ws/chat
api_router.include_router(
    chat.router,
    tags=["chat"]
)
