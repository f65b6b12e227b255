# backend/archmap/api/v1/router.py
from fastapi import APIRouter

# Import domain API routers
from archmap.domains.architecture.api.architecture_api import (
    router as architecture_router,
)

api_router = APIRouter()

# Register domain API routers
api_router.include_router(
    architecture_router, prefix="/architecture", tags=["Architecture"]
)
