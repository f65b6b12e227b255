from fastapi import HTTPException, Request, status
from archmap.domains.architecture.services.context_map_service import (
    ContextMapService,
)


def get_context_map_service(request: Request) -> ContextMapService:
    """FastAPI dependency returning the service created during startup."""
    service = getattr(request.app.state, "context_map_service", None)
    if service is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Architecture module not initialized yet.",
        )
    return service
