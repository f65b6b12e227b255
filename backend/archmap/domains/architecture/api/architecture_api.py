import logging
from typing import Any, Dict, List

from fastapi import APIRouter, Depends, HTTPException, Path, status

from archmap.api.deps import get_context_map_service
from archmap.domains.architecture.models.context_model import (
    BoundedContext,
    ContextAnalysis,
    ContextDependencies,
    ContextMap,
)
from archmap.domains.architecture.services.context_map_service import (
    ContextMapService,
)

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/health")
async def health() -> Dict[str, str]:
    return {"status": "ok", "message": "Architecture plugin is running"}


@router.get("/context-map", response_model=ContextMap)
async def read_context_map(
    service: ContextMapService = Depends(get_context_map_service),
) -> Any:
    """
    產生完整的 context map。
    """
    logger.info("API: Generating context map...")
    try:
        return await service.build_context_map()
    except Exception as e:
        logger.error(f"API Error generating context map: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"An error occurred while generating the context map: {str(e)}",
        )


@router.get("/contexts")
async def read_contexts(
    service: ContextMapService = Depends(get_context_map_service),
) -> Dict[str, Any]:
    """
    獲取所有 bounded context。
    """
    logger.info("API: Fetching all bounded contexts...")
    try:
        contexts: List[BoundedContext] = await service.discover_contexts()
    except Exception as e:
        logger.error(f"API Error fetching contexts: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"An error occurred while fetching contexts: {str(e)}",
        )

    return {
        "contexts": [context.model_dump(mode="json", by_alias=True) for context in contexts],
        "total": len(contexts),
    }


@router.get("/contexts/{context_id}", response_model=ContextAnalysis)
async def read_context(
    context_id: str = Path(..., description="Context ID"),
    service: ContextMapService = Depends(get_context_map_service),
) -> Any:
    """
    獲取單一 context 及其上下游關係。
    """
    logger.info(f"API: Fetching context: {context_id}")
    try:
        analysis = await service.analyze_context(context_id)
    except Exception as e:
        logger.error(f"API Error fetching context {context_id}: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"An error occurred while fetching the context: {str(e)}",
        )

    if analysis is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Context not found"
        )
    return analysis


@router.get("/contexts/{context_id}/dependencies", response_model=ContextDependencies)
async def read_context_dependencies(
    context_id: str = Path(..., description="Context ID"),
    service: ContextMapService = Depends(get_context_map_service),
) -> Any:
    """
    獲取 context 的上游與下游依賴。
    """
    logger.info(f"API: Fetching dependencies for context: {context_id}")
    try:
        dependencies = await service.context_dependencies(context_id)
    except Exception as e:
        logger.error(
            f"API Error fetching dependencies for {context_id}: {e}", exc_info=True
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"An error occurred while fetching dependencies: {str(e)}",
        )

    if dependencies is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Context not found"
        )
    return dependencies
