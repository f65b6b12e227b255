import logging
from datetime import datetime, timezone
from typing import List, Optional

from archmap.domains.architecture.models.context_model import (
    BoundedContext,
    ContextAnalysis,
    ContextDependencies,
    ContextMap,
    ContextMapMetadata,
)
from archmap.domains.architecture.services.context_grouper import group_into_contexts
from archmap.domains.architecture.services.relationship_inferencer import (
    infer_relationships,
)
from archmap.domains.catalog.interfaces.record_source import CatalogRecordSource

logger = logging.getLogger(__name__)

CONTEXT_MAP_VERSION = "1.0"


class ContextMapService:
    """Bounded context 探索與 context map 組裝服務

    每次呼叫都從記錄來源的當下快照重新計算，不做快取。
    記錄來源拋出的例外原樣向上傳遞。
    """

    def __init__(self, record_source: CatalogRecordSource):
        self.record_source = record_source

    async def discover_contexts(self) -> List[BoundedContext]:
        """探索目錄中所有的 bounded context"""
        logger.info("Starting bounded context discovery...")

        components = await self.record_source.fetch_components()
        apis = await self.record_source.fetch_apis()
        logger.info(f"Found {len(components)} components and {len(apis)} APIs")

        contexts = group_into_contexts(components, apis)
        logger.info(f"Discovered {len(contexts)} bounded contexts")
        return contexts

    async def build_context_map(self) -> ContextMap:
        """建立包含關係與產生資訊的完整 context map"""
        contexts = await self.discover_contexts()
        relationships = infer_relationships(contexts)

        return ContextMap(
            contexts=contexts,
            relationships=relationships,
            metadata=ContextMapMetadata(
                generated_at=datetime.now(timezone.utc),
                version=CONTEXT_MAP_VERSION,
                total_contexts=len(contexts),
                total_relationships=len(relationships),
            ),
        )

    async def analyze_context(self, context_id: str) -> Optional[ContextAnalysis]:
        """取得單一 context 及其上下游關係，找不到時回傳 None"""
        context_map = await self.build_context_map()
        context = next((c for c in context_map.contexts if c.id == context_id), None)
        if context is None:
            logger.info(f"Context '{context_id}' not found")
            return None

        return ContextAnalysis(
            context=context,
            upstream=[
                r
                for r in context_map.relationships
                if r.downstream_context_id == context_id
            ],
            downstream=[
                r
                for r in context_map.relationships
                if r.upstream_context_id == context_id
            ],
        )

    async def context_dependencies(
        self, context_id: str
    ) -> Optional[ContextDependencies]:
        analysis = await self.analyze_context(context_id)
        if analysis is None:
            return None

        return ContextDependencies(
            context_id=context_id,
            upstream=analysis.upstream,
            downstream=analysis.downstream,
            upstream_count=len(analysis.upstream),
            downstream_count=len(analysis.downstream),
        )
