"""
架構領域模組

從目錄記錄探索 bounded context，並依 API 提供/使用關係推斷
context 間的 DDD 關係 (Shared Kernel、Open Host Service、Customer-Supplier)。
"""

from archmap.domains.architecture.models.context_model import (
    ApiReference,
    BoundedContext,
    ComponentReference,
    ContextAnalysis,
    ContextDependencies,
    ContextMap,
    ContextMapMetadata,
    ContextRelationship,
    ContextRelationshipType,
    RelationshipStrength,
)
from archmap.domains.architecture.services.context_grouper import group_into_contexts
from archmap.domains.architecture.services.relationship_inferencer import (
    classify_relationship,
    infer_relationships,
)
from archmap.domains.architecture.services.context_map_service import (
    ContextMapService,
)
