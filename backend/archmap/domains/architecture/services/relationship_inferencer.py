import logging
from typing import List, Optional, Sequence

from archmap.domains.architecture.models.context_model import (
    ApiReference,
    BoundedContext,
    ContextRelationship,
    ContextRelationshipType,
    RelationshipStrength,
)

logger = logging.getLogger(__name__)

# 具有機器可驗證契約的協定種類
CONTRACT_PROTOCOL_KINDS = frozenset({"openapi", "grpc"})


def classify_relationship(
    upstream: BoundedContext, downstream: BoundedContext, api: ApiReference
) -> ContextRelationshipType:
    """判斷兩個 context 間的 DDD 關係類型

    依序判斷，不做多重標記：
    同一非空領域 → SHARED_KERNEL；契約型協定 → OPEN_HOST_SERVICE；
    其餘 → CUSTOMER_SUPPLIER。
    """
    if upstream.domain and upstream.domain == downstream.domain:
        return ContextRelationshipType.SHARED_KERNEL

    if api.type and api.type.lower() in CONTRACT_PROTOCOL_KINDS:
        return ContextRelationshipType.OPEN_HOST_SERVICE

    return ContextRelationshipType.CUSTOMER_SUPPLIER


def find_provider(
    contexts: Sequence[BoundedContext], api_name: str
) -> Optional[BoundedContext]:
    """找出第一個提供指定 API 的 context"""
    return next((context for context in contexts if context.provides(api_name)), None)


def infer_relationships(contexts: Sequence[BoundedContext]) -> List[ContextRelationship]:
    """根據 API 依賴推斷 context 間的關係

    外層依序走訪下游 context，內層依序走訪其使用的 API，
    因此 ``rel-N`` 的編號在相同輸入下可重現。找不到提供者的 API
    視為外部依賴並略過；同一 context 內的依賴不產生邊。
    """
    relationships: List[ContextRelationship] = []

    for downstream in contexts:
        for consumed_api in downstream.consumed_apis:
            upstream = find_provider(contexts, consumed_api.name)
            if upstream is None or upstream.id == downstream.id:
                continue

            relationships.append(
                ContextRelationship(
                    id=f"rel-{len(relationships) + 1}",
                    upstream_context_id=upstream.id,
                    downstream_context_id=downstream.id,
                    relationship_type=classify_relationship(
                        upstream, downstream, consumed_api
                    ),
                    via_api_references=[consumed_api.entity_ref],
                    strength=RelationshipStrength.MEDIUM,
                )
            )

    logger.debug(f"Inferred {len(relationships)} context relationships")
    return relationships
