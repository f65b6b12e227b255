from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import Field

from archmap.domains.common.models.base_model import ValueObject


# --- Enum Definitions ---
class ContextRelationshipType(str, Enum):
    """DDD context mapping 模式"""

    SHARED_KERNEL = "SHARED_KERNEL"  # 兩個 context 共享同一模型
    CUSTOMER_SUPPLIER = "CUSTOMER_SUPPLIER"  # 下游為客戶，上游為供應者
    CONFORMIST = "CONFORMIST"  # 下游遵從上游模型
    ANTICORRUPTION_LAYER = "ANTICORRUPTION_LAYER"  # 下游以轉譯層保護自己
    OPEN_HOST_SERVICE = "OPEN_HOST_SERVICE"  # 上游提供定義明確的協定
    PUBLISHED_LANGUAGE = "PUBLISHED_LANGUAGE"  # 共享且文件化的語言/結構
    SEPARATE_WAYS = "SEPARATE_WAYS"  # 彼此無連結
    PARTNERSHIP = "PARTNERSHIP"  # 相互依賴，協同規劃


class RelationshipStrength(str, Enum):
    WEAK = "WEAK"
    MEDIUM = "MEDIUM"
    STRONG = "STRONG"


# --- Value Objects ---
class ComponentReference(ValueObject):
    """context 內的元件摘要"""

    name: str
    entity_ref: str
    type: Optional[str] = None
    source_url: Optional[str] = None


class ApiReference(ValueObject):
    """API 摘要；name 為去除限定前綴後的 API 識別符"""

    name: str
    entity_ref: str
    type: Optional[str] = None


class BoundedContext(ValueObject):
    """DDD 中的 bounded context，每次探索時重新建立"""

    id: str
    display_name: str
    domain: Optional[str] = None
    owning_team: Optional[str] = None
    components: List[ComponentReference] = Field(default_factory=list)
    provided_apis: List[ApiReference] = Field(default_factory=list)
    consumed_apis: List[ApiReference] = Field(default_factory=list)
    source_url: Optional[str] = None

    def provides(self, api_name: str) -> bool:
        """此 context 是否提供指定的 API"""
        return any(api.name == api_name for api in self.provided_apis)


class ContextRelationship(ValueObject):
    """兩個 bounded context 間的有向關係 (上游提供 API，下游使用)"""

    id: str
    upstream_context_id: str
    downstream_context_id: str
    relationship_type: ContextRelationshipType
    via_api_references: List[str] = Field(default_factory=list)
    strength: RelationshipStrength = RelationshipStrength.MEDIUM


class ContextMapMetadata(ValueObject):
    generated_at: datetime
    version: str
    total_contexts: int
    total_relationships: int


class ContextMap(ValueObject):
    """所有 context 與其關係的完整快照"""

    contexts: List[BoundedContext]
    relationships: List[ContextRelationship]
    metadata: ContextMapMetadata


class ContextAnalysis(ValueObject):
    """單一 context 的分析結果

    upstream 為供應此 context 的關係 (指向此 context 的邊)，
    downstream 為此 context 供應給其他 context 的關係 (由此 context 發出的邊)。
    """

    context: BoundedContext
    upstream: List[ContextRelationship]
    downstream: List[ContextRelationship]


class ContextDependencies(ValueObject):
    """單一 context 的上下游依賴摘要"""

    context_id: str
    upstream: List[ContextRelationship]
    downstream: List[ContextRelationship]
    upstream_count: int
    downstream_count: int
