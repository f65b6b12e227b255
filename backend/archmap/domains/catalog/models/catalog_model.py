from enum import Enum
from typing import Dict, List, Optional

from pydantic import Field

from archmap.domains.common.models.base_model import ValueObject


class EntityKind(str, Enum):
    """目錄實體種類"""

    COMPONENT = "Component"
    API = "API"
    SYSTEM = "System"
    DOMAIN = "Domain"


class ComponentRecord(ValueObject):
    """單一服務/應用程式的目錄記錄"""

    id: str = Field(..., min_length=1, description="元件唯一識別符")
    display_name: Optional[str] = Field(None, description="顯示名稱")
    grouping_key: Optional[str] = Field(
        None, description="所屬 bounded context (目錄中的 system)"
    )
    domain: Optional[str] = Field(None, description="較高層級的領域分組")
    owning_team: Optional[str] = Field(None, description="負責團隊")
    component_type: Optional[str] = Field(None, description="元件類型，例如 service")
    provided_api_ids: List[str] = Field(
        default_factory=list, description="提供的 API 參照，可能帶有限定前綴"
    )
    consumed_api_ids: List[str] = Field(
        default_factory=list, description="使用的 API 參照，可能帶有限定前綴"
    )
    annotations: Dict[str, str] = Field(
        default_factory=dict, description="中繼資料註解，用來解析原始碼位置"
    )


class ApiRecord(ValueObject):
    """已發佈或被使用的介面記錄"""

    id: str = Field(..., min_length=1, description="API 唯一識別符")
    protocol_kind: Optional[str] = Field(
        None, description="協定種類，例如 openapi、grpc"
    )
    grouping_key: Optional[str] = Field(None, description="名義上擁有此 API 的 context")
    display_name: Optional[str] = Field(None, description="顯示名稱")
    owning_team: Optional[str] = Field(None, description="負責團隊")
