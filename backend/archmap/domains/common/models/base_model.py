from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class DomainBaseModel(BaseModel):
    """所有領域模型的基類"""

    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        populate_by_name=True,
        validate_assignment=True,
    )


class ValueObject(DomainBaseModel):
    """值對象基類，不可變且通過其屬性值來定義相等性

    對外序列化時使用 camelCase 欄位名稱 (例如 ``displayName``)，
    與既有的儀表板與依賴查詢端點保持相容。
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )
