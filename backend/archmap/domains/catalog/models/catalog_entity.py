from typing import Optional
from sqlmodel import Field, SQLModel
from sqlalchemy import String, Text


# --- SQLModel Definitions ---
class CatalogEntity(SQLModel, table=True):
    """目錄實體資料表，每列保存一個已處理完成的實體 JSON"""

    __tablename__ = "catalog_entities"

    entity_ref: str = Field(primary_key=True, sa_type=String(255))  # kind:namespace/name
    kind: str = Field(index=True, sa_type=String(50))
    final_entity: str = Field(sa_type=Text)  # 原始實體 JSON
    location_key: Optional[str] = Field(default=None, sa_type=String(255))
