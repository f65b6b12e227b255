"""
目錄領域模組

提供 context 探索所需的元件與 API 記錄：記錄模型、記錄來源接口，
以及記憶體與 SQLModel 兩種記錄來源實現。
"""

from archmap.domains.catalog.models.catalog_model import (
    ApiRecord,
    ComponentRecord,
    EntityKind,
)
from archmap.domains.catalog.models.catalog_entity import CatalogEntity
from archmap.domains.catalog.interfaces.record_source import CatalogRecordSource
from archmap.domains.catalog.adapters.in_memory_record_source import (
    InMemoryRecordSource,
)
from archmap.domains.catalog.adapters.sqlmodel_record_source import (
    SQLModelRecordSource,
)
