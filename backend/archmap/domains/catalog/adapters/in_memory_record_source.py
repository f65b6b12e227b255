import logging
from typing import Any, Iterable, List, Mapping

from archmap.domains.catalog.interfaces.record_source import CatalogRecordSource
from archmap.domains.catalog.models.catalog_model import ApiRecord, ComponentRecord
from archmap.domains.catalog.services.entity_parser import parse_entities

logger = logging.getLogger(__name__)


class InMemoryRecordSource(CatalogRecordSource):
    """記憶體記錄來源實現，供測試與模擬模式使用"""

    def __init__(
        self,
        components: Iterable[ComponentRecord] = (),
        apis: Iterable[ApiRecord] = (),
    ):
        self.components = list(components)
        self.apis = list(apis)

    @classmethod
    def from_entities(
        cls, entities: Iterable[Mapping[str, Any]]
    ) -> "InMemoryRecordSource":
        """從目錄實體字典建立記錄來源"""
        components, apis = parse_entities(entities)
        logger.info(
            f"In-memory record source loaded {len(components)} components and {len(apis)} APIs"
        )
        return cls(components=components, apis=apis)

    async def fetch_components(self) -> List[ComponentRecord]:
        return list(self.components)

    async def fetch_apis(self) -> List[ApiRecord]:
        return list(self.apis)
