import json
import logging
from typing import Any, Callable, Dict, List, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from archmap.domains.catalog.interfaces.record_source import CatalogRecordSource
from archmap.domains.catalog.models.catalog_entity import CatalogEntity
from archmap.domains.catalog.models.catalog_model import (
    ApiRecord,
    ComponentRecord,
    EntityKind,
)
from archmap.domains.catalog.services.entity_parser import parse_api, parse_component

logger = logging.getLogger(__name__)

R = TypeVar("R")


class SQLModelRecordSource(CatalogRecordSource):
    """SQLModel 記錄來源實現，直接查詢目錄實體資料表

    無法解析的資料列會記錄警告後略過；資料庫錯誤則向上拋出。
    """

    def __init__(self, session_factory: Callable[[], AsyncSession]):
        self.session_factory = session_factory

    async def _get_entities(self, kind: EntityKind) -> List[Dict[str, Any]]:
        """讀取指定種類的實體 JSON，依 entity_ref 排序"""
        async with self.session_factory() as session:
            stmt = (
                select(CatalogEntity)
                .where(CatalogEntity.kind == kind.value)
                .order_by(CatalogEntity.entity_ref)
            )
            result = await session.execute(stmt)
            rows = result.scalars().all()

        entities = []
        for row in rows:
            try:
                entity = json.loads(row.final_entity)
            except (TypeError, ValueError) as e:
                logger.warning(f"Failed to parse entity {row.entity_ref}: {e}")
                continue
            if not isinstance(entity, dict):
                logger.warning(f"Entity {row.entity_ref} is not a JSON object")
                continue
            entities.append(entity)

        logger.debug(f"Retrieved {len(entities)} {kind.value} entities from database")
        return entities

    async def _fetch(
        self, kind: EntityKind, parse: Callable[[Dict[str, Any]], R]
    ) -> List[R]:
        records = []
        for entity in await self._get_entities(kind):
            try:
                records.append(parse(entity))
            except ValueError as e:
                logger.warning(f"Skipping invalid {kind.value} entity: {e}")
        return records

    async def fetch_components(self) -> List[ComponentRecord]:
        return await self._fetch(EntityKind.COMPONENT, parse_component)

    async def fetch_apis(self) -> List[ApiRecord]:
        return await self._fetch(EntityKind.API, parse_api)
