import json
import logging
from contextlib import asynccontextmanager
from typing import Any, Dict, List

from fastapi import FastAPI
from sqlmodel import SQLModel
from sqlalchemy.ext.asyncio import AsyncSession

from archmap.core.config import (
    ARCHITECTURE_RECORD_SOURCE,
    ARCHITECTURE_USE_MOCK_DATA,
    RECORD_SOURCE_MEMORY,
)
from archmap.db.base import engine, async_session_maker
from archmap.domains.architecture.services.context_map_service import (
    ContextMapService,
)
from archmap.domains.catalog.adapters.in_memory_record_source import (
    InMemoryRecordSource,
)
from archmap.domains.catalog.adapters.sqlmodel_record_source import (
    SQLModelRecordSource,
)
from archmap.domains.catalog.interfaces.record_source import CatalogRecordSource
from archmap.domains.catalog.models.catalog_entity import CatalogEntity
from archmap.domains.catalog.services.mock_catalog import (
    entity_ref,
    generate_mock_catalog_entities,
)

logger = logging.getLogger(__name__)

MOCK_LOCATION_PREFIX = "mock-architecture-provider"


async def create_db_and_tables():
    """Creates database tables if they don't exist."""
    async with engine.begin() as conn:
        logger.info("Creating database tables...")
        await conn.run_sync(SQLModel.metadata.create_all)
        logger.info("Database tables created (if they didn't exist).")


async def seed_catalog_entities(
    session: AsyncSession, entities: List[Dict[str, Any]]
) -> int:
    """將目錄實體寫入 catalog_entities，已存在的實體會被覆蓋"""
    logger.info(f"Seeding {len(entities)} catalog entities...")
    try:
        for entity in entities:
            await session.merge(
                CatalogEntity(
                    entity_ref=entity_ref(entity),
                    kind=entity["kind"],
                    final_entity=json.dumps(entity),
                    location_key=f"{MOCK_LOCATION_PREFIX}:{entity['kind'].lower()}:{entity['metadata']['name']}",
                )
            )
        await session.commit()
    except Exception as e:
        await session.rollback()
        logger.error(f"Error seeding catalog entities: {e}", exc_info=True)
        raise

    kinds: Dict[str, int] = {}
    for entity in entities:
        kinds[entity["kind"]] = kinds.get(entity["kind"], 0) + 1
    for kind, total in kinds.items():
        logger.info(f"  - {kind}: {total}")
    return len(entities)


def build_record_source() -> CatalogRecordSource:
    """依設定建立記錄來源"""
    if ARCHITECTURE_RECORD_SOURCE == RECORD_SOURCE_MEMORY:
        logger.info("Using in-memory record source with mock catalog data")
        return InMemoryRecordSource.from_entities(generate_mock_catalog_entities())

    logger.info("Using database record source (catalog_entities)")
    return SQLModelRecordSource(session_factory=async_session_maker)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Context manager for FastAPI startup and shutdown logic."""
    logger.info("Application startup sequence initiated...")

    if ARCHITECTURE_RECORD_SOURCE != RECORD_SOURCE_MEMORY:
        await create_db_and_tables()
        if ARCHITECTURE_USE_MOCK_DATA:
            logger.info("ARCHITECTURE_USE_MOCK_DATA enabled - loading mock catalog")
            async with async_session_maker() as session:
                await seed_catalog_entities(session, generate_mock_catalog_entities())

    # 服務只在啟動時建立一次，處理函式透過依賴注入取得
    app.state.context_map_service = ContextMapService(
        record_source=build_record_source()
    )
    logger.info("Architecture context map service initialized.")

    yield

    logger.info("Application shutdown sequence initiated...")
    await engine.dispose()
    logger.info("Database engine disposed.")
