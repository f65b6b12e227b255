import pytest

from archmap.domains.architecture.services.context_map_service import (
    ContextMapService,
)
from archmap.domains.catalog.adapters.in_memory_record_source import (
    InMemoryRecordSource,
)
from archmap.domains.catalog.services.entity_parser import parse_entities
from archmap.domains.catalog.services.mock_catalog import generate_mock_catalog_entities


@pytest.fixture
def banking_entities():
    return generate_mock_catalog_entities()


@pytest.fixture
def banking_records(banking_entities):
    return parse_entities(banking_entities)


@pytest.fixture
def banking_source(banking_records):
    components, apis = banking_records
    return InMemoryRecordSource(components=components, apis=apis)


@pytest.fixture
def banking_service(banking_source):
    return ContextMapService(record_source=banking_source)
