from archmap.domains.catalog.interfaces.record_source import CatalogRecordSource
from archmap.domains.catalog.models.catalog_model import ApiRecord, ComponentRecord


def make_component(id, system=None, provides=(), consumes=(), **kwargs):
    return ComponentRecord(
        id=id,
        grouping_key=system,
        provided_api_ids=list(provides),
        consumed_api_ids=list(consumes),
        **kwargs,
    )


def make_api(id, protocol_kind="openapi", system=None):
    return ApiRecord(id=id, protocol_kind=protocol_kind, grouping_key=system)


class FailingRecordSource(CatalogRecordSource):
    async def fetch_components(self):
        raise ConnectionError("catalog unavailable")

    async def fetch_apis(self):
        return []
