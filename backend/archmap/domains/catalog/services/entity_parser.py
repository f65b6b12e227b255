"""
目錄實體解析

將 Backstage 風格的實體字典 (``kind`` / ``metadata`` / ``spec``) 轉換為
經過驗證的 ComponentRecord 與 ApiRecord。這是記錄來源的驗證邊界：
結構不正確的實體在此被拒絕，而不會流入 context 探索邏輯。
"""

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from archmap.domains.catalog.models.catalog_model import (
    ApiRecord,
    ComponentRecord,
    EntityKind,
)

logger = logging.getLogger(__name__)

DOMAIN_ANNOTATION = "backstage.io/domain"


class EntityParseError(ValueError):
    """實體缺少必要欄位或種類不符"""


def _section(entity: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    value = entity.get(name) or {}
    if not isinstance(value, Mapping):
        raise EntityParseError(f"Entity section '{name}' must be an object")
    return value


def _entity_name(entity: Mapping[str, Any]) -> str:
    name = _section(entity, "metadata").get("name")
    if not isinstance(name, str) or not name:
        raise EntityParseError("Entity is missing metadata.name")
    return name


def _string_list(spec: Mapping[str, Any], key: str) -> List[str]:
    values = spec.get(key) or []
    if not isinstance(values, list):
        raise EntityParseError(f"spec.{key} must be a list")
    # JSON null 項目直接略過
    return [str(value) for value in values if value is not None]


def parse_component(entity: Mapping[str, Any]) -> ComponentRecord:
    """將 Component 實體轉換為 ComponentRecord"""
    if entity.get("kind") != EntityKind.COMPONENT.value:
        raise EntityParseError(f"Expected kind Component, got {entity.get('kind')!r}")

    metadata = _section(entity, "metadata")
    spec = _section(entity, "spec")
    annotations: Dict[str, str] = {
        str(key): str(value)
        for key, value in _section(metadata, "annotations").items()
        if value is not None
    }

    return ComponentRecord(
        id=_entity_name(entity),
        display_name=metadata.get("title"),
        grouping_key=spec.get("system"),
        domain=annotations.get(DOMAIN_ANNOTATION) or spec.get("domain"),
        owning_team=spec.get("owner"),
        component_type=spec.get("type"),
        provided_api_ids=_string_list(spec, "providesApis"),
        consumed_api_ids=_string_list(spec, "consumesApis"),
        annotations=annotations,
    )


def parse_api(entity: Mapping[str, Any]) -> ApiRecord:
    """將 API 實體轉換為 ApiRecord"""
    if entity.get("kind") != EntityKind.API.value:
        raise EntityParseError(f"Expected kind API, got {entity.get('kind')!r}")

    metadata = _section(entity, "metadata")
    spec = _section(entity, "spec")
    return ApiRecord(
        id=_entity_name(entity),
        protocol_kind=spec.get("type"),
        grouping_key=spec.get("system"),
        display_name=metadata.get("title"),
        owning_team=spec.get("owner"),
    )


def parse_entities(
    entities: Iterable[Mapping[str, Any]],
) -> Tuple[List[ComponentRecord], List[ApiRecord]]:
    """依種類拆分實體，跳過無法解析的實體

    Domain、System 等其他種類的實體會被忽略。

    Returns:
        (元件記錄列表, API 記錄列表)
    """
    components: List[ComponentRecord] = []
    apis: List[ApiRecord] = []

    for entity in entities:
        if not isinstance(entity, Mapping):
            logger.warning(f"Skipping entity that is not an object: {entity!r}")
            continue
        kind: Optional[str] = entity.get("kind")
        try:
            if kind == EntityKind.COMPONENT.value:
                components.append(parse_component(entity))
            elif kind == EntityKind.API.value:
                apis.append(parse_api(entity))
        except ValueError as e:
            logger.warning(f"Skipping invalid {kind} entity: {e}")

    return components, apis
