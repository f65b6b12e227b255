import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from archmap.domains.architecture.models.context_model import (
    ApiReference,
    BoundedContext,
    ComponentReference,
)
from archmap.domains.architecture.services.naming import (
    component_entity_ref,
    extract_api_id,
    format_display_name,
    resolve_grouping_key,
    resolve_source_url,
)
from archmap.domains.catalog.models.catalog_model import ApiRecord, ComponentRecord

logger = logging.getLogger(__name__)


@dataclass
class _ContextBuilder:
    """分組期間累積單一 context 的內容"""

    id: str
    domain: Optional[str] = None
    owning_team: Optional[str] = None
    source_url: Optional[str] = None
    components: List[ComponentReference] = field(default_factory=list)
    provided_apis: Dict[str, ApiReference] = field(default_factory=dict)
    consumed_apis: Dict[str, ApiReference] = field(default_factory=dict)

    def add_apis(
        self,
        target: Dict[str, ApiReference],
        references: Sequence[str],
        apis_by_id: Dict[str, ApiRecord],
    ) -> None:
        for reference in references:
            api_id = extract_api_id(reference)
            api = apis_by_id.get(api_id)
            # 目錄中找不到的 API 參照直接略過
            if api is None or api_id in target:
                continue
            target[api_id] = ApiReference(
                name=api_id, entity_ref=reference, type=api.protocol_kind
            )

    def build(self) -> BoundedContext:
        return BoundedContext(
            id=self.id,
            display_name=format_display_name(self.id),
            domain=self.domain,
            owning_team=self.owning_team,
            components=self.components,
            provided_apis=list(self.provided_apis.values()),
            consumed_apis=list(self.consumed_apis.values()),
            source_url=self.source_url,
        )


def group_into_contexts(
    components: Sequence[ComponentRecord], apis: Sequence[ApiRecord]
) -> List[BoundedContext]:
    """將元件依 system/domain 分組為 bounded context

    每個元件各自決定分組鍵 (system → domain → 預設 context)。
    團隊、領域與原始碼網址取自該 context 中第一個具有非空值的元件。
    回傳順序為各分組鍵首次出現的順序。
    """
    apis_by_id: Dict[str, ApiRecord] = {}
    for api in apis:
        apis_by_id.setdefault(api.id, api)

    builders: Dict[str, _ContextBuilder] = {}

    for component in components:
        context_id = resolve_grouping_key(component)
        builder = builders.get(context_id)
        if builder is None:
            builder = builders[context_id] = _ContextBuilder(id=context_id)

        source_url = resolve_source_url(component.annotations)
        builder.components.append(
            ComponentReference(
                name=component.id,
                entity_ref=component_entity_ref(component.id),
                type=component.component_type,
                source_url=source_url,
            )
        )

        if source_url and not builder.source_url:
            builder.source_url = source_url
        if component.domain and not builder.domain:
            builder.domain = component.domain
        if component.owning_team and not builder.owning_team:
            builder.owning_team = component.owning_team

        builder.add_apis(builder.provided_apis, component.provided_api_ids, apis_by_id)
        builder.add_apis(builder.consumed_apis, component.consumed_api_ids, apis_by_id)

    contexts = [builder.build() for builder in builders.values()]
    logger.debug(
        f"Grouped {len(components)} components into {len(contexts)} contexts"
    )
    return contexts
