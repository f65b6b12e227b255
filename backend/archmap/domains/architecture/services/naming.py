"""
命名與參照正規化工具

context 分組與關係推斷共用的小工具：

* 限定 API 參照的語法為 ``[kind ":"] [namespace "/"]* name``，
  API 識別符取最後一個 ``/`` 之後的片段。
* 顯示名稱由機器識別符以 ``-`` 分詞並將每個詞首字母大寫而得。
* 原始碼網址依序從 project slug 註解與 source-location 註解解析。
"""

from typing import Mapping, Optional

from archmap.domains.catalog.models.catalog_model import ComponentRecord

DEFAULT_CONTEXT_ID = "default-context"

PROJECT_SLUG_ANNOTATION = "github.com/project-slug"
SOURCE_LOCATION_ANNOTATION = "backstage.io/source-location"
GITHUB_HOST = "github.com"


def extract_api_id(reference: str) -> str:
    """從限定參照中取出 API 識別符

    >>> extract_api_id("api:default/account-api")
    'account-api'
    >>> extract_api_id("account-api")
    'account-api'
    """
    return reference.split("/")[-1]


def format_display_name(identifier: str) -> str:
    """
    >>> format_display_name("payment-core")
    'Payment Core'
    """
    return " ".join(word[:1].upper() + word[1:] for word in identifier.split("-"))


def resolve_source_url(annotations: Mapping[str, str]) -> Optional[str]:
    """解析元件的原始碼網址，找不到時回傳 None"""
    slug = annotations.get(PROJECT_SLUG_ANNOTATION)
    if slug:
        return f"https://{GITHUB_HOST}/{slug}"

    location = annotations.get(SOURCE_LOCATION_ANNOTATION)
    if location and GITHUB_HOST in location and ":" in location:
        # "url:https://github.com/org/repo" -> "https://github.com/org/repo"
        return location.split(":", 1)[1]

    return None


def resolve_grouping_key(component: ComponentRecord) -> str:
    """決定元件所屬的 context：system → domain → 預設 context"""
    for key in (component.grouping_key, component.domain):
        if key and key.strip():
            return key
    return DEFAULT_CONTEXT_ID


def component_entity_ref(name: str) -> str:
    return f"component:default/{name}"
