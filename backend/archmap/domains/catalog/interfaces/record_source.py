from abc import ABC, abstractmethod
from typing import List

from archmap.domains.catalog.models.catalog_model import ApiRecord, ComponentRecord


class CatalogRecordSource(ABC):
    """目錄記錄來源接口

    每次呼叫都回傳當下目錄的一份快照；實作負責在邊界驗證資料，
    上層的 context 探索邏輯可假設輸入已是正確型別。
    """

    @abstractmethod
    async def fetch_components(self) -> List[ComponentRecord]:
        """獲取所有元件記錄"""
        pass

    @abstractmethod
    async def fetch_apis(self) -> List[ApiRecord]:
        """獲取所有 API 記錄"""
        pass
