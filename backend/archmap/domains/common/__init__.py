"""
共享領域模組

包含所有領域共用的模型。
"""

# 從基本模型導出
from archmap.domains.common.models.base_model import (
    DomainBaseModel,
    ValueObject,
)
