"""
订单领域实体 - 请求与响应值对象
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class OrderRequest:
    """订单查询请求（items 为自由文本查询串）"""

    items: str


@dataclass(frozen=True)
class OrderResponse:
    """单条匹配结果"""

    item_name: str
    time_stamp: str
