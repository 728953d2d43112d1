"""订单查询领域：目录匹配与响应组装。"""
from .entity import OrderRequest, OrderResponse
from .catalog import Catalog, MatchResult
from .service import ResponseAssembler

__all__ = ["OrderRequest", "OrderResponse", "Catalog", "MatchResult", "ResponseAssembler"]
