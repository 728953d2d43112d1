from __future__ import annotations

from domain.order import OrderRequest, OrderResponse
from grpc_app.generated.orders.v1 import order_pb2


def order_request_from_proto(msg: order_pb2.OrderRequest) -> OrderRequest:
    return OrderRequest(items=msg.items)


def order_request_to_proto(request: OrderRequest) -> order_pb2.OrderRequest:
    return order_pb2.OrderRequest(items=request.items)


def order_response_to_proto(response: OrderResponse) -> order_pb2.OrderResponse:
    return order_pb2.OrderResponse(itemName=response.item_name, timeStamp=response.time_stamp)


def order_response_from_proto(msg: order_pb2.OrderResponse) -> OrderResponse:
    return OrderResponse(item_name=msg.itemName, time_stamp=msg.timeStamp)
