from __future__ import annotations

from typing import Optional

import grpc

from application.services.order_service import OrderApplicationService
from domain.order import OrderRequest, OrderResponse
from grpc_app.generated.orders.v1 import order_pb2, order_pb2_grpc
from grpc_app.mappers.order import order_request_from_proto, order_response_to_proto


class ContextRequestSource:
    """Inbound cursor over `context.read()`; grpc.aio.EOF maps to None."""

    def __init__(self, context: grpc.aio.ServicerContext) -> None:
        self._context = context

    async def receive(self) -> Optional[OrderRequest]:
        msg = await self._context.read()
        if msg is grpc.aio.EOF:
            return None
        return order_request_from_proto(msg)


class ContextResponseSink:
    """Outbound direction over `context.write()`.

    The stream is completed by the servicer returning, never by the sink.
    """

    def __init__(self, context: grpc.aio.ServicerContext) -> None:
        self._context = context

    async def send(self, response: OrderResponse) -> None:
        await self._context.write(order_response_to_proto(response))


class OrderService(order_pb2_grpc.OrderManagementServicer):
    def __init__(self, app_service: OrderApplicationService) -> None:
        self._svc = app_service

    async def GetOrderServerStreaming(self, request: order_pb2.OrderRequest, context: grpc.aio.ServicerContext) -> None:  # type: ignore[override]
        await self._svc.get_order_server_streaming(
            order_request_from_proto(request),
            ContextResponseSink(context),
        )

    async def GetOrderBidirectional(self, request_iterator, context: grpc.aio.ServicerContext) -> None:  # type: ignore[override]
        # Requests are pulled through context.read(); request_iterator stays untouched
        await self._svc.get_order_bidirectional(
            ContextRequestSource(context),
            ContextResponseSink(context),
        )
