"""Async client for the OrderManagement service."""
from __future__ import annotations

from typing import Iterable, List, Optional

import grpc

from core.logging_config import get_logger
from domain.order import OrderRequest, OrderResponse
from grpc_app.generated.orders.v1 import order_pb2_grpc
from grpc_app.mappers.order import order_request_to_proto, order_response_from_proto


logger = get_logger(__name__)


class OrderClient:
    """Thin wrapper over OrderManagementStub returning domain values.

    Errors surface as grpc.aio.AioRpcError; nothing is retried.
    """

    def __init__(self, channel: grpc.aio.Channel, *, request_id: Optional[str] = None) -> None:
        self._stub = order_pb2_grpc.OrderManagementStub(channel)
        self._metadata = (("x-request-id", request_id),) if request_id else None

    async def get_order_server_streaming(self, items: str) -> List[OrderResponse]:
        call = self._stub.GetOrderServerStreaming(
            order_request_to_proto(OrderRequest(items=items)),
            metadata=self._metadata,
        )
        return [order_response_from_proto(msg) async for msg in call]

    async def get_order_bidirectional(self, items_list: Iterable[str]) -> List[OrderResponse]:
        """Send every request, half-close, then drain all responses."""
        call = self._stub.GetOrderBidirectional(metadata=self._metadata)
        for items in items_list:
            await call.write(order_request_to_proto(OrderRequest(items=items)))
        await call.done_writing()

        responses: List[OrderResponse] = []
        while True:
            msg = await call.read()
            if msg is grpc.aio.EOF:
                break
            responses.append(order_response_from_proto(msg))
        return responses


def open_channel(target: str) -> grpc.aio.Channel:
    logger.debug("grpc_channel_open", target=target)
    return grpc.aio.insecure_channel(target)
