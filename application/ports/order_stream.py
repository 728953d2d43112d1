"""
Order stream ports (contracts-first).

Both streaming handlers depend only on "receive next request" and
"send next response", so the matching logic stays independent of the
concrete transport (gRPC in production, in-memory queues in tests).
"""
from __future__ import annotations

from typing import Optional, Protocol

from domain.order import OrderRequest, OrderResponse


class OrderRequestSource(Protocol):
    """Inbound cursor of a session.

    `receive` returns None once the peer has signalled end-of-input and
    raises on any other transport failure.
    """

    async def receive(self) -> Optional[OrderRequest]: ...


class OrderResponseSink(Protocol):
    """Outbound direction of a session. `send` raises on transport failure."""

    async def send(self, response: OrderResponse) -> None: ...


__all__ = ["OrderRequestSource", "OrderResponseSink"]
