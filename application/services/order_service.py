"""Application service for order lookup streaming.

Hosts the two per-call handlers (server streaming and bidirectional) and
a small factory that owns the shared catalog and response assembler.
Errors raised by the ports are never caught here: they abort the handler
and reach the transport layer unchanged.
"""
from __future__ import annotations

from enum import Enum
from typing import Optional

from application.ports.order_stream import OrderRequestSource, OrderResponseSink
from core.logging_config import get_logger
from domain.order import Catalog, OrderRequest, ResponseAssembler


logger = get_logger(__name__)


class ServerStreamState(str, Enum):
    START = "start"
    MATCHING = "matching"
    EMITTING = "emitting"
    DONE = "done"


class SessionState(str, Enum):
    OPEN = "open"
    PROCESSING = "processing"
    CLOSED = "closed"


class ServerStreamingHandler:
    """One request in, zero or more responses out, then done.

    Completion is signalled by returning; no terminal message is sent.
    """

    def __init__(self, catalog: Catalog, assembler: ResponseAssembler) -> None:
        self._catalog = catalog
        self._assembler = assembler
        self.state = ServerStreamState.START
        self.emitted = 0

    async def run(self, request: OrderRequest, sink: OrderResponseSink) -> int:
        if self.state is not ServerStreamState.START:
            raise RuntimeError("ServerStreamingHandler instances serve a single call")

        self.state = ServerStreamState.MATCHING
        result = self._catalog.match(request.items)
        if not result.found:
            self.state = ServerStreamState.DONE
            logger.debug("order_no_match", items=request.items)
            return 0

        self.state = ServerStreamState.EMITTING
        try:
            for name in result.matches:
                await sink.send(self._assembler.assemble(name))
                self.emitted += 1
        finally:
            self.state = ServerStreamState.DONE
        return self.emitted


class BidirectionalStreamingHandler:
    """Duplex session: read a request, emit its whole batch, read the next.

    End-of-input is the only normal way out of the loop. A receive or
    send failure closes the session and propagates; unread requests are
    abandoned.
    """

    def __init__(self, catalog: Catalog, assembler: ResponseAssembler) -> None:
        self._catalog = catalog
        self._assembler = assembler
        self.state = SessionState.OPEN
        self.requests_processed = 0
        self.emitted = 0

    async def run(self, source: OrderRequestSource, sink: OrderResponseSink) -> int:
        if self.state is not SessionState.OPEN:
            raise RuntimeError("BidirectionalStreamingHandler instances serve a single session")

        try:
            while True:
                request: Optional[OrderRequest] = await source.receive()
                if request is None:
                    break
                self.state = SessionState.PROCESSING
                result = self._catalog.match(request.items)
                for name in result.matches:
                    await sink.send(self._assembler.assemble(name))
                    self.emitted += 1
                self.requests_processed += 1
                self.state = SessionState.OPEN
        finally:
            self.state = SessionState.CLOSED

        logger.debug(
            "order_session_closed",
            requests=self.requests_processed,
            emitted=self.emitted,
        )
        return self.emitted


class OrderApplicationService:
    """Owns the read-only catalog and builds one handler per call."""

    def __init__(self, catalog: Catalog, assembler: Optional[ResponseAssembler] = None) -> None:
        self._catalog = catalog
        self._assembler = assembler or ResponseAssembler()

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    def new_server_streaming_handler(self) -> ServerStreamingHandler:
        return ServerStreamingHandler(self._catalog, self._assembler)

    def new_bidirectional_handler(self) -> BidirectionalStreamingHandler:
        return BidirectionalStreamingHandler(self._catalog, self._assembler)

    async def get_order_server_streaming(self, request: OrderRequest, sink: OrderResponseSink) -> int:
        return await self.new_server_streaming_handler().run(request, sink)

    async def get_order_bidirectional(self, source: OrderRequestSource, sink: OrderResponseSink) -> int:
        return await self.new_bidirectional_handler().run(source, sink)


__all__ = [
    "OrderApplicationService",
    "ServerStreamingHandler",
    "BidirectionalStreamingHandler",
    "ServerStreamState",
    "SessionState",
]
