from __future__ import annotations

from typing import List, Optional

import pytest

from application.services.order_service import (
    BidirectionalStreamingHandler,
    OrderApplicationService,
    ServerStreamState,
    ServerStreamingHandler,
    SessionState,
)
from domain.order import OrderRequest, OrderResponse, ResponseAssembler


pytestmark = pytest.mark.asyncio


class TransportBroken(Exception):
    pass


class RecordingSink:
    def __init__(self, events: Optional[list] = None, *, fail_on: Optional[int] = None) -> None:
        self.sent: List[OrderResponse] = []
        self.events = events if events is not None else []
        self._fail_on = fail_on

    async def send(self, response: OrderResponse) -> None:
        if self._fail_on is not None and len(self.sent) == self._fail_on:
            raise TransportBroken("send failed")
        self.sent.append(response)
        self.events.append(("send", response.item_name))


class ScriptedSource:
    """Yields scripted requests, then None (end-of-input) or a scripted error."""

    def __init__(self, items: List[str], events: Optional[list] = None, *, error: Optional[Exception] = None) -> None:
        self._pending = [OrderRequest(items=i) for i in items]
        self.events = events if events is not None else []
        self._error = error
        self.reads = 0

    async def receive(self) -> Optional[OrderRequest]:
        self.reads += 1
        if self._pending:
            request = self._pending.pop(0)
            self.events.append(("recv", request.items))
            return request
        if self._error is not None:
            raise self._error
        self.events.append(("recv", None))
        return None

    @property
    def unread(self) -> int:
        return len(self._pending)


@pytest.fixture
def assembler() -> ResponseAssembler:
    return ResponseAssembler(clock=lambda: 1700000000.0)


async def test_server_streaming_emits_matches_in_catalog_order(catalog, assembler):
    handler = ServerStreamingHandler(catalog, assembler)
    sink = RecordingSink()

    emitted = await handler.run(OrderRequest(items="apple"), sink)

    assert emitted == 3
    assert [r.item_name for r in sink.sent] == ["apple", "red apple", "green apple"]
    assert all(r.time_stamp for r in sink.sent)
    assert handler.state is ServerStreamState.DONE


async def test_server_streaming_no_match_completes_without_output(catalog, assembler):
    handler = ServerStreamingHandler(catalog, assembler)
    sink = RecordingSink()

    assert await handler.run(OrderRequest(items="zzz"), sink) == 0
    assert sink.sent == []
    assert handler.state is ServerStreamState.DONE


async def test_server_streaming_send_failure_propagates(catalog, assembler):
    handler = ServerStreamingHandler(catalog, assembler)
    sink = RecordingSink(fail_on=1)

    with pytest.raises(TransportBroken):
        await handler.run(OrderRequest(items="apple"), sink)

    assert [r.item_name for r in sink.sent] == ["apple"]
    assert handler.emitted == 1
    assert handler.state is ServerStreamState.DONE


async def test_server_streaming_handler_serves_one_call(catalog, assembler):
    handler = ServerStreamingHandler(catalog, assembler)
    await handler.run(OrderRequest(items="kiwi"), RecordingSink())
    with pytest.raises(RuntimeError):
        await handler.run(OrderRequest(items="kiwi"), RecordingSink())


async def test_bidirectional_emits_each_batch_before_next_read(catalog, assembler):
    events: list = []
    source = ScriptedSource(["banana", "kiwi", ""], events)
    sink = RecordingSink(events)
    handler = BidirectionalStreamingHandler(catalog, assembler)

    emitted = await handler.run(source, sink)

    assert emitted == 2 + len(catalog)
    assert events == [
        ("recv", "banana"),
        ("send", "banana"),
        ("recv", "kiwi"),
        ("send", "kiwi"),
        ("recv", ""),
        *[("send", name) for name in catalog.items],
        ("recv", None),
    ]
    assert handler.requests_processed == 3
    assert handler.state is SessionState.CLOSED


async def test_bidirectional_no_match_keeps_session_open(catalog, assembler):
    source = ScriptedSource(["zzz", "pear"])
    sink = RecordingSink()
    handler = BidirectionalStreamingHandler(catalog, assembler)

    await handler.run(source, sink)

    assert [r.item_name for r in sink.sent] == ["pear"]
    assert handler.requests_processed == 2


async def test_bidirectional_immediate_end_of_input(catalog, assembler):
    handler = BidirectionalStreamingHandler(catalog, assembler)
    sink = RecordingSink()

    assert await handler.run(ScriptedSource([]), sink) == 0
    assert sink.sent == []
    assert handler.state is SessionState.CLOSED


async def test_bidirectional_receive_error_propagates(catalog, assembler):
    source = ScriptedSource(["grape"], error=TransportBroken("connection reset"))
    sink = RecordingSink()
    handler = BidirectionalStreamingHandler(catalog, assembler)

    with pytest.raises(TransportBroken):
        await handler.run(source, sink)

    assert [r.item_name for r in sink.sent] == ["grape"]
    assert handler.state is SessionState.CLOSED


async def test_bidirectional_send_error_abandons_unread_requests(catalog, assembler):
    source = ScriptedSource(["apple", "kiwi", "pear"])
    sink = RecordingSink(fail_on=2)
    handler = BidirectionalStreamingHandler(catalog, assembler)

    with pytest.raises(TransportBroken):
        await handler.run(source, sink)

    assert source.reads == 1
    assert source.unread == 2
    assert handler.emitted == 2
    assert handler.requests_processed == 0
    assert handler.state is SessionState.CLOSED


async def test_bidirectional_handler_serves_one_session(catalog, assembler):
    handler = BidirectionalStreamingHandler(catalog, assembler)
    await handler.run(ScriptedSource([]), RecordingSink())
    with pytest.raises(RuntimeError):
        await handler.run(ScriptedSource([]), RecordingSink())


async def test_service_builds_fresh_handler_per_call(catalog, assembler):
    svc = OrderApplicationService(catalog, assembler)

    first, second = RecordingSink(), RecordingSink()
    await svc.get_order_server_streaming(OrderRequest(items="an"), first)
    await svc.get_order_server_streaming(OrderRequest(items="an"), second)

    assert first.sent == second.sent
    assert [r.item_name for r in first.sent] == ["banana", "orange", "mango"]

    sessions = [RecordingSink(), RecordingSink()]
    for sink in sessions:
        await svc.get_order_bidirectional(ScriptedSource(["cherry", "cherry"]), sink)
    assert sessions[0].sent == sessions[1].sent
    assert [r.item_name for r in sessions[0].sent] == ["cherry", "cherry"]


async def test_bidirectional_cancellation_propagates_and_closes(catalog, assembler):
    import asyncio

    source = ScriptedSource(["kiwi"], error=asyncio.CancelledError())
    sink = RecordingSink()
    handler = BidirectionalStreamingHandler(catalog, assembler)

    with pytest.raises(asyncio.CancelledError):
        await handler.run(source, sink)

    assert [r.item_name for r in sink.sent] == ["kiwi"]
    assert handler.requests_processed == 1
    assert handler.state is SessionState.CLOSED


async def test_server_streaming_cancellation_during_send_propagates(catalog):
    import asyncio

    class CancellingSink(RecordingSink):
        async def send(self, response):
            raise asyncio.CancelledError()

    handler = ServerStreamingHandler(catalog, ResponseAssembler(clock=lambda: 0.0))
    with pytest.raises(asyncio.CancelledError):
        await handler.run(OrderRequest(items="pear"), CancellingSink())
    assert handler.emitted == 0
    assert handler.state is ServerStreamState.DONE


async def test_service_exposes_the_catalog_it_was_built_with(catalog):
    assert OrderApplicationService(catalog).catalog is catalog
