"""Helpers for interceptors that wrap every RPC shape.

Wrapped behaviors are always coroutine functions: streaming responses
are pushed through `context.write()`, so the same `around` logic serves
unary and streaming calls alike.
"""
from __future__ import annotations

import inspect
from typing import Any, Awaitable, Callable

import grpc


Behavior = Callable[[Any, grpc.aio.ServicerContext], Any]
Wrapper = Callable[[Behavior], Callable[[Any, grpc.aio.ServicerContext], Awaitable[Any]]]


async def invoke(behavior: Behavior, request_or_iterator: Any, context: grpc.aio.ServicerContext) -> Any:
    result = behavior(request_or_iterator, context)
    if inspect.isasyncgen(result):
        async for response in result:
            await context.write(response)
        return None
    if inspect.isawaitable(result):
        return await result
    return result


def wrap_handler(handler: grpc.RpcMethodHandler, wrapper: Wrapper) -> grpc.RpcMethodHandler:
    kwargs = dict(
        request_deserializer=handler.request_deserializer,
        response_serializer=handler.response_serializer,
    )
    if handler.unary_unary:
        return grpc.unary_unary_rpc_method_handler(wrapper(handler.unary_unary), **kwargs)
    if handler.unary_stream:
        return grpc.unary_stream_rpc_method_handler(wrapper(handler.unary_stream), **kwargs)
    if handler.stream_unary:
        return grpc.stream_unary_rpc_method_handler(wrapper(handler.stream_unary), **kwargs)
    if handler.stream_stream:
        return grpc.stream_stream_rpc_method_handler(wrapper(handler.stream_stream), **kwargs)
    return handler
