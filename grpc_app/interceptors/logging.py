from __future__ import annotations

import asyncio
import time
from typing import Callable, Awaitable

import grpc

from core.logging_config import get_logger
from grpc_app.interceptors.exceptions import is_mapped_error
from grpc_app.interceptors.wrapping import invoke, wrap_handler


logger = get_logger(__name__)


class LoggingInterceptor(grpc.aio.ServerInterceptor):
    async def intercept_service(
        self,
        continuation: Callable[[grpc.HandlerCallDetails], Awaitable[grpc.RpcMethodHandler]],
        handler_call_details: grpc.HandlerCallDetails,
    ) -> grpc.RpcMethodHandler:
        handler = await continuation(handler_call_details)
        if handler is None:
            return handler

        method = handler_call_details.method
        streaming = bool(handler.request_streaming or handler.response_streaming)

        def _wrap(behavior):
            async def _call(request_or_iterator, context: grpc.aio.ServicerContext):
                start = time.perf_counter()
                outcome = "ok"
                try:
                    logger.info("grpc_request", method=method, peer=context.peer(), streaming=streaming)
                    return await invoke(behavior, request_or_iterator, context)
                except asyncio.CancelledError:
                    # Peer went away or the server is shutting down
                    outcome = "cancelled"
                    logger.info("grpc_request_cancelled", method=method)
                    raise
                except grpc.aio.AbortError:
                    # Already mapped by the exception interceptor
                    outcome = "aborted"
                    raise
                except Exception as exc:
                    outcome = "error"
                    if is_mapped_error():
                        raise
                    logger.error("grpc_unhandled_error", method=method, error=str(exc), exc_info=True)
                    raise
                finally:
                    elapsed_ms = (time.perf_counter() - start) * 1000
                    logger.info("grpc_request_done", method=method, outcome=outcome, elapsed_ms=round(elapsed_ms, 2))
            return _call

        return wrap_handler(handler, _wrap)
