from __future__ import annotations

from typing import Callable, Awaitable
import contextvars

import grpc

from core.logging_config import get_logger
from domain.common.exceptions import BusinessException
from grpc_app.interceptors.request_id import REQUEST_ID_META_KEY, get_request_id
from grpc_app.interceptors.wrapping import invoke, wrap_handler
from shared.codes import BusinessCode


logger = get_logger(__name__)

# Mark that the current request has been mapped to a gRPC status
_mapped_error: contextvars.ContextVar[bool] = contextvars.ContextVar("grpc_mapped_error", default=False)


def set_mapped_error() -> None:
    _mapped_error.set(True)


def is_mapped_error() -> bool:
    return bool(_mapped_error.get())


def _business_code_to_grpc_status(code: int) -> grpc.StatusCode:
    try:
        bc = BusinessCode(code)
    except ValueError:
        return grpc.StatusCode.FAILED_PRECONDITION

    mapping = {
        BusinessCode.PARAM_VALIDATION_ERROR: grpc.StatusCode.INVALID_ARGUMENT,
        BusinessCode.PARAM_ERROR: grpc.StatusCode.INVALID_ARGUMENT,
        BusinessCode.PARAM_MISSING: grpc.StatusCode.INVALID_ARGUMENT,
        BusinessCode.PARAM_TYPE_ERROR: grpc.StatusCode.INVALID_ARGUMENT,

        BusinessCode.NOT_FOUND: grpc.StatusCode.NOT_FOUND,

        BusinessCode.SERVICE_UNAVAILABLE: grpc.StatusCode.UNAVAILABLE,
        BusinessCode.SYSTEM_ERROR: grpc.StatusCode.INTERNAL,
        BusinessCode.NETWORK_ERROR: grpc.StatusCode.UNAVAILABLE,
    }

    return mapping.get(bc, grpc.StatusCode.FAILED_PRECONDITION)


def _error_metadata(code: int, error_type: str) -> tuple:
    md = [("x-biz-code", str(code)), ("x-error-type", error_type)]
    request_id = get_request_id()
    if request_id:
        md.append((REQUEST_ID_META_KEY, request_id))
    return tuple(md)


class ExceptionMappingInterceptor(grpc.aio.ServerInterceptor):
    async def intercept_service(
        self,
        continuation: Callable[[grpc.HandlerCallDetails], Awaitable[grpc.RpcMethodHandler]],
        handler_call_details: grpc.HandlerCallDetails,
    ) -> grpc.RpcMethodHandler:
        handler = await continuation(handler_call_details)
        if handler is None:
            return handler

        method = handler_call_details.method

        def _wrap(behavior):
            async def _call(request_or_iterator, context: grpc.aio.ServicerContext):
                try:
                    return await invoke(behavior, request_or_iterator, context)
                except grpc.aio.AbortError:
                    raise
                except BusinessException as exc:
                    status = _business_code_to_grpc_status(exc.code)
                    context.set_trailing_metadata(_error_metadata(exc.code, exc.error_type or "BusinessError"))
                    set_mapped_error()
                    # Concise business error log (no stack)
                    logger.error(
                        "grpc_mapped_error",
                        method=method,
                        code=str(exc.code),
                        status=str(status),
                        message=exc.message,
                    )
                    await context.abort(status, exc.message)
                except Exception as exc:
                    context.set_trailing_metadata(_error_metadata(BusinessCode.SYSTEM_ERROR.value, "SystemError"))
                    set_mapped_error()
                    logger.error(
                        "grpc_mapped_error",
                        method=method,
                        code=str(BusinessCode.SYSTEM_ERROR.value),
                        status=str(grpc.StatusCode.INTERNAL),
                        message=str(exc),
                        exc_info=True,
                    )
                    await context.abort(grpc.StatusCode.INTERNAL, "Internal server error")
            return _call

        return wrap_handler(handler, _wrap)
