"""
Shared business codes used across layers (Domain/Application/gRPC).

Single source of truth for the codes carried in the `x-biz-code`
trailing metadata of failed calls.
"""
from enum import IntEnum


class BusinessCode(IntEnum):
    """Unified business status codes."""

    # Success
    SUCCESS = 0

    # Parameter errors (1xxxx)
    PARAM_ERROR = 10000
    PARAM_MISSING = 10001
    PARAM_TYPE_ERROR = 10002
    PARAM_VALIDATION_ERROR = 10003

    # Business errors (2xxxx)
    BUSINESS_ERROR = 20000
    NOT_FOUND = 20006

    # System errors (4xxxx)
    SYSTEM_ERROR = 40000
    NETWORK_ERROR = 40002
    SERVICE_UNAVAILABLE = 40003


__all__ = ["BusinessCode"]
