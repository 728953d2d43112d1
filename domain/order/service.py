"""
订单领域服务 - 响应组装
"""
from __future__ import annotations

import time
from typing import Callable

from .entity import OrderResponse


Clock = Callable[[], float]


class ResponseAssembler:
    """Builds one OrderResponse per matched catalog entry.

    The timestamp is read from the clock on every call, so responses of the
    same batch may carry different values.
    """

    def __init__(self, clock: Clock = time.time) -> None:
        self._clock = clock

    def timestamp(self) -> str:
        # Unix seconds, second resolution
        return str(int(self._clock()))

    def assemble(self, matched_name: str) -> OrderResponse:
        return OrderResponse(item_name=matched_name, time_stamp=self.timestamp())
