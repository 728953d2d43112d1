"""Interactive client for the order lookup service.

Usage:
    python grpc_client.py [--target host:port]

Asks for one server-streaming query, then for bidirectional queries one
per line (an empty line ends input), and logs every returned order.
"""
from __future__ import annotations

import argparse
import asyncio
import sys
from typing import List, Optional, TextIO

import grpc

from core.config import settings
from core.logging_config import get_logger
from grpc_app.client import OrderClient, open_channel


logger = get_logger(__name__)


def read_server_streaming_query(stream: Optional[TextIO] = None) -> str:
    stream = stream or sys.stdin
    print("Enter order for Server streaming:")
    return stream.readline().rstrip("\n")


def read_bidirectional_queries(stream: Optional[TextIO] = None) -> List[str]:
    stream = stream or sys.stdin
    print("Enter orders (one per line) for Bidirectional streaming, press 'Enter' twice to finish:")
    orders: List[str] = []
    for line in stream:
        text = line.rstrip("\n")
        if text == "":
            break
        orders.append(text)
    return orders


async def run(target: str, query: str, orders: List[str]) -> int:
    async with open_channel(target) as channel:
        client = OrderClient(channel)
        try:
            for order in await client.get_order_server_streaming(query):
                logger.info("order", item_name=order.item_name, time_stamp=order.time_stamp)

            for order in await client.get_order_bidirectional(orders):
                logger.info("order", item_name=order.item_name, time_stamp=order.time_stamp)
        except grpc.aio.AioRpcError as exc:
            logger.error("grpc_call_failed", target=target, code=str(exc.code()), details=exc.details())
            return 1
    return 0


def main(argv: List[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Order lookup client")
    parser.add_argument("--target", default=settings.client.target, help="server address host:port")
    args = parser.parse_args(argv)
    # stdin is read up front so nothing blocks the event loop
    query = read_server_streaming_query()
    orders = read_bidirectional_queries()
    return asyncio.run(run(args.target, query, orders))


if __name__ == "__main__":
    sys.exit(main())
