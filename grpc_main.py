import asyncio

from core.config import settings
from core.logging_config import get_logger
from grpc_app.server import create_server


logger = get_logger(__name__)


async def main() -> None:
    if not settings.grpc.enabled:
        logger.warning("grpc_disabled", message="gRPC disabled by config (GRPC__ENABLED=false)")
        return

    server, port = await create_server()
    address = f"{settings.grpc.host}:{port}"
    logger.info("grpc_starting", address=address, tls=settings.grpc.tls.enabled)
    await server.start()
    logger.info("grpc_started", address=address)
    try:
        await server.wait_for_termination()
    except asyncio.CancelledError:
        logger.info("grpc_stopping")
        await server.stop(grace=None)
        raise


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        pass
