from __future__ import annotations

from typing import Optional, Sequence
import grpc
from grpc_health.v1 import health, health_pb2_grpc, health_pb2

from application.services.order_service import OrderApplicationService
from core.config import Settings, settings as default_settings
from core.logging_config import get_logger
from domain.order import Catalog
from grpc_app.interceptors.request_id import RequestIdInterceptor
from grpc_app.interceptors.logging import LoggingInterceptor
from grpc_app.interceptors.exceptions import ExceptionMappingInterceptor
from grpc_app.generated.orders.v1 import order_pb2_grpc
from grpc_app.services.order_service import OrderService


logger = get_logger(__name__)


def build_catalog(cfg: Settings) -> Catalog:
    return Catalog(cfg.catalog.items)


def default_interceptors() -> Sequence[grpc.aio.ServerInterceptor]:
    return (
        RequestIdInterceptor(),
        LoggingInterceptor(),
        ExceptionMappingInterceptor(),  # maps business exceptions
    )


def _server_credentials(cfg: Settings) -> grpc.ServerCredentials:
    tls = cfg.grpc.tls
    if not (tls.cert and tls.key):
        raise RuntimeError("GRPC TLS enabled but cert/key not provided")
    with open(tls.cert, "rb") as f:
        cert_chain = f.read()
    with open(tls.key, "rb") as f:
        private_key = f.read()
    root_certificates = None
    if tls.ca:
        with open(tls.ca, "rb") as f:
            root_certificates = f.read()
    return grpc.ssl_server_credentials(
        [(private_key, cert_chain)],
        root_certificates=root_certificates,
        require_client_auth=bool(root_certificates),
    )


async def create_server(
    cfg: Optional[Settings] = None,
    *,
    catalog: Optional[Catalog] = None,
    address: Optional[str] = None,
) -> tuple[grpc.aio.Server, int]:
    """Build the server and bind its port; returns (server, bound_port).

    `address` overrides host:port from settings (tests bind 127.0.0.1:0).
    """
    cfg = cfg or default_settings
    catalog = catalog if catalog is not None else build_catalog(cfg)

    options = [
        ("grpc.max_concurrent_streams", max(1, cfg.grpc.max_concurrent_streams)),
    ]
    server = grpc.aio.server(interceptors=default_interceptors(), options=options)

    # Register services
    app_service = OrderApplicationService(catalog)
    order_pb2_grpc.add_OrderManagementServicer_to_server(OrderService(app_service), server)

    # Health service
    health_svc = health.aio.HealthServicer()
    health_pb2_grpc.add_HealthServicer_to_server(health_svc, server)
    await health_svc.set("", health_pb2.HealthCheckResponse.SERVING)
    await health_svc.set(order_pb2_grpc.SERVICE_NAME, health_pb2.HealthCheckResponse.SERVING)

    # Bind address
    address = address or f"{cfg.grpc.host}:{cfg.grpc.port}"
    if cfg.grpc.tls.enabled:
        port = server.add_secure_port(address, _server_credentials(cfg))
    else:
        port = server.add_insecure_port(address)

    logger.info("grpc_catalog_loaded", size=len(app_service.catalog))
    return server, port
