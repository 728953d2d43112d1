"""Message classes for orders/v1/order.proto.

The file descriptor is assembled with descriptor_pb2 and registered in the
default pool, so no protoc run is needed at install time. Keep it in sync
with grpc_app/protos/orders/v1/order.proto.
"""
from __future__ import annotations

from google.protobuf import descriptor_pb2, descriptor_pool, message_factory


_FILE_NAME = "orders/v1/order.proto"
_PACKAGE = "orders.v1"

_STRING = descriptor_pb2.FieldDescriptorProto.TYPE_STRING
_OPTIONAL = descriptor_pb2.FieldDescriptorProto.LABEL_OPTIONAL


def _build_file() -> descriptor_pb2.FileDescriptorProto:
    fdp = descriptor_pb2.FileDescriptorProto(name=_FILE_NAME, package=_PACKAGE, syntax="proto3")

    req = fdp.message_type.add(name="OrderRequest")
    req.field.add(name="items", number=1, type=_STRING, label=_OPTIONAL, json_name="items")

    resp = fdp.message_type.add(name="OrderResponse")
    resp.field.add(name="itemName", number=1, type=_STRING, label=_OPTIONAL, json_name="itemName")
    resp.field.add(name="timeStamp", number=2, type=_STRING, label=_OPTIONAL, json_name="timeStamp")

    svc = fdp.service.add(name="OrderManagement")
    svc.method.add(
        name="GetOrderServerStreaming",
        input_type=f".{_PACKAGE}.OrderRequest",
        output_type=f".{_PACKAGE}.OrderResponse",
        server_streaming=True,
    )
    svc.method.add(
        name="GetOrderBidirectional",
        input_type=f".{_PACKAGE}.OrderRequest",
        output_type=f".{_PACKAGE}.OrderResponse",
        client_streaming=True,
        server_streaming=True,
    )
    return fdp


_pool = descriptor_pool.Default()
try:
    DESCRIPTOR = _pool.FindFileByName(_FILE_NAME)
except KeyError:
    DESCRIPTOR = _pool.AddSerializedFile(_build_file().SerializeToString())

OrderRequest = message_factory.GetMessageClass(DESCRIPTOR.message_types_by_name["OrderRequest"])
OrderResponse = message_factory.GetMessageClass(DESCRIPTOR.message_types_by_name["OrderResponse"])

__all__ = ["DESCRIPTOR", "OrderRequest", "OrderResponse"]
