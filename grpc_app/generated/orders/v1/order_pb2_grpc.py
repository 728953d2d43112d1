"""Client and server classes for orders.v1.OrderManagement.

Mirrors the layout grpcio-tools emits for order.proto.
"""
import grpc

from grpc_app.generated.orders.v1 import order_pb2 as orders_dot_v1_dot_order__pb2


SERVICE_NAME = "orders.v1.OrderManagement"


class OrderManagementStub(object):
    """Missing associated documentation comment in .proto file."""

    def __init__(self, channel):
        """Constructor.

        Args:
            channel: A grpc.Channel or grpc.aio.Channel.
        """
        self.GetOrderServerStreaming = channel.unary_stream(
            f"/{SERVICE_NAME}/GetOrderServerStreaming",
            request_serializer=orders_dot_v1_dot_order__pb2.OrderRequest.SerializeToString,
            response_deserializer=orders_dot_v1_dot_order__pb2.OrderResponse.FromString,
        )
        self.GetOrderBidirectional = channel.stream_stream(
            f"/{SERVICE_NAME}/GetOrderBidirectional",
            request_serializer=orders_dot_v1_dot_order__pb2.OrderRequest.SerializeToString,
            response_deserializer=orders_dot_v1_dot_order__pb2.OrderResponse.FromString,
        )


class OrderManagementServicer(object):
    """Missing associated documentation comment in .proto file."""

    def GetOrderServerStreaming(self, request, context):
        context.set_code(grpc.StatusCode.UNIMPLEMENTED)
        context.set_details("Method not implemented!")
        raise NotImplementedError("Method not implemented!")

    def GetOrderBidirectional(self, request_iterator, context):
        context.set_code(grpc.StatusCode.UNIMPLEMENTED)
        context.set_details("Method not implemented!")
        raise NotImplementedError("Method not implemented!")


def add_OrderManagementServicer_to_server(servicer, server):
    rpc_method_handlers = {
        "GetOrderServerStreaming": grpc.unary_stream_rpc_method_handler(
            servicer.GetOrderServerStreaming,
            request_deserializer=orders_dot_v1_dot_order__pb2.OrderRequest.FromString,
            response_serializer=orders_dot_v1_dot_order__pb2.OrderResponse.SerializeToString,
        ),
        "GetOrderBidirectional": grpc.stream_stream_rpc_method_handler(
            servicer.GetOrderBidirectional,
            request_deserializer=orders_dot_v1_dot_order__pb2.OrderRequest.FromString,
            response_serializer=orders_dot_v1_dot_order__pb2.OrderResponse.SerializeToString,
        ),
    }
    generic_handler = grpc.method_handlers_generic_handler(SERVICE_NAME, rpc_method_handlers)
    server.add_generic_rpc_handlers((generic_handler,))
