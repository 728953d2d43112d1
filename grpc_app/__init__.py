"""gRPC transport layer for the order lookup service.

This package hosts:
- The protocol buffer schema (in `protos/`) and Python stubs (in `generated/`).
- Server bootstrap and interceptors.
- The OrderManagement servicer, which adapts gRPC streams to the
  application-level stream ports.
- An async client wrapper.
"""
