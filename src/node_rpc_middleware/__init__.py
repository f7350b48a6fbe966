"""JSON-RPC forwarding middleware for JSON-RPC and REST blockchain node backends."""

from node_rpc_middleware.core import (
    CallDescriptor,
    ConfigError,
    Dialect,
    MiddlewareConfig,
    MiddlewareError,
    NodeRpcMiddleware,
    RetriesExhausted,
    RpcRequest,
    RpcResponse,
    create_middleware,
    resolve_config,
)
from node_rpc_middleware.rpc import fetch_config_from_request, is_retriable_error, select_dialect

__all__ = [
    "CallDescriptor",
    "ConfigError",
    "Dialect",
    "MiddlewareConfig",
    "MiddlewareError",
    "NodeRpcMiddleware",
    "RetriesExhausted",
    "RpcRequest",
    "RpcResponse",
    "create_middleware",
    "fetch_config_from_request",
    "is_retriable_error",
    "resolve_config",
    "select_dialect",
]
