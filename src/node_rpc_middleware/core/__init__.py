"""Core functionality including models, errors, configuration, and the middleware handler."""

from node_rpc_middleware.core.config import MiddlewareConfig, resolve_config
from node_rpc_middleware.core.errors import (
    ConfigError,
    GatewayTimeout,
    InternalError,
    InvalidParams,
    InvalidRequest,
    MethodNotFound,
    MiddlewareError,
    RateLimited,
    ResponseParseError,
    RetriesExhausted,
    TransportFault,
)
from node_rpc_middleware.core.middleware import NodeRpcMiddleware, create_middleware
from node_rpc_middleware.core.models import CallDescriptor, Dialect, RpcRequest, RpcResponse

__all__ = [
    "CallDescriptor",
    "ConfigError",
    "Dialect",
    "GatewayTimeout",
    "InternalError",
    "InvalidParams",
    "InvalidRequest",
    "MethodNotFound",
    "MiddlewareConfig",
    "MiddlewareError",
    "NodeRpcMiddleware",
    "RateLimited",
    "ResponseParseError",
    "RetriesExhausted",
    "RpcRequest",
    "RpcResponse",
    "TransportFault",
    "create_middleware",
    "resolve_config",
]
