"""RPC layer: dialect selection, request adapter, HTTP transport, retry, and response normalizer."""

from node_rpc_middleware.rpc.adapter import REST_PATHS, build_headers, fetch_config_from_request, resolve_rest_url
from node_rpc_middleware.rpc.dialect import select_dialect
from node_rpc_middleware.rpc.normalizer import normalize_response, reshape_rest_result
from node_rpc_middleware.rpc.retry import RETRIABLE_ERROR_PHRASES, RetryConfig, RetryManager, is_retriable_error
from node_rpc_middleware.rpc.transport import HttpTransport, error_for_status, translate_transport_error

__all__ = [
    "REST_PATHS",
    "RETRIABLE_ERROR_PHRASES",
    "HttpTransport",
    "RetryConfig",
    "RetryManager",
    "build_headers",
    "error_for_status",
    "fetch_config_from_request",
    "is_retriable_error",
    "normalize_response",
    "reshape_rest_result",
    "resolve_rest_url",
    "select_dialect",
    "translate_transport_error",
]
