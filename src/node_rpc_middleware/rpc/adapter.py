"""Translate inbound RPC requests into outbound HTTP calls."""

import json
from typing import TYPE_CHECKING

from node_rpc_middleware.core.errors import InvalidParams
from node_rpc_middleware.core.models import CallDescriptor, Dialect, RpcRequest

if TYPE_CHECKING:
    from node_rpc_middleware.core.config import MiddlewareConfig

#: REST sub-paths keyed by inbound method, filled with ``params[0]``
REST_PATHS: dict[str, str] = {
    "state.list_resource": "accounts/{0}/resources",
    "getAccount": "accounts/{0}",
    "chain.get_transaction_info": "transactions/by_hash/{0}",
}

DEFAULT_HEADERS: dict[str, str] = {
    "Accept": "application/json",
    "Content-Type": "application/json",
}


def build_headers(config: "MiddlewareConfig", request: RpcRequest) -> dict[str, str]:
    """
    Build outbound headers for a request.

    Parameters
    ----------
    config : MiddlewareConfig
        Middleware configuration
    request : RpcRequest
        Inbound request

    Returns
    -------
    dict[str, str]
        Extra headers overlaid with the JSON content headers, plus
        ``Source`` when a source tag is configured

    """
    headers = {**config.extra_headers, **DEFAULT_HEADERS}
    if config.source_tag:
        origin = request.origin or "internal"
        headers["Source"] = f"{config.source_tag}/{origin}"
    return headers


def resolve_rest_url(config: "MiddlewareConfig", request: RpcRequest) -> str:
    """
    Resolve the REST URL for a request.

    Parameters
    ----------
    config : MiddlewareConfig
        Middleware configuration
    request : RpcRequest
        Inbound request

    Returns
    -------
    str
        Base URL with the method's sub-path appended. Methods without a
        known sub-path get the base URL unchanged.

    Raises
    ------
    InvalidParams
        If the method needs ``params[0]`` and no params were given

    """
    base_url = config.rest_url_template.format(network=config.network)
    path = REST_PATHS.get(request.method)
    if path is None:
        return base_url

    if not request.params:
        msg = f"Method '{request.method}' requires an address or hash as its first parameter"
        raise InvalidParams(msg)

    return base_url + path.format(request.params[0])


def fetch_config_from_request(dialect: Dialect, config: "MiddlewareConfig", request: RpcRequest) -> CallDescriptor:
    """
    Produce the outbound HTTP call for an inbound request.

    Parameters
    ----------
    dialect : Dialect
        Backend dialect of the configured network
    config : MiddlewareConfig
        Middleware configuration
    request : RpcRequest
        Inbound request

    Returns
    -------
    CallDescriptor
        URL, HTTP method, headers, and body for one attempt

    """
    headers = build_headers(config, request)

    if dialect is Dialect.REST:
        return CallDescriptor(
            url=resolve_rest_url(config, request),
            http_method="GET",
            headers=headers,
        )

    # strict nodes reject unknown keys, so only the canonical fields go out
    return CallDescriptor(
        url=config.jsonrpc_url_template.format(network=config.network),
        http_method="POST",
        headers=headers,
        body=json.dumps(request.normalized(), separators=(",", ":")),
    )
