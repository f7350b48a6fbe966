"""Packaged backend catalogue and its loader."""

from node_rpc_middleware.data.loader import (
    get_backend_config,
    get_rest_networks,
    get_url_template,
    load_backends,
)

__all__ = [
    "get_backend_config",
    "get_rest_networks",
    "get_url_template",
    "load_backends",
]
