"""Backend catalogue loader."""

from pathlib import Path
from typing import Any

import yaml


def load_backends() -> dict[str, Any]:
    """
    Load the packaged backend catalogue from backends.yaml.

    Returns
    -------
    dict[str, Any]
        Backend configuration keyed by dialect name ('jsonrpc', 'rest')

    """
    path = Path(__file__).parent / "backends.yaml"
    with open(path, encoding="utf-8") as f:
        return yaml.safe_load(f)


def get_backend_config(dialect: str) -> dict[str, Any]:
    """
    Get configuration for a single backend dialect.

    Parameters
    ----------
    dialect : str
        Dialect name ('jsonrpc' or 'rest')

    Returns
    -------
    dict[str, Any]
        Backend configuration including the URL template

    Raises
    ------
    KeyError
        If the dialect is not found in the catalogue

    """
    backends = load_backends()
    return backends[str(dialect)]


def get_url_template(dialect: str) -> str:
    """
    Get the base URL template for a dialect.

    Parameters
    ----------
    dialect : str
        Dialect name

    Returns
    -------
    str
        URL template with a ``{network}`` placeholder

    """
    return get_backend_config(dialect)["url_template"]


def get_rest_networks() -> frozenset[str]:
    """
    Get the network names served by the REST-style backend.

    Returns
    -------
    frozenset[str]
        Network names using the REST dialect

    """
    networks = get_backend_config("rest").get("networks") or []
    return frozenset(networks)
