"""Tests for the packaged backend catalogue."""

import pytest

from node_rpc_middleware.data import get_backend_config, get_rest_networks, get_url_template, load_backends


def test_load_backends():
    """Test the catalogue lists both dialects."""
    backends = load_backends()

    assert set(backends) == {"jsonrpc", "rest"}


def test_get_url_template():
    """Test URL templates carry a network placeholder."""
    assert get_url_template("jsonrpc") == "https://{network}-seed.starcoin.org"
    assert get_url_template("rest") == "https://fullnode.{network}.aptoslabs.com/v1/"

    for dialect in ("jsonrpc", "rest"):
        template = get_url_template(dialect)
        assert template.startswith("https://")
        assert "{network}" in template


def test_get_rest_networks():
    """Test REST networks are read from the catalogue."""
    networks = get_rest_networks()

    assert isinstance(networks, frozenset)
    assert "devnet" in networks
    assert "mainnet" not in networks


def test_unknown_dialect():
    """Test an unknown dialect raises KeyError."""
    with pytest.raises(KeyError):
        get_backend_config("graphql")
