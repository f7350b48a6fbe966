"""Tests for Pydantic data models."""

import pytest
from pydantic import ValidationError

from node_rpc_middleware.core.models import CallDescriptor, Dialect, RpcRequest, RpcResponse


def test_rpc_request_defaults():
    """Test RpcRequest defaults."""
    request = RpcRequest(id=1, method="chain.id")

    assert request.jsonrpc == "2.0"
    assert request.params == []
    assert request.origin is None


def test_rpc_request_keeps_extra_fields():
    """Test that unknown fields validate but are not part of the normalized request."""
    request = RpcRequest.model_validate(
        {"id": 1, "jsonrpc": "2.0", "method": "foo", "params": [], "extra": "x", "origin": "dapp.io"}
    )

    assert request.extra == "x"
    assert request.normalized() == {"id": 1, "jsonrpc": "2.0", "method": "foo", "params": []}


def test_rpc_request_requires_method():
    """Test that a request without a method is rejected."""
    with pytest.raises(ValidationError):
        RpcRequest.model_validate({"id": 1, "params": []})


def test_rpc_response_is_mutable():
    """Test RpcResponse can be written in place."""
    response = RpcResponse(id=7)
    response.result = {"ok": True}

    assert response.result == {"ok": True}
    assert response.error is None


def test_call_descriptor_is_frozen():
    """Test CallDescriptor cannot be changed once built."""
    call = CallDescriptor(url="https://example.org", http_method="GET")

    assert call.body is None
    with pytest.raises(ValidationError):
        call.url = "https://other.org"


def test_call_descriptor_rejects_unknown_http_method():
    """Test only GET and POST are accepted."""
    with pytest.raises(ValidationError):
        CallDescriptor(url="https://example.org", http_method="PUT")


def test_dialect_enum_values():
    """Test Dialect enum values."""
    assert Dialect.JSON_RPC.value == "jsonrpc"
    assert Dialect.REST.value == "rest"
