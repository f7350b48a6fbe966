"""Pytest configuration for node-rpc-middleware tests."""

import httpx
import pytest
from node_doubles import MockNode, RecordingSleep

from node_rpc_middleware.core.middleware import NodeRpcMiddleware


@pytest.fixture
def sleep():
    return RecordingSleep()


@pytest.fixture
def make_middleware(sleep):
    """Build a middleware wired to a scripted node."""

    def _make(node: MockNode, **options) -> NodeRpcMiddleware:
        options.setdefault("credential_id", "test-project")
        client = httpx.AsyncClient(transport=httpx.MockTransport(node))
        return NodeRpcMiddleware(client=client, sleep=sleep, **options)

    return _make
