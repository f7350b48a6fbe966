"""Forwarding middleware: one inbound RPC request in, one backend HTTP call (with retry) out."""

import logging
from collections.abc import Awaitable, Callable, Mapping, MutableMapping
from typing import Any

import httpx
from pydantic import ValidationError

from node_rpc_middleware.core.config import MiddlewareConfig, resolve_config
from node_rpc_middleware.core.errors import InvalidRequest, MiddlewareError
from node_rpc_middleware.core.models import CallDescriptor, Dialect, RpcRequest, RpcResponse
from node_rpc_middleware.rpc.adapter import fetch_config_from_request
from node_rpc_middleware.rpc.dialect import select_dialect
from node_rpc_middleware.rpc.normalizer import normalize_response
from node_rpc_middleware.rpc.retry import RetryConfig, RetryManager
from node_rpc_middleware.rpc.transport import HttpTransport

logger = logging.getLogger(__name__)


class NodeRpcMiddleware:
    """
    Async JSON-RPC handler forwarding requests to a node backend.

    The instance is the handler a middleware engine calls with
    ``(request, response)``: on success the response is written in place,
    on failure a :py:class:`MiddlewareError` is raised and the response is
    left untouched.

    Parameters
    ----------
    config : MiddlewareConfig | None
        Validated configuration. Built from ``options`` if None.
    client : httpx.AsyncClient | None
        HTTP client to use. A client is created (and owned) if None.
    sleep : Callable[[float], Awaitable[None]] | None
        Coroutine used to wait between attempts
    **options
        Configuration options, see :py:func:`resolve_config`

    Raises
    ------
    ConfigError
        If the options are invalid

    Examples
    --------
    >>> async with NodeRpcMiddleware(credential_id="my-project", network="devnet") as mw:
    ...     response = await mw.handle({"id": 1, "method": "chain.id", "params": []})

    """

    def __init__(
        self,
        config: MiddlewareConfig | None = None,
        *,
        client: httpx.AsyncClient | None = None,
        sleep: Callable[[float], Awaitable[None]] | None = None,
        **options: Any,
    ) -> None:
        self.config = config or resolve_config(options)
        self.dialect: Dialect = select_dialect(self.config.network, self.config.rest_networks)
        self.transport = HttpTransport(client, timeout=self.config.timeout)
        self.retry_manager = RetryManager(
            RetryConfig(
                max_attempts=self.config.max_attempts,
                delay=self.config.retry_delay,
                retriable_phrases=self.config.retriable_phrases,
            ),
            sleep=sleep,
        )

    def fetch_config_from_request(self, request: RpcRequest | Mapping[str, Any]) -> CallDescriptor:
        """
        Resolve the outbound HTTP call for a request without sending it.

        Parameters
        ----------
        request : RpcRequest | Mapping[str, Any]
            Inbound request

        Returns
        -------
        CallDescriptor
            URL, HTTP method, headers, and body

        """
        return fetch_config_from_request(self.dialect, self.config, _as_request(request))

    async def __call__(
        self,
        request: RpcRequest | Mapping[str, Any],
        response: RpcResponse | MutableMapping[str, Any],
    ) -> None:
        """
        Forward a request and write the backend answer into ``response``.

        Parameters
        ----------
        request : RpcRequest | Mapping[str, Any]
            Inbound request
        response : RpcResponse | MutableMapping[str, Any]
            Response holder, written in place on success

        Raises
        ------
        MiddlewareError
            Non-retriable errors as they happen, or
            :py:class:`RetriesExhausted` after the last retriable failure

        """
        request = _as_request(request)

        async def attempt() -> None:
            call = fetch_config_from_request(self.dialect, self.config, request)
            data = await self.transport.fetch(call)
            normalize_response(self.dialect, self.config.network, data, request, response)

        await self.retry_manager.execute(attempt, description=f"RPC call {request.method}")

    async def handle(self, request: RpcRequest | Mapping[str, Any]) -> RpcResponse:
        """
        Forward a request and return a complete JSON-RPC response.

        Middleware errors are reported in ``error`` instead of being raised.

        Parameters
        ----------
        request : RpcRequest | Mapping[str, Any]
            Inbound request

        Returns
        -------
        RpcResponse
            Response carrying either the backend answer or the error object

        """
        try:
            request = _as_request(request)
        except InvalidRequest as e:
            return RpcResponse(id=_recoverable_id(request), error=e.to_dict())

        response = RpcResponse(id=request.id, jsonrpc=request.jsonrpc)
        try:
            await self(request, response)
        except MiddlewareError as e:
            logger.debug("RPC call %s failed: %s", request.method, e)
            return RpcResponse(id=request.id, jsonrpc=request.jsonrpc, error=e.to_dict())
        return response

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self.transport.aclose()

    async def __aenter__(self) -> "NodeRpcMiddleware":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: type, exc_val: Exception, exc_tb: object) -> None:
        """Async context manager exit."""
        await self.aclose()


def _as_request(request: RpcRequest | Mapping[str, Any]) -> RpcRequest:
    if isinstance(request, RpcRequest):
        return request
    try:
        return RpcRequest.model_validate(dict(request))
    except ValidationError as e:
        raise InvalidRequest(data={"detail": str(e)}) from e


def _recoverable_id(request: Mapping[str, Any]) -> int | str | None:
    # JSON-RPC 2.0: id is null when it cannot be determined
    request_id = request.get("id")
    if isinstance(request_id, (int, str)) and not isinstance(request_id, bool):
        return request_id
    return None


def create_middleware(**options: Any) -> NodeRpcMiddleware:
    """
    Create a forwarding middleware handler.

    Parameters
    ----------
    **options
        Configuration options (``network``, ``credential_id``,
        ``extra_headers``, ``max_attempts``, ``source_tag``, ...) plus the
        ``client`` and ``sleep`` collaborators

    Returns
    -------
    NodeRpcMiddleware
        Handler callable as ``await handler(request, response)``

    Raises
    ------
    ConfigError
        If the options are invalid

    """
    client = options.pop("client", None)
    sleep = options.pop("sleep", None)
    return NodeRpcMiddleware(client=client, sleep=sleep, **options)
