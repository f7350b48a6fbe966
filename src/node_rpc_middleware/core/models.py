"""Data models for RPC requests, responses, and outbound HTTP calls."""

from enum import StrEnum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class Dialect(StrEnum):
    """Calling convention of a node backend."""

    JSON_RPC = "jsonrpc"
    REST = "rest"


class RpcRequest(BaseModel):
    """
    Inbound JSON-RPC request.

    Unknown fields are accepted so richer engine request objects validate,
    but only the canonical fields are ever forwarded upstream.

    Attributes
    ----------
    id : int | str | None
        Request identifier
    jsonrpc : str
        Protocol version string
    method : str
        RPC method name (e.g. 'chain.id', 'getAccount')
    params : list[Any]
        Positional parameters
    origin : str, optional
        Origin of the request, used for the Source header

    """

    model_config = ConfigDict(extra="allow")

    id: int | str | None = None
    jsonrpc: str = "2.0"
    method: str
    params: list[Any] = Field(default_factory=list)
    origin: str | None = None

    def normalized(self) -> dict[str, Any]:
        """Return only ``id``, ``jsonrpc``, ``method`` and ``params``."""
        return {
            "id": self.id,
            "jsonrpc": self.jsonrpc,
            "method": self.method,
            "params": self.params,
        }


class RpcResponse(BaseModel):
    """
    JSON-RPC response holder, written in place by the middleware.

    Attributes
    ----------
    id : int | str | None
        Identifier of the request being answered
    jsonrpc : str
        Protocol version string
    result : Any
        Successful result
    error : dict | None
        JSON-RPC error object

    """

    id: int | str | None = None
    jsonrpc: str = "2.0"
    result: Any = None
    error: dict[str, Any] | None = None


class CallDescriptor(BaseModel):
    """
    Fully resolved outbound HTTP call for one attempt.

    Attributes
    ----------
    url : str
        Target URL
    http_method : str
        'GET' or 'POST'
    headers : dict[str, str]
        Request headers
    body : str | None
        Encoded request body, None when no body is sent

    """

    model_config = ConfigDict(frozen=True)

    url: str
    http_method: Literal["GET", "POST"]
    headers: dict[str, str] = Field(default_factory=dict)
    body: str | None = None
