"""Reshape decoded backend bodies into JSON-RPC responses."""

from collections.abc import MutableMapping
from typing import Any

from node_rpc_middleware.core.errors import InternalError
from node_rpc_middleware.core.models import Dialect, RpcRequest, RpcResponse


def to_number(value: Any) -> int | float:
    """
    Convert a numeric string from a REST body into a number.

    Parameters
    ----------
    value : Any
        Value such as ``"1024"`` or ``1024``

    Returns
    -------
    int | float
        ``int`` when the value is integral, ``float`` otherwise

    Raises
    ------
    InternalError
        If the value is missing or not numeric

    """
    # digit strings stay exact, u64 heights do not fit a float
    if isinstance(value, str) and value.isdigit():
        return int(value)
    if isinstance(value, int) and not isinstance(value, bool):
        return value

    try:
        number = float(value)
    except (TypeError, ValueError) as e:
        msg = f"Expected a numeric value from the node, got {value!r}"
        raise InternalError(msg) from e
    return int(number) if number.is_integer() else number


def _set(response: RpcResponse | MutableMapping[str, Any], field: str, value: Any) -> None:
    if isinstance(response, MutableMapping):
        response[field] = value
    else:
        setattr(response, field, value)


def reshape_rest_result(network: str, method: str, data: Any) -> Any:
    """
    Shape a REST body into the result the caller expects for ``method``.

    Parameters
    ----------
    network : str
        Configured network identifier
    method : str
        Inbound RPC method
    data : Any
        Decoded REST body

    Returns
    -------
    Any
        Reshaped result

    """
    if method in ("chain.id", "chain.info") and not isinstance(data, dict):
        msg = f"Unexpected response body for '{method}': {data!r}"
        raise InternalError(msg)

    if method == "chain.id":
        return {"id": data.get("chain_id"), "name": network}
    if method == "chain.info":
        return {"head": {"number": to_number(data.get("block_height"))}}
    return data


def normalize_response(
    dialect: Dialect,
    network: str,
    data: Any,
    request: RpcRequest,
    response: RpcResponse | MutableMapping[str, Any],
) -> None:
    """
    Write a decoded backend body into the response holder.

    Parameters
    ----------
    dialect : Dialect
        Backend dialect of the configured network
    network : str
        Configured network identifier
    data : Any
        Decoded JSON body
    request : RpcRequest
        Inbound request
    response : RpcResponse | MutableMapping[str, Any]
        Holder written in place

    """
    if dialect is Dialect.REST:
        # computed before writing so a reshaping failure leaves the holder untouched
        result = reshape_rest_result(network, request.method, data)
        _set(response, "result", result)
        return

    body = data if isinstance(data, dict) else {}
    _set(response, "result", body.get("result"))
    _set(response, "error", body.get("error"))
