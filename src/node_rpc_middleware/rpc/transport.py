"""HTTP execution of outbound calls and classification of their failures."""

import logging
from typing import Any

import httpx

from node_rpc_middleware.core.errors import (
    GatewayTimeout,
    InternalError,
    MethodNotFound,
    RateLimited,
    ResponseParseError,
    TransportFault,
)
from node_rpc_middleware.core.models import CallDescriptor

logger = logging.getLogger(__name__)

#: httpx exception classes and the errno-style marker they are reported with
TRANSPORT_FAULT_MARKERS: tuple[tuple[type[httpx.TransportError], str], ...] = (
    (httpx.TimeoutException, "ETIMEDOUT"),
    (httpx.ConnectError, "ECONNREFUSED"),
    (httpx.ReadError, "ECONNRESET"),
    (httpx.WriteError, "ECONNRESET"),
    (httpx.RemoteProtocolError, "ECONNRESET"),
)


def error_for_status(status_code: int, body: str) -> InternalError | MethodNotFound:
    """
    Map an unsuccessful HTTP status to an RPC error.

    Parameters
    ----------
    status_code : int
        HTTP status of the response
    body : str
        Raw response body

    Returns
    -------
    InternalError | MethodNotFound
        Error to raise for the status

    """
    if status_code == 405:
        return MethodNotFound()
    if status_code == 429:
        return RateLimited()
    if status_code in (503, 504):
        return GatewayTimeout()
    return InternalError(body, data={"status": status_code})


def translate_transport_error(exc: httpx.TransportError) -> TransportFault:
    """
    Convert an httpx transport exception into a :py:class:`TransportFault`.

    Parameters
    ----------
    exc : httpx.TransportError
        Exception raised by httpx before a response was received

    Returns
    -------
    TransportFault
        Fault carrying the matching errno-style marker, if any

    """
    marker = None
    for exc_class, candidate in TRANSPORT_FAULT_MARKERS:
        if isinstance(exc, exc_class):
            marker = candidate
            break
    return TransportFault(marker, str(exc) or type(exc).__name__)


class HttpTransport:
    """
    Executes call descriptors over an :py:class:`httpx.AsyncClient`.

    Parameters
    ----------
    client : httpx.AsyncClient | None
        Client to send requests with. A caller-supplied client is not closed
        by :py:meth:`aclose`.
    timeout : float
        Request timeout in seconds for the client created here

    """

    def __init__(self, client: httpx.AsyncClient | None = None, timeout: float = 30.0) -> None:
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(timeout=timeout)

    async def fetch(self, call: CallDescriptor) -> Any:
        """
        Send one call and decode its JSON body.

        Parameters
        ----------
        call : CallDescriptor
            Outbound call

        Returns
        -------
        Any
            Decoded JSON body

        Raises
        ------
        MethodNotFound
            On HTTP 405
        InternalError
            On any other non-2xx status, including the rate limit and
            gateway timeout subclasses
        TransportFault
            If the request failed before a response was read
        ResponseParseError
            If the body cannot be content-decoded, or a successful
            response is not valid JSON

        """
        logger.debug("%s %s", call.http_method, call.url)
        try:
            response = await self.client.request(
                call.http_method,
                call.url,
                headers=call.headers,
                content=call.body,
            )
        except httpx.TransportError as e:
            raise translate_transport_error(e) from e
        except httpx.DecodingError as e:
            # corrupt or truncated content-encoded body
            raise ResponseParseError(str(e)) from e

        raw_data = response.text
        if not response.is_success:
            raise error_for_status(response.status_code, raw_data)

        try:
            return response.json()
        except ValueError as e:
            raise ResponseParseError(str(e)) from e

    async def aclose(self) -> None:
        """Close the HTTP client if it was created here."""
        if self._owns_client:
            await self.client.aclose()
