"""Error taxonomy for the forwarding middleware.

Codes follow the JSON-RPC 2.0 numbering used by Ethereum-style providers,
so a caught error can be dropped straight into a response envelope with
:py:meth:`MiddlewareError.to_dict`.
"""

from typing import Any

#: JSON-RPC 2.0 error codes
PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603


class MiddlewareError(Exception):
    """
    Base class for all errors raised by the middleware.

    Parameters
    ----------
    message : str
        Human readable description
    code : int
        JSON-RPC error code
    data : Any, optional
        Extra payload for the error object

    """

    code: int = INTERNAL_ERROR
    default_message: str = "Internal JSON-RPC error."

    def __init__(self, message: str | None = None, *, code: int | None = None, data: Any = None) -> None:
        self.message = message or self.default_message
        if code is not None:
            self.code = code
        self.data = data
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> dict[str, Any]:
        """
        Render as a JSON-RPC error object.

        Returns
        -------
        dict[str, Any]
            ``{"code", "message"}`` plus ``"data"`` when set

        """
        error: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.data is not None:
            error["data"] = self.data
        return error


class ConfigError(MiddlewareError):
    """Invalid construction-time options."""


class InvalidRequest(MiddlewareError):
    """The inbound request is not a valid JSON-RPC request object."""

    code = INVALID_REQUEST
    default_message = "The JSON sent is not a valid Request object."


class MethodNotFound(MiddlewareError):
    """The backend does not support the requested method (HTTP 405)."""

    code = METHOD_NOT_FOUND
    default_message = "The method does not exist / is not available."


class InvalidParams(MiddlewareError):
    """The request parameters cannot be mapped onto the backend call."""

    code = INVALID_PARAMS
    default_message = "Invalid method parameter(s)."


class InternalError(MiddlewareError):
    """The backend answered with an unsuccessful HTTP status."""


class RateLimited(InternalError):
    """HTTP 429 from the backend."""

    default_message = "Request is being rate limited."


class GatewayTimeout(InternalError):
    """HTTP 503 or 504 from the backend."""

    default_message = (
        "Gateway timeout. The request took too long to process. "
        "This can happen when querying logs over too wide a block range."
    )


class ResponseParseError(InternalError):
    """The response body could not be decoded as JSON."""

    code = PARSE_ERROR

    def __init__(self, detail: str, **kwargs: Any) -> None:
        super().__init__(f"SyntaxError: {detail}", **kwargs)


class TransportFault(InternalError):
    """
    Low-level HTTP failure before a response was received.

    Parameters
    ----------
    marker : str | None
        POSIX-style errno name (e.g. 'ETIMEDOUT') prefixed to the message
    detail : str
        Message of the underlying transport exception

    """

    def __init__(self, marker: str | None, detail: str, **kwargs: Any) -> None:
        self.marker = marker
        message = f"{marker}: {detail}" if marker else detail
        super().__init__(message, **kwargs)


class RetriesExhausted(MiddlewareError):
    """
    The final permitted attempt failed with a retriable error.

    Parameters
    ----------
    original : BaseException
        The last underlying error

    """

    def __init__(self, original: BaseException) -> None:
        self.original = original
        message = (
            "Provider - cannot complete request. All retries exhausted.\n"
            f"Original Error:\n{describe_error(original)}\n\n"
        )
        super().__init__(message)


def describe_error(exc: BaseException) -> str:
    """
    Render an error as ``"<ClassName>: <message>"``.

    This is the text retriability phrases are matched against.
    """
    detail = str(exc)
    name = type(exc).__name__
    return f"{name}: {detail}" if detail else name
