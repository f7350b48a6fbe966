"""Construction-time configuration for the middleware."""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, ValidationError, field_validator

from node_rpc_middleware.core.errors import ConfigError
from node_rpc_middleware.core.models import Dialect
from node_rpc_middleware.data.loader import get_rest_networks, get_url_template
from node_rpc_middleware.rpc.retry import RETRIABLE_ERROR_PHRASES

DEFAULT_NETWORK = "mainnet"
DEFAULT_MAX_ATTEMPTS = 5
DEFAULT_RETRY_DELAY = 1.0
DEFAULT_TIMEOUT = 30.0


class MiddlewareConfig(BaseModel):
    """
    Validated middleware options. Immutable once built.

    Attributes
    ----------
    network : str
        Network identifier, selects the backend dialect
    credential_id : str
        Project/credential id issued by the node provider
    extra_headers : dict[str, str]
        Headers added to every outbound call
    max_attempts : int
        Total attempts per request, including the first one
    source_tag : str | None
        When set, a ``Source: <source_tag>/<origin>`` header is sent
    retry_delay : float
        Seconds to wait between attempts
    timeout : float
        Per-request HTTP timeout in seconds
    rest_networks : frozenset[str]
        Networks served by the REST-style backend
    jsonrpc_url_template : str
        Endpoint template for the JSON-RPC backend
    rest_url_template : str
        Base URL template for the REST backend
    retriable_phrases : tuple[str, ...]
        Markers that make an error retriable

    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    network: str = DEFAULT_NETWORK
    credential_id: StrictStr = Field(min_length=1)
    extra_headers: dict[StrictStr, StrictStr] = Field(default_factory=dict)
    max_attempts: StrictInt = Field(default=DEFAULT_MAX_ATTEMPTS, ge=1)
    source_tag: str | None = None
    retry_delay: float = Field(default=DEFAULT_RETRY_DELAY, ge=0)
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    rest_networks: frozenset[str] = Field(default_factory=get_rest_networks)
    jsonrpc_url_template: str = Field(default_factory=lambda: get_url_template(Dialect.JSON_RPC))
    rest_url_template: str = Field(default_factory=lambda: get_url_template(Dialect.REST))
    retriable_phrases: tuple[str, ...] = RETRIABLE_ERROR_PHRASES

    @field_validator("network", mode="before")
    @classmethod
    def _default_network(cls, value: Any) -> Any:
        return value or DEFAULT_NETWORK

    @field_validator("max_attempts", mode="before")
    @classmethod
    def _default_max_attempts(cls, value: Any) -> Any:
        return DEFAULT_MAX_ATTEMPTS if value is None else value


def resolve_config(options: Mapping[str, Any] | None = None, **overrides: Any) -> MiddlewareConfig:
    """
    Validate middleware options and apply defaults.

    Parameters
    ----------
    options : Mapping[str, Any] | None
        Option mapping
    **overrides
        Options given as keywords, taking precedence over ``options``

    Returns
    -------
    MiddlewareConfig
        Frozen, validated configuration

    Raises
    ------
    ConfigError
        If ``credential_id`` is missing or not a non-empty string,
        ``extra_headers`` is not a string mapping, or ``max_attempts``
        is not a positive integer, or an unknown option is given

    Examples
    --------
    >>> config = resolve_config(credential_id="my-project", network="devnet")
    >>> config.max_attempts
    5

    """
    merged = {**(options or {}), **overrides}
    try:
        return MiddlewareConfig(**merged)
    except ValidationError as e:
        fields = ", ".join(".".join(str(part) for part in err["loc"]) for err in e.errors())
        msg = f"Invalid middleware options ({fields}): {e}"
        raise ConfigError(msg, data={"fields": [list(err["loc"]) for err in e.errors()]}) from e
