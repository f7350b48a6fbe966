"""Retry logic with a fixed delay for forwarded RPC calls."""

import asyncio
import logging
from collections.abc import Awaitable, Callable, Iterable
from typing import TypeVar

from node_rpc_middleware.core.errors import RetriesExhausted, describe_error

logger = logging.getLogger(__name__)

T = TypeVar("T")

#: Error text markers that make a failure worth retrying
RETRIABLE_ERROR_PHRASES: tuple[str, ...] = (
    # server overload
    "Gateway timeout",
    "ETIMEDOUT",
    "ECONNRESET",
    # html error pages or truncated json bodies
    "SyntaxError",
)


def is_retriable_error(exc: BaseException, phrases: Iterable[str] = RETRIABLE_ERROR_PHRASES) -> bool:
    """
    Check whether an error is transient and the call can be retried.

    Matching is done on the error text, not on its type, so both the
    errors built from HTTP statuses and low-level transport faults are
    classified the same way.

    Parameters
    ----------
    exc : BaseException
        Error raised by an attempt
    phrases : Iterable[str]
        Retriable markers

    Returns
    -------
    bool
        True if the error text contains any of the markers

    """
    description = describe_error(exc)
    return any(phrase in description for phrase in phrases)


class RetryConfig:
    """
    Configuration for retry behavior.

    Parameters
    ----------
    max_attempts : int
        Total number of attempts, including the first one
    delay : float
        Seconds to wait between attempts
    retriable_phrases : tuple[str, ...]
        Markers passed to :py:func:`is_retriable_error`

    """

    def __init__(
        self,
        max_attempts: int = 5,
        delay: float = 1.0,
        retriable_phrases: tuple[str, ...] = RETRIABLE_ERROR_PHRASES,
    ) -> None:
        self.max_attempts = max_attempts
        self.delay = delay
        self.retriable_phrases = retriable_phrases

    def get_delay(self, attempt: int) -> float:
        """
        Delay before the attempt following ``attempt``.

        The delay is constant: no backoff, no jitter.

        Parameters
        ----------
        attempt : int
            Attempt that just failed (1-indexed)

        Returns
        -------
        float
            Delay in seconds

        """
        return self.delay


class RetryManager:
    """
    Runs an async operation until it succeeds, fails terminally, or runs out of attempts.

    Parameters
    ----------
    config : RetryConfig | None
        Retry configuration
    sleep : Callable[[float], Awaitable[None]] | None
        Coroutine used to wait between attempts. Defaults to :py:func:`asyncio.sleep`.

    """

    def __init__(
        self,
        config: RetryConfig | None = None,
        sleep: Callable[[float], Awaitable[None]] | None = None,
    ) -> None:
        self.config = config or RetryConfig()
        self.sleep = sleep or asyncio.sleep

    async def execute(self, operation: Callable[[], Awaitable[T]], description: str = "request") -> T:
        """
        Execute an operation with retry.

        Parameters
        ----------
        operation : Callable[[], Awaitable[T]]
            Zero-argument coroutine function performing one attempt
        description : str
            Label used in log messages (e.g. the RPC method)

        Returns
        -------
        T
            Result of the first successful attempt

        Raises
        ------
        RetriesExhausted
            If the last attempt failed with a retriable error
        Exception
            Any non-retriable error, unwrapped, as soon as it happens

        """
        max_attempts = self.config.max_attempts

        for attempt in range(1, max_attempts + 1):
            try:
                return await operation()
            except Exception as e:
                if not is_retriable_error(e, self.config.retriable_phrases):
                    raise

                if attempt == max_attempts:
                    logger.warning("%s failed after %d attempts: %s", description, max_attempts, e)
                    raise RetriesExhausted(e) from e

                delay = self.config.get_delay(attempt)
                logger.debug(
                    "%s failed (attempt %d/%d), retrying in %.1fs: %s",
                    description,
                    attempt,
                    max_attempts,
                    delay,
                    e,
                )
                await self.sleep(delay)

        msg = f"max_attempts must be at least 1, got {max_attempts}"
        raise ValueError(msg)
