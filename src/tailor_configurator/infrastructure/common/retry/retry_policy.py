from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TypeVar

from tenacity import (
    AsyncRetrying,
    RetryError,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential_jitter,
)

from tailor_configurator.core.application.ports.common.exceptions import ProviderError

_T = TypeVar("_T")


def _is_transient(exc: BaseException) -> bool:
    return isinstance(exc, ProviderError) and exc.retryable


@dataclass(frozen=True)
class RetryPolicy:
    """Retries transient storefront failures with jittered exponential backoff.

    Only ProviderErrors flagged retryable are retried; anything else propagates on
    the first attempt. Order submission never goes through a policy.
    """

    max_attempts: int = 1  # fail fast by default
    initial_wait: float = 0.25
    max_wait: float = 5.0
    jitter: float = 0.5

    async def run(self, fn: Callable[[], Awaitable[_T]]) -> _T:
        try:
            return await self._retrying()(fn)
        except RetryError as err:
            raise err.last_attempt.result()  # type: ignore[misc]

    def _retrying(self) -> AsyncRetrying:
        return AsyncRetrying(
            retry=retry_if_exception(_is_transient),
            stop=stop_after_attempt(max(1, self.max_attempts)),
            wait=wait_exponential_jitter(
                initial=self.initial_wait, max=self.max_wait, jitter=self.jitter
            ),
            reraise=True,
        )
