from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TypeVar

import structlog
from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential_jitter,
)

from storefront_state.core.application.ports.common.exceptions import CatalogFetchError

logger = structlog.get_logger()

_T = TypeVar("_T")


def _is_transient_catalog_failure(exc: BaseException) -> bool:
    return isinstance(exc, CatalogFetchError) and exc.retryable


def _log_retry(state: RetryCallState) -> None:
    error = state.outcome.exception() if state.outcome else None
    logger.warning(
        "Retrying catalog call",
        attempt=state.attempt_number,
        wait_seconds=state.next_action.sleep if state.next_action else 0,
        status_code=getattr(error, "status_code", None),
    )


@dataclass(frozen=True)
class RetryPolicy:
    """In-cycle retries for catalog reads.

    One attempt by default: the alert scheduler's next cycle already acts as
    the retry for a failed fetch.
    """

    max_attempts: int = 1
    initial_wait: float = 0.25
    max_wait: float = 5.0
    jitter: float = 1.0

    async def run(self, fn: Callable[[], Awaitable[_T]]) -> _T:
        retrying = AsyncRetrying(
            retry=retry_if_exception(_is_transient_catalog_failure),
            stop=stop_after_attempt(self.max_attempts),
            wait=wait_exponential_jitter(initial=self.initial_wait, max=self.max_wait, jitter=self.jitter),
            before_sleep=_log_retry,
            reraise=True,
        )
        return await retrying(fn)
