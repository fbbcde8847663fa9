"""Повторы запроса токена при сетевых сбоях."""

from __future__ import annotations

import logging
from typing import Tuple, Type

from google.auth.exceptions import TransportError
from tenacity import (  # type: ignore
    RetryCallState,
    Retrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_random_exponential,
)

RETRYABLE_ERRORS: Tuple[Type[BaseException], ...] = (TransportError,)


def create_retrying(
    *,
    name: str,
    logger: logging.Logger,
    attempts: int = 3,
    max_delay: float = 10.0,
    exceptions: Tuple[Type[BaseException], ...] = RETRYABLE_ERRORS,
) -> Retrying:
    """Создать ретраер; ошибки разбора ответа и отказы сервера не повторяются."""

    def _log_retry(state: RetryCallState) -> None:  # pragma: no cover - логирование
        if state.outcome is None or state.outcome.exception() is None:
            return
        logger.warning(
            "%s: попытка %s/%s не удалась: %s",
            name,
            state.attempt_number,
            attempts,
            state.outcome.exception(),
        )

    return Retrying(
        retry=retry_if_exception_type(exceptions),
        stop=stop_after_attempt(max(attempts, 1)),
        wait=wait_random_exponential(multiplier=1.0, max=max_delay),
        before_sleep=_log_retry,
        reraise=True,
    )
