"""Shared error handling utilities for API routers."""

from __future__ import annotations

import functools
import logging
from typing import Any, Callable, Coroutine, TypeVar

from fastapi import HTTPException

from portfolio_pulse.core.errors import NewsFetchError, ValidationError

T = TypeVar("T")

logger = logging.getLogger(__name__)

NEWS_UNAVAILABLE_DETAIL = "Failed to load news. Please try again later."


def service_error_handler(
    *,
    value_error_status: int = 400,
    upstream_error_status: int = 502,
) -> Callable[
    [Callable[..., Coroutine[Any, Any, T]]],
    Callable[..., Coroutine[Any, Any, T]],
]:
    """Decorator that maps common service exceptions to HTTPException."""

    def decorator(
        fn: Callable[..., Coroutine[Any, Any, T]],
    ) -> Callable[..., Coroutine[Any, Any, T]]:
        @functools.wraps(fn)
        async def wrapper(*args: Any, **kwargs: Any) -> T:
            try:
                return await fn(*args, **kwargs)
            except NewsFetchError as exc:
                logger.warning("news upstream failed: %s", exc)
                raise HTTPException(
                    status_code=upstream_error_status, detail=NEWS_UNAVAILABLE_DETAIL
                ) from exc
            except (ValidationError, ValueError) as exc:
                raise HTTPException(
                    status_code=value_error_status, detail=str(exc)
                ) from exc

        return wrapper

    return decorator
