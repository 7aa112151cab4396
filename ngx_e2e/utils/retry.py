"""Retry decorator for journeys that drive imprecise widgets."""

from __future__ import annotations

import functools
import logging

logger = logging.getLogger("ngx-e2e.retry")


def self_healing_retry(max_retries: int = 3):
    """Decorator that retries a failing test up to *max_retries* times.

    Intended for tests marked with ``@pytest.mark.self_healing``.  Each
    failed attempt is logged with its reason; the last failure is re-raised.
    """
    if max_retries < 1:
        raise ValueError("max_retries must be at least 1")

    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            last_exc: Exception | None = None
            for attempt in range(1, max_retries + 1):
                try:
                    return func(*args, **kwargs)
                except Exception as exc:
                    last_exc = exc
                    logger.warning(
                        "Self-healing retry %d/%d for %s: %s",
                        attempt,
                        max_retries,
                        func.__name__,
                        exc,
                    )
            raise last_exc  # type: ignore[misc]

        return wrapper

    return decorator
