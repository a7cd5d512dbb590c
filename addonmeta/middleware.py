"""Middleware that wraps a validator's run function."""

from __future__ import annotations

import functools
import time
from abc import ABC, abstractmethod
from typing import Any, Callable

from addonmeta.result import Result

RunFunc = Callable[[Any], Result]


class Middleware(ABC):
    """Wraps a run function with extra behaviour."""

    @abstractmethod
    def wrap(self, run: RunFunc) -> RunFunc:
        """Return a new run function built around the given one."""


class RetryMiddleware(Middleware):
    """Retries a run while it returns a retryable error."""

    def __init__(self, max_attempts: int = 5, delay: float = 2.0) -> None:
        if max_attempts < 0:
            raise ValueError(f"max_attempts must be non-negative, not {max_attempts}")
        self.max_attempts = max_attempts or 5
        self.delay = delay

    def wrap(self, run: RunFunc) -> RunFunc:
        @functools.wraps(run)
        def wrapped(meta_bundle: Any) -> Result:
            result = run(meta_bundle)
            for _ in range(self.max_attempts - 1):
                if not result.is_retryable_error():
                    return result
                time.sleep(self.delay)
                result = run(meta_bundle)
            return result

        return wrapped