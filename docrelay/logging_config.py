"""Logging setup and a latency-tracking decorator for pipeline operations."""

import asyncio
import logging
import time
from functools import wraps
from typing import Callable, Union


def setup_logging(level: Union[int, str] = logging.INFO):
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def log_latency(operation_name: str):
    def decorator(func: Callable):
        logger = logging.getLogger(func.__module__)

        def _report(start: float, error: Exception = None):
            latency_ms = (time.perf_counter() - start) * 1000
            if error is None:
                logger.info(f"{operation_name} | latency_ms={latency_ms:.2f} | status=success")
            else:
                logger.error(f"{operation_name} | latency_ms={latency_ms:.2f} | status=error | error={error}")

        @wraps(func)
        async def async_wrapper(*args, **kwargs):
            start = time.perf_counter()
            try:
                result = await func(*args, **kwargs)
            except Exception as e:
                _report(start, e)
                raise
            _report(start)
            return result

        @wraps(func)
        def sync_wrapper(*args, **kwargs):
            start = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                _report(start, e)
                raise
            _report(start)
            return result

        if asyncio.iscoroutinefunction(func):
            return async_wrapper
        return sync_wrapper

    return decorator
