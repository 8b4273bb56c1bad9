"""Timing utilities"""
import logging
import time
from contextlib import contextmanager

logger = logging.getLogger(__name__)


@contextmanager
def timed(action: str, **props):
    """Log elapsed time of an operation at debug level"""
    start = time.perf_counter()
    try:
        yield
    finally:
        elapsed_ms = (time.perf_counter() - start) * 1000
        details = ", ".join(f"{k}={v}" for k, v in props.items())
        if details:
            logger.debug(f"[{action}] {elapsed_ms:.1f} ms ({details})")
        else:
            logger.debug(f"[{action}] {elapsed_ms:.1f} ms")
