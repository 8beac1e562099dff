"""Logging helpers."""

import functools
import logging

logger = logging.getLogger(__name__)


def log_call(fn):
    @functools.wraps(fn)
    def __wrapped(*args, **kwargs):
        logger.debug(f"Calling {fn.__qualname__} {args} {kwargs}")
        return fn(*args, **kwargs)
    return __wrapped
