import logging
import warnings
from typing import Callable

from cachetools.func import ttl_cache


def setup_logs():
    warnings.simplefilter("default")
    logging.getLogger("dailyverse").setLevel(logging.DEBUG)
    logging.basicConfig()


def humanize_milliseconds(elapsed):
    """Write a millisecond amount in a human-readable way.
    >>> humanize_milliseconds(0)
    '0 ms.'
    >>> humanize_milliseconds(65*1000)
    '1\\'5"'
    >>> humanize_milliseconds(30*1000)
    '30"'
    >>> humanize_milliseconds((115*60 + 10)*1000)
    "1h55'"
    """
    elapsed = int(elapsed)
    if elapsed <= 5000:
        return f"{elapsed:,} ms."
    elapsed /= 1000.0
    if elapsed >= 60 * 90:
        hours = int(elapsed / 3600)
        minutes = int((elapsed % 3600) / 60)
        return f"{hours}h{minutes}'"
    if elapsed >= 60:
        minutes = int(elapsed / 60)
        seconds = int(elapsed - minutes * 60)
        return f"{minutes}'{seconds}\""
    if elapsed == int(elapsed):
        return f'{int(elapsed)}"'
    return f'{elapsed:.1f}"'


loggers: dict[int, Callable] = {}


def ratelimited_log(delay_or_fn: int | Callable, msg=None):
    """Log the same message at most once every `delay` seconds.

    ratelimited_log(logger.warning, "msg") uses a one-minute window,
    ratelimited_log(3600)(logger.warning, "msg") a custom one.
    """
    if callable(delay_or_fn):
        logger_method = delay_or_fn
        delay = 60
    else:
        delay = delay_or_fn
        logger_method = None

    if delay not in loggers:

        @ttl_cache(ttl=delay)
        def call(logger_method, message):
            logger_method(message)

        loggers[delay] = call

    if logger_method is not None:
        return loggers[delay](logger_method, msg)
    return loggers[delay]
