"""Retry policy for calls to third-party HTTP APIs"""

import logging
from functools import partial

import httpx
from fastapi import HTTPException
from tenacity import retry, retry_if_exception, stop_after_attempt, wait_random
from tenacity.wait import wait_base

import settings
from services.slack import slack
from utils.logs import humanize_milliseconds, ratelimited_log

logger = logging.getLogger("dailyverse.api.retry")


def exception_from_response(response: httpx.Response, prefix=None) -> HTTPException:
    """Create an HTTPException from a httpx response"""
    return HTTPException(
        status_code=response.status_code,
        detail=f"{prefix}: {response.text}" if prefix else response.text,
        headers=response.headers,
    )


def is_transient(exception: BaseException) -> bool:
    """Transport failures, throttling and server errors are worth a retry"""
    if isinstance(exception, httpx.TransportError):
        return True
    if isinstance(exception, HTTPException):
        return exception.status_code == 429 or exception.status_code >= 500
    return False


class wait_retry_after_or_default(wait_base):
    def __init__(self, default_wait):
        self.default_wait = default_wait

    def __call__(self, retry_state):
        ex = retry_state.outcome.exception()
        if isinstance(ex, HTTPException):
            retry_after = (getattr(ex, "headers", None) or {}).get("Retry-After")
            if retry_after is not None:
                try:
                    wait_seconds = max(0, int(retry_after))
                except ValueError:
                    return self.default_wait(retry_state)
                ratelimited_log(60 * 60)(
                    slack.send_message, "Rate-limited by a third-party API"
                )
                logger.debug(
                    f"Rate-limited, retry after {humanize_milliseconds(wait_seconds * 1000)}"
                )
                return 0 if settings.TESTING_MODE else wait_seconds
        return self.default_wait(retry_state)


def before_sleep_log_concise(logger, log_level):
    def log_it(retry_state):
        wait = retry_state.next_action.sleep if retry_state.next_action else None
        wait_str = (
            humanize_milliseconds(wait * 1000) if wait is not None else "unknown time"
        )
        fn_name = retry_state.fn.__qualname__
        exception = retry_state.outcome.exception() if retry_state.outcome else None
        msg = f"Retrying {fn_name} in {wait_str}"
        if exception:
            status_code = getattr(exception, "status_code", None)
            msg += f" as it raised {type(exception).__name__}:"
            if status_code:
                msg += f" {status_code}:"
            msg += f" {exception}"
        logger.log(log_level, msg)

    return log_it


api_retry = partial(
    retry,
    retry=retry_if_exception(is_transient),
    before_sleep=before_sleep_log_concise(logger, logging.DEBUG),
    wait=wait_retry_after_or_default(
        default_wait=wait_random(0, 0 if settings.TESTING_MODE else 0.5)
    ),
    stop=stop_after_attempt(2),
    reraise=True,
)
