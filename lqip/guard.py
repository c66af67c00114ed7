"""Escalate uncaught asyncio failures to a process exit."""

from __future__ import annotations

import asyncio
import logging
import os
from typing import Any

logger = logging.getLogger(__name__)


def _exit(exc: BaseException) -> None:
    raise SystemExit(1) from exc


def _escalate(loop: asyncio.AbstractEventLoop, context: dict[str, Any]) -> None:
    exc = context.get("exception")
    if exc is None:
        # notices such as "Unclosed transport" carry no exception
        loop.default_exception_handler(context)
        return

    logger.critical("Unhandled asynchronous failure: %s", context.get("message"), exc_info=exc)
    # raising here is swallowed when called from a task finalizer; Handle._run re-raises SystemExit
    if loop.is_running():
        loop.call_soon_threadsafe(_exit, exc)
    else:
        os._exit(1)


def install_failure_guard(loop: asyncio.AbstractEventLoop | None = None) -> None:
    """Register the escalating exception handler on ``loop`` (the running loop by default).

    Only the first call per loop has an effect. A handler the application
    already set on the loop is left in place.
    """
    if loop is None:
        loop = asyncio.get_running_loop()
    if loop.get_exception_handler() is not None:
        return
    loop.set_exception_handler(_escalate)
    logger.debug("Installed failure guard on %r", loop)
