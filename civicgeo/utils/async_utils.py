"""
Helpers for running the async boundary fetch from synchronous callers (CLI).
"""

import asyncio
import concurrent.futures
from typing import Any, Coroutine


def run_async_safe(coro: Coroutine) -> Any:
    """
    Execute a coroutine from sync code, whether or not a loop is already running.

    Without a running loop the coroutine goes through ``asyncio.run``; inside
    a running loop (e.g. a notebook) it runs on a fresh loop in a worker thread.

    Args:
        coro: The coroutine to execute

    Returns:
        The result of the coroutine execution
    """
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return asyncio.run(coro)

    with concurrent.futures.ThreadPoolExecutor(max_workers=1) as executor:
        return executor.submit(asyncio.run, coro).result()
