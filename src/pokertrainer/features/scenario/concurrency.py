"""Thread pool used by async handlers to run the synchronous scenario core."""

from __future__ import annotations

import asyncio
import os
import threading
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from functools import partial
from typing import Any, TypeVar

__all__ = ["run_blocking", "shutdown_executor"]

T = TypeVar("T")

_MAX_WORKERS = max(1, min(8, os.cpu_count() or 1))
_EXECUTOR: ThreadPoolExecutor | None = None
_EXECUTOR_LOCK = threading.Lock()


def _executor() -> ThreadPoolExecutor:
    global _EXECUTOR
    with _EXECUTOR_LOCK:
        if _EXECUTOR is None:
            _EXECUTOR = ThreadPoolExecutor(max_workers=_MAX_WORKERS, thread_name_prefix="scenario-worker")
        return _EXECUTOR


async def run_blocking(func: Callable[..., T], /, *args: Any, **kwargs: Any) -> T:
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(_executor(), partial(func, *args, **kwargs))


def shutdown_executor() -> None:
    """Stop the worker pool; the next ``run_blocking`` call starts a new one."""

    global _EXECUTOR
    with _EXECUTOR_LOCK:
        if _EXECUTOR is not None:
            _EXECUTOR.shutdown(wait=True)
            _EXECUTOR = None
