"""Simple thread-based background worker with retries and dead-lettering."""

from __future__ import annotations

import asyncio
import logging
import time
import uuid
from concurrent.futures import Future, ThreadPoolExecutor
from collections import deque
from typing import Any, Callable, Dict, Tuple

logger = logging.getLogger(__name__)

_executor = ThreadPoolExecutor(max_workers=4, thread_name_prefix="mailer")
_tasks: Dict[str, Future] = {}
# Failed jobs kept for inspection: (function name, args, kwargs, exception)
dead_letter_queue: deque[Tuple[str, tuple, dict, Exception]] = deque(maxlen=500)


def _run_with_retry(
    func: Callable[..., Any], *args: Any, retries: int = 3, backoff: float = 1, **kwargs: Any
) -> Any:
    """Execute ``func`` with retry and linear backoff."""

    for attempt in range(1, retries + 1):
        try:
            return func(*args, **kwargs)
        except Exception as exc:
            logger.error(
                "Background task %s failed on attempt %s/%s: %s", func.__name__, attempt, retries, exc
            )
            if attempt == retries:
                dead_letter_queue.append((func.__name__, args, kwargs, exc))
                raise
            time.sleep(backoff * attempt)


def _on_done(task_id: str, keep_result: bool, future: Future) -> None:
    if not keep_result:
        _tasks.pop(task_id, None)
    if not future.cancelled() and future.exception() is not None:
        logger.warning("Background task %s gave up: %s", task_id, future.exception())


def enqueue(
    func: Callable[..., Any],
    *args: Any,
    retries: int = 3,
    backoff: float = 1,
    keep_result: bool = True,
    **kwargs: Any,
) -> str:
    """Submit ``func`` to the worker and return a task id.

    With ``keep_result=False`` the task is forgotten once it finishes, so
    :func:`result` can no longer be awaited for it.
    """

    task_id = str(uuid.uuid4())
    future = _executor.submit(_run_with_retry, func, *args, retries=retries, backoff=backoff, **kwargs)
    _tasks[task_id] = future
    future.add_done_callback(lambda f: _on_done(task_id, keep_result, f))
    return task_id


async def result(task_id: str) -> Any:
    """Return the result for ``task_id`` or raise its exception."""

    future = _tasks.get(task_id)
    if future is None:
        raise KeyError(task_id)
    return await asyncio.wrap_future(future)
