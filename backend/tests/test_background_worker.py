import asyncio
import time

import pytest

from connectagrapher.utils import background_worker as worker


def test_enqueue_returns_result():
    task_id = worker.enqueue(lambda x: x * 2, 21)
    assert asyncio.run(worker.result(task_id)) == 42


def test_failed_job_is_retried_then_dead_lettered():
    calls = []

    def flaky():
        calls.append(1)
        raise RuntimeError("nope")

    task_id = worker.enqueue(flaky, retries=2, backoff=0)
    with pytest.raises(RuntimeError):
        asyncio.run(worker.result(task_id))
    assert len(calls) == 2
    name, _args, _kwargs, exc = worker.dead_letter_queue[-1]
    assert name == "flaky"
    assert str(exc) == "nope"


def test_unknown_task_id():
    with pytest.raises(KeyError):
        asyncio.run(worker.result("missing"))


def test_fire_and_forget_tasks_are_released():
    task_ids = [worker.enqueue(lambda: None, keep_result=False) for _ in range(20)]
    deadline = time.monotonic() + 5
    while any(t in worker._tasks for t in task_ids) and time.monotonic() < deadline:
        time.sleep(0.01)
    assert not any(t in worker._tasks for t in task_ids)
    with pytest.raises(KeyError):
        asyncio.run(worker.result(task_ids[0]))
