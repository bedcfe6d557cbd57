import threading
import time

import pytest

from saffron2d.thread_pool import ThreadPool


def test_all_dispatched_jobs_run():
    results = []
    lock = threading.Lock()

    def job(n):
        def inner():
            with lock:
                results.append(n)
        return inner

    pool = ThreadPool()
    for n in range(5):
        assert pool.dispatch_work(f"job-{n}", job(n)) is True
    pool.collect_all()
    assert sorted(results) == [0, 1, 2, 3, 4]


def test_duplicate_id_rejected_while_running():
    release = threading.Event()
    pool = ThreadPool()
    assert pool.dispatch_work("load", lambda: release.wait(5.0)) is True
    assert pool.dispatch_work("load", lambda: None) is False
    release.set()
    pool.collect_all()
    ran = []
    assert pool.dispatch_work("load", lambda: ran.append(True)) is True
    pool.collect_all()
    assert ran == [True]


def test_exception_in_job_keeps_pool_usable():
    def boom():
        raise RuntimeError("fail")

    pool = ThreadPool(max_threads=1)
    assert pool.dispatch_work("job", boom) is True
    pool.collect_all()
    ran = []
    assert pool.dispatch_work("job", lambda: ran.append("ok")) is True
    pool.collect_all()
    assert ran == ["ok"]


def test_single_thread_runs_jobs_one_after_another():
    order = []

    def slow():
        time.sleep(0.1)
        order.append("a")

    pool = ThreadPool(max_threads=1, poll_interval=0.01)
    assert pool.dispatch_work("slow", slow)
    assert pool.dispatch_work("fast", lambda: order.append("b"))
    pool.collect_all()
    assert order == ["a", "b"]


def test_context_manager_collects_on_exit():
    done = []
    with ThreadPool() as pool:
        pool.dispatch_work("work", lambda: (time.sleep(0.05), done.append(1)))
    assert done == [1]


def test_invalid_thread_count():
    with pytest.raises(ValueError):
        ThreadPool(max_threads=0)