import threading
import traceback
import time

import pytest

from ftl_i18n.lazy import Lazy


def test_value_is_built_once():
    calls = []
    cell = Lazy(lambda: calls.append(1) or object())

    assert not cell.initialized
    first = cell.get()
    assert cell.get() is first
    assert cell.initialized
    assert len(calls) == 1


def test_concurrent_first_use_runs_factory_once():
    calls = []
    lock = threading.Lock()

    def factory():
        with lock:
            calls.append(1)
        time.sleep(0.05)
        return object()

    cell = Lazy(factory)
    barrier = threading.Barrier(8)
    results = []

    def worker():
        barrier.wait()
        results.append(cell.get())

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(calls) == 1
    assert len(results) == 8
    assert all(r is results[0] for r in results)


def test_failure_is_cached():
    calls = []

    def factory():
        calls.append(1)
        raise RuntimeError("boom")

    cell = Lazy(factory)
    for _ in range(3):
        with pytest.raises(RuntimeError, match="boom"):
            cell.get()

    assert len(calls) == 1
    assert cell.initialized


def test_repeated_failures_keep_traceback_length():
    cell = Lazy(lambda: 1 / 0)
    lengths = []

    for _ in range(20):
        try:
            cell.get()
        except ZeroDivisionError as e:
            lengths.append(len(traceback.extract_tb(e.__traceback__)))

    assert len(lengths) == 20
    assert len(set(lengths)) == 1
