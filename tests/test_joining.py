import os
import threading
import time

import pytest

from threadkit.joining import (
    JoiningThread,
    ThreadGuard,
    hardware_concurrency,
    run_detached,
)


def _slow_append(results, item, delay=0.05):
    time.sleep(delay)
    results.append(item)


def test_empty_handle_is_not_joinable():
    handle = JoiningThread()
    assert handle.joinable() is False
    assert handle.ident() is None


def test_join_on_empty_handle_raises():
    with pytest.raises(RuntimeError):
        JoiningThread().join()


def test_detach_on_empty_handle_raises():
    with pytest.raises(RuntimeError):
        JoiningThread().detach()


def test_start_then_join_runs_target():
    results = []
    handle = JoiningThread().start(_slow_append, results, "a")
    assert handle.joinable() is True
    handle.join()
    assert results == ["a"]
    assert handle.joinable() is False


def test_start_twice_raises():
    gate = threading.Event()
    handle = JoiningThread().start(gate.wait)
    try:
        with pytest.raises(RuntimeError):
            handle.start(gate.wait)
    finally:
        gate.set()
        handle.join()


def test_context_manager_joins_on_exit():
    results = []
    with JoiningThread() as handle:
        handle.start(_slow_append, results, 1)
    assert results == [1]
    assert handle.joinable() is False


def test_adopt_running_thread():
    results = []
    thread = threading.Thread(target=_slow_append, args=(results, "x"))
    thread.start()
    with JoiningThread(thread) as handle:
        assert handle.ident() == thread.ident
    assert results == ["x"]


def test_adopt_starts_unstarted_thread():
    results = []
    thread = threading.Thread(target=_slow_append, args=(results, "y"))
    handle = JoiningThread(thread)
    assert handle.ident() == thread.ident
    assert thread.ident is not None
    handle.join()
    assert results == ["y"]
    assert handle.joinable() is False


def test_take_joins_current_thread_first_and_empties_source():
    first_results = []
    gate = threading.Event()
    j1 = JoiningThread().start(_slow_append, first_results, "first")
    j3 = JoiningThread().start(gate.wait)
    moved_ident = j3.ident()
    j1.take(j3)
    assert first_results == ["first"]
    assert j3.joinable() is False
    assert j1.ident() == moved_ident
    gate.set()
    j1.join()


def test_take_self_is_noop():
    gate = threading.Event()
    handle = JoiningThread().start(gate.wait)
    ident = handle.ident()
    handle.take(handle)
    assert handle.ident() == ident
    gate.set()
    handle.join()


def test_swap_exchanges_threads():
    gate = threading.Event()
    a = JoiningThread().start(gate.wait)
    b = JoiningThread()
    ident = a.ident()
    a.swap(b)
    assert a.joinable() is False
    assert b.ident() == ident
    gate.set()
    b.join()


def test_detach_releases_thread_without_waiting():
    gate = threading.Event()
    handle = JoiningThread().start(gate.wait)
    thread = handle.detach()
    assert handle.joinable() is False
    assert thread.is_alive() is True
    gate.set()
    thread.join()
    assert thread.is_alive() is False


def test_thread_guard_joins_all_threads():
    results = []
    with ThreadGuard() as guard:
        for i in range(10):
            guard.add(threading.Thread(target=_slow_append, args=(results, i, 0.01)))
    assert sorted(results) == list(range(10))


def test_thread_guard_joins_when_block_raises():
    results = []
    with pytest.raises(ValueError):
        with ThreadGuard(threading.Thread(target=_slow_append, args=(results, "done"))):
            raise ValueError("boom")
    assert results == ["done"]


def test_run_detached_returns_daemon_thread():
    done = threading.Event()
    thread = run_detached(done.set)
    assert thread.daemon is True
    assert done.wait(5) is True


def test_hardware_concurrency_matches_cpu_count():
    assert hardware_concurrency() == (os.cpu_count() or 0)