import threading

import pytest

from threadkit.spawn import Box, consume_in_thread, increment_in_thread, run_in_thread


def test_run_in_thread_returns_result():
    assert run_in_thread(lambda s: s.upper(), "wg") == "WG"


def test_run_in_thread_passes_keyword_arguments():
    assert run_in_thread(lambda a, b=0: (a, b), 3, b=4) == (3, 4)


def test_run_in_thread_runs_in_another_thread():
    main_ident = threading.get_ident()
    assert run_in_thread(threading.get_ident) != main_ident
    assert run_in_thread(lambda: threading.current_thread() is threading.main_thread()) is False


def test_run_in_thread_reraises_error():
    def fail():
        raise KeyError("missing")

    with pytest.raises(KeyError):
        run_in_thread(fail)


def test_run_in_thread_with_bound_method():
    class Worker:
        def __init__(self):
            self.calls = []

        def do_lengthy_work(self):
            self.calls.append("do_lengthy_work")
            return len(self.calls)

    worker = Worker()
    assert run_in_thread(worker.do_lengthy_work) == 1
    assert worker.calls == ["do_lengthy_work"]


def test_increment_in_thread_changes_box_in_place():
    box = Box(41)
    result = increment_in_thread(box)
    assert box.value == 42
    assert result == box.value


def test_increment_in_thread_rejects_empty_box():
    with pytest.raises(ValueError):
        increment_in_thread(Box())


def test_consume_in_thread_empties_box(capsys):
    box = Box(100)
    assert consume_in_thread(box) == 101
    assert box.value is None
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["unique ptr data is 100", "after unique ptr data is 101"]


def test_consume_in_thread_twice_raises():
    box = Box(5)
    consume_in_thread(box)
    with pytest.raises(ValueError):
        consume_in_thread(box)