"""Shared state guarded by locks, and workers that avoid lock-order deadlock."""

from __future__ import annotations

import argparse
import itertools
import threading
import time
from collections.abc import Callable, Iterator

Log = Callable[[str], None]

FIRST_VALUE = 1024
SECOND_VALUE = 2048


class SharedPair:
    """Two values, each guarded by its own lock."""

    def __init__(self, first: int = 0, second: int = 1) -> None:
        self._first_lock = threading.Lock()
        self._second_lock = threading.Lock()
        self._first = first
        self._second = second

    def update_first(self, value: int) -> None:
        """Set the first value holding only the first lock."""
        with self._first_lock:
            self._first = value

    def update_second(self, value: int) -> None:
        """Set the second value holding only the second lock."""
        with self._second_lock:
            self._second = value

    def snapshot(self) -> tuple[int, int]:
        """Return both values, taking the locks in a fixed order."""
        with self._first_lock, self._second_lock:
            return self._first, self._second


def _rounds(iterations: int | None) -> Iterator[int]:
    if iterations is None:
        return itertools.count()
    if iterations < 0:
        raise ValueError("iterations must not be negative")
    return iter(range(iterations))


def _locked_update(pair: SharedPair, which: int, log: Log) -> None:
    log(f"lock{which} begin lock")
    if which == 1:
        pair.update_first(FIRST_VALUE)
    else:
        pair.update_second(SECOND_VALUE)
    log(f"lock{which} end lock")


def safe_worker(
    pair: SharedPair,
    first_then_second: bool = True,
    iterations: int | None = None,
    delay: float = 1.0,
    log: Log = print,
) -> None:
    """Update both values, never holding more than one lock at a time.

    With ``iterations`` of None the worker runs forever.
    """
    order = (1, 2) if first_then_second else (2, 1)
    for _ in _rounds(iterations):
        for which in order:
            _locked_update(pair, which, log)
        time.sleep(delay)


def run_safe_locks(
    iterations: int | None = None, delay: float = 1.0, log: Log = print
) -> SharedPair:
    """Run two workers taking the locks in opposite orders; return the pair."""
    pair = SharedPair()
    workers = [
        threading.Thread(target=safe_worker, args=(pair, first, iterations, delay, log))
        for first in (True, False)
    ]
    for worker in workers:
        worker.start()
    for worker in workers:
        worker.join()
    return pair


class SharedCounter:
    """An integer changed under a lock."""

    def __init__(self, start: int = 100) -> None:
        self._lock = threading.Lock()
        self._value = start

    def increment(self) -> int:
        """Add one and return the new value."""
        with self._lock:
            self._value += 1
            return self._value

    def decrement(self) -> int:
        """Subtract one and return the new value."""
        with self._lock:
            self._value -= 1
            return self._value

    def value(self) -> int:
        """The current value."""
        with self._lock:
            return self._value


def run_counter(
    iterations: int | None = None,
    delay: float = 1.0,
    start: int = 100,
    log: Log = print,
) -> SharedCounter:
    """One thread increments and another decrements a shared counter."""
    counter = SharedCounter(start)

    def work(step: Callable[[], int]) -> None:
        for _ in _rounds(iterations):
            value = step()
            log(f"current thread id is {threading.get_ident()}")
            log(f"share_data:{value}")
            time.sleep(delay)

    _rounds(iterations)  # validate before starting threads
    workers = [
        threading.Thread(target=work, args=(step,))
        for step in (counter.increment, counter.decrement)
    ]
    for worker in workers:
        worker.start()
    for worker in workers:
        worker.join()
    return counter


def main(argv: list[str] | None = None) -> int:
    """Run one of the locking demonstrations."""
    parser = argparse.ArgumentParser(description="Locking demonstrations.")
    parser.add_argument("demo", nargs="?", choices=("safe", "counter"), default="safe")
    parser.add_argument("--iterations", type=int, default=None)
    parser.add_argument("--delay", type=float, default=1.0)
    args = parser.parse_args(argv)

    if args.demo == "safe":
        pair = run_safe_locks(args.iterations, args.delay)
        first, second = pair.snapshot()
        print(f"first:{first} second:{second}")
    else:
        counter = run_counter(args.iterations, args.delay)
        print(f"share_data:{counter.value()}")
    return 0