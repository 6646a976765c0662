"""A stack that can be shared between threads, and a concurrent stress run."""

from __future__ import annotations

import argparse
import threading
from collections.abc import Iterable
from typing import Generic, TypeVar

T = TypeVar("T")


class EmptyStackError(IndexError):
    """Raised when popping from an empty stack."""


class ThreadSafeStack(Generic[T]):
    """A LIFO stack whose operations are each guarded by one lock."""

    def __init__(self, items: Iterable[T] | None = None) -> None:
        self._lock = threading.Lock()
        self._data: list[T] = list(items) if items is not None else []

    def push(self, value: T) -> None:
        """Put a value on top of the stack."""
        with self._lock:
            self._data.append(value)

    def pop(self) -> T:
        """Remove and return the top value; raise EmptyStackError if empty."""
        with self._lock:
            if not self._data:
                raise EmptyStackError("Stack is empty!")
            return self._data.pop()

    def is_empty(self) -> bool:
        """Whether the stack holds no values."""
        with self._lock:
            return not self._data

    def copy(self) -> ThreadSafeStack[T]:
        """Return an independent stack holding the same values."""
        with self._lock:
            return ThreadSafeStack(self._data)

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)


def run_concurrent_access(
    num_threads: int = 4, pushes_per_thread: int = 1000
) -> tuple[int, int]:
    """Push and pop concurrently from several producers and consumers.

    Returns the number of values popped and the number left on the stack.
    """
    if num_threads < 1 or pushes_per_thread < 0:
        raise ValueError("num_threads must be positive and pushes_per_thread non-negative")

    stack: ThreadSafeStack[int] = ThreadSafeStack()
    total = num_threads * pushes_per_thread
    count_lock = threading.Lock()
    popped = 0

    def produce() -> None:
        for value in range(pushes_per_thread):
            stack.push(value)

    def consume() -> None:
        nonlocal popped
        while True:
            with count_lock:
                if popped >= total:
                    return
            try:
                stack.pop()
            except EmptyStackError:
                threading.Event().wait(0)  # give producers a turn
                continue
            with count_lock:
                popped += 1

    threads = [threading.Thread(target=produce) for _ in range(num_threads)]
    threads += [threading.Thread(target=consume) for _ in range(num_threads)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return popped, len(stack)


def main(argv: list[str] | None = None) -> int:
    """Run the concurrent access check and report the outcome."""
    parser = argparse.ArgumentParser(description="Stress a thread-safe stack.")
    parser.add_argument("--threads", type=int, default=4)
    parser.add_argument("--pushes", type=int, default=1000)
    args = parser.parse_args(argv)

    popped, remaining = run_concurrent_access(args.threads, args.pushes)
    if remaining != 0 or popped != args.threads * args.pushes:
        print("Concurrent access test failed.")
        return 1
    print("Concurrent access test passed.")
    return 0