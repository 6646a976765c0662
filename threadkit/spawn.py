"""Running callables in threads and passing state to them by reference or by move."""

from __future__ import annotations

import threading
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass
class Box(Generic[T]):
    """A mutable cell a thread can change in place."""

    value: T | None = None


def run_in_thread(target: Callable[..., T], *args: Any, **kwargs: Any) -> T:
    """Run ``target`` in a new thread, wait for it and return its result.

    An exception raised by ``target`` is raised again in the caller.
    """
    outcome: dict[str, Any] = {}

    def call() -> None:
        try:
            outcome["result"] = target(*args, **kwargs)
        except BaseException as error:  # handed back to the caller
            outcome["error"] = error

    thread = threading.Thread(target=call)
    thread.start()
    thread.join()
    if "error" in outcome:
        raise outcome["error"]
    return outcome["result"]


def increment_in_thread(box: Box[int]) -> int:
    """Add one to the boxed value from another thread; return the new value."""

    def change(cell: Box[int]) -> None:
        cell.value += 1

    if box.value is None:
        raise ValueError("box is empty")
    run_in_thread(change, box)
    return box.value


def consume_in_thread(box: Box[int]) -> int:
    """Move the value out of ``box`` into a thread that reports and increments it.

    The box is left empty; the incremented value is returned.
    """
    if box.value is None:
        raise ValueError("box is empty")
    value, box.value = box.value, None

    def deal(data: int) -> int:
        print(f"unique ptr data is {data}")
        data += 1
        print(f"after unique ptr data is {data}")
        return data

    return run_in_thread(deal, value)