"""Summing a sequence by splitting it into blocks handled by separate threads."""

from __future__ import annotations

import argparse
import operator
import threading
from collections.abc import Iterable
from functools import reduce
from typing import Any

from threadkit.joining import hardware_concurrency

MIN_PER_THREAD = 25


def plan_thread_count(
    length: int, hardware_threads: int = 0, min_per_thread: int = MIN_PER_THREAD
) -> int:
    """How many threads to use for ``length`` items.

    At most one thread per ``min_per_thread`` items (rounded up), and no more
    than ``hardware_threads``, or two when that is 0. Empty input needs none.
    """
    if length < 0 or hardware_threads < 0:
        raise ValueError("length and hardware_threads must not be negative")
    if min_per_thread < 1:
        raise ValueError("min_per_thread must be positive")
    if length == 0:
        return 0
    max_threads = -(-length // min_per_thread)
    return min(hardware_threads or 2, max_threads)


def split_blocks(length: int, num_threads: int) -> list[tuple[int, int]]:
    """Half-open index ranges, one per thread; the last takes the remainder."""
    if num_threads < 1:
        raise ValueError("num_threads must be positive")
    if length < 0:
        raise ValueError("length must not be negative")
    block_size = length // num_threads
    starts = [i * block_size for i in range(num_threads)]
    ends = starts[1:] + [length]
    return list(zip(starts, ends))


def parallel_accumulate(
    values: Iterable[Any], init: Any = 0, hardware_threads: int | None = None
) -> Any:
    """Add ``values`` onto ``init`` using several threads, keeping their order."""
    items = list(values)
    if not items:
        return init
    if hardware_threads is None:
        hardware_threads = hardware_concurrency()
    num_threads = plan_thread_count(len(items), hardware_threads)
    blocks = split_blocks(len(items), num_threads)
    results: list[Any] = [None] * num_threads

    def accumulate_block(index: int, start: int, end: int) -> None:
        results[index] = reduce(operator.add, items[start:end])

    workers = [
        threading.Thread(target=accumulate_block, args=(index, start, end))
        for index, (start, end) in enumerate(blocks[:-1])
    ]
    for worker in workers:
        worker.start()
    last_start, last_end = blocks[-1]
    accumulate_block(num_threads - 1, last_start, last_end)
    for worker in workers:
        worker.join()
    return reduce(operator.add, results, init)


def main(argv: list[str] | None = None) -> int:
    """Sum 0..count-1 in parallel and print the result."""
    parser = argparse.ArgumentParser(description="Parallel accumulation.")
    parser.add_argument("--count", type=int, default=10000)
    args = parser.parse_args(argv)
    total = parallel_accumulate(range(args.count), 0)
    print(f"sum is {total}")
    return 0