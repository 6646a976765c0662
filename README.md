# threadkit

Small helpers for working with threads in Python. The package uses only the standard library.

## Modules

### `threadkit.stack`

- `ThreadSafeStack` is a LIFO stack. Each of its operations is guarded by one lock. It provides these operations:
  - `push(value)`
  - `pop()`, which raises `EmptyStackError` when the stack is empty. `EmptyStackError` is an `IndexError`.
  - `is_empty()`
  - `copy()`
  - `len(stack)`
- `run_concurrent_access(num_threads=4, pushes_per_thread=1000)` starts producer threads and the same number of consumer threads against one stack. It returns a tuple `(popped, remaining)`.

### `threadkit.locking`

- `SharedPair` holds two values, and each value has its own lock.
  - `update_first()` and `update_second()` each hold only one lock.
  - `snapshot()` takes both locks, always in the same order.
- `safe_worker()` updates both values of a pair without ever holding two locks at once.
- `run_safe_locks(iterations=None, delay=1.0, log=print)` runs two such workers. The workers take the locks in opposite orders, and the function returns the pair.
- `SharedCounter` is an integer guarded by a lock. It has `increment()`, `decrement()` and `value()`.
- `run_counter(iterations=None, delay=1.0, start=100, log=print)` has one thread increment the counter while another decrements it.

When `iterations` is `None`, the workers run forever.

### `threadkit.joining`

- `JoiningThread` owns at most one thread.
  - `start(target, *args, **kwargs)` starts a new thread.
  - `adopt(thread)` takes over an existing thread, and starts it if needed.
  - `take(other)` moves the thread out of another handle. Before that, it joins any thread this handle already owns.
  - The handle also has `swap()`, `joinable()`, `join()`, `detach()` and `ident()`.
  - Used as a context manager, the handle joins its thread when the block ends.
- `ThreadGuard(*threads)` is a context manager. It starts the threads given to it or passed to `add()`, and joins them all when the block ends, including when the block raises.
- `run_detached(target, *args, **kwargs)` starts a daemon thread that nobody waits for.
- `hardware_concurrency()` returns `os.cpu_count()`, or 0 when that is unknown.

### `threadkit.accumulate`

- `parallel_accumulate(values, init=0, hardware_threads=None)` adds the values onto `init`. The work is split into blocks, and the blocks are handled by separate threads. The last block runs in the calling thread.
- `plan_thread_count(length, hardware_threads=0, min_per_thread=25)` decides how many threads to use. The count is at most one thread per 25 items and at most the hardware thread count. When the hardware count is 0, it is at most 2.
- `split_blocks(length, num_threads)` returns the half-open index ranges, one per thread. The last range takes any remainder.

### `threadkit.spawn`

- `run_in_thread(target, *args, **kwargs)` runs a callable in a new thread, waits for it, and returns its result. If the callable raises, the exception is raised again in the caller.
- `Box` is a mutable cell.
  - `increment_in_thread(box)` increments the boxed value in place from another thread.
  - `consume_in_thread(box)` moves the value out of the box, so the box is left empty. It increments the value in a thread and returns the result.

## Installation

```
pip install .
```

## Usage

```python
from threadkit.stack import ThreadSafeStack
from threadkit.accumulate import parallel_accumulate
from threadkit.joining import JoiningThread

stack = ThreadSafeStack()
stack.push(1)
stack.push(2)
assert stack.pop() == 2

print(parallel_accumulate(range(10000), 0))  # 49995000

with JoiningThread() as worker:
    worker.start(print, "working")
# the thread has been joined here
```

## Commands

```
threadkit-stack [--threads N] [--pushes N]
threadkit-locking [safe|counter] [--iterations N] [--delay SECONDS]
threadkit-accumulate [--count N]
```

- `threadkit-stack` runs the concurrent push/pop check. It prints whether the check passed, and exits with status 1 if it failed.
- `threadkit-locking safe` runs two workers that take locks in opposite orders, then prints the final pair.
- `threadkit-locking counter` increments and decrements a shared counter from two threads, then prints the final value.
- Without `--iterations`, the `threadkit-locking` demonstrations run until interrupted.
- `threadkit-accumulate` sums `0..count-1` in parallel. The default count is 10000.

## Limits

Everything here works with threads inside one process. The package has no process pools and no thread pool or task queue.

## Tests

```
pip install .[test]
pytest
```