"""Thread ownership helpers: a joining thread handle, a guard and detaching."""

from __future__ import annotations

import os
import threading
from collections.abc import Callable
from types import TracebackType
from typing import Any


def _ensure_started(thread: threading.Thread) -> threading.Thread:
    if thread.ident is None:
        thread.start()
    return thread


class JoiningThread:
    """Owns at most one thread and joins it when the owner is done with it.

    Use it as a context manager: on leaving the block a thread that is still
    owned is joined.
    """

    def __init__(self, thread: threading.Thread | None = None) -> None:
        self._thread: threading.Thread | None = None
        if thread is not None:
            self.adopt(thread)

    def start(self, target: Callable[..., Any], *args: Any, **kwargs: Any) -> JoiningThread:
        """Start a new thread running ``target``; the handle must be empty."""
        if self.joinable():
            raise RuntimeError("handle already owns a thread")
        thread = threading.Thread(target=target, args=args, kwargs=kwargs)
        thread.start()
        self._thread = thread
        return self

    def adopt(self, thread: threading.Thread) -> JoiningThread:
        """Take ownership of ``thread``, starting it if needed.

        A thread already owned is joined first.
        """
        if thread is self._thread:
            return self
        if self.joinable():
            self.join()
        self._thread = _ensure_started(thread)
        return self

    def take(self, other: JoiningThread) -> JoiningThread:
        """Move the thread owned by ``other`` into this handle.

        A thread this handle already owns is joined before the transfer;
        ``other`` is left empty.
        """
        if other is self:
            return self
        if self.joinable():
            self.join()
        self._thread, other._thread = other._thread, None
        return self

    def swap(self, other: JoiningThread) -> None:
        """Exchange the owned threads of two handles."""
        self._thread, other._thread = other._thread, self._thread

    def joinable(self) -> bool:
        """Whether a thread is owned and has been neither joined nor detached."""
        return self._thread is not None

    def join(self) -> None:
        """Wait for the owned thread to finish and release it."""
        if self._thread is None:
            raise RuntimeError("no thread to join")
        self._thread.join()
        self._thread = None

    def detach(self) -> threading.Thread:
        """Stop owning the thread without waiting for it; return it."""
        if self._thread is None:
            raise RuntimeError("no thread to detach")
        thread, self._thread = self._thread, None
        return thread

    def ident(self) -> int | None:
        """The owned thread's identifier, or None when nothing is owned."""
        return self._thread.ident if self._thread is not None else None

    def __enter__(self) -> JoiningThread:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self.joinable():
            self.join()


class ThreadGuard:
    """Joins every thread handed to it when its block ends, even on error."""

    def __init__(self, *threads: threading.Thread) -> None:
        self._threads: list[threading.Thread] = []
        for thread in threads:
            self.add(thread)

    def add(self, thread: threading.Thread) -> threading.Thread:
        """Guard ``thread``, starting it if it has not been started."""
        self._threads.append(_ensure_started(thread))
        return thread

    def __enter__(self) -> ThreadGuard:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        current = threading.current_thread()
        for thread in self._threads:
            if thread is not current:
                thread.join()
        self._threads.clear()


def run_detached(target: Callable[..., Any], *args: Any, **kwargs: Any) -> threading.Thread:
    """Start ``target`` in a background thread nobody waits for; return it."""
    thread = threading.Thread(target=target, args=args, kwargs=kwargs, daemon=True)
    thread.start()
    return thread


def hardware_concurrency() -> int:
    """Number of CPUs available, or 0 when it cannot be told."""
    return os.cpu_count() or 0