"""Background execution of blocking git queries.

Callers hand a blocking function to :class:`BackgroundRunner`, keep their
own thread responsive, and receive the outcome through a completion
callback or the returned future. A :class:`CancellationToken` lets the
caller drop work that is no longer wanted (for example a refresh superseded
by a newer one).
"""
from __future__ import annotations

import concurrent.futures
import logging
import threading
from pathlib import Path
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)

DoneCallback = Callable[["concurrent.futures.Future[Any]"], None]


class CancellationToken:
    """Thread-safe, one-way cancellation flag."""

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()


class BackgroundRunner:
    """Thread pool wrapper with completion callbacks and cancellation tokens."""

    def __init__(self, max_workers: int = 2) -> None:
        self.max_workers = max_workers
        self._executor = concurrent.futures.ThreadPoolExecutor(
            max_workers=max_workers,
            thread_name_prefix="gleam-bg",
        )

    @classmethod
    def from_config(cls, repo_root: Optional[Path] = None) -> "BackgroundRunner":
        from gleam.core.config.domains import RefreshConfig

        return cls(max_workers=RefreshConfig(repo_root=repo_root).max_workers)

    def submit(
        self,
        fn: Callable[..., Any],
        *args: Any,
        on_done: Optional[DoneCallback] = None,
        token: Optional[CancellationToken] = None,
        **kwargs: Any,
    ) -> "concurrent.futures.Future[Any]":
        """Run ``fn(*args, **kwargs)`` on a worker thread.

        Args:
            fn: Blocking callable to run
            on_done: Called with the finished future, on the worker thread
            token: When cancelled before the task starts, ``fn`` never runs
                and the future is cancelled; when cancelled while it runs,
                ``on_done`` is skipped

        Returns:
            Future carrying ``fn``'s result or exception.
        """
        outer: "concurrent.futures.Future[Any]" = concurrent.futures.Future()

        def _task() -> None:
            if token is not None and token.cancelled:
                outer.cancel()
                outer.set_running_or_notify_cancel()
                return
            if not outer.set_running_or_notify_cancel():
                return
            try:
                result = fn(*args, **kwargs)
            except BaseException as exc:
                outer.set_exception(exc)
            else:
                outer.set_result(result)

            if on_done is None or (token is not None and token.cancelled):
                return
            try:
                on_done(outer)
            except Exception:
                logger.exception("Background completion callback failed")

        self._executor.submit(_task)
        return outer

    def shutdown(self, wait: bool = True) -> None:
        self._executor.shutdown(wait=wait)

    def __enter__(self) -> "BackgroundRunner":
        return self

    def __exit__(self, *exc: Any) -> None:
        self.shutdown(wait=True)


__all__ = ["BackgroundRunner", "CancellationToken"]
