"""Fixed-size thread pool for reachability probes."""

import logging
from concurrent.futures import Future, ThreadPoolExecutor, as_completed
from typing import Any, Callable, Dict, Iterator, Optional

from webanalyse.config import default_worker_count

logger = logging.getLogger(__name__)


class ProbePool:
    """Bounded pool that runs submitted tasks and hands back their results.

    One pool serves one page analysis: it is started before the first
    submission, drained once, then shut down. Tasks that raise are logged and
    produce no result, so a broken task is never counted as a reachable or an
    unreachable link.
    """

    def __init__(self, max_workers: Optional[int] = None):
        """Initialize the pool.

        Args:
            max_workers: Worker thread count (defaults to the CPU count)
        """
        self.max_workers = max(1, max_workers or default_worker_count())
        self._executor: Optional[ThreadPoolExecutor] = None
        self._futures: Dict[Future, Any] = {}
        self.failed_tasks = 0

    @property
    def started(self) -> bool:
        return self._executor is not None

    @property
    def pending(self) -> int:
        """Number of submitted tasks not yet drained."""
        return len(self._futures)

    def start(self) -> "ProbePool":
        if self._executor is None:
            self._executor = ThreadPoolExecutor(
                max_workers=self.max_workers,
                thread_name_prefix="probe",
            )
        return self

    def submit(self, fn: Callable[..., Any], *args: Any, key: Any = None) -> Future:
        """Queue a task for execution.

        Args:
            fn: Callable to run on a worker thread
            *args: Positional arguments for ``fn``
            key: Label used when logging a failed task (defaults to the first argument)

        Returns:
            The task's Future
        """
        self.start()
        future = self._executor.submit(fn, *args)
        self._futures[future] = key if key is not None else (args[0] if args else fn)
        return future

    def drain_all(self) -> Iterator[Any]:
        """Yield every submitted task's result in completion order.

        Blocks until all tasks have finished. Each result is yielded once;
        tasks that raised are skipped.
        """
        futures, self._futures = self._futures, {}
        for future in as_completed(futures):
            key = futures[future]
            try:
                result = future.result()
            except Exception as e:
                self.failed_tasks += 1
                logger.error(f"probe task for {key} failed: {e}")
                continue
            if result is None:
                self.failed_tasks += 1
                logger.warning(f"probe task for {key} returned no result")
                continue
            yield result

    def shutdown(self, wait: bool = True) -> None:
        """Release the worker threads. Safe to call more than once."""
        if self._executor is not None:
            self._executor.shutdown(wait=wait)
            self._executor = None

    def __enter__(self) -> "ProbePool":
        return self.start()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.shutdown()
