"""
Summary: Fan paths out to a fixed set of worker threads and fan actions back in.
Why: Overlap blackd round-trips while keeping exactly one action per path.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from concurrent.futures import FIRST_EXCEPTION, Future, ThreadPoolExecutor, wait
from queue import Queue, ShutDown

from blackd_client.platform.logging import logger
from blackd_client.shared.errors import FatalRunError

from ..domain.models import Action
from .report import RunReport

PathHandler = Callable[[str, str], Action]


class WorkerPool:
    """Process paths concurrently against one or more blackd endpoints.

    Threads share nothing but two queues. The producer shuts the path queue
    down once traversal ends; the pool shuts the action queue down once every
    worker has exited. A fatal error or an interrupt shuts both down
    immediately, dropping any queued work.
    """

    def __init__(
        self,
        endpoints: Sequence[str],
        handler: PathHandler,
        *,
        workers_per_endpoint: int = 1,
    ) -> None:
        """Initialize the pool.

        Args:
            endpoints: blackd base URLs; each gets its own group of workers.
            handler: Called as ``handler(endpoint, path)`` on a worker thread.
            workers_per_endpoint: Concurrent requests issued per endpoint.

        Raises:
            ValueError: If no endpoint is given or the worker count is not positive.
        """
        if not endpoints:
            raise ValueError("at least one blackd endpoint is required")
        if workers_per_endpoint < 1:
            raise ValueError(f"workers_per_endpoint must be positive, got {workers_per_endpoint}")

        self._handler: PathHandler = handler
        self._assignments: tuple[str, ...] = tuple(
            endpoint for endpoint in endpoints for _ in range(workers_per_endpoint)
        )

    @property
    def size(self) -> int:
        """Number of worker threads started by ``run``."""

        return len(self._assignments)

    def run(self, paths: Iterable[str], report: RunReport) -> RunReport:
        """Classify every path from ``paths`` into ``report``.

        ``paths`` is consumed lazily on a dedicated producer thread.

        Raises:
            FatalRunError: Re-raised from the producer or a worker after the
                remaining queued work has been discarded.
            KeyboardInterrupt: Re-raised once the queues are shut down, so
                no thread stays blocked on them.
        """
        path_queue: Queue[str] = Queue(maxsize=self.size)
        action_queue: Queue[Action] = Queue()

        with ThreadPoolExecutor(
            max_workers=self.size + 2,
            thread_name_prefix="blackd-client",
        ) as executor:
            aggregator = executor.submit(report.consume, action_queue)
            producer = executor.submit(self._produce, paths, path_queue)
            workers = [
                executor.submit(self._work, endpoint, path_queue, action_queue)
                for endpoint in self._assignments
            ]

            try:
                done, _ = wait([producer, *workers], return_when=FIRST_EXCEPTION)
                failure = _first_exception(done)
                if failure is not None:
                    raise failure

                action_queue.shutdown()
                aggregator.result()
            except BaseException:
                # Covers KeyboardInterrupt too; blocked threads must be
                # released before the executor joins them.
                path_queue.shutdown(immediate=True)
                action_queue.shutdown(immediate=True)
                raise

        logger.debug("Worker pool finished [workers=%d, files=%d]", self.size, report.total)
        return report

    @staticmethod
    def _produce(paths: Iterable[str], path_queue: Queue[str]) -> None:
        try:
            for path in paths:
                path_queue.put(path)
        except ShutDown:
            # A worker hit a fatal error and discarded the queue.
            return
        except BaseException:
            path_queue.shutdown(immediate=True)
            raise
        path_queue.shutdown()

    def _work(self, endpoint: str, path_queue: Queue[str], action_queue: Queue[Action]) -> None:
        while True:
            try:
                path = path_queue.get()
            except ShutDown:
                return

            try:
                action = self._handler(endpoint, path)
            except FatalRunError:
                raise
            except Exception as exc:  # pragma: no cover - defensive logging
                logger.error(
                    "Unhandled error formatting %s: %s",
                    path,
                    exc,
                    exc_info=True,
                    extra={"source_path": path},
                )
                action = Action.ERROR

            try:
                action_queue.put(action)
            except ShutDown:
                # The run was aborted while this path was in flight.
                return


def _first_exception(done: Iterable[Future[None]]) -> BaseException | None:
    for future in done:
        exc = future.exception()
        if exc is not None:
            return exc
    return None


__all__ = ["PathHandler", "WorkerPool"]
