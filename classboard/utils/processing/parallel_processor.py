"""Parallel Processing Utilities - per-task isolation with timeouts"""
import os
import time
from concurrent.futures import FIRST_COMPLETED, ThreadPoolExecutor, wait
from math import ceil
from typing import Any, Callable, Dict, Hashable, List, Tuple

from classboard.config.settings import LeaderboardConfig
from classboard.exceptions.exceptions import StorageUnavailable
from classboard.utils.logging.log_config import get_logger

logger = get_logger(__name__)


class ParallelProcessor:
    """Thread pool runner where one failing or slow task never sinks the others"""

    @staticmethod
    def calculate_optimal_workers(task_count: int, max_workers: int = None) -> int:
        """Workers bounded by CPU count, configuration and the workload"""
        cpu_count = os.cpu_count() or 4
        configured = max_workers or LeaderboardConfig.MAX_WORKERS
        return max(min(cpu_count * 2, configured, task_count), 1)

    @staticmethod
    def process_isolated(tasks: List[Hashable], processor_func: Callable[[Hashable], Any],
                         timeout: float = None, max_workers: int = None
                         ) -> Tuple[Dict[Hashable, Any], Dict[Hashable, Exception]]:
        """Run processor_func for every task concurrently.

        Each task gets its own ``timeout``, counted from the moment a worker
        picks it up, so tasks queued behind others are not charged for the
        wait. A task still queued once the whole batch has had
        ``timeout * ceil(len(tasks) / workers)`` seconds is cancelled.

        Returns:
            (results, errors): task -> result for successes, task -> exception
            for failures. Timed out and never started tasks are reported as
            StorageUnavailable.
        """
        results: Dict[Hashable, Any] = {}
        errors: Dict[Hashable, Exception] = {}
        if not tasks:
            return results, errors

        timeout = timeout if timeout is not None else LeaderboardConfig.CLASS_TIMEOUT
        workers = ParallelProcessor.calculate_optimal_workers(len(tasks), max_workers)
        start_time = time.monotonic()
        batch_deadline = start_time + timeout * ceil(len(tasks) / workers)
        started_at: Dict[Hashable, float] = {}
        logger.debug(f"Using {workers} workers for {len(tasks)} tasks")

        def run(task):
            started_at[task] = time.monotonic()
            return processor_func(task)

        executor = ThreadPoolExecutor(max_workers=workers)
        try:
            future_to_task = {executor.submit(run, task): task for task in tasks}
            pending = set(future_to_task)

            while pending:
                now = time.monotonic()
                deadlines = [
                    started_at[future_to_task[f]] + timeout if future_to_task[f] in started_at else batch_deadline
                    for f in pending
                ]
                # Capped at one timeout so a task that starts mid-wait is checked in time
                wait_for = min(max(min(deadlines) - now, 0), timeout)
                done, pending = wait(pending, timeout=wait_for, return_when=FIRST_COMPLETED)

                for future in done:
                    task = future_to_task[future]
                    try:
                        results[task] = future.result()
                    except Exception as e:
                        logger.warning(f"Task {task} failed: {type(e).__name__}: {e}")
                        errors[task] = e

                now = time.monotonic()
                for future in list(pending):
                    task = future_to_task[future]
                    begun = started_at.get(task)
                    if begun is not None and now - begun >= timeout:
                        logger.warning(f"Task {task} timed out after {timeout}s")
                        errors[task] = StorageUnavailable(f"Timed out after {timeout}s")
                        pending.discard(future)
                    elif begun is None and now >= batch_deadline and future.cancel():
                        logger.warning(f"Task {task} never started, workers busy")
                        errors[task] = StorageUnavailable(f"Not started within {now - start_time:.1f}s, workers busy")
                        pending.discard(future)
        finally:
            # Stuck reads are left to finish in the background
            executor.shutdown(wait=False, cancel_futures=True)

        elapsed = time.monotonic() - start_time
        logger.info(f"Processing completed in {elapsed:.2f}s: {len(results)} succeeded, {len(errors)} failed")
        return results, errors
