"""A basic pool of spinning worker threads fed from a single work queue."""

import concurrent.futures
import threading
import time

from altro.threadsafe_queue import ThreadSafeQueue

DEFAULT_TASK_TIMEOUT = 10.0
"""Seconds ``wait`` allows for each task by default."""


class ThreadPool:
    """Runs submitted callables on a fixed set of worker threads.

    Tasks added with ``add_task`` wait in a queue until ``launch_threads``
    starts the workers, which keep polling the queue until ``stop_threads``.
    ``wait`` blocks until every submitted task has finished, allowing
    ``timeout_per_task`` seconds for each of them.
    """

    def __init__(self, timeout_per_task=DEFAULT_TASK_TIMEOUT):
        self.timeout_per_task = float(timeout_per_task)
        self._running = threading.Event()
        self._threads = []
        self._futures = []
        self._queue = ThreadSafeQueue()

    def add_task(self, task):
        """Queue a callable taking no arguments; returns its future."""
        future = concurrent.futures.Future()
        self._futures.append(future)
        self._queue.push((task, future))
        return future

    def num_tasks(self):
        """Number of tasks still waiting in the work queue."""
        return len(self._queue)

    def num_threads(self):
        """Number of worker threads in the pool."""
        return len(self._threads)

    def wait(self):
        """Wait for all submitted tasks, reporting those that time out."""
        for future in self._futures:
            done, _ = concurrent.futures.wait([future], timeout=self.timeout_per_task)
            if not done:
                print(f"Task timed out after {self.timeout_per_task}s")
        self._futures.clear()

    def launch_threads(self, nthreads):
        """Start ``nthreads`` worker threads; queued tasks begin running at once."""
        if self.is_running():
            raise RuntimeError("Cannot launch threads when they're already running.")
        self._running.set()
        self._threads = []
        try:
            for i in range(nthreads):
                thread = threading.Thread(
                    target=self._worker, name=f"altro-worker-{i}", daemon=True
                )
                thread.start()
                self._threads.append(thread)
        except BaseException:
            self.stop_threads()
            raise

    def stop_threads(self):
        """Stop and join the worker threads."""
        self._running.clear()
        for thread in self._threads:
            thread.join()
        self._threads = []

    def is_running(self):
        """True while the workers are launched, whether or not a task is running."""
        return self._running.is_set()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        if self.is_running():
            self.stop_threads()

    def _worker(self):
        while self._running.is_set():
            found, item = self._queue.try_pop()
            if not found:
                time.sleep(0)
                continue
            task, future = item
            if not future.set_running_or_notify_cancel():
                continue
            try:
                result = task()
            except BaseException as exc:  # the failure is kept in the future
                future.set_exception(exc)
            else:
                future.set_result(result)