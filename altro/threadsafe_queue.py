"""A first-in, first-out queue that can be shared between threads."""

import collections
import threading


class ThreadSafeQueue:
    """A FIFO queue whose operations are safe to call from several threads."""

    def __init__(self):
        self._items = collections.deque()
        self._lock = threading.Lock()

    def push(self, value):
        """Append ``value`` to the back of the queue."""
        with self._lock:
            self._items.append(value)

    def try_pop(self):
        """Remove the front element without blocking.

        Returns ``(True, value)`` if an element was taken and
        ``(False, None)`` if the queue was empty.
        """
        with self._lock:
            if not self._items:
                return False, None
            return True, self._items.popleft()

    def clear(self):
        """Remove every element."""
        with self._lock:
            self._items.clear()

    def is_empty(self):
        """True if the queue holds no elements."""
        with self._lock:
            return not self._items

    def __len__(self):
        with self._lock:
            return len(self._items)