"""Hierarchical profiling of named scopes."""

import os
import sys
import time

from altro.profile_entry import ProfileEntry

_NAME_PAD = 2


def build_profile(times):
    """Build the profile tree from a mapping of full scope names to microseconds.

    Returns the entries in name order, preceded by a root entry whose time is
    the sum of the top-level scopes.
    """
    root = ProfileEntry("top", 0)
    entries = [root]
    parents = [root]
    for fullname, duration in sorted(times.items()):
        entry = ProfileEntry(fullname, duration)
        entries.append(entry)
        level = entry.num_levels()
        if level >= len(parents):
            parents.extend([None] * (level + 1 - len(parents)))
        parents[level] = entry
        entry.parent = parents[level - 1]
        if level == 1:
            root.time += entry.time
    return entries


class Timer:
    """Collects the time spent in named, possibly nested, scopes.

    The timer is inactive until ``activate`` is called; while inactive,
    ``start`` returns a stopwatch that records nothing. Times of scopes with
    the same full name accumulate.
    """

    def __init__(self):
        self._stack = []
        self._times = {}
        self._active = False
        self._printed_summary = False
        self._owns_file = False
        self._io = None

    @property
    def times(self):
        """Recorded microseconds by full scope name, e.g. ``"al/ilqr/cost"``."""
        return dict(self._times)

    def activate(self):
        self._active = True

    def deactivate(self):
        self._active = False

    def is_active(self):
        return self._active

    def start(self, name):
        """Start timing the scope ``name`` nested in the scopes currently open."""
        if self._active:
            self._stack.append(name)
            return Stopwatch("/".join(self._stack), self)
        return Stopwatch()

    def _record(self, name, microseconds):
        if self._stack:
            self._stack.pop()
        self._times[name] = self._times.get(name, 0) + microseconds

    def _output(self):
        return sys.stdout if self._io is None else self._io

    def _release_file(self):
        if self._owns_file and self._io is not None:
            self._io.close()
        self._owns_file = False

    def set_output(self, target):
        """Send the summary to a stream, or to a file opened and owned by the timer.

        ``None`` means standard output.
        """
        if isinstance(target, (str, os.PathLike)):
            try:
                stream = open(target, "w", encoding="utf-8")
            except OSError as err:
                raise RuntimeError(
                    f'Error opening profiler file "{os.fspath(target)}". Got errno {err.errno}.'
                ) from err
            self._release_file()
            self._io = stream
            self._owns_file = True
        else:
            self._release_file()
            self._io = target

    def print_summary(self, times=None):
        """Print a table of the recorded times, or of ``times`` if given."""
        entries = build_profile(self._times if times is None else times)
        max_width = max(
            (sum(len(part) for part in entry.name) for entry in entries[1:]), default=0
        )
        max_width += _NAME_PAD
        header = (
            f"{'Description':<{max_width}}  {'Time (us)':>8}  {'%Total':>7}  {'%Parent':>7}"
        )
        out = self._output()
        out.write(header + "\n")
        out.write("-" * len(header) + "\n")
        for entry in entries[1:]:
            entry.calc_stats()
            entry.print(max_width, out)
        self._printed_summary = True

    def close(self):
        """Print the summary if active and not yet printed, then close an owned file."""
        if self._active and not self._printed_summary:
            self.print_summary()
        self._release_file()
        if self._owns_file is False and self._io is not None and self._io.closed:
            self._io = None


class Stopwatch:
    """Measures one scope and records it with its timer when stopped.

    Use as a context manager, or call ``stop``. Without a timer it records
    nothing.
    """

    def __init__(self, name="", timer=None):
        self.name = name
        self._timer = timer
        self._start = time.perf_counter_ns()
        self._stopped = False

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.stop()

    def stop(self):
        """Record the elapsed microseconds; returns them, or None if nothing is recorded."""
        if self._timer is None or self._stopped:
            return None
        self._stopped = True
        elapsed = (time.perf_counter_ns() - self._start) // 1000
        self._timer._record(self.name, elapsed)
        return elapsed