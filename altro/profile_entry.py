"""Rows of the profiler summary table."""

import sys

_PERCENT_SCALING = 100


class ProfileEntry:
    """One timed scope in the profiler summary.

    The full name is split on ``/`` into a stack of names, so that
    ``"al/ilqr/cost"`` becomes ``["al", "ilqr", "cost"]``. Entries are linked
    to their parent scope, forming a tree whose root holds the total time.
    Times are in microseconds.
    """

    def __init__(self, fullname, time):
        self.name = fullname.split("/")
        self.time = int(time)
        self.percent_total = 0
        self.percent_parent = 0
        self.parent = None

    def num_levels(self):
        """Depth of the scope, e.g. 3 for ``"al/ilqr/cost"``."""
        return len(self.name)

    def root(self):
        """The entry at the top of the tree, which has no parent."""
        entry = self
        while entry.parent is not None:
            entry = entry.parent
        return entry

    def calc_stats(self):
        """Compute the share of the total time and of the parent's time.

        A share is -1 when the time it is relative to is zero.
        """
        total_time = self.root().time
        parent_time = self.parent.time if self.parent is not None else self.time
        if total_time == 0:
            self.percent_total = -1
        else:
            self.percent_total = _PERCENT_SCALING * self.time // total_time
        if parent_time == 0:
            self.percent_parent = -1
        else:
            self.percent_parent = _PERCENT_SCALING * self.time // parent_time

    def format(self, width):
        """The table row for this entry, with the name indented by its depth."""
        indent = sum(len(part) for part in self.name[:-1])
        indented_name = " " * indent + self.name[-1]
        return (
            f"{indented_name:<{width}}  {self.time:>8}  "
            f"{self.percent_total:>7}  {self.percent_parent:>7}"
        )

    def print(self, width, stream=None):
        """Write the table row, followed by a newline, to ``stream`` (stdout by default)."""
        (sys.stdout if stream is None else stream).write(self.format(width) + "\n")