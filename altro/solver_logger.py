"""Tabular console output for solver progress."""

import sys

from altro.log_entry import (
    DEFAULT_WIDTH,
    Color,
    EntryType,
    LogEntry,
    LogLevel,
    colorize,
)

_DEFAULT_FREQUENCY = 10


class SolverLogger:
    """Prints logged values as rows of a table, one column per entry.

    Entries are keyed by their title. Values can be logged between prints;
    an entry keeps its last value until ``clear``. The header is repeated
    every ``frequency`` rows. Nothing is printed at ``LogLevel.SILENT``.
    """

    def __init__(self, level=LogLevel.SILENT, stream=None):
        self.level = LogLevel(level)
        self.stream = stream
        self.header_color = Color.WHITE
        self._frequency = _DEFAULT_FREQUENCY
        self._count = 0
        self._entries = {}
        self._order = []

    def add_entry(
        self,
        col,
        title,
        fmt,
        entry_type=EntryType.FLOAT,
        width=DEFAULT_WIDTH,
        level=LogLevel.INNER,
        name=None,
    ):
        """Add a column and return its entry.

        A non-negative ``col`` is the 0-based column index; a negative one
        counts from the end, ``-1`` making it the last column.
        """
        size = len(self._entries)
        if col > size:
            raise ValueError(
                f"Column ({col}) must be less than or equal to the current "
                f"number of entries ({size})."
            )
        if col < -size - 1:
            raise ValueError(
                f"Column ({col}) must be greater or equal to than the negative "
                f"new number of entries ({-size - 1})."
            )
        if title in self._entries:
            return self._entries[title]
        entry = LogEntry(title, fmt, entry_type, width=width, level=level, name=name)
        self._entries[title] = entry
        index = len(self._order) + col + 1 if col < 0 else col
        self._order.insert(index, title)
        return entry

    def __getitem__(self, title):
        return self._entries[title]

    def __len__(self):
        return len(self._entries)

    def __iter__(self):
        """Titles in column order."""
        return iter(list(self._order))

    def disable(self):
        """Turn all output off."""
        self.level = LogLevel.SILENT

    @property
    def frequency(self):
        """Number of rows printed between headers."""
        return self._frequency

    @frequency.setter
    def frequency(self, freq):
        if freq < 0:
            raise ValueError("Header print frequency must be positive.")
        self._frequency = freq

    def log(self, title, value):
        """Store ``value`` for column ``title`` if it is active.

        Values for inactive columns, or for titles without a column, are
        discarded.
        """
        if self.level > LogLevel.SILENT:
            entry = self._entries.get(title)
            if entry is not None and entry.is_active(self.level):
                entry.log(value)

    def _write(self, text):
        (sys.stdout if self.stream is None else self.stream).write(text)

    def _active_entries(self):
        return [
            entry
            for entry in (self._entries[title] for title in self._order)
            if entry.is_active(self.level)
        ]

    def print_header(self):
        """Print the titles of the active columns and a rule beneath them."""
        if self.level == LogLevel.SILENT:
            return
        active = self._active_entries()
        if not active:
            return
        row = "".join(e.render_header(self.level, self.header_color) + " " for e in active)
        total_width = sum(e.width + 1 for e in active)
        self._write(row + "\n" + colorize("-" * total_width + "\n", self.header_color))

    def print_data(self):
        """Print one row with the stored data of the active columns."""
        if self.level == LogLevel.SILENT:
            return
        active = self._active_entries()
        if not active:
            return
        self._write("".join(e.render(self.level) + " " for e in active) + "\n")

    def print(self):
        """Print a data row, preceded by the header every ``frequency`` rows."""
        if self._count % self._frequency == 0:
            self._count = 0
            self.print_header()
        self.print_data()
        self._count += 1

    def clear(self):
        """Clear all stored data and restart the header count."""
        self._count = 0
        for entry in self._entries.values():
            entry.clear()