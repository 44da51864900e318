"""State and control dimension bookkeeping shared by trajectory data types."""

DYNAMIC = -1
"""Marker for a dimension that is only known at run time."""


def add_sizes(n, m):
    """Return ``n + m``, or ``DYNAMIC`` if either size is dynamic."""
    if n == DYNAMIC or m == DYNAMIC:
        return DYNAMIC
    return n + m


class StateControlSized:
    """Holds the state and control dimensions of an object.

    ``n`` and ``m`` are the declared (fixed) sizes, which may be ``DYNAMIC``.
    ``state_dim`` and ``control_dim`` are the actual sizes. A fixed declared
    size must agree with the actual size. When an actual size is omitted the
    declared size is used, which then has to be positive.
    """

    def __init__(self, n=DYNAMIC, m=DYNAMIC, state_dim=None, control_dim=None):
        self._n = n
        self._m = m
        if state_dim is None:
            if n <= 0:
                raise ValueError("State dimension must be greater than zero.")
            state_dim = n
        if control_dim is None:
            if m <= 0:
                raise ValueError("Control dimension must be greater than zero.")
            control_dim = m
        self._set_dimensions(state_dim, control_dim)

    def _set_dimensions(self, state_dim, control_dim):
        if self._n > 0 and state_dim != self._n:
            raise ValueError("State sizes must be consistent.")
        if self._m > 0 and control_dim != self._m:
            raise ValueError("Control sizes must be consistent.")
        self._state_dim = state_dim
        self._control_dim = control_dim

    def state_dimension(self):
        """Actual number of states."""
        return self._state_dim

    def control_dimension(self):
        """Actual number of controls."""
        return self._control_dim

    def state_memory_size(self):
        """Declared state size, possibly ``DYNAMIC``."""
        return self._n

    def control_memory_size(self):
        """Declared control size, possibly ``DYNAMIC``."""
        return self._m