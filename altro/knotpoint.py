"""A single point of a state/control trajectory."""

import numpy as np

from altro.sizes import DYNAMIC, StateControlSized


class KnotPoint(StateControlSized):
    """State, control, time and time step of one trajectory knot point.

    ``n`` and ``m`` are the declared state and control sizes; ``DYNAMIC``
    accepts vectors of any length.
    """

    def __init__(self, state, control, time=0.0, step=0.0, n=DYNAMIC, m=DYNAMIC):
        x = np.array(state, dtype=float).reshape(-1)
        u = np.array(control, dtype=float).reshape(-1)
        super().__init__(n, m, x.size, u.size)
        self.state = x
        self.control = u
        self.time = float(time)
        self.step = float(step)

    @classmethod
    def zeros(cls, state_dim=None, control_dim=None, n=DYNAMIC, m=DYNAMIC):
        """Knot point with zero state and control."""
        if state_dim is None:
            if n <= 0:
                raise ValueError("State dimension must be greater than zero.")
            state_dim = n
        if control_dim is None:
            if m <= 0:
                raise ValueError("Control dimension must be greater than zero.")
            control_dim = m
        return cls(np.zeros(state_dim), np.zeros(control_dim), n=n, m=m)

    @classmethod
    def random(cls, n=DYNAMIC, m=DYNAMIC, state_dim=None, control_dim=None, rng=None):
        """Knot point with entries in [-1, 1], time in [0, 10) and step in [0, 1)."""
        if state_dim is None:
            state_dim = n
        if control_dim is None:
            control_dim = m
        if state_dim <= 0 or control_dim <= 0:
            raise ValueError(
                "Must pass in size if state or control dimension is unknown at compile time."
            )
        rng = np.random.default_rng() if rng is None else rng
        max_time = 10.0
        max_step = 1.0
        resolution = 100
        x = rng.uniform(-1.0, 1.0, state_dim)
        u = rng.uniform(-1.0, 1.0, control_dim)
        t = max_time * int(rng.integers(0, resolution)) / resolution
        h = max_step * int(rng.integers(0, resolution)) / resolution
        return cls(x, u, t, h, n=n, m=m)

    def state_control(self):
        """State and control stacked into one vector."""
        return np.concatenate([self.state, self.control])

    def is_terminal(self):
        """True for the last point of a trajectory, which has no time step."""
        return self.step == 0

    def set_terminal(self):
        """Mark as the last point of a trajectory."""
        self.step = 0.0
        self.control[:] = 0.0

    def copy(self):
        """Independent copy with the same declared sizes."""
        return KnotPoint(
            self.state,
            self.control,
            self.time,
            self.step,
            n=self.state_memory_size(),
            m=self.control_memory_size(),
        )

    def assign(self, other):
        """Copy the contents of ``other`` into this knot point."""
        self._set_dimensions(other.state_dimension(), other.control_dimension())
        self.state = np.array(other.state, dtype=float)
        self.control = np.array(other.control, dtype=float)
        self.time = other.time
        self.step = other.step

    def to_string(self, width=9):
        """One-line description of state, control, time and step."""
        spec = f" > {width}.3g"
        xs = "".join(format(float(v), spec) + " " for v in self.state)
        us = "".join(format(float(v), spec) + " " for v in self.control)
        return (
            f"x: [{xs}] u: [{us}] "
            f"t={format(self.time, '4.2')}, h={format(self.step, '4.2')}"
        )

    def __str__(self):
        return self.to_string()