"""State and control trajectories made of knot points."""

import numpy as np

from altro.knotpoint import KnotPoint
from altro.sizes import DYNAMIC


class Trajectory:
    """A sequence of N+1 knot points: N segments with controls and a terminal state."""

    def __init__(self, knotpoints):
        self._points = [z.copy() for z in knotpoints]

    @classmethod
    def zeros(cls, state_dim=None, control_dim=None, num_segments=0, n=DYNAMIC, m=DYNAMIC):
        """Trajectory of ``num_segments`` segments with zero states and controls."""
        return cls(
            KnotPoint.zeros(state_dim, control_dim, n=n, m=m)
            for _ in range(num_segments + 1)
        )

    @classmethod
    def from_arrays(cls, states, controls, times):
        """Build from N+1 states, N controls and N+1 times."""
        states = [np.asarray(x, dtype=float) for x in states]
        controls = [np.asarray(u, dtype=float) for u in controls]
        times = [float(t) for t in times]
        if len(states) != len(controls) + 1:
            raise ValueError(
                "Length of control vector must be one less than the length of "
                "the state trajectory."
            )
        if len(states) != len(times):
            raise ValueError(
                "Length of times vector must be equal to the length of the "
                "state trajectory."
            )
        if not controls:
            raise ValueError("At least one control vector is required.")
        points = [
            KnotPoint(x, u, t, t_next - t)
            for x, u, t, t_next in zip(states, controls, times, times[1:])
        ]
        points.append(KnotPoint(states[-1], np.zeros_like(controls[-1]), times[-1], 0.0))
        return cls(points)

    def num_segments(self):
        return len(self._points) - 1

    def state(self, k):
        return self._points[k].state

    def control(self, k):
        return self._points[k].control

    def state_dimension(self, k):
        return self._points[k].state_dimension()

    def control_dimension(self, k):
        return self._points[k].control_dimension()

    def time(self, k):
        return self._points[k].time

    def step(self, k):
        return self._points[k].step

    def __getitem__(self, k):
        return self._points[k]

    def __iter__(self):
        return iter(self._points)

    def __len__(self):
        return len(self._points)

    def copy(self):
        """Independent copy of the trajectory."""
        return Trajectory(self._points)

    def set_zero(self):
        """Set every state and control to zero, keeping times and steps."""
        for z in self._points:
            z.state[:] = 0.0
            z.control[:] = 0.0

    def set_uniform_step(self, h):
        """Give every segment the step ``h`` and recompute the times from zero."""
        *segments, last = self._points
        for k, z in enumerate(segments):
            z.step = h
            z.time = k * h
        last.step = 0.0
        last.time = h * len(segments)

    def check_time_consistency(self, eps=1e-6, verbose=False):
        """True if ``t[k+1] - t[k] == h[k]`` within ``eps`` for every segment."""
        for k, (z, z_next) in enumerate(zip(self._points, self._points[1:])):
            h_calc = z_next.time - z.time
            if abs(z.step - h_calc) > eps:
                if verbose:
                    print(f"k={k}\t h={z.step}")
                    print(f"t-={z.time}\t t+={z_next.time}\t dt={h_calc}")
                return False
        return True