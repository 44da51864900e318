"""Statistics recorded during a solve, and their console output."""

import enum
import os
import sys

from altro.log_entry import Color, EntryType, LogLevel
from altro.solver_logger import SolverLogger
from altro.solver_options import SolverOptions
from altro.timer import Timer


class SolverStatus(enum.IntEnum):
    """Whether a solve succeeded, or why it stopped."""

    SOLVED = 0
    UNSOLVED = 1
    STATE_LIMIT = 2
    CONTROL_LIMIT = 3
    COST_INCREASE = 4
    MAX_ITERATIONS = 5
    MAX_OUTER_ITERATIONS = 6
    MAX_INNER_ITERATIONS = 7
    MAX_PENALTY = 8
    BACKWARD_PASS_REGULARIZATION_FAILED = 9


class SolverStats:
    """Per-iteration data recorded by the solvers, with tabular console output.

    Each float field logged through ``log`` is both sent to the console
    logger and stored as the last element of the matching list. A new
    element, copied from the previous one, is started by ``new_iteration``.
    """

    def __init__(self, options=None, stream=None):
        self.options = SolverOptions() if options is None else options
        self._stream = stream
        self.initial_cost = 0.0
        self.iterations_inner = 0
        self.iterations_outer = 0
        self.iterations_total = 0
        self.cost = []
        self.alpha = []
        self.improvement_ratio = []
        self.gradient = []
        self.cost_decrease = []
        self.regularization = []
        self.violations = []
        self.max_penalty = []
        self.logger = SolverLogger(stream=stream)
        self.timer = Timer()
        self.timer.set_output(stream)
        self._len = 0
        self._floats = {}
        self._default_logger()

    def _default_logger(self):
        lg = self.logger
        lg.add_entry(0, "iters", "{:>4}", EntryType.INT, width=6,
                     level=LogLevel.OUTER_DEBUG, name="iterations")
        lg.add_entry(1, "iter_al", "{:>4}", EntryType.INT, width=8,
                     level=LogLevel.OUTER, name="iterations_outer")
        lg.add_entry(-1, "cost", "{:>.4g}")
        self._floats["cost"] = self.cost
        lg.add_entry(-1, "viol", "{:>.3e}", name="constraint_violation")
        self._floats["viol"] = self.violations
        lg.add_entry(-1, "dJ", "{:>.2e}", name="cost_improvement")
        self._floats["dJ"] = self.cost_decrease
        lg.add_entry(-1, "grad", "{:>.2e}", level=LogLevel.OUTER_DEBUG, name="gradient")
        self._floats["grad"] = self.gradient
        lg.add_entry(-1, "alpha", "{:>.2f}", width=6, level=LogLevel.INNER,
                     name="line_search_step_length")
        self._floats["alpha"] = self.alpha
        lg.add_entry(-1, "reg", "{:>.1e}", width=7, level=LogLevel.INNER_DEBUG,
                     name="regularization")
        self._floats["reg"] = self.regularization
        lg.add_entry(-1, "z", "{:>.3f}", width=5, level=LogLevel.INNER_DEBUG,
                     name="cost_improvement_ratio")
        self._floats["z"] = self.improvement_ratio
        lg.add_entry(-1, "pen", "{:>.1e}", width=7, level=LogLevel.DEBUG,
                     name="max_penalty")
        self._floats["pen"] = self.max_penalty
        lg.header_color = Color.YELLOW

    @property
    def verbosity(self):
        """Verbosity level of the console logger."""
        return self.logger.level

    @verbosity.setter
    def verbosity(self, level):
        self.logger.level = LogLevel(level)

    def set_tolerances(self, cost, viol, grad):
        """Show cost decrease, violation and gradient below these values in green."""
        self.logger["dJ"].set_lower_bound(cost)
        self.logger["viol"].set_lower_bound(viol)
        self.logger["grad"].set_lower_bound(grad)

    def reset(self):
        """Clear all data and counters and take verbosity and output from the options."""
        self.initial_cost = 0.0
        self.iterations_inner = 0
        self.iterations_total = 0
        self.iterations_outer = 0
        self._len = 0
        for data in self._floats.values():
            data.clear()
        self.logger.clear()

        self.verbosity = self.options.verbose
        self.profiler_output_to_file(self.options.profiler_output_to_file)
        if self.verbosity < LogLevel.INNER:
            self.logger.frequency = self.options.header_frequency
        else:
            self.logger.frequency = sys.maxsize

    def profile_output_file(self):
        """Path of the profiler output file given by the options."""
        return os.path.join(self.options.log_directory, self.options.profile_filename)

    def profiler_output_to_file(self, flag):
        """Send the profiler summary to the output file (True) or the console (False)."""
        if flag:
            self.timer.set_output(self.profile_output_file())
        else:
            self.timer.set_output(self._stream)

    def print_last(self):
        """Print the latest logged values to the console."""
        self.logger.print()

    def log(self, title, value):
        """Send ``value`` to the logger and store it in the current iteration."""
        self.logger.log(title, value)
        if self._len == 0:
            self.new_iteration()
        data = self._floats.get(title)
        if data is not None:
            data[-1] = value

    def new_iteration(self):
        """Start a new iteration whose values begin as copies of the previous ones."""
        self._len += 1
        for data in self._floats.values():
            if len(data) >= self._len:
                del data[self._len:]
            else:
                data.extend([0.0] * (self._len - len(data)))
            data[-1] = data[-2] if self._len > 1 else 0.0