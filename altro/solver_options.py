"""Options for the augmented Lagrangian and iLQR solvers."""

import os
from dataclasses import dataclass

from altro.log_entry import LogLevel

PICK_HARDWARE_THREADS = -1
"""Value of ``nthreads`` that picks the number of hardware threads."""

LOG_DIRECTORY = "logs"


@dataclass
class SolverOptions:
    """Options for the augmented Lagrangian and iLQR solvers."""

    max_iterations_total: int = 300
    max_iterations_outer: int = 30
    max_iterations_inner: int = 100
    cost_tolerance: float = 1e-4
    gradient_tolerance: float = 1e-2

    bp_reg_increase_factor: float = 1.6
    bp_reg_enable: bool = True
    bp_reg_initial: float = 0.0
    bp_reg_max: float = 1e8
    bp_reg_min: float = 1e-8
    bp_reg_fail_threshold: int = 100
    check_forwardpass_bounds: bool = True
    state_max: float = 1e8
    control_max: float = 1e8

    line_search_max_iterations: int = 20
    line_search_lower_bound: float = 1e-8
    line_search_upper_bound: float = 10.0
    line_search_decrease_factor: float = 2.0

    constraint_tolerance: float = 1e-4
    maximum_penalty: float = 1e8
    initial_penalty: float = 1.0
    reset_duals: bool = True
    header_frequency: int = 10
    verbose: LogLevel = LogLevel.SILENT
    profiler_enable: bool = False
    profiler_output_to_file: bool = False
    log_directory: str = LOG_DIRECTORY
    profile_filename: str = "profiler.out"
    nthreads: int = 1
    tasks_per_thread: int = 1

    def num_threads(self):
        """Number of threads to use; at least one unless set to pick the hardware count."""
        if self.nthreads == PICK_HARDWARE_THREADS:
            return os.cpu_count() or 0
        return max(self.nthreads, 1)