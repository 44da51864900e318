from unittest import mock

import pytest

from altro.log_entry import LogLevel
from altro.solver_options import PICK_HARDWARE_THREADS, SolverOptions


def test_iteration_defaults():
    opts = SolverOptions()
    assert opts.max_iterations_total == 300
    assert opts.max_iterations_outer == 30
    assert opts.max_iterations_inner == 100


def test_tolerance_and_penalty_defaults():
    opts = SolverOptions()
    assert opts.cost_tolerance == 1e-4
    assert opts.constraint_tolerance == 1e-4
    assert opts.maximum_penalty == 1e8
    assert opts.initial_penalty == 1.0
    assert opts.reset_duals is True


def test_output_defaults():
    opts = SolverOptions()
    assert opts.verbose == LogLevel.SILENT
    assert opts.profiler_enable is False
    assert opts.profiler_output_to_file is False
    assert opts.log_directory == "logs"
    assert opts.profile_filename == "profiler.out"


def test_instances_are_independent():
    a = SolverOptions()
    b = SolverOptions()
    a.max_iterations_total = 5
    assert b.max_iterations_total == SolverOptions().max_iterations_total
    assert a != b


@pytest.mark.parametrize("nthreads", [0, -5, 1])
def test_num_threads_at_least_one(nthreads):
    assert SolverOptions(nthreads=nthreads).num_threads() == 1


def test_num_threads_explicit():
    assert SolverOptions(nthreads=4).num_threads() == 4


@mock.patch("os.cpu_count", return_value=8)
def test_num_threads_picks_hardware(_cpu_count):
    opts = SolverOptions(nthreads=PICK_HARDWARE_THREADS)
    assert opts.num_threads() == 8


@mock.patch("os.cpu_count", return_value=None)
def test_num_threads_unknown_hardware(_cpu_count):
    opts = SolverOptions(nthreads=PICK_HARDWARE_THREADS)
    assert opts.num_threads() == 0