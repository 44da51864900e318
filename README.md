# altro

Common building blocks for trajectory optimisation solvers, built on NumPy:
knot points and trajectories, differentiable functions of a state and a
control, a tabular console logger, per-iteration solver statistics, a
hierarchical profiler and a small thread pool.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `altro.sizes` – `StateControlSized` and `add_sizes`. A declared size may be
  `DYNAMIC` (-1); a fixed declared size must match the actual size, otherwise
  `ValueError` is raised.
- `altro.knotpoint` – `KnotPoint`: the state, control, time and time step at a
  single point of a trajectory. `KnotPoint.zeros` and `KnotPoint.random`
  construct points; `state_control()` stacks state and control; a point with a
  step of zero is terminal (`is_terminal`, `set_terminal`). `to_string` gives
  a one-line description, also used by `str()`.
- `altro.trajectory` – `Trajectory`: N+1 knot points. Build it from knot points,
  with `Trajectory.zeros`, or with `Trajectory.from_arrays(states, controls,
  times)`. It supports indexing, iteration and `len`, plus `set_zero`,
  `set_uniform_step` and `check_time_consistency`.
- `altro.functionbase` – `FunctionBase` (vector-valued `f(x, u)` with a
  Jacobian and an optional second-order term) and `ScalarFunction` (scalar
  value, gradient and Hessian). `check_jacobian`, `check_hessian` and
  `check_gradient` compare the implemented derivatives with central finite
  differences, drawing random inputs when none are given.
- `altro.log_entry` – `LogLevel`, `EntryType`, `Color`, `colorize` and
  `LogEntry`, one column of the solver log with a format template, a width, a
  verbosity level and optional bounds that change the colour of a value.
- `altro.solver_logger` – `SolverLogger`, which prints the active columns as
  rows of a table, repeating the header every `frequency` rows. It writes to
  standard output unless given a `stream`, and prints nothing at
  `LogLevel.SILENT`.
- `altro.solver_options` – `SolverOptions`, a dataclass of solver settings
  (iteration limits, tolerances, regularisation, line search, penalties,
  verbosity, profiler output, thread count). `num_threads()` resolves
  `PICK_HARDWARE_THREADS` to the CPU count.
- `altro.solver_stats` – `SolverStatus` and `SolverStats`. `log(title, value)`
  sends a value to the logger and stores it in the current iteration of the
  matching list (`cost`, `violations`, `cost_decrease`, `gradient`, `alpha`,
  `regularization`, `improvement_ratio`, `max_penalty`); `new_iteration()`
  starts a new entry copied from the previous one; `reset()` clears
  everything and takes verbosity and profiler output from the options.
- `altro.timer` and `altro.profile_entry` – `Timer`, `Stopwatch`,
  `build_profile` and `ProfileEntry`. Nested `with timer.start(name):` blocks
  accumulate microseconds under names such as `"al/ilqr/cost"`;
  `print_summary()` prints each scope's time with its share of the total and
  of its parent. The timer records nothing until `activate()` is called.
  `set_output` accepts a stream, a file path (the timer then owns and closes
  the file in `close()`), or `None` for standard output.
- `altro.threadsafe_queue` – `ThreadSafeQueue`, a locked FIFO queue;
  `try_pop()` returns `(True, value)` or `(False, None)`.
- `altro.threadpool` – `ThreadPool`: tasks queued with `add_task` (which
  returns a `concurrent.futures.Future`) are run by worker threads started
  with `launch_threads(n)`; `wait()` waits for all submitted tasks, allowing
  `timeout_per_task` seconds each, and `stop_threads()` joins the workers.
  The pool is also a context manager that stops its threads on exit.

## Examples

A trajectory:

```python
import numpy as np
from altro.trajectory import Trajectory

traj = Trajectory.zeros(3, 2, 10)
traj.set_uniform_step(0.1)
assert traj.check_time_consistency()
traj.state(0)[:] = np.array([1.0, 2.0, 3.0])
print(traj[0])
```

Checking a derivative:

```python
import numpy as np
from altro.functionbase import ScalarFunction

class Quadratic(ScalarFunction):
    def state_dimension(self):
        return 2

    def control_dimension(self):
        return 1

    def evaluate(self, x, u):
        return float(np.dot(x, x) + np.dot(u, u))

    def gradient(self, x, u):
        return 2 * np.concatenate([x, u])

    def _hessian(self, x, u):
        return 2 * np.eye(3)

assert Quadratic().check_gradient()
```

Logging solver progress:

```python
from altro.log_entry import LogLevel
from altro.solver_stats import SolverStats

stats = SolverStats()
stats.verbosity = LogLevel.INNER
stats.log("cost", 10.0)
stats.log("viol", 1e-3)
stats.print_last()
stats.new_iteration()
```

Profiling a block of code:

```python
from altro.timer import Timer

timer = Timer()
timer.activate()
with timer.start("solve"):
    with timer.start("cost"):
        ...
timer.print_summary()
```

Running tasks on worker threads:

```python
from altro.threadpool import ThreadPool

with ThreadPool() as pool:
    futures = [pool.add_task(lambda i=i: i * i) for i in range(8)]
    pool.launch_threads(4)
    pool.wait()
    print([f.result() for f in futures])
```

## What this package does not do

It contains no trajectory optimisation solver itself: there is no iLQR or
augmented Lagrangian algorithm, no dynamics models, no problem definition and
no constraint types. `SolverOptions`, `SolverStats` and `SolverStatus` describe
settings, statistics and outcomes for such a solver, but nothing in the
package runs a solve. There is no command-line program.