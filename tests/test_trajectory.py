import numpy as np
import pytest

from altro.knotpoint import KnotPoint
from altro.trajectory import Trajectory

N = 10
n = 3
m = 2
h = 0.1


@pytest.fixture
def data():
    X = [np.full(3, float(k)) for k in range(N + 1)]
    U = [np.full(2, float(N + k)) for k in range(N)]
    times = [k * h for k in range(N + 1)]
    knotpoints = [KnotPoint(X[k], U[k], k * h, h, n=3, m=2) for k in range(N)]
    knotpoints.append(KnotPoint(X[N], 0 * U[N - 1], N * h, 0.0, n=3, m=2))
    return X, U, times, knotpoints


def test_constructor(data):
    X, U, times, knotpoints = data
    traj = Trajectory.zeros(num_segments=N, n=3, m=2)
    traj2 = Trajectory(knotpoints)
    traj3 = Trajectory.from_arrays(X, U, times)

    for k in range(N):
        assert np.linalg.norm(traj.state(k)) == pytest.approx(0)
        assert np.linalg.norm(traj.control(k)) == pytest.approx(0)
        assert np.allclose(traj2.state(k), X[k])
        assert np.allclose(traj2.control(k), U[k])
        assert np.allclose(traj3.state(k), X[k])
        assert np.allclose(traj3.control(k), U[k])
    assert traj2.check_time_consistency()
    assert traj3.check_time_consistency()
    assert traj3.step(N) == 0.0
    assert np.allclose(traj3.control(N), np.zeros(2))


def test_from_arrays_length_errors(data):
    X, U, times, _ = data
    with pytest.raises(ValueError, match="one less"):
        Trajectory.from_arrays(X, U + [U[0]], times)
    with pytest.raises(ValueError, match="times vector"):
        Trajectory.from_arrays(X, U, times[:-1])


def test_dynamic_size():
    traj = Trajectory.zeros(n, m, N)
    for k in range(N + 1):
        assert traj.state_dimension(k) == n
        assert traj.control_dimension(k) == m
        assert np.linalg.norm(traj.state(k)) == pytest.approx(0)
        assert np.linalg.norm(traj.control(k)) == pytest.approx(0)

    knotpoints2 = []
    for k in range(N + 1):
        n2, m2 = (n - 1, m - 1) if k > N // 2 else (n, m)
        x = np.full(n2, float(k))
        u = np.full(m2, float(k))
        if k < N:
            knotpoints2.append(KnotPoint(x, u, h * k, h))
        else:
            knotpoints2.append(KnotPoint(x, u * 0, h * k, 0.0))

    traj2 = Trajectory(knotpoints2)
    assert traj2.state_dimension(0) == n
    assert traj2.control_dimension(0) == m
    assert traj2.state_dimension(N - 1) == n - 1
    assert traj2.control_dimension(N - 1) == m - 1


def test_set_step(data):
    traj = Trajectory(data[3])
    assert traj.check_time_consistency()
    traj[1].time = 2 * h
    assert not traj.check_time_consistency()
    assert traj[1].time == pytest.approx(2 * h)

    traj.set_uniform_step(2 * h)
    assert traj.time(N) == pytest.approx(2 * N * h)
    assert traj.step(N - 1) == pytest.approx(2 * h)
    assert traj.step(N) == pytest.approx(0)
    assert traj.check_time_consistency()


def test_check_time_consistency_verbose(data, capsys):
    traj = Trajectory(data[3])
    traj[1].time = 2 * h
    assert not traj.check_time_consistency(verbose=True)
    assert "k=0" in capsys.readouterr().out


def test_iteration(data):
    X, _, _, knotpoints = data
    traj = Trajectory(knotpoints)
    it = iter(traj)
    assert np.allclose(next(it).state, X[0])
    assert np.allclose(next(it).state, X[1])
    assert np.allclose(traj[-1].state, X[N])

    count = 0
    for k, z in enumerate(traj):
        assert np.allclose(z.state, X[k])
        count += 1
    assert count == N + 1
    assert len(traj) == N + 1
    assert traj.num_segments() == N


def test_copy(data):
    traj = Trajectory(data[3])
    traj2 = traj.copy()
    for k in range(N):
        assert np.allclose(traj[k].state_control(), traj2[k].state_control())
        assert traj[k].time == pytest.approx(traj2[k].time)
        assert traj[k].step == pytest.approx(traj2[k].step)
    traj.state(0)[:] = 5.0
    assert not np.allclose(traj.state(0), traj2.state(0))


def test_constructor_copies_knotpoints(data):
    _, _, _, knotpoints = data
    traj = Trajectory(knotpoints)
    knotpoints[0].state[:] = 42.0
    assert np.allclose(traj.state(0), np.zeros(3))


def test_set_zero(data):
    traj = Trajectory(data[3])
    traj.set_zero()
    for z in traj:
        assert np.linalg.norm(z.state_control()) == pytest.approx(0)
    assert traj.step(0) == pytest.approx(h)
    assert traj.check_time_consistency()