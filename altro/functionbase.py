"""Abstract vector- and scalar-valued functions of a state and a control."""

import abc

import numpy as np

DEFAULT_TOLERANCE = 1e-4

_JACOBIAN_STEP = 1e-6
_HESSIAN_STEP = 1e-4


def _matrix_comparison(expected, actual, eps, verbose):
    err = float(np.linalg.norm(np.asarray(expected) - np.asarray(actual)))
    if verbose:
        if err > eps:
            print(f"Calculated:\n{actual}")
            print(f"Finite Diff: \n{expected}")
        print(f"Error: {err}")
    return err < eps


def _fd_jacobian(f, z):
    out_size = np.atleast_1d(f(z)).size
    jac = np.zeros((out_size, z.size))
    for i, e in enumerate(np.eye(z.size) * _JACOBIAN_STEP):
        jac[:, i] = (np.atleast_1d(f(z + e)) - np.atleast_1d(f(z - e))) / (2 * _JACOBIAN_STEP)
    return jac


def _fd_hessian(f, z):
    basis = np.eye(z.size) * _HESSIAN_STEP
    hess = np.zeros((z.size, z.size))
    denom = 4 * _HESSIAN_STEP * _HESSIAN_STEP
    for i, ei in enumerate(basis):
        for j, ej in enumerate(basis):
            hess[i, j] = (
                f(z + ei + ej) - f(z + ei - ej) - f(z - ei + ej) + f(z - ei - ej)
            ) / denom
    return hess


class FunctionBase(abc.ABC):
    """A vector-valued function ``out = f(x, u)`` with a Jacobian.

    Second-order information is the Jacobian of ``J(x, u)^T b``, returned by
    ``hessian``. Derivatives can be verified by finite differences with
    ``check_jacobian`` and ``check_hessian``; inputs are drawn at random when
    not given.
    """

    def state_dimension(self):
        return 0

    def control_dimension(self):
        return 0

    @abc.abstractmethod
    def output_dimension(self):
        """Length of the output vector."""

    @abc.abstractmethod
    def evaluate(self, x, u):
        """Function value, a vector of length ``output_dimension()``."""

    @abc.abstractmethod
    def jacobian(self, x, u):
        """Jacobian with respect to ``[x; u]``, shape ``(p, n + m)``."""

    def hessian(self, x, u, b):
        """Jacobian of ``J(x, u)^T b``, shape ``(n + m, n + m)``; zero unless overridden."""
        size = np.size(x) + np.size(u)
        return np.zeros((size, size))

    @abc.abstractmethod
    def has_hessian(self):
        """Whether ``hessian`` is implemented."""

    def _evaluate_vector(self, x, u):
        return np.atleast_1d(np.asarray(self.evaluate(x, u), dtype=float))

    def _sample_inputs(self, x, u, rng):
        rng = np.random.default_rng() if rng is None else rng
        if x is None:
            x = rng.uniform(-1.0, 1.0, self.state_dimension())
        if u is None:
            u = rng.uniform(-1.0, 1.0, self.control_dimension())
        return np.asarray(x, dtype=float).reshape(-1), np.asarray(u, dtype=float).reshape(-1)

    def check_jacobian(self, x=None, u=None, eps=DEFAULT_TOLERANCE, verbose=False, rng=None):
        """Compare ``jacobian`` with a finite-difference estimate."""
        x, u = self._sample_inputs(x, u, rng)
        n = x.size
        jac = np.asarray(self.jacobian(x, u), dtype=float).reshape(
            self.output_dimension(), n + u.size
        )
        fd_jac = _fd_jacobian(
            lambda z: self._evaluate_vector(z[:n], z[n:]), np.concatenate([x, u])
        )
        return _matrix_comparison(fd_jac, jac, eps, verbose)

    def check_hessian(
        self, x=None, u=None, b=None, eps=DEFAULT_TOLERANCE, verbose=False, rng=None
    ):
        """Compare ``hessian`` with a finite-difference estimate."""
        rng = np.random.default_rng() if rng is None else rng
        x, u = self._sample_inputs(x, u, rng)
        p = self.output_dimension()
        if b is None:
            b = np.ones(p) if p == 1 else rng.uniform(-1.0, 1.0, p)
        b = np.asarray(b, dtype=float).reshape(-1)
        n = x.size
        hess = np.asarray(self.hessian(x, u, b), dtype=float)
        fd_hess = _fd_hessian(
            lambda z: float(self._evaluate_vector(z[:n], z[n:]) @ b),
            np.concatenate([x, u]),
        )
        return _matrix_comparison(fd_hess, hess, eps, verbose)


class ScalarFunction(FunctionBase):
    """A scalar-valued function of a state and a control.

    Subclasses implement ``evaluate`` (returning a float), ``gradient``
    (a vector of length ``n + m``) and ``_hessian(x, u)``.
    """

    def output_dimension(self):
        return 1

    @abc.abstractmethod
    def evaluate(self, x, u):
        """Function value as a float."""

    @abc.abstractmethod
    def gradient(self, x, u):
        """Gradient with respect to ``[x; u]``."""

    @abc.abstractmethod
    def _hessian(self, x, u):
        """Second derivative with respect to ``[x; u]``."""

    def hessian(self, x, u, b=None):
        """Hessian of the function; ``b``, if given, must be the single value 1."""
        if b is not None:
            b = np.atleast_1d(np.asarray(b, dtype=float))
            if b.size != 1 or not np.isclose(b[0], 1.0):
                raise ValueError(
                    "The b vector for scalar Hessians must be a vector of a single 1."
                )
        return np.asarray(self._hessian(x, u), dtype=float)

    def jacobian(self, x, u):
        return np.asarray(self.gradient(x, u), dtype=float).reshape(1, -1)

    def has_hessian(self):
        return True

    def check_gradient(self, x=None, u=None, eps=DEFAULT_TOLERANCE, verbose=False, rng=None):
        """Compare ``gradient`` with a finite-difference estimate."""
        x, u = self._sample_inputs(x, u, rng)
        n = x.size
        grad = np.asarray(self.gradient(x, u), dtype=float).reshape(-1)
        fd_grad = _fd_jacobian(
            lambda z: float(self.evaluate(z[:n], z[n:])), np.concatenate([x, u])
        ).reshape(-1)
        return _matrix_comparison(fd_grad, grad, eps, verbose)