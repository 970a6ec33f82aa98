"""Least-squares linear regression as a multi-objective model."""

import numpy as np
from numpy.typing import ArrayLike, NDArray
from numba import njit

from pyMultObj.core import LengthMismatchError
from pyMultObj.meta import ObjectiveType
from ._model import MultiObjectiveModel


class LinearRegressionModel(MultiObjectiveModel):
    """
    Linear regression with one objective component per sample.

    The i-th component is the squared residual 0.5 * (X_i . beta - y_i)^2,
    weighted by 1 / n so the aggregated objective is the mean over samples.

    Parameters
    ----------
    X : ArrayLike
        Design matrix of shape (n_samples, n_features).
    y : ArrayLike
        Observations of shape (n_samples,).
    """

    name = "Linear Regression"

    def __init__(self, X: ArrayLike, y: ArrayLike):
        self.X = np.ascontiguousarray(X, dtype=np.float64)
        self.y = np.ascontiguousarray(y, dtype=np.float64)

        if self.X.ndim != 2:
            raise LengthMismatchError(f"X must be a matrix, got shape {self.X.shape}")
        if self.y.shape != (self.X.shape[0],):
            raise LengthMismatchError(
                f"y has shape {self.y.shape}, but X has {self.X.shape[0]} rows"
            )

        n, p = self.X.shape
        super().__init__(
            {
                "nvar": p,
                "nobj": n,
                "weights": np.full((n,), 1.0 / n),
                "objtypes": [ObjectiveType.QUADRATIC] * n,
                "nnzhi": np.full((n,), p * (p + 1) // 2),
                "name": "LinearRegression",
            }
        )

    def _obj_i(self, i: int, x: NDArray) -> float:
        return _compute_objective(self.X[i], self.y[i], x)

    def _grad_i(self, i: int, x: NDArray) -> NDArray:
        return _compute_gradient(self.X[i], self.y[i], x)

    def residual(self, x: ArrayLike) -> NDArray:
        """Residual vector X beta - y. Not counted as an evaluation."""
        return self.X @ np.asarray(x, dtype=np.float64) - self.y


@njit
def _compute_residual(row, obs, beta):
    res = -obs
    for j in range(beta.size):
        res += row[j] * beta[j]
    return res


@njit
def _compute_objective(row, obs, beta):
    res = _compute_residual(row, obs, beta)
    return 0.5 * res * res


@njit
def _compute_gradient(row, obs, beta):
    return _compute_residual(row, obs, beta) * row
