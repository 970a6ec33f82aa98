"""Rosenbrock function split into two objective components."""

import numpy as np
from numpy.typing import NDArray

from ._model import MultiObjectiveModel


class RosenbrockModel(MultiObjectiveModel):
    """
    Rosenbrock function as sum of (x_1 - 1)^2 and 100 (x_2 - x_1^2)^2.

    Starts from the classic point (-1.2, 1.0), the minimizer is (1, 1).
    """

    name = "Rosenbrock"

    def __init__(self):
        super().__init__(
            {
                "nvar": 2,
                "nobj": 2,
                "x0": np.array([-1.2, 1.0]),
                "objtypes": ["quad", "gen"],
                "name": "Rosenbrock",
            }
        )

    def _obj_i(self, i: int, x: NDArray) -> float:
        if i == 0:
            return (x[0] - 1.0) ** 2
        return 100.0 * (x[1] - x[0] ** 2) ** 2

    def _grad_i(self, i: int, x: NDArray) -> NDArray:
        if i == 0:
            return np.array([2.0 * (x[0] - 1.0), 0.0])
        inner = x[1] - x[0] ** 2
        return np.array([-400.0 * x[0] * inner, 200.0 * inner])
