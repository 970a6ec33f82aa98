import pytest
import numpy as np

from pyMultObj.models import MultiObjectiveModel, LinearRegressionModel


class ShiftedQuadraticModel(MultiObjectiveModel):
    """Single component 0.5 * |x - center|^2."""

    name = "Shifted Quadratic"

    def __init__(self, center, x0=None):
        self.center = np.asarray(center, dtype=np.float64)
        meta = {"nvar": self.center.size, "nobj": 1, "objtypes": ["quad"]}
        if x0 is not None:
            meta["x0"] = x0
        super().__init__(meta)

    def _obj_i(self, i, x):
        return 0.5 * np.sum((x - self.center) ** 2)

    def _grad_i(self, i, x):
        return x - self.center


@pytest.fixture
def quadratic_model():
    return ShiftedQuadraticModel([1.0, -2.0, 3.0])


@pytest.fixture
def regression_data():
    rng = np.random.default_rng(0)
    X = rng.standard_normal((10, 3))
    y = X @ np.ones(3) + rng.standard_normal(10) * 0.01
    return X, y


@pytest.fixture
def regression_model(regression_data):
    X, y = regression_data
    return LinearRegressionModel(X, y)
