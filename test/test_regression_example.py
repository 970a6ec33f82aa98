import numpy as np

from pyMultObj import LinearRegressionModel, stochastic_gradient


def test_regression_reduces_residual(regression_data):
    X, y = regression_data
    model = LinearRegressionModel(X, y)

    stats = stochastic_gradient(model, step_size=1e-2, learning_rate="constant", seed=0)

    residual_start = np.linalg.norm(X @ model.meta.x0 - y)
    residual_end = np.linalg.norm(X @ stats.solution - y)

    assert stats.status == "max_iter"
    assert residual_end < residual_start
    assert np.allclose(stats.solution, np.ones(3), atol=0.1)
