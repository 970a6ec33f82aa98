import logging

import numpy as np

from pyMultObj import LinearRegressionModel, stochastic_gradient

logging.basicConfig(level=logging.INFO)

rng = np.random.default_rng(0)

# Noisy observations of a linear model with unit coefficients
X = rng.standard_normal((10, 3))
y = X @ np.ones(3) + rng.standard_normal(10) * 0.01

model = LinearRegressionModel(X, y)
print(model.meta)

# Optimize with a constant step size
stats = stochastic_gradient(model, step_size=1e-2, learning_rate="constant", seed=0)
print(stats)

beta = stats.solution
print("beta =", beta)
print("|X beta - y| =", np.linalg.norm(model.residual(beta)))
