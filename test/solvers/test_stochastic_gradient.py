import logging

import pytest
import numpy as np

from pyMultObj.core import UnrecognizedConfigurationError
from pyMultObj.models import LinearRegressionModel, MultiObjectiveModel
from pyMultObj.solvers import (
    ExecutionStats,
    StochasticGradient,
    get_solver,
    stochastic_gradient,
)


def test_defaults():
    solver = StochasticGradient()
    assert solver.learning_rate == "optimal"
    assert solver.step_size == 1e-2
    assert solver.alpha == 1e-2
    assert solver.rho == 0.85
    assert solver.penalty == "l2"
    assert solver.max_eval == 0
    assert solver.max_time == 60.0
    assert solver.max_iter == 1000
    assert solver.power_t == 1e-2


def test_unknown_option_warns():
    with pytest.warns(UserWarning):
        StochasticGradient(momentum=0.9)


@pytest.mark.parametrize("options", [{"learning_rate": "adaptive"}, {"penalty": "l0"}])
def test_unrecognized_configuration(quadratic_model, options):
    with pytest.raises(UnrecognizedConfigurationError):
        stochastic_gradient(quadratic_model, **options)
    assert quadratic_model.cumulative_evaluation_count() == 0


def test_optimal_schedule_requires_regularization(quadratic_model):
    with pytest.raises(UnrecognizedConfigurationError):
        stochastic_gradient(quadratic_model, learning_rate="optimal", alpha=0.0)
    assert quadratic_model.cumulative_evaluation_count() == 0


def test_quadratic_converges_to_minimizer(quadratic_model):
    stats = stochastic_gradient(
        quadratic_model,
        learning_rate="constant",
        step_size=0.1,
        alpha=0.0,
        penalty="l2",
        seed=1,
    )
    assert isinstance(stats, ExecutionStats)
    assert stats.status in ("small_step", "max_iter")
    assert np.allclose(stats.solution, quadratic_model.center, atol=1e-6)
    assert np.allclose(stats.averaged_solution, quadratic_model.center, atol=1e-6)


def test_l2_regularization_shrinks_solution(quadratic_model):
    stats = stochastic_gradient(
        quadratic_model, learning_rate="constant", step_size=0.1, alpha=1.0, seed=1
    )
    # minimizer of 0.5|x - c|^2 + 0.5 alpha |x|^2
    assert np.allclose(stats.solution, quadratic_model.center / 2.0, atol=1e-6)


def test_determinism(regression_data):
    X, y = regression_data
    options = {"learning_rate": "constant", "max_iter": 20, "seed": 1234}
    stats_a = stochastic_gradient(LinearRegressionModel(X, y), **options)
    stats_b = stochastic_gradient(LinearRegressionModel(X, y), **options)

    assert np.array_equal(stats_a.solution, stats_b.solution)
    assert np.array_equal(stats_a.averaged_solution, stats_b.averaged_solution)


def test_rng_generator_is_used(regression_data):
    X, y = regression_data
    options = {"learning_rate": "constant", "max_iter": 5}
    stats_a = stochastic_gradient(
        LinearRegressionModel(X, y), rng=np.random.default_rng(7), **options
    )
    stats_b = stochastic_gradient(LinearRegressionModel(X, y), seed=7, **options)

    assert np.array_equal(stats_a.solution, stats_b.solution)


def test_iteration_cap_status(regression_model):
    stats = stochastic_gradient(
        regression_model,
        learning_rate="constant",
        max_iter=1,
        max_time=1000.0,
        max_eval=0,
        seed=0,
    )
    assert stats.status == "max_iter"
    assert stats.iter == 2


def test_component_gradient_evaluations(regression_model):
    stats = stochastic_gradient(regression_model, learning_rate="constant", max_iter=4, seed=0)
    assert stats.iter == 5
    gradi = regression_model.counter("neval_gradi")
    assert np.array_equal(gradi, np.full(10, 5))
    assert regression_model.counter("neval_obj") == 1
    assert regression_model.counter("neval_grad") == 1
    assert stats.counters["neval_gradi"] == gradi.tolist()


def test_evaluation_budget_status(regression_model):
    stats = stochastic_gradient(
        regression_model, learning_rate="constant", max_eval=25, max_iter=1000, seed=0
    )
    assert stats.status == "max_eval"
    # pre-loop objective and gradient plus 10 component gradients per iteration
    assert stats.iter == 3
    assert regression_model.cumulative_evaluation_count() == 32


def test_time_budget_takes_priority(regression_model):
    stats = stochastic_gradient(
        regression_model, learning_rate="constant", max_time=-1.0, max_iter=-1, seed=0
    )
    assert stats.status == "max_time"
    assert stats.iter == 0
    assert np.array_equal(stats.solution, regression_model.meta.x0)


def test_small_step_status(quadratic_model):
    stats = stochastic_gradient(quadratic_model, learning_rate="constant", step_size=1e-8)
    assert stats.status == "small_step"
    assert stats.iter == 0
    assert quadratic_model.counter("neval_gradi", 0) == 0


def test_small_step_with_step_tol(quadratic_model):
    stats = stochastic_gradient(
        quadratic_model, learning_rate="invscaling", step_tol=1e-2, seed=0
    )
    assert stats.status == "small_step"
    assert stats.iter == 2


def test_optimal_schedule_step_size(quadratic_model):
    stats = stochastic_gradient(quadratic_model, learning_rate="optimal", alpha=0.5, max_iter=3)
    assert stats.status == "max_iter"
    assert np.isclose(stats.solver_specific["final_step_size"], 1.0 / (0.5 * (1e3 + 3)))


def test_invscaling_schedule_step_size(quadratic_model):
    stats = stochastic_gradient(
        quadratic_model, learning_rate="invscaling", power_t=0.5, max_iter=3
    )
    assert np.isclose(stats.solver_specific["final_step_size"], 1e-2 / 4**0.5)


def test_maximize_ascends():
    class Concave(MultiObjectiveModel):
        def __init__(self):
            super().__init__({"nvar": 2, "nobj": 1, "minimize": False})

        def _obj_i(self, i, x):
            return -0.5 * np.sum((x - 1.0) ** 2)

        def _grad_i(self, i, x):
            return -(x - 1.0)

    stats = stochastic_gradient(
        Concave(), learning_rate="constant", step_size=0.1, alpha=0.0, max_iter=500
    )
    assert np.allclose(stats.solution, 1.0, atol=1e-6)


def test_run_is_logged(quadratic_model, caplog):
    with caplog.at_level(logging.INFO, logger="pyMultObj"):
        stochastic_gradient(quadratic_model, learning_rate="constant", max_iter=2)
    assert any("finished after 3 iterations" in r.getMessage() for r in caplog.records)


def test_solver_instance_reusable(quadratic_model):
    solver = StochasticGradient(learning_rate="constant", step_size=0.1, alpha=0.0, seed=3)
    first = solver.solve(quadratic_model)
    second = solver.solve(quadratic_model.reset())
    assert np.array_equal(first.solution, second.solution)


@pytest.mark.parametrize("penalty", ["l2", "l1", "elasticnet"])
def test_single_step_penalty(penalty):
    class Flat(MultiObjectiveModel):
        def __init__(self, x0):
            super().__init__({"nvar": 3, "nobj": 1, "x0": x0})

        def _obj_i(self, i, x):
            return 0.0

        def _grad_i(self, i, x):
            return np.zeros_like(x)

    step, alpha, rho = 0.1, 0.5, 0.85
    expected = {
        "l2": lambda b: b,
        "l1": np.sign,
        "elasticnet": lambda b: rho * b + (1 - rho) * np.sign(b),
    }[penalty]

    beta = np.array([1.0, -2.0, 0.0])
    solver = get_solver("sgd").configure(
        learning_rate="constant",
        step_size=step,
        alpha=alpha,
        rho=rho,
        penalty=penalty,
        max_iter=0,
    )
    stats = solver.solve(Flat(beta))

    # only the penalty moves the iterate in a single outer iteration
    assert stats.iter == 1
    assert np.allclose(stats.solution, beta - step * alpha * expected(beta))
