"""
Stochastic gradient solver.

Every outer iteration visits all objective components once in random order
and takes a step along the gradient of the visited component plus a
regularization term.
"""

from typing import Callable, Optional
import time
import logging

import numpy as np
from numpy.typing import NDArray
from numba import njit

from pyMultObj.core import UnrecognizedConfigurationError
from pyMultObj.models import MultiObjectiveModel
from ._base_solvers import SolverBase
from ._stats import ExecutionStats

logger = logging.getLogger(__name__)

LEARNING_RATES = ("optimal", "invscaling", "constant")
PENALTIES = ("l2", "l1", "elasticnet")


class StochasticGradient(SolverBase):
    """
    Stochastic gradient descent over objective components.

    Parameters
    ----------
    **options
        Initial values of the attributes below.

    Attributes
    ----------
    learning_rate : str, default="optimal"
        Step size schedule. 'optimal': 1 / (alpha * (1000 + k)), 'invscaling':
        0.01 / (k + 1)^power_t, 'constant': step_size, with k the outer
        iteration index.
    step_size : float, default=1e-2
        Initial step size (held fixed for the 'constant' schedule).
    alpha : float, default=1e-2
        Regularization strength.
    rho : float, default=0.85
        Mixing of l2 and l1 penalty for 'elasticnet'.
    penalty : str, default="l2"
        Regularization penalty, one of 'l2', 'l1', 'elasticnet'.
    max_eval : int, default=0
        Maximum number of model evaluations, 0 for unlimited.
    max_time : float, default=60.0
        Maximum wall-clock time in seconds.
    max_iter : int, default=1000
        Maximum number of outer iterations.
    power_t : float, default=1e-2
        Exponent of the 'invscaling' schedule.
    step_tol : float, default=1e-6
        The run is considered converged once the step size drops below.
    seed : int, optional
        Seed of the random permutations, used when no rng is given.
    rng : np.random.Generator, optional
        Random number generator for the permutations.
    """

    name = "Stochastic Gradient Descent"
    short_name = "sgd"

    learning_rate: str
    step_size: float
    alpha: float
    rho: float
    penalty: str
    max_eval: int
    max_iter: int
    power_t: float
    step_tol: float
    seed: Optional[int]
    rng: Optional[np.random.Generator]

    def __init__(self, **options):
        super().__init__()

        self.learning_rate = "optimal"
        self.step_size = 1e-2
        self.alpha = 1e-2
        self.rho = 0.85
        self.penalty = "l2"
        self.max_eval = 0
        self.max_iter = 1000
        self.power_t = 1e-2
        self.step_tol = 1e-6
        self.seed = None
        self.rng = None

        self.configure(**options)

    def _validate_configuration(self):
        if self.learning_rate not in LEARNING_RATES:
            raise UnrecognizedConfigurationError(
                f"Unknown learning rate '{self.learning_rate}'. Choose from {LEARNING_RATES}"
            )
        if self.penalty not in PENALTIES:
            raise UnrecognizedConfigurationError(
                f"Unknown penalty '{self.penalty}'. Choose from {PENALTIES}"
            )
        if self.learning_rate == "optimal" and self.alpha <= 0.0:
            raise UnrecognizedConfigurationError(
                "The 'optimal' learning rate requires a positive regularization strength alpha"
            )

    def _get_penalty(self) -> Callable[[NDArray], NDArray]:
        if self.penalty == "l2":
            return _l2_penalty
        if self.penalty == "l1":
            return _l1_penalty
        rho = float(self.rho)
        return lambda beta: _elasticnet_penalty(beta, rho)

    def _update_step_size(self, iteration: int, step_size: float) -> float:
        if self.learning_rate == "optimal":
            return 1.0 / (self.alpha * (1e3 + iteration))
        if self.learning_rate == "invscaling":
            return 1e-2 / (iteration + 1) ** self.power_t
        return step_size

    def _exhausted_budget(
        self, model: MultiObjectiveModel, elapsed: float, iteration: int
    ) -> Optional[str]:
        """First exhausted budget in the order time, evaluations, iterations."""
        if elapsed > self.max_time:
            return "max_time"
        if self.max_eval > 0 and model.cumulative_evaluation_count() > self.max_eval:
            return "max_eval"
        if iteration > self.max_iter:
            return "max_iter"
        return None

    def solve(self, model: MultiObjectiveModel) -> ExecutionStats:
        """
        Run the stochastic gradient iteration on a model.

        Parameters
        ----------
        model : MultiObjectiveModel
            The model to optimize. Its evaluation counters are incremented.

        Returns
        -------
        ExecutionStats
            Final and averaged iterate, status, elapsed time and iterations.

        Raises
        ------
        UnrecognizedConfigurationError
            If the learning rate or penalty is unknown. Raised before any
            model evaluation.
        """
        self._validate_configuration()

        penalty = self._get_penalty()
        rng = self.rng if self.rng is not None else np.random.default_rng(self.seed)
        direction = 1.0 if model.meta.minimize else -1.0
        n = model.meta.nobj

        logger.debug(
            "Starting %s on %s: learning_rate=%s, step_size=%g, penalty=%s, alpha=%g",
            self.name,
            model.meta.name,
            self.learning_rate,
            self.step_size,
            self.penalty,
            self.alpha,
        )

        start_time = time.time()
        iteration = 0
        beta = np.array(model.meta.x0, dtype=np.float64)
        beta_avg = beta.copy()

        f = model.obj(beta)
        g = model.grad(beta)

        elapsed = time.time() - start_time

        step_size = self.step_size
        exhausted = self._exhausted_budget(model, elapsed, iteration)
        converged = step_size < self.step_tol

        while not (converged or exhausted):
            step_size = self._update_step_size(iteration, step_size)

            beta_avg.fill(0.0)
            for i in rng.permutation(n):
                beta = beta - step_size * (
                    self.alpha * penalty(beta) + direction * model.grad_i(int(i), beta)
                )
                beta_avg += beta
            beta_avg /= n

            elapsed = time.time() - start_time
            iteration += 1
            logger.debug(
                "Iteration %d: step size %g, |beta| = %g",
                iteration,
                step_size,
                np.linalg.norm(beta),
            )

            exhausted = self._exhausted_budget(model, elapsed, iteration)
            converged = step_size < self.step_tol

        if converged:
            status = "small_step"
        elif exhausted:
            status = exhausted
        else:
            logger.warning("%s stopped without reaching a stopping criterion", self.name)
            status = "unknown"

        logger.info(
            "%s finished after %d iterations (%s) in %g s, %d evaluations",
            self.name,
            iteration,
            status,
            elapsed,
            model.cumulative_evaluation_count(),
        )

        return ExecutionStats(
            status=status,
            solution=beta,
            averaged_solution=beta_avg,
            objective=f,
            gradient_norm=float(np.linalg.norm(g)),
            elapsed_time=elapsed,
            iter=iteration,
            counters=model.counters.to_dict(),
            solver_specific={
                "learning_rate": self.learning_rate,
                "penalty": self.penalty,
                "final_step_size": step_size,
            },
        )


def stochastic_gradient(model: MultiObjectiveModel, **options) -> ExecutionStats:
    """
    Approximately optimize a model with stochastic gradient descent.

    Parameters
    ----------
    model : MultiObjectiveModel
        The model to optimize.
    **options
        Solver properties, see :class:`StochasticGradient`.

    Returns
    -------
    ExecutionStats
        The result of the run.
    """
    return StochasticGradient(**options).solve(model)


@njit
def _l2_penalty(beta):
    return beta


@njit
def _l1_penalty(beta):
    return np.sign(beta)


@njit
def _elasticnet_penalty(beta, rho):
    return rho * beta + (1.0 - rho) * np.sign(beta)
