"""Solvers module providing different solvers for pyMultObj."""

from ._factory import register_solver, get_available_solvers, get_solver
from ._base_solvers import SolverBase
from ._stats import ExecutionStats, STATUSES
from ._stochastic_gradient import StochasticGradient, stochastic_gradient

register_solver(StochasticGradient)


__all__ = [
    "StochasticGradient",
    "SolverBase",
    "ExecutionStats",
    "STATUSES",
    "stochastic_gradient",
    "register_solver",
    "get_available_solvers",
    "get_solver",
]
