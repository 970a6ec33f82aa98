"""
Python package for multi-objective nonlinear optimization models.

This package provides
- Validated, immutable metadata of multi-objective problems with the
  classification of variables and constraints by their bounds.
- An abstract model interface with evaluation counters, and example models.
- A stochastic gradient solver over the objective components.

Import packages as follows:

    from pyMultObj import (
        create_meta,
        LinearRegressionModel,
        stochastic_gradient,
    )

Use the documentation, docstrings or examples for a detailed overview.
"""

from importlib.metadata import version, PackageNotFoundError
import logging

from .meta import MultiObjectiveMeta, ObjectiveType, create_meta, validate_meta
from .models import (
    MultiObjectiveCounters,
    MultiObjectiveModel,
    LinearRegressionModel,
    RosenbrockModel,
)
from .solvers import ExecutionStats, StochasticGradient, get_solver, stochastic_gradient

try:
    __version__ = version(__name__)
except PackageNotFoundError:
    # package is not installed
    pass

# Logging is not exposed by default and needs to be configured by the user.
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "MultiObjectiveMeta",
    "ObjectiveType",
    "create_meta",
    "validate_meta",
    "MultiObjectiveCounters",
    "MultiObjectiveModel",
    "LinearRegressionModel",
    "RosenbrockModel",
    "ExecutionStats",
    "StochasticGradient",
    "get_solver",
    "stochastic_gradient",
]
