"""Multi-objective models and their evaluation counters."""

from ._counters import MultiObjectiveCounters, OBJECTIVE_COUNTERS, NLP_COUNTERS
from ._model import MultiObjectiveModel
from ._linear_regression import LinearRegressionModel
from ._rosenbrock import RosenbrockModel

__all__ = [
    "MultiObjectiveCounters",
    "OBJECTIVE_COUNTERS",
    "NLP_COUNTERS",
    "MultiObjectiveModel",
    "LinearRegressionModel",
    "RosenbrockModel",
]
