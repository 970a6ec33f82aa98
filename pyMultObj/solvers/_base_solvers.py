"""Solver Base Classes for Multi-Objective Models."""

from typing import ClassVar
from abc import ABC, abstractmethod
import warnings
import logging

from pyMultObj.models import MultiObjectiveModel
from ._stats import ExecutionStats

logger = logging.getLogger(__name__)


class SolverBase(ABC):
    """
    Abstract Base Class for Solver Implementations / Interfaces.

    Attributes
    ----------
    name : ClassVar[str]
        Full name of the solver
    short_name : ClassVar[str]
        Short name of the solver
    max_time : float, default=60.0
        Maximum time for the solver to run in seconds
    """

    name: ClassVar[str]
    short_name: ClassVar[str]

    # properties
    max_time: float

    def __init__(self):
        self.max_time = 60.0

    def __repr__(self) -> str:
        return f"Solver {self.name} ({self.short_name})"

    def configure(self, **options) -> "SolverBase":
        """
        Overwrite solver properties.

        Parameters
        ----------
        **options
            Property names and their new values.

        Returns
        -------
        SolverBase
            The solver itself.
        """
        for field, value in options.items():
            if not hasattr(self, field):
                warnings.warn(f"Property {field} not found in Solver {self.short_name}!")
            logger.debug("Setting solver property %s = %s", field, value)
            setattr(self, field, value)

        return self

    @abstractmethod
    def solve(self, model: MultiObjectiveModel) -> ExecutionStats:
        """
        Interface method to solve the problem described by a model.

        Parameters
        ----------
        model : MultiObjectiveModel
            The model to optimize, providing the initial point in its metadata

        Returns
        -------
        ExecutionStats
            Solution and run statistics
        """
