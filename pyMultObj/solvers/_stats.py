"""Execution statistics returned by the solvers."""

from typing import Any, Literal

import numpy as np
from numpydantic import NDArray, Shape
from pydantic import Field

from pyMultObj.core.datamodel import PyMultObjBaseModel

STATUSES = {
    "small_step": "step too small",
    "max_time": "maximum elapsed time",
    "max_eval": "maximum number of function evaluations",
    "max_iter": "maximum iteration",
    "unknown": "unknown",
}

StatusType = Literal["small_step", "max_time", "max_eval", "max_iter", "unknown"]


class ExecutionStats(PyMultObjBaseModel):
    """
    Result of a solver run.

    Attributes
    ----------
    status : str
        Termination status, one of the keys of ``STATUSES``.
    solution : np.ndarray
        Final iterate.
    averaged_solution : np.ndarray
        Averaged iterate of the last outer iteration.
    objective : float
        Objective value at the initial point.
    gradient_norm : float
        Norm of the gradient at the initial point.
    elapsed_time : float
        Wall-clock time of the run in seconds.
    iter : int
        Number of outer iterations.
    counters : dict[str, Any]
        Snapshot of the model's evaluation counters after the run.
    solver_specific : dict[str, Any]
        Additional solver dependent information.
    """

    status: StatusType
    solution: NDArray[Shape["*"], np.float64]
    averaged_solution: NDArray[Shape["*"], np.float64]
    objective: float = np.nan
    gradient_norm: float = np.nan
    elapsed_time: float = Field(default=0.0, ge=0.0)
    iter: int = Field(default=0, ge=0)
    counters: dict[str, Any] = Field(default_factory=dict)
    solver_specific: dict[str, Any] = Field(default_factory=dict)

    @property
    def status_message(self) -> str:
        """Human readable termination status."""
        return STATUSES[self.status]

    def __str__(self) -> str:
        lines = [
            "Execution stats: " + self.status_message,
            f"  solution: {self.solution}",
            f"  averaged solution: {self.averaged_solution}",
            f"  initial objective: {self.objective:g}",
            f"  initial gradient norm: {self.gradient_norm:g}",
            f"  iterations: {self.iter}",
            f"  elapsed time: {self.elapsed_time:g} s",
        ]
        for key, value in self.solver_specific.items():
            lines.append(f"  {key}: {value}")
        return "\n".join(lines)
