"""Factory methods to manage available solver implementations."""

import warnings
import logging
from typing import Any, Union, Type
from ._base_solvers import SolverBase

SOLVERS = {}

logger = logging.getLogger(__name__)


def register_solver(solver_cls: Type[SolverBase]) -> None:
    """
    Register a new solver.

    Parameters
    ----------
    solver_cls : type
        A Solver class.
    """
    if not issubclass(solver_cls, SolverBase):
        raise ValueError("Solver must be a subclass of SolverBase.")

    if getattr(solver_cls, "short_name", None) is None:
        raise ValueError("Solver must have a 'short_name' attribute.")

    if getattr(solver_cls, "name", None) is None:
        raise ValueError("Solver must have a 'name' attribute.")

    solver_name = solver_cls.short_name
    if solver_name in SOLVERS:
        warnings.warn(f"Solver '{solver_name}' is already registered.")
    else:
        SOLVERS[solver_name] = solver_cls


def get_available_solvers() -> dict[str, Type[SolverBase]]:
    """
    Get the registered solvers.

    Returns
    -------
    dict[str, Type[SolverBase]]
        Solver classes by short name.
    """
    return SOLVERS


def get_solver(solver_desc: Union[str, dict[str, Any], SolverBase]) -> SolverBase:
    """
    Returns a solver instance based on a descriptive parameter.

    Parameters
    ----------
    solver_desc : Union[str, dict, SolverBase]
        A string with the solver name, a dictionary with the solver configuration (the
        short name under the key 'solver', all other entries are solver properties) or a
        solver instance

    Returns
    -------
    SolverBase
        A solver instance
    """
    if isinstance(solver_desc, str):
        solver = SOLVERS[solver_desc]()
    elif isinstance(solver_desc, dict):
        options = dict(solver_desc)
        solver_name = options.pop("solver", None)
        if solver_name is None:
            raise ValueError(f"No 'solver' given in solver description: {solver_desc}")
        logger.debug("Creating solver '%s' from dictionary", solver_name)
        solver = SOLVERS[solver_name]()
        solver.configure(**options)
    elif isinstance(solver_desc, SolverBase):
        solver = solver_desc
    else:
        raise ValueError(f"Invalid solver description: {solver_desc}")

    return solver
