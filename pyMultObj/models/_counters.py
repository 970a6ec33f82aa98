"""Evaluation counters of multi-objective models."""

from typing import Optional, Union

import numpy as np

OBJECTIVE_COUNTERS = ("neval_obji", "neval_gradi", "neval_hessi", "neval_hiprod")
NLP_COUNTERS = (
    "neval_obj",
    "neval_grad",
    "neval_cons",
    "neval_jac",
    "neval_jprod",
    "neval_jtprod",
    "neval_hess",
    "neval_hprod",
    "neval_jhprod",
)


class MultiObjectiveCounters:
    """
    Tally of model evaluations.

    Per-objective counters hold one entry per objective component, the
    remaining counters count evaluations of the aggregated problem.

    Parameters
    ----------
    nobj : int
        Number of objective components.

    Attributes
    ----------
    per_objective : dict[str, np.ndarray]
        Counters with one entry per objective component.
    counters : dict[str, int]
        Counters of the aggregated objective and constraints.
    """

    per_objective: dict[str, np.ndarray]
    counters: dict[str, int]

    def __init__(self, nobj: int):
        self.nobj = nobj
        self.per_objective = {}
        self.counters = {}
        self.reset()

    def reset(self):
        """Set all counters to zero."""
        self.per_objective = {
            name: np.zeros((self.nobj,), dtype=np.int64) for name in OBJECTIVE_COUNTERS
        }
        self.counters = {name: 0 for name in NLP_COUNTERS}

    def increment(self, name: str, i: Optional[int] = None):
        """
        Increment a counter.

        Parameters
        ----------
        name : str
            Counter name, e.g. 'neval_gradi' or 'neval_obj'.
        i : int, optional
            Objective component index, required for per-objective counters.
        """
        if name in self.per_objective:
            if i is None:
                raise ValueError(f"Counter '{name}' requires an objective index")
            self.per_objective[name][i] += 1
        elif name in self.counters:
            self.counters[name] += 1
        else:
            raise KeyError(f"Unknown counter '{name}'")

    def get(self, name: str, i: Optional[int] = None) -> Union[int, np.ndarray]:
        """
        Read a counter.

        Per-objective counters return a copy of all entries unless an index
        is given.
        """
        if name in self.per_objective:
            if i is None:
                return self.per_objective[name].copy()
            return int(self.per_objective[name][i])
        if name in self.counters:
            return self.counters[name]
        raise KeyError(f"Unknown counter '{name}'")

    def sum_counters(self) -> int:
        """Sum of the aggregated counters."""
        return sum(self.counters.values())

    def sum_mo_counters(self) -> int:
        """Sum of all per-objective counters."""
        return int(sum(np.sum(c) for c in self.per_objective.values()))

    def total(self) -> int:
        """Sum over every counter."""
        return self.sum_counters() + self.sum_mo_counters()

    def to_dict(self) -> dict[str, Union[int, list[int]]]:
        """Snapshot of all counters as plain python values."""
        snapshot = {name: c.tolist() for name, c in self.per_objective.items()}
        snapshot.update(self.counters)
        return snapshot

    def __str__(self) -> str:
        lines = ["  Counters:"]
        for name, value in self.to_dict().items():
            lines.append(f"  {name:>14}: {value}")
        return "\n".join(lines)
