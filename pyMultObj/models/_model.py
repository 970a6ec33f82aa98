"""Abstract interface of multi-objective models."""

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Optional, Union

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyMultObj.meta import MultiObjectiveMeta, validate_meta
from ._counters import MultiObjectiveCounters


class MultiObjectiveModel(ABC):
    """
    Abstract base class for multi-objective models.

    A model evaluates the objective components obj_i and their gradients. The
    aggregated objective is the weighted sum over all components. Every public
    evaluation increments the corresponding counter.

    Parameters
    ----------
    meta : Union[MultiObjectiveMeta, dict]
        The problem metadata.

    Attributes
    ----------
    name : ClassVar[str]
        Name of the model.
    meta : MultiObjectiveMeta
        The (immutable) problem metadata.
    counters : MultiObjectiveCounters
        Evaluation counters of this model.
    """

    name: ClassVar[str] = "Generic"

    meta: MultiObjectiveMeta
    counters: MultiObjectiveCounters

    def __init__(self, meta: Union[MultiObjectiveMeta, dict[str, Any]]):
        self.meta = validate_meta(meta)
        self.counters = MultiObjectiveCounters(self.meta.nobj)

    @abstractmethod
    def _obj_i(self, i: int, x: NDArray) -> float:
        """Evaluate the i-th objective component."""

    @abstractmethod
    def _grad_i(self, i: int, x: NDArray) -> NDArray:
        """Evaluate the gradient of the i-th objective component."""

    def _check_index(self, i: int):
        if not 0 <= i < self.meta.nobj:
            raise IndexError(f"Objective index {i} out of range [0, {self.meta.nobj})")

    def obj_i(self, i: int, x: ArrayLike) -> float:
        """Value of the i-th objective component at x."""
        self._check_index(i)
        self.counters.increment("neval_obji", i)
        return float(self._obj_i(i, np.asarray(x, dtype=np.float64)))

    def grad_i(self, i: int, x: ArrayLike) -> NDArray:
        """Gradient of the i-th objective component at x."""
        self._check_index(i)
        self.counters.increment("neval_gradi", i)
        return np.asarray(self._grad_i(i, np.asarray(x, dtype=np.float64)), dtype=np.float64)

    def obj(self, x: ArrayLike) -> float:
        """Weighted sum of all objective components at x."""
        x = np.asarray(x, dtype=np.float64)
        self.counters.increment("neval_obj")
        return float(sum(w * self._obj_i(i, x) for i, w in enumerate(self.meta.weights)))

    def grad(self, x: ArrayLike) -> NDArray:
        """Weighted sum of all objective component gradients at x."""
        x = np.asarray(x, dtype=np.float64)
        self.counters.increment("neval_grad")
        g = np.zeros((self.meta.nvar,), dtype=np.float64)
        for i, w in enumerate(self.meta.weights):
            g += w * self._grad_i(i, x)
        return g

    def counter(self, name: str, i: Optional[int] = None) -> Union[int, NDArray]:
        """Read a single evaluation counter."""
        return self.counters.get(name, i)

    def cumulative_evaluation_count(self) -> int:
        """Number of evaluations over all counters."""
        return self.counters.total()

    def reset(self) -> "MultiObjectiveModel":
        """Reset all evaluation counters."""
        self.counters.reset()
        return self

    def __str__(self) -> str:
        return f"{self.__class__.__name__}\n{self.meta}\n{self.counters}"
