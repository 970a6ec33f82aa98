"""
Metadata of multi-objective nonlinear optimization problems.

The described problem reads

    optimize   obj(x) = sum_i w_i obj_i(x)
    subject to lvar <=    x    <= uvar
               lcon <= cons(x) <= ucon

where ``optimize`` is either minimize or maximize. Infinite bounds denote
absent bounds.
"""

from enum import Enum
from typing import Any, Optional, Union
from typing_extensions import Self  # python 3.9 & 3.10 compatibility

import numpy as np
from numpydantic import NDArray, Shape
from pydantic import ConfigDict, PrivateAttr, model_validator

from pyMultObj.core import (
    InvalidDimensionError,
    InvalidObjectiveTypeError,
    LengthMismatchError,
    RangeViolationError,
)
from pyMultObj.core.datamodel import PyMultObjBaseModel
from ._description import lines_of_description


class ObjectiveType(str, Enum):
    """Structural type of a single objective component."""

    LINEAR = "linear"
    QUADRATIC = "quadratic"
    GENERAL = "general"


_OBJTYPE_SHORT_NAMES = {
    "lin": ObjectiveType.LINEAR,
    "quad": ObjectiveType.QUADRATIC,
    "gen": ObjectiveType.GENERAL,
}

_INDEX_LISTS = {"lin": "nlin", "nln": "nnln", "nnet": "nnnet", "lnet": "nlnet"}


def classify_bounds(lower: np.ndarray, upper: np.ndarray) -> tuple[np.ndarray, ...]:
    """
    Partition indices by the pattern of their bound pair.

    Parameters
    ----------
    lower : np.ndarray
        Lower bounds, -inf where absent.
    upper : np.ndarray
        Upper bounds, +inf where absent.

    Returns
    -------
    tuple[np.ndarray, ...]
        Indices of fixed (lower == upper), lower bounded only, upper bounded
        only, range (both finite, lower < upper), free and infeasible
        (lower > upper) pairs. The six index sets are mutually exclusive.
    """
    fixed = lower == upper
    infeasible = lower > upper
    has_lower = lower > -np.inf
    has_upper = upper < np.inf

    low = has_lower & ~has_upper & ~fixed
    upp = ~has_lower & has_upper & ~fixed
    rng = has_lower & has_upper & (lower < upper)
    free = ~has_lower & ~has_upper & ~fixed

    return tuple(
        np.flatnonzero(mask).astype(np.int64) for mask in (fixed, low, upp, rng, free, infeasible)
    )


def _as_vector(data: dict, key: str, dtype: type) -> np.ndarray:
    vec = np.array(data[key], dtype=dtype)
    if vec.ndim != 1:
        raise LengthMismatchError(f"'{key}' must be one-dimensional, got shape {vec.shape}")
    return vec


def _lencheck(expected: int, data: dict, *keys: str):
    for key in keys:
        if len(data[key]) != expected:
            raise LengthMismatchError(
                f"'{key}' has length {len(data[key])}, but should have length {expected}"
            )


def _as_objective_type(value: Any) -> ObjectiveType:
    if isinstance(value, ObjectiveType):
        return value
    if isinstance(value, str):
        if value in _OBJTYPE_SHORT_NAMES:
            return _OBJTYPE_SHORT_NAMES[value]
        try:
            return ObjectiveType(value)
        except ValueError:
            pass
    raise InvalidObjectiveTypeError(
        f"Invalid objective type {value!r}. The objective types should be chosen from "
        f"{[t.value for t in ObjectiveType]}"
    )


class MultiObjectiveMeta(PyMultObjBaseModel):
    """
    Immutable description of a multi-objective problem's dimensions and bounds.

    All validation happens on construction. Missing entries are filled with
    defaults derived from ``nvar``, ``nobj`` and ``ncon``.

    Attributes
    ----------
    nobj : int
        Number of objective components.
    weights : np.ndarray
        Weight of each objective component.
    objtypes : list[ObjectiveType]
        Type of each objective component.
    nnzhi : np.ndarray
        Number of nonzeros in the sparse Hessian of each objective component.
    nvar : int
        Number of variables.
    x0 : np.ndarray
        Initial guess.
    lvar, uvar : np.ndarray
        Variable lower / upper bounds.
    ncon : int
        Number of general constraints.
    y0 : np.ndarray
        Initial Lagrange multipliers.
    lcon, ucon : np.ndarray
        Constraint lower / upper bounds.
    nnzo : int
        Number of nonzeros in all objective gradients.
    nnzj : int
        Number of nonzeros in the sparse constraint Jacobian.
    nnzh : int
        Number of nonzeros in the sparse Hessian.
    lin, nln, nnet, lnet : np.ndarray
        0-based indices of linear, nonlinear, nonlinear network and linear
        network constraints.
    nlin, nnln, nnnet, nlnet : int
        Number of linear, nonlinear, nonlinear network and linear network
        constraints.
    minimize : bool
        True if the objective is minimized.
    nlo : int
        Number of nonlinear objectives.
    islp : bool
        True if the problem is a linear program.
    name : str
        Problem name.
    """

    model_config = ConfigDict(frozen=True)

    nobj: int
    weights: NDArray[Shape["*"], np.float64]
    objtypes: list[ObjectiveType]
    nnzhi: NDArray[Shape["*"], np.int64]

    nvar: int
    x0: NDArray[Shape["*"], np.float64]
    lvar: NDArray[Shape["*"], np.float64]
    uvar: NDArray[Shape["*"], np.float64]

    ncon: int = 0
    y0: NDArray[Shape["*"], np.float64]
    lcon: NDArray[Shape["*"], np.float64]
    ucon: NDArray[Shape["*"], np.float64]

    nnzo: int
    nnzj: int
    nnzh: int

    lin: NDArray[Shape["*"], np.int64]
    nln: NDArray[Shape["*"], np.int64]
    nnet: NDArray[Shape["*"], np.int64]
    lnet: NDArray[Shape["*"], np.int64]
    nlin: int
    nnln: int
    nnnet: int
    nlnet: int

    minimize: bool = True
    nlo: int = 1
    islp: bool = False
    name: str = "Generic"

    _ifix: np.ndarray = PrivateAttr()
    _ilow: np.ndarray = PrivateAttr()
    _iupp: np.ndarray = PrivateAttr()
    _irng: np.ndarray = PrivateAttr()
    _ifree: np.ndarray = PrivateAttr()
    _iinf: np.ndarray = PrivateAttr()

    _jfix: np.ndarray = PrivateAttr()
    _jlow: np.ndarray = PrivateAttr()
    _jupp: np.ndarray = PrivateAttr()
    _jrng: np.ndarray = PrivateAttr()
    _jfree: np.ndarray = PrivateAttr()
    _jinf: np.ndarray = PrivateAttr()

    @model_validator(mode="before")
    @classmethod
    def _validate_dimensions(cls, data: Any) -> Any:
        """Check dimensions, fill in defaults and check all sequence lengths."""
        if not isinstance(data, dict):
            return data

        data = dict(data)

        if data.get("nvar") is None or data.get("nobj") is None:
            raise InvalidDimensionError("Both 'nvar' and 'nobj' need to be given")

        nvar = int(data["nvar"])
        nobj = int(data["nobj"])
        ncon = int(data.get("ncon", 0))

        if nvar < 1 or nobj < 1 or ncon < 0:
            raise InvalidDimensionError(
                f"Nonsensical dimensions: nvar={nvar}, nobj={nobj}, ncon={ncon}"
            )

        data.update(nvar=nvar, nobj=nobj, ncon=ncon)

        data.setdefault("weights", np.ones(nobj))
        data.setdefault("objtypes", [ObjectiveType.GENERAL] * nobj)
        data.setdefault("nnzhi", np.full(nobj, nvar * (nvar + 1) // 2))

        data.setdefault("x0", np.zeros(nvar))
        data.setdefault("lvar", np.full(nvar, -np.inf))
        data.setdefault("uvar", np.full(nvar, np.inf))

        data.setdefault("y0", np.zeros(ncon))
        data.setdefault("lcon", np.full(ncon, -np.inf))
        data.setdefault("ucon", np.full(ncon, np.inf))

        data.setdefault("nnzo", nvar)
        data.setdefault("nnzj", nvar * ncon)
        data.setdefault("nnzh", nvar * (nvar + 1) // 2)

        data.setdefault("lin", [])
        data.setdefault("nln", np.arange(ncon))
        data.setdefault("nnet", [])
        data.setdefault("lnet", [])

        for key in ["weights", "x0", "lvar", "uvar", "y0", "lcon", "ucon"]:
            data[key] = _as_vector(data, key, np.float64)
        for key in ["nnzhi", *_INDEX_LISTS]:
            data[key] = _as_vector(data, key, np.int64)
        data["objtypes"] = list(data["objtypes"])

        for key, count in _INDEX_LISTS.items():
            data.setdefault(count, len(data[key]))

        _lencheck(nobj, data, "weights", "objtypes", "nnzhi")
        _lencheck(nvar, data, "x0", "lvar", "uvar")
        _lencheck(ncon, data, "y0", "lcon", "ucon")
        for key, count in _INDEX_LISTS.items():
            _lencheck(int(data[count]), data, key)

        for key in _INDEX_LISTS:
            ix = data[key]
            if np.any((ix < 0) | (ix >= ncon)):
                raise RangeViolationError(
                    f"'{key}' contains indices outside of [0, {ncon}): {ix.tolist()}"
                )
            if np.unique(ix).size != ix.size:
                raise RangeViolationError(f"'{key}' contains duplicate indices: {ix.tolist()}")

        data["objtypes"] = [_as_objective_type(t) for t in data["objtypes"]]

        for key in ["lvar", "uvar", "lcon", "ucon"]:
            if np.any(np.isnan(data[key])):
                raise ValueError(f"'{key}' must not contain NaN, use +/-inf for absent bounds")

        data["nnzhi"] = np.maximum(0, data["nnzhi"])
        data["nnzj"] = max(0, int(data["nnzj"]))
        data["nnzh"] = max(0, int(data["nnzh"]))

        return data

    @model_validator(mode="after")
    def _classify_indices(self) -> Self:
        """Derive the index sets and freeze all arrays."""
        (
            self._ifix,
            self._ilow,
            self._iupp,
            self._irng,
            self._ifree,
            self._iinf,
        ) = classify_bounds(self.lvar, self.uvar)
        (
            self._jfix,
            self._jlow,
            self._jupp,
            self._jrng,
            self._jfree,
            self._jinf,
        ) = classify_bounds(self.lcon, self.ucon)

        for value in list(self.__dict__.values()) + list(self.__pydantic_private__.values()):
            if isinstance(value, np.ndarray):
                value.flags.writeable = False

        return self

    # Variable index sets
    @property
    def ifix(self) -> np.ndarray:
        """Indices of fixed variables."""
        return self._ifix

    @property
    def ilow(self) -> np.ndarray:
        """Indices of variables with lower bound only."""
        return self._ilow

    @property
    def iupp(self) -> np.ndarray:
        """Indices of variables with upper bound only."""
        return self._iupp

    @property
    def irng(self) -> np.ndarray:
        """Indices of variables with lower and upper bound."""
        return self._irng

    @property
    def ifree(self) -> np.ndarray:
        """Indices of free variables."""
        return self._ifree

    @property
    def iinf(self) -> np.ndarray:
        """Indices of variables with infeasible bounds."""
        return self._iinf

    # Constraint index sets
    @property
    def jfix(self) -> np.ndarray:
        """Indices of equality constraints."""
        return self._jfix

    @property
    def jlow(self) -> np.ndarray:
        """Indices of constraints of the form c(x) >= cl."""
        return self._jlow

    @property
    def jupp(self) -> np.ndarray:
        """Indices of constraints of the form c(x) <= cu."""
        return self._jupp

    @property
    def jrng(self) -> np.ndarray:
        """Indices of constraints of the form cl <= c(x) <= cu."""
        return self._jrng

    @property
    def jfree(self) -> np.ndarray:
        """Indices of "free" constraints (there shouldn't be any)."""
        return self._jfree

    @property
    def jinf(self) -> np.ndarray:
        """Indices of visibly infeasible constraints."""
        return self._jinf

    def has_bounds(self) -> bool:
        """Whether any variable is bounded."""
        return len(self.ifree) < self.nvar

    def bound_constrained(self) -> bool:
        """Whether the problem only has bounds on the variables."""
        return self.ncon == 0 and self.has_bounds()

    def unconstrained(self) -> bool:
        """Whether the problem has neither bounds nor constraints."""
        return self.ncon == 0 and not self.has_bounds()

    def linearly_constrained(self) -> bool:
        """Whether all general constraints are linear."""
        return self.ncon > 0 and self.nlin == self.ncon

    def equality_constrained(self) -> bool:
        """Whether all general constraints are equalities."""
        return self.ncon > 0 and len(self.jfix) == self.ncon

    def inequality_constrained(self) -> bool:
        """Whether no general constraint is an equality."""
        return self.ncon > 0 and len(self.jfix) == 0

    def lines_of_description(self) -> list[str]:
        """Variable and constraint summary lines."""
        return lines_of_description(self)

    def __str__(self) -> str:
        lines = [
            f"  Problem name: {self.name}",
            f"  Number of objectives: {self.nobj}",
            *self.lines_of_description(),
        ]
        return "\n".join(lines) + "\n"


def create_meta(
    nvar: Optional[int] = None, nobj: Optional[int] = None, **kwargs
) -> MultiObjectiveMeta:
    """
    Create a MultiObjectiveMeta object (factory function).

    Parameters
    ----------
    nvar : int
        Number of variables.
    nobj : int
        Number of objective components.
    **kwargs
        Overrides of the remaining metadata (bounds, weights, ...).

    Returns
    -------
    MultiObjectiveMeta
        The validated metadata.

    Raises
    ------
    InvalidDimensionError
        If the dimensions are nonsensical.
    LengthMismatchError
        If a sequence does not match its dimension.
    RangeViolationError
        If a constraint index list contains invalid indices.
    InvalidObjectiveTypeError
        If an objective type is unknown.
    """
    return MultiObjectiveMeta(nvar=nvar, nobj=nobj, **kwargs)


def validate_meta(
    meta: Union[dict[str, Any], MultiObjectiveMeta, None] = None, **kwargs
) -> MultiObjectiveMeta:
    """
    Validate and create a MultiObjectiveMeta object.

    Parameters
    ----------
    meta : Union[dict[str, Any], MultiObjectiveMeta, None], optional
        Existing metadata or a dictionary describing it. If None, the keyword
        arguments are used.
    **kwargs
        Arbitrary keyword arguments.

    Returns
    -------
    MultiObjectiveMeta
        A validated metadata object.
    """
    if isinstance(meta, MultiObjectiveMeta):
        return meta
    if isinstance(meta, dict):
        return MultiObjectiveMeta.model_validate(meta)
    if meta is None:
        return MultiObjectiveMeta(**kwargs)
    raise ValueError(f"Invalid metadata description: {meta}")
