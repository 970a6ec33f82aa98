"""Core module with fundamental classes and exceptions for pyMultObj."""

from ._exceptions import (
    PyMultObjError,
    InvalidDimensionError,
    LengthMismatchError,
    RangeViolationError,
    InvalidObjectiveTypeError,
    UnrecognizedConfigurationError,
)
from .datamodel import PyMultObjBaseModel

__all__ = [
    "PyMultObjError",
    "InvalidDimensionError",
    "LengthMismatchError",
    "RangeViolationError",
    "InvalidObjectiveTypeError",
    "UnrecognizedConfigurationError",
    "PyMultObjBaseModel",
]
