"""Contains custom exceptions for the pyMultObj package."""


class PyMultObjError(Exception):
    """Exception for errors specifically thrown by pyMultObj."""


class InvalidDimensionError(PyMultObjError):
    """Raised for nonsensical problem dimensions (e.g. no variables)."""


class LengthMismatchError(PyMultObjError):
    """Raised when a sequence does not match its declared dimension."""


class RangeViolationError(PyMultObjError):
    """Raised when an index list contains indices outside the valid range."""


class InvalidObjectiveTypeError(PyMultObjError):
    """Raised for objective types outside of linear / quadratic / general."""


class UnrecognizedConfigurationError(PyMultObjError):
    """Raised when a solver is configured with an unknown option value."""
