"""Problem metadata: dimensions, weights, bounds and their index classification."""

from ._meta import (
    MultiObjectiveMeta,
    ObjectiveType,
    classify_bounds,
    create_meta,
    validate_meta,
)
from ._description import histline, sparsityline, lines_of_hist, lines_of_description

__all__ = [
    "MultiObjectiveMeta",
    "ObjectiveType",
    "classify_bounds",
    "create_meta",
    "validate_meta",
    "histline",
    "sparsityline",
    "lines_of_hist",
    "lines_of_description",
]
