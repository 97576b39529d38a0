from .builder import ConsolidatedMapBuilder
from .map import ConsolidatedMap, ConsolidatedBy
from .iterators import Children, Consolidated
from ._exceptions import BuilderConsumedError, ColumnError, MissingValueError

__all__ = [
    "ConsolidatedMapBuilder",
    "ConsolidatedMap", "ConsolidatedBy",
    "Children", "Consolidated",
    "BuilderConsumedError", "ColumnError", "MissingValueError",
]
