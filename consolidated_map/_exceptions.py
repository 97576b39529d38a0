class BuilderConsumedError(Exception):
    """
    Raised when a ``ConsolidatedMapBuilder`` is used after ``build()``.

    ``build()`` hands the builder's storage over to the new map rather than
    copying it, so the builder has nothing left to add to.
    """
    pass


class ColumnError(Exception):
    """Raised when a column named for the parent/child pairs is absent from the dataframe."""
    pass


class MissingValueError(ColumnError):
    """
    Raised when a parent or child cell of the dataframe is missing (NaN/None).

    A missing value never compares equal to itself, so it cannot serve as a key.
    """
    pass
