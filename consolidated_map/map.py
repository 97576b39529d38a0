from __future__ import annotations

import logging
from typing import Generic, Hashable, Iterable, Iterator, Mapping, Protocol, Sequence, TypeVar, runtime_checkable

import pandas as pd

from ._exceptions import ColumnError, MissingValueError
from .builder import ConsolidatedMapBuilder
from .iterators import _NO_CHILDREN, Children, Consolidated

K = TypeVar("K", bound=Hashable)

logger = logging.getLogger(__name__)


@runtime_checkable
class ConsolidatedBy(Protocol[K]):
    """
    Anything that can list a key together with everything reachable from it.

    Accept this instead of ``ConsolidatedMap`` when a function only needs the
    transitive walk::

        def subtree_size(source: ConsolidatedBy[int], key: int) -> int:
            return sum(1 for _ in source.consolidated_by(key))
    """

    def consolidated_by(self, key: K) -> Iterator[K]:
        ...


class ConsolidatedMap(Generic[K]):
    """
    A read-only map from each parent to the ordered list of its children.

    Children are themselves valid keys, so the map can be walked transitively
    with ``consolidated()``. Build it with ``ConsolidatedMapBuilder``,
    ``from_pairs()`` or ``from_frame()``; ``ConsolidatedMap()`` is the empty map.

    Example::

        cmap = ConsolidatedMap.from_pairs([(10, 20), (20, 30)])
        list(cmap.children(10))      # [20]
        list(cmap.consolidated(10))  # [10, 20, 30]
        list(cmap.consolidated(5))   # [5]

    None of the queries raise: a key that was never inserted as a parent
    simply has no children.
    """

    def __init__(self, entries: Mapping[K, Iterable[K]] | None = None) -> None:
        # Copied, so later changes to the caller's mapping are not seen here.
        self._entries: dict[K, Sequence[K]] = (
            {} if entries is None else {key: tuple(values) for key, values in entries.items()}
        )

    # ── Construction ──────────────────────────────────────────────────────────

    @classmethod
    def _from_storage(cls, entries: dict[K, Sequence[K]]) -> ConsolidatedMap[K]:
        """Adopt storage handed over by a consumed builder, without copying it."""
        cmap = cls.__new__(cls)
        cmap._entries = entries
        return cmap

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[K, K]]) -> ConsolidatedMap[K]:
        """Build a map from ``(parent, child)`` pairs, in iteration order."""
        return cls._from_storage(ConsolidatedMapBuilder().extend(pairs)._take())

    @classmethod
    def from_frame(
        cls,
        data: pd.DataFrame,
        parent: str = "parent",
        child: str = "child",
    ) -> ConsolidatedMap[K]:
        """
        Build a map from two columns of a dataframe, one pair per row.
        A missing parent or child cell raises ``MissingValueError``.

        Parameters
        ----------
        data : pd.DataFrame
            One row per association. Row order is insertion order.
        parent : str
            Column holding the parent of each pair.
        child : str
            Column holding the child of each pair.
        """
        missing = [col for col in (parent, child) if col not in data.columns]
        if missing:
            raise ColumnError(
                f"Column(s) {missing} not found in dataframe. "
                f"Available columns: {list(data.columns)}"
            )
        for col in (parent, child):
            blank = data[col].isna()
            if blank.any():
                raise MissingValueError(
                    f"Column '{col}' has missing values in row(s) "
                    f"{data.index[blank].tolist()}. Drop or fill them before building."
                )
        pairs = zip(data[parent].tolist(), data[child].tolist())
        cmap = cls.from_pairs(pairs)
        logger.debug("read %d rows from dataframe columns %r → %r", len(data), parent, child)
        return cmap

    # ── Queries ───────────────────────────────────────────────────────────────

    def children(self, key: K) -> Children[K]:
        """Direct children of ``key`` in insertion order. Empty if ``key`` was never a parent."""
        return Children(self._entries.get(key, _NO_CHILDREN))

    def consolidated(self, key: K) -> Consolidated[K]:
        """
        ``key`` followed by every item reachable from it, depth-first.

        Each child is yielded right before its own expansion, and siblings
        follow insertion order. A key with no children, or one never inserted,
        yields just itself.

        Cycles are not detected. If the input contains one reachable from
        ``key``, the iterator never ends; only take a bounded prefix of it::

            from itertools import islice
            list(islice(cmap.consolidated(1), 3))
        """
        return Consolidated(key, self._entries)

    def consolidated_by(self, key: K) -> Consolidated[K]:
        """Same as ``consolidated()``; satisfies the ``ConsolidatedBy`` protocol."""
        return self.consolidated(key)

    def contains_child(self, parent: K, child: K) -> bool:
        """``True`` if ``child`` is among the direct children of ``parent``."""
        return child in self._entries.get(parent, _NO_CHILDREN)

    # ── Inspection ────────────────────────────────────────────────────────────

    @property
    def parents(self) -> list[K]:
        """Every key inserted as a parent, in order of first insertion."""
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def to_frame(self, parent: str = "parent", child: str = "child") -> pd.DataFrame:
        """
        Every stored pair as a two-column dataframe.

        Parents appear in order of first insertion and each parent's children
        in insertion order, so ``from_frame(to_frame())`` rebuilds the same pairs in the same order.
        """
        parents: list[K] = []
        children: list[K] = []
        for key, values in self._entries.items():
            for value in values:
                parents.append(key)
                children.append(value)
        return pd.DataFrame({parent: parents, child: children})

    # ── Display ───────────────────────────────────────────────────────────────

    def __repr__(self) -> str:
        if not self._entries:
            return "ConsolidatedMap (empty)"
        lines = ["ConsolidatedMap:"]
        for key, values in self._entries.items():
            for value in values:
                lines.append(f"  {key} → {value}")
        return "\n".join(lines)
