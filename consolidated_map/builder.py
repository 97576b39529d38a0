from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Generic, Hashable, Iterable, TypeVar

from ._exceptions import BuilderConsumedError

if TYPE_CHECKING:
    from .map import ConsolidatedMap

K = TypeVar("K", bound=Hashable)

logger = logging.getLogger(__name__)


class ConsolidatedMapBuilder(Generic[K]):
    """
    Append-only accumulator for parent → child pairs.

    Insert every pair, then call ``build()`` once to get a read-only
    ``ConsolidatedMap``::

        builder = ConsolidatedMapBuilder()
        builder.insert(10, 20)
        builder.insert(20, 30)
        cmap = builder.build()

    Children keep the order they were inserted in. Duplicate pairs and
    self-loops are stored as given.
    """

    def __init__(self) -> None:
        self._entries: dict[K, list[K]] | None = {}
        self._len = 0

    # ── Accumulating pairs ────────────────────────────────────────────────────

    def insert(self, parent: K, child: K) -> None:
        """Append ``child`` to the children of ``parent``."""
        entries = self._require_entries()
        entries.setdefault(parent, []).append(child)
        self._len += 1

    def extend(self, pairs: Iterable[tuple[K, K]]) -> ConsolidatedMapBuilder[K]:
        """
        Insert every ``(parent, child)`` pair in order.
        Returns self so calls can be chained::

            cmap = ConsolidatedMapBuilder().extend([(1, 2), (2, 3)]).build()
        """
        for parent, child in pairs:
            self.insert(parent, child)
        return self

    def __len__(self) -> int:
        return self._len

    # ── Finishing ─────────────────────────────────────────────────────────────

    def build(self) -> ConsolidatedMap[K]:
        """
        Hand the accumulated pairs over to a new ``ConsolidatedMap``.

        The storage is moved, not copied, and the builder is spent afterwards:
        any further ``insert()``, ``extend()`` or ``build()`` raises
        ``BuilderConsumedError``.
        """
        from .map import ConsolidatedMap

        return ConsolidatedMap._from_storage(self._take())

    def _take(self) -> dict[K, list[K]]:
        """Give up the accumulated storage and mark the builder as consumed."""
        entries = self._require_entries()
        self._entries = None
        logger.debug("built consolidated map: %d parents, %d pairs", len(entries), self._len)
        return entries

    def _require_entries(self) -> dict[K, list[K]]:
        if self._entries is None:
            raise BuilderConsumedError(
                "This builder has already been built. "
                "Create a new ConsolidatedMapBuilder to build another map."
            )
        return self._entries

    def __repr__(self) -> str:
        if self._entries is None:
            return "ConsolidatedMapBuilder (consumed)"
        return f"ConsolidatedMapBuilder ({len(self._entries)} parents, {self._len} pairs)"
