from __future__ import annotations

from typing import Generic, Mapping, Sequence, TypeVar

K = TypeVar("K")

_NO_CHILDREN: tuple = ()
_EXHAUSTED = object()


class Children(Generic[K]):
    """
    Single-pass iterator over the direct children of one parent.

    Reads straight from the map's storage; nothing is copied. The map must
    not be mutated while the iterator is alive, which holds for any map
    produced by ``ConsolidatedMapBuilder.build()``.
    """

    def __init__(self, children: Sequence[K]) -> None:
        self._children = children
        self._pos = 0

    def __iter__(self) -> Children[K]:
        return self

    def __next__(self) -> K:
        if self._pos >= len(self._children):
            raise StopIteration
        child = self._children[self._pos]
        self._pos += 1
        return child

    def __length_hint__(self) -> int:
        return len(self._children) - self._pos


class Consolidated(Generic[K]):
    """
    Depth-first pre-order walk starting at ``key`` and including it.

    Each yielded item has its direct children pushed on a stack of pending
    ``Children`` iterators, so the walk expands lazily and never recurses.
    There is no visited set: an item reachable twice is yielded twice, and a
    cycle makes the walk infinite. Take a bounded prefix (``itertools.islice``)
    when the input may be cyclic.
    """

    def __init__(self, key: K, entries: Mapping[K, Sequence[K]]) -> None:
        self._key = key
        self._entries = entries
        self._started = False
        self._stack: list[Children[K]] = []

    def _expand(self, key: K) -> None:
        self._stack.append(Children(self._entries.get(key, _NO_CHILDREN)))

    def __iter__(self) -> Consolidated[K]:
        return self

    def __next__(self) -> K:
        if not self._started:
            self._started = True
            self._expand(self._key)
            return self._key

        while self._stack:
            child = next(self._stack[-1], _EXHAUSTED)
            if child is _EXHAUSTED:
                self._stack.pop()
                continue
            self._expand(child)
            return child
        raise StopIteration

    def __length_hint__(self) -> int:
        # Lower bound: children already pending on the stack, plus the key if unread.
        if not self._started:
            return 1 + len(self._entries.get(self._key, _NO_CHILDREN))
        return sum(frame.__length_hint__() for frame in self._stack)
