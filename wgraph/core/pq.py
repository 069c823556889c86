"""Indexed minimum priority queue.

A binary min-heap whose entries are identified by an external integer index in
``[0, capacity)``. Keeping an inverse mapping from index to heap slot lets
``decrease_key`` and friends find an entry in O(1) and fix the heap in O(log n).

Layout:
    - ``_pq``: 1-based heap of indices (slot 0 is unused)
    - ``_qp``: inverse of ``_pq``, index -> heap slot, so ``_pq[_qp[i]] == i``
    - ``_keys``: index -> current key
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Generic, Protocol, TypeVar

from wgraph.core.exceptions import (
    DuplicateIndex,
    InvalidIndex,
    InvalidKeyDirection,
    InvalidSize,
    NotPresent,
    Underflow,
)


class _Comparable(Protocol):
    def __lt__(self, other: Any, /) -> bool: ...


K = TypeVar("K", bound=_Comparable)

_ROOT = 1


class IndexMinPQ(Generic[K]):
    """Min priority queue over indices ``0..capacity-1`` with mutable keys."""

    __slots__ = ("_max_n", "_pq", "_qp", "_keys")

    def __init__(self, max_n: int) -> None:
        if max_n < 0:
            raise InvalidSize(f"Capacity can't be negative: {max_n}")
        self._max_n = max_n
        self._pq: list[int] = [-1]
        self._qp: dict[int, int] = {}
        self._keys: dict[int, K] = {}

    @property
    def capacity(self) -> int:
        return self._max_n

    def is_empty(self) -> bool:
        return len(self._pq) == 1

    def size(self) -> int:
        """Number of entries currently in the queue. O(1)."""
        return len(self._pq) - 1

    def __len__(self) -> int:
        return self.size()

    def contains(self, i: int) -> bool:
        """Is ``i`` an index on this queue? O(1)."""
        self._validate_index(i)
        return i in self._qp

    def __contains__(self, i: object) -> bool:
        return isinstance(i, int) and 0 <= i < self._max_n and i in self._qp

    def insert(self, i: int, key: K) -> None:
        """Associate ``key`` with index ``i``. O(log n)."""
        self._validate_index(i)
        if i in self._qp:
            raise DuplicateIndex(f"Index {i} is already in the priority queue")
        self._pq.append(i)
        self._qp[i] = self.size()
        self._keys[i] = key
        self._swim(self.size())

    def min_index(self) -> int:
        """Index associated with a minimum key. O(1)."""
        self._check_not_empty()
        return self._pq[_ROOT]

    def min_key(self) -> K:
        """A minimum key. O(1)."""
        self._check_not_empty()
        return self._keys[self._pq[_ROOT]]

    def del_min(self) -> int:
        """Remove a minimum key and return its index. O(log n)."""
        self._check_not_empty()
        min_index = self._pq[_ROOT]
        self._exch(_ROOT, self.size())
        self._pop_last()
        self._sink(_ROOT)
        return min_index

    def key_of(self, i: int) -> K:
        self._check_present(i)
        return self._keys[i]

    def change_key(self, i: int, key: K) -> None:
        """Set the key of ``i``; it may move either way. O(log n)."""
        self._check_present(i)
        self._keys[i] = key
        self._swim(self._qp[i])
        self._sink(self._qp[i])

    def decrease_key(self, i: int, key: K) -> None:
        """Lower the key of ``i``. The new key must be strictly smaller."""
        self._check_present(i)
        current = self._keys[i]
        if not key < current:
            if not current < key:
                raise InvalidKeyDirection(
                    f"decrease_key({i}) called with a key equal to the key in the priority queue"
                )
            raise InvalidKeyDirection(
                f"decrease_key({i}) called with a key greater than the key in the priority queue"
            )
        self._keys[i] = key
        self._swim(self._qp[i])

    def increase_key(self, i: int, key: K) -> None:
        """Raise the key of ``i``. The new key must be strictly larger."""
        self._check_present(i)
        current = self._keys[i]
        if not current < key:
            if not key < current:
                raise InvalidKeyDirection(
                    f"increase_key({i}) called with a key equal to the key in the priority queue"
                )
            raise InvalidKeyDirection(
                f"increase_key({i}) called with a key less than the key in the priority queue"
            )
        self._keys[i] = key
        self._sink(self._qp[i])

    def remove(self, i: int) -> None:
        """Remove ``i`` and its key. O(log n)."""
        self._check_present(i)
        slot = self._qp[i]
        last = self.size()
        self._exch(slot, last)
        self._pop_last()
        # Nothing to restore when i already sat in the last slot.
        if slot != last:
            self._swim(slot)
            self._sink(slot)

    def __iter__(self) -> Iterator[int]:
        """Indices in ascending key order, as of the call. Does not modify the queue."""
        copy: IndexMinPQ[K] = IndexMinPQ(self._max_n)
        for i in self._pq[_ROOT:]:
            copy.insert(i, self._keys[i])
        return _drain(copy)

    def __repr__(self) -> str:
        return f"IndexMinPQ(size={self.size()}, capacity={self._max_n})"

    # Helpers

    def _validate_index(self, i: int) -> None:
        if i < 0:
            raise InvalidIndex(f"Index is negative: {i}")
        if i >= self._max_n:
            raise InvalidIndex(f"Index >= capacity: {i}")

    def _check_present(self, i: int) -> None:
        self._validate_index(i)
        if i not in self._qp:
            raise NotPresent(f"Index {i} is not in the priority queue")

    def _check_not_empty(self) -> None:
        if self.is_empty():
            raise Underflow("Priority queue underflow")

    def _pop_last(self) -> None:
        """Drop the entry in the last heap slot."""
        i = self._pq.pop()
        del self._qp[i]
        del self._keys[i]

    def _greater(self, a: int, b: int) -> bool:
        return self._keys[self._pq[b]] < self._keys[self._pq[a]]

    def _exch(self, a: int, b: int) -> None:
        pq = self._pq
        pq[a], pq[b] = pq[b], pq[a]
        self._qp[pq[a]] = a
        self._qp[pq[b]] = b

    def _swim(self, k: int) -> None:
        while k > _ROOT and self._greater(k // 2, k):
            self._exch(k, k // 2)
            k //= 2

    def _sink(self, k: int) -> None:
        n = self.size()
        while 2 * k <= n:
            j = 2 * k
            if j < n and self._greater(j, j + 1):
                j += 1
            if not self._greater(k, j):
                break
            self._exch(k, j)
            k = j

    def _is_min_heap(self, k: int = _ROOT) -> bool:
        """Check heap order in the subtree rooted at slot ``k``."""
        n = self.size()
        if k > n:
            return True
        for child in (2 * k, 2 * k + 1):
            if child <= n and self._greater(k, child):
                return False
        return self._is_min_heap(2 * k) and self._is_min_heap(2 * k + 1)


def _drain(pq: IndexMinPQ[Any]) -> Iterator[int]:
    while not pq.is_empty():
        yield pq.del_min()
