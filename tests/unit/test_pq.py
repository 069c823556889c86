"""Unit tests for the indexed minimum priority queue."""

import random

import pytest

from wgraph.core.exceptions import (
    DuplicateIndex,
    InvalidIndex,
    InvalidKeyDirection,
    InvalidSize,
    NotPresent,
    Underflow,
)
from wgraph.core.pq import IndexMinPQ


def drain(pq: IndexMinPQ[float]) -> list[int]:
    """Pop everything, checking heap order after each removal."""
    order = []
    while not pq.is_empty():
        order.append(pq.del_min())
        assert pq._is_min_heap()
    return order


@pytest.fixture
def pq() -> IndexMinPQ[float]:
    """Queue with keys 0:5.0, 1:2.0, 2:8.0, 3:1.0, 4:9.0."""
    queue: IndexMinPQ[float] = IndexMinPQ(10)
    for i, key in enumerate([5.0, 2.0, 8.0, 1.0, 9.0]):
        queue.insert(i, key)
    return queue


class TestInsert:
    """Tests for insert and membership."""

    def test_insert_then_contains(self) -> None:
        pq: IndexMinPQ[float] = IndexMinPQ(4)
        pq.insert(2, 3.5)
        assert pq.contains(2)
        assert 2 in pq
        assert pq.key_of(2) == 3.5
        assert pq.size() == 1
        assert len(pq) == 1

    def test_not_contained_before_insert(self) -> None:
        pq: IndexMinPQ[float] = IndexMinPQ(4)
        assert not pq.contains(0)
        assert pq.is_empty()

    def test_min_after_inserts(self, pq: IndexMinPQ[float]) -> None:
        assert pq.min_index() == 3
        assert pq.min_key() == 1.0
        assert pq._is_min_heap()

    def test_duplicate_index(self, pq: IndexMinPQ[float]) -> None:
        with pytest.raises(DuplicateIndex):
            pq.insert(0, 0.5)
        assert pq.key_of(0) == 5.0
        assert pq.size() == 5

    def test_index_out_of_range(self) -> None:
        pq: IndexMinPQ[float] = IndexMinPQ(3)
        with pytest.raises(InvalidIndex):
            pq.insert(3, 1.0)
        with pytest.raises(InvalidIndex):
            pq.insert(-1, 1.0)
        with pytest.raises(InvalidIndex):
            pq.contains(5)

    def test_in_operator_does_not_raise(self) -> None:
        pq: IndexMinPQ[float] = IndexMinPQ(3)
        assert 7 not in pq
        assert -1 not in pq

    def test_negative_capacity(self) -> None:
        with pytest.raises(InvalidSize):
            IndexMinPQ(-1)

    def test_zero_capacity(self) -> None:
        pq: IndexMinPQ[float] = IndexMinPQ(0)
        assert pq.is_empty()
        with pytest.raises(InvalidIndex):
            pq.insert(0, 1.0)


class TestDelMin:
    """Tests for del_min and peeking."""

    def test_del_min_order(self, pq: IndexMinPQ[float]) -> None:
        assert drain(pq) == [3, 1, 0, 2, 4]

    def test_del_min_removes_index(self, pq: IndexMinPQ[float]) -> None:
        assert pq.del_min() == 3
        assert not pq.contains(3)
        assert pq.size() == 4
        with pytest.raises(NotPresent):
            pq.key_of(3)

    def test_reinsert_after_del_min(self, pq: IndexMinPQ[float]) -> None:
        pq.del_min()
        pq.insert(3, 0.5)
        assert pq.min_index() == 3

    def test_underflow(self) -> None:
        pq: IndexMinPQ[float] = IndexMinPQ(2)
        with pytest.raises(Underflow):
            pq.del_min()
        with pytest.raises(Underflow):
            pq.min_index()
        with pytest.raises(Underflow):
            pq.min_key()

    def test_equal_keys(self) -> None:
        pq: IndexMinPQ[float] = IndexMinPQ(5)
        for i in range(5):
            pq.insert(i, 1.0)
        assert sorted(drain(pq)) == [0, 1, 2, 3, 4]

    def test_random_keys_come_out_sorted(self) -> None:
        rng = random.Random(7)
        keys = [rng.uniform(0, 100) for _ in range(200)]
        pq: IndexMinPQ[float] = IndexMinPQ(len(keys))
        for i, key in enumerate(keys):
            pq.insert(i, key)
            assert pq._is_min_heap()

        popped = [keys[i] for i in drain(pq)]
        assert popped == sorted(keys)


class TestChangeKey:
    """Tests for change_key, decrease_key and increase_key."""

    def test_decrease_key_moves_to_top(self, pq: IndexMinPQ[float]) -> None:
        pq.decrease_key(4, 0.5)
        assert pq.min_index() == 4
        assert pq.key_of(4) == 0.5
        assert pq._is_min_heap()

    def test_decrease_key_equal_fails(self, pq: IndexMinPQ[float]) -> None:
        with pytest.raises(InvalidKeyDirection):
            pq.decrease_key(0, 5.0)

    def test_decrease_key_higher_fails(self, pq: IndexMinPQ[float]) -> None:
        with pytest.raises(InvalidKeyDirection):
            pq.decrease_key(0, 6.0)
        assert pq.key_of(0) == 5.0

    def test_increase_key_moves_down(self, pq: IndexMinPQ[float]) -> None:
        pq.increase_key(3, 10.0)
        assert pq.min_index() == 1
        assert drain(pq) == [1, 0, 2, 4, 3]

    def test_increase_key_equal_fails(self, pq: IndexMinPQ[float]) -> None:
        with pytest.raises(InvalidKeyDirection):
            pq.increase_key(1, 2.0)

    def test_increase_key_lower_fails(self, pq: IndexMinPQ[float]) -> None:
        with pytest.raises(InvalidKeyDirection):
            pq.increase_key(1, 1.5)

    def test_change_key_both_directions(self, pq: IndexMinPQ[float]) -> None:
        pq.change_key(3, 7.0)
        assert pq._is_min_heap()
        pq.change_key(2, 0.0)
        assert pq._is_min_heap()
        assert pq.min_index() == 2
        assert drain(pq) == [2, 1, 0, 3, 4]

    def test_change_key_not_present(self, pq: IndexMinPQ[float]) -> None:
        with pytest.raises(NotPresent):
            pq.change_key(8, 1.0)
        with pytest.raises(NotPresent):
            pq.decrease_key(8, 1.0)
        with pytest.raises(NotPresent):
            pq.increase_key(8, 1.0)


class TestRemove:
    """Tests for removing arbitrary entries."""

    def test_remove_middle(self, pq: IndexMinPQ[float]) -> None:
        pq.remove(0)
        assert not pq.contains(0)
        assert pq._is_min_heap()
        assert drain(pq) == [3, 1, 2, 4]

    def test_remove_min(self, pq: IndexMinPQ[float]) -> None:
        pq.remove(3)
        assert pq.min_index() == 1

    def test_remove_last_slot(self) -> None:
        pq: IndexMinPQ[float] = IndexMinPQ(3)
        pq.insert(0, 1.0)
        pq.insert(1, 2.0)
        pq.remove(1)
        assert pq.size() == 1
        assert not pq.contains(1)
        assert pq.min_index() == 0

    def test_remove_only_entry(self) -> None:
        pq: IndexMinPQ[float] = IndexMinPQ(1)
        pq.insert(0, 1.0)
        pq.remove(0)
        assert pq.is_empty()

    def test_remove_not_present(self, pq: IndexMinPQ[float]) -> None:
        with pytest.raises(NotPresent):
            pq.remove(9)


class TestIteration:
    """Tests for non-destructive iteration."""

    def test_iter_in_key_order(self, pq: IndexMinPQ[float]) -> None:
        assert list(pq) == [3, 1, 0, 2, 4]

    def test_iter_leaves_queue_intact(self, pq: IndexMinPQ[float]) -> None:
        list(pq)
        assert pq.size() == 5
        assert pq.min_index() == 3

    def test_iter_snapshot_taken_at_call(self, pq: IndexMinPQ[float]) -> None:
        it = iter(pq)
        pq.insert(5, 0.0)
        pq.remove(0)
        assert list(it) == [3, 1, 0, 2, 4]


class TestHeapInvariant:
    """Heap order survives long mixed operation sequences."""

    @pytest.mark.parametrize("seed", [1, 2, 3])
    def test_random_operations(self, seed: int) -> None:
        rng = random.Random(seed)
        capacity = 50
        pq: IndexMinPQ[float] = IndexMinPQ(capacity)
        expected: dict[int, float] = {}

        for _ in range(1000):
            op = rng.choice(["insert", "del_min", "change", "remove", "decrease", "increase"])
            if op == "insert":
                i = rng.randrange(capacity)
                if i not in expected:
                    key = rng.uniform(0, 1000)
                    pq.insert(i, key)
                    expected[i] = key
            elif op == "del_min" and expected:
                i = pq.del_min()
                assert expected[i] == min(expected.values())
                del expected[i]
            elif op == "change" and expected:
                i = rng.choice(list(expected))
                key = rng.uniform(0, 1000)
                pq.change_key(i, key)
                expected[i] = key
            elif op == "remove" and expected:
                i = rng.choice(list(expected))
                pq.remove(i)
                del expected[i]
            elif op == "decrease" and expected:
                i = rng.choice(list(expected))
                key = expected[i] - rng.uniform(1, 10)
                pq.decrease_key(i, key)
                expected[i] = key
            elif op == "increase" and expected:
                i = rng.choice(list(expected))
                key = expected[i] + rng.uniform(1, 10)
                pq.increase_key(i, key)
                expected[i] = key

            assert pq._is_min_heap()
            assert pq.size() == len(expected)
            for i, key in expected.items():
                assert pq.key_of(i) == key
