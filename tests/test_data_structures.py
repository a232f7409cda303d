import pytest

from algobook.data_structures import UnionFind, expedition, food_chain


def test_union_find_connect_and_root():
    uf = UnionFind(5)
    assert uf.connect(0, 1) is True
    assert uf.connect(1, 0) is False
    assert uf.root(0) == uf.root(1)
    assert uf.root(3) == 3


def test_union_find_sizes():
    uf = UnionFind(6)
    members = [0, 2, 4]
    uf.connect(members[0], members[1])
    uf.connect(members[1], members[2])
    assert all(uf.size(m) == len(members) for m in members)
    assert uf.size(5) == uf.size(1)
    assert uf.root(1) != uf.root(0)


def test_union_find_transitive():
    uf = UnionFind(4)
    uf.connect(0, 1)
    uf.connect(2, 3)
    assert uf.root(0) != uf.root(3)
    uf.connect(1, 2)
    assert uf.root(0) == uf.root(3)
    assert uf.size(0) == 4


def test_expedition_worked_example():
    assert expedition([10, 14, 20, 21], [10, 5, 2, 4], 25, 10) == 2


def test_expedition_needs_no_stop():
    assert expedition([5], [3], 10, 10) == expedition([], [], 10, 10)


def test_expedition_impossible():
    assert expedition([], [], 10, 5) is None
    assert expedition([3], [1], 10, 5) is None


def test_expedition_length_mismatch():
    with pytest.raises(ValueError):
        expedition([1, 2], [3], 10, 5)


def test_food_chain_worked_example():
    statements = [
        (1, 101, 1),
        (2, 1, 2),
        (2, 2, 3),
        (2, 3, 3),
        (1, 1, 3),
        (2, 3, 1),
        (1, 5, 5),
    ]
    assert food_chain(100, statements) == 3


def test_food_chain_out_of_range_all_false():
    statements = [(1, 0, 1), (2, 1, 4), (1, 4, 4)]
    assert food_chain(3, statements) == len(statements)


def test_food_chain_consistent_statements():
    statements = [(2, 1, 2), (2, 2, 3), (2, 3, 1), (1, 1, 1)]
    assert food_chain(3, statements) == food_chain(3, [])


def test_food_chain_self_eating_is_false():
    assert food_chain(2, [(2, 1, 1)]) == len([(2, 1, 1)])