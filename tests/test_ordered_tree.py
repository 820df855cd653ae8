# tests/test_ordered_tree.py
import random

import pytest

from ordered_tree.db.errors import InvalidArgumentError, KeyNotFoundError
from ordered_tree.db.tree import OrderedTree


def test_empty_tree():
    t = OrderedTree()
    assert t.size == 0
    assert len(t) == 0
    assert t.root is None
    assert str(t) == "<BinaryTree> size: 0 values: [ ]"
    with pytest.raises(KeyNotFoundError):
        t.find(1)


def test_bulk_construct_in_key_order():
    t = OrderedTree.from_arrays([5, 3, 8], ["a", "b", "c"])
    assert t.size == 3
    assert t.to_string() == "<BinaryTree> size: 3 values: [ b a c ]"
    assert t.root.key == 5
    assert t.root.left.key == 3
    assert t.root.right.key == 8


def test_constructor_with_arrays_same_as_from_arrays():
    t = OrderedTree([2, 1, 3], [20, 10, 30])
    assert t.items() == [(1, 10), (2, 20), (3, 30)]


def test_bulk_construct_length_mismatch():
    with pytest.raises(InvalidArgumentError):
        OrderedTree.from_arrays([1, 2, 3], ["a", "b"])
    # también es un ValueError
    with pytest.raises(ValueError):
        OrderedTree([1], [])


def test_bulk_construct_accepts_numpy_and_pandas():
    np = pytest.importorskip("numpy")
    pd = pytest.importorskip("pandas")
    t = OrderedTree.from_arrays(np.array([3, 1, 2]), pd.Series([0.3, 0.1, 0.2]))
    assert t.keys() == [1, 2, 3]
    assert type(t.keys()[0]) is int
    assert t.find(2) == 0.2


def test_insert_and_find():
    t = OrderedTree()
    t.insert("pera", 1.25)
    t.insert("manzana", 0.8)
    t.insert("uva", 3.1)
    assert t.size == 3
    assert t.find("manzana") == 0.8
    assert t.find("uva") == 3.1
    assert t.find("pera") == 1.25


def test_find_miss_carries_key_and_dump():
    t = OrderedTree.from_arrays([5, 3, 8], ["a", "b", "c"])
    with pytest.raises(KeyNotFoundError) as exc:
        t.find(4)
    assert exc.value.key == 4
    assert exc.value.tree_dump == str(t)
    assert "could not find key-value of: 4" in str(exc.value)
    assert "b a c" in str(exc.value)
    assert isinstance(exc.value, KeyError)


def test_find_miss_without_dump():
    t = OrderedTree.from_arrays([1, 2], ["a", "b"], dump_on_miss=False)
    with pytest.raises(KeyNotFoundError) as exc:
        t.find(7)
    assert exc.value.tree_dump is None
    assert str(exc.value) == "could not find key-value of: 7"
    # el valor por defecto de la clase no cambia
    assert OrderedTree.dump_on_miss is True


def test_duplicates_go_left_and_find_returns_first():
    t = OrderedTree()
    t.insert(2, "x")
    t.insert(2, "y")
    assert t.size == 2
    assert t.find(2) == "x"
    assert t.root.value == "x"
    assert t.root.left.value == "y"
    assert str(t) == "<BinaryTree> size: 2 values: [ y x ]"


def test_duplicate_below_other_node_not_most_recent():
    t = OrderedTree()
    t.insert(5, "root")
    t.insert(3, "first")
    t.insert(3, "second")
    t.insert(3, "third")
    assert t.size == 4
    assert t.find(3) == "first"
    assert t.values() == ["third", "second", "first", "root"]


def test_skewed_insert_still_finds():
    t = OrderedTree.from_arrays([1, 2, 3, 4, 5], ["a", "b", "c", "d", "e"])
    assert t.height() == 5
    assert t.root.left is None
    assert t.find(5) == "e"
    node, depth = t.root, 1
    while node.right is not None:
        assert node.left is None
        node, depth = node.right, depth + 1
    assert depth == 5


def test_clear_resets_and_is_idempotent():
    t = OrderedTree.from_arrays([4, 2, 6, 1, 3], list("abcde"))
    old_root = t.root
    t.clear()
    assert t.size == 0
    assert t.root is None
    # los nodos liberados ya no enlazan a sus hijos
    assert old_root.left is None and old_root.right is None
    assert str(t) == "<BinaryTree> size: 0 values: [ ]"
    t.clear()
    assert t.size == 0
    with pytest.raises(KeyNotFoundError):
        t.find(4)
    t.insert(9, "z")
    assert t.find(9) == "z"
    assert t.size == 1


def test_ordering_and_size_invariants_random():
    rnd = random.Random(1234)
    for _ in range(20):
        keys = [rnd.randint(0, 30) for _ in range(rnd.randint(0, 60))]
        values = [f"v{i}" for i in range(len(keys))]
        t = OrderedTree.from_arrays(keys, values)
        assert t.size == len(keys)
        assert t.keys() == sorted(keys)
        for k in set(keys):
            assert t.find(k) in {v for kk, v in zip(keys, values) if kk == k}
        for miss in (-1, 31):
            with pytest.raises(KeyNotFoundError):
                t.find(miss)


def test_get_and_contains():
    t = OrderedTree.from_arrays([10, 20], ["a", "b"])
    assert 10 in t
    assert 15 not in t
    assert t.get(20) == "b"
    assert t.get(15) is None
    assert t.get(15, "nada") == "nada"


def test_key_is_read_only():
    t = OrderedTree.from_arrays([1], ["a"])
    with pytest.raises(AttributeError):
        t.root.key = 2
    t.root.value = "b"
    assert t.find(1) == "b"


def test_to_networkx_structure():
    pytest.importorskip("networkx")
    t = OrderedTree.from_arrays([5, 3, 8, 5], ["a", "b", "c", "d"])
    G = t.to_networkx()
    assert G.number_of_nodes() == 4
    assert G.number_of_edges() == 3
    # ids en orden in-order
    assert [G.nodes[n]["key"] for n in sorted(G.nodes)] == [3, 5, 5, 8]
    root_id = next(n for n, d in G.nodes(data=True) if d["depth"] == 0)
    assert G.nodes[root_id]["value"] == "a"
    sides = sorted(d["side"] for _, _, d in G.out_edges(root_id, data=True))
    assert sides == ["L", "R"]


def test_height_with_leaves_and_single_node():
    t = OrderedTree()
    t.insert(1, "a")
    assert t.root.is_leaf()
    assert t.height() == 1
    t.insert(0, "b")
    assert not t.root.is_leaf()
    assert t.root.left.is_leaf()
    assert t.height() == 2
