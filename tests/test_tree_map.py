import pytest

from algodrills.tree_map import KthLargest, TreeMap


def _build(pairs):
    tree = TreeMap()
    for key, value in pairs:
        tree.insert(key, value)
    return tree


PAIRS = [(50, 500), (30, 300), (70, 700), (20, 200), (40, 400), (60, 600), (80, 800)]


def test_inorder_keys_are_sorted():
    tree = _build(PAIRS)
    assert tree.inorder_keys() == sorted(key for key, _ in PAIRS)


def test_get_returns_inserted_values():
    tree = _build(PAIRS)
    for key, value in PAIRS:
        assert tree.get(key) == value


def test_insert_existing_key_replaces_value():
    tree = _build(PAIRS)
    tree.insert(40, 4)
    assert tree.get(40) == 4
    assert tree.inorder_keys().count(40) == 1


def test_get_missing_key_raises():
    tree = _build(PAIRS)
    with pytest.raises(KeyError):
        tree.get(45)


def test_min_and_max():
    tree = _build(PAIRS)
    assert tree.get_min() == 200
    assert tree.get_max() == 800


def test_min_and_max_of_empty_map_raise():
    tree = TreeMap()
    with pytest.raises(ValueError):
        tree.get_min()
    with pytest.raises(ValueError):
        tree.get_max()


@pytest.mark.parametrize("key", [20, 30, 50, 70, 80])
def test_remove_keeps_order_and_other_values(key):
    tree = _build(PAIRS)
    tree.remove(key)
    remaining = [(k, v) for k, v in PAIRS if k != key]
    assert tree.inorder_keys() == sorted(k for k, _ in remaining)
    assert key not in tree
    for k, v in remaining:
        assert tree.get(k) == v


def test_remove_missing_key_changes_nothing():
    tree = _build(PAIRS)
    tree.remove(999)
    assert tree.inorder_keys() == sorted(key for key, _ in PAIRS)


def test_remove_everything_leaves_empty_map():
    tree = _build(PAIRS)
    for key, _ in PAIRS:
        tree.remove(key)
    assert tree.inorder_keys() == []
    assert len(tree) == 0


def test_kth_largest_follows_stream():
    k = 3
    stream = [4, 5, 8, 2]
    tracker = KthLargest(k, stream)
    for value in [3, 5, 10, 9, 4]:
        stream.append(value)
        assert tracker.add(value) == sorted(stream)[-k]


def test_kth_largest_with_short_start_returns_smallest():
    tracker = KthLargest(2, [])
    assert tracker.add(7) == 7
    assert tracker.add(9) == 7
    assert tracker.add(8) == 8


def test_kth_largest_rejects_bad_k():
    with pytest.raises(ValueError):
        KthLargest(0, [1, 2])