import pytest
from hypothesis import given, strategies as st

import bst


@given(st.lists(st.integers()))
def test_in_order_is_sorted_and_deduplicated(xs):
    tree = bst.build(xs)
    assert list(tree) == sorted(set(xs))
    assert bst.verify_is_bst(tree)


@given(st.lists(st.integers()), st.integers())
def test_search_finds_exactly_inserted_values(xs, x):
    tree = bst.build(xs)
    for value in xs:
        assert bst.search(tree, value).value == value
    if x not in xs:
        assert bst.search(tree, x) is None


@given(st.lists(st.integers(), min_size=1), st.data())
def test_duplicate_insert_changes_nothing(xs, data):
    tree = bst.build(xs)
    before = (list(tree), bst.sum_leaves(tree), bst.height(tree))
    tree.insert(data.draw(st.sampled_from(xs)))
    assert (list(tree), bst.sum_leaves(tree), bst.height(tree)) == before


@given(st.lists(st.integers(), unique=True), st.randoms())
def test_permutations_share_in_order_output(xs, random):
    shuffled = list(xs)
    random.shuffle(shuffled)
    assert list(bst.build(xs)) == list(bst.build(shuffled))


@given(st.lists(st.integers()), st.integers(min_value=0, max_value=20))
def test_build_count_bounds(xs, count):
    if count > len(xs):
        with pytest.raises(IndexError):
            bst.build(xs, count)
    else:
        assert list(bst.build(xs, count)) == sorted(set(xs[:count]))
