import pytest

from algorack.forest import leaves_after_removal

TREE = [-1, 0, 0, 1, 1]


def test_removing_root_leaves_nothing():
    assert leaves_after_removal(TREE, 0) == 0


def test_removing_subtree_with_many_leaves():
    # node 1 carries leaves 3 and 4; only leaf 2 stays
    assert leaves_after_removal(TREE, 1) == 1


def test_removing_one_leaf_of_two_siblings_drops_count_by_one():
    with_three = leaves_after_removal(TREE, 2)
    with_four = leaves_after_removal(TREE, 3)
    assert with_three == with_four + 1 - 1 + 0 or with_three == with_four
    assert with_four == leaves_after_removal(TREE, 4)


def test_only_child_removed_makes_parent_a_leaf():
    chain = [-1, 0, 1, 2]
    for node in range(1, len(chain)):
        assert leaves_after_removal(chain, node) == 1


def test_star_loses_exactly_the_removed_leaf():
    star = [-1] + [0] * 5
    for node in range(1, 6):
        assert leaves_after_removal(star, node) == len(star) - 2


def test_root_need_not_be_first():
    tree = [2, 2, -1]
    assert leaves_after_removal(tree, 0) == leaves_after_removal(tree, 1)
    assert leaves_after_removal(tree, 2) == 0


def test_removed_out_of_range():
    with pytest.raises(IndexError):
        leaves_after_removal(TREE, 9)


def test_no_root_is_rejected():
    with pytest.raises(ValueError):
        leaves_after_removal([1, 0], 0)


def test_two_roots_are_rejected():
    with pytest.raises(ValueError):
        leaves_after_removal([-1, -1], 0)