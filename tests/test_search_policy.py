"""Regression tests pinning the search and remove-by-value tie-break.

search_node and remove_child_by_value keep the result of the *last* child
subtree they descend into, even when that result is None. These tests pin
that behaviour so it is not "fixed" into a first-match policy by accident.
"""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from ntreelib import TreeNode, NodeNotFoundError


@pytest.fixture
def scenario_tree():
    """parentTest -> [test (leaf), test -> [childTest1, childTest2]]"""
    return TreeNode("parentTest", [
        TreeNode("test"),
        TreeNode("test", [TreeNode("childTest1"), TreeNode("childTest2")]),
    ])


def test_scenario_height(scenario_tree):
    assert TreeNode.get_height(scenario_tree) == 3


def test_scenario_direct_child_short_circuit():
    tree = TreeNode("test", [TreeNode("childTest1"), TreeNode("childTest2")])
    assert tree.search_node("childTest1") is tree.children[0]


def test_scenario_remove_first_child():
    tree = TreeNode("test", [TreeNode("childTest1"), TreeNode("childTest2")])
    removed = tree.remove_child(0)
    assert removed == TreeNode("childTest1")
    assert [c.value for c in tree.children] == ["childTest2"]


def test_scenario_missing_value(scenario_tree):
    assert scenario_tree.search_node("invalid") is None


def test_self_match_is_overwritten_by_childless_subtree():
    """A matching node with a non-matching child reports None."""
    tree = TreeNode("x", [TreeNode("y")])
    assert tree.search_node("x") is None


def test_self_match_survives_only_as_leaf():
    leaf = TreeNode("x")
    assert leaf.search_node("x") is leaf


def test_deep_match_lost_to_later_sibling():
    found = TreeNode("v")
    tree = TreeNode("r", [TreeNode("a", [found]), TreeNode("b")])
    assert tree.search_node("v") is None


def test_deep_match_kept_when_last_sibling():
    found = TreeNode("v")
    tree = TreeNode("r", [TreeNode("b"), TreeNode("a", [found])])
    assert tree.search_node("v") is found


def test_scenario_fixture_multiple_levels(scenario_tree):
    # The match is under the last child, so it survives
    assert scenario_tree.search_node("childTest2") is scenario_tree.children[1].children[1]


def test_add_child_under_matching_self_with_children_raises():
    tree = TreeNode("x", [TreeNode("y")])
    with pytest.raises(NodeNotFoundError):
        tree.add_child_under("x", TreeNode("z"))
    assert tree == TreeNode("x", [TreeNode("y")])


def test_remove_by_value_removes_but_reports_none_before_later_sibling():
    inner = TreeNode("a", [TreeNode("v")])
    tree = TreeNode("r", [inner, TreeNode("b")])

    assert tree.remove_child_by_value("v") is None
    # The removal still happened
    assert inner.children == []


def test_remove_by_value_reported_from_last_subtree():
    target = TreeNode("v")
    inner = TreeNode("a", [target])
    tree = TreeNode("r", [TreeNode("b"), inner])

    assert tree.remove_child_by_value("v") is target
    assert inner.children == []


def test_remove_by_value_only_first_direct_match():
    tree = TreeNode("r", [TreeNode("v"), TreeNode("v", [TreeNode("w")])])
    removed = tree.remove_child_by_value("v")
    assert removed == TreeNode("v")
    assert tree.children == [TreeNode("v", [TreeNode("w")])]


@pytest.mark.parametrize("value", [0, 1, 2])
def test_integer_values_are_not_indices(value):
    tree = TreeNode(-1, [TreeNode(0), TreeNode(1), TreeNode(2)])
    removed = tree.remove_child_by_value(value)
    assert removed.value == value
    assert value not in [c.value for c in tree.children]
