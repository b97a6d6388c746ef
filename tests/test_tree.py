"""Tests for tree module."""

from dataclasses import dataclass

import pytest

from TreeArt.models import Vertex
from TreeArt.tree import EmptyBranchError, Node, TreeError, new_tree


@dataclass
class Info:
    name: str
    size: int


class TestNewTree:
    def test_default_root_value(self):
        tree = new_tree()
        assert tree.value == "."
        assert tree.meta is None
        assert tree.children == []
        assert tree.is_branch_root

    def test_custom_root_value(self):
        assert new_tree("project").get_value() == "project"


class TestAddNode:
    def test_returns_tree_for_chaining(self):
        tree = new_tree()
        assert tree.add_node("a") is tree
        assert [c.value for c in tree.children] == ["a"]

    def test_preserves_insertion_order(self):
        tree = new_tree()
        tree.add_node("c").add_node("a").add_node("b")
        assert [c.value for c in tree.children] == ["c", "a", "b"]

    def test_on_plain_child_returns_owner(self):
        tree = new_tree()
        tree.add_node("a")
        child = tree.find_last_node()
        assert child.add_node("x") is tree
        assert [c.value for c in child.children] == ["x"]

    def test_on_branch_returns_branch(self):
        tree = new_tree()
        branch = tree.add_branch("b")
        assert branch.add_node("x") is branch

    def test_meta_node(self):
        tree = new_tree()
        tree.add_meta_node("meta", "value")
        child = tree.find_last_node()
        assert child.meta == "meta"
        assert child.value == "value"
        assert not child.is_branch_root


class TestAddBranch:
    def test_returns_new_branch(self):
        tree = new_tree()
        branch = tree.add_branch("b")
        assert branch is not tree
        assert branch.value == "b"
        assert tree.children == [branch]
        assert branch.is_branch_root

    def test_nested_chaining(self):
        tree = new_tree()
        tree.add_branch("a").add_branch("b").add_node("c")
        assert tree.children[0].children[0].children[0].value == "c"

    def test_meta_branch(self):
        tree = new_tree()
        branch = tree.add_meta_branch(42, "b")
        assert branch.get_meta_value() == 42


class TestBranch:
    def test_converts_leaf(self):
        tree = new_tree()
        tree.add_node("a")
        leaf = tree.find_last_node()
        assert not leaf.is_branch_root
        assert leaf.branch() is leaf
        assert leaf.is_branch_root
        # Now chains stay on the converted node
        assert leaf.add_node("x") is leaf

    def test_idempotent(self):
        tree = new_tree()
        tree.add_node("a")
        leaf = tree.find_last_node()
        leaf.branch()
        leaf.branch()
        assert leaf.is_branch_root
        assert tree.children == [leaf]

    def test_on_branch_is_noop(self):
        tree = new_tree()
        branch = tree.add_branch("b")
        assert branch.branch() is branch
        assert branch.is_branch_root


class TestAccessors:
    def test_set_value_and_meta(self):
        tree = new_tree()
        tree.add_node("a")
        node = tree.find_last_node()
        node.set_value("renamed")
        node.set_meta_value({"k": 1})
        assert node.get_value() == "renamed"
        assert node.get_meta_value() == {"k": 1}
        assert tree.children == [node]

    def test_find_last_node(self):
        tree = new_tree()
        tree.add_node("a").add_node("b")
        assert tree.find_last_node().value == "b"

    def test_find_last_node_empty_raises(self):
        with pytest.raises(EmptyBranchError):
            new_tree().find_last_node()

    def test_empty_branch_error_is_tree_error(self):
        assert issubclass(EmptyBranchError, TreeError)

    def test_str_renders(self):
        tree = new_tree()
        tree.add_node("a")
        assert str(tree) == ".\n└── a\n"
        assert bytes(tree) == ".\n└── a\n".encode("utf-8")

    def test_repr(self):
        assert repr(Node("v", "m")) == "Node(value='v', meta='m', children=0)"


class TestFindByMeta:
    def test_round_trip(self):
        tree = new_tree()
        tree.add_node("a")
        tree.add_branch("b").add_meta_node("target", "c")
        found = tree.find_by_meta("target")
        assert found is not None
        assert found.value == "c"
        assert found.children == []

    def test_not_found(self):
        tree = new_tree()
        tree.add_meta_node("m", "a")
        assert tree.find_by_meta("missing") is None

    def test_structural_equality(self):
        tree = new_tree()
        tree.add_meta_node(Info("x", 1), "a")
        found = tree.find_by_meta(Info("x", 1))
        assert found is not None
        assert found.value == "a"

    def test_first_match_in_preorder(self):
        tree = new_tree()
        tree.add_branch("first").add_meta_node("dup", "deep")
        tree.add_meta_node("dup", "shallow")
        assert tree.find_by_meta("dup").value == "deep"

    def test_does_not_match_self(self):
        tree = new_tree()
        tree.set_meta_value("root")
        assert tree.find_by_meta("root") is None


class TestFindByValue:
    def test_direct_child(self):
        tree = new_tree()
        tree.add_node("a").add_node("b")
        assert tree.find_by_value("b") is tree.children[1]

    def test_nested_value(self):
        tree = new_tree()
        tree.add_branch("outer").add_branch("inner").add_node("leaf")
        found = tree.find_by_value("leaf")
        assert found is not None
        assert found.value == "leaf"

    def test_does_not_match_on_meta(self):
        tree = new_tree()
        tree.add_branch("outer").add_meta_node("needle", "hay")
        assert tree.find_by_value("needle") is None

    def test_structural_equality(self):
        tree = new_tree()
        tree.add_branch("x").add_node([1, {"a": 2}])
        assert tree.find_by_value([1, {"a": 2}]) is not None

    def test_not_found(self):
        assert new_tree().find_by_value("nothing") is None


class TestWalk:
    def test_preorder_with_levels(self):
        tree = new_tree()
        tree.add_branch("a").add_node("a1")
        tree.add_node("b")
        visited = []
        tree.walk(lambda v, level: visited.append((v.node.value, level)))
        assert visited == [(".", 0), ("a", 1), ("a1", 2), ("b", 1)]

    def test_vertex_type(self):
        tree = new_tree()
        vertices = list(tree.iter_vertices())
        assert vertices == [Vertex(tree, 0)]

    def test_error_stops_walk(self):
        tree = new_tree()
        tree.add_node("a").add_node("b").add_node("c")
        visited = []

        def fn(vertex, level):
            visited.append(vertex.node.value)
            if vertex.node.value == "b":
                raise ValueError("stop")

        with pytest.raises(ValueError, match="stop"):
            tree.walk(fn)
        assert visited == [".", "a", "b"]

    def test_subtree_walk_starts_at_zero(self):
        tree = new_tree()
        branch = tree.add_branch("b")
        branch.add_node("c")
        levels = [v.level for v in branch.iter_vertices()]
        assert levels == [0, 1]
