"""Tests for jumptree.history module."""

from jumptree.history import (
    ROOT_TAG,
    HistoryRecord,
    Node,
    add_child,
    backward,
    find_child,
    find_node_by_tag,
    find_parent_by_tag,
    forward,
    intern_tag,
    iter_nodes,
    node_count,
    path_to,
)


def tags(nodes):
    return [node.tag for node in nodes]


class TestHistoryRecord:
    def test_new_record_is_root_only(self, record):
        assert record.root.tag == ROOT_TAG
        assert record.root.children == []
        assert record.current is record.root

    def test_records_are_independent(self):
        first = HistoryRecord.new()
        second = HistoryRecord.new()
        assert first.root is not second.root

    def test_nodes_compare_by_identity(self):
        assert Node("foo") != Node("foo")


class TestInternTag:
    def test_equal_names_share_identity(self):
        built = "".join(["par", "se"])
        assert intern_tag(built) is intern_tag("parse")


class TestFindChild:
    def test_finds_matching_child(self):
        root = Node(ROOT_TAG)
        a = add_child(root, "a")
        add_child(root, "b")
        assert find_child(root, "a") is a

    def test_missing_child_returns_none(self):
        root = Node(ROOT_TAG)
        add_child(root, "a")
        assert find_child(root, "z") is None

    def test_only_direct_children_are_searched(self):
        root = Node(ROOT_TAG)
        a = add_child(root, "a")
        add_child(a, "deep")
        assert find_child(root, "deep") is None


class TestAddChild:
    def test_appends_in_insertion_order(self):
        root = Node(ROOT_TAG)
        add_child(root, "first")
        add_child(root, "second")
        assert tags(root.children) == ["first", "second"]

    def test_new_child_is_leaf(self):
        child = add_child(Node(ROOT_TAG), "a")
        assert child.tag == "a"
        assert child.children == []


class TestFindNodeByTag:
    def test_finds_root(self, record):
        assert find_node_by_tag(record.root, ROOT_TAG) is record.root

    def test_missing_tag_returns_none(self, record):
        assert find_node_by_tag(record.root, "nowhere") is None

    def test_searches_subtree_before_later_siblings(self):
        root = Node(ROOT_TAG)
        a = add_child(root, "a")
        b = add_child(root, "b")
        first_x = add_child(a, "x")
        add_child(b, "x")
        assert find_node_by_tag(root, "x") is first_x

    def test_prefers_shallow_node_in_earlier_branch(self):
        root = Node(ROOT_TAG)
        a = add_child(root, "a")
        deep_b = add_child(add_child(a, "m"), "b")
        add_child(root, "b")
        assert find_node_by_tag(root, "b") is deep_b


class TestFindParentByTag:
    def test_finds_parent(self):
        root = Node(ROOT_TAG)
        a = add_child(root, "a")
        add_child(a, "b")
        assert find_parent_by_tag(root, "b") is a

    def test_top_level_parent_is_root(self):
        root = Node(ROOT_TAG)
        add_child(root, "a")
        assert find_parent_by_tag(root, "a") is root

    def test_root_tag_has_no_parent(self, record):
        assert find_parent_by_tag(record.root, ROOT_TAG) is None


class TestIteration:
    def test_iter_nodes_is_preorder(self):
        root = Node(ROOT_TAG)
        a = add_child(root, "a")
        add_child(a, "a1")
        add_child(a, "a2")
        add_child(root, "b")
        assert tags(iter_nodes(root)) == [ROOT_TAG, "a", "a1", "a2", "b"]

    def test_node_count(self):
        root = Node(ROOT_TAG)
        add_child(add_child(root, "a"), "b")
        add_child(root, "c")
        assert node_count(root) == 4

    def test_path_to(self):
        root = Node(ROOT_TAG)
        a = add_child(root, "a")
        b = add_child(a, "b")
        add_child(root, "c")
        assert path_to(root, b) == [root, a, b]

    def test_path_to_foreign_node(self, record):
        assert path_to(record.root, Node("stray")) is None


class TestForward:
    def test_new_tag_adds_one_node(self, record):
        forward(record, "foo")
        assert node_count(record.root) == 2
        assert record.current.tag == "foo"
        assert record.root.children == [record.current]

    def test_growth_along_a_path(self, record):
        for i, tag in enumerate(["a", "b", "c", "d"], start=2):
            forward(record, tag)
            assert node_count(record.root) == i
        assert tags(path_to(record.root, record.current)) == [ROOT_TAG, "a", "b", "c", "d"]

    def test_revisit_reuses_existing_child(self, record):
        first = forward(record, "a")
        record.current = record.root
        second = forward(record, "a")
        assert second is first
        assert len(record.root.children) == 1
        assert node_count(record.root) == 2

    def test_same_symbol_twice_from_root(self, record):
        forward(record, "a")
        count = node_count(record.root)
        record.current = record.root
        forward(record, "a")
        assert node_count(record.root) == count
        assert tags(record.root.children) == ["a"]

    def test_same_tag_nests_when_not_a_sibling(self, record):
        forward(record, "a")
        forward(record, "a")
        assert tags(path_to(record.root, record.current)) == [ROOT_TAG, "a", "a"]


class TestBackward:
    def test_back_reaches_parent(self, record):
        forward(record, "foo")
        foo = record.current
        forward(record, "bar")
        assert backward(record) is foo
        assert record.current is foo

    def test_back_walks_up_repeatedly(self, record):
        for tag in ["a", "b", "c"]:
            forward(record, tag)
        backward(record)
        assert record.current.tag == "b"
        backward(record)
        assert record.current.tag == "a"
        backward(record)
        assert record.current is record.root

    def test_back_at_root_is_noop(self, record):
        assert backward(record) is record.root
        assert node_count(record.root) == 1

    def test_back_never_grows_tree(self, record):
        forward(record, "a")
        forward(record, "b")
        backward(record)
        backward(record)
        assert node_count(record.root) == 3

    def test_back_then_new_symbol_branches_from_parent(self, record):
        forward(record, "foo")
        forward(record, "bar")
        backward(record)
        forward(record, "baz")

        foo = record.root.children[0]
        assert tags(record.root.children) == ["foo"]
        assert tags(foo.children) == ["bar", "baz"]
        assert record.current is foo.children[1]

    def test_back_to_root_then_new_symbol_adds_sibling(self, record):
        forward(record, "foo")
        forward(record, "bar")
        backward(record)
        backward(record)
        forward(record, "baz")

        assert tags(record.root.children) == ["foo", "baz"]
        assert tags(record.root.children[0].children) == ["bar"]
        assert record.current is record.root.children[1]

    def test_duplicate_tags_resolve_to_first_parent_in_preorder(self, record):
        forward(record, "a")
        forward(record, "shared")
        backward(record)
        backward(record)
        forward(record, "b")
        forward(record, "shared")
        b = record.root.children[1]

        # Searching from the root finds "shared" under "a" first
        backward(record)
        assert record.current is record.root.children[0]
        assert record.current is not b

    def test_deep_history_does_not_recurse(self, record):
        for i in range(5000):
            forward(record, f"sym{i}")
        assert node_count(record.root) == 5001
        assert backward(record).tag == "sym4998"
