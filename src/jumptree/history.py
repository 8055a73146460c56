"""Navigation history tree: nodes, records and their mutation rules."""

import sys
from dataclasses import dataclass, field
from typing import Iterator

# Reserved tag of the synthetic root node; not a valid symbol name
ROOT_TAG = sys.intern("<root>")


@dataclass(eq=False)
class Node:
    """A visited symbol in the history tree.

    Nodes compare by identity: two visits of the same symbol on different
    branches are different nodes.
    """

    tag: str
    children: list["Node"] = field(default_factory=list)


@dataclass(eq=False)
class HistoryRecord:
    """A history tree together with the user's current position in it."""

    root: Node
    current: Node

    @classmethod
    def new(cls) -> "HistoryRecord":
        """Create a record holding only the root, which is also current."""
        root = Node(ROOT_TAG)
        return cls(root=root, current=root)


def intern_tag(symbol_name: str) -> str:
    """Intern a symbol name for use as a node tag."""
    return sys.intern(symbol_name)


def find_child(node: Node, tag: str) -> Node | None:
    """Return the first child of ``node`` tagged ``tag``, or None."""
    for child in node.children:
        if child.tag == tag:
            return child
    return None


def add_child(node: Node, tag: str) -> Node:
    """Append a new leaf tagged ``tag`` to ``node`` and return it."""
    child = Node(tag)
    node.children.append(child)
    return child


def iter_nodes(root: Node) -> Iterator[Node]:
    """Yield every node of the tree in pre-order."""
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        # Reversed so the first child is visited first
        stack.extend(reversed(node.children))


def find_node_by_tag(root: Node, tag: str) -> Node | None:
    """Return the first node in pre-order tagged ``tag``, or None.

    The search covers the whole tree, not just ancestors of some node, so
    with duplicate tags it returns whichever occurrence comes first.
    """
    for node in iter_nodes(root):
        if node.tag == tag:
            return node
    return None


def find_parent_by_tag(root: Node, tag: str) -> Node | None:
    """Return the first node in pre-order that has a child tagged ``tag``.

    Like ``find_node_by_tag`` this searches from the root rather than
    following the current branch, so duplicate tags elsewhere in the tree
    can win over the real parent.
    """
    for node in iter_nodes(root):
        if find_child(node, tag) is not None:
            return node
    return None


def node_count(root: Node) -> int:
    """Count the nodes in the tree."""
    return sum(1 for _ in iter_nodes(root))


def path_to(root: Node, target: Node) -> list[Node] | None:
    """Return the nodes from ``root`` down to ``target`` (by identity)."""
    stack: list[tuple[Node, list[Node]]] = [(root, [root])]
    while stack:
        node, path = stack.pop()
        if node is target:
            return path
        for child in reversed(node.children):
            stack.append((child, path + [child]))
    return None


def forward(record: HistoryRecord, tag: str) -> Node:
    """Move to the child tagged ``tag``, creating it on first visit."""
    child = find_child(record.current, tag)
    if child is None:
        child = add_child(record.current, tag)
    record.current = child
    return child


def backward(record: HistoryRecord) -> Node:
    """Move back to the node that holds the current tag as a child.

    The target is inferred from tree shape alone, searching from the root.
    This is a no-op when the current node is the root.
    """
    if record.current is record.root:
        return record.current
    found = find_parent_by_tag(record.root, record.current.tag)
    if found is not None:
        record.current = found
    return record.current
