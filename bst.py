# Binary search tree: ordered insert, point search, in-order visiting and leaf sums.

import logging
from collections.abc import Sequence


class Node:

    def __init__(self, value, left=None, right=None):
        self.value = value
        self.left = left
        self.right = right

    def get_value(self):
        return self.value

    def get_left(self):
        return self.left

    def get_right(self):
        return self.right

    def set_value(self, value):
        # does not re-check ordering, prefer insert() for changing contents
        self.value = value

    def is_leaf(self):
        return self.left is None and self.right is None

    def __str__(self):
        def _value(node):
            return node.value if node else None
        return f'({self.value}) -> ({_value(self.left)}, {_value(self.right)})'

    def __repr__(self):
        return f'Node({self.value!r})'


class BinaryTree:
    """A tree is just a handle on its root; an empty tree has no root."""

    def __init__(self, root=None):
        self.root = root

    @classmethod
    def from_values(cls, values, count=None):
        return build(values, count)

    def insert(self, value) -> Node:
        return insert(self, value)

    def search(self, target):
        return search(self.root, target)

    def traverse_in_order(self, visit, *state):
        traverse_in_order(self.root, visit, *state)

    def sum_leaves(self, start=0):
        return sum_leaves(self.root, start)

    def is_empty(self):
        return self.root is None

    def __bool__(self):
        return self.root is not None

    def __contains__(self, target):
        return search(self.root, target) is not None

    def __iter__(self):
        for node in iter_in_order(self.root):
            yield node.value

    def __repr__(self):
        return f'BinaryTree({list(self)!r})'


def _root_of(tree):
    if isinstance(tree, BinaryTree):
        return tree.root
    return tree


def _find_position(root: Node, value):
    """
    Walk down from root the way an insert of value would.

    Returns (parent, node): node is the one holding value, or None when value
    is absent, in which case parent is where a new leaf would be attached.
    """
    parent, node = None, root
    while node is not None:
        if value == node.value:
            break
        parent = node
        node = node.left if value < node.value else node.right
    return parent, node


def insert(tree: BinaryTree, value) -> Node:
    if not isinstance(tree, BinaryTree):
        raise ValueError(f'insert needs a BinaryTree handle, got {tree!r}')

    if tree.root is None:
        tree.root = Node(value)
        return tree.root

    parent, node = _find_position(tree.root, value)
    if node is not None:
        logging.debug(f'ignoring duplicate insert of {value = }')
        return node

    node = Node(value)
    if value < parent.value:
        parent.left = node
    else:
        parent.right = node
    return node


def search(tree, target):
    _, node = _find_position(_root_of(tree), target)
    return node


def build(values, count=None) -> BinaryTree:
    if not isinstance(values, Sequence):
        values = list(values)

    if count is None:
        count = len(values)
    if count < 0:
        raise ValueError(f'count must not be negative, got {count}')
    if count > len(values):
        raise IndexError(f'count {count} exceeds the {len(values)} values available')

    tree = BinaryTree()
    for idx in range(count):
        insert(tree, values[idx])

    logging.debug(f'built tree from {count} values')
    return tree


def iter_in_order(tree):
    # explicit stack so degenerate (list shaped) trees don't hit the recursion limit
    stack = []
    node = _root_of(tree)
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node
        node = node.right


def traverse_in_order(root, visit, *state):
    """
    Call visit(node, *state) for every node, smallest value first.

    Extra positional arguments are handed to every call unchanged, so the same
    walk can print, collect or filter depending on the visitor. The visitor must
    not restructure the tree.
    """
    for node in iter_in_order(root):
        visit(node, *state)


def sum_leaves(root, start=0):
    def _collect_leaf(node, leaves):
        if node.is_leaf():
            leaves.append(node.value)

    leaves = []
    traverse_in_order(root, _collect_leaf, leaves)
    return sum(leaves, start)


def height(tree) -> int:
    root = _root_of(tree)
    if root is None:
        return 0

    deepest = 0
    stack = [(root, 1)]
    while stack:
        node, depth = stack.pop()
        deepest = max(deepest, depth)
        for child in (node.left, node.right):
            if child is not None:
                stack.append((child, depth + 1))
    return deepest


def verify_is_bst(root) -> bool:
    last_value = None
    for idx, node in enumerate(iter_in_order(root)):
        if idx and not last_value < node.value:
            return False
        last_value = node.value

    return True
