import os
import sys
import logging
import traceback

import bst


"""
This script accepts any number of integer positional arguments and builds a
binary search tree from them, inserting in the given order.

It outputs the in-order traversal of the tree and the sum of its leaf nodes.
With no arguments the tree is built from 4 2 6 3 1 5 7.

sample usage:

python3 bst_demo.py 8 3 10 1 6
BST_LOG_LEVEL=DEBUG python3 bst_demo.py
"""


DEFAULT_INPUT = (4, 2, 6, 3, 1, 5, 7)


def format_value(node, values):
    values.append(str(node.value))


def format_in_order(root):
    values = []
    bst.traverse_in_order(root, format_value, values)
    return '(' + ', '.join(values) + ')'


def main(values):
    tree = bst.build(values)
    print('Binary tree in order traversal:', format_in_order(tree))
    print('Sum of leaf nodes:', bst.sum_leaves(tree))


def parse_args(argv):
    return [int(arg) for arg in argv] or list(DEFAULT_INPUT)


def log_level(name):
    # unknown names fall back to WARNING instead of failing basicConfig
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.WARNING


if __name__ == '__main__':
    logging.basicConfig(level=log_level(os.environ.get('BST_LOG_LEVEL', 'WARNING')))
    try:
        values = parse_args(sys.argv[1:])
    except ValueError as ex:
        print('Error parsing arguments = ', sys.argv[1:], ', error = ', ex, file=sys.stderr)
        traceback.print_exc(file=sys.stderr)
        sys.exit(2)
    main(values=values)
