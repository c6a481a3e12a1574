#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdliteral/ast/visitors.py
"""Depth-first tree walking with in-place editing support.

:func:`visit` walks a tree in document order and calls a callback for every
node matching a test. The callback receives ``(node, index, parent)`` and
controls the walk through its return value:

- ``None`` or :data:`CONTINUE`: descend into the node, then move on
- :data:`SKIP`: do not descend into the node
- :data:`EXIT`: stop the whole walk
- ``(action, next_index)``: apply ``action`` and resume the parent's loop at
  ``next_index`` instead of ``index + 1``

The index form is what makes in-place splicing safe: a callback that replaces
one child with several returns ``(SKIP, index + len(replacement))`` so the
walk neither descends into nor revisits the inserted nodes.

Examples
--------
Remove every image from a document:

    >>> def drop(node, index, parent):
    ...     del get_child_list(parent)[index]
    ...     return SKIP, index
    >>> visit(doc, "image", drop)

"""

from __future__ import annotations

from typing import Callable, Optional, Type, Union

from mdliteral.ast.nodes import Node, get_child_list

CONTINUE = "continue"
SKIP = "skip"
EXIT = "exit"

Action = str
VisitResult = Union[None, Action, tuple[Action, int]]
VisitCallback = Callable[[Node, Optional[int], Optional[Node]], VisitResult]
NodeTest = Union[None, str, Type[Node], Callable[[Node], bool]]


def _compile_test(test: NodeTest) -> Callable[[Node], bool]:
    if test is None:
        return lambda node: True
    if isinstance(test, str):
        return lambda node: node.type == test
    if isinstance(test, type):
        return lambda node: isinstance(node, test)
    return test


def _normalize(result: VisitResult) -> tuple[Action, Optional[int]]:
    if result is None:
        return CONTINUE, None
    if isinstance(result, tuple):
        action, next_index = result
        return action, next_index
    return result, None


def visit(tree: Node, test: NodeTest, callback: VisitCallback) -> None:
    """Walk ``tree`` depth-first, calling ``callback`` on matching nodes.

    Parameters
    ----------
    tree : Node
        Root of the walk; it is passed to the callback with index and parent None
    test : str, node class, callable or None
        Type tag, node class, or predicate selecting the nodes to call back on;
        None matches every node
    callback : callable
        Called as ``callback(node, index, parent)``; see the module docstring
        for the recognised return values

    """
    matches = _compile_test(test)

    def walk(node: Node, index: Optional[int], parent: Optional[Node]) -> tuple[Action, Optional[int]]:
        action, next_index = _normalize(callback(node, index, parent) if matches(node) else None)
        if action == EXIT:
            return action, next_index

        if action != SKIP:
            children = get_child_list(node)
            if children:
                position = 0
                while 0 <= position < len(children):
                    child_action, child_next = walk(children[position], position, node)
                    if child_action == EXIT:
                        return EXIT, None
                    position = child_next if child_next is not None else position + 1

        return action, next_index

    walk(tree, None, None)


def extract_nodes(tree: Node, node_type: NodeTest = None) -> list[Node]:
    """Collect all nodes matching ``node_type`` in document order.

    Parameters
    ----------
    tree : Node
        Root node to search
    node_type : str, node class, callable or None, default = None
        Selection test, as accepted by :func:`visit`

    Returns
    -------
    list of Node
        Matching nodes, including ``tree`` itself when it matches

    Examples
    --------
    >>> links = extract_nodes(doc, "link")
    >>> images = extract_nodes(doc, Image)

    """
    collected: list[Node] = []
    visit(tree, node_type, lambda node, index, parent: collected.append(node))
    return collected
