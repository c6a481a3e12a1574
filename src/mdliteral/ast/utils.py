#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdliteral/ast/utils.py
"""Utility functions for working with AST nodes."""

from __future__ import annotations

from typing import Iterable

from mdliteral.ast.nodes import LiteralChar, Node, Text


def to_plain_string(nodes: Iterable[Node]) -> str:
    """Concatenate the characters carried directly by a sequence of inline nodes.

    Text and LiteralChar nodes contribute their content; any other node
    (emphasis, code, nested links) contributes nothing and is not descended
    into. A link label split into text and literal characters therefore
    yields the same string as the unsplit label. Callers comparing the
    result with a URL must check separately that no other nodes are present.

    Parameters
    ----------
    nodes : iterable of Node
        Inline nodes to flatten

    Returns
    -------
    str
        Concatenated text

    Examples
    --------
    >>> to_plain_string([Text(content="a"), LiteralChar(content="_"), Text(content="b")])
    'a_b'

    """
    return "".join(node.content for node in nodes if isinstance(node, (Text, LiteralChar)))
