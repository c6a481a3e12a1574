"""Property-based tests for the literal-character transform."""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import string

import pytest
from hypothesis import given
from hypothesis import strategies as st
from utils import process

from mdliteral.ast import LiteralChar, Text
from mdliteral.constants import PROTECTED_CHARS
from mdliteral.parsers import markdown_to_ast
from mdliteral.transforms import rewrite_tree, split_text

_words = st.lists(
    st.text(alphabet=string.ascii_letters + "&|()", min_size=1, max_size=10),
    min_size=1,
    max_size=8,
)


@pytest.mark.unit
class TestSplitTextProperties:
    """Structural properties of split_text."""

    @given(st.text())
    def test_concatenation_restores_input(self, value):
        assert "".join(node.content for node in split_text(value)) == value

    @given(st.text())
    def test_node_shapes(self, value):
        nodes = split_text(value)

        for node in nodes:
            if isinstance(node, LiteralChar):
                assert node.content in PROTECTED_CHARS
            else:
                assert isinstance(node, Text)
                assert node.content
                assert not any(character in PROTECTED_CHARS for character in node.content)

        for first, second in zip(nodes, nodes[1:]):
            assert not (isinstance(first, Text) and isinstance(second, Text))


@pytest.mark.unit
class TestRewriteProperties:
    """Properties of the tree rewrite and the full pipeline."""

    @given(_words)
    def test_rewrite_is_idempotent(self, words):
        tree = markdown_to_ast(" ".join(words))
        rewrite_tree(tree)
        snapshot = repr(tree)

        assert rewrite_tree(tree) == 0
        assert repr(tree) == snapshot

    @given(_words)
    def test_plain_prose_round_trips(self, words):
        text = " ".join(words)
        assert process(text) == text
