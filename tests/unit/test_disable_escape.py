"""Unit tests for the literal-character transform.

Covers character classification, text splitting, in-place tree rewriting
and plugin registration on a processor.
"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import logging

import pytest

from mdliteral.ast import Document, Emphasis, Link, LiteralChar, Paragraph, Text, WikiLink, extract_nodes
from mdliteral.constants import MINIMAL_PROTECTED_CHARS, PROTECTED_CHARS
from mdliteral.exceptions import InvalidOptionsError
from mdliteral.options import DisableTextEscapeOptions, WikiLinkOptions
from mdliteral.pipeline import Processor
from mdliteral.transforms import (
    create_to_markdown_extension,
    disable_bracket_escape,
    disable_text_escape,
    is_protected,
    rewrite_tree,
    split_text,
)


def _describe(nodes):
    return [(node.type, node.content) for node in nodes]


@pytest.mark.unit
class TestIsProtected:
    """Test membership in the protected character sets."""

    @pytest.mark.parametrize("character", list("[]()*_&|~!"))
    def test_full_set_members(self, character):
        assert is_protected(character)

    @pytest.mark.parametrize("character", list("abc 1#<>`\\@-+.=\"'") + ["é", "強", "\n"])
    def test_non_members(self, character):
        assert not is_protected(character)

    def test_full_set_is_exact(self):
        assert PROTECTED_CHARS == frozenset("[]()*_&|~!")

    def test_minimal_set_is_exact(self):
        assert MINIMAL_PROTECTED_CHARS == frozenset("[*")
        assert is_protected("[", MINIMAL_PROTECTED_CHARS)
        assert is_protected("*", MINIMAL_PROTECTED_CHARS)
        assert not is_protected("_", MINIMAL_PROTECTED_CHARS)
        assert not is_protected("]", MINIMAL_PROTECTED_CHARS)


@pytest.mark.unit
class TestSplitText:
    """Test splitting strings into text runs and literal characters."""

    def test_identifier(self):
        assert _describe(split_text("foo_bar")) == [
            ("text", "foo"),
            ("literal_char", "_"),
            ("text", "bar"),
        ]

    def test_no_protected_characters(self):
        assert _describe(split_text("hello world")) == [("text", "hello world")]

    def test_empty_string(self):
        assert split_text("") == []

    def test_only_protected_characters(self):
        nodes = split_text("[*]")
        assert all(isinstance(node, LiteralChar) for node in nodes)
        assert [node.content for node in nodes] == ["[", "*", "]"]

    def test_adjacent_protected_characters_are_separate_nodes(self):
        assert _describe(split_text("a__b")) == [
            ("text", "a"),
            ("literal_char", "_"),
            ("literal_char", "_"),
            ("text", "b"),
        ]

    def test_leading_and_trailing(self):
        assert _describe(split_text("(x)")) == [
            ("literal_char", "("),
            ("text", "x"),
            ("literal_char", ")"),
        ]

    def test_no_empty_text_nodes(self):
        for node in split_text("!a!!b!"):
            assert node.content != ""

    def test_non_ascii_passes_through(self):
        assert _describe(split_text("を*強調*する")) == [
            ("text", "を"),
            ("literal_char", "*"),
            ("text", "強調"),
            ("literal_char", "*"),
            ("text", "する"),
        ]

    def test_custom_charset(self):
        assert _describe(split_text("a_[b", MINIMAL_PROTECTED_CHARS)) == [
            ("text", "a_"),
            ("literal_char", "["),
            ("text", "b"),
        ]


@pytest.mark.unit
class TestRewriteTree:
    """Test in-place replacement of text nodes."""

    def test_splices_at_same_position(self):
        emphasis = Emphasis(content=[Text(content="x")])
        paragraph = Paragraph(content=[Text(content="a_b"), emphasis])
        doc = Document(children=[paragraph])

        count = rewrite_tree(doc)

        assert count == 1
        assert _describe(paragraph.content[:3]) == [
            ("text", "a"),
            ("literal_char", "_"),
            ("text", "b"),
        ]
        assert paragraph.content[3] is emphasis

    def test_untouched_text_keeps_identity(self):
        text = Text(content="plain")
        paragraph = Paragraph(content=[text])

        assert rewrite_tree(Document(children=[paragraph])) == 0
        assert paragraph.content == [text]
        assert paragraph.content[0] is text

    def test_descends_into_nested_containers(self):
        link = Link(url="u", content=[Text(content="a|b")])
        paragraph = Paragraph(content=[Emphasis(content=[Text(content="x~y")]), link])
        doc = Document(children=[paragraph])

        assert rewrite_tree(doc) == 2
        literals = [node.content for node in extract_nodes(doc, LiteralChar)]
        assert literals == ["~", "|"]

    def test_siblings_after_split_are_still_visited(self):
        paragraph = Paragraph(content=[Text(content="a_b"), Text(content="c&d")])

        assert rewrite_tree(Document(children=[paragraph])) == 2
        assert [node.content for node in paragraph.content] == ["a", "_", "b", "c", "&", "d"]

    def test_is_idempotent(self):
        paragraph = Paragraph(content=[Text(content="[x] & y")])
        doc = Document(children=[paragraph])

        rewrite_tree(doc)
        first = _describe(paragraph.content)
        assert rewrite_tree(doc) == 0
        assert _describe(paragraph.content) == first

    def test_leaves_wiki_links_alone(self):
        wiki = WikiLink(target="a_b")
        paragraph = Paragraph(content=[wiki])

        assert rewrite_tree(Document(children=[paragraph])) == 0
        assert paragraph.content == [wiki]

    def test_text_root_without_parent_is_ignored(self):
        text = Text(content="a_b")
        assert rewrite_tree(text) == 0
        assert text.content == "a_b"

    def test_minimal_charset(self):
        paragraph = Paragraph(content=[Text(content="a_b [c]")])
        rewrite_tree(Document(children=[paragraph]), MINIMAL_PROTECTED_CHARS)
        assert [node.content for node in paragraph.content] == ["a_b ", "[", "c]"]


@pytest.mark.unit
class TestPluginRegistration:
    """Test how the escape plugins configure a processor."""

    def test_appends_extension_and_returns_transform(self):
        processor = Processor()
        transform = disable_text_escape(processor)

        assert callable(transform)
        assert len(processor.to_markdown_extensions) == 1
        handlers = processor.to_markdown_extensions[0].handlers
        assert set(handlers) == {"literal_char", "link", "image", "wiki_link"}

    def test_registering_twice_appends_twice(self):
        processor = Processor()
        processor.use(disable_text_escape).use(disable_text_escape)

        assert len(processor.to_markdown_extensions) == 2
        assert len(processor.transforms) == 2

    def test_transform_mutates_in_place_and_returns_none(self):
        transform = disable_text_escape(Processor())
        paragraph = Paragraph(content=[Text(content="a_b")])

        assert transform(Document(children=[paragraph])) is None
        assert len(paragraph.content) == 3

    def test_bracket_variant_uses_minimal_set(self):
        transform = disable_bracket_escape(Processor())
        paragraph = Paragraph(content=[Text(content="a_b*c")])

        transform(Document(children=[paragraph]))

        assert [node.type for node in paragraph.content] == ["text", "literal_char", "text"]

    def test_transform_names(self):
        assert disable_text_escape(Processor()).__name__ == "disable_text_escape"
        assert disable_bracket_escape(Processor()).__name__ == "disable_bracket_escape"

    def test_rejects_wrong_options_class(self):
        with pytest.raises(InvalidOptionsError) as exc_info:
            disable_text_escape(Processor(), WikiLinkOptions())

        assert exc_info.value.component_name == "disable-text-escape"
        assert exc_info.value.expected_type is DisableTextEscapeOptions

    def test_alias_divider_reaches_wiki_handler(self):
        extension = create_to_markdown_extension(DisableTextEscapeOptions(alias_divider=":"))
        handler = extension.handlers["wiki_link"]

        result = handler.serialize(WikiLink(target="a_b", alias="c"), None, None, None)

        assert result == "[[a_b:c]]"

    def test_logs_rewrite_count(self, caplog):
        transform = disable_text_escape(Processor())
        doc = Document(children=[Paragraph(content=[Text(content="a_b")])])

        with caplog.at_level(logging.DEBUG, logger="mdliteral.transforms.disable_escape"):
            transform(doc)

        assert "split 1 text node(s)" in caplog.text
