"""Unit tests for the serializer handlers installed by the escape plugins.

Nodes are built by hand here, in the shape the literal-character transform
leaves them, so each handler rule can be checked without the parser.
"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import pytest
from utils import render_inline

from mdliteral.ast import Code, Emphasis, Image, Link, LiteralChar, Text, WikiLink
from mdliteral.options import MarkdownRendererOptions
from mdliteral.renderers import SerializationState
from mdliteral.transforms import is_autolink, make_literal_wiki_link_handler, remove_escapes


def _split_label(*parts):
    return [LiteralChar(content=part) if len(part) == 1 and part in "[]()*_&|~!" else Text(content=part) for part in parts]


def _state(options=None):
    return SerializationState({}, (), options or MarkdownRendererOptions())


@pytest.mark.unit
class TestRemoveEscapes:
    """Test removal of the escaper's ampersand escapes."""

    def test_ampersand(self):
        assert remove_escapes("a\\&b\\&c") == "a&b&c"

    def test_other_escapes_are_kept(self):
        assert remove_escapes("a\\(b\\)") == "a\\(b\\)"

    def test_no_escapes(self):
        assert remove_escapes("plain") == "plain"


@pytest.mark.unit
class TestLiteralChar:
    """Test verbatim output of literal characters."""

    @pytest.mark.parametrize("character", list("[]()*_&|~!"))
    def test_written_unchanged(self, character):
        assert render_inline(Text(content="a"), LiteralChar(content=character), Text(content="b")) == f"a{character}b"

    def test_at_line_start(self):
        assert render_inline(LiteralChar(content="*"), Text(content=" item")) == "* item"


@pytest.mark.unit
class TestIsAutolink:
    """Test autolink detection over split labels."""

    def test_split_label_matches_url(self):
        link = Link(url="http://a_b.com", content=_split_label("http://a", "_", "b.com"))
        assert is_autolink(link, _state())

    def test_mailto(self):
        link = Link(url="mailto:a_b@x.com", content=_split_label("a", "_", "b@x.com"))
        assert is_autolink(link, _state())

    def test_title_prevents_autolink(self):
        link = Link(url="http://x.com", content=[Text(content="http://x.com")], title="t")
        assert not is_autolink(link, _state())

    def test_resource_link_option(self):
        link = Link(url="http://x.com", content=[Text(content="http://x.com")])
        assert not is_autolink(link, _state(MarkdownRendererOptions(resource_link=True)))

    def test_label_must_match(self):
        link = Link(url="http://x.com", content=[Text(content="x")])
        assert not is_autolink(link, _state())

    def test_scheme_required(self):
        link = Link(url="x.com", content=[Text(content="x.com")])
        assert not is_autolink(link, _state())

    def test_single_letter_scheme_rejected(self):
        link = Link(url="a:b", content=[Text(content="a:b")])
        assert not is_autolink(link, _state())

    @pytest.mark.parametrize("url", ["http://a b", "http://a<b", "http://a>b", "http://a\x7fb", "http://a\x00b"])
    def test_forbidden_characters(self, url):
        link = Link(url=url, content=[Text(content=url)])
        assert not is_autolink(link, _state())

    def test_formatted_label_is_not_autolink(self):
        link = Link(url="http://x.com", content=[Emphasis(content=[Text(content="http://x.com")])])
        assert not is_autolink(link, _state())

    def test_url_text_followed_by_emphasis(self):
        link = Link(url="http://a.com", content=[Text(content="http://a.com"), Emphasis(content=[Text(content="x")])])
        assert not is_autolink(link, _state())

    def test_url_text_followed_by_code(self):
        link = Link(url="http://a.comx", content=[Text(content="http://a.com"), Code(content="x")])
        assert not is_autolink(link, _state())

    def test_empty_url(self):
        assert not is_autolink(Link(url="", content=[]), _state())


@pytest.mark.unit
class TestLinkHandler:
    """Test link serialization with literal characters."""

    def test_autolink_with_underscore(self):
        link = Link(url="http://a_b.com", content=_split_label("http://a", "_", "b.com"))
        assert render_inline(link) == "<http://a_b.com>"

    def test_autolink_with_asterisk(self):
        link = Link(url="http://ex*mple.com", content=_split_label("http://ex", "*", "mple.com"))
        assert render_inline(link) == "<http://ex*mple.com>"

    def test_mailto_autolink(self):
        link = Link(url="mailto:user@example.com", content=[Text(content="user@example.com")])
        assert render_inline(link) == "<user@example.com>"

    def test_label_with_literal_characters(self):
        link = Link(url="http://x.com", content=_split_label("a", "_", "b"))
        assert render_inline(link) == "[a_b](http://x.com)"

    def test_mixed_label_keeps_long_form(self):
        link = Link(url="http://a.com", content=[Text(content="http://a.com"), Emphasis(content=[Text(content="x")])])
        assert render_inline(link) == "[http://a.com*x*](http://a.com)"

    def test_parentheses_use_literal_destination(self):
        link = Link(url="url(x)", content=[Text(content="text")])
        assert render_inline(link) == "[text](<url(x)>)"

    def test_ampersand_in_destination(self):
        link = Link(url="url?x=1&y=2", content=[Text(content="text")])
        assert render_inline(link) == "[text](url?x=1&y=2)"

    def test_ampersand_in_literal_destination(self):
        link = Link(url="a(b)&c", content=[Text(content="t")])
        assert render_inline(link) == "[t](<a(b)&c>)"

    def test_space_uses_literal_destination(self):
        link = Link(url="a b", content=[Text(content="t")])
        assert render_inline(link) == "[t](<a b>)"

    def test_empty_url_with_title(self):
        link = Link(url="", content=[Text(content="t")], title="x")
        assert render_inline(link) == '[t](<> "x")'

    def test_empty_url_without_title(self):
        link = Link(url="", content=[Text(content="t")])
        assert render_inline(link) == "[t]()"

    def test_title(self):
        link = Link(url="url", content=[Text(content="text")], title="title")
        assert render_inline(link) == '[text](url "title")'

    def test_title_quote_is_escaped(self):
        link = Link(url="url", content=[Text(content="t")], title='a "b"')
        assert render_inline(link) == '[t](url "a \\"b\\"")'

    def test_apostrophe_title(self):
        link = Link(url="url", content=[Text(content="t")], title="it's")
        options = MarkdownRendererOptions(quote="'")
        assert render_inline(link, options=options) == "[t](url 'it\\'s')"

    def test_resource_link_option(self):
        link = Link(url="http://x.com", content=[Text(content="http://x.com")])
        options = MarkdownRendererOptions(resource_link=True)
        assert render_inline(link, options=options) == "[http://x.com](http://x.com)"

    def test_literal_exclamation_before_link(self):
        link = Link(url="u", content=[Text(content="t")])
        assert render_inline(LiteralChar(content="!"), link) == "![t](u)"


@pytest.mark.unit
class TestImageHandler:
    """Test image serialization with literal characters."""

    def test_parentheses_use_literal_destination(self):
        assert render_inline(Image(url="image(1).png", alt_text="alt")) == "![alt](<image(1).png>)"

    def test_ampersand_in_destination(self):
        assert render_inline(Image(url="img?a=1&b=2", alt_text="alt")) == "![alt](img?a=1&b=2)"

    def test_title(self):
        assert render_inline(Image(url="a.png", alt_text="alt", title="t")) == '![alt](a.png "t")'

    def test_alt_text_is_still_escaped(self):
        assert render_inline(Image(url="a.png", alt_text="a*b")) == "![a\\*b](a.png)"

    def test_never_autolinked(self):
        assert render_inline(Image(url="http://x.com", alt_text="http://x.com")) == "![http://x.com](http://x.com)"


@pytest.mark.unit
class TestWikiLinkHandler:
    """Test verbatim wiki link output."""

    def test_target_only(self):
        assert render_inline(WikiLink(target="a_b")) == "[[a_b]]"

    def test_alias_equal_to_target(self):
        assert render_inline(WikiLink(target="a_b", alias="a_b")) == "[[a_b]]"

    def test_alias(self):
        assert render_inline(WikiLink(target="a_b", alias="alias")) == "[[a_b|alias]]"

    def test_markup_in_alias(self):
        assert render_inline(WikiLink(target="page", alias="*a_b*")) == "[[page|*a_b*]]"

    def test_custom_divider(self):
        handler = make_literal_wiki_link_handler(":")
        assert handler.serialize(WikiLink(target="a", alias="b"), None, _state(), None) == "[[a:b]]"

    def test_peek(self):
        handler = make_literal_wiki_link_handler()
        assert handler.peek(WikiLink(target="a"), None, _state(), None) == "["
