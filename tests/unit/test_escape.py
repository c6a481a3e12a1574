"""Unit tests for the context-aware markdown escaper."""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import pytest

from mdliteral.utils.escape import (
    DEFAULT_UNSAFE_PATTERNS,
    UnsafePattern,
    encode_character_reference,
    pattern_in_scope,
    safe,
)

PHRASING = ["paragraph", "phrasing"]


@pytest.mark.unit
class TestPatternInScope:
    """Test construct-stack filtering of unsafe patterns."""

    def test_unrestricted_pattern(self):
        assert pattern_in_scope([], UnsafePattern("#", at_break=True))

    def test_in_construct_required(self):
        pattern = UnsafePattern("_", in_construct=("phrasing",))
        assert pattern_in_scope(PHRASING, pattern)
        assert not pattern_in_scope([], pattern)

    def test_not_in_construct(self):
        pattern = UnsafePattern("*", in_construct=("phrasing",), not_in_construct=("autolink",))
        assert not pattern_in_scope(PHRASING + ["autolink"], pattern)


@pytest.mark.unit
class TestSafe:
    """Test escaping in different neighbourhoods."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("a_b", "a\\_b"),
            ("[x]", "\\[x]"),
            ("*x*", "\\*x\\*"),
            ("~x~", "\\~x\\~"),
            ("AT&T", "AT\\&T"),
            ("A & B", "A & B"),
            ("foo(bar)", "foo(bar)"),
            ("a | b", "a | b"),
            ("text@text", "text@text"),
            ("hello world", "hello world"),
        ],
    )
    def test_phrasing(self, value, expected):
        assert safe(PHRASING, DEFAULT_UNSAFE_PATTERNS, value) == expected

    def test_exclamation_before_bracket(self):
        assert safe(PHRASING, DEFAULT_UNSAFE_PATTERNS, "!", after="[") == "\\!"
        assert safe(PHRASING, DEFAULT_UNSAFE_PATTERNS, "!", after="a") == "!"

    def test_empty_value(self):
        assert safe(PHRASING, DEFAULT_UNSAFE_PATTERNS, "", before="a", after="b") == ""

    def test_only_value_is_escaped(self):
        assert safe(PHRASING, DEFAULT_UNSAFE_PATTERNS, "b", before="_", after="_") == "b"

    def test_at_break(self):
        assert safe([], DEFAULT_UNSAFE_PATTERNS, "# not a heading", before="\n") == "\\# not a heading"
        assert safe([], DEFAULT_UNSAFE_PATTERNS, "a # b", before="\n") == "a # b"

    def test_destination_raw_parentheses(self):
        stack = PHRASING + ["link", "destination_raw"]
        assert safe(stack, DEFAULT_UNSAFE_PATTERNS, "a(b)", after=")") == "a\\(b\\)"

    def test_destination_literal_angle_brackets(self):
        stack = ["destination_literal"]
        assert safe(stack, DEFAULT_UNSAFE_PATTERNS, "a<b>", before="<", after=">") == "a\\<b\\>"

    def test_title_quote(self):
        assert safe(["title_quote"], DEFAULT_UNSAFE_PATTERNS, 'say "hi"') == 'say \\"hi\\"'

    def test_non_punctuation_uses_character_reference(self):
        stack = ["heading_atx"]
        assert safe(stack, DEFAULT_UNSAFE_PATTERNS, "a\nb") == "a&#xA;b"

    def test_encode_option(self):
        stack = ["code_fenced_lang_grave_accent"]
        assert safe(stack, DEFAULT_UNSAFE_PATTERNS, "a`b", encode=("`",)) == "a&#x60;b"

    def test_backslash_before_punctuation_is_doubled(self):
        assert safe([], DEFAULT_UNSAFE_PATTERNS, "a\\", after="*") == "a\\\\"

    def test_unicode_is_untouched(self):
        assert safe(PHRASING, DEFAULT_UNSAFE_PATTERNS, "強調する") == "強調する"

    def test_custom_pattern(self):
        patterns = (UnsafePattern("@", in_construct=("phrasing",)),)
        assert safe(PHRASING, patterns, "a@b") == "a\\@b"


@pytest.mark.unit
def test_encode_character_reference():
    assert encode_character_reference(" ") == "&#x20;"
    assert encode_character_reference("\n") == "&#xA;"
