"""Unit tests for the frozen options dataclasses."""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import dataclasses

import pytest

from mdliteral.options import (
    DisableTextEscapeOptions,
    MarkdownParserOptions,
    MarkdownRendererOptions,
    WikiLinkOptions,
)


@pytest.mark.unit
class TestMarkdownRendererOptions:
    """Test renderer option defaults and validation."""

    def test_defaults(self):
        options = MarkdownRendererOptions()
        assert options.resource_link is False
        assert options.quote == '"'
        assert options.emphasis_symbol == "*"
        assert options.bullet == "-"

    def test_frozen(self):
        options = MarkdownRendererOptions()
        with pytest.raises(dataclasses.FrozenInstanceError):
            options.quote = "'"

    def test_create_updated(self):
        options = MarkdownRendererOptions()
        updated = options.create_updated(quote="'", resource_link=True)

        assert updated.quote == "'"
        assert updated.resource_link is True
        assert options.quote == '"'

    @pytest.mark.parametrize(
        "field_name,value",
        [("quote", "`"), ("emphasis_symbol", "~"), ("bullet", "#"), ("code_fence_char", "-")],
    )
    def test_invalid_choice(self, field_name, value):
        with pytest.raises(ValueError, match=field_name):
            MarkdownRendererOptions(**{field_name: value})

    def test_create_updated_validates(self):
        with pytest.raises(ValueError):
            MarkdownRendererOptions().create_updated(quote="x")


@pytest.mark.unit
class TestPluginOptions:
    """Test parser and plugin options."""

    def test_parser_defaults(self):
        assert MarkdownParserOptions().parse_strikethrough is True

    @pytest.mark.parametrize("options_class", [DisableTextEscapeOptions, WikiLinkOptions])
    def test_alias_divider_default(self, options_class):
        assert options_class().alias_divider == "|"

    def test_alias_divider_update(self):
        options = WikiLinkOptions().create_updated(alias_divider=":")
        assert options == WikiLinkOptions(alias_divider=":")

    def test_unknown_field(self):
        with pytest.raises(TypeError):
            DisableTextEscapeOptions().create_updated(unknown=True)
