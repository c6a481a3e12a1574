#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdliteral/transforms/_builtin_metadata.py
"""Metadata definitions for the built-in plugins."""

from __future__ import annotations

from mdliteral.options.plugins import DisableTextEscapeOptions, WikiLinkOptions
from mdliteral.parsers.wiki_link import wiki_link_plugin
from mdliteral.transforms.disable_escape import disable_bracket_escape, disable_text_escape
from mdliteral.transforms.metadata import PluginMetadata

DISABLE_TEXT_ESCAPE_METADATA = PluginMetadata(
    name="disable-text-escape",
    description="Write [ ] ( ) * _ & | ~ ! in prose without backslash escapes",
    plugin=disable_text_escape,
    options_class=DisableTextEscapeOptions,
    author="mdliteral",
    tags=["escape"],
)

DISABLE_BRACKET_ESCAPE_METADATA = PluginMetadata(
    name="disable-bracket-escape",
    description="Write [ and * in prose without backslash escapes",
    plugin=disable_bracket_escape,
    options_class=DisableTextEscapeOptions,
    author="mdliteral",
    tags=["escape"],
)

WIKI_LINK_METADATA = PluginMetadata(
    name="wiki-link",
    description="Parse and write [[target]] and [[target|alias]] wiki links",
    plugin=wiki_link_plugin,
    options_class=WikiLinkOptions,
    author="mdliteral",
    tags=["syntax"],
)

BUILTIN_PLUGINS = (
    DISABLE_TEXT_ESCAPE_METADATA,
    DISABLE_BRACKET_ESCAPE_METADATA,
    WIKI_LINK_METADATA,
)
