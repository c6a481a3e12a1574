"""Options dataclasses for parsers, renderers and plugins."""

from mdliteral.options.base import BaseParserOptions, BasePluginOptions, BaseRendererOptions, CloneFrozenMixin
from mdliteral.options.markdown import MarkdownParserOptions, MarkdownRendererOptions
from mdliteral.options.plugins import DisableTextEscapeOptions, WikiLinkOptions

__all__ = [
    "BaseParserOptions",
    "BasePluginOptions",
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "DisableTextEscapeOptions",
    "MarkdownParserOptions",
    "MarkdownRendererOptions",
    "WikiLinkOptions",
]
