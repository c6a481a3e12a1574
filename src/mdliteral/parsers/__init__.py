#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdliteral/parsers/__init__.py
"""Markdown parsing built on mistune."""

from mdliteral.parsers.base import BaseParser
from mdliteral.parsers.markdown import MarkdownParser, markdown_to_ast
from mdliteral.parsers.wiki_link import make_wiki_link_plugin, make_wiki_link_serializer, wiki_link_plugin

__all__ = [
    "BaseParser",
    "MarkdownParser",
    "make_wiki_link_plugin",
    "make_wiki_link_serializer",
    "markdown_to_ast",
    "wiki_link_plugin",
]
