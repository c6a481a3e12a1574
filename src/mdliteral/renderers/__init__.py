#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdliteral/renderers/__init__.py
"""Markdown serializer with pluggable node handlers."""

from mdliteral.renderers.base import BaseRenderer
from mdliteral.renderers.markdown import DEFAULT_HANDLERS, MarkdownRenderer
from mdliteral.renderers.state import (
    Info,
    NodeHandler,
    SerializationState,
    ToMarkdownExtension,
    Tracker,
    indent_lines,
)

__all__ = [
    "BaseRenderer",
    "DEFAULT_HANDLERS",
    "Info",
    "MarkdownRenderer",
    "NodeHandler",
    "SerializationState",
    "ToMarkdownExtension",
    "Tracker",
    "indent_lines",
]
