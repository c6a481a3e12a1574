"""mdliteral - write markdown without needless backslash escapes.

Markdown serializers escape every character that could start markup, so
prose such as ``foo_bar``, ``[draft]`` or ``a & b`` comes back as
``foo\\_bar``, ``\\[draft]`` and, inside link destinations, ``a\\&b``.
mdliteral parses markdown into a small AST, moves the protected characters
out of text nodes into literal-character nodes and serializes the tree
again, so those characters are written exactly as typed.

Key Features
------------
- mistune-based parser producing a dataclass AST
- Extensible markdown serializer with per-node handlers and unsafe patterns
- ``disable-text-escape`` and ``disable-bracket-escape`` plugins
- ``[[target|alias]]`` wiki link syntax
- Plugin registry with entry point discovery
- Command-line interface with configuration file and environment support

Examples
--------
    >>> from mdliteral import Processor, disable_text_escape
    >>> Processor().use(disable_text_escape).process("foo_bar & [baz]")
    'foo_bar & [baz]'

With wiki links:

    >>> from mdliteral import wiki_link_plugin
    >>> processor = Processor().use(wiki_link_plugin).use(disable_text_escape)
    >>> processor.process("see [[Page_One|the *first* page]]")
    'see [[Page_One|the *first* page]]'

See Also
--------
mdliteral.transforms : Escape plugins and plugin registry
mdliteral.ast : AST node definitions and utilities

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "mdliteral requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from mdliteral.ast import Document, LiteralChar, Text  # noqa: E402
from mdliteral.exceptions import (  # noqa: E402
    InvalidOptionsError,
    MdLiteralError,
    ParsingError,
    PluginError,
    RenderingError,
    ValidationError,
)
from mdliteral.options import (  # noqa: E402
    DisableTextEscapeOptions,
    MarkdownParserOptions,
    MarkdownRendererOptions,
    WikiLinkOptions,
)
from mdliteral.parsers import markdown_to_ast, wiki_link_plugin  # noqa: E402
from mdliteral.pipeline import Processor  # noqa: E402
from mdliteral.transforms import disable_bracket_escape, disable_text_escape, plugin_registry  # noqa: E402

__all__ = [
    "__version__",
    "Document",
    "DisableTextEscapeOptions",
    "InvalidOptionsError",
    "LiteralChar",
    "MarkdownParserOptions",
    "MarkdownRendererOptions",
    "MdLiteralError",
    "ParsingError",
    "PluginError",
    "Processor",
    "RenderingError",
    "Text",
    "ValidationError",
    "WikiLinkOptions",
    "disable_bracket_escape",
    "disable_text_escape",
    "markdown_to_ast",
    "plugin_registry",
    "wiki_link_plugin",
]
