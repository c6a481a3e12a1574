#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdliteral/ast/__init__.py
"""Document tree for mdliteral.

Re-exports the node classes together with the walking helpers used by
transforms and the serializer.
"""

from mdliteral.ast.nodes import (
    BlockQuote,
    Code,
    CodeBlock,
    Document,
    Emphasis,
    Heading,
    HTMLBlock,
    HTMLInline,
    Image,
    LineBreak,
    Link,
    List,
    ListItem,
    LiteralChar,
    Node,
    Paragraph,
    Strikethrough,
    Strong,
    Text,
    ThematicBreak,
    WikiLink,
    get_child_list,
)
from mdliteral.ast.utils import to_plain_string
from mdliteral.ast.visitors import CONTINUE, EXIT, SKIP, extract_nodes, visit

__all__ = [
    "BlockQuote",
    "Code",
    "CodeBlock",
    "Document",
    "Emphasis",
    "Heading",
    "HTMLBlock",
    "HTMLInline",
    "Image",
    "LineBreak",
    "Link",
    "List",
    "ListItem",
    "LiteralChar",
    "Node",
    "Paragraph",
    "Strikethrough",
    "Strong",
    "Text",
    "ThematicBreak",
    "WikiLink",
    "get_child_list",
    "to_plain_string",
    "visit",
    "extract_nodes",
    "CONTINUE",
    "SKIP",
    "EXIT",
]
