#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdliteral/ast/nodes.py
"""AST node classes for markdown document representation.

This module defines the node hierarchy consumed by the literal-character
transform and the markdown serializer. Each node class carries a ``type``
tag; parsers, walkers and serializer handlers dispatch on that tag rather
than on the Python class, so extension node kinds (``wiki_link``,
``literal_char``) plug in as new variants without subclassing.

Node Hierarchy
--------------
Block-level nodes:
    - Document, Heading, Paragraph, CodeBlock, BlockQuote
    - List, ListItem, ThematicBreak, HTMLBlock

Inline nodes:
    - Text, Emphasis, Strong, Code, Strikethrough
    - Link, Image, LineBreak, HTMLInline
    - WikiLink (wiki-style ``[[target|alias]]`` links)
    - LiteralChar (a single character emitted verbatim, never escaped)

Containers keep their children in ``children`` (block containers),
``content`` (inline containers) or ``items`` (lists). Use
:func:`get_child_list` to obtain the live child list of any node.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Optional


class Node:
    """Base class for all AST nodes.

    Attributes
    ----------
    type : str
        Class-level tag naming the node kind (e.g. ``"text"``, ``"link"``)
    metadata : dict
        Arbitrary metadata associated with the node

    """

    type: ClassVar[str] = "node"
    metadata: dict[str, Any]


# ============================================================================
# Block-level Nodes
# ============================================================================


@dataclass
class Document(Node):
    """Root document node containing block-level children.

    Parameters
    ----------
    children : list of Node, default = empty list
        Block-level nodes in the document
    metadata : dict, default = empty dict
        Document-level metadata

    """

    type: ClassVar[str] = "document"

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class Heading(Node):
    """Heading node (h1-h6).

    Parameters
    ----------
    level : int
        Heading level (1-6, where 1 is most important)
    content : list of Node, default = empty list
        Inline nodes representing heading text
    metadata : dict, default = empty dict
        Heading metadata

    """

    type: ClassVar[str] = "heading"

    level: int
    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate heading level is between 1 and 6."""
        if not 1 <= self.level <= 6:
            raise ValueError(f"Heading level must be 1-6, got {self.level}")


@dataclass
class Paragraph(Node):
    """Paragraph node containing inline content."""

    type: ClassVar[str] = "paragraph"

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class CodeBlock(Node):
    """Fenced code block.

    Parameters
    ----------
    content : str
        Code content, emitted verbatim
    language : str or None, default = None
        Language identifier written after the opening fence

    """

    type: ClassVar[str] = "code_block"

    content: str
    language: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class BlockQuote(Node):
    """Block quote containing block-level children."""

    type: ClassVar[str] = "block_quote"

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class ListItem(Node):
    """List item containing block-level children."""

    type: ClassVar[str] = "list_item"

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class List(Node):
    """List node (ordered or unordered).

    Parameters
    ----------
    ordered : bool
        True for ordered lists, False for unordered
    items : list of ListItem, default = empty list
        List items
    start : int, default = 1
        Starting number for ordered lists
    tight : bool, default = True
        Whether list is tight (no blank lines between items)

    """

    type: ClassVar[str] = "list"

    ordered: bool
    items: list[ListItem] = field(default_factory=list)
    start: int = 1
    tight: bool = True
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class ThematicBreak(Node):
    """Horizontal rule."""

    type: ClassVar[str] = "thematic_break"

    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class HTMLBlock(Node):
    """Raw HTML block, emitted verbatim."""

    type: ClassVar[str] = "html_block"

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)


# ============================================================================
# Inline Nodes
# ============================================================================


@dataclass
class Text(Node):
    """Plain text node.

    Text is the only node kind the serializer runs through its generic
    escaping policy character by character.

    Parameters
    ----------
    content : str
        Text content

    """

    type: ClassVar[str] = "text"

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class Emphasis(Node):
    """Emphasized (italic) inline content."""

    type: ClassVar[str] = "emphasis"

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class Strong(Node):
    """Strong (bold) inline content."""

    type: ClassVar[str] = "strong"

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class Strikethrough(Node):
    """Strikethrough (``~~deleted~~``) inline content."""

    type: ClassVar[str] = "strikethrough"

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class Code(Node):
    """Inline code span; content is emitted verbatim between backticks."""

    type: ClassVar[str] = "code"

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class Link(Node):
    """Hyperlink node.

    Parameters
    ----------
    url : str
        Link destination
    content : list of Node, default = empty list
        Inline nodes forming the link label
    title : str or None, default = None
        Optional link title

    """

    type: ClassVar[str] = "link"

    url: str
    content: list[Node] = field(default_factory=list)
    title: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class Image(Node):
    """Image node.

    Parameters
    ----------
    url : str
        Image source
    alt_text : str, default = ""
        Plain-text alternative description
    title : str or None, default = None
        Optional image title

    """

    type: ClassVar[str] = "image"

    url: str
    alt_text: str = ""
    title: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class LineBreak(Node):
    """Line break node.

    Parameters
    ----------
    soft : bool, default = False
        True for soft breaks (newline in source), False for hard breaks

    """

    type: ClassVar[str] = "line_break"

    soft: bool = False
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class HTMLInline(Node):
    """Raw inline HTML, emitted verbatim."""

    type: ClassVar[str] = "html_inline"

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class WikiLink(Node):
    """Wiki-style link (``[[target]]`` or ``[[target|alias]]``).

    Parameters
    ----------
    target : str
        Page the link points at
    alias : str or None, default = None
        Display text; defaults to ``target`` when omitted

    """

    type: ClassVar[str] = "wiki_link"

    target: str
    alias: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Default the alias to the target."""
        if self.alias is None:
            self.alias = self.target

    @property
    def has_alias(self) -> bool:
        """Whether the link displays text other than its target."""
        return self.alias != self.target


@dataclass
class LiteralChar(Node):
    """A single character that the serializer must emit verbatim.

    These nodes are never produced by a parser. The literal-character
    transform creates them from text nodes so that the serializer's
    escaping policy, which only applies to ``text`` nodes, never sees
    the character.

    Parameters
    ----------
    content : str
        Exactly one character

    """

    type: ClassVar[str] = "literal_char"

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate that the node holds exactly one character."""
        if len(self.content) != 1:
            raise ValueError(f"LiteralChar must hold exactly one character, got {self.content!r}")


_BLOCK_CONTAINERS = (Document, BlockQuote, ListItem)
_INLINE_CONTAINERS = (Heading, Paragraph, Emphasis, Strong, Strikethrough, Link)


def get_child_list(node: Node) -> list[Node] | None:
    """Return the live list holding a node's children.

    The returned list is the node's own attribute, so callers may splice
    it in place.

    Parameters
    ----------
    node : Node
        Node to inspect

    Returns
    -------
    list of Node or None
        The child list, or None for leaf nodes

    Examples
    --------
    >>> para = Paragraph(content=[Text(content="a")])
    >>> get_child_list(para) is para.content
    True

    """
    if isinstance(node, _BLOCK_CONTAINERS):
        return node.children
    if isinstance(node, _INLINE_CONTAINERS):
        return node.content
    if isinstance(node, List):
        return node.items  # type: ignore[return-value]
    return None
