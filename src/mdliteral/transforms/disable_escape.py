#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdliteral/transforms/disable_escape.py
"""Keep markup characters in prose from being backslash-escaped.

The markdown renderer escapes any character that could be read as markup:
``foo_bar`` comes out as ``foo\\_bar`` and ``[note]`` as ``\\[note]``. The
plugins in this module stop that for a fixed set of characters by moving
them out of text nodes before serialization:

1. :func:`rewrite_tree` walks the document and splits every text node that
   holds a protected character into plain text runs and single-character
   :class:`~mdliteral.ast.LiteralChar` nodes
2. the renderer escapes only text nodes, and ``literal_char`` nodes are
   written back as their character by the handler this plugin installs

Link, image and wiki link handlers are replaced as well, so that ``&`` in
destinations and markup characters in wiki link targets stay literal.

Two variants are provided:

- :func:`disable_text_escape` protects ``[ ] ( ) * _ & | ~ !``
- :func:`disable_bracket_escape` protects only ``[`` and ``*``

Examples
--------
    >>> from mdliteral.pipeline import Processor
    >>> Processor().use(disable_text_escape).process("a _ b _ c")
    'a _ b _ c'

"""

from __future__ import annotations

import logging
from typing import Any, Callable, Collection, Optional

from mdliteral.ast import SKIP, Document, Image, Link, LiteralChar, Node, Text, WikiLink, get_child_list, visit
from mdliteral.constants import MINIMAL_PROTECTED_CHARS, PROTECTED_CHARS
from mdliteral.exceptions import InvalidOptionsError
from mdliteral.options.plugins import DisableTextEscapeOptions
from mdliteral.renderers.state import NodeHandler, ToMarkdownExtension
from mdliteral.transforms.handlers import (
    make_literal_wiki_link_handler,
    peek_image,
    peek_link,
    serialize_image,
    serialize_link,
    serialize_literal_char,
)

logger = logging.getLogger(__name__)

TreeTransform = Callable[[Document], None]


def is_protected(character: str, charset: Collection[str] = PROTECTED_CHARS) -> bool:
    """Return whether ``character`` belongs to the protected set.

    Examples
    --------
    >>> is_protected("_")
    True
    >>> is_protected("a")
    False

    """
    return character in charset


def split_text(value: str, charset: Collection[str] = PROTECTED_CHARS) -> list[Node]:
    """Split a string into text runs and literal characters.

    The string is scanned left to right. Every protected character becomes
    its own :class:`LiteralChar`; each maximal run of other characters
    becomes one :class:`Text`. No empty nodes are produced, so an empty
    string yields an empty list.

    Parameters
    ----------
    value : str
        Text to split
    charset : collection of str, default PROTECTED_CHARS
        Characters to emit as literal characters

    Returns
    -------
    list of Node
        Nodes whose contents, concatenated in order, equal ``value``

    Examples
    --------
    >>> [node.content for node in split_text("foo_bar")]
    ['foo', '_', 'bar']

    """
    nodes: list[Node] = []
    run_start = 0

    for position, character in enumerate(value):
        if not is_protected(character, charset):
            continue
        if position > run_start:
            nodes.append(Text(content=value[run_start:position]))
        nodes.append(LiteralChar(content=character))
        run_start = position + 1

    if run_start < len(value):
        nodes.append(Text(content=value[run_start:]))

    return nodes


def rewrite_tree(tree: Node, charset: Collection[str] = PROTECTED_CHARS) -> int:
    """Replace text nodes holding protected characters with split nodes.

    The tree is edited in place. Inserted nodes are not revisited, and
    existing :class:`LiteralChar` nodes are left alone, so running the
    rewrite twice changes nothing the second time.

    Parameters
    ----------
    tree : Node
        Root of the tree to rewrite
    charset : collection of str, default PROTECTED_CHARS
        Characters to protect

    Returns
    -------
    int
        Number of text nodes that were split

    """
    rewritten = 0

    def split_node(node: Node, index: Optional[int], parent: Optional[Node]) -> Any:
        nonlocal rewritten
        siblings = get_child_list(parent) if parent is not None else None
        if siblings is None or index is None:
            return None
        if not any(is_protected(character, charset) for character in node.content):
            return None

        replacement = split_text(node.content, charset)
        siblings[index : index + 1] = replacement
        rewritten += 1
        return SKIP, index + len(replacement)

    visit(tree, Text.type, split_node)
    return rewritten


def create_to_markdown_extension(options: DisableTextEscapeOptions | None = None) -> ToMarkdownExtension:
    """Build the serializer extension installed by the plugins.

    Parameters
    ----------
    options : DisableTextEscapeOptions or None, default = None
        Plugin options; only ``alias_divider`` is used

    Returns
    -------
    ToMarkdownExtension
        Handlers for ``literal_char``, ``link``, ``image`` and ``wiki_link``

    """
    options = options or DisableTextEscapeOptions()
    return ToMarkdownExtension(
        handlers={
            LiteralChar.type: NodeHandler(serialize_literal_char, serialize_literal_char),
            Link.type: NodeHandler(serialize_link, peek_link),
            Image.type: NodeHandler(serialize_image, peek_image),
            WikiLink.type: make_literal_wiki_link_handler(options.alias_divider),
        }
    )


def _register(processor: Any, options: Any, charset: Collection[str], name: str) -> TreeTransform:
    if options is not None and not isinstance(options, DisableTextEscapeOptions):
        raise InvalidOptionsError(
            component_name=name,
            expected_type=DisableTextEscapeOptions,
            received_type=type(options),
        )

    processor.to_markdown_extensions.append(create_to_markdown_extension(options))
    logger.debug(f"Registered {name} serializer extension for {''.join(sorted(charset))!r}")

    def transform(tree: Document) -> None:
        count = rewrite_tree(tree, charset)
        logger.debug(f"{name}: split {count} text node(s)")

    transform.__name__ = name.replace("-", "_")
    return transform


def disable_text_escape(processor: Any, options: DisableTextEscapeOptions | None = None) -> TreeTransform:
    """Protect ``[ ] ( ) * _ & | ~ !`` in prose from escaping.

    Parameters
    ----------
    processor : Processor
        Pipeline to register the serializer extension on
    options : DisableTextEscapeOptions or None, default = None
        Plugin options

    Returns
    -------
    callable
        Tree transform that rewrites a document in place

    Raises
    ------
    InvalidOptionsError
        If ``options`` is not a :class:`DisableTextEscapeOptions`

    """
    return _register(processor, options, PROTECTED_CHARS, "disable-text-escape")


def disable_bracket_escape(processor: Any, options: DisableTextEscapeOptions | None = None) -> TreeTransform:
    """Protect only ``[`` and ``*`` in prose from escaping.

    Identical to :func:`disable_text_escape` apart from the character set.
    """
    return _register(processor, options, MINIMAL_PROTECTED_CHARS, "disable-bracket-escape")
