#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdliteral/transforms/handlers.py
"""Serializer handlers installed by the literal-character plugins.

These handlers replace the renderer's defaults for four node types:

- ``literal_char`` is written as its character, with no escaping at all
- ``link`` and ``image`` keep the renderer's destination and title rules but
  drop the backslash the escaper puts before ``&`` in a destination, and a
  URL with parentheses is always wrapped in ``<...>``
- ``wiki_link`` is written as ``[[target]]`` or ``[[target|alias]]`` with
  target and alias left untouched

"""

from __future__ import annotations

import re
from typing import Iterable, Optional

from mdliteral.ast import Image, Link, LiteralChar, Node, Text, WikiLink, to_plain_string
from mdliteral.constants import DEFAULT_ALIAS_DIVIDER, DESTINATION_UNESCAPE_CHARS
from mdliteral.renderers.markdown import (
    AUTOLINK_FORBIDDEN_PATTERN,
    DESTINATION_LITERAL_PATTERN,
    SCHEME_PATTERN,
    serialize_destination,
)
from mdliteral.renderers.state import Info, NodeHandler, SerializationState


def _unescape_pattern(characters: Iterable[str]) -> re.Pattern[str]:
    return re.compile(r"\\([" + "".join(re.escape(character) for character in sorted(characters)) + r"])")


_DESTINATION_UNESCAPE = _unescape_pattern(DESTINATION_UNESCAPE_CHARS)


def remove_escapes(value: str) -> str:
    r"""Drop the backslash the escaper adds before ``&``.

    Examples
    --------
    >>> remove_escapes(r"a\&b")
    'a&b'
    >>> remove_escapes(r"a\(b")
    'a\\(b'

    """
    return _DESTINATION_UNESCAPE.sub(r"\1", value)


def _use_destination_literal(url: str, title: Optional[str]) -> bool:
    return (
        "(" in url
        or ")" in url
        or (not url and bool(title))
        or DESTINATION_LITERAL_PATTERN.search(url) is not None
    )


# ============================================================================
# literal_char
# ============================================================================


def serialize_literal_char(node: LiteralChar, parent: Optional[Node], state: SerializationState, info: Info) -> str:
    return node.content


# ============================================================================
# link
# ============================================================================


def is_autolink(node: Link, state: SerializationState) -> bool:
    """Check whether a link should be written as ``<url>``.

    Every child of the label must be a Text or LiteralChar node, and their
    concatenated content must be the URL or the URL without ``mailto:``. A
    label holding emphasis, code or any other markup is never an autolink,
    since ``<...>`` would take that markup into the URL. The URL needs a
    scheme, no title, and none of the characters an autolink cannot hold.
    """
    if state.options.resource_link or not node.url or node.title:
        return False
    if not all(isinstance(child, (Text, LiteralChar)) for child in node.content):
        return False
    raw = to_plain_string(node.content)
    return (
        (raw == node.url or "mailto:" + raw == node.url)
        and SCHEME_PATTERN.match(node.url) is not None
        and AUTOLINK_FORBIDDEN_PATTERN.search(node.url) is None
    )


def serialize_link(node: Link, parent: Optional[Node], state: SerializationState, info: Info) -> str:
    """Serialize a link whose label may contain literal characters.

    Autolinks are serialized with an empty enclosing construct stack, so the
    label text is escaped as if it stood at the top level.
    """
    tracker = state.create_tracker(info)

    if is_autolink(node, state):
        with state.detached_stack(), state.enter("autolink"):
            value = tracker.move("<")
            value += tracker.move(state.container_phrasing(node, tracker.current(before=value, after=">")))
            value += tracker.move(">")
        return value

    with state.enter("link"):
        with state.enter("label"):
            value = tracker.move("[")
            value += tracker.move(state.container_phrasing(node, tracker.current(before=value, after="](")))
            value += tracker.move("](")
        value += tracker.move(
            serialize_destination(
                node.url,
                node.title,
                state,
                value,
                literal=_use_destination_literal(node.url, node.title),
                url_filter=remove_escapes,
            )
        )
    return value


def peek_link(node: Link, parent: Optional[Node], state: SerializationState, info: Info) -> str:
    return "<" if is_autolink(node, state) else "["


# ============================================================================
# image
# ============================================================================


def serialize_image(node: Image, parent: Optional[Node], state: SerializationState, info: Info) -> str:
    tracker = state.create_tracker(info)
    with state.enter("image"):
        with state.enter("label"):
            value = tracker.move("![")
            value += tracker.move(state.safe(node.alt_text, tracker.current(before=value, after="]")))
            value += tracker.move("](")
        value += tracker.move(
            serialize_destination(
                node.url,
                node.title,
                state,
                value,
                literal=_use_destination_literal(node.url, node.title),
                url_filter=remove_escapes,
            )
        )
    return value


def peek_image(node: Image, parent: Optional[Node], state: SerializationState, info: Info) -> str:
    return "!"


# ============================================================================
# wiki_link
# ============================================================================


def make_literal_wiki_link_handler(alias_divider: str = DEFAULT_ALIAS_DIVIDER) -> NodeHandler:
    """Create a wiki link handler that writes target and alias verbatim.

    Parameters
    ----------
    alias_divider : str, default "|"
        Text written between target and alias

    """

    def serialize_wiki_link(node: WikiLink, parent: Optional[Node], state: SerializationState, info: Info) -> str:
        alias = node.alias if node.alias is not None else node.target
        if alias == node.target:
            return f"[[{node.target}]]"
        return f"[[{node.target}{alias_divider}{alias}]]"

    def peek_wiki_link(node: WikiLink, parent: Optional[Node], state: SerializationState, info: Info) -> str:
        return "["

    return NodeHandler(serialize_wiki_link, peek_wiki_link)
