#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdliteral/parsers/wiki_link.py
"""Wiki-style link syntax: ``[[target]]`` and ``[[target|alias]]``.

The syntax is added in two halves:

- :func:`make_wiki_link_plugin` builds a mistune inline plugin that turns
  ``[[...]]`` into ``wiki_link`` tokens, which the markdown parser converts
  to :class:`~mdliteral.ast.WikiLink` nodes
- :func:`make_wiki_link_serializer` writes the nodes back, escaping target and
  alias like any other phrasing text

:func:`wiki_link_plugin` registers both with a
:class:`~mdliteral.pipeline.Processor`.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Any, Callable, Optional

from mdliteral.ast import Node, WikiLink
from mdliteral.constants import DEFAULT_ALIAS_DIVIDER
from mdliteral.exceptions import InvalidOptionsError
from mdliteral.options.plugins import WikiLinkOptions
from mdliteral.renderers.state import Info, NodeHandler, SerializationState, ToMarkdownExtension

if TYPE_CHECKING:
    from mistune import InlineParser, InlineState, Markdown

    from mdliteral.pipeline import Processor

logger = logging.getLogger(__name__)

WIKI_LINK_TOKEN = "wiki_link"


def build_wiki_link_pattern(alias_divider: str = DEFAULT_ALIAS_DIVIDER) -> str:
    """Build the inline regular expression for wiki links.

    Parameters
    ----------
    alias_divider : str, default "|"
        Text separating the target from the alias

    Returns
    -------
    str
        Pattern with ``wiki_target`` and ``wiki_alias`` groups

    """
    return (
        r"\[\[(?P<wiki_target>[^\]\n]+?)"
        r"(?:" + re.escape(alias_divider) + r"(?P<wiki_alias>[^\]\n]+?))?"
        r"\]\]"
    )


def parse_wiki_link(inline: InlineParser, m: re.Match[str], state: InlineState) -> Optional[int]:
    if state.in_link:
        return None
    target = m.group("wiki_target").strip()
    if not target:
        return None
    alias = m.group("wiki_alias")
    state.append_token(
        {
            "type": WIKI_LINK_TOKEN,
            "raw": target,
            "attrs": {"alias": alias.strip() if alias else None},
        }
    )
    return m.end()


def make_wiki_link_plugin(alias_divider: str = DEFAULT_ALIAS_DIVIDER) -> Callable[[Markdown], None]:
    """Create a mistune plugin that recognises wiki links.

    Examples
    --------
    >>> import mistune
    >>> md = mistune.create_markdown(renderer=None, plugins=[make_wiki_link_plugin()])
    >>> md("[[Home|start]]")[0]["children"][0]["attrs"]
    {'alias': 'start'}

    """
    pattern = build_wiki_link_pattern(alias_divider)

    def wiki_link(md: Markdown) -> None:
        md.inline.register(WIKI_LINK_TOKEN, pattern, parse_wiki_link, before="link")

    return wiki_link


def make_wiki_link_serializer(alias_divider: str = DEFAULT_ALIAS_DIVIDER) -> NodeHandler:
    """Create the default wiki link handler.

    Target and alias pass through the escaper, so markup characters in page
    names come out backslash-escaped.
    """

    def serialize_wiki_link(node: WikiLink, parent: Optional[Node], state: SerializationState, info: Info) -> str:
        with state.enter("wiki_link"):
            target = state.safe(node.target, Info(before="[", after="]"))
            alias = state.safe(node.alias or node.target, Info(before="[", after="]"))
        if alias != target:
            return f"[[{target}{alias_divider}{alias}]]"
        return f"[[{target}]]"

    def peek_wiki_link(node: WikiLink, parent: Optional[Node], state: SerializationState, info: Info) -> str:
        return "["

    return NodeHandler(serialize_wiki_link, peek_wiki_link)


def wiki_link_plugin(processor: Processor, options: Any = None) -> None:
    """Enable wiki link parsing and serialization on a processor.

    Parameters
    ----------
    processor : Processor
        Pipeline to configure
    options : WikiLinkOptions or None, default = None
        Plugin options

    Raises
    ------
    InvalidOptionsError
        If ``options`` is not a :class:`WikiLinkOptions`

    """
    if options is not None and not isinstance(options, WikiLinkOptions):
        raise InvalidOptionsError(
            component_name="wiki-link",
            expected_type=WikiLinkOptions,
            received_type=type(options),
        )
    options = options or WikiLinkOptions()

    processor.parser_plugins.append(make_wiki_link_plugin(options.alias_divider))
    processor.to_markdown_extensions.append(
        ToMarkdownExtension(handlers={WikiLink.type: make_wiki_link_serializer(options.alias_divider)})
    )
    logger.debug(f"Registered wiki link syntax (alias divider {options.alias_divider!r})")
