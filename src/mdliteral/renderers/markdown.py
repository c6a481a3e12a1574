#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdliteral/renderers/markdown.py
"""Markdown rendering from AST.

This module provides the MarkdownRenderer class which converts AST nodes
to markdown text. Each node type is serialized by a :class:`NodeHandler`
looked up by the node's ``type`` tag. Plain text runs through the
context-aware escaper in :mod:`mdliteral.utils.escape`, which only escapes
characters that would otherwise be read as markup.

The handler table can be extended or overridden with
:class:`ToMarkdownExtension` bundles. Extensions are applied in order and a
later handler for the same tag replaces an earlier one, which is how the
literal-character plugins swap in their own link and image serializers.

"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import IO, Callable, Iterable, Optional, Union

from mdliteral.ast import (
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
    Node,
    Paragraph,
    Strikethrough,
    Strong,
    Text,
    ThematicBreak,
)
from mdliteral.constants import DEFAULT_CODE_FENCE_MIN
from mdliteral.options.markdown import MarkdownRendererOptions
from mdliteral.renderers.base import BaseRenderer
from mdliteral.renderers.state import (
    Info,
    NodeHandler,
    SerializationState,
    ToMarkdownExtension,
    indent_lines,
)
from mdliteral.utils.escape import DEFAULT_UNSAFE_PATTERNS, encode_character_reference, pattern_in_scope

logger = logging.getLogger(__name__)

# A URL scheme: a letter, then letters, "+", "." or "-", then ":".
SCHEME_PATTERN = re.compile(r"^[a-z][a-z+.-]+:", re.IGNORECASE)
# Characters that cannot appear inside an ``<url>`` autolink.
AUTOLINK_FORBIDDEN_PATTERN = re.compile(r"[\0- <>\x7f]")
# Characters that force a destination into its ``<...>`` form.
DESTINATION_LITERAL_PATTERN = re.compile(r"[\0- \x7f]")


def _line_ending_in_scope(state: SerializationState) -> bool:
    return any(pattern.character == "\n" and pattern_in_scope(state.stack, pattern) for pattern in state.unsafe)


# ============================================================================
# Block handlers
# ============================================================================


def serialize_document(node: Document, parent: Optional[Node], state: SerializationState, info: Info) -> str:
    return state.container_flow(node, info)


def serialize_heading(node: Heading, parent: Optional[Node], state: SerializationState, info: Info) -> str:
    """Serialize an ATX heading.

    A leading space or tab in the heading text is written as a character
    reference so the parser does not strip it.
    """
    sequence = "#" * node.level
    tracker = state.create_tracker(info)
    with state.enter("heading_atx"), state.enter("phrasing"):
        tracker.move(sequence + " ")
        value = state.container_phrasing(node, tracker.current(before="# ", after="\n"))

    if value[:1] in (" ", "\t"):
        value = encode_character_reference(value[0]) + value[1:]

    return f"{sequence} {value}" if value else sequence


def serialize_paragraph(node: Paragraph, parent: Optional[Node], state: SerializationState, info: Info) -> str:
    with state.enter("paragraph"), state.enter("phrasing"):
        return state.container_phrasing(node, info)


def _longest_streak(value: str, character: str) -> int:
    longest = 0
    for match in re.finditer(re.escape(character) + "+", value):
        longest = max(longest, len(match.group(0)))
    return longest


def serialize_code_block(node: CodeBlock, parent: Optional[Node], state: SerializationState, info: Info) -> str:
    """Serialize a fenced code block.

    The fence is one character longer than the longest run of the fence
    character inside the code, and never shorter than three.
    """
    marker = state.options.code_fence_char
    suffix = "grave_accent" if marker == "`" else "tilde"
    raw = node.content or ""
    sequence = marker * max(_longest_streak(raw, marker) + 1, DEFAULT_CODE_FENCE_MIN)

    tracker = state.create_tracker(info)
    with state.enter("code_fenced"):
        value = tracker.move(sequence)
        if node.language:
            with state.enter(f"code_fenced_lang_{suffix}"):
                value += tracker.move(
                    state.safe(node.language, tracker.current(before=value, after=" "), encode=("`",))
                )
        value += tracker.move("\n")
        if raw:
            value += tracker.move(raw + "\n")
        value += tracker.move(sequence)
    return value


def _map_blockquote_line(line: str, index: int, blank: bool) -> str:
    return ">" + ("" if blank else " ") + line


def serialize_block_quote(node: BlockQuote, parent: Optional[Node], state: SerializationState, info: Info) -> str:
    tracker = state.create_tracker(info)
    with state.enter("blockquote"):
        tracker.move("> ")
        tracker.shift(2)
        return indent_lines(state.container_flow(node, tracker.current()), _map_blockquote_line)


def serialize_list(node: List, parent: Optional[Node], state: SerializationState, info: Info) -> str:
    state.list_stack.append(node)
    try:
        with state.enter("list"):
            return state.container_flow(node, info)
    finally:
        state.list_stack.pop()


def serialize_list_item(node: ListItem, parent: Optional[Node], state: SerializationState, info: Info) -> str:
    """Serialize a list item.

    Ordered items are numbered from the list's ``start``; continuation lines
    are indented by the marker width plus one space.
    """
    if isinstance(parent, List) and parent.ordered:
        index = state.index_stack[-1] if state.index_stack else 0
        bullet = f"{(parent.start if parent.start is not None else 1) + index}."
    else:
        bullet = state.options.bullet

    size = len(bullet) + 1
    tracker = state.create_tracker(info)
    tracker.move(bullet + " ")
    tracker.shift(size)

    with state.enter("list_item"):
        value = state.container_flow(node, tracker.current())

    def map_line(line: str, index: int, blank: bool) -> str:
        if index:
            return ("" if blank else " " * size) + line
        return (bullet if blank else bullet + " ") + line

    return indent_lines(value, map_line)


def serialize_thematic_break(
    node: ThematicBreak, parent: Optional[Node], state: SerializationState, info: Info
) -> str:
    return state.options.thematic_break


def serialize_html(
    node: Union[HTMLBlock, HTMLInline], parent: Optional[Node], state: SerializationState, info: Info
) -> str:
    return node.content or ""


def peek_html(node: Node, parent: Optional[Node], state: SerializationState, info: Info) -> str:
    return "<"


# ============================================================================
# Inline handlers
# ============================================================================


def serialize_text(node: Text, parent: Optional[Node], state: SerializationState, info: Info) -> str:
    return state.safe(node.content, info)


def serialize_emphasis(node: Emphasis, parent: Optional[Node], state: SerializationState, info: Info) -> str:
    marker = state.options.emphasis_symbol
    tracker = state.create_tracker(info)
    with state.enter("emphasis"):
        before = tracker.move(marker)
        between = tracker.move(state.container_phrasing(node, tracker.current(before=before, after=marker)))
        after = tracker.move(marker)
    return before + between + after


def peek_emphasis(node: Emphasis, parent: Optional[Node], state: SerializationState, info: Info) -> str:
    return state.options.emphasis_symbol


def serialize_strong(node: Strong, parent: Optional[Node], state: SerializationState, info: Info) -> str:
    marker = "**"
    tracker = state.create_tracker(info)
    with state.enter("strong"):
        before = tracker.move(marker)
        between = tracker.move(state.container_phrasing(node, tracker.current(before=before, after=marker)))
        after = tracker.move(marker)
    return before + between + after


def peek_strong(node: Strong, parent: Optional[Node], state: SerializationState, info: Info) -> str:
    return "*"


def serialize_strikethrough(
    node: Strikethrough, parent: Optional[Node], state: SerializationState, info: Info
) -> str:
    tracker = state.create_tracker(info)
    with state.enter("strikethrough"):
        value = tracker.move("~~")
        value += state.container_phrasing(node, tracker.current(before=value, after="~"))
        value += tracker.move("~~")
    return value


def peek_strikethrough(node: Strikethrough, parent: Optional[Node], state: SerializationState, info: Info) -> str:
    return "~"


def serialize_code(node: Code, parent: Optional[Node], state: SerializationState, info: Info) -> str:
    """Serialize an inline code span.

    The backtick run is chosen so it does not occur inside the code; the
    code is padded with spaces when it starts or ends with a backtick, or
    with whitespace on both sides.
    """
    value = node.content or ""
    sequence = "`"

    while re.search(f"(^|[^`]){sequence}([^`]|$)", value):
        sequence += "`"

    if re.search(r"[^ \r\n]", value) and (
        (re.match(r"[ \r\n]", value) and re.search(r"[ \r\n]$", value)) or re.match("`", value) or value.endswith("`")
    ):
        value = f" {value} "

    return sequence + value + sequence


def peek_code(node: Code, parent: Optional[Node], state: SerializationState, info: Info) -> str:
    return "`"


def serialize_line_break(node: LineBreak, parent: Optional[Node], state: SerializationState, info: Info) -> str:
    """Serialize a line break.

    Where a line ending is not allowed (headings, for example) the break
    becomes a single space.
    """
    if _line_ending_in_scope(state):
        return "" if info.before in (" ", "\t") else " "
    return "\n" if node.soft else "\\\n"


def format_link_as_autolink(node: Link, state: SerializationState) -> bool:
    """Check whether a link can be written as a ``<url>`` autolink.

    The label must be a single text node whose value is the URL (or the URL
    without its ``mailto:`` prefix), the link must have no title, and the
    URL must have a scheme and no characters an autolink cannot hold.
    """
    if state.options.resource_link or not node.url or node.title:
        return False
    if len(node.content) != 1 or not isinstance(node.content[0], Text):
        return False
    raw = node.content[0].content
    return (
        (raw == node.url or "mailto:" + raw == node.url)
        and SCHEME_PATTERN.match(node.url) is not None
        and AUTOLINK_FORBIDDEN_PATTERN.search(node.url) is None
    )


def serialize_destination(
    url: str,
    title: Optional[str],
    state: SerializationState,
    value: str,
    literal: bool,
    url_filter: Optional[Callable[[str], str]] = None,
) -> str:
    """Serialize a link or image destination and title, up to the closing ``)``.

    Parameters
    ----------
    url : str
        Destination URL
    title : str or None
        Optional title
    state : SerializationState
        Current state
    value : str
        Output emitted so far for the enclosing construct
    literal : bool
        Use the ``<url>`` form instead of the raw form
    url_filter : callable or None, default = None
        Applied to the escaped URL before it is written

    Returns
    -------
    str
        The destination, the optional quoted title and ``)``

    """
    quote = state.options.quote
    url_filter = url_filter or (lambda escaped: escaped)
    result = ""

    if literal:
        with state.enter("destination_literal"):
            result += "<" + url_filter(state.safe(url, Info(before=value + "<", after=">"))) + ">"
    else:
        with state.enter("destination_raw"):
            result += url_filter(state.safe(url, Info(before=value, after=" " if title else ")")))

    if title:
        construct = "title_quote" if quote == '"' else "title_apostrophe"
        with state.enter(construct):
            result += " " + quote
            result += state.safe(title, Info(before=value + result, after=quote))
            result += quote

    return result + ")"


def serialize_link(node: Link, parent: Optional[Node], state: SerializationState, info: Info) -> str:
    tracker = state.create_tracker(info)

    if format_link_as_autolink(node, state):
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
        literal = (not node.url and bool(node.title)) or DESTINATION_LITERAL_PATTERN.search(node.url) is not None
        value += tracker.move(serialize_destination(node.url, node.title, state, value, literal))
    return value


def peek_link(node: Link, parent: Optional[Node], state: SerializationState, info: Info) -> str:
    return "<" if format_link_as_autolink(node, state) else "["


def serialize_image(node: Image, parent: Optional[Node], state: SerializationState, info: Info) -> str:
    tracker = state.create_tracker(info)
    with state.enter("image"):
        with state.enter("label"):
            value = tracker.move("![")
            value += tracker.move(state.safe(node.alt_text, tracker.current(before=value, after="]")))
            value += tracker.move("](")
        literal = (not node.url and bool(node.title)) or DESTINATION_LITERAL_PATTERN.search(node.url) is not None
        value += tracker.move(serialize_destination(node.url, node.title, state, value, literal))
    return value


def peek_image(node: Image, parent: Optional[Node], state: SerializationState, info: Info) -> str:
    return "!"


DEFAULT_HANDLERS: dict[str, NodeHandler] = {
    Document.type: NodeHandler(serialize_document),
    Heading.type: NodeHandler(serialize_heading),
    Paragraph.type: NodeHandler(serialize_paragraph),
    CodeBlock.type: NodeHandler(serialize_code_block),
    BlockQuote.type: NodeHandler(serialize_block_quote),
    List.type: NodeHandler(serialize_list),
    ListItem.type: NodeHandler(serialize_list_item),
    ThematicBreak.type: NodeHandler(serialize_thematic_break),
    HTMLBlock.type: NodeHandler(serialize_html, peek_html),
    Text.type: NodeHandler(serialize_text),
    Emphasis.type: NodeHandler(serialize_emphasis, peek_emphasis),
    Strong.type: NodeHandler(serialize_strong, peek_strong),
    Strikethrough.type: NodeHandler(serialize_strikethrough, peek_strikethrough),
    Code.type: NodeHandler(serialize_code, peek_code),
    LineBreak.type: NodeHandler(serialize_line_break),
    HTMLInline.type: NodeHandler(serialize_html, peek_html),
    Link.type: NodeHandler(serialize_link, peek_link),
    Image.type: NodeHandler(serialize_image, peek_image),
}


class MarkdownRenderer(BaseRenderer):
    r"""Render AST nodes to markdown text.

    Parameters
    ----------
    options : MarkdownRendererOptions or None, default = None
        Markdown formatting options
    extensions : iterable of ToMarkdownExtension or None, default = None
        Handler overrides and extra unsafe patterns, applied in order

    Examples
    --------
    Basic usage:

        >>> from mdliteral.ast import Document, Paragraph, Text
        >>> doc = Document(children=[Paragraph(content=[Text(content="a_b")])])
        >>> MarkdownRenderer().render_to_string(doc)
        'a\\_b'

    """

    def __init__(
        self,
        options: MarkdownRendererOptions | None = None,
        extensions: Iterable[ToMarkdownExtension] | None = None,
    ):
        """Initialize the Markdown renderer with options and extensions."""
        BaseRenderer._validate_options_type(options, MarkdownRendererOptions, "markdown")
        options = options or MarkdownRendererOptions()
        super().__init__(options)
        self.options: MarkdownRendererOptions = options
        self.extensions: list[ToMarkdownExtension] = list(extensions or [])

        self.handlers: dict[str, NodeHandler] = dict(DEFAULT_HANDLERS)
        unsafe = list(DEFAULT_UNSAFE_PATTERNS)
        for extension in self.extensions:
            self.handlers.update(extension.handlers)
            unsafe.extend(extension.unsafe)
        self.unsafe = tuple(unsafe)

        if self.extensions:
            logger.debug(
                f"Markdown renderer configured with {len(self.extensions)} extension(s), "
                f"{len(self.handlers)} handler(s)"
            )

    def render_to_string(self, document: Document) -> str:
        """Render a document AST to markdown string.

        Parameters
        ----------
        document : Document
            The document node to render

        Returns
        -------
        str
            Markdown text with trailing whitespace removed

        Raises
        ------
        RenderingError
            If the tree contains a node type without a handler

        """
        state = SerializationState(self.handlers, self.unsafe, self.options)
        result = state.handle(document, None, Info(before="\n", after="\n"))
        return result.rstrip()

    def render(self, doc: Document, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Render AST to markdown and write to output.

        Parameters
        ----------
        doc : Document
            AST Document node to render
        output : str, Path, IO[bytes] or IO[str]
            Output destination (file path or file-like object)

        """
        markdown_text = self.render_to_string(doc)
        self.write_text_output(markdown_text, output)
