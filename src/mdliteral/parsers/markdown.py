#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdliteral/parsers/markdown.py
"""Markdown to AST converter.

This module converts markdown source into the mdliteral AST using the
mistune parser. mistune is run without a renderer so that it returns its
token stream, and each token is converted to the matching node dataclass.

Extra inline syntax (wiki links, for example) is added with mistune plugins
passed to :class:`MarkdownParser`; tokens produced by such plugins are
converted when a handler for their type exists.

"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Optional

import mistune

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
    WikiLink,
)
from mdliteral.exceptions import ParsingError
from mdliteral.options.markdown import MarkdownParserOptions
from mdliteral.parsers.base import BaseParser, ParserInput

logger = logging.getLogger(__name__)

MistunePlugin = Callable[[mistune.Markdown], None]


class MarkdownParser(BaseParser):
    r"""Convert Markdown to AST representation.

    Parameters
    ----------
    options : MarkdownParserOptions or None, default = None
        Parser configuration options
    plugins : iterable of callable or None, default = None
        Additional mistune plugins, applied after the built-in ones

    Examples
    --------
    Basic parsing:

        >>> parser = MarkdownParser()
        >>> doc = parser.parse("# Hello\\n\\nThis is **bold**.")
        >>> [child.type for child in doc.children]
        ['heading', 'paragraph']

    """

    def __init__(
        self,
        options: MarkdownParserOptions | None = None,
        plugins: Iterable[MistunePlugin] | None = None,
    ):
        """Initialize the Markdown parser with options and mistune plugins."""
        BaseParser._validate_options_type(options, MarkdownParserOptions, "markdown")
        options = options or MarkdownParserOptions()
        super().__init__(options)
        self.options: MarkdownParserOptions = options
        self.plugins: list[MistunePlugin] = list(plugins or [])

    def _create_markdown(self) -> mistune.Markdown:
        plugins: list[Any] = []
        if self.options.parse_strikethrough:
            plugins.append("strikethrough")
        plugins.extend(self.plugins)

        # Tokens are converted here rather than rendered by mistune
        return mistune.create_markdown(plugins=plugins, renderer=None)

    def parse(self, input_data: ParserInput) -> Document:
        """Parse Markdown input into an AST Document.

        Parameters
        ----------
        input_data : str, Path, IO[bytes], IO[str] or bytes
            Markdown source. Strings are parsed as markdown text.

        Returns
        -------
        Document
            AST document node

        Raises
        ------
        ParsingError
            If mistune fails on the input

        """
        markdown_content = self._load_text_content(input_data)
        markdown = self._create_markdown()

        try:
            tokens, _state = markdown.parse(markdown_content)
        except Exception as e:
            raise ParsingError(f"Failed to parse markdown: {e}", original_error=e) from e

        children = self._process_tokens(tokens) if isinstance(tokens, list) else []
        logger.debug(f"Parsed markdown into {len(children)} block node(s)")
        return Document(children=children)

    def _process_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        """Process a list of mistune block tokens into AST nodes."""
        nodes: list[Node] = []
        for token in tokens:
            node = self._process_token(token)
            if node is not None:
                nodes.append(node)
        return nodes

    def _process_token(self, token: dict[str, Any]) -> Node | None:
        """Process a single mistune block token.

        Parameters
        ----------
        token : dict
            Mistune token dictionary with 'type' and other fields

        Returns
        -------
        Node or None
            Resulting AST node, or None for tokens without a counterpart
            (blank lines, for example)

        """
        token_type = token.get("type", "")

        if token_type == "heading":
            return self._process_heading(token)
        elif token_type in ("paragraph", "block_text"):
            # block_text is used for tight list items
            return Paragraph(content=self._process_inline_tokens(token.get("children", [])))
        elif token_type == "block_code":
            return self._process_code_block(token)
        elif token_type == "block_quote":
            return BlockQuote(children=self._process_tokens(token.get("children", [])))
        elif token_type == "list":
            return self._process_list(token)
        elif token_type == "thematic_break":
            return ThematicBreak()
        elif token_type == "block_html":
            return HTMLBlock(content=token.get("raw", "").rstrip("\n"))

        return None

    def _process_heading(self, token: dict[str, Any]) -> Heading:
        attrs = token.get("attrs", {})
        level = attrs.get("level", 1) if isinstance(attrs, dict) else 1
        if not isinstance(level, int) or level < 1 or level > 6:
            level = 1

        children = token.get("children", [])
        content = self._process_inline_tokens(children) if isinstance(children, list) else []
        return Heading(level=level, content=content)

    def _process_code_block(self, token: dict[str, Any]) -> CodeBlock:
        """Process code block token.

        mistune keeps the final line ending of the code; the node does not.
        """
        code_content = token.get("raw", "")
        if code_content.endswith("\n"):
            code_content = code_content[:-1]

        attrs = token.get("attrs", {})
        info_string = (attrs.get("info") or "").strip() if isinstance(attrs, dict) else ""
        metadata: dict[str, Any] = {}
        language = None
        if info_string:
            metadata["info_string"] = info_string
            language = info_string.split(maxsplit=1)[0]

        return CodeBlock(content=code_content, language=language, metadata=metadata)

    def _process_list(self, token: dict[str, Any]) -> List:
        """Process list token.

        Parameters
        ----------
        token : dict
            List token with 'children', 'tight' and 'attrs' (ordered, start)

        Returns
        -------
        List
            List AST node

        """
        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}

        ordered = bool(attrs.get("ordered", False))
        start = attrs.get("start", 1)
        tight = token.get("tight", attrs.get("tight", True))

        children = token.get("children", [])
        if not isinstance(children, list):
            children = []

        items = [
            ListItem(children=self._process_tokens(child.get("children", [])))
            for child in children
            if isinstance(child, dict)
        ]
        return List(ordered=ordered, items=items, start=start, tight=bool(tight))

    def _process_inline_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        """Process inline tokens into AST nodes."""
        nodes: list[Node] = []
        for token in tokens:
            node = self._process_inline_token(token)
            if node is not None:
                nodes.append(node)
        return nodes

    def _handle_text_token(self, token: dict[str, Any]) -> Text:
        return Text(content=token.get("raw", ""))

    def _handle_strong_token(self, token: dict[str, Any]) -> Strong:
        return Strong(content=self._process_inline_tokens(token.get("children", [])))

    def _handle_emphasis_token(self, token: dict[str, Any]) -> Emphasis:
        return Emphasis(content=self._process_inline_tokens(token.get("children", [])))

    def _handle_strikethrough_token(self, token: dict[str, Any]) -> Strikethrough:
        return Strikethrough(content=self._process_inline_tokens(token.get("children", [])))

    def _handle_codespan_token(self, token: dict[str, Any]) -> Code:
        return Code(content=token.get("raw", ""))

    def _handle_link_token(self, token: dict[str, Any]) -> Link:
        """Handle link token."""
        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}
        children = token.get("children", [])
        if not isinstance(children, list):
            children = []
        return Link(
            url=attrs.get("url", ""),
            content=self._process_inline_tokens(children),
            title=attrs.get("title"),
        )

    def _handle_image_token(self, token: dict[str, Any]) -> Image:
        """Handle image token.

        The alt text is the plain text of the image description.
        """
        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}
        return Image(
            url=attrs.get("url", ""),
            alt_text=_plain_text(token.get("children", [])),
            title=attrs.get("title"),
        )

    def _handle_linebreak_token(self, token: dict[str, Any]) -> LineBreak:
        return LineBreak(soft=False)

    def _handle_softbreak_token(self, token: dict[str, Any]) -> LineBreak:
        return LineBreak(soft=True)

    def _handle_inline_html_token(self, token: dict[str, Any]) -> HTMLInline:
        return HTMLInline(content=token.get("raw", ""))

    def _handle_wiki_link_token(self, token: dict[str, Any]) -> WikiLink:
        attrs = token.get("attrs", {})
        alias = attrs.get("alias") if isinstance(attrs, dict) else None
        return WikiLink(target=token.get("raw", ""), alias=alias)

    def _process_inline_token(self, token: dict[str, Any]) -> Optional[Node]:
        """Process a single inline token.

        Unknown token types are dropped with a debug message.
        """
        token_type = token.get("type", "")

        handler_map: dict[str, Callable[[dict[str, Any]], Node]] = {
            "text": self._handle_text_token,
            "strong": self._handle_strong_token,
            "emphasis": self._handle_emphasis_token,
            "codespan": self._handle_codespan_token,
            "link": self._handle_link_token,
            "image": self._handle_image_token,
            "linebreak": self._handle_linebreak_token,
            "softbreak": self._handle_softbreak_token,
            "strikethrough": self._handle_strikethrough_token,
            "inline_html": self._handle_inline_html_token,
            "wiki_link": self._handle_wiki_link_token,
        }

        handler = handler_map.get(token_type)
        if handler:
            return handler(token)
        logger.debug(f"Skipping unsupported inline token: {token_type}")
        return None


def _plain_text(tokens: list[dict[str, Any]]) -> str:
    parts: list[str] = []
    for token in tokens:
        if not isinstance(token, dict):
            continue
        if token.get("type") in ("text", "codespan"):
            parts.append(token.get("raw", ""))
        elif token.get("type") == "softbreak":
            parts.append("\n")
        else:
            parts.append(_plain_text(token.get("children", [])))
    return "".join(parts)


def markdown_to_ast(markdown_content: str, options: MarkdownParserOptions | None = None) -> Document:
    r"""Convert Markdown string to AST.

    Parameters
    ----------
    markdown_content : str
        Markdown text to parse
    options : MarkdownParserOptions or None, default = None
        Parser configuration

    Returns
    -------
    Document
        AST document node

    Examples
    --------
    >>> doc = markdown_to_ast("# Hello\\n\\nWorld")
    >>> len(doc.children)
    2

    """
    return MarkdownParser(options).parse(markdown_content)
