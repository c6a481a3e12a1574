#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for Markdown parsing and rendering."""
# src/mdliteral/options/markdown.py


from __future__ import annotations

from dataclasses import dataclass, field

from mdliteral.constants import (
    DEFAULT_BULLET_SYMBOL,
    DEFAULT_CODE_FENCE_CHAR,
    DEFAULT_EMPHASIS_SYMBOL,
    DEFAULT_PARSE_STRIKETHROUGH,
    DEFAULT_RESOURCE_LINK,
    DEFAULT_THEMATIC_BREAK,
    DEFAULT_TITLE_QUOTE,
    BulletSymbol,
    CodeFenceChar,
    EmphasisSymbol,
    TitleQuote,
)
from mdliteral.options.base import BaseParserOptions, BaseRendererOptions


@dataclass(frozen=True)
class MarkdownParserOptions(BaseParserOptions):
    """Configuration options for Markdown-to-AST parsing.

    Parameters
    ----------
    parse_strikethrough : bool, default True
        Whether to parse strikethrough syntax (~~text~~).

    """

    parse_strikethrough: bool = field(
        default=DEFAULT_PARSE_STRIKETHROUGH,
        metadata={
            "help": "Parse strikethrough syntax (~~text~~)",
            "cli_name": "no-parse-strikethrough",
            "importance": "core",
        },
    )


@dataclass(frozen=True)
class MarkdownRendererOptions(BaseRendererOptions):
    """Configuration options for AST-to-Markdown serialization.

    Parameters
    ----------
    resource_link : bool, default False
        Always write links in the ``[text](url)`` form, never as ``<url>``
        autolinks.
    quote : {'"', "'"}, default '"'
        Quote character used around link and image titles.
    emphasis_symbol : {"*", "_"}, default "*"
        Marker used for emphasis.
    bullet : {"-", "*", "+"}, default "-"
        Marker used for unordered list items.
    code_fence_char : {"`", "~"}, default "`"
        Character used for code fences.
    thematic_break : str, default "---"
        Text written for horizontal rules.

    """

    resource_link: bool = field(
        default=DEFAULT_RESOURCE_LINK,
        metadata={"help": "Never emit <url> autolinks; always use [text](url)", "importance": "core"},
    )
    quote: TitleQuote = field(
        default=DEFAULT_TITLE_QUOTE,
        metadata={"help": "Quote character for link and image titles", "choices": ['"', "'"], "importance": "core"},
    )
    emphasis_symbol: EmphasisSymbol = field(
        default=DEFAULT_EMPHASIS_SYMBOL,
        metadata={"help": "Symbol to use for emphasis/italic formatting", "choices": ["*", "_"], "importance": "core"},
    )
    bullet: BulletSymbol = field(
        default=DEFAULT_BULLET_SYMBOL,
        metadata={"help": "Marker for unordered list items", "choices": ["-", "*", "+"], "importance": "advanced"},
    )
    code_fence_char: CodeFenceChar = field(
        default=DEFAULT_CODE_FENCE_CHAR,
        metadata={"help": "Character for fenced code blocks", "choices": ["`", "~"], "importance": "advanced"},
    )
    thematic_break: str = field(
        default=DEFAULT_THEMATIC_BREAK,
        metadata={"help": "Text written for horizontal rules", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate enumerated choices.

        Raises
        ------
        ValueError
            If a field holds a value outside its documented choices.

        """
        if self.quote not in ('"', "'"):
            raise ValueError(f"quote must be '\"' or \"'\", got {self.quote!r}")
        if self.emphasis_symbol not in ("*", "_"):
            raise ValueError(f"emphasis_symbol must be '*' or '_', got {self.emphasis_symbol!r}")
        if self.bullet not in ("-", "*", "+"):
            raise ValueError(f"bullet must be one of '-', '*', '+', got {self.bullet!r}")
        if self.code_fence_char not in ("`", "~"):
            raise ValueError(f"code_fence_char must be '`' or '~', got {self.code_fence_char!r}")
