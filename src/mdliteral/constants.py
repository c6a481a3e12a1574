#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for mdliteral.

Constants are organized by category:
1. Type Definitions - Literal types shared by options and renderers
2. Literal Character Sets - Characters emitted verbatim by the escape plugins
3. Markdown Formatting Defaults - Renderer output settings
4. Parser Defaults - Markdown parsing settings
5. CLI Constants - Exit codes and environment prefix
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

EmphasisSymbol = Literal["*", "_"]
BulletSymbol = Literal["*", "-", "+"]
CodeFenceChar = Literal["`", "~"]
TitleQuote = Literal['"', "'"]

# =============================================================================
# Literal Character Sets
# =============================================================================

# Characters protected from backslash escaping by ``disable-text-escape``
PROTECTED_CHARS: frozenset[str] = frozenset("[]()*_&|~!")

# Characters protected by the minimal ``disable-bracket-escape`` variant
MINIMAL_PROTECTED_CHARS: frozenset[str] = frozenset("[*")

# Escapes that the generic sanitizer adds inside destinations and that must be undone
DESTINATION_UNESCAPE_CHARS: frozenset[str] = frozenset("&")

DEFAULT_ALIAS_DIVIDER = "|"

# =============================================================================
# Markdown Formatting Defaults
# =============================================================================

DEFAULT_EMPHASIS_SYMBOL: EmphasisSymbol = "*"
DEFAULT_BULLET_SYMBOL: BulletSymbol = "-"
DEFAULT_CODE_FENCE_CHAR: CodeFenceChar = "`"
DEFAULT_CODE_FENCE_MIN = 3
DEFAULT_THEMATIC_BREAK = "---"
DEFAULT_TITLE_QUOTE: TitleQuote = '"'
DEFAULT_RESOURCE_LINK = False

# =============================================================================
# Parser Defaults
# =============================================================================

DEFAULT_PARSE_STRIKETHROUGH = True

# =============================================================================
# CLI Constants
# =============================================================================

ENV_PREFIX = "MDLITERAL_"

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
