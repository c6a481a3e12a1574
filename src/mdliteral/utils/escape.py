#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdliteral/utils/escape.py
"""Context-aware markdown escaping.

This module implements the serializer's generic sanitizer. Rather than
escaping a fixed list of characters everywhere, each :class:`UnsafePattern`
describes one character together with the neighbourhood in which it would
be misread: the text before or after it, whether it sits at the start of a
line, and which constructs (``phrasing``, ``label``, ``destination_raw`` ...)
must or must not be open on the serializer's construct stack.

:func:`safe` matches the in-scope patterns against ``before + value + after``
so that characters on the boundary are judged with their real neighbours,
then escapes only the positions that fall inside ``value``:

- ASCII punctuation is escaped with a backslash
- anything else (spaces, tabs, line endings) becomes a character reference
- backslashes that would otherwise combine with a following punctuation
  character are doubled

Examples
--------
    >>> safe(["phrasing"], DEFAULT_UNSAFE_PATTERNS, "a_b")
    'a\\\\_b'
    >>> safe([], DEFAULT_UNSAFE_PATTERNS, "a_b")
    'a_b'

"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Iterable, Optional, Sequence

_ASCII_PUNCTUATION = re.compile(r"[!-/:-@\[-`{-~]")
_BACKSLASH_BEFORE_PUNCTUATION = re.compile(r"\\(?=[!-/:-@\[-`{-~])")


@dataclass(frozen=True)
class UnsafePattern:
    """A character that needs escaping in a particular neighbourhood.

    Parameters
    ----------
    character : str
        The single character to escape
    before : str or None, default = None
        Regular expression that must match immediately before the character
    after : str or None, default = None
        Regular expression that must match immediately after the character
    at_break : bool, default = False
        Only unsafe at the start of a line (after optional spaces or tabs)
    in_construct : tuple of str, default = ()
        At least one of these constructs must be on the stack; empty means always
    not_in_construct : tuple of str, default = ()
        None of these constructs may be on the stack

    """

    character: str
    before: Optional[str] = None
    after: Optional[str] = None
    at_break: bool = False
    in_construct: tuple[str, ...] = ()
    not_in_construct: tuple[str, ...] = ()


# Constructs in which phrasing content is taken literally, so inline markers
# such as ``*`` or ``[`` cannot start anything.
FULL_PHRASING_SPANS: tuple[str, ...] = (
    "autolink",
    "destination_literal",
    "destination_raw",
    "reference",
    "title_quote",
    "title_apostrophe",
)

_FENCE_INFO = (
    "code_fenced_lang_grave_accent",
    "code_fenced_lang_tilde",
    "code_fenced_meta_grave_accent",
    "code_fenced_meta_tilde",
)
_NO_LINE_ENDINGS = _FENCE_INFO + ("destination_literal", "heading_atx")

DEFAULT_UNSAFE_PATTERNS: tuple[UnsafePattern, ...] = (
    UnsafePattern("\t", after="[\\r\\n]", in_construct=("phrasing",)),
    UnsafePattern("\t", before="[\\r\\n]", in_construct=("phrasing",)),
    UnsafePattern("\t", in_construct=_FENCE_INFO[:2]),
    UnsafePattern("\r", in_construct=_NO_LINE_ENDINGS),
    UnsafePattern("\n", in_construct=_NO_LINE_ENDINGS),
    UnsafePattern(" ", after="[\\r\\n]", in_construct=("phrasing",)),
    UnsafePattern(" ", before="[\\r\\n]", in_construct=("phrasing",)),
    UnsafePattern(" ", in_construct=_FENCE_INFO[:2]),
    UnsafePattern("!", after="\\[", in_construct=("phrasing",), not_in_construct=FULL_PHRASING_SPANS),
    UnsafePattern('"', in_construct=("title_quote",)),
    UnsafePattern("#", at_break=True),
    UnsafePattern("#", after="(?:[\\r\\n]|$)", in_construct=("heading_atx",)),
    UnsafePattern("&", after="[#A-Za-z]", in_construct=("phrasing",)),
    UnsafePattern("'", in_construct=("title_apostrophe",)),
    UnsafePattern("(", in_construct=("destination_raw",)),
    UnsafePattern("(", before="\\]", in_construct=("phrasing",), not_in_construct=FULL_PHRASING_SPANS),
    UnsafePattern(")", before="\\d+", at_break=True),
    UnsafePattern(")", in_construct=("destination_raw",)),
    UnsafePattern("*", after="(?:[ \\t\\r\\n*])", at_break=True),
    UnsafePattern("*", in_construct=("phrasing",), not_in_construct=FULL_PHRASING_SPANS),
    UnsafePattern("+", after="(?:[ \\t\\r\\n])", at_break=True),
    UnsafePattern("-", after="(?:[ \\t\\r\\n-])", at_break=True),
    UnsafePattern(".", before="\\d+", after="(?:[ \\t\\r\\n]|$)", at_break=True),
    UnsafePattern("<", after="[!/?A-Za-z]", at_break=True),
    UnsafePattern("<", after="[!/?A-Za-z]", in_construct=("phrasing",), not_in_construct=FULL_PHRASING_SPANS),
    UnsafePattern("<", in_construct=("destination_literal",)),
    UnsafePattern("=", at_break=True),
    UnsafePattern(">", at_break=True),
    UnsafePattern(">", in_construct=("destination_literal",)),
    UnsafePattern("[", at_break=True),
    UnsafePattern("[", in_construct=("phrasing",), not_in_construct=FULL_PHRASING_SPANS),
    UnsafePattern("[", in_construct=("label", "reference")),
    UnsafePattern("\\", after="[\\r\\n]", in_construct=("phrasing",)),
    UnsafePattern("]", in_construct=("label", "reference")),
    UnsafePattern("_", at_break=True),
    UnsafePattern("_", in_construct=("phrasing",), not_in_construct=FULL_PHRASING_SPANS),
    UnsafePattern("`", at_break=True),
    UnsafePattern("`", in_construct=("code_fenced_lang_grave_accent", "code_fenced_meta_grave_accent")),
    UnsafePattern("`", in_construct=("phrasing",), not_in_construct=FULL_PHRASING_SPANS),
    UnsafePattern("~", at_break=True),
    # GFM strikethrough
    UnsafePattern("~", in_construct=("phrasing",), not_in_construct=FULL_PHRASING_SPANS),
)


def _list_in_scope(stack: Sequence[str], constructs: tuple[str, ...], none: bool) -> bool:
    if not constructs:
        return none
    return any(construct in stack for construct in constructs)


def pattern_in_scope(stack: Sequence[str], pattern: UnsafePattern) -> bool:
    """Check whether a pattern applies given the open constructs.

    Parameters
    ----------
    stack : sequence of str
        Names of the constructs currently open, outermost first
    pattern : UnsafePattern
        Pattern to check

    Returns
    -------
    bool
        True when the pattern's ``in_construct`` requirement is met and none
        of its ``not_in_construct`` constructs is open

    """
    return _list_in_scope(stack, pattern.in_construct, True) and not _list_in_scope(
        stack, pattern.not_in_construct, False
    )


@lru_cache(maxsize=None)
def compile_pattern(pattern: UnsafePattern) -> re.Pattern[str]:
    """Compile an unsafe pattern to a regular expression.

    Group 1, when present, captures the text matched before the character.
    """
    before = ("[\\r\\n][\\t ]*" if pattern.at_break else "") + (f"(?:{pattern.before})" if pattern.before else "")
    expression = (f"({before})" if before else "") + re.escape(pattern.character)
    if pattern.after:
        expression += f"(?:{pattern.after})"
    return re.compile(expression)


def encode_character_reference(character: str) -> str:
    """Encode a character as a hexadecimal character reference.

    Examples
    --------
    >>> encode_character_reference(" ")
    '&#x20;'

    """
    return f"&#x{ord(character):X};"


def _escape_backslashes(value: str, after: str) -> str:
    # A backslash followed by punctuation (possibly the first character of
    # ``after``) would be read as an escape, so it is doubled.
    whole = value + after
    results: list[str] = []
    start = 0
    for match in _BACKSLASH_BEFORE_PUNCTUATION.finditer(whole):
        position = match.start()
        if position >= len(value):
            break
        if start != position:
            results.append(value[start:position])
        results.append("\\")
        start = position
    results.append(value[start:])
    return "".join(results)


def safe(
    stack: Sequence[str],
    unsafe: Iterable[UnsafePattern],
    value: str,
    before: str = "",
    after: str = "",
    encode: Iterable[str] = (),
) -> str:
    """Escape the characters of ``value`` that would be unsafe in context.

    Parameters
    ----------
    stack : sequence of str
        Names of the constructs currently open
    unsafe : iterable of UnsafePattern
        Patterns to apply
    value : str
        Text to make safe
    before : str, default = ""
        Output already emitted immediately before ``value``
    after : str, default = ""
        Output that will immediately follow ``value``
    encode : iterable of str, default = ()
        Punctuation characters to emit as character references instead of
        backslash escapes

    Returns
    -------
    str
        The escaped value; never fails, including for empty input

    """
    encode_set = frozenset(encode)
    full = before + value + after
    positions: list[int] = []
    # position -> [has_before_condition, has_after_condition]
    conditions: dict[int, list[bool]] = {}

    for pattern in unsafe:
        if not pattern_in_scope(stack, pattern):
            continue

        expression = compile_pattern(pattern)
        has_before = pattern.before is not None or pattern.at_break
        has_after = pattern.after is not None

        for match in expression.finditer(full):
            position = match.start() + (len(match.group(1)) if has_before else 0)
            if position in conditions:
                existing = conditions[position]
                existing[0] = existing[0] and has_before
                existing[1] = existing[1] and has_after
            else:
                positions.append(position)
                conditions[position] = [has_before, has_after]

    positions.sort()

    start = len(before)
    end = len(full) - len(after)
    result: list[str] = []

    for index, position in enumerate(positions):
        if position < start or position >= end:
            continue

        # Skip an escape whose condition is on a neighbour that is itself
        # unconditionally escaped.
        next_is_plain = (
            position + 1 < end
            and index + 1 < len(positions)
            and positions[index + 1] == position + 1
            and not any(conditions[position + 1])
        )
        previous_is_plain = index > 0 and positions[index - 1] == position - 1 and not any(conditions[position - 1])
        if (next_is_plain and conditions[position][1]) or (previous_is_plain and conditions[position][0]):
            continue

        if start != position:
            result.append(_escape_backslashes(full[start:position], "\\"))

        start = position
        character = full[position]

        if _ASCII_PUNCTUATION.match(character) and character not in encode_set:
            result.append("\\")
        else:
            result.append(encode_character_reference(character))
            start += 1

    result.append(_escape_backslashes(full[start:end], after))
    return "".join(result)
