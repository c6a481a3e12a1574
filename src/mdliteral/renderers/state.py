#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdliteral/renderers/state.py
"""Serialization state shared by markdown node handlers.

A :class:`SerializationState` is created for every render call. It owns the
handler table, the unsafe pattern table and the construct stack that the
escaper consults, and offers the container helpers handlers use to serialize
their children:

- :meth:`SerializationState.container_phrasing` joins inline children,
  telling each child which character precedes and follows it
- :meth:`SerializationState.container_flow` joins block children with
  blank lines (single newlines inside tight lists)

Handlers are plain callables with the signature
``serialize(node, parent, state, info) -> str``; an optional ``peek``
callable with the same signature returns the first character the node will
emit, so that a preceding sibling can judge its trailing characters.
"""

from __future__ import annotations

import logging
import re
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Iterator, Mapping, Optional, Sequence

from mdliteral.ast import List, ListItem, Node, get_child_list
from mdliteral.exceptions import RenderingError
from mdliteral.utils.escape import UnsafePattern, safe

if TYPE_CHECKING:
    from mdliteral.options.markdown import MarkdownRendererOptions

logger = logging.getLogger(__name__)

_LINE_ENDING = re.compile(r"\r?\n|\r")


@dataclass
class Info:
    """Context passed to a handler.

    Parameters
    ----------
    before : str, default = ""
        Output emitted immediately before the node
    after : str, default = ""
        Output that will immediately follow the node
    line : int, default = 1
        Line the node starts on
    column : int, default = 1
        Column the node starts at
    line_shift : int, default = 0
        Indentation added by enclosing containers

    """

    before: str = ""
    after: str = ""
    line: int = 1
    column: int = 1
    line_shift: int = 0


class Tracker:
    """Track the output position while a handler builds its result."""

    def __init__(self, info: Info) -> None:
        self.line = info.line
        self.column = info.column
        self.line_shift = info.line_shift

    def move(self, value: str = "") -> str:
        """Advance past ``value`` and return it unchanged."""
        chunks = _LINE_ENDING.split(value)
        tail = chunks[-1]
        self.line += len(chunks) - 1
        if len(chunks) == 1:
            self.column += len(tail)
        else:
            self.column = 1 + self.line_shift + len(tail)
        return value

    def shift(self, amount: int) -> None:
        """Increase the indentation applied to following lines."""
        self.line_shift += amount

    def current(self, before: str = "", after: str = "") -> Info:
        """Return an :class:`Info` describing the current position."""
        return Info(before=before, after=after, line=self.line, column=self.column, line_shift=self.line_shift)


SerializeFunc = Callable[[Any, Optional[Node], "SerializationState", Info], str]


@dataclass(frozen=True)
class NodeHandler:
    """Serializer for one node type.

    Parameters
    ----------
    serialize : callable
        ``serialize(node, parent, state, info) -> str``
    peek : callable or None, default = None
        Returns the leading character(s) ``serialize`` would produce. When
        omitted, ``serialize`` itself is used to peek.

    """

    serialize: SerializeFunc
    peek: Optional[SerializeFunc] = None


@dataclass(frozen=True)
class ToMarkdownExtension:
    """A bundle of handler overrides and extra unsafe patterns.

    Parameters
    ----------
    handlers : dict, default = empty dict
        Node type tag to :class:`NodeHandler`; replaces any earlier handler
        registered for the same tag
    unsafe : tuple of UnsafePattern, default = ()
        Patterns appended to the escaper's table

    """

    handlers: Mapping[str, NodeHandler] = field(default_factory=dict)
    unsafe: tuple[UnsafePattern, ...] = ()


def indent_lines(value: str, map_line: Callable[[str, int, bool], str]) -> str:
    """Rewrite every line of ``value`` through ``map_line``.

    Parameters
    ----------
    value : str
        Text to process
    map_line : callable
        ``map_line(line, index, blank) -> str``; ``blank`` is True for
        empty lines

    Returns
    -------
    str
        The mapped lines joined with their original line endings

    Examples
    --------
    >>> indent_lines("a\\n\\nb", lambda line, i, blank: ">" + ("" if blank else " ") + line)
    '> a\\n>\\n> b'

    """
    result: list[str] = []
    start = 0
    index = 0

    for match in _LINE_ENDING.finditer(value):
        line = value[start : match.start()]
        result.append(map_line(line, index, not line))
        result.append(match.group(0))
        start = match.end()
        index += 1

    line = value[start:]
    result.append(map_line(line, index, not line))
    return "".join(result)


class SerializationState:
    """Mutable state for a single serialization pass.

    Parameters
    ----------
    handlers : mapping of str to NodeHandler
        Handler table keyed by node type tag
    unsafe : sequence of UnsafePattern
        Escaper pattern table
    options : MarkdownRendererOptions
        Renderer options, readable by handlers

    Attributes
    ----------
    stack : list of str
        Names of the constructs currently open, outermost first
    index_stack : list of int
        Index of the child being serialized, one entry per open container
    list_stack : list of List
        Lists currently being serialized, innermost last

    """

    def __init__(
        self,
        handlers: Mapping[str, NodeHandler],
        unsafe: Sequence[UnsafePattern],
        options: MarkdownRendererOptions,
    ) -> None:
        self.handlers = dict(handlers)
        self.unsafe = tuple(unsafe)
        self.options = options
        self.stack: list[str] = []
        self.index_stack: list[int] = []
        self.list_stack: list[List] = []

    @contextmanager
    def enter(self, name: str) -> Iterator[None]:
        """Open a construct for the duration of the ``with`` block."""
        self.stack.append(name)
        try:
            yield
        finally:
            self.stack.pop()

    @contextmanager
    def detached_stack(self) -> Iterator[None]:
        """Serialize with an empty enclosing construct stack.

        Constructs opened inside the block behave as if they were at the top
        level of the document; the previous stack is restored on exit.
        """
        saved = self.stack
        self.stack = []
        try:
            yield
        finally:
            self.stack = saved

    def safe(self, value: str, info: Info, encode: Sequence[str] = ()) -> str:
        """Escape ``value`` for the current construct stack."""
        return safe(self.stack, self.unsafe, value, before=info.before, after=info.after, encode=encode)

    def create_tracker(self, info: Info) -> Tracker:
        return Tracker(info)

    def handle(self, node: Node, parent: Optional[Node], info: Info) -> str:
        """Serialize ``node`` with the handler registered for its type.

        Raises
        ------
        RenderingError
            If no handler is registered for the node's type

        """
        handler = self.handlers.get(node.type)
        if handler is None:
            raise RenderingError(f"Cannot handle unknown node `{node.type}`", node_type=node.type)
        return handler.serialize(node, parent, self, info)

    def peek(self, node: Node, parent: Optional[Node], info: Info) -> str:
        """Return the leading output of ``node``, or ``""`` without a handler."""
        handler = self.handlers.get(node.type)
        if handler is None:
            return ""
        func = handler.peek or handler.serialize
        return func(node, parent, self, info)

    def container_phrasing(self, parent: Node, info: Info) -> str:
        """Serialize the inline children of ``parent``.

        Each child sees the last character emitted before it as ``before``
        and the first character its next sibling will emit as ``after``; the
        last child inherits ``info.after``.
        """
        children = get_child_list(parent) or []
        results: list[str] = []
        before = info.before
        tracker = self.create_tracker(info)
        self.index_stack.append(-1)

        try:
            for index, child in enumerate(children):
                self.index_stack[-1] = index

                if index + 1 < len(children):
                    current = tracker.current()
                    after = self.peek(children[index + 1], parent, current)[:1]
                else:
                    after = info.after

                # Raw HTML on a new line would start an HTML block.
                if results and before in ("\r", "\n") and child.type == "html_inline":
                    results[-1] = re.sub(r"(\r?\n|\r)$", " ", results[-1])
                    before = " "

                value = tracker.move(self.handle(child, parent, tracker.current(before=before, after=after)))
                results.append(value)
                if value:
                    before = value[-1]
        finally:
            self.index_stack.pop()

        return "".join(results)

    def container_flow(self, parent: Node, info: Info) -> str:
        """Serialize the block children of ``parent``, separated by blank lines."""
        children = get_child_list(parent) or []
        results: list[str] = []
        tracker = self.create_tracker(info)
        self.index_stack.append(-1)

        try:
            for index, child in enumerate(children):
                self.index_stack[-1] = index
                results.append(tracker.move(self.handle(child, parent, tracker.current(before="\n", after="\n"))))
                if index < len(children) - 1:
                    results.append(tracker.move(self._between(parent)))
        finally:
            self.index_stack.pop()

        return "".join(results)

    def _between(self, parent: Node) -> str:
        if isinstance(parent, List):
            return "\n" if parent.tight else "\n\n"
        if isinstance(parent, ListItem) and self.list_stack and self.list_stack[-1].tight:
            return "\n"
        return "\n\n"
