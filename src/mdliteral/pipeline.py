#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdliteral/pipeline.py
"""Parse, transform and serialize markdown in one pipeline.

A :class:`Processor` ties the mistune-based parser, a list of tree
transforms and the markdown renderer together. Plugins configure it through
:meth:`Processor.use`: a plugin is any callable ``plugin(processor, options)``
that may append mistune plugins to :attr:`Processor.parser_plugins`, append
:class:`~mdliteral.renderers.ToMarkdownExtension` bundles to
:attr:`Processor.to_markdown_extensions`, and return a tree transform.

Examples
--------
    >>> from mdliteral.transforms import disable_text_escape
    >>> processor = Processor().use(disable_text_escape)
    >>> processor.process("foo_bar [x]")
    'foo_bar [x]'

"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Any, Callable, Optional, Union

from mdliteral.ast import Document
from mdliteral.options.markdown import MarkdownParserOptions, MarkdownRendererOptions
from mdliteral.parsers.base import ParserInput
from mdliteral.parsers.markdown import MarkdownParser, MistunePlugin
from mdliteral.renderers.markdown import MarkdownRenderer
from mdliteral.renderers.state import ToMarkdownExtension

logger = logging.getLogger(__name__)

Transform = Callable[[Document], Any]
Plugin = Callable[["Processor", Any], Optional[Transform]]


class Processor:
    """Markdown processing pipeline.

    Parameters
    ----------
    parser_options : MarkdownParserOptions or None, default = None
        Options for the markdown parser
    renderer_options : MarkdownRendererOptions or None, default = None
        Options for the markdown renderer

    Attributes
    ----------
    to_markdown_extensions : list of ToMarkdownExtension
        Serializer extensions, applied in registration order
    parser_plugins : list of callable
        mistune plugins added to the parser
    transforms : list of callable
        Tree transforms, run in registration order

    """

    def __init__(
        self,
        parser_options: MarkdownParserOptions | None = None,
        renderer_options: MarkdownRendererOptions | None = None,
    ):
        self.parser_options = parser_options
        self.renderer_options = renderer_options
        self.to_markdown_extensions: list[ToMarkdownExtension] = []
        self.parser_plugins: list[MistunePlugin] = []
        self.transforms: list[Transform] = []

    def use(self, plugin: Plugin, options: Any = None) -> Processor:
        """Apply a plugin to this processor.

        Parameters
        ----------
        plugin : callable
            ``plugin(processor, options)``; a returned callable is kept as a
            tree transform
        options : Any, default = None
            Passed through to the plugin

        Returns
        -------
        Processor
            This processor, for chaining

        """
        transform = plugin(self, options)
        if transform is not None:
            self.transforms.append(transform)
        logger.debug(f"Using plugin {getattr(plugin, '__name__', type(plugin).__name__)}")
        return self

    def parse(self, source: ParserInput) -> Document:
        """Parse markdown source into a document tree."""
        parser = MarkdownParser(self.parser_options, plugins=self.parser_plugins)
        return parser.parse(source)

    def run(self, tree: Document) -> Document:
        """Run every registered transform over ``tree`` in place.

        Exceptions raised by a transform propagate unchanged.
        """
        for transform in self.transforms:
            logger.debug(f"Applying transform: {getattr(transform, '__name__', type(transform).__name__)}")
            transform(tree)
        return tree

    def stringify(self, tree: Document) -> str:
        """Serialize a document tree with the registered extensions."""
        renderer = MarkdownRenderer(self.renderer_options, extensions=self.to_markdown_extensions)
        return renderer.render_to_string(tree)

    def process(self, source: ParserInput) -> str:
        """Parse, transform and serialize markdown source.

        Parameters
        ----------
        source : str, Path, IO[bytes], IO[str] or bytes
            Markdown source. Strings are treated as markdown text.

        Returns
        -------
        str
            The serialized markdown

        """
        return self.stringify(self.run(self.parse(source)))

    def process_to(self, source: ParserInput, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Process markdown source and write the result to ``output``."""
        tree = self.run(self.parse(source))
        renderer = MarkdownRenderer(self.renderer_options, extensions=self.to_markdown_extensions)
        renderer.render(tree, output)
