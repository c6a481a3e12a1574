#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdliteral/renderers/base.py
"""Base class for AST renderers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Union

from mdliteral.ast import Document
from mdliteral.exceptions import InvalidOptionsError
from mdliteral.options.base import BaseRendererOptions
from mdliteral.utils.io_utils import write_content


class BaseRenderer(ABC):
    """Abstract base class for AST renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Renderer options

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @abstractmethod
    def render(self, doc: Document, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Render the AST and write it to ``output``.

        Parameters
        ----------
        doc : Document
            AST Document node to render
        output : str, Path, IO[bytes] or IO[str]
            Output destination (file path or file-like object)

        """
        ...

    @abstractmethod
    def render_to_string(self, doc: Document) -> str:
        """Render the AST and return the result as a string."""
        ...

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                component_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @staticmethod
    def write_text_output(text: str, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Write rendered text to a file path or stream.

        Examples
        --------
        >>> from io import StringIO
        >>> buffer = StringIO()
        >>> BaseRenderer.write_text_output("# Hello", buffer)
        >>> buffer.getvalue()
        '# Hello'

        """
        write_content(text, output)
