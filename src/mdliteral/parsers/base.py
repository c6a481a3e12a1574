#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdliteral/parsers/base.py
"""Base class for markdown parsers.

A parser turns markdown source into the :class:`~mdliteral.ast.Document`
tree that transforms rewrite and the renderer serializes.

"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Union

from mdliteral.ast import Document
from mdliteral.exceptions import InvalidOptionsError
from mdliteral.options.base import BaseParserOptions
from mdliteral.utils.encoding import normalize_stream_to_text, read_text_with_encoding_detection

logger = logging.getLogger(__name__)

ParserInput = Union[str, Path, IO[bytes], IO[str], bytes]


class BaseParser(ABC):
    """Abstract base class for parsers.

    Parameters
    ----------
    options : BaseParserOptions or None, default = None
        Parser options

    """

    def __init__(self, options: BaseParserOptions | None = None):
        self.options = options

    @abstractmethod
    def parse(self, input_data: ParserInput) -> Document:
        """Parse input into an AST Document."""
        ...

    @staticmethod
    def _validate_options_type(options: BaseParserOptions | None, expected_type: type, parser_name: str) -> None:
        """Validate that options are of the correct type for this parser.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                component_name=parser_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @staticmethod
    def _load_text_content(input_data: ParserInput) -> str:
        """Load markdown text from a string, path, bytes or stream.

        Strings are always treated as markdown content; pass a
        :class:`~pathlib.Path` to read a file.
        """
        if isinstance(input_data, str):
            return input_data
        if isinstance(input_data, bytes):
            return read_text_with_encoding_detection(input_data)
        if isinstance(input_data, Path):
            logger.debug(f"Reading markdown from {input_data}")
            return read_text_with_encoding_detection(input_data.read_bytes())
        return normalize_stream_to_text(input_data)
