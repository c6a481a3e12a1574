#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdliteral/utils/io_utils.py
"""Output helpers shared by the renderer and the command line."""

from __future__ import annotations

from pathlib import Path
from typing import IO, Union


def write_content(content: str, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
    """Write text content to a path or file-like object.

    Parameters
    ----------
    content : str
        Text to write
    output : str, Path, IO[bytes] or IO[str]
        Destination. Paths are written as UTF-8; binary streams receive
        UTF-8 encoded bytes.

    Raises
    ------
    TypeError
        If ``output`` is neither a path nor a writable stream

    """
    if isinstance(output, (str, Path)):
        Path(output).write_text(content, encoding="utf-8")
        return

    if not hasattr(output, "write"):
        raise TypeError(f"Unsupported output type: {type(output).__name__}")

    mode = getattr(output, "mode", "")
    if "b" in mode or _is_binary_stream(output):
        output.write(content.encode("utf-8"))  # type: ignore[arg-type]
    else:
        output.write(content)  # type: ignore[arg-type]


def _is_binary_stream(stream: object) -> bool:
    from io import BufferedIOBase, BytesIO, RawIOBase

    return isinstance(stream, (BytesIO, BufferedIOBase, RawIOBase))
