"""Test utilities for the mdliteral test suite.

Helpers that run markdown through the processing pipeline the way the
command line does, plus temporary directory management.
"""

import shutil
import tempfile
from pathlib import Path

from mdliteral.ast import Document, Paragraph
from mdliteral.options import DisableTextEscapeOptions, MarkdownRendererOptions, WikiLinkOptions
from mdliteral.parsers import wiki_link_plugin
from mdliteral.pipeline import Processor
from mdliteral.renderers import MarkdownRenderer
from mdliteral.transforms import create_to_markdown_extension, disable_text_escape


def process(markdown: str) -> str:
    """Round-trip markdown with literal characters enabled."""
    return Processor().use(disable_text_escape).process(markdown).strip()


def process_with_wiki_link(markdown: str, alias_divider: str = "|") -> str:
    """Round-trip markdown with wiki link syntax and literal characters enabled."""
    return (
        Processor()
        .use(wiki_link_plugin, WikiLinkOptions(alias_divider=alias_divider))
        .use(disable_text_escape, DisableTextEscapeOptions(alias_divider=alias_divider))
        .process(markdown)
        .strip()
    )


def render_inline(*nodes, literal: bool = True, options: MarkdownRendererOptions | None = None) -> str:
    """Render inline nodes inside a single paragraph.

    With ``literal`` the handlers installed by the escape plugins are used.
    """
    extensions = [create_to_markdown_extension()] if literal else []
    renderer = MarkdownRenderer(options, extensions=extensions)
    return renderer.render_to_string(Document(children=[Paragraph(content=list(nodes))]))


def create_test_temp_dir() -> Path:
    """Create a temporary directory for test files."""
    return Path(tempfile.mkdtemp())


def cleanup_test_dir(temp_dir: Path) -> None:
    """Clean up test directory and files."""
    if temp_dir.exists():
        shutil.rmtree(temp_dir)
