#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdliteral/transforms/__init__.py
"""Tree transforms and the plugins that install them.

Examples
--------
    >>> from mdliteral.pipeline import Processor
    >>> from mdliteral.transforms import disable_text_escape
    >>> Processor().use(disable_text_escape).process("AT&T [draft] *ok*")
    'AT&T [draft] *ok*'

"""

from mdliteral.transforms.disable_escape import (
    create_to_markdown_extension,
    disable_bracket_escape,
    disable_text_escape,
    is_protected,
    rewrite_tree,
    split_text,
)
from mdliteral.transforms.handlers import (
    is_autolink,
    make_literal_wiki_link_handler,
    remove_escapes,
    serialize_image,
    serialize_link,
    serialize_literal_char,
)
from mdliteral.transforms.metadata import PluginMetadata
from mdliteral.transforms.registry import PluginRegistry, plugin_registry

__all__ = [
    "PluginMetadata",
    "PluginRegistry",
    "create_to_markdown_extension",
    "disable_bracket_escape",
    "disable_text_escape",
    "is_autolink",
    "is_protected",
    "make_literal_wiki_link_handler",
    "plugin_registry",
    "remove_escapes",
    "rewrite_tree",
    "serialize_image",
    "serialize_link",
    "serialize_literal_char",
    "split_text",
]
