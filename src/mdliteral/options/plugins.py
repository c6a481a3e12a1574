#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for pipeline plugins."""
# src/mdliteral/options/plugins.py

from __future__ import annotations

from dataclasses import dataclass, field

from mdliteral.constants import DEFAULT_ALIAS_DIVIDER
from mdliteral.options.base import BasePluginOptions


@dataclass(frozen=True)
class DisableTextEscapeOptions(BasePluginOptions):
    """Options for the ``disable-text-escape`` plugins.

    Parameters
    ----------
    alias_divider : str, default "|"
        Text written between a wiki link's target and its alias.

    """

    alias_divider: str = field(
        default=DEFAULT_ALIAS_DIVIDER,
        metadata={"help": "Divider written between wiki link target and alias", "importance": "core"},
    )


@dataclass(frozen=True)
class WikiLinkOptions(BasePluginOptions):
    """Options for the ``wiki-link`` syntax plugin.

    Parameters
    ----------
    alias_divider : str, default "|"
        Divider separating target and alias inside ``[[...]]``, both when
        parsing and when serializing.

    """

    alias_divider: str = field(
        default=DEFAULT_ALIAS_DIVIDER,
        metadata={"help": "Divider between wiki link target and alias", "importance": "core"},
    )
