"""Base classes for parser, renderer and plugin options.

This module defines the foundation classes for the frozen dataclass options
used throughout the mdliteral pipeline.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class BaseParserOptions(CloneFrozenMixin):
    """Base class for all parser options."""


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for all renderer options."""


@dataclass(frozen=True)
class BasePluginOptions(CloneFrozenMixin):
    """Base class for options accepted by pipeline plugins.

    Plugin options are deliberately not validated beyond their class: a
    plugin receiving a malformed value produces different output text
    rather than raising.
    """
