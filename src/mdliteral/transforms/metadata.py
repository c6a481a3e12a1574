#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdliteral/transforms/metadata.py
"""Metadata describing pipeline plugins for registration and discovery.

Third-party packages expose a :class:`PluginMetadata` object through the
``mdliteral.plugins`` entry point group:

.. code-block:: toml

    [project.entry-points."mdliteral.plugins"]
    my-plugin = "my_package.plugins:MY_PLUGIN_METADATA"

"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Type

from mdliteral.exceptions import ValidationError
from mdliteral.options.base import BasePluginOptions

logger = logging.getLogger(__name__)


@dataclass
class PluginMetadata:
    """Description of a pipeline plugin.

    Parameters
    ----------
    name : str
        Unique plugin name, as used on the command line
    description : str
        One-line description
    plugin : callable
        ``plugin(processor, options)``, as accepted by
        :meth:`~mdliteral.pipeline.Processor.use`
    options_class : type or None, default = None
        Options dataclass the plugin accepts
    version : str, default = "1.0.0"
        Plugin version
    author : str or None, default = None
        Plugin author
    tags : list of str, default = empty list
        Free-form tags for filtering

    """

    name: str
    description: str
    plugin: Callable[..., Any]
    options_class: Optional[Type[BasePluginOptions]] = None
    version: str = "1.0.0"
    author: Optional[str] = None
    tags: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Validate metadata after initialization."""
        if not self.name:
            raise ValueError("Plugin name cannot be empty")
        if not callable(self.plugin):
            raise ValueError(f"Plugin '{self.name}' is not callable")

    def create_options(self, **kwargs: Any) -> Optional[BasePluginOptions]:
        """Build the plugin's options object from keyword arguments.

        Returns
        -------
        BasePluginOptions or None
            Options instance, or None when the plugin takes no options and
            no arguments were given

        Raises
        ------
        ValidationError
            If arguments are given to a plugin without options, or the
            options class rejects them

        """
        if self.options_class is None:
            if kwargs:
                raise ValidationError(
                    f"Plugin '{self.name}' does not accept options",
                    parameter_name=", ".join(sorted(kwargs)),
                )
            return None

        try:
            return self.options_class(**kwargs)
        except TypeError as e:
            raise ValidationError(
                f"Invalid options for plugin '{self.name}': {e}",
                parameter_name=", ".join(sorted(kwargs)),
                original_error=e,
            ) from e
