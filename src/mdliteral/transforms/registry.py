#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdliteral/transforms/registry.py
"""Plugin registry for discovering and applying pipeline plugins by name.

The built-in plugins are always available. Additional plugins are
discovered through the ``mdliteral.plugins`` entry point group on first
access.

Examples
--------
List available plugins:

    >>> from mdliteral.transforms import plugin_registry
    >>> plugin_registry.list_plugins()
    ['disable-bracket-escape', 'disable-text-escape', 'wiki-link']

Apply a plugin to a processor:

    >>> from mdliteral.pipeline import Processor
    >>> processor = Processor()
    >>> processor = plugin_registry.apply(processor, "disable-text-escape")

"""

from __future__ import annotations

import importlib.metadata
import logging
from typing import TYPE_CHECKING, Any, Optional

from mdliteral.exceptions import PluginError
from mdliteral.transforms.metadata import PluginMetadata

if TYPE_CHECKING:
    from mdliteral.pipeline import Processor

logger = logging.getLogger(__name__)

ENTRY_POINT_GROUP = "mdliteral.plugins"


class PluginRegistry:
    """Registry of pipeline plugins.

    This is a singleton: every instantiation returns the same registry.
    Prefer the module-level :data:`plugin_registry` instance.
    """

    _instance: Optional[PluginRegistry] = None
    _plugins: dict[str, PluginMetadata]
    _initialized: bool

    def __new__(cls) -> PluginRegistry:
        """Create or return singleton instance."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._plugins = {}
            cls._instance._initialized = False
        return cls._instance

    def _ensure_initialized(self) -> None:
        """Register built-ins and run plugin discovery once."""
        if not self._initialized:
            self._initialized = True
            from mdliteral.transforms._builtin_metadata import BUILTIN_PLUGINS

            for metadata in BUILTIN_PLUGINS:
                self._plugins.setdefault(metadata.name, metadata)
            self.discover_plugins()

    def register(self, metadata: PluginMetadata) -> None:
        """Register a plugin.

        A plugin registered under an existing name replaces it, with a
        warning.
        """
        self._ensure_initialized()
        if metadata.name in self._plugins:
            logger.warning(f"Plugin '{metadata.name}' already registered, overwriting")
        self._plugins[metadata.name] = metadata
        logger.debug(f"Registered plugin: {metadata.name}")

    def unregister(self, name: str) -> bool:
        """Unregister a plugin.

        Returns
        -------
        bool
            True if the plugin was unregistered, False if it was not found

        """
        self._ensure_initialized()
        if name in self._plugins:
            del self._plugins[name]
            logger.debug(f"Unregistered plugin: {name}")
            return True
        return False

    def get_metadata(self, name: str) -> PluginMetadata:
        """Get metadata for a plugin.

        Raises
        ------
        PluginError
            If no plugin is registered under ``name``

        """
        self._ensure_initialized()
        if name not in self._plugins:
            available = ", ".join(sorted(self._plugins))
            raise PluginError(f"Unknown plugin '{name}'. Available plugins: {available}", plugin_name=name)
        return self._plugins[name]

    def has_plugin(self, name: str) -> bool:
        self._ensure_initialized()
        return name in self._plugins

    def list_plugins(self, tags: Optional[list[str]] = None) -> list[str]:
        """List registered plugin names, sorted alphabetically.

        Parameters
        ----------
        tags : list of str, optional
            Only return plugins with at least one of these tags

        """
        self._ensure_initialized()
        if tags is None:
            return sorted(self._plugins)
        return sorted(name for name, metadata in self._plugins.items() if any(tag in metadata.tags for tag in tags))

    def apply(self, processor: Processor, name: str, options: Any = None, **kwargs: Any) -> Processor:
        """Apply a registered plugin to a processor.

        Parameters
        ----------
        processor : Processor
            Pipeline to configure
        name : str
            Plugin name
        options : BasePluginOptions or None, default = None
            Options object; when omitted, one is built from ``kwargs``
        **kwargs
            Fields for the plugin's options class

        Returns
        -------
        Processor
            The processor, for chaining

        """
        metadata = self.get_metadata(name)
        if options is None and kwargs:
            options = metadata.create_options(**kwargs)
        return processor.use(metadata.plugin, options)

    def discover_plugins(self) -> int:
        """Discover and register plugins from entry points.

        Entry points that fail to load, or that do not resolve to a
        :class:`PluginMetadata`, are skipped with a warning.

        Returns
        -------
        int
            Number of plugins discovered and registered

        """
        discovered_count = 0

        for ep in importlib.metadata.entry_points().select(group=ENTRY_POINT_GROUP):
            try:
                metadata = ep.load()
            except Exception as e:
                logger.warning(f"Failed to load plugin entry point '{ep.name}': {e}")
                continue

            if not isinstance(metadata, PluginMetadata):
                logger.warning(f"Entry point '{ep.name}' did not return PluginMetadata, skipping")
                continue

            self.register(metadata)
            discovered_count += 1
            logger.debug(f"Discovered plugin from entry point: {ep.name}")

        if discovered_count:
            logger.info(f"Discovered {discovered_count} plugin(s) from entry points")
        return discovered_count


plugin_registry = PluginRegistry()
