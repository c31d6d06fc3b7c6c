"""Plugin registration and hook dispatch.

Discovery: entry points (pip-installed) in the ``rangectl.plugins`` group
via pluggy's setuptools loader. In-process subscribers register directly.
"""

from __future__ import annotations

import logging

import pluggy

from rangectl.plugins.hookspecs import RangectlHookSpec

PROJECT_NAME = "rangectl"

logger = logging.getLogger(__name__)


class PluginManager:
    """Manages plugin discovery, loading, and hook dispatch."""

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(RangectlHookSpec)

    def discover_and_load(self) -> list[str]:
        """Load plugins from the ``rangectl.plugins`` entry-point group.

        Returns a list of registered plugin names.
        """
        self._pm.load_setuptools_entrypoints("rangectl.plugins")
        return self.list_plugin_names()

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        """Register a plugin instance directly (e.g. an editor view)."""
        resolved_name = name or f"{plugin.__class__.__name__}-{id(plugin):x}"
        self._pm.register(plugin, name=resolved_name)
        logger.debug("Registered plugin: %s", resolved_name)

    def unregister(self, plugin: object) -> None:
        """Unregister a plugin instance."""
        self._pm.unregister(plugin)

    @property
    def hook(self) -> pluggy.HookRelay:
        """Access the hook relay for dispatching events."""
        return self._pm.hook

    def get_plugins(self) -> list[object]:
        """Return all registered plugins."""
        return list(self._pm.get_plugins())

    def list_plugin_names(self) -> list[str]:
        """Return names of all registered plugins."""
        return [self._pm.get_name(p) or p.__class__.__name__ for p in self._pm.get_plugins()]
