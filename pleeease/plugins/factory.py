"""Plugin factory for Pleeease."""

import logging
from typing import Any, Dict, List, Mapping, Optional, Type

from .base import BasePlugin, shared_options
from .minifier import MinifierPlugin
from ..core.options import enabled_preprocessors, is_enabled
from ..utils.config import PIPELINE_ORDER, PREPROCESSORS


class PluginFactory:
    """Registry of plugin classes, instantiated from resolved options."""

    def __init__(self):
        """Initialize plugin factory."""
        self.logger = logging.getLogger(self.__class__.__name__)
        self._plugins: Dict[str, Type[BasePlugin]] = {}
        self._preprocessors: Dict[str, Type[BasePlugin]] = {}

    def register(self, plugin_cls: Type[BasePlugin], name: Optional[str] = None) -> None:
        """Register a plugin class for an option.

        Args:
            plugin_cls: Plugin class
            name: Option key, defaults to ``plugin_cls.name``

        Raises:
            ValueError: If no option key is given
        """
        name = name or plugin_cls.name
        if not name:
            raise ValueError(f"{plugin_cls.__name__} has no option name")
        registry = self._preprocessors if name in PREPROCESSORS else self._plugins
        registry[name] = plugin_cls
        self.logger.debug(f"Registered {plugin_cls.__name__} for '{name}'")

    def get_plugin(self, name: str) -> Optional[Type[BasePlugin]]:
        """Get plugin class by option key."""
        return self._plugins.get(name) or self._preprocessors.get(name)

    def pipeline_order(self) -> List[str]:
        """Option keys in the order their plugins run.

        Plugins for keys outside the built-in order run before the minifier,
        which always comes last.
        """
        extra = [name for name in self._plugins if name not in PIPELINE_ORDER]
        return PIPELINE_ORDER[:-1] + extra + PIPELINE_ORDER[-1:]

    def create_plugins(self, options: Mapping[str, Any]) -> List[BasePlugin]:
        """Create plugins for every enabled, registered option.

        Args:
            options: Resolved options

        Returns:
            List[BasePlugin]: Plugin instances in pipeline order
        """
        shared = shared_options(options)
        plugins = []
        for name in self.pipeline_order():
            setting = options.get(name)
            if not is_enabled(setting):
                continue
            plugin_cls = self.get_plugin(name)
            if plugin_cls is None:
                self.logger.debug(f"No plugin registered for '{name}', skipping")
                continue
            plugins.append(plugin_cls(setting, shared))
        return plugins

    def create_preprocessor(self, options: Mapping[str, Any]) -> Optional[BasePlugin]:
        """Create the enabled preprocessor, if one is registered.

        Args:
            options: Resolved options, holding at most one enabled preprocessor

        Returns:
            Optional[BasePlugin]: Preprocessor instance
        """
        active = enabled_preprocessors(options)
        if not active:
            return None

        name = active[0]
        plugin_cls = self.get_plugin(name)
        if plugin_cls is None:
            self.logger.warning(f"Preprocessor '{name}' is enabled but not registered, input is read as CSS")
            return None
        return plugin_cls(options[name], shared_options(options))


def default_factory() -> PluginFactory:
    """Create a factory holding the built-in plugins."""
    factory = PluginFactory()
    factory.register(MinifierPlugin)
    return factory


# Exported class
__all__ = ['PluginFactory', 'default_factory']
