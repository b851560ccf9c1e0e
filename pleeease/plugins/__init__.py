"""Pipeline plugins for Pleeease."""

from .base import BasePlugin, shared_options
from .minifier import MinifierPlugin
from .factory import PluginFactory, default_factory

# Exported classes
__all__ = [
    'BasePlugin',
    'shared_options',
    'MinifierPlugin',
    'PluginFactory',
    'default_factory',
]
