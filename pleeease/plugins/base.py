"""Base plugin class for Pleeease."""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Mapping, Optional

from ..core.stylesheet import Stylesheet
from ..utils.config import SHARED_OPTIONS
from ..utils.error import PleeeaseError, PluginError


def shared_options(options: Mapping[str, Any]) -> Dict[str, Any]:
    """Pick the options every plugin receives besides its own settings."""
    return {name: options[name] for name in SHARED_OPTIONS if name in options}


class BasePlugin(ABC):
    """Base class for all pipeline plugins.

    A plugin is configured by one option. It receives that option's resolved
    value (a settings mapping, or ``True`` for plain flags) and the shared
    options, and turns a stylesheet into a new one.
    """

    #: Option key that enables the plugin
    name = ''

    def __init__(self, settings: Any = None, shared: Optional[Mapping[str, Any]] = None):
        """Initialize plugin.

        Args:
            settings: Resolved value of the plugin's option
            shared: Shared options (sourcemaps, in, out, browsers)
        """
        self.settings = dict(settings) if isinstance(settings, Mapping) else {}
        self.shared = dict(shared or {})
        self.logger = logging.getLogger(self.__class__.__name__)

    @abstractmethod
    def process(self, stylesheet: Stylesheet) -> Stylesheet:
        """Transform a stylesheet."""
        pass

    def run(self, stylesheet: Stylesheet) -> Stylesheet:
        """Run :meth:`process`, wrapping unexpected failures in PluginError."""
        self.log_debug(f"Running {self.name or self.__class__.__name__}")
        try:
            return self.process(stylesheet)
        except PleeeaseError:
            raise
        except Exception as e:
            self.handle_error(e, f"Plugin '{self.name}' failed")

    def log_error(self, message: str, error: Optional[Exception] = None) -> None:
        """Log error message.

        Args:
            message: Error message
            error: Optional exception
        """
        if error:
            self.logger.error(f"{message}: {error}")
        else:
            self.logger.error(message)

    def log_warning(self, message: str) -> None:
        self.logger.warning(message)

    def log_debug(self, message: str) -> None:
        self.logger.debug(message)

    def handle_error(self, error: Exception, message: str) -> None:
        """Log the error and raise it as a PluginError.

        Args:
            error: Exception to handle
            message: Error message
        """
        self.log_error(message, error)
        raise PluginError(f"{message}: {error}") from error


# Exported class
__all__ = ['BasePlugin', 'shared_options']
