"""Error utility for Pleeease."""

from typing import Optional, Sequence


class PleeeaseError(Exception):
    """Base exception for Pleeease."""
    pass


class ConfigError(PleeeaseError):
    """Raised when the resolved configuration is inconsistent."""

    def __init__(self, message: str, options: Sequence[str] = ()):
        super().__init__(message)
        self.options = tuple(options)


class CssSyntaxError(PleeeaseError):
    """Raised when a stylesheet cannot be parsed."""

    def __init__(self, reason: str, line: Optional[int] = None, source: Optional[str] = None):
        location = source or '<css input>'
        if line is not None:
            location = f"{location}:{line}"
        super().__init__(f"{location}: {reason}")
        self.name = 'CssSyntaxError'
        self.reason = reason
        self.line = line
        self.source = source


class ProcessingError(PleeeaseError):
    """Raised when the pipeline is called with unusable input."""
    pass


class PluginError(PleeeaseError):
    """Raised when a plugin fails."""
    pass


class FileOperationError(PleeeaseError):
    """Raised when file operations fail."""
    pass


# Exported exceptions
__all__ = [
    'PleeeaseError',
    'ConfigError',
    'CssSyntaxError',
    'ProcessingError',
    'PluginError',
    'FileOperationError',
]
