"""Utilities for Pleeease."""

from .error import (
    PleeeaseError,
    ConfigError,
    CssSyntaxError,
    ProcessingError,
    PluginError,
    FileOperationError,
)
from .logging import setup_logging

__all__ = [
    'PleeeaseError',
    'ConfigError',
    'CssSyntaxError',
    'ProcessingError',
    'PluginError',
    'FileOperationError',
    'setup_logging',
]
