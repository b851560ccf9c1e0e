"""Pleeease: process CSS with a single set of options."""

from .utils.config import VERSION as __version__
from .core import (
    Stylesheet,
    CoverageLevel,
    coverage_level,
    Options,
    resolve,
    Processor,
    process,
    compile_file,
)
from .utils.error import (
    PleeeaseError,
    ConfigError,
    CssSyntaxError,
    ProcessingError,
    PluginError,
    FileOperationError,
)

__all__ = [
    '__version__',
    'Stylesheet',
    'CoverageLevel',
    'coverage_level',
    'Options',
    'resolve',
    'Processor',
    'process',
    'compile_file',
    'PleeeaseError',
    'ConfigError',
    'CssSyntaxError',
    'ProcessingError',
    'PluginError',
    'FileOperationError',
]
