"""Core functionality: options resolution and the processing pipeline."""

from .stylesheet import Stylesheet
from .coverage import CoverageLevel, FALLBACK_COVERAGE, coverage_level
from .options import OPTION_SCHEMA, Options, defaults, resolve
from .validator import check_syntax
from .processor import Processor, process, compile_file

__all__ = [
    'Stylesheet',
    'CoverageLevel',
    'FALLBACK_COVERAGE',
    'coverage_level',
    'OPTION_SCHEMA',
    'Options',
    'defaults',
    'resolve',
    'check_syntax',
    'Processor',
    'process',
    'compile_file',
]
