"""Browser coverage classification.

The ``browsers`` option is a list of browser queries (``last 2 versions``,
``ie 9``, ...). Some plugins only produce fallbacks that old browsers need,
so the list is reduced to a single comparable :class:`CoverageLevel`.
"""

import re
from enum import IntEnum
from typing import Iterable, Union

from ..utils.config import LEGACY_IE_VERSION, LEGACY_VERSION_COUNT


class CoverageLevel(IntEnum):
    """How far back a browser list reaches."""

    MODERN = 0
    LEGACY = 1


# Level at which rem, opacity and pseudo-element fallbacks stay enabled
FALLBACK_COVERAGE = CoverageLevel.LEGACY

LAST_VERSIONS_RE = re.compile(r'^last\s+(\d+)\s+(?:[a-z_]+\s+)?versions?$')
IE_RE = re.compile(
    r'^(?:ie|explorer)\s*(>=|<=|>|<)?\s*(\d+(?:\.\d+)?)(?:\s*-\s*(\d+(?:\.\d+)?))?$'
)


def _split_queries(browsers: Union[str, Iterable[str]]):
    if isinstance(browsers, str):
        browsers = [browsers]
    for entry in browsers:
        for query in str(entry).split(','):
            query = ' '.join(query.lower().split())
            if query:
                yield query


def query_level(query: str) -> CoverageLevel:
    """Classify a single, normalized browser query."""
    match = LAST_VERSIONS_RE.match(query)
    if match:
        if int(match.group(1)) >= LEGACY_VERSION_COUNT:
            return CoverageLevel.LEGACY
        return CoverageLevel.MODERN

    match = IE_RE.match(query)
    if match:
        operator, version, upper = match.groups()
        version = float(version)
        if upper is not None or operator in (None, '>='):
            reaches_legacy = version <= LEGACY_IE_VERSION
        elif operator == '>':
            reaches_legacy = version < LEGACY_IE_VERSION
        else:
            # "ie <" and "ie <=" always include the oldest versions
            reaches_legacy = True
        if reaches_legacy:
            return CoverageLevel.LEGACY

    return CoverageLevel.MODERN


def coverage_level(browsers: Union[str, Iterable[str], None]) -> CoverageLevel:
    """Return the widest coverage level reached by any query in ``browsers``.

    Args:
        browsers: Browser query list, or a single query string

    Returns:
        CoverageLevel: ``LEGACY`` when the list includes browsers that need
        rem, opacity or pseudo-element fallbacks, ``MODERN`` otherwise
    """
    if not browsers:
        return CoverageLevel.MODERN
    return max(
        (query_level(query) for query in _split_queries(browsers)),
        default=CoverageLevel.MODERN,
    )


__all__ = ['CoverageLevel', 'FALLBACK_COVERAGE', 'coverage_level', 'query_level']
