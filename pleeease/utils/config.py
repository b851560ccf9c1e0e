"""Configuration utility for Pleeease."""

# Project version
VERSION = "4.0.0"

# Configuration file looked up next to the processed files
RC_FILENAME = '.pleeeaserc'

# Option groups
PREPROCESSORS = ('sass', 'less', 'stylus')
LEGACY_OPTIONS = ('next', 'fallbacks', 'optimizers')
BROWSER_DEPENDENT_OPTIONS = ('rem', 'opacity', 'pseudoElements')

# Keys every plugin receives next to its own settings
SHARED_OPTIONS = ('sourcemaps', 'in', 'out', 'browsers')

# Order in which enabled plugins run over a stylesheet
PIPELINE_ORDER = [
    'import',
    'filters',
    'rem',
    'pseudoElements',
    'opacity',
    'vmin',
    'autoprefixer',
    'mqpacker',
    'minifier',
]

# Browser coverage policy
LEGACY_VERSION_COUNT = 10   # "last N versions" with N >= this reaches legacy browsers
LEGACY_IE_VERSION = 8       # IE at or below this lacks rem, opacity and ::pseudo support

# Logging
LOG_LEVEL = 'INFO'

# Exported config
__all__ = [
    'VERSION', 'RC_FILENAME',
    'PREPROCESSORS', 'LEGACY_OPTIONS', 'BROWSER_DEPENDENT_OPTIONS',
    'SHARED_OPTIONS', 'PIPELINE_ORDER',
    'LEGACY_VERSION_COUNT', 'LEGACY_IE_VERSION',
    'LOG_LEVEL',
]
