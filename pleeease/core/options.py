"""Options resolution for Pleeease.

Raw options come from the caller and, optionally, from a ``.pleeeaserc``
file. They are normalized against :data:`OPTION_SCHEMA` into a plain dict
that every plugin consumes as is.
"""

import copy
import logging
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Union

from typing_extensions import Final

from .coverage import FALLBACK_COVERAGE, coverage_level
from ..utils.config import BROWSER_DEPENDENT_OPTIONS, LEGACY_OPTIONS, PREPROCESSORS
from ..utils.error import ConfigError

logger = logging.getLogger(__name__)


class OptionKind(Enum):
    """Shape of an option's default."""

    FEATURE = 'feature'  # enable-with-defaults: False or a settings mapping
    VALUE = 'value'      # literal default
    OPEN = 'open'        # no default, only present when given


def _freeze(value):
    if isinstance(value, Mapping):
        return MappingProxyType({key: _freeze(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(item) for item in value)
    return value


def _thaw(value):
    if isinstance(value, Mapping):
        return {key: _thaw(item) for key, item in value.items()}
    if isinstance(value, tuple):
        return [_thaw(item) for item in value]
    return value


@dataclass(frozen=True)
class OptionSpec:
    """Default value and shape of a single option."""

    kind: OptionKind
    default: Any = None
    settings: Mapping[str, Any] = field(default_factory=dict)
    tokens: bool = False

    def __post_init__(self):
        object.__setattr__(self, 'default', _freeze(self.default))
        object.__setattr__(self, 'settings', _freeze(self.settings))

    def default_value(self) -> Any:
        """Value used when the option is not given at all."""
        if self.kind is OptionKind.FEATURE:
            return _thaw(self.settings) if self.default else False
        return _thaw(self.default)

    def enabled_value(self) -> Any:
        """Value of the option switched on with its defaults."""
        if self.kind is OptionKind.FEATURE:
            return _thaw(self.settings)
        return _thaw(self.default)


def feature(settings: Optional[Mapping[str, Any]] = None, enabled: bool = True) -> OptionSpec:
    return OptionSpec(OptionKind.FEATURE, default=enabled, settings=settings or {})


def literal(default: Any) -> OptionSpec:
    return OptionSpec(OptionKind.VALUE, default=default)


def open_option(tokens: bool = False) -> OptionSpec:
    return OptionSpec(OptionKind.OPEN, tokens=tokens)


OPTION_SCHEMA: Final = MappingProxyType({
    'autoprefixer': feature(),
    'filters': feature({'oldIE': False}),
    'rem': feature({'rootValue': '16px'}),
    'pseudoElements': literal(True),
    'opacity': literal(True),
    'vmin': literal(True),
    'import': feature(),
    'minifier': feature({'preserveHacks': True}),
    'mqpacker': feature(enabled=False),
    'sourcemaps': feature({'map': {'inline': True}}, enabled=False),
    **{name: feature(enabled=False) for name in PREPROCESSORS},
    'browsers': open_option(tokens=True),
    'in': open_option(),
    'out': open_option(),
})


@dataclass(frozen=True)
class Disabled:
    """The option is switched off."""


@dataclass(frozen=True)
class EnabledDefault:
    """The option is switched on with its built-in settings."""


@dataclass(frozen=True)
class EnabledWithOverrides:
    """The option is switched on; ``overrides`` are merged over its settings."""

    overrides: Mapping[str, Any]


@dataclass(frozen=True)
class RawPassthrough:
    """The value is used as given."""

    value: Any


OptionValue = Union[Disabled, EnabledDefault, EnabledWithOverrides, RawPassthrough]


def defaults() -> Dict[str, Any]:
    """Return a fresh, mutable copy of the default options."""
    return {
        name: spec.default_value()
        for name, spec in OPTION_SCHEMA.items()
        if spec.kind is not OptionKind.OPEN
    }


def deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> Dict[str, Any]:
    """Merge ``override`` over ``base`` recursively, returning a new dict.

    Keys missing from ``override`` keep their ``base`` value; nested
    mappings are merged rather than replaced.
    """
    merged = dict(base)
    for key, item in override.items():
        current = merged.get(key)
        if isinstance(item, Mapping) and isinstance(current, Mapping):
            merged[key] = deep_merge(current, item)
        else:
            merged[key] = copy.deepcopy(item)
    return merged


def is_enabled(option: Any) -> bool:
    """Tell whether a resolved option value switches its feature on."""
    if option is None or option is False:
        return False
    if isinstance(option, Mapping):
        return True
    return bool(option)


def classify(name: str, raw: Any) -> OptionValue:
    """Classify a raw option value against the schema."""
    if name in LEGACY_OPTIONS:
        return RawPassthrough(raw)
    if raw is False:
        return Disabled()

    spec = OPTION_SCHEMA.get(name)
    if spec is None:
        return RawPassthrough(raw)
    if spec.kind is OptionKind.FEATURE:
        if isinstance(raw, Mapping):
            return EnabledWithOverrides(raw)
        return EnabledDefault() if raw else Disabled()
    if spec.tokens:
        return RawPassthrough(list(raw) if isinstance(raw, (list, tuple)) else [raw])
    return RawPassthrough(raw)


def materialize(name: str, option: OptionValue) -> Any:
    """Turn a classified option into its resolved value."""
    if isinstance(option, Disabled):
        return False

    spec = OPTION_SCHEMA.get(name)
    settings = _thaw(spec.settings) if spec is not None else {}
    if isinstance(option, EnabledDefault):
        return settings
    if isinstance(option, EnabledWithOverrides):
        return deep_merge(settings, option.overrides)
    return copy.deepcopy(option.value)


def merge_sources(config: Optional[Mapping[str, Any]], raw: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """Layer caller options over configuration file options, top-level keys only.

    ``None`` values count as absent.
    """
    layered = {}
    for source in (config, raw):
        if not source:
            continue
        if not isinstance(source, Mapping):
            logger.debug(f"Ignoring non-mapping options: {source!r}")
            continue
        for name, item in source.items():
            if item is not None:
                layered[name] = item
    return layered


def enabled_preprocessors(options: Mapping[str, Any]) -> List[str]:
    return [name for name in PREPROCESSORS if is_enabled(options.get(name))]


def check_preprocessors(options: Mapping[str, Any]) -> None:
    """Raise ConfigError when more than one preprocessor is enabled."""
    active = enabled_preprocessors(options)
    if len(active) > 1:
        raise ConfigError(f"multiple preprocessors enabled: {', '.join(sorted(active))}", active)


def _apply_browsers(options: Dict[str, Any], given: Mapping[str, Any]) -> None:
    browsers = options['browsers']

    explicit = given.get('autoprefixer')
    if isinstance(explicit, Mapping) and 'browsers' in explicit:
        logger.debug("Keeping explicit autoprefixer.browsers")
    elif isinstance(options.get('autoprefixer'), dict):
        options['autoprefixer']['browsers'] = list(browsers)

    level = coverage_level(browsers)
    for name in BROWSER_DEPENDENT_OPTIONS:
        if level < FALLBACK_COVERAGE:
            options[name] = False
        elif name not in given:
            options[name] = OPTION_SCHEMA[name].enabled_value()
    logger.debug(f"Browsers {browsers} resolved to coverage {level.name}")


def resolve(raw: Optional[Mapping[str, Any]] = None,
            config: Optional[Mapping[str, Any]] = None,
            base: Optional[Mapping[str, Any]] = None,
            given: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
    """Resolve raw options into a complete options dict.

    Args:
        raw: Options given by the caller
        config: Options read from a configuration file; caller keys win
        base: Previously resolved options to update instead of the defaults.
            Only keys present in ``raw``/``config`` are touched.
        given: Raw options that produced ``base``. Values set there count
            as explicit when ``browsers`` is applied.

    Returns:
        Dict[str, Any]: Resolved options

    Raises:
        ConfigError: If more than one preprocessor is enabled
    """
    options = defaults() if base is None else copy.deepcopy(dict(base))
    layered = merge_sources(config, raw)

    for name, item in layered.items():
        options[name] = materialize(name, classify(name, item))

    # browsers: False resolves to False and leaves the other options alone
    if 'browsers' in layered and isinstance(options['browsers'], list):
        _apply_browsers(options, {**(given or {}), **layered})

    check_preprocessors(options)
    return options


class Options:
    """Resolved options together with the configuration file layer.

    Example:
        >>> Options().extend({'minifier': {'removeAllComments': True}})['minifier']
        {'preserveHacks': True, 'removeAllComments': True}
    """

    def __init__(self, config: Optional[Mapping[str, Any]] = None):
        self.config = copy.deepcopy(dict(config)) if config else {}
        self.options = defaults()
        self.given: Dict[str, Any] = {}

    def extend(self, raw: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """Resolve ``raw`` over the defaults and the configuration file."""
        self.options = resolve(raw, config=self.config)
        self.given = copy.deepcopy(merge_sources(self.config, raw))
        return self.options

    def update(self, partial: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
        """Apply ``partial`` over the current options, leaving other keys alone.

        Values given to earlier calls still count as explicit, so a new
        ``browsers`` list does not replace them.
        """
        self.options = resolve(partial, base=self.options, given=self.given)
        self.given.update(copy.deepcopy(merge_sources(None, partial)))
        return self.options


__all__ = [
    'OptionKind',
    'OptionSpec',
    'OPTION_SCHEMA',
    'Disabled',
    'EnabledDefault',
    'EnabledWithOverrides',
    'RawPassthrough',
    'OptionValue',
    'Options',
    'defaults',
    'deep_merge',
    'is_enabled',
    'classify',
    'materialize',
    'merge_sources',
    'enabled_preprocessors',
    'check_preprocessors',
    'resolve',
]
