"""Tests for options resolution."""

import pytest

from ..core.options import (
    OPTION_SCHEMA,
    Disabled,
    EnabledDefault,
    EnabledWithOverrides,
    Options,
    RawPassthrough,
    classify,
    deep_merge,
    defaults,
    is_enabled,
    materialize,
    resolve,
)
from ..utils.error import ConfigError
from ..utils.file import load_config_file


class TestDefaults:
    """Tests for the default option table."""

    def test_creates_options(self):
        """Test a new Options holds non-empty defaults."""
        opts = Options()
        assert opts.options
        assert opts.options['autoprefixer'] == {}

    def test_feature_defaults(self):
        """Test features resolve to settings or False."""
        opts = defaults()
        assert opts['minifier'] == {'preserveHacks': True}
        assert opts['rem'] == {'rootValue': '16px'}
        assert opts['mqpacker'] is False
        assert opts['sourcemaps'] is False
        assert opts['opacity'] is True

    def test_open_options_absent(self):
        """Test options without a default are not present."""
        opts = defaults()
        assert 'browsers' not in opts
        assert 'in' not in opts

    def test_defaults_are_copies(self):
        """Test mutating a result leaves the schema untouched."""
        first = resolve()
        first['minifier']['removeAllComments'] = True
        first['sourcemaps'] = {'map': {}}
        assert resolve()['minifier'] == {'preserveHacks': True}
        assert OPTION_SCHEMA['sourcemaps'].enabled_value() == {'map': {'inline': True}}

    def test_schema_is_immutable(self):
        """Test the schema cannot be modified in place."""
        with pytest.raises(TypeError):
            OPTION_SCHEMA['minifier'] = None
        with pytest.raises(TypeError):
            OPTION_SCHEMA['minifier'].settings['preserveHacks'] = False


class TestExtend:
    """Tests for extending options."""

    def test_extends_values(self):
        """Test mappings are merged into defaults."""
        opts = Options().extend({'autoprefixer': {'browsers': ['last 20 versions']}})
        assert opts['autoprefixer']['browsers'] == ['last 20 versions']

        opts = Options().extend({'rem': {'rootValue': '10px', 'replace': True}})
        assert opts['rem'] == {'rootValue': '10px', 'replace': True}

    def test_extends_values_when_true(self):
        """Test True expands to the default settings."""
        opts = Options().extend({'autoprefixer': True, 'minifier': True, 'mqpacker': True})
        assert opts['autoprefixer'] == {}
        assert opts['minifier']['preserveHacks'] is True
        assert opts['mqpacker'] == {}

    def test_features_never_true(self):
        """Test no feature option resolves to True."""
        raw = {name: True for name in ('autoprefixer', 'minifier', 'mqpacker', 'sourcemaps', 'rem', 'sass')}
        opts = resolve(raw)
        for name in raw:
            assert isinstance(opts[name], dict)

    def test_extends_values_with_object(self):
        """Test unspecified sub-keys keep their default."""
        opts = Options().extend({'minifier': {'removeAllComments': True}})
        assert opts['minifier'] == {'removeAllComments': True, 'preserveHacks': True}

    def test_object_overrides_default_value(self):
        """Test a sub-key equal to a default key overrides it."""
        opts = Options().extend({'minifier': {'preserveHacks': False, 'removeAllComments': True}})
        assert opts['minifier']['removeAllComments'] is True
        assert opts['minifier']['preserveHacks'] is False

    def test_nested_mappings_merge(self):
        """Test nested settings are merged recursively."""
        opts = resolve({'sourcemaps': {'map': {'annotation': False}, 'from': 'in.css'}})
        assert opts['sourcemaps'] == {'map': {'inline': True, 'annotation': False}, 'from': 'in.css'}

    def test_false_disables(self):
        """Test False disables any option."""
        opts = resolve({'autoprefixer': False, 'opacity': False, 'custom': False})
        assert opts['autoprefixer'] is False
        assert opts['opacity'] is False
        assert opts['custom'] is False

    def test_passthrough_values(self):
        """Test unknown keys and plain values are kept as given."""
        opts = resolve({'custom': [1, 2], 'in': 'input.css', 'vmin': 'weird'})
        assert opts['custom'] == [1, 2]
        assert opts['in'] == 'input.css'
        assert opts['vmin'] == 'weird'

    def test_truthy_scalars_enable_features(self):
        """Test any truthy value switches a feature on with its settings."""
        opts = resolve({'minifier': 1, 'mqpacker': 'yes', 'autoprefixer': ['x']})
        assert opts['minifier'] == {'preserveHacks': True}
        assert opts['mqpacker'] == {}
        assert opts['autoprefixer'] == {}

    def test_falsy_scalars_disable_features(self):
        """Test any falsy value switches a feature off."""
        opts = resolve({'sass': 0, 'minifier': '', 'rem': []})
        assert opts['sass'] is False
        assert opts['minifier'] is False
        assert opts['rem'] is False

    def test_truthy_autoprefixer_receives_browsers(self):
        """Test a scalar autoprefixer still gets the browsers list."""
        opts = resolve({'autoprefixer': 1, 'browsers': ['ie 9']})
        assert opts['autoprefixer'] == {'browsers': ['ie 9']}

    def test_none_counts_as_absent(self):
        """Test None leaves the default in place."""
        opts = resolve({'minifier': None})
        assert opts['minifier'] == {'preserveHacks': True}

    def test_raw_input_not_mutated(self):
        """Test resolution copies caller values."""
        raw = {'minifier': {'removeAllComments': True}, 'browsers': ['ie 9']}
        opts = resolve(raw)
        opts['minifier']['extra'] = 1
        opts['autoprefixer']['browsers'].append('ie 10')
        assert raw == {'minifier': {'removeAllComments': True}, 'browsers': ['ie 9']}

    def test_non_mapping_input(self):
        """Test boolean input is treated as no options."""
        assert resolve(True) == defaults()

    def test_resolving_twice(self):
        """Test resolving a resolved mapping gives the same result."""
        once = resolve({'minifier': True, 'mqpacker': True, 'browsers': ['ie 9']})
        assert resolve(once) == once

    def test_does_not_extend_legacy_next(self):
        """Test legacy grouping keys are not expanded."""
        opts = Options().extend({'next': True})
        assert opts['next'] is True

        opts = Options().extend({'fallbacks': {'autoprefixer': True}})
        assert opts['fallbacks'] == {'autoprefixer': True}
        assert 'variables' not in opts['fallbacks']


class TestConfigFile:
    """Tests for options coming from a configuration file."""

    def test_file_applies_to_omitted_keys(self):
        """Test file values are used when the caller is silent."""
        opts = Options(config={'minifier': False}).extend({})
        assert opts['minifier'] is False

    def test_caller_wins_over_file(self):
        """Test caller values take precedence."""
        opts = Options(config={'minifier': False}).extend({'minifier': True})
        assert opts['minifier'] == {'preserveHacks': True}

        opts = Options(config={'minifier': {'removeAllComments': True}}).extend({'minifier': {'preserveHacks': False}})
        assert opts['minifier'] == {'preserveHacks': False}

    def test_file_values_are_resolved(self):
        """Test file values follow the same rules as caller values."""
        opts = Options(config={'mqpacker': True, 'browsers': 'ie 9'}).extend()
        assert opts['mqpacker'] == {}
        assert opts['autoprefixer'] == {'browsers': ['ie 9']}

    def test_deleting_file_keeps_resolved_options(self, rc_file):
        """Test resolved options do not depend on the file afterwards."""
        path = rc_file({'minifier': False, 'rem': {'rootValue': '10px'}})
        resolver = Options(config=load_config_file(str(path)))
        opts = resolver.extend({'rem': True})
        path.unlink()

        assert opts['minifier'] is False
        assert opts['rem'] == {'rootValue': '16px'}
        assert resolver.extend({})['rem'] == {'rootValue': '10px'}


class TestBrowsers:
    """Tests for the browsers shorthand."""

    def test_overrides_multiple_options(self):
        """Test modern browsers disable fallbacks."""
        opts = Options().extend({
            'rem': True,
            'opacity': True,
            'pseudoElements': True,
            'browsers': ['ie 9'],
        })
        assert opts['rem'] is False
        assert opts['opacity'] is False
        assert opts['pseudoElements'] is False

    def test_copies_browsers_only_if_undefined(self):
        """Test autoprefixer.browsers is only filled when not set."""
        opts = Options().extend({'browsers': ['ie 9'], 'autoprefixer': False})
        assert opts['autoprefixer'] is False

        opts = Options().extend({'browsers': ['ie 9'], 'autoprefixer': True})
        assert opts['autoprefixer'] == {'browsers': ['ie 9']}

        opts = Options().extend({'browsers': ['ie 9'], 'autoprefixer': {'browsers': ['ie 8']}})
        assert opts['autoprefixer']['browsers'] == ['ie 8']

    def test_copies_browsers_into_default_autoprefixer(self):
        """Test the default autoprefixer receives the browsers."""
        opts = Options().extend({'browsers': ['last 2 versions']})
        assert opts['autoprefixer'] == {'browsers': ['last 2 versions']}

    def test_broad_browsers_keep_fallbacks(self):
        """Test a broad browser list keeps fallbacks enabled."""
        opts = Options().extend({'browsers': ['last 99 versions']})
        assert opts['rem'] == {'rootValue': '16px'}
        assert opts['opacity'] is True
        assert opts['pseudoElements'] is True

    def test_broad_browsers_keep_explicit_values(self):
        """Test explicit fallback settings stand with a broad browser list."""
        opts = Options().extend({
            'browsers': ['ie 8'],
            'rem': {'rootValue': '20px'},
            'opacity': False,
        })
        assert opts['rem'] == {'rootValue': '20px'}
        assert opts['opacity'] is False
        assert opts['pseudoElements'] is True

    def test_autoprefixer_browsers_alone(self):
        """Test autoprefixer.browsers does not trigger the shorthand."""
        opts = Options().extend({'autoprefixer': {'browsers': ['ie 9']}, 'rem': {'rootValue': '20px'}})
        assert opts['rem'] == {'rootValue': '20px'}

    def test_uses_top_level_browsers(self):
        """Test the top-level list decides the fallbacks."""
        opts = Options().extend({'autoprefixer': {'browsers': ['ie 8']}, 'browsers': ['ie 9']})
        assert opts['rem'] is False
        assert opts['autoprefixer']['browsers'] == ['ie 8']

    def test_explicit_autoprefixer_browsers_wins(self):
        """Test an explicit autoprefixer list is not replaced."""
        opts = Options().extend({'autoprefixer': {'browsers': ['ie 9']}, 'browsers': ['ie 8']})
        assert opts['autoprefixer']['browsers'] == ['ie 9']
        assert opts['rem'] == {'rootValue': '16px'}

    def test_converts_browsers_to_list(self):
        """Test a single browser query becomes a list."""
        opts = Options().extend({'browsers': 'ie 9'})
        assert opts['browsers'] == ['ie 9']
        assert opts['autoprefixer']['browsers'] == ['ie 9']

    def test_empty_browsers_disable_fallbacks(self):
        """Test an empty list reaches no legacy browser."""
        opts = Options().extend({'browsers': []})
        assert opts['autoprefixer'] == {'browsers': []}
        assert opts['rem'] is False
        assert opts['opacity'] is False
        assert opts['pseudoElements'] is False

    def test_disabled_browsers(self):
        """Test browsers set to False leaves the other options alone."""
        opts = Options().extend({'browsers': False})
        assert opts['browsers'] is False
        assert opts['autoprefixer'] == {}
        assert opts['rem'] == {'rootValue': '16px'}


class TestPreprocessors:
    """Tests for preprocessor exclusivity."""

    def test_errors_with_multiple_preprocessors(self):
        """Test two preprocessors are rejected."""
        with pytest.raises(ConfigError, match='multiple preprocessors enabled') as excinfo:
            Options().extend({'sass': True, 'less': True})
        assert set(excinfo.value.options) == {'sass', 'less'}

    def test_single_preprocessor(self):
        """Test one preprocessor is accepted."""
        opts = Options().extend({'sass': True})
        assert opts['sass'] == {}
        assert opts['less'] is False

    def test_preprocessors_from_file_and_caller(self):
        """Test the check covers both sources."""
        with pytest.raises(ConfigError):
            Options(config={'stylus': True}).extend({'less': {}})

        opts = Options(config={'stylus': True}).extend({'stylus': False, 'less': True})
        assert opts['less'] == {}


class TestUpdate:
    """Tests for incremental re-resolution."""

    def test_extends_only_new_options(self):
        """Test keys not given again keep their value."""
        resolver = Options()
        resolver.extend({'rem': {'rootValue': '20px'}})
        opts = resolver.update({'autoprefixer': False})
        assert opts['rem'] == {'rootValue': '20px'}
        assert opts['autoprefixer'] is False

    def test_update_expands_features(self):
        """Test updates follow the same rules."""
        resolver = Options()
        resolver.extend()
        opts = resolver.update({'sourcemaps': True})
        assert opts['sourcemaps'] == {'map': {'inline': True}}

    def test_update_checks_preprocessors(self):
        """Test an update cannot enable a second preprocessor."""
        resolver = Options()
        resolver.extend({'sass': True})
        with pytest.raises(ConfigError):
            resolver.update({'less': True})
        assert resolver.update({'sass': False, 'less': True})['less'] == {}

    def test_update_keeps_earlier_fallback_values(self):
        """Test values from an earlier call stand with a broad browser list."""
        resolver = Options()
        resolver.extend({'rem': {'rootValue': '20px'}})
        opts = resolver.update({'browsers': ['last 99 versions']})
        assert opts['rem'] == {'rootValue': '20px'}
        assert opts['opacity'] is True

    def test_update_keeps_earlier_autoprefixer_browsers(self):
        """Test a new browsers list does not replace an explicit autoprefixer list."""
        resolver = Options()
        resolver.extend({'autoprefixer': {'browsers': ['ie 8']}})
        opts = resolver.update({'browsers': ['ie 9']})
        assert opts['autoprefixer']['browsers'] == ['ie 8']
        assert opts['rem'] is False

    def test_update_refreshes_copied_browsers(self):
        """Test a list copied from browsers follows the next browsers list."""
        resolver = Options()
        resolver.extend({'browsers': ['ie 9']})
        opts = resolver.update({'browsers': ['ie 8']})
        assert opts['autoprefixer'] == {'browsers': ['ie 8']}
        assert opts['rem'] == {'rootValue': '16px'}

    def test_failed_update_keeps_given_options(self):
        """Test a rejected update does not change the options."""
        resolver = Options()
        resolver.extend({'sass': True})
        with pytest.raises(ConfigError):
            resolver.update({'less': True})
        assert 'less' not in resolver.given
        assert resolver.options['less'] is False


class TestVariants:
    """Tests for classification helpers."""

    def test_classify(self):
        """Test raw values map to the right variant."""
        assert classify('minifier', True) == EnabledDefault()
        assert classify('minifier', False) == Disabled()
        assert classify('minifier', {'a': 1}) == EnabledWithOverrides({'a': 1})
        assert classify('minifier', 'yes') == EnabledDefault()
        assert classify('minifier', 0) == Disabled()
        assert classify('browsers', 'ie 9') == RawPassthrough(['ie 9'])
        assert classify('next', True) == RawPassthrough(True)
        assert classify('opacity', True) == RawPassthrough(True)

    def test_materialize(self):
        """Test variants turn into resolved values."""
        assert materialize('minifier', Disabled()) is False
        assert materialize('minifier', EnabledDefault()) == {'preserveHacks': True}
        assert materialize('rem', EnabledWithOverrides({'replace': True})) == {'rootValue': '16px', 'replace': True}
        assert materialize('custom', RawPassthrough('x')) == 'x'

    def test_deep_merge(self):
        """Test deep merge keeps and overrides keys."""
        base = {'a': {'b': 1, 'c': 2}, 'd': 3}
        merged = deep_merge(base, {'a': {'c': 4}, 'e': 5})
        assert merged == {'a': {'b': 1, 'c': 4}, 'd': 3, 'e': 5}
        assert base == {'a': {'b': 1, 'c': 2}, 'd': 3}

    @pytest.mark.parametrize('value,expected', [
        ({}, True),
        (True, True),
        ('x', True),
        (False, False),
        (None, False),
        ('', False),
    ])
    def test_is_enabled(self, value, expected):
        """Test enabled detection treats mappings as on."""
        assert is_enabled(value) is expected
