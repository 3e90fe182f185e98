"""Tests for package pattern parsing and boundary-safe compilation."""
import re
import sys
from pathlib import Path as _TestPath

ROOT = _TestPath(__file__).resolve().parents[2]
SRC_PATH = ROOT / 'src'
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

import pytest

from chunk_split_mcp.classification.patterns import (
    InvalidPatternError,
    LiteralPattern,
    RegexPattern,
    compile_pattern,
    order_patterns,
    parse_pattern,
)


def _matches(name, path):
    return compile_pattern(LiteralPattern(name))(path)


class TestLiteralBoundaries:
    """Literal package names must not claim packages that share a prefix."""

    def test_matches_package_directory(self):
        assert _matches('react', '/proj/node_modules/react/index.js')
        assert _matches('react', '/proj/node_modules/react')

    def test_does_not_match_prefix_sharing_packages(self):
        assert not _matches('react', '/proj/node_modules/react-dom/index.js')
        assert not _matches('react', '/proj/node_modules/react-router/dist/index.js')
        assert not _matches('react', '/proj/node_modules/reactive/index.js')

    def test_matches_pnpm_store_with_version_suffix(self):
        assert _matches('react', '/proj/node_modules/.pnpm/react@18.2.0/node_modules/react/index.js')
        assert _matches('react', '/proj/node_modules/.pnpm/react@18.2.0')
        assert not _matches('react', '/proj/node_modules/.pnpm/react-dom@18.2.0')

    def test_unscoped_literal_matches_under_any_scope(self):
        assert _matches('vue-router', '/proj/node_modules/@acme/vue-router/index.js')

    def test_scoped_literal_is_not_double_prefixed(self):
        assert _matches('@reduxjs/toolkit', '/proj/node_modules/@reduxjs/toolkit/dist/index.js')
        assert not _matches('@reduxjs/toolkit', '/proj/node_modules/@other/@reduxjs/toolkit/x.js')

    def test_scoped_package_boundary(self):
        assert _matches('@ant-design/icons', '/proj/node_modules/@ant-design/icons/lib/index.js')
        assert not _matches('@ant-design/icons', '/proj/node_modules/@ant-design/icons-svg/lib/index.js')

    def test_scope_prefix_matches_plain_and_nested_store_paths(self):
        assert _matches('@vue/', '/proj/node_modules/@vue/reactivity/dist/index.js')
        assert _matches(
            '@vue/',
            '/proj/node_modules/.pnpm/@vue+reactivity@3.2.0/node_modules/@vue/reactivity/dist/index.js',
        )
        assert not _matches('@vue/', '/proj/node_modules/vue/dist/vue.js')

    def test_special_characters_are_escaped(self):
        assert _matches('chart.js', '/proj/node_modules/chart.js/dist/chart.umd.js')
        assert not _matches('chart.js', '/proj/node_modules/chartXjs/index.js')

    def test_matching_is_case_insensitive(self):
        assert _matches('react', '/PROJ/NODE_MODULES/React/index.js')

    def test_requires_node_modules_segment(self):
        assert not _matches('react', '/proj/src/react/index.js')


class TestParsePattern:

    def test_plain_string_is_literal(self):
        assert parse_pattern('echarts') == LiteralPattern('echarts')

    def test_compiled_expression_is_regex(self):
        expression = re.compile(r'node_modules/lodash(?!-)')
        pattern = parse_pattern(expression)

        assert isinstance(pattern, RegexPattern)
        assert pattern.expression is expression

    def test_slash_delimited_string_is_regex(self):
        pattern = parse_pattern('/node_modules\\/lodash(?!-)/i')

        assert isinstance(pattern, RegexPattern)
        assert pattern.expression.flags & re.IGNORECASE
        assert pattern.describe() == '/node_modules\\/lodash(?!-)/i'

    def test_regex_uses_search_semantics(self):
        test = compile_pattern(parse_pattern('/node_modules\\/lodash(?!-)/'))

        assert test('/proj/node_modules/lodash/map.js')
        assert not test('/proj/node_modules/lodash-es/map.js')

    def test_invalid_regex_names_the_group(self):
        with pytest.raises(InvalidPatternError) as excinfo:
            parse_pattern('/([a-z/', group='charts')

        assert excinfo.value.group == 'charts'
        assert "chunk group 'charts'" in str(excinfo.value)

    def test_global_and_unicode_flags_are_ignored(self):
        pattern = parse_pattern('/node_modules\\/lodash(?!-)/gu', group='lodash')

        assert isinstance(pattern, RegexPattern)
        assert compile_pattern(pattern)('/p/node_modules/lodash/map.js')
        assert pattern.describe() == '/node_modules\\/lodash(?!-)/'

    @pytest.mark.parametrize('value', ['/lodash/q', '/lodash/y', '/lodash/gq'])
    def test_unknown_regex_flags_are_rejected(self, value):
        with pytest.raises(InvalidPatternError) as excinfo:
            parse_pattern(value, group='lodash')

        assert excinfo.value.group == 'lodash'

    def test_unsupported_type_is_rejected(self):
        with pytest.raises(InvalidPatternError):
            parse_pattern(42, group='numbers')

    def test_empty_string_is_rejected(self):
        with pytest.raises(InvalidPatternError):
            parse_pattern('   ', group='blank')


def test_order_patterns_prefers_longer_literals_and_puts_regexes_last():
    regex = RegexPattern(re.compile('three'))
    ordered = order_patterns([LiteralPattern('d3'), regex, LiteralPattern('echarts'), LiteralPattern('zr')])

    assert ordered == [LiteralPattern('echarts'), LiteralPattern('d3'), LiteralPattern('zr'), regex]
