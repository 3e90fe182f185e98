"""Tests for the host plugin adapter lifecycle."""
import json
import logging
import sys
from pathlib import Path as _TestPath

ROOT = _TestPath(__file__).resolve().parents[1]
SRC_PATH = ROOT / 'src'
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

import pytest

from chunk_split_mcp.classification import InvalidPatternError
from chunk_split_mcp.plugin import ChunkSplitPlugin


@pytest.fixture
def project(tmp_path):
    (tmp_path / 'package.json').write_text(json.dumps({
        'dependencies': {'vue': '^3.4.0', 'echarts': '^5.4.0', 'axios': '^1.6.0'},
    }))
    return tmp_path


def test_conservative_build_end_to_end(project):
    plugin = ChunkSplitPlugin({'strategy': 'conservative'})

    plan = plugin.config_resolved(str(project), [], command='build')

    assert [matcher.name for matcher in plan] == ['vue', 'echarts']
    assert plugin.manual_chunks('/p/node_modules/axios/index.js') == 'vendor'
    assert plugin.manual_chunks('/p/node_modules/@vue/runtime-dom/dist/index.js') == 'vue'
    assert plugin.manual_chunks('/p/src/App.vue') is None


def test_modules_go_to_vendor_before_config_is_resolved():
    plugin = ChunkSplitPlugin()

    assert len(plugin.plan) == 0
    assert plugin.manual_chunks('/p/node_modules/vue/index.js') == 'vendor'


def test_config_hook_exposes_live_manual_chunks(project):
    plugin = ChunkSplitPlugin()
    output = plugin.config({})['build']['rollupOptions']['output']

    plugin.config_resolved(str(project), [])

    assert output['manualChunks']('/p/node_modules/echarts/core.js') == 'echarts'


def test_config_hook_honors_override():
    user_config = {'build': {'rollupOptions': {'output': {'entryFileNames': 'entry.js'}}}}

    kept = ChunkSplitPlugin().config(user_config)['build']['rollupOptions']['output']
    replaced = ChunkSplitPlugin({'override': True}).config(user_config)['build']['rollupOptions']['output']

    assert kept['entryFileNames'] == 'entry.js'
    assert replaced['entryFileNames'] == 'js/[name]-[hash].js'


def test_rebuild_replaces_plan_without_mutating_previous(project, tmp_path_factory):
    plugin = ChunkSplitPlugin({'strategy': 'aggressive'})
    first = plugin.config_resolved(str(project), [])
    first_names = [matcher.name for matcher in first]

    other = tmp_path_factory.mktemp('other')
    (other / 'package.json').write_text(json.dumps({'dependencies': {'three': '^0.160.0'}}))
    second = plugin.config_resolved(str(other), [])

    assert second is not first
    assert [matcher.name for matcher in first] == first_names
    assert [matcher.name for matcher in second] == ['three']
    assert plugin.manual_chunks('/p/node_modules/vue/index.js') == 'vendor'


def test_framework_plugins_add_hint_groups(tmp_path):
    plugin = ChunkSplitPlugin()

    plugin.config_resolved(str(tmp_path), ['vite:vue', 'unplugin-vue-components'])

    assert plugin.manual_chunks('/p/node_modules/@vue/runtime-core/index.js') == 'vue'
    assert plugin.manual_chunks('/p/node_modules/@vueuse/core/index.mjs') == 'vueuse'


def test_global_flag_regex_group_classifies_modules(tmp_path):
    plugin = ChunkSplitPlugin({'groups': {'lodash': ['/node_modules\\/lodash(?!-)/g']}})

    plugin.config_resolved(str(tmp_path), [])

    assert plugin.manual_chunks('/p/node_modules/lodash/map.js') == 'lodash'
    assert plugin.manual_chunks('/p/node_modules/lodash-es/map.js') == 'vendor'


def test_unreadable_manifest_keeps_custom_groups(tmp_path):
    (tmp_path / 'package.json').write_text('{broken')
    plugin = ChunkSplitPlugin({'groups': {'charts': ['echarts', 'd3']}})

    plan = plugin.config_resolved(str(tmp_path), [])

    assert [matcher.name for matcher in plan] == ['charts']
    assert plugin.manual_chunks('/p/node_modules/d3/src/index.js') == 'charts'
    assert plugin.manual_chunks('/p/node_modules/react/index.js') == 'vendor'


def test_build_command_logs_summary(project, caplog):
    caplog.set_level(logging.INFO, logger='chunk_split_mcp.plugin')

    ChunkSplitPlugin({'strategy': 'conservative'}).config_resolved(str(project), [], command='build')

    assert 'Conservative (minimal splitting)' in caplog.text
    assert 'Detected 2 chunk groups' in caplog.text


def test_serve_command_does_not_log_summary(project, caplog):
    caplog.set_level(logging.INFO, logger='chunk_split_mcp.plugin')

    ChunkSplitPlugin().config_resolved(str(project), [], command='serve')

    assert 'Detected' not in caplog.text


def test_invalid_custom_pattern_fails_at_configuration_time():
    with pytest.raises(InvalidPatternError, match='charts'):
        ChunkSplitPlugin({'groups': {'charts': ['/(unclosed/']}})
