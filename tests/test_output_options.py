"""Tests for output file naming and output option merging."""
import sys
from pathlib import Path as _TestPath
from types import SimpleNamespace

ROOT = _TestPath(__file__).resolve().parents[1]
SRC_PATH = ROOT / 'src'
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

import pytest

from chunk_split_mcp.output_options import asset_file_name, build_output_options


def _manual_chunks(module_id):
    return None


@pytest.mark.parametrize('name, expected', [
    ('style.css', 'css/[name]-[hash][extname]'),
    ('THEME.CSS', 'css/[name]-[hash][extname]'),
    ('logo.png', 'img/[name]-[hash][extname]'),
    ('hero.avif', 'img/[name]-[hash][extname]'),
    ('icons.svg', 'img/[name]-[hash][extname]'),
    ('inter.woff2', 'fonts/[name]-[hash][extname]'),
    ('data.json', 'assets/[name]-[hash][extname]'),
    ('LICENSE', 'assets/[name]-[hash][extname]'),
    (None, 'assets/[name]-[hash][extname]'),
])
def test_asset_file_name(name, expected):
    assert asset_file_name(name) == expected


def _output(fragment):
    return fragment['build']['rollupOptions']['output']


def test_injects_all_fields_without_user_output():
    output = _output(build_output_options({}, _manual_chunks))

    assert output['entryFileNames'] == 'js/[name]-[hash].js'
    assert output['chunkFileNames'] == 'js/[name]-[hash].js'
    assert output['manualChunks'] is _manual_chunks
    assert output['assetFileNames']({'name': 'a.css'}) == 'css/[name]-[hash][extname]'
    assert output['assetFileNames'](SimpleNamespace(name='a.ttf')) == 'fonts/[name]-[hash][extname]'


def test_fills_only_missing_fields_by_default():
    user_config = {'build': {'rollupOptions': {'output': {
        'entryFileNames': 'entry/[name].js',
        'format': 'es',
    }}}}

    output = _output(build_output_options(user_config, _manual_chunks))

    assert output['entryFileNames'] == 'entry/[name].js'
    assert output['format'] == 'es'
    assert output['chunkFileNames'] == 'js/[name]-[hash].js'
    assert output['manualChunks'] is _manual_chunks


def test_override_replaces_user_output():
    user_config = {'build': {'rollupOptions': {'output': {'entryFileNames': 'entry/[name].js'}}}}

    output = _output(build_output_options(user_config, _manual_chunks, override=True))

    assert output['entryFileNames'] == 'js/[name]-[hash].js'
    assert 'format' not in output


def test_list_of_outputs_is_replaced():
    user_config = {'build': {'rollupOptions': {'output': [{'format': 'es'}, {'format': 'cjs'}]}}}

    output = _output(build_output_options(user_config, _manual_chunks))

    assert isinstance(output, dict)
    assert output['manualChunks'] is _manual_chunks


def test_user_config_is_not_mutated():
    user_output = {'format': 'es'}
    build_output_options({'build': {'rollupOptions': {'output': user_output}}}, _manual_chunks)

    assert user_output == {'format': 'es'}
