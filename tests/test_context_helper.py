"""Tests for ContextHelper access to the lifespan context."""
import sys
from pathlib import Path as _TestPath
from types import SimpleNamespace

ROOT = _TestPath(__file__).resolve().parents[1]
SRC_PATH = ROOT / 'src'
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from chunk_split_mcp.plugin import ChunkSplitPlugin
from chunk_split_mcp.server import ChunkSplitContext
from chunk_split_mcp.utils import ContextHelper


def _helper(state):
    return ContextHelper(SimpleNamespace(request_context=SimpleNamespace(lifespan_context=state)))


def test_fresh_context_always_carries_a_plugin():
    helper = _helper(ChunkSplitContext())

    assert isinstance(helper.plugin, ChunkSplitPlugin)
    assert helper.project_root == ""
    assert helper.plugin_names == ()


def test_contexts_do_not_share_plugins():
    assert _helper(ChunkSplitContext()).plugin is not _helper(ChunkSplitContext()).plugin


def test_update_plugin_replaces_instance():
    state = ChunkSplitContext()
    helper = _helper(state)
    replacement = ChunkSplitPlugin({'strategy': 'aggressive'})

    helper.update_plugin(replacement)

    assert helper.plugin is replacement
    assert state.plugin is replacement
