"""Tests for the helpers in headertreelib.testing."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from headertreelib import HeaderNode
from headertreelib.testing import ListenerRecorder, build_header_tree


def test_build_from_string():
    node = build_header_tree('solo')
    assert isinstance(node, HeaderNode)
    assert node.cell == 'solo'
    assert node.children is None


def test_build_nested_tree():
    root = build_header_tree({
        'cell': 'root',
        'width': 90,
        'children': ['x', {'cell': 'y', 'hide_when_expanded': True, 'children': []}],
    })

    assert root.width == 90
    assert [c.cell for c in root.children] == ['x', 'y']
    assert root.children[1].hide_when_expanded
    assert root.children[1].children == []
    assert root.children[1].parent is root


def test_build_rejects_unknown_keys():
    with pytest.raises(TypeError):
        build_header_tree({'cell': 'bad', 'colour': 'red'})


def test_recorder_attach_and_detach():
    first = HeaderNode('first', children=[HeaderNode('c')])
    second = HeaderNode('second', children=[HeaderNode('d')])
    recorder = ListenerRecorder(first)

    first.toggle_expand()
    assert recorder.count == 1
    assert recorder.notified

    recorder.attach(second)
    assert not first.has_listeners
    second.toggle_expand()
    first.toggle_expand()
    assert recorder.count == 2

    recorder.detach()
    recorder.reset()
    second.toggle_expand()
    assert recorder.count == 0
    assert not recorder.notified
