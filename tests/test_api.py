"""Tests for the high-level functional API."""

import sys
import unittest
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from headertreelib import (
    AddressLookupError,
    DataRequirement,
    HeaderNode,
    HeaderRow,
    collapse_all,
    collect_header_data,
    count_headers,
    expand_all,
    find_by_address,
    find_headers,
    get_header_addresses,
    get_leaf_headers,
    get_tree_stats,
    get_visible_headers,
    reveal,
    traverse_headers,
)
from headertreelib.testing import ListenerRecorder, build_header_tree


def create_test_tree():
    """Create a header tree with widths.

    Structure:
    root (expanded)
    ├── a (collapsed, width 80)
    │   └── a1 (width 40)
    └── b (expanded)
        └── b1 (width 200)
    """
    return build_header_tree({
        'cell': 'root',
        'children_expanded': True,
        'children': [
            {'cell': 'a', 'width': 80, 'children': [{'cell': 'a1', 'width': 40}]},
            {'cell': 'b', 'children_expanded': True,
             'children': [{'cell': 'b1', 'width': 200}]},
        ],
    })


class TestTraversal(unittest.TestCase):

    def setUp(self):
        self.root = create_test_tree()

    def test_traverse_headers_defaults_to_column_order(self):
        result = [h.cell for h in traverse_headers(self.root)]
        self.assertEqual(result, ['root', 'a', 'a1', 'b', 'b1'])

    def test_traverse_with_string_strategy(self):
        result = [h.cell for h in traverse_headers(self.root, strategy='bfs')]
        self.assertEqual(result, ['root', 'a', 'b', 'a1', 'b1'])

    def test_count_headers(self):
        self.assertEqual(count_headers(self.root), 5)
        self.assertEqual(count_headers(self.root, max_depth=1), 3)
        self.assertEqual(count_headers(self.root, visible_only=True), 4)

    def test_find_headers(self):
        wide = [h.cell for h in find_headers(self.root, lambda h: (h.width or 0) > 50)]
        self.assertEqual(wide, ['a', 'b1'])

    def test_leaf_headers(self):
        self.assertEqual([h.cell for h in get_leaf_headers(self.root)], ['a1', 'b1'])

    def test_visible_headers(self):
        self.assertEqual([h.cell for h in get_visible_headers(self.root)],
                         ['root', 'a', 'b', 'b1'])

    def test_header_addresses(self):
        self.assertEqual(list(get_header_addresses(self.root)),
                         [[-1], [-1, 0], [-1, 0, 0], [-1, 1], [-1, 1, 0]])

    def test_collect_header_data(self):
        data = dict(
            (node.cell, span)
            for node, span in collect_header_data(self.root, visible_only=True)
        )
        self.assertEqual(set(data), {'root', 'a', 'b', 'b1'})
        self.assertEqual(data['a']['columns'], 2)
        self.assertEqual(data['b1']['width'], 200)

    def test_collect_custom_data(self):
        result = list(collect_header_data(
            self.root,
            data_requirement=DataRequirement.CUSTOM,
            custom_collector=lambda node, depth: depth,
            min_depth=2,
        ))
        self.assertEqual([(n.cell, d) for n, d in result], [('a1', 2), ('b1', 2)])

    def test_unknown_option_rejected(self):
        with self.assertRaises(TypeError):
            list(collect_header_data(self.root, colour='red'))


class TestAddressLookup(unittest.TestCase):

    def test_round_trip_from_node(self):
        root = create_test_tree()
        for header in traverse_headers(root):
            self.assertIs(find_by_address(root, header.address), header)

    def test_lookup_from_subtree_header(self):
        root = create_test_tree()
        a, b = root.children
        a1 = a.children[0]
        self.assertIs(find_by_address(a, a1.address), a1)
        self.assertIs(find_by_address(a1, b.children[0].address), b.children[0])

    def test_lookup_from_nested_header_in_row(self):
        row = HeaderRow([
            HeaderNode("h0"),
            HeaderNode("h1", children=[HeaderNode("h1a"), HeaderNode("h1b")]),
        ])
        h1a, h1b = row[1].children
        self.assertIs(find_by_address(h1a, h1b.address), h1b)

    def test_lookup_from_row(self):
        row = HeaderRow([
            HeaderNode("h0"),
            HeaderNode("h1", children=[HeaderNode("h1a")]),
        ])
        self.assertIs(find_by_address(row, [1, 0]), row[1].children[0])
        self.assertIs(find_by_address(row, [0]), row[0])

    def test_out_of_range_step(self):
        root = create_test_tree()
        with self.assertRaises(AddressLookupError) as ctx:
            find_by_address(root, [-1, 5])
        self.assertEqual(ctx.exception.position, 1)
        self.assertEqual(ctx.exception.address, [-1, 5])

    def test_step_into_leaf(self):
        root = create_test_tree()
        with self.assertRaises(AddressLookupError) as ctx:
            find_by_address(root, [-1, 1, 0, 0])
        self.assertEqual(ctx.exception.position, 3)

    def test_wrong_root_index(self):
        with self.assertRaises(AddressLookupError):
            find_by_address(create_test_tree(), [0])

    def test_empty_address(self):
        with self.assertRaises(AddressLookupError):
            find_by_address(create_test_tree(), [])

    def test_negative_index_is_not_wrapped(self):
        row = HeaderRow([HeaderNode("h0")])
        with self.assertRaises(LookupError):
            find_by_address(row, [-1])


class TestExpansionHelpers(unittest.TestCase):

    def test_expand_all(self):
        root = create_test_tree()
        expand_all(root)
        for header in traverse_headers(root):
            self.assertEqual(header.children_expanded, not header.is_leaf)
            self.assertTrue(header.visible)

    def test_collapse_all(self):
        root = create_test_tree()
        recorder = ListenerRecorder(root)
        collapse_all(root)
        self.assertFalse(any(h.children_expanded for h in traverse_headers(root)))
        self.assertTrue(recorder.notified)

    def test_reveal(self):
        root = build_header_tree({
            'cell': 'root',
            'children': [{'cell': 'mid', 'children': ['deep']}],
        })
        deep = root.children[0].children[0]
        self.assertFalse(deep.visible)

        reveal(deep)

        self.assertTrue(deep.visible)
        self.assertTrue(root.children_expanded)
        self.assertTrue(root.children[0].children_expanded)

    def test_reveal_root_is_noop(self):
        root = create_test_tree()
        recorder = ListenerRecorder(root)
        reveal(root)
        self.assertEqual(recorder.count, 0)


def test_tree_stats():
    stats = get_tree_stats(create_test_tree())

    assert stats['total_headers'] == 5
    assert stats['leaf_headers'] == 2
    assert stats['expanded_headers'] == 2
    assert stats['shown_headers'] == 4
    assert stats['max_depth'] == 2
    assert stats['depths'] == {0: 1, 1: 2, 2: 2}
    assert stats['columns'] == 5
    assert stats['visible_columns'] == 5
