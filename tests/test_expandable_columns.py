"""End-to-end scenario: a table column group being expanded.

Mirrors how a table uses the tree: it reads counts and visibility, a tap
toggles a header, the table is notified and reads again.
"""

import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from headertreelib import HeaderNode, count_headers, get_visible_headers
from headertreelib.testing import ListenerRecorder, build_header_tree


def create_scenario():
    """R (expanded) -> [A, B (collapsed) -> [C (hide_when_expanded)]]."""
    c = HeaderNode("C", hide_when_expanded=True)
    b = HeaderNode("B", children=[c])
    a = HeaderNode("A")
    r = HeaderNode("R", children=[a, b], children_expanded=True)
    return r, a, b, c


def test_initial_state():
    r, a, b, c = create_scenario()

    assert r.columns_count == 4
    # The recursion also counts C inside the collapsed B
    assert r.visible_columns_count == 4
    assert [r.visible, a.visible, b.visible, c.visible] == [True, True, True, False]
    assert count_headers(r, visible_only=True) == 3


def test_expanding_b_reveals_c():
    r, a, b, c = create_scenario()
    recorder = ListenerRecorder(r)

    b.toggle_expand()

    assert recorder.count == 1
    assert b.children_expanded
    assert b.visible
    assert c.visible
    # A leaf never counts as expanded, so its hide flag has no effect
    assert not c.children_expanded
    assert r.visible_columns_count == 4
    assert [h.cell for h in get_visible_headers(r)] == ["R", "A", "B", "C"]


def test_hidden_group_header_gives_way_to_children():
    root = build_header_tree({
        'cell': 'Year',
        'children_expanded': True,
        'children': [
            {'cell': 'H1', 'hide_when_expanded': True, 'children': ['Q1', 'Q2']},
            'H2',
        ],
    })
    h1 = root.children[0]

    assert [h.cell for h in get_visible_headers(root)] == ['Year', 'H1', 'H2']

    h1.toggle_expand()

    assert not h1.visible
    assert [h.cell for h in get_visible_headers(root)] == ['Year', 'Q1', 'Q2', 'H2']
    assert h1.visible_columns_count == 2


def test_tap_handler_respects_disable_flag():
    custom = HeaderNode("custom", children=[HeaderNode("x")],
                        disable_default_on_tap_expansion=True)
    default = HeaderNode("default", children=[HeaderNode("y")])

    def on_tap(header):
        if not header.disable_default_on_tap_expansion:
            header.toggle_expand()

    on_tap(custom)
    on_tap(default)

    assert not custom.children_expanded
    assert default.children_expanded
