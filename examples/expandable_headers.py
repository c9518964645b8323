#!/usr/bin/env python3
"""
Expandable column headers example.

This example demonstrates:
- Building a nested header tree
- Reacting to change notifications
- Reading visibility and addresses after a toggle
"""

import logging
import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from headertreelib import HeaderNode, HeaderRow, get_visible_headers


def print_layout(row: HeaderRow) -> None:
    """Print what a table would draw for the current state."""
    print(f"{row.columns_count} columns in total")
    for header in row:
        for shown in get_visible_headers(header):
            indent = "  " * len(shown.address)
            print(f"{indent}{shown.cell} {shown.address}")
    print("-" * 50)


def main():
    """Toggle a half-year group and watch the layout change."""
    logging.basicConfig(level=logging.DEBUG if "-v" in sys.argv else logging.WARNING)

    row = HeaderRow([
        HeaderNode("Product", width=160),
        HeaderNode("2024", children=[
            HeaderNode("H1", hide_when_expanded=True, children=[
                HeaderNode("Q1"), HeaderNode("Q2"),
            ]),
            HeaderNode("H2"),
        ]),
        HeaderNode("Total"),
    ])
    row.add_listener(lambda: print_layout(row))

    print_layout(row)
    row[1].toggle_expand()
    row[1].children[0].toggle_expand()
    row[1].toggle_expand()

    row.dispose()


if __name__ == "__main__":
    main()
