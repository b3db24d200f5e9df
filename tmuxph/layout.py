"""Pane counting for tmux layout strings.

tmux describes a window tiling as a checksum-prefixed, comma-separated
string, e.g. ``"f93e,211x62,0,0[211x31,0,0,15,211x30,0,32,24]"``. Leaf panes
are ``WxH,X,Y,ID`` tuples, containers are ``WxH,X,Y`` headers followed by
their children inside ``[...]`` (stacked) or ``{...}`` (side by side). The
top-level node carries one extra leading field, the checksum.

Only the number of leaf panes is derived here; the layout itself is treated
as an opaque value and copied verbatim into session documents.
"""

from __future__ import annotations

import logging

from .exceptions import LayoutParseError

logger = logging.getLogger(__name__)

OPENING_DELIMITERS = ("{", "[")
CLOSING_DELIMITERS = ("}", "]")

# Fields read before a container opens: checksum + WxH,X,Y at top level.
TOP_LEVEL_HEADER_FIELDS = 4
NESTED_HEADER_FIELDS = 3
# Fields of a leaf: WxH,X,Y,ID.
LEAF_FIELDS = 4
# Checksum + leaf fields when the whole layout is a single pane.
SINGLE_PANE_FIELDS = 5


def count_layout_panes(layout: str) -> int:
    """Return the number of leaf panes described by a tmux layout string.

    Args:
        layout: Layout string as printed by ``tmux list-windows -F '#{window_layout}'``.

    Returns:
        Number of panes the layout tiles.

    Raises:
        LayoutParseError: If the string does not follow the layout grammar.
    """
    if not layout or not layout.strip():
        raise LayoutParseError("Empty layout", layout=layout)

    npanes = 0
    nfields = 0
    top_level = True

    for position, content in enumerate(layout.split(","), start=1):
        nfields += 1

        if any(delim in content for delim in OPENING_DELIMITERS):
            expected = TOP_LEVEL_HEADER_FIELDS if top_level else NESTED_HEADER_FIELDS
            if nfields != expected:
                raise LayoutParseError(
                    f"Container header has {nfields} fields, expected {expected}",
                    layout=layout,
                    position=position,
                )
            nfields = 1
            top_level = False
        elif nfields == SINGLE_PANE_FIELDS and not top_level:
            # Previous leaf ended without a delimiter; this field opens a sibling.
            npanes += 1
            nfields = 1
        elif any(delim in content for delim in CLOSING_DELIMITERS):
            if nfields != LEAF_FIELDS:
                raise LayoutParseError(
                    f"Pane has {nfields} fields, expected {LEAF_FIELDS}",
                    layout=layout,
                    position=position,
                )
            npanes += 1
            nfields = 0

    if top_level:
        if nfields != SINGLE_PANE_FIELDS:
            raise LayoutParseError(
                f"Single-pane layout has {nfields} fields, expected {SINGLE_PANE_FIELDS}",
                layout=layout,
            )
        npanes += 1

    logger.debug("Layout %s has %d panes", layout, npanes)
    return npanes


def is_valid_layout(layout: str) -> bool:
    """Check whether a layout string can be analyzed."""
    try:
        count_layout_panes(layout)
    except LayoutParseError:
        return False
    return True
