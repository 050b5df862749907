"""
Anchor Resolver
===============

Places the hole relative to its reference point.

Each corner anchor maps to a (horizontal, vertical) direction in which the
hole extends away from the reference point:

    TOP_LEFT     (+1, +1)   box grows right and down
    TOP_RIGHT    (-1, +1)   box grows left and down
    BOTTOM_LEFT  (+1, -1)   box grows right and up
    BOTTOM_RIGHT (-1, -1)   box grows left and up

MIDDLE has no entry: the box spreads half its size to each side and a
circle center stays on the reference point. Any anchor missing from the
table resolves as MIDDLE.
"""

from typing import Dict, Tuple

from holemask.geometry.expressions import CoordinateExpression, Literal, offset
from holemask.geometry.shapes import AnchorKind
from holemask.geometry.units import Length

ANCHOR_DIRECTIONS: Dict[AnchorKind, Tuple[int, int]] = {
    AnchorKind.TOP_LEFT: (1, 1),
    AnchorKind.TOP_RIGHT: (-1, 1),
    AnchorKind.BOTTOM_LEFT: (1, -1),
    AnchorKind.BOTTOM_RIGHT: (-1, -1),
}


def _span(reference: Length, extent: Length, direction: int) -> Tuple[CoordinateExpression, CoordinateExpression]:
    """Return (low edge, high edge) of an extent placed along one axis."""
    if direction > 0:
        return Literal(reference), offset(reference, extent, 1)
    if direction < 0:
        return offset(reference, extent, -1), Literal(reference)
    half = extent.half()
    return offset(reference, half, -1), offset(reference, half, 1)


def resolve_box_edges(
    anchor: AnchorKind,
    x: Length,
    y: Length,
    width: Length,
    height: Length
) -> Tuple[CoordinateExpression, CoordinateExpression, CoordinateExpression, CoordinateExpression]:
    """
    Compute box edges so the anchored point coincides with (x, y).

    Returns:
        (left, top, right, bottom)
    """
    dx, dy = ANCHOR_DIRECTIONS.get(anchor, (0, 0))
    left, right = _span(x, width, dx)
    top, bottom = _span(y, height, dy)
    return left, top, right, bottom


def resolve_circle_center(
    anchor: AnchorKind,
    x: Length,
    y: Length,
    radius: Length
) -> Tuple[CoordinateExpression, CoordinateExpression]:
    """
    Compute the circle center for an anchor.

    Corner anchors shift the reference inward by one radius on each axis;
    MIDDLE leaves it unshifted.

    Returns:
        (center_x, center_y)
    """
    dx, dy = ANCHOR_DIRECTIONS.get(anchor, (0, 0))
    return offset(x, radius, dx), offset(y, radius, dy)
