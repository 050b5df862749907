"""
Geometry Layer
==============

Bounded Context: Hole geometry and click hit-testing.

Responsibilities:
- Length parsing and pixel resolution
- Shape-specific size normalization
- Anchor-relative boundary derivation (symbolic, mixed units)
- Inside/outside decisions for clicks
- NO rendering, NO event dispatch

Design Philosophy:
- Pure functions where possible
- Immutable data structures
- Fail-fast validation
- Zero side effects (logging aside)
"""

from holemask.geometry.units import Length, Unit, parse_length, to_pixels
from holemask.geometry.expressions import (
    CoordinateExpression,
    Difference,
    Literal,
    Sum,
    expression_from_dict,
)
from holemask.geometry.shapes import (
    AnchorKind,
    ExtentSize,
    HoleDescriptor,
    NormalizedSize,
    RectangleSize,
    ShapeKind,
    normalize_size,
)
from holemask.geometry.anchors import resolve_box_edges, resolve_circle_center
from holemask.geometry.boundary import (
    BoundaryResult,
    CircleBoundary,
    RectBoundary,
    ResolvedBox,
    ResolvedCircle,
    compute_boundary,
)
from holemask.geometry.hit_test import ClickTarget, HoleHitTester, is_inside

__all__ = [
    # Units
    "Length",
    "Unit",
    "parse_length",
    "to_pixels",
    # Expressions
    "CoordinateExpression",
    "Literal",
    "Sum",
    "Difference",
    "expression_from_dict",
    # Shapes
    "AnchorKind",
    "ShapeKind",
    "HoleDescriptor",
    "NormalizedSize",
    "RectangleSize",
    "ExtentSize",
    "normalize_size",
    # Anchors / boundary
    "resolve_box_edges",
    "resolve_circle_center",
    "BoundaryResult",
    "RectBoundary",
    "CircleBoundary",
    "ResolvedBox",
    "ResolvedCircle",
    "compute_boundary",
    # Hit-testing
    "ClickTarget",
    "HoleHitTester",
    "is_inside",
]
