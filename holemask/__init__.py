"""
holemask v1.0
=============

Bounded Context: Geometry of a hole cut into an opaque overlay.

Architecture:

    holemask/
    ├── geometry/          # Pure geometry (immutable, stateless)
    │   ├── units.py       # Length, parse_length, to_pixels
    │   ├── expressions.py # Literal / Sum / Difference (deferred units)
    │   ├── shapes.py      # HoleDescriptor, ShapeKind, AnchorKind, normalize_size
    │   ├── anchors.py     # Anchor sign table
    │   ├── boundary.py    # compute_boundary, RectBoundary, CircleBoundary
    │   └── hit_test.py    # is_inside, HoleHitTester
    │
    ├── layout/            # Overlay strips around a box-shaped hole
    │   └── regions.py     # compute_overlay_regions
    │
    ├── logging/           # Structured JSON logging
    ├── config.py          # MaskConfig (YAML)
    └── errors.py          # MalformedLength, InvalidSizeArity, UnsupportedShape

Usage:

    # 1. Describe the hole (immutable)
    from holemask import HoleDescriptor, compute_boundary

    hole = HoleDescriptor(x="50%", y="50%", size="200px 100px")

    # 2. Symbolic boundary (mixed units, no container needed)
    boundary = compute_boundary(hole)
    boundary.to_css()
    # {'left': 'calc(50% - 100px)', 'top': 'calc(50% - 50px)', ...}

    # 3. Pixels once the container size is known
    boundary.resolve((1000, 800))
    # ResolvedBox(left=400.0, top=350.0, right=600.0, bottom=450.0)

    # 4. Route clicks (stateless)
    import supervision as sv
    from holemask import HoleHitTester

    HoleHitTester.classify(hole, sv.Point(x=500, y=400), (1000, 800))
    # ClickTarget.HOLE
"""

from holemask.errors import HoleMaskError, MalformedLength, InvalidSizeArity, UnsupportedShape

# Geometry Layer (immutable, stateless)
from holemask.geometry import (
    AnchorKind,
    BoundaryResult,
    CircleBoundary,
    ClickTarget,
    CoordinateExpression,
    Difference,
    ExtentSize,
    HoleDescriptor,
    HoleHitTester,
    Length,
    Literal,
    RectangleSize,
    RectBoundary,
    ResolvedBox,
    ResolvedCircle,
    ShapeKind,
    Sum,
    Unit,
    compute_boundary,
    is_inside,
    normalize_size,
    parse_length,
    to_pixels,
)

# Layout Layer
from holemask.layout import OverlayRegions, PixelRect, compute_overlay_regions

# Configuration
from holemask.config import MaskConfig

__all__ = [
    # Errors
    "HoleMaskError",
    "MalformedLength",
    "InvalidSizeArity",
    "UnsupportedShape",
    # Geometry
    "Length",
    "Unit",
    "parse_length",
    "to_pixels",
    "CoordinateExpression",
    "Literal",
    "Sum",
    "Difference",
    "AnchorKind",
    "ShapeKind",
    "HoleDescriptor",
    "RectangleSize",
    "ExtentSize",
    "normalize_size",
    "BoundaryResult",
    "RectBoundary",
    "CircleBoundary",
    "ResolvedBox",
    "ResolvedCircle",
    "compute_boundary",
    "ClickTarget",
    "HoleHitTester",
    "is_inside",
    # Layout
    "OverlayRegions",
    "PixelRect",
    "compute_overlay_regions",
    # Config
    "MaskConfig",
]

__version__ = "1.0.0"
