"""
Overlay Regions
===============

The four opaque strips that surround a rectangular hole.

    +-----------------------------+
    |             top             |
    +--------+---------+----------+
    |  left  |  hole   |  right   |
    +--------+---------+----------+
    |           bottom            |
    +-----------------------------+

Top and bottom span the full container width; left and right span the hole
height only. A circular hole is a single radial cutout and has no strips.
"""

from dataclasses import dataclass, asdict
from typing import Dict, List, Tuple

import supervision as sv

from holemask.errors import UnsupportedShape
from holemask.geometry.boundary import BoundaryResult, RectBoundary, ResolvedBox, validate_container
from holemask.geometry.shapes import ShapeKind


@dataclass(frozen=True)
class PixelRect:
    """
    Immutable pixel rectangle, origin at the container's top-left corner.

    Invariants:
        - width >= 0
        - height >= 0
    """
    x: float
    y: float
    width: float
    height: float

    def __post_init__(self):
        """Validate invariants."""
        if self.width < 0:
            raise ValueError(f"PixelRect width must be >= 0, got {self.width}")
        if self.height < 0:
            raise ValueError(f"PixelRect height must be >= 0, got {self.height}")

    @property
    def area(self) -> float:
        return self.width * self.height

    def contains_point(self, point: sv.Point) -> bool:
        """Half-open: the right and bottom edges belong to the next region."""
        return (
            self.x <= point.x < self.x + self.width
            and self.y <= point.y < self.y + self.height
        )

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


@dataclass(frozen=True)
class OverlayRegions:
    """Opaque strips around a rectangular hole."""
    top: PixelRect
    bottom: PixelRect
    left: PixelRect
    right: PixelRect
    hole: ResolvedBox

    def as_list(self) -> List[PixelRect]:
        return [self.top, self.bottom, self.left, self.right]

    def contains(self, point: sv.Point) -> bool:
        """
        Check if a point lies on any opaque strip.

        The hole edges are inclusive, matching HoleHitTester.classify, so a
        point on box.right or box.bottom is never on a strip.
        """
        if self.hole.contains_point(point):
            return False
        return any(region.contains_point(point) for region in self.as_list())

    def to_dict(self) -> Dict[str, Dict[str, float]]:
        return {
            'top': self.top.to_dict(),
            'bottom': self.bottom.to_dict(),
            'left': self.left.to_dict(),
            'right': self.right.to_dict(),
        }


def compute_overlay_regions(
    boundary: BoundaryResult,
    container_wh: Tuple[float, float]
) -> OverlayRegions:
    """
    Lay out the four opaque strips for a box-shaped hole.

    Args:
        boundary: RectBoundary from compute_boundary()
        container_wh: Container (width, height) in pixels

    Returns:
        OverlayRegions in pixels; negative extents clamp to zero

    Raises:
        UnsupportedShape: If boundary is a circle
    """
    if not isinstance(boundary, RectBoundary):
        raise UnsupportedShape(ShapeKind.CIRCLE.value, reason="A radial cutout has no overlay strips")

    width, height = validate_container(container_wh)
    box = boundary.resolve((width, height))
    hole_height = max(0.0, box.height)

    return OverlayRegions(
        top=PixelRect(x=0.0, y=0.0, width=width, height=max(0.0, box.top)),
        bottom=PixelRect(x=0.0, y=box.bottom, width=width, height=max(0.0, height - box.bottom)),
        left=PixelRect(x=0.0, y=box.top, width=max(0.0, box.left), height=hole_height),
        right=PixelRect(x=box.right, y=box.top, width=max(0.0, width - box.right), height=hole_height),
        hole=box,
    )
