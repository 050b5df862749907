"""
Boundary Engine
===============

Composes size normalization and anchor resolution into the hole boundary.

Design:
- compute_boundary() is pure: descriptor in, symbolic boundary out
- Boundaries stay in the mixed-unit expression language until resolve()
  is given the container size (never cached, it changes between layouts)
- Rectangle/square -> RectBoundary, circle -> CircleBoundary
"""

import math
import numbers
from dataclasses import dataclass
from typing import Any, Dict, Tuple, Union

import supervision as sv

from holemask.errors import UnsupportedShape
from holemask.geometry.anchors import resolve_box_edges, resolve_circle_center
from holemask.geometry.expressions import CoordinateExpression, Difference, Sum
from holemask.geometry.shapes import HoleDescriptor, ShapeKind
from holemask.geometry.units import Length
from holemask.logging import LogEvent, create_logger

logger = create_logger("geometry")


def validate_container(container_wh: Tuple[float, float]) -> Tuple[float, float]:
    """
    Validate a (width, height) container size in pixels.

    Raises:
        ValueError: If not a pair of finite, non-negative numbers
    """
    try:
        width, height = container_wh
    except (TypeError, ValueError):
        raise ValueError(f"container_wh must be a (width, height) pair, got {container_wh!r}")
    for value in (width, height):
        if not isinstance(value, numbers.Real) or not math.isfinite(value) or value < 0:
            raise ValueError(
                f"container_wh must have finite, non-negative dimensions, got {container_wh!r}"
            )
    return float(width), float(height)


@dataclass(frozen=True)
class ResolvedBox:
    """Box edges in pixels, origin at the container's top-left corner."""
    left: float
    top: float
    right: float
    bottom: float

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top

    @property
    def center(self) -> sv.Point:
        return sv.Point(x=(self.left + self.right) / 2, y=(self.top + self.bottom) / 2)

    def contains_point(self, point: sv.Point) -> bool:
        """Edges inclusive."""
        return self.left <= point.x <= self.right and self.top <= point.y <= self.bottom

    def to_dict(self) -> Dict[str, float]:
        return {'left': self.left, 'top': self.top, 'right': self.right, 'bottom': self.bottom}


@dataclass(frozen=True)
class ResolvedCircle:
    """Circle center and radius in pixels."""
    center: sv.Point
    radius: float

    def to_dict(self) -> Dict[str, float]:
        return {'center_x': self.center.x, 'center_y': self.center.y, 'radius': self.radius}


@dataclass(frozen=True)
class RectBoundary:
    """
    Symbolic box edges of a rectangle or square hole.

    Example:
        >>> boundary = compute_boundary(HoleDescriptor(x="50%", y="50%", size="200px 100px"))
        >>> boundary.left.to_css()
        'calc(50% - 100px)'
        >>> boundary.resolve((1000, 800)).left
        400.0
    """
    left: CoordinateExpression
    top: CoordinateExpression
    right: CoordinateExpression
    bottom: CoordinateExpression

    def resolve(self, container_wh: Tuple[float, float]) -> ResolvedBox:
        """Resolve x edges against the width and y edges against the height."""
        width, height = validate_container(container_wh)
        return ResolvedBox(
            left=self.left.resolve(width),
            top=self.top.resolve(height),
            right=self.right.resolve(width),
            bottom=self.bottom.resolve(height),
        )

    def to_css(self) -> Dict[str, str]:
        return {
            'left': self.left.to_css(),
            'top': self.top.to_css(),
            'right': self.right.to_css(),
            'bottom': self.bottom.to_css(),
        }

    def to_dict(self) -> Dict[str, Any]:
        return {
            'kind': 'rect',
            'left': self.left.to_dict(),
            'top': self.top.to_dict(),
            'right': self.right.to_dict(),
            'bottom': self.bottom.to_dict(),
        }


def _shift_center(expression: CoordinateExpression, axis_extent: float, radius_px: float) -> float:
    """Resolve a circle center coordinate; the shift is always the pixel radius."""
    if isinstance(expression, Sum):
        return expression.reference.to_pixels(axis_extent) + radius_px
    if isinstance(expression, Difference):
        return expression.reference.to_pixels(axis_extent) - radius_px
    return expression.resolve(axis_extent)


@dataclass(frozen=True)
class CircleBoundary:
    """Symbolic center and radius of a circle hole."""
    center_x: CoordinateExpression
    center_y: CoordinateExpression
    radius: Length

    def resolve_radius(self, container_wh: Tuple[float, float]) -> float:
        """A percentage radius is relative to the smaller container side."""
        width, height = validate_container(container_wh)
        return self.radius.to_pixels(min(width, height))

    def resolve(self, container_wh: Tuple[float, float]) -> ResolvedCircle:
        """
        Resolve to pixels.

        The anchor shift is the resolved radius, so a corner-anchored circle
        touches its anchor point even when the radius is a percentage.
        """
        width, height = validate_container(container_wh)
        radius_px = self.resolve_radius((width, height))
        return ResolvedCircle(
            center=sv.Point(
                x=_shift_center(self.center_x, width, radius_px),
                y=_shift_center(self.center_y, height, radius_px),
            ),
            radius=radius_px,
        )

    def to_css(self) -> Dict[str, str]:
        return {
            'center_x': self.center_x.to_css(),
            'center_y': self.center_y.to_css(),
            'radius': str(self.radius),
        }

    def to_dict(self) -> Dict[str, Any]:
        return {
            'kind': 'circle',
            'center_x': self.center_x.to_dict(),
            'center_y': self.center_y.to_dict(),
            'radius': self.radius.to_dict(),
        }


BoundaryResult = Union[RectBoundary, CircleBoundary]


def compute_boundary(descriptor: HoleDescriptor) -> BoundaryResult:
    """
    Compute the hole boundary for a descriptor.

    Args:
        descriptor: Hole to place

    Returns:
        RectBoundary for rectangles and squares, CircleBoundary for circles

    Raises:
        InvalidSizeArity, MalformedLength: Propagated from size normalization
        UnsupportedShape: Shape outside the enumeration
    """
    size = descriptor.normalized_size()
    shape = descriptor.shape

    if shape is ShapeKind.RECTANGLE or shape is ShapeKind.SQUARE:
        left, top, right, bottom = resolve_box_edges(
            descriptor.anchor, descriptor.x, descriptor.y, size.width, size.height
        )
        boundary = RectBoundary(left=left, top=top, right=right, bottom=bottom)
    elif shape is ShapeKind.CIRCLE:
        radius = size.extent.half()
        center_x, center_y = resolve_circle_center(
            descriptor.anchor, descriptor.x, descriptor.y, radius
        )
        boundary = CircleBoundary(center_x=center_x, center_y=center_y, radius=radius)
    else:
        raise UnsupportedShape(shape)

    logger.debug(
        event=LogEvent.BOUNDARY_COMPUTED,
        message=f"Computed {shape.value} boundary",
        metadata={'descriptor': descriptor.to_dict(), 'boundary': boundary.to_css()}
    )
    return boundary
