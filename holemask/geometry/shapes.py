"""
Hole Shapes Module
==================

Hole descriptor, shape/anchor enumerations and size normalization.

Design:
- Immutable descriptor (frozen dataclass), fail-fast validation
- Shape is a closed enumeration: unknown shapes raise UnsupportedShape
- Anchor falls back to ANCHOR_MIDDLE on unknown tags (logged, not an error)
- CSS-like size rules:
    rectangle "200px"        -> 200px x 200px
    rectangle "200px 100px"  -> 200px x 100px
    square    "200px 400px"  -> 200px (extra values ignored)
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Tuple, Union

from holemask.errors import InvalidSizeArity, MalformedLength, UnsupportedShape
from holemask.geometry.units import Length, parse_length
from holemask.logging import LogEvent, create_logger

logger = create_logger("geometry")


def _normalize_tag(value: Any) -> str:
    return str(value).strip().upper().replace("-", "_")


class ShapeKind(str, Enum):
    """Hole shape."""
    RECTANGLE = "SHAPE_RECTANGLE"
    SQUARE = "SHAPE_SQUARE"
    CIRCLE = "SHAPE_CIRCLE"

    @classmethod
    def parse(cls, value: Union['ShapeKind', str]) -> 'ShapeKind':
        """
        Parse a shape tag ('SHAPE_CIRCLE') or short name ('circle').

        Raises:
            UnsupportedShape: For anything outside the enumeration
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            tag = _normalize_tag(value)
            for member in cls:
                if tag in (member.value, member.name):
                    return member
        raise UnsupportedShape(value)


class AnchorKind(str, Enum):
    """Feature point of the hole that coincides with the position."""
    MIDDLE = "ANCHOR_MIDDLE"
    TOP_LEFT = "ANCHOR_TOP_LEFT"
    TOP_RIGHT = "ANCHOR_TOP_RIGHT"
    BOTTOM_LEFT = "ANCHOR_BOTTOM_LEFT"
    BOTTOM_RIGHT = "ANCHOR_BOTTOM_RIGHT"

    @classmethod
    def parse(cls, value: Union['AnchorKind', str, None]) -> 'AnchorKind':
        """
        Parse an anchor tag ('ANCHOR_TOP_LEFT') or short name ('top-left').

        Unknown values fall back to MIDDLE.
        """
        if isinstance(value, cls):
            return value
        if value is None:
            return cls.MIDDLE

        tag = _normalize_tag(value)
        for member in cls:
            if tag in (member.value, member.name):
                return member

        logger.warning(
            event=LogEvent.ANCHOR_FALLBACK,
            message=f"Unknown anchor {value!r}, using {cls.MIDDLE.value}",
            metadata={'anchor': str(value)}
        )
        return cls.MIDDLE


@dataclass(frozen=True)
class RectangleSize:
    """Normalized rectangle size."""
    width: Length
    height: Length


@dataclass(frozen=True)
class ExtentSize:
    """
    Normalized square/circle size.

    The extent is the side of a square or the diameter of a circle.
    """
    extent: Length

    @property
    def width(self) -> Length:
        return self.extent

    @property
    def height(self) -> Length:
        return self.extent


NormalizedSize = Union[RectangleSize, ExtentSize]


def normalize_size(shape: Union[ShapeKind, str], size_text: str) -> NormalizedSize:
    """
    Produce the shape-correct size from raw size text.

    Args:
        shape: Hole shape
        size_text: One or more whitespace-separated lengths

    Returns:
        RectangleSize for rectangles, ExtentSize for squares and circles

    Raises:
        UnsupportedShape: Unknown shape
        InvalidSizeArity: Rectangle without 1 or 2 values, or empty size
        MalformedLength: A used value violates the length grammar
    """
    shape = ShapeKind.parse(shape)
    if not isinstance(size_text, str):
        raise MalformedLength(size_text)

    tokens = size_text.split()

    if shape is ShapeKind.RECTANGLE:
        if len(tokens) == 1:
            side = parse_length(tokens[0])
            return RectangleSize(width=side, height=side)
        if len(tokens) == 2:
            return RectangleSize(
                width=parse_length(tokens[0]),
                height=parse_length(tokens[1])
            )
        raise InvalidSizeArity(size_text, len(tokens))

    # Square / circle: first value wins, extras are ignored
    if not tokens:
        raise InvalidSizeArity(size_text, 0, expected="at least 1")
    return ExtentSize(extent=parse_length(tokens[0]))


@dataclass(frozen=True)
class HoleDescriptor:
    """
    Immutable description of the hole cut into the overlay.

    Textual inputs are parsed on construction, so both of these work:
        >>> HoleDescriptor(x="50%", y="50%", size="200px 100px")
        >>> HoleDescriptor(x=Length(50, Unit.PERCENT), y=..., size="200px",
        ...                anchor=AnchorKind.TOP_LEFT, shape=ShapeKind.CIRCLE)

    Attributes:
        x: Reference x-coordinate
        y: Reference y-coordinate
        size: Raw size text (one or two lengths)
        anchor: Which point of the hole sits at (x, y)
        shape: Rectangle, square or circle

    Invariants:
        - size is resolvable for shape (validated on construction)
    """
    x: Length
    y: Length
    size: str
    anchor: AnchorKind = AnchorKind.MIDDLE
    shape: ShapeKind = ShapeKind.RECTANGLE

    def __post_init__(self):
        """Parse textual fields and validate the size."""
        object.__setattr__(self, 'x', parse_length(self.x))
        object.__setattr__(self, 'y', parse_length(self.y))
        object.__setattr__(self, 'anchor', AnchorKind.parse(self.anchor))
        object.__setattr__(self, 'shape', ShapeKind.parse(self.shape))
        normalize_size(self.shape, self.size)

    @property
    def position(self) -> Tuple[Length, Length]:
        return self.x, self.y

    def normalized_size(self) -> NormalizedSize:
        return normalize_size(self.shape, self.size)

    def to_dict(self) -> Dict[str, str]:
        """Serialize to the textual form accepted by from_dict()."""
        return {
            'x': str(self.x),
            'y': str(self.y),
            'size': self.size,
            'anchor': self.anchor.value,
            'shape': self.shape.value,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'HoleDescriptor':
        """
        Deserialize from dict.

        Args:
            data: Keys x, y, size; optional anchor, shape

        Raises:
            ValueError: If required keys are missing (or any HoleMaskError)
        """
        try:
            descriptor = cls(
                x=data['x'],
                y=data['y'],
                size=data['size'],
                anchor=data.get('anchor', AnchorKind.MIDDLE),
                shape=data.get('shape', ShapeKind.RECTANGLE),
            )
        except KeyError as e:
            raise ValueError(f"Missing required hole field: {e}")

        logger.debug(
            event=LogEvent.DESCRIPTOR_PARSED,
            message="Parsed hole descriptor",
            metadata=descriptor.to_dict()
        )
        return descriptor
