"""
Length Units Module
===================

Parsing and pixel resolution of single length values.

Design:
- Immutable Length value type (frozen dataclass)
- Strict grammar: '<digits>[.<digits>](px|%)', ASCII digits, case-sensitive unit
- Percentages stay unresolved until a container extent is known
"""

import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Any, Union

from holemask.errors import MalformedLength, LENGTH_GRAMMAR

_LENGTH_PATTERN = re.compile(LENGTH_GRAMMAR)


class Unit(str, Enum):
    """Length unit."""
    PX = "px"          # Absolute device pixels
    PERCENT = "%"      # Relative to the container axis


@dataclass(frozen=True)
class Length:
    """
    Immutable length: a non-negative magnitude tagged with a unit.

    Attributes:
        magnitude: Finite, non-negative number
        unit: Unit.PX or Unit.PERCENT

    Example:
        >>> Length(200, Unit.PX)
        Length(magnitude=200, unit=<Unit.PX: 'px'>)
        >>> str(Length(12.5, Unit.PERCENT))
        '12.5%'
    """
    magnitude: float
    unit: Unit

    def __post_init__(self):
        """Validate invariants."""
        if isinstance(self.magnitude, bool) or not isinstance(self.magnitude, (int, float)):
            raise MalformedLength(self.magnitude)
        if not math.isfinite(self.magnitude) or self.magnitude < 0:
            raise MalformedLength(self.magnitude)
        # Accept "px" / "%" strings for convenience
        object.__setattr__(self, 'unit', Unit(self.unit))

    def __str__(self) -> str:
        magnitude = self.magnitude
        if float(magnitude).is_integer():
            return f"{int(magnitude)}{self.unit.value}"
        return f"{magnitude}{self.unit.value}"

    def half(self) -> 'Length':
        """Half of this length, same unit."""
        return Length(self.magnitude / 2, self.unit)

    def to_pixels(self, container_extent: float) -> float:
        """Resolve against a container extent (see to_pixels)."""
        return to_pixels(self, container_extent)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to JSON-compatible dict."""
        return {'magnitude': self.magnitude, 'unit': self.unit.value}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Length':
        """Deserialize from dict with keys: magnitude, unit."""
        try:
            return cls(magnitude=data['magnitude'], unit=Unit(data['unit']))
        except KeyError as e:
            raise ValueError(f"Missing required Length field: {e}")


def parse_length(text: Union[str, Length]) -> Length:
    """
    Parse a length expression into a Length.

    Args:
        text: '<number>px' or '<number>%' (a Length passes through)

    Returns:
        Parsed Length

    Raises:
        MalformedLength: If text does not match the length grammar
    """
    if isinstance(text, Length):
        return text
    if not isinstance(text, str):
        raise MalformedLength(text)

    match = _LENGTH_PATTERN.match(text)
    # re's '$' also matches before a trailing newline
    if match is None or match.end() != len(text):
        raise MalformedLength(text)

    number, unit = match.groups()
    magnitude = float(number)
    if magnitude.is_integer() and "." not in number:
        magnitude = int(number)
    return Length(magnitude=magnitude, unit=Unit(unit))


def to_pixels(length: Length, container_extent: float) -> float:
    """
    Convert a length to pixels.

    Args:
        length: Length to resolve
        container_extent: Container size along the relevant axis (pixels)

    Returns:
        Magnitude unchanged for px, container_extent * magnitude / 100 for %

    Raises:
        ValueError: If container_extent is negative or not finite
    """
    if not math.isfinite(container_extent) or container_extent < 0:
        raise ValueError(
            f"container_extent must be a finite, non-negative number, got {container_extent}"
        )
    if length.unit is Unit.PERCENT:
        return container_extent * length.magnitude / 100
    return float(length.magnitude)
