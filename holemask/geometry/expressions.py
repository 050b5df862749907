"""
Coordinate Expressions
======================

Mixed-unit coordinates kept symbolic until a container size is known.

A percentage reference and an absolute delta are not commensurable until
both are converted to pixels, so an edge like "50% - 100px" is stored as
Difference(50%, 100px) and only collapsed to a number in resolve().

Variants:
- Literal(value):            value
- Sum(reference, delta):     reference + delta
- Difference(reference, delta): reference - delta
"""

from dataclasses import dataclass
from typing import Dict, Any, Union

from holemask.geometry.units import Length


@dataclass(frozen=True)
class Literal:
    """A bare length."""
    value: Length

    def resolve(self, container_extent: float) -> float:
        return self.value.to_pixels(container_extent)

    def to_css(self) -> str:
        return str(self.value)

    def to_dict(self) -> Dict[str, Any]:
        return {'op': 'literal', 'value': self.value.to_dict()}


@dataclass(frozen=True)
class Sum:
    """reference + delta, each operand resolved on its own."""
    reference: Length
    delta: Length

    def resolve(self, container_extent: float) -> float:
        return (
            self.reference.to_pixels(container_extent)
            + self.delta.to_pixels(container_extent)
        )

    def to_css(self) -> str:
        return f"calc({self.reference} + {self.delta})"

    def to_dict(self) -> Dict[str, Any]:
        return {
            'op': 'sum',
            'reference': self.reference.to_dict(),
            'delta': self.delta.to_dict(),
        }


@dataclass(frozen=True)
class Difference:
    """reference - delta, each operand resolved on its own."""
    reference: Length
    delta: Length

    def resolve(self, container_extent: float) -> float:
        return (
            self.reference.to_pixels(container_extent)
            - self.delta.to_pixels(container_extent)
        )

    def to_css(self) -> str:
        return f"calc({self.reference} - {self.delta})"

    def to_dict(self) -> Dict[str, Any]:
        return {
            'op': 'difference',
            'reference': self.reference.to_dict(),
            'delta': self.delta.to_dict(),
        }


CoordinateExpression = Union[Literal, Sum, Difference]


def offset(reference: Length, delta: Length, sign: int) -> CoordinateExpression:
    """
    Shift a reference by a signed delta.

    Args:
        reference: Reference coordinate
        delta: Non-negative shift
        sign: 1 (add), -1 (subtract) or 0 (no shift)

    Returns:
        Sum, Difference, or Literal for sign 0
    """
    if sign > 0:
        return Sum(reference, delta)
    if sign < 0:
        return Difference(reference, delta)
    return Literal(reference)


def expression_from_dict(data: Dict[str, Any]) -> CoordinateExpression:
    """
    Deserialize an expression produced by to_dict().

    Raises:
        ValueError: If 'op' is missing or unknown
    """
    op = data.get('op')
    if op == 'literal':
        return Literal(Length.from_dict(data['value']))
    if op == 'sum':
        return Sum(Length.from_dict(data['reference']), Length.from_dict(data['delta']))
    if op == 'difference':
        return Difference(Length.from_dict(data['reference']), Length.from_dict(data['delta']))
    raise ValueError(f"Invalid expression op: {op!r}. Must be 'literal', 'sum' or 'difference'")
