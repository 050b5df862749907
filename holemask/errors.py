"""
Error Taxonomy
==============

All errors derive from HoleMaskError, which is a ValueError: every failure
here is a caller supplying input that violates a grammar or an enumeration.
Errors propagate unchanged from the parser up to the boundary and hit-test
entry points.
"""

from typing import Any

LENGTH_GRAMMAR = r"^([0-9]+(?:\.[0-9]+)?)(px|%)$"


class HoleMaskError(ValueError):
    """Base class for hole geometry errors."""


class MalformedLength(HoleMaskError):
    """Raised when a length does not match '<number>px' or '<number>%'."""

    def __init__(self, text: Any, expected: str = LENGTH_GRAMMAR):
        self.text = text
        self.expected = expected
        super().__init__(
            f"Invalid length value: {text!r}. "
            f"Expected format: \"<number>px\" or \"<number>%\" ({expected})"
        )


class InvalidSizeArity(HoleMaskError):
    """Raised when a size supplies a token count the shape does not accept."""

    def __init__(self, size_text: str, token_count: int, expected: str = "1 or 2"):
        self.size_text = size_text
        self.token_count = token_count
        super().__init__(
            f"Invalid size: {size_text!r} has {token_count} value(s), "
            f"expected {expected}"
        )


class UnsupportedShape(HoleMaskError):
    """Raised for shapes outside rectangle, square and circle."""

    def __init__(self, shape: Any, reason: str = "Must be one of SHAPE_RECTANGLE, SHAPE_SQUARE, SHAPE_CIRCLE"):
        self.shape = shape
        super().__init__(f"Unsupported shape: {shape!r}. {reason}")
