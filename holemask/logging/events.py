"""
Structured Log Event Types
==========================

Bounded Context: Observability Event Taxonomy

Typed event names for structured logging.

Event Naming Convention:
    <category>.<action>

    category: descriptor, anchor, boundary, click, config, error
    action: parsed, fallback, computed, classified, loaded

Example Log Query (CloudWatch Insights):
    fields @timestamp, event, message, metadata.anchor
    | filter event = "anchor.fallback"
"""

from enum import Enum


class LogEvent(str, Enum):
    """
    Typed log event names for structured logging.

    Categories:
    - descriptor.*: Hole descriptor parsing
    - anchor.*: Anchor resolution
    - boundary.*: Boundary computation
    - click.*: Hit-test routing decisions
    - config.*: Configuration loading
    - error.*: Error conditions
    """

    # ========== Geometry Events ==========
    DESCRIPTOR_PARSED = "descriptor.parsed"
    """Hole descriptor built from textual input."""

    ANCHOR_FALLBACK = "anchor.fallback"
    """Unrecognized anchor tag replaced by ANCHOR_MIDDLE."""

    BOUNDARY_COMPUTED = "boundary.computed"
    """Symbolic boundary computed for a descriptor."""

    CLICK_CLASSIFIED = "click.classified"
    """Click routed to the hole or to the overlay."""

    # ========== Config Events ==========
    CONFIG_LOADED = "config.loaded"
    """Mask configuration loaded from YAML."""

    # ========== Error Events ==========
    MALFORMED_LENGTH = "error.malformed_length"
    """Length text does not match the length grammar."""

    INVALID_SIZE_ARITY = "error.invalid_size_arity"
    """Size text has a token count the shape does not accept."""

    UNSUPPORTED_SHAPE = "error.unsupported_shape"
    """Shape outside the supported enumeration."""

    CONFIG_ERROR = "error.config"
    """Configuration file missing or invalid."""
