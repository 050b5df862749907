"""
Layout Layer
============

Bounded Context: Translating a hole boundary into overlay geometry.

Consumers paint these regions; nothing here draws.
"""

from holemask.layout.regions import OverlayRegions, PixelRect, compute_overlay_regions

__all__ = [
    "OverlayRegions",
    "PixelRect",
    "compute_overlay_regions",
]
