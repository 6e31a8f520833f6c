"""Shared utility functions for attitudejax.

Provides angle conversion helpers.
"""

from attitudejax.utils._angle import from_radians, to_radians, wrap_to_pi

__all__ = [
    "from_radians",
    "to_radians",
    "wrap_to_pi",
]
