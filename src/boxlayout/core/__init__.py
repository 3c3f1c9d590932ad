"""Box tree data model and validation."""

from .box import Box, Computed, Constant, Direction, Fixed, Weighted
from .validation import DuplicateViewError, validate_unique_view_names

__all__ = [
    "Box",
    "Computed",
    "Constant",
    "Direction",
    "Fixed",
    "Weighted",
    "DuplicateViewError",
    "validate_unique_view_names",
]
