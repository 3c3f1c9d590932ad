"""boxlayout: split a screen into named panels from a tree of boxes."""

from ._version import __version__
from .core import (
    Box,
    Computed,
    Constant,
    Direction,
    DuplicateViewError,
    Fixed,
    Weighted,
    validate_unique_view_names,
)
from .export.serializers import layout_to_frame, serialize_layout
from .layout import Arranger, Rect, arrange_views, merge_dimension_maps, partition_extents

__all__ = [
    "__version__",
    "Arranger",
    "arrange_views",
    "Box",
    "Computed",
    "Constant",
    "Direction",
    "DuplicateViewError",
    "Fixed",
    "Weighted",
    "Rect",
    "merge_dimension_maps",
    "partition_extents",
    "layout_to_frame",
    "serialize_layout",
    "validate_unique_view_names",
]
