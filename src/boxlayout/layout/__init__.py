"""Layout computation: geometry, partitioning and the arranger."""

from .arranger import Arranger, arrange_views
from .geometry import Rect
from .merge import merge_dimension_maps
from .partition import partition_extents

__all__ = [
    "Arranger",
    "arrange_views",
    "Rect",
    "merge_dimension_maps",
    "partition_extents",
]
