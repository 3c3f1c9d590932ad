"""Input validation with clear error messages for layout authors."""

from __future__ import annotations

from collections import Counter
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .box import Box


class DuplicateViewError(ValueError):
    """Raised when more than one leaf publishes the same view name."""

    def __init__(self, names: list[str]) -> None:
        self.names = list(names)
        super().__init__(
            f"View names must be unique. Found duplicates: {self.names[:5]}"
            + (f" (and {len(self.names) - 5} more)" if len(self.names) > 5 else "")
        )


def _check_int(value: Any, what: str) -> int:
    # bool is an int subclass, but True as a size is always a mistake
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{what} must be an int, got {type(value).__name__}: {value!r}")
    return value


def validate_extent(size: Any) -> int:
    """Validate a static size. Returns it unchanged."""
    _check_int(size, "Static size")
    if size <= 0:
        raise ValueError(
            f"Static size must be positive, got {size}. "
            "Use Weighted(0) for a box that should receive no space."
        )
    return size


def validate_weight(weight: Any) -> int:
    """Validate a weight. Returns it unchanged."""
    _check_int(weight, "Weight")
    if weight < 0:
        raise ValueError(f"Weight must be non-negative, got {weight}.")
    return weight


def find_duplicate_view_names(root: Box, width: int, height: int) -> list[str]:
    """Return view names used by more than one leaf, in first-seen order.

    Conditional children and directions are resolved with the allocation
    each box would receive, so the answer holds for this outer size only.
    """
    from ..layout.arranger import iter_leaves

    counts = Counter(
        leaf.box.view_name
        for leaf in iter_leaves(root, 0, 0, width, height)
        if leaf.box.view_name
    )
    return [name for name, n in counts.items() if n > 1]


def validate_unique_view_names(root: Box, width: int, height: int) -> None:
    """Raise DuplicateViewError if any view name is published twice."""
    dupes = find_duplicate_view_names(root, width, height)
    if dupes:
        raise DuplicateViewError(dupes)
