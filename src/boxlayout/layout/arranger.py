"""Arranger: compute the rect of every view in a box tree."""

from __future__ import annotations

import logging
from typing import Iterator, NamedTuple

from ..core.box import Box
from ..core.validation import DuplicateViewError
from .geometry import Rect
from .merge import merge_dimension_maps
from .partition import partition_extents, partition_offsets

logger = logging.getLogger(__name__)


class Allocation(NamedTuple):
    """The space handed to one box by its parent."""

    box: Box
    x0: int
    y0: int
    width: int
    height: int


def allocate_children(box: Box, x0: int, y0: int, width: int, height: int) -> list[Allocation]:
    """Split a box's space among its children.

    Children and direction are resolved for this allocation. Returns an
    empty list when the box is a leaf for it.
    """
    children = box.resolve_children(width, height)
    if not children:
        return []

    direction = box.resolve_direction(width, height)
    along_width = direction.partitions_width
    available = width if along_width else height

    extents = partition_extents([child.sizing for child in children], available)
    logger.debug("Partitioned %d cells by %s into %s", available, direction.name, extents)

    allocations = []
    for child, offset, extent in zip(children, partition_offsets(extents), extents):
        if along_width:
            allocations.append(Allocation(child, x0 + offset, y0, extent, height))
        else:
            allocations.append(Allocation(child, x0, y0 + offset, width, extent))
    return allocations


def iter_leaves(root: Box, x0: int, y0: int, width: int, height: int) -> Iterator[Allocation]:
    """Yield the allocation of every leaf, in traversal order."""
    allocations = allocate_children(root, x0, y0, width, height)
    if not allocations:
        yield Allocation(root, x0, y0, width, height)
        return
    for alloc in allocations:
        yield from iter_leaves(*alloc)


class Arranger:
    """Lays out a box tree inside a rectangle.

    The walk is top-down: each box resolves its children and direction
    for the space it was just given, partitions that space along its
    axis, and recurses. Leaf results are merged on the way back up.

    Arranging never fails on its own account. Zero or negative sizes
    just produce degenerate rects, and exceptions from computed
    directions or children propagate to the caller.

    View names are expected to be unique across the tree. When they are
    not, the last leaf in traversal order wins and a warning is logged,
    or, with ``strict=True``, DuplicateViewError is raised.
    """

    def __init__(self, strict: bool = False) -> None:
        self._strict = strict

    @property
    def strict(self) -> bool:
        return self._strict

    def arrange(
        self,
        root: Box,
        x0: int,
        y0: int,
        width: int,
        height: int,
    ) -> dict[str, Rect]:
        """Return a mapping of view name to rect for the whole tree."""
        allocations = allocate_children(root, x0, y0, width, height)
        if not allocations:
            if root.view_name:
                return {root.view_name: Rect.from_origin(x0, y0, width, height)}
            return {}

        results = [self.arrange(*alloc) for alloc in allocations]
        return merge_dimension_maps(*results, on_duplicate=self._on_duplicate)

    def _on_duplicate(self, name: str) -> None:
        if self._strict:
            raise DuplicateViewError([name])
        logger.warning("View %r is laid out more than once; keeping the last rect", name)


def arrange_views(
    root: Box,
    x0: int,
    y0: int,
    width: int,
    height: int,
) -> dict[str, Rect]:
    """Lay out ``root`` in the rect at (x0, y0) of the given size.

    Shorthand for ``Arranger().arrange(...)``.
    """
    return Arranger().arrange(root, x0, y0, width, height)
