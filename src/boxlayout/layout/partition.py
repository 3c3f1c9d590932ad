"""Partition one axis extent among sibling boxes."""

from __future__ import annotations

from itertools import accumulate
from typing import Sequence

from ..core.box import Fixed, Sizing


def partition_extents(sizings: Sequence[Sizing], available: int) -> list[int]:
    """Split ``available`` cells among siblings, in order.

    Static children get their size verbatim, even when the static sizes
    add up to more than is available; weighted children then share
    nothing. Otherwise the leftover is divided by total weight, and the
    integer remainder is handed out to the earliest weighted children
    first, at most ``weight`` extra cells each, so the weighted extents
    always add up to the leftover exactly.

    With a total weight of zero, any leftover is left unassigned.
    """
    reserved = sum(s.size for s in sizings if isinstance(s, Fixed))
    total_weight = sum(s.weight for s in sizings if not isinstance(s, Fixed))

    remaining = max(0, available - reserved)
    unit = extra = 0
    if total_weight > 0:
        unit, extra = divmod(remaining, total_weight)

    extents = []
    for sizing in sizings:
        if isinstance(sizing, Fixed):
            extents.append(sizing.size)
        else:
            take = min(extra, sizing.weight)
            extents.append(unit * sizing.weight + take)
            extra -= take
    return extents


def partition_offsets(extents: Sequence[int]) -> list[int]:
    """Start offset of each extent along the axis (exclusive running sum)."""
    return list(accumulate(extents[:-1], initial=0)) if extents else []
