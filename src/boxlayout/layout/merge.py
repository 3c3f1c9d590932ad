"""Union of per-child layout results."""

from __future__ import annotations

from typing import Callable, Mapping

from .geometry import Rect


def merge_dimension_maps(
    *maps: Mapping[str, Rect],
    on_duplicate: Callable[[str], None] | None = None,
) -> dict[str, Rect]:
    """Merge view-name → Rect mappings into a new dict.

    Later maps win on duplicate keys. ``on_duplicate`` is called with the
    name before it is overwritten; it may raise to abort the merge.
    The inputs are not modified.
    """
    result: dict[str, Rect] = {}
    for dims in maps:
        for name, rect in dims.items():
            if on_duplicate is not None and name in result:
                on_duplicate(name)
            result[name] = rect
    return result
