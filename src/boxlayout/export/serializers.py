"""Serializers: convert layout results to JSON and tabular formats."""

from __future__ import annotations

import json
from typing import Mapping

import pandas as pd

from ..layout.geometry import Rect

FRAME_COLUMNS = ["x0", "y0", "x1", "y1", "width", "height"]


def layout_to_dict(layout: Mapping[str, Rect]) -> dict[str, dict]:
    """Plain-dict form of a layout, ordered by view name."""
    return {name: layout[name].to_dict() for name in sorted(layout)}


def serialize_layout(layout: Mapping[str, Rect]) -> str:
    """Serialize a layout as a JSON string."""
    return json.dumps(layout_to_dict(layout))


def layout_to_frame(layout: Mapping[str, Rect]) -> pd.DataFrame:
    """One row per view, indexed by view name.

    Handy for eyeballing a layout or diffing two of them.
    """
    names = sorted(layout)
    rows = [
        [r.x0, r.y0, r.x1, r.y1, r.width, r.height]
        for r in (layout[name] for name in names)
    ]
    frame = pd.DataFrame(rows, index=pd.Index(names, name="view"), columns=FRAME_COLUMNS)
    return frame.astype("int64")
