"""Translate a pointer position into an insertion gap of the build list."""

from __future__ import annotations

from typing import Sequence

from ...config import NO_DROP_TARGET
from ..models import ItemGeometry


def compute_insertion_index(pointer_y: float, geometry: Sequence[ItemGeometry]) -> int:
    """Return the gap (``0..len(geometry)``) a drop at *pointer_y* targets.

    *geometry* lists the rendered build rows in build order.  Pointing above
    a row's vertical centre selects the gap before that row; pointing below
    the centre of every row selects the gap after the last one.  Without any
    build rows there is nowhere to drop and ``NO_DROP_TARGET`` is returned.
    """

    if not geometry:
        return NO_DROP_TARGET
    for rank, item in enumerate(geometry):
        if item.mid_y > pointer_y:
            return rank
    return len(geometry)
