"""Scalar helpers shared by the vector routines."""
from __future__ import annotations

from typing import Callable


def create_clamp(minimum: float, maximum: float) -> Callable[[float], float]:
    """Return a function restricting a number to ``[minimum, maximum]``.

    The bounds are bound once so the returned clamp can be handed around
    as a plain single-argument callable. When ``minimum`` exceeds
    ``maximum`` every input collapses to ``maximum``; NaN stays NaN.
    """

    def clamp(n: float) -> float:
        # //1.- Raise to the floor first, then cap at the ceiling.
        return min(max(n, minimum), maximum)

    return clamp


__all__ = ["create_clamp"]
