"""Conversions between vecmath tuples and numpy arrays."""
from __future__ import annotations

from typing import Sequence

import numpy as np

from .vector import Vec3


def to_array(v: Sequence[float]) -> np.ndarray:
    """Return ``v`` as a fresh float64 array of shape ``(3,)``."""

    array = np.array(v, dtype=np.float64)
    if array.shape != (3,):
        raise ValueError(f"Expected a 3-component vector, got shape {array.shape}")
    return array


def from_array(array: np.ndarray) -> Vec3:
    """Convert a three-element array into a tuple of Python floats."""

    values = np.asarray(array, dtype=np.float64).ravel()
    if values.size != 3:
        raise ValueError(f"Expected exactly three elements, got {values.size}")
    # //1.- tolist() yields builtin floats so results compare cleanly with tuples.
    x, y, z = values.tolist()
    return (x, y, z)


__all__ = ["to_array", "from_array"]
