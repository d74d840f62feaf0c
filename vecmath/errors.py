"""Exceptions raised by the opt-in strict vector helpers."""
from __future__ import annotations

from typing import Sequence


class VectorMathError(ValueError):
    """Base class for vecmath failures."""


class ZeroVectorError(VectorMathError):
    """A zero-magnitude, or vanishingly short, vector reached an operation that needs a direction."""

    def __init__(self, operation: str, vector: Sequence[float]) -> None:
        self.operation = operation
        self.vector = tuple(vector)
        super().__init__(f"Cannot {operation} zero-length vector {self.vector!r}")


__all__ = ["VectorMathError", "ZeroVectorError"]
