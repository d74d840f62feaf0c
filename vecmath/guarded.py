"""Policy-aware variants of the direction-dependent vector helpers.

``normalize`` and ``angle`` silently yield NaN for the zero vector. The
factories below bind a :class:`~vecmath.settings.VectorSettings` and hand
back either those core functions untouched or strict replacements that
raise :class:`~vecmath.errors.ZeroVectorError` instead.
"""
from __future__ import annotations

import logging
import math
from typing import Callable, Optional, Sequence

from .errors import ZeroVectorError
from .settings import VectorSettings, ZeroVectorPolicy
from .vector import Vec3, angle, mag, normalize

LOGGER = logging.getLogger(__name__)

NormalizeFn = Callable[[Sequence[float]], Vec3]
AngleFn = Callable[[Sequence[float], Sequence[float]], float]


def _reject(operation: str, vector: Sequence[float]) -> ZeroVectorError:
    error = ZeroVectorError(operation, vector)
    LOGGER.debug("Rejected zero-length input: %s", error)
    return error


# //1.- A zero length, or one so small its reciprocal overflows, leaves no usable direction.
def _lacks_direction(length: float) -> bool:
    return length == 0 or math.isinf(1.0 / length)


def create_normalize(settings: Optional[VectorSettings] = None) -> NormalizeFn:
    """Return a ``normalize`` honouring the configured zero vector policy."""

    settings = settings or VectorSettings()
    if settings.zero_vector_policy is ZeroVectorPolicy.PROPAGATE:
        return normalize

    def normalize_checked(v: Sequence[float]) -> Vec3:
        if _lacks_direction(mag(v)):
            raise _reject("normalize", v)
        return normalize(v)

    return normalize_checked


def create_angle(settings: Optional[VectorSettings] = None) -> AngleFn:
    """Return an ``angle`` honouring the configured zero vector policy."""

    settings = settings or VectorSettings()
    if settings.zero_vector_policy is ZeroVectorPolicy.PROPAGATE:
        return angle

    def angle_checked(a: Sequence[float], b: Sequence[float]) -> float:
        # //2.- Report the first offending operand so callers can trace it.
        for operand in (a, b):
            if _lacks_direction(mag(operand)):
                raise _reject("measure an angle against", operand)
        # //3.- Two short operands can still underflow the magnitude product.
        if _lacks_direction(mag(a) * mag(b)):
            raise _reject("measure an angle against", min((a, b), key=mag))
        return angle(a, b)

    return angle_checked


_STRICT = VectorSettings(zero_vector_policy=ZeroVectorPolicy.RAISE)
normalize_strict = create_normalize(_STRICT)
angle_strict = create_angle(_STRICT)


__all__ = ["create_normalize", "create_angle", "normalize_strict", "angle_strict"]
