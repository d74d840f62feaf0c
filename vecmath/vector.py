"""Stateless 3D vector arithmetic on plain tuples.

Vectors are immutable ``(x, y, z)`` tuples and every helper returns a
freshly built tuple, so results can be shared freely between callers
and threads. The functions accept any indexable of three numbers (lists
and numpy arrays included) but always hand back tuples. Any other
number of components raises ``ValueError``.

Degenerate input is never intercepted: normalizing the zero vector or
measuring an angle against it yields NaN, exactly as IEEE-754 division
would. Use :mod:`vecmath.guarded` when a loud failure is preferable.
"""
from __future__ import annotations

import math
from typing import Callable, Iterable, Sequence, Tuple

from .number import create_clamp

Vec2 = Tuple[float, float]
Vec3 = Tuple[float, float, float]


# //1.- Divide following IEEE-754 instead of raising ZeroDivisionError.
def _divide(numerator: float, denominator: float) -> float:
    if denominator != 0:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


# //2.- Reject anything but three components without touching their numeric type.
def _check_arity(*vectors: Sequence[float]) -> None:
    for v in vectors:
        if len(v) != 3:
            raise ValueError(f"Vec3 requires exactly three components, got {len(v)}")


def vec3(x: float, y: float, z: float) -> Vec3:
    """Build a float vector from three components."""

    return (float(x), float(y), float(z))


def as_vec3(values: Iterable[float]) -> Vec3:
    """Coerce an iterable of exactly three numbers into a float vector."""

    components = tuple(float(component) for component in values)
    if len(components) != 3:
        raise ValueError(f"Vec3 requires exactly three components, got {len(components)}")
    return components  # type: ignore[return-value]


def rotate_right(v: Sequence[float]) -> Vec3:
    """Shift every component one slot to the right, wrapping the last to the front.

    ``rotate_right((1, 2, 3)) == (3, 1, 2)``
    """

    _check_arity(v)
    return (v[2], v[0], v[1])


def rotate_left(v: Sequence[float]) -> Vec3:
    """Shift every component one slot to the left, wrapping the first to the end.

    ``rotate_left((1, 2, 3)) == (2, 3, 1)``
    """

    _check_arity(v)
    return (v[1], v[2], v[0])


ZERO: Vec3 = (0, 0, 0)
BASIS_X: Vec3 = (1, 0, 0)
BASIS_Y: Vec3 = rotate_right(BASIS_X)
BASIS_Z: Vec3 = rotate_right(BASIS_Y)


def add(a: Sequence[float], b: Sequence[float]) -> Vec3:
    """Component-wise sum, ``add((1, 2, 3), (6, 5, 4)) == (7, 7, 7)``."""

    _check_arity(a, b)
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2])


def multiply(a: Sequence[float], b: Sequence[float]) -> Vec3:
    """Component-wise product.

    ``b`` can be read as a per-axis scaling vector applied to ``a``.
    """

    _check_arity(a, b)
    return (a[0] * b[0], a[1] * b[1], a[2] * b[2])


def create_scale(s: float) -> Callable[[Sequence[float]], Vec3]:
    """Return a function scaling a vector uniformly by ``s``."""

    factor = (s, s, s)

    def scale(v: Sequence[float]) -> Vec3:
        return multiply(v, factor)

    return scale


def negate(v: Sequence[float]) -> Vec3:
    return create_scale(-1)(v)


def diff(a: Sequence[float], b: Sequence[float]) -> Vec3:
    """Component-wise ``a - b``, ``diff((1, 2, 3), (0, 0, -1)) == (1, 2, 4)``."""

    return add(a, negate(b))


def dot(a: Sequence[float], b: Sequence[float]) -> float:
    _check_arity(a, b)
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def cross(a: Sequence[float], b: Sequence[float]) -> Vec3:
    """Right-handed cross product, ``cross((1, 0, 0), (0, 1, 0)) == (0, 0, 1)``."""

    _check_arity(a, b)
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def mag(v: Sequence[float]) -> float:
    """Euclidean length of ``v``."""

    _check_arity(v)
    # //3.- hypot scales internally so huge or tiny components neither overflow nor vanish.
    return math.hypot(v[0], v[1], v[2])


def normalize(v: Sequence[float]) -> Vec3:
    """Scale ``v`` to unit length.

    The zero vector has no direction and comes back as ``(nan, nan, nan)``.
    """

    return create_scale(_divide(1.0, mag(v)))(v)


_unit_interval = create_clamp(-1, 1)


def angle(a: Sequence[float], b: Sequence[float]) -> float:
    """Angle in radians between ``a`` and ``b``.

    The cosine is clamped to ``[-1, 1]`` because rounding can push it just
    past the domain of ``acos``. Any angle involving the zero vector is NaN.
    """

    cosine = _divide(dot(a, b), mag(a) * mag(b))
    return math.acos(_unit_interval(cosine))


def midpoint(a: Sequence[float], b: Sequence[float]) -> Vec3:
    """Average of ``a`` and ``b``, the point halfway between their tips."""

    return create_scale(1 / 2)(add(a, b))


def equal(a: Sequence[float], b: Sequence[float]) -> bool:
    """Exact component-wise equality.

    No tolerance is applied, so rounding noise makes vectors unequal and
    NaN components never compare equal. Callers needing an epsilon should
    compare with ``math.isclose`` per component.
    """

    _check_arity(a, b)
    return a[0] == b[0] and a[1] == b[1] and a[2] == b[2]


def to_vec2(v: Sequence[float]) -> Vec2:
    """Drop the ``z`` component, e.g. to emit points for an SVG path."""

    _check_arity(v)
    return (v[0], v[1])


__all__ = [
    "Vec2",
    "Vec3",
    "ZERO",
    "BASIS_X",
    "BASIS_Y",
    "BASIS_Z",
    "vec3",
    "as_vec3",
    "add",
    "diff",
    "multiply",
    "negate",
    "create_scale",
    "dot",
    "cross",
    "mag",
    "normalize",
    "midpoint",
    "angle",
    "equal",
    "rotate_left",
    "rotate_right",
    "to_vec2",
]
