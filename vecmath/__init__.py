"""vecmath: stateless 3D vector arithmetic on plain tuples.

The package exposes pure functions over immutable ``(x, y, z)`` tuples
plus a scalar clamp factory. Policy-aware variants for zero-length
input and numpy conversions live in their own modules.
"""

from .number import create_clamp
from .vector import (
    BASIS_X,
    BASIS_Y,
    BASIS_Z,
    ZERO,
    Vec2,
    Vec3,
    add,
    angle,
    as_vec3,
    create_scale,
    cross,
    diff,
    dot,
    equal,
    mag,
    midpoint,
    multiply,
    negate,
    normalize,
    rotate_left,
    rotate_right,
    to_vec2,
    vec3,
)
from .errors import VectorMathError, ZeroVectorError
from .settings import VectorSettings, ZeroVectorPolicy, load_vector_settings
from .guarded import angle_strict, create_angle, create_normalize, normalize_strict
from .arrays import from_array, to_array

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
    "create_clamp",
    "VectorMathError",
    "ZeroVectorError",
    "ZeroVectorPolicy",
    "VectorSettings",
    "load_vector_settings",
    "create_normalize",
    "create_angle",
    "normalize_strict",
    "angle_strict",
    "to_array",
    "from_array",
]
