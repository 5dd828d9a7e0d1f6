"""Scalar interpolation kernels and tolerant comparisons.

Kernels
-------
lerp
    Linear interpolation, exact at both endpoints.
smoothstep, smootherstep
    Cubic and fifth-order Hermite steps.
hermite_interpolation3, hermite_interpolation5
    Linear interpolation with a Hermite-smoothed weight.
catmull_rom_spline
    Uniform Catmull-Rom segment.
centripetal_catmull_rom_spline
    Centripetal Catmull-Rom through unevenly spaced control points.

Comparisons
-----------
is_equal
    Elementwise equality with relative machine-epsilon tolerance.
is_equal_interval
    Whether an angle sequence is a uniform subdivision.
"""

from ._catmull_rom_spline import (
    catmull_rom_spline,
    centripetal_catmull_rom_spline,
)
from ._hermite_interpolation import (
    hermite_interpolation3,
    hermite_interpolation5,
)
from ._is_equal import is_equal, is_equal_interval
from ._lerp import lerp
from ._smoothstep import smootherstep, smoothstep

__all__ = [
    "catmull_rom_spline",
    "centripetal_catmull_rom_spline",
    "hermite_interpolation3",
    "hermite_interpolation5",
    "is_equal",
    "is_equal_interval",
    "lerp",
    "smootherstep",
    "smoothstep",
]
