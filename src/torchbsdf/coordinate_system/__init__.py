"""Conversions between direction pairs and angle tuples."""

from ._convert_coordinate_system import convert_coordinate_system
from ._coordinate_system import CoordinateSystem
from ._half_difference_coordinate_system import HalfDifferenceCoordinateSystem
from ._reflect import fix_downward_direction, is_downward_direction, reflect
from ._specular_coordinate_system import SpecularCoordinateSystem
from ._spherical_coordinate_system import SphericalCoordinateSystem

__all__ = [
    "CoordinateSystem",
    "HalfDifferenceCoordinateSystem",
    "SpecularCoordinateSystem",
    "SphericalCoordinateSystem",
    "convert_coordinate_system",
    "fix_downward_direction",
    "is_downward_direction",
    "reflect",
]
