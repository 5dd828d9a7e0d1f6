"""Hypothesis strategies for reflectance data testing."""

from ._angle_grids import angle_grids
from ._color_models import color_models
from ._unit_hemisphere_directions import unit_hemisphere_directions

__all__ = [
    "angle_grids",
    "color_models",
    "unit_hemisphere_directions",
]
