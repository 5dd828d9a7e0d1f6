"""Sample containers and the Brdf facade."""

from ._brdf import Brdf
from ._color_model import ColorModel, SourceType
from ._color_model_mismatch_error import ColorModelMismatchError
from ._dimension_mismatch_error import DimensionMismatchError
from ._has_same_color import has_same_color
from ._sample_grid import SampleGrid
from ._sample_set import SampleSet
from ._sample_set_2d import SampleSet2D
from ._two_sided_material import Material, TwoSidedMaterial

__all__ = [
    "Brdf",
    "ColorModel",
    "ColorModelMismatchError",
    "DimensionMismatchError",
    "Material",
    "SampleGrid",
    "SampleSet",
    "SampleSet2D",
    "SourceType",
    "TwoSidedMaterial",
    "has_same_color",
]
