"""Operations producing or transforming whole sample sets."""

from ._blend_sample_sets import blend_sample_sets
from ._convert_brdf import convert_brdf
from ._fill_spectra import fill_spectra

__all__ = [
    "blend_sample_sets",
    "convert_brdf",
    "fill_spectra",
]
