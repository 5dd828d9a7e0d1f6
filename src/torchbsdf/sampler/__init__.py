"""Reconstruction of spectra at arbitrary directions from sampled data."""

from ._angle_bracket import AngleBracket
from ._extrapolation_error import ExtrapolationError
from ._get_spectrum import get_spectrum, get_value
from ._interpolate_spectrum import interpolate_spectrum
from ._invalid_direction_error import InvalidDirectionError
from ._locate_bracket import locate_bracket

__all__ = [
    "AngleBracket",
    "ExtrapolationError",
    "InvalidDirectionError",
    "get_spectrum",
    "get_value",
    "interpolate_spectrum",
    "locate_bracket",
]
