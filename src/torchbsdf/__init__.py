"""torchbsdf: PyTorch containers and samplers for measured reflectance data."""

import logging

from . import (
    brdf,
    coordinate_system,
    interpolation,
    processor,
    reflectance_model,
    sampler,
)
from ._bsdf_error import BsdfError

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "BsdfError",
    "brdf",
    "coordinate_system",
    "interpolation",
    "processor",
    "reflectance_model",
    "sampler",
]

__version__ = "0.1.0"
