"""Analytic reflectance models used to generate sample data."""

from ._lambertian import Lambertian
from ._reflectance_model import ReflectanceModel
from ._ward_anisotropic import WardAnisotropic

__all__ = [
    "Lambertian",
    "ReflectanceModel",
    "WardAnisotropic",
]
