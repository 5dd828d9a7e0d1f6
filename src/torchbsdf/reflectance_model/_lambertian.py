import math
from typing import Dict

import torch
from torch import Tensor

from ..coordinate_system._spherical_geometry import check_direction
from ..interpolation._as_floating_tensors import as_floating_tensors
from ._reflectance_model import ReflectanceModel


class Lambertian(ReflectanceModel):
    r"""Ideal diffuse reflection.

    .. math::
        f_r = \frac{\rho}{\pi}

    for incoming and outgoing directions above the surface, 0 otherwise.

    Parameters
    ----------
    reflectance : float
        Albedo :math:`\rho` in [0, 1].
    """

    name = "Lambertian"

    def __init__(self, reflectance: float):
        if not 0.0 <= reflectance <= 1.0:
            raise ValueError(f"reflectance must be in [0, 1], got {reflectance}")

        self.reflectance = float(reflectance)

    @property
    def parameters(self) -> Dict[str, float]:
        return {"reflectance": self.reflectance}

    def get_value(self, in_dir: Tensor, out_dir: Tensor) -> Tensor:
        in_dir, out_dir = as_floating_tensors(in_dir, out_dir)
        check_direction("in_dir", in_dir)
        check_direction("out_dir", out_dir)

        above = (in_dir[..., 2] > 0.0) & (out_dir[..., 2] > 0.0)
        value = torch.full_like(above, self.reflectance / math.pi, dtype=in_dir.dtype)

        return torch.where(above, value, torch.zeros_like(value))
