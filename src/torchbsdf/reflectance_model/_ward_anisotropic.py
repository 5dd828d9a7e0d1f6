import math
from typing import Dict

import torch
from torch import Tensor

from ..coordinate_system._spherical_geometry import check_direction
from ..interpolation._as_floating_tensors import as_floating_tensors
from ._reflectance_model import ReflectanceModel


class WardAnisotropic(ReflectanceModel):
    r"""Ward anisotropic reflectance model.

    With the half vector :math:`h` of the two directions and the frame
    :math:`N = +z`, :math:`T = +x`, :math:`B = -y`:

    .. math::
        f_r = \frac{1}{\sqrt{(l \cdot N)(v \cdot N)}}
            \frac{\exp\left(-2 \frac{(h \cdot T / \alpha_x)^2
                + (h \cdot B / \alpha_y)^2}{1 + h \cdot N}\right)}
            {4 \pi \alpha_x \alpha_y}

    The value is 0 where either direction lies on or below the surface.

    Parameters
    ----------
    roughness_x, roughness_y : float
        Positive roughness along the tangent and binormal.

    References
    ----------
    .. [1] G. J. Ward, "Measuring and modeling anisotropic reflection",
           SIGGRAPH 1992.
    .. [2] B. Walter, "Notes on the Ward BRDF", Technical Report
           PCG-05-06, Cornell University, 2005.
    """

    name = "Ward anisotropic"

    def __init__(self, roughness_x: float, roughness_y: float):
        if roughness_x <= 0.0 or roughness_y <= 0.0:
            raise ValueError(
                f"roughness must be positive, got ({roughness_x}, {roughness_y})"
            )

        self.roughness_x = float(roughness_x)
        self.roughness_y = float(roughness_y)

    @property
    def parameters(self) -> Dict[str, float]:
        return {"roughness_x": self.roughness_x, "roughness_y": self.roughness_y}

    def is_isotropic(self) -> bool:
        return False

    def get_value(self, in_dir: Tensor, out_dir: Tensor) -> Tensor:
        in_dir, out_dir = as_floating_tensors(in_dir, out_dir)
        check_direction("in_dir", in_dir)
        check_direction("out_dir", out_dir)
        in_dir, out_dir = torch.broadcast_tensors(in_dir, out_dir)

        dot_ln = in_dir[..., 2]
        dot_vn = out_dir[..., 2]
        above = (dot_ln > 0.0) & (dot_vn > 0.0)

        half = in_dir + out_dir
        half = half / torch.linalg.vector_norm(half, dim=-1, keepdim=True).clamp_min(
            torch.finfo(half.dtype).tiny
        )
        dot_hn = half[..., 2]
        dot_ht = half[..., 0]
        dot_hb = -half[..., 1]

        exponent = (
            -2.0
            * ((dot_ht / self.roughness_x) ** 2 + (dot_hb / self.roughness_y) ** 2)
            / (1.0 + dot_hn)
        )

        safe_cos = torch.where(above, dot_ln * dot_vn, torch.ones_like(dot_ln))
        value = (
            torch.rsqrt(safe_cos)
            * torch.exp(exponent)
            / (4.0 * math.pi * self.roughness_x * self.roughness_y)
        )

        return torch.where(above, value, torch.zeros_like(value))
