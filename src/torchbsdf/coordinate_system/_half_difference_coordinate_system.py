import logging
import math
from typing import Tuple, Union

import torch
from torch import Tensor

from ._coordinate_system import Angles, CoordinateSystem
from ._reflect import reflect
from ._spherical_geometry import (
    rotate_y,
    rotate_z,
    spherical_to_xyz,
    xyz_to_spherical,
)

logger = logging.getLogger(__name__)

_DEGENERATE_HALF_VECTOR = 1e-7


class HalfDifferenceCoordinateSystem(CoordinateSystem):
    """Half-vector and difference-vector angles.

    The half vector ``normalize(in_dir + out_dir)`` supplies ``angle0`` and
    ``angle1``; the incoming direction expressed in the frame whose pole is
    the half vector supplies ``angle2`` and ``angle3``. The isotropic form
    drops the half-vector azimuth.

    When ``in_dir + out_dir`` vanishes the half vector falls back to the
    surface normal.

    References
    ----------
    .. [1] Rusinkiewicz, S. "A New Change of Variables for Efficient BRDF
           Representation", Eurographics Workshop on Rendering, 1998.
    """

    NAME = "half-difference"
    ANGLE_NAMES = (
        "half polar angle",
        "half azimuthal angle",
        "difference polar angle",
        "difference azimuthal angle",
    )
    MAX_ANGLES = (0.5 * math.pi, 2.0 * math.pi, 0.5 * math.pi, 2.0 * math.pi)

    @classmethod
    def to_xyz(
        cls,
        angle0: Union[Tensor, float],
        angle1: Union[Tensor, float],
        angle2: Union[Tensor, float],
        angle3: Union[Tensor, float],
    ) -> Tuple[Tensor, Tensor]:
        half_theta, half_phi, diff_theta, diff_phi = cls._prepare_angles(
            angle0, angle1, angle2, angle3
        )

        half = spherical_to_xyz(half_theta, half_phi)
        diff = spherical_to_xyz(diff_theta, diff_phi)
        in_dir = rotate_z(rotate_y(diff, half_theta), half_phi)

        return in_dir, reflect(in_dir, half)

    @classmethod
    def from_xyz(cls, in_dir: Tensor, out_dir: Tensor) -> Angles:
        in_dir, out_dir = cls._prepare_directions(in_dir, out_dir)

        half = in_dir + out_dir
        norm = torch.linalg.vector_norm(half, dim=-1, keepdim=True)
        degenerate = norm < _DEGENERATE_HALF_VECTOR
        if torch.any(degenerate):
            logger.debug(
                "%d opposite direction pairs, half vector set to the normal",
                int(degenerate.sum()),
            )

        normal = torch.zeros_like(half)
        normal[..., 2] = 1.0
        half = torch.where(
            degenerate, normal, half / norm.clamp_min(_DEGENERATE_HALF_VECTOR)
        )

        half_theta, half_phi = xyz_to_spherical(half)
        diff = rotate_y(rotate_z(in_dir, -half_phi), -half_theta)
        diff_theta, diff_phi = xyz_to_spherical(diff)

        return half_theta, half_phi, diff_theta, diff_phi
