import math
from typing import Tuple, Union

from torch import Tensor

from ._coordinate_system import Angles, CoordinateSystem
from ._spherical_geometry import (
    rotate_y,
    rotate_z,
    spherical_to_xyz,
    xyz_to_spherical,
)


class SpecularCoordinateSystem(CoordinateSystem):
    """Incoming angles plus the outgoing direction around the mirror direction.

    The outgoing direction is expressed in a frame whose pole is the mirror
    reflection of the incoming direction: ``angle2`` is the angle between
    the outgoing and the specular direction and ``angle3`` the azimuth
    around it. Both are independent of the incoming azimuth, so the
    isotropic form simply drops ``angle1``.
    """

    NAME = "specular"
    ANGLE_NAMES = (
        "incoming polar angle",
        "incoming azimuthal angle",
        "specular polar angle",
        "specular azimuthal angle",
    )
    MAX_ANGLES = (0.5 * math.pi, 2.0 * math.pi, math.pi, 2.0 * math.pi)

    @classmethod
    def to_xyz(
        cls,
        angle0: Union[Tensor, float],
        angle1: Union[Tensor, float],
        angle2: Union[Tensor, float],
        angle3: Union[Tensor, float],
    ) -> Tuple[Tensor, Tensor]:
        in_theta, in_phi, spec_theta, spec_phi = cls._prepare_angles(
            angle0, angle1, angle2, angle3
        )

        in_dir = spherical_to_xyz(in_theta, in_phi)
        local = spherical_to_xyz(spec_theta, spec_phi)
        out_dir = rotate_z(rotate_y(local, -in_theta), in_phi)

        return in_dir, out_dir

    @classmethod
    def from_xyz(cls, in_dir: Tensor, out_dir: Tensor) -> Angles:
        in_dir, out_dir = cls._prepare_directions(in_dir, out_dir)

        in_theta, in_phi = xyz_to_spherical(in_dir)
        local = rotate_y(rotate_z(out_dir, -in_phi), in_theta)
        spec_theta, spec_phi = xyz_to_spherical(local)

        return in_theta, in_phi, spec_theta, spec_phi
