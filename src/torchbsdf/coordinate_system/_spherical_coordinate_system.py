import math
from typing import Tuple, Union

from torch import Tensor

from ..interpolation._as_floating_tensors import as_floating_tensors
from ._coordinate_system import Angles, CoordinateSystem
from ._spherical_geometry import (
    check_direction,
    spherical_to_xyz,
    wrap_azimuth,
    xyz_to_spherical,
)


class SphericalCoordinateSystem(CoordinateSystem):
    r"""Polar and azimuthal angles of the incoming and outgoing directions.

    .. math::
        \omega = (\sin\theta\cos\phi, \sin\theta\sin\phi, \cos\theta)

    The isotropic form measures the outgoing azimuth relative to the
    incoming azimuth. At the pole the azimuth is 0.
    """

    NAME = "spherical"
    ANGLE_NAMES = (
        "incoming polar angle",
        "incoming azimuthal angle",
        "outgoing polar angle",
        "outgoing azimuthal angle",
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
        in_theta, in_phi, out_theta, out_phi = cls._prepare_angles(
            angle0, angle1, angle2, angle3
        )

        return (
            spherical_to_xyz(in_theta, in_phi),
            spherical_to_xyz(out_theta, out_phi),
        )

    @classmethod
    def from_xyz(cls, in_dir: Tensor, out_dir: Tensor) -> Angles:
        in_dir, out_dir = cls._prepare_directions(in_dir, out_dir)

        in_theta, in_phi = xyz_to_spherical(in_dir)
        out_theta, out_phi = xyz_to_spherical(out_dir)

        return in_theta, in_phi, out_theta, out_phi

    @classmethod
    def from_xyz_isotropic(
        cls,
        in_dir: Tensor,
        out_dir: Tensor,
    ) -> Tuple[Tensor, Tensor, Tensor]:
        in_theta, in_phi, out_theta, out_phi = cls.from_xyz(in_dir, out_dir)

        return in_theta, out_theta, wrap_azimuth(out_phi - in_phi)

    @classmethod
    def to_xyz_direction(
        cls,
        theta: Union[Tensor, float],
        phi: Union[Tensor, float],
    ) -> Tensor:
        """Convert one polar/azimuth pair to a direction of shape (..., 3)."""
        theta, phi = cls._prepare_angles(theta, phi)

        return spherical_to_xyz(theta, phi)

    @classmethod
    def from_xyz_direction(cls, direction: Tensor) -> Tuple[Tensor, Tensor]:
        """Convert one direction to ``(theta, phi)``."""
        direction, = as_floating_tensors(direction)
        check_direction("direction", direction)

        return xyz_to_spherical(direction)
