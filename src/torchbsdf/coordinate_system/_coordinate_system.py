"""Abstract interface shared by the four-angle coordinate systems."""

import abc
from typing import ClassVar, Tuple, Union

import torch
from torch import Tensor

from ..interpolation._as_floating_tensors import as_floating_tensors
from ._spherical_geometry import check_direction

Angles = Tuple[Tensor, Tensor, Tensor, Tensor]


class CoordinateSystem(abc.ABC):
    """Mapping between direction pairs and four-angle tuples.

    Concrete coordinate systems are used as classes and never instantiated:
    a :class:`~torchbsdf.brdf.Brdf` stores the class itself as its
    coordinate system tag.

    Attributes
    ----------
    NAME : str
        Human-readable name.
    ANGLE_NAMES : tuple of str
        Names of angle0 to angle3.
    MAX_ANGLES : tuple of float
        Upper bound of each angle in radians. All lower bounds are 0.

    Notes
    -----
    Directions are unit vectors in the local surface frame with the normal
    along +z. Incoming directions must satisfy ``z >= 0``; outgoing
    directions below the surface are converted with each system's own sign
    convention.
    """

    NAME: ClassVar[str]
    ANGLE_NAMES: ClassVar[Tuple[str, str, str, str]]
    MAX_ANGLES: ClassVar[Tuple[float, float, float, float]]

    def __init__(self):
        raise TypeError(f"{type(self).__name__} is used as a class, not an instance")

    @classmethod
    @abc.abstractmethod
    def to_xyz(
        cls,
        angle0: Union[Tensor, float],
        angle1: Union[Tensor, float],
        angle2: Union[Tensor, float],
        angle3: Union[Tensor, float],
    ) -> Tuple[Tensor, Tensor]:
        """Convert angles to ``(in_dir, out_dir)``, each of shape (..., 3)."""

    @classmethod
    @abc.abstractmethod
    def from_xyz(cls, in_dir: Tensor, out_dir: Tensor) -> Angles:
        """Convert a direction pair to ``(angle0, angle1, angle2, angle3)``."""

    @classmethod
    def from_xyz_isotropic(
        cls,
        in_dir: Tensor,
        out_dir: Tensor,
    ) -> Tuple[Tensor, Tensor, Tensor]:
        """Convert a direction pair to ``(angle0, angle2, angle3)``.

        The relative-azimuth angle1 is dropped. Systems whose angle2 and
        angle3 already depend on angle1 override this method.
        """
        angle0, _, angle2, angle3 = cls.from_xyz(in_dir, out_dir)

        return angle0, angle2, angle3

    @staticmethod
    def _prepare_angles(*angles: Union[Tensor, float]) -> Tuple[Tensor, ...]:
        return tuple(torch.broadcast_tensors(*as_floating_tensors(*angles)))

    @staticmethod
    def _prepare_directions(
        in_dir: Tensor,
        out_dir: Tensor,
    ) -> Tuple[Tensor, Tensor]:
        in_dir, out_dir = as_floating_tensors(in_dir, out_dir)
        check_direction("in_dir", in_dir)
        check_direction("out_dir", out_dir)

        return tuple(torch.broadcast_tensors(in_dir, out_dir))
