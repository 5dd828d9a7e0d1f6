import logging
from typing import Optional, Sequence, Tuple, Type, Union

import torch
from torch import Tensor

from ..coordinate_system import CoordinateSystem
from ._color_model import ColorModel
from ._sample_set import SampleSet

logger = logging.getLogger(__name__)


class Brdf:
    """A sample set bound to the coordinate system its angles live in.

    The Brdf owns its :class:`SampleSet` and delegates angle/direction
    conversion to the coordinate system class. It holds no interpolation
    logic; :mod:`torchbsdf.sampler` reconstructs values from it.

    Parameters
    ----------
    sample_set : SampleSet
        Samples, owned by the Brdf from now on.
    coordinate_system : type of CoordinateSystem
        Parameterization of the sample set's four angle dimensions.

    See Also
    --------
    Brdf.create : Allocate a Brdf with a fresh equal-interval grid.
    """

    def __init__(
        self,
        sample_set: SampleSet,
        coordinate_system: Type[CoordinateSystem],
    ):
        if not isinstance(sample_set, SampleSet):
            raise TypeError(
                f"sample_set must be a SampleSet, got {type(sample_set).__name__}"
            )
        if not (
            isinstance(coordinate_system, type)
            and issubclass(coordinate_system, CoordinateSystem)
        ):
            raise TypeError(
                f"coordinate_system must be a CoordinateSystem subclass, "
                f"got {coordinate_system!r}"
            )

        self._sample_set = sample_set
        self._coordinate_system = coordinate_system

    @classmethod
    def create(
        cls,
        coordinate_system: Type[CoordinateSystem],
        num_angles0: int = 1,
        num_angles1: int = 1,
        num_angles2: int = 1,
        num_angles3: int = 1,
        color_model: Union[ColorModel, str] = ColorModel.MONOCHROMATIC,
        num_wavelengths: Optional[int] = None,
        *,
        equal_interval_angles: bool = True,
        dtype: Optional[torch.dtype] = None,
        device: Optional[Union[torch.device, str]] = None,
    ) -> "Brdf":
        """Allocate a Brdf and its sample set.

        With ``equal_interval_angles`` every grid is a uniform subdivision
        of ``[0, MAX_ANGLES[dim]]`` of the coordinate system.

        Examples
        --------
        >>> brdf = Brdf.create(SphericalCoordinateSystem, 10, 1, 10, 37)
        >>> brdf.sample_set.is_isotropic()
        True
        """
        sample_set = SampleSet(
            num_angles0,
            num_angles1,
            num_angles2,
            num_angles3,
            color_model,
            num_wavelengths,
            dtype=dtype,
            device=device,
        )
        brdf = cls(sample_set, coordinate_system)

        if equal_interval_angles:
            brdf.initialize_equal_interval_angles()

        return brdf

    @property
    def sample_set(self) -> SampleSet:
        return self._sample_set

    @property
    def coordinate_system(self) -> Type[CoordinateSystem]:
        return self._coordinate_system

    @property
    def max_angles(self) -> Tuple[float, float, float, float]:
        return self._coordinate_system.MAX_ANGLES

    def is_isotropic(self) -> bool:
        return self._sample_set.is_isotropic()

    def to_xyz(
        self,
        angle0: Union[Tensor, float],
        angle1: Union[Tensor, float],
        angle2: Union[Tensor, float],
        angle3: Union[Tensor, float],
    ) -> Tuple[Tensor, Tensor]:
        return self._coordinate_system.to_xyz(angle0, angle1, angle2, angle3)

    def from_xyz(
        self,
        in_dir: Tensor,
        out_dir: Tensor,
    ) -> Tuple[Tensor, Tensor, Tensor, Tensor]:
        return self._coordinate_system.from_xyz(in_dir, out_dir)

    def from_xyz_isotropic(
        self,
        in_dir: Tensor,
        out_dir: Tensor,
    ) -> Tuple[Tensor, Tensor, Tensor]:
        return self._coordinate_system.from_xyz_isotropic(in_dir, out_dir)

    def get_directions(
        self,
        index0: int,
        index1: int,
        index2: int,
        index3: int,
    ) -> Tuple[Tensor, Tensor]:
        """Return ``(in_dir, out_dir)`` of a grid node."""
        samples = self._sample_set

        return self.to_xyz(
            samples.get_angles(0)[index0],
            samples.get_angles(1)[index1],
            samples.get_angles(2)[index2],
            samples.get_angles(3)[index3],
        )

    def grid_directions(self) -> Tuple[Tensor, Tensor]:
        """Return directions of every node, each of shape (*num_angles, 3)."""
        samples = self._sample_set
        angles = torch.meshgrid(
            *(samples.get_angles(dim) for dim in range(4)),
            indexing="ij",
        )

        return self.to_xyz(*angles)

    def get_spectrum(
        self,
        in_dir: Tensor,
        out_dir: Tensor,
        *,
        interpolation: Union[str, Sequence[str]] = "linear",
        extrapolate: str = "extrapolate",
    ) -> Tensor:
        """Interpolated spectra at direction pairs, shape (..., num_wavelengths)."""
        from ..sampler import get_spectrum

        return get_spectrum(
            self,
            in_dir,
            out_dir,
            interpolation=interpolation,
            extrapolate=extrapolate,
        )

    def initialize_equal_interval_angles(self) -> None:
        """Fill every grid with a uniform subdivision of its full range."""
        samples = self._sample_set

        for dim, max_angle in enumerate(self.max_angles):
            count = samples.num_angles[dim]
            angles = torch.linspace(0.0, max_angle, count, dtype=samples.dtype)
            samples.set_angles(dim, angles)

        logger.debug(
            "Initialized equal-interval %s angles %s",
            self._coordinate_system.NAME,
            samples.num_angles,
        )

    def clamp_angles(self) -> None:
        """Clamp the grids to the coordinate system's angle ranges."""
        self._sample_set.clamp_angles(self.max_angles)

    def clone(self) -> "Brdf":
        return Brdf(self._sample_set.clone(), self._coordinate_system)
