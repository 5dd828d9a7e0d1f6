from typing import Optional, Sequence, Tuple, Union

import torch
from torch import Tensor

from ..coordinate_system import SphericalCoordinateSystem
from ._color_model import ColorModel
from ._sample_grid import SampleGrid


class SampleSet2D(SampleGrid):
    """Spectra of a function of one direction on a polar/azimuth grid.

    Used for quantities such as specular reflectance or emission that
    depend on a single direction. Angles are spherical: theta in
    [0, pi/2] and phi in [0, 2pi].

    Parameters
    ----------
    num_theta, num_phi : int
        Number of polar and azimuthal angles. One azimuth makes the set
        isotropic.
    color_model : ColorModel or str, optional
    num_wavelengths : int, optional
    equal_interval_angles : bool, optional
        Fill both grids with uniform subdivisions of their full range.
    dtype : torch.dtype, optional
    device : torch.device or str, optional
    """

    def __init__(
        self,
        num_theta: int,
        num_phi: int,
        color_model: Union[ColorModel, str] = ColorModel.MONOCHROMATIC,
        num_wavelengths: Optional[int] = None,
        *,
        equal_interval_angles: bool = False,
        dtype: Optional[torch.dtype] = None,
        device: Optional[Union[torch.device, str]] = None,
    ):
        super().__init__(
            (num_theta, num_phi),
            color_model,
            num_wavelengths,
            dtype=dtype,
            device=device,
        )

        if equal_interval_angles:
            max_theta, max_phi = self.max_angles
            self.set_angles(
                0, torch.linspace(0.0, max_theta, num_theta, dtype=self.dtype)
            )
            self.set_angles(
                1, torch.linspace(0.0, max_phi, num_phi, dtype=self.dtype)
            )

    @property
    def max_angles(self) -> Tuple[float, float]:
        max_angles = SphericalCoordinateSystem.MAX_ANGLES
        return max_angles[0], max_angles[1]

    @property
    def num_theta(self) -> int:
        return self.num_angles[0]

    @property
    def num_phi(self) -> int:
        return self.num_angles[1]

    @property
    def theta_angles(self) -> Tensor:
        return self.get_angles(0)

    @property
    def phi_angles(self) -> Tensor:
        return self.get_angles(1)

    def spectrum_at(self, theta_index: int, phi_index: int) -> Tensor:
        """Return a view of the spectrum stored at a grid node."""
        return self._spectra[theta_index, phi_index]

    def set_spectrum(
        self,
        theta_index: int,
        phi_index: int,
        spectrum: Union[Tensor, Sequence[float]],
    ) -> None:
        self._spectra[theta_index, phi_index] = self._check_spectrum(spectrum)

    def clamp_angles(self, max_angles: Optional[Sequence[float]] = None) -> None:
        """Clamp theta and phi, by default to the spherical maxima."""
        super().clamp_angles(self.max_angles if max_angles is None else max_angles)

    def get_spectrum(self, in_dir: Tensor) -> Tensor:
        """Linearly interpolated spectrum at directions of shape (..., 3)."""
        from ..sampler import get_spectrum

        return get_spectrum(self, in_dir)
