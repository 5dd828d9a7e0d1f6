from typing import Optional, Sequence, Union

import torch
from torch import Tensor

from ._color_model import ColorModel
from ._sample_grid import SampleGrid


class SampleSet(SampleGrid):
    """Spectra of a bidirectional function on a four-dimensional angle grid.

    Parameters
    ----------
    num_angles0, num_angles1, num_angles2, num_angles3 : int
        Number of angles in each dimension. Dimension 1 is the relative
        azimuth; a count of 1 makes the set isotropic.
    color_model : ColorModel or str, optional
        Interpretation of the wavelength axis. Default is monochromatic.
    num_wavelengths : int, optional
        Wavelength count. Required for spectral sets, implied otherwise.
    dtype : torch.dtype, optional
        Floating dtype of angles, wavelengths and spectra.
    device : torch.device or str, optional

    Examples
    --------
    >>> samples = SampleSet(4, 1, 4, 8, ColorModel.RGB)
    >>> samples.spectra.shape
    torch.Size([4, 1, 4, 8, 3])
    >>> samples.is_isotropic()
    True
    """

    def __init__(
        self,
        num_angles0: int,
        num_angles1: int,
        num_angles2: int,
        num_angles3: int,
        color_model: Union[ColorModel, str] = ColorModel.MONOCHROMATIC,
        num_wavelengths: Optional[int] = None,
        *,
        dtype: Optional[torch.dtype] = None,
        device: Optional[Union[torch.device, str]] = None,
    ):
        super().__init__(
            (num_angles0, num_angles1, num_angles2, num_angles3),
            color_model,
            num_wavelengths,
            dtype=dtype,
            device=device,
        )

    def spectrum_at(self, index0: int, index1: int, index2: int, index3: int) -> Tensor:
        """Return a view of the spectrum stored at a grid node."""
        return self._spectra[index0, index1, index2, index3]

    def set_spectrum(
        self,
        index0: int,
        index1: int,
        index2: int,
        index3: int,
        spectrum: Union[Tensor, Sequence[float]],
    ) -> None:
        self._spectra[index0, index1, index2, index3] = self._check_spectrum(spectrum)
