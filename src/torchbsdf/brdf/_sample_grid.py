"""Angle grids, wavelengths and spectra shared by the sample containers."""

import copy
import logging
from typing import List, Optional, Sequence, Tuple, Union

import torch
from torch import Tensor

from ..interpolation import is_equal_interval
from ._color_model import ColorModel, SourceType
from ._dimension_mismatch_error import DimensionMismatchError

logger = logging.getLogger(__name__)


def _check_counts(counts: Sequence[int]) -> None:
    for dim, count in enumerate(counts):
        if int(count) != count or count < 1:
            raise ValueError(
                f"number of angles in dimension {dim} must be a positive "
                f"integer, got {count}"
            )


def _resolve_num_wavelengths(
    color_model: ColorModel,
    num_wavelengths: Optional[int],
) -> int:
    fixed = color_model.num_wavelengths

    if fixed is None:
        if num_wavelengths is None or int(num_wavelengths) != num_wavelengths:
            raise ValueError(
                "spectral sample sets need an explicit number of wavelengths"
            )
        if num_wavelengths < 1:
            raise ValueError(
                f"number of wavelengths must be positive, got {num_wavelengths}"
            )
        return int(num_wavelengths)

    if num_wavelengths is not None and num_wavelengths != fixed:
        raise ValueError(
            f"{color_model.value} sample sets have {fixed} wavelength(s), "
            f"got {num_wavelengths}"
        )
    return fixed


class SampleGrid:
    """Spectra sampled on the Cartesian product of per-dimension angle grids.

    Stores one strictly increasing angle tensor per dimension, a spectra
    tensor of shape ``(*num_angles, num_wavelengths)`` whose row-major order
    follows the dimension order, and the shared wavelength axis.

    Every method that mutates angles recomputes the cached equal-interval
    flags. Angles are never clamped implicitly; call :meth:`clamp_angles`.
    """

    _RELATIVE_AZIMUTH_DIMENSION = 1

    def __init__(
        self,
        num_angles: Sequence[int],
        color_model: Union[ColorModel, str] = ColorModel.MONOCHROMATIC,
        num_wavelengths: Optional[int] = None,
        *,
        dtype: Optional[torch.dtype] = None,
        device: Optional[Union[torch.device, str]] = None,
    ):
        _check_counts(num_angles)
        color_model = ColorModel(color_model)
        num_wavelengths = _resolve_num_wavelengths(color_model, num_wavelengths)

        if dtype is None:
            dtype = torch.get_default_dtype()

        self._color_model = color_model
        self._dtype = dtype
        self._device = torch.device("cpu") if device is None else torch.device(device)

        self._angles: List[Tensor] = [
            torch.zeros(int(count), dtype=dtype, device=self._device)
            for count in num_angles
        ]
        self._equal_interval: List[bool] = [False] * len(num_angles)
        self._wavelengths = torch.zeros(
            num_wavelengths, dtype=dtype, device=self._device
        )
        self._spectra = torch.zeros(
            *(int(count) for count in num_angles),
            num_wavelengths,
            dtype=dtype,
            device=self._device,
        )

        self.source_type = SourceType.UNKNOWN

        logger.debug(
            "Created %s with angles %s and %d %s wavelength(s)",
            type(self).__name__,
            self.num_angles,
            num_wavelengths,
            color_model.value,
        )

    @property
    def color_model(self) -> ColorModel:
        return self._color_model

    @property
    def dtype(self) -> torch.dtype:
        return self._dtype

    @property
    def device(self) -> torch.device:
        return self._device

    @property
    def num_angles(self) -> Tuple[int, ...]:
        return tuple(angles.shape[0] for angles in self._angles)

    @property
    def num_wavelengths(self) -> int:
        return self._wavelengths.shape[0]

    @property
    def wavelengths(self) -> Tensor:
        return self._wavelengths

    @property
    def spectra(self) -> Tensor:
        """Spectra tensor of shape ``(*num_angles, num_wavelengths)``."""
        return self._spectra

    def get_angles(self, dim: int) -> Tensor:
        """Return the angle grid of a dimension.

        The tensor is the stored grid. Call :meth:`update_angle_attributes`
        after modifying it in place.
        """
        return self._angles[dim]

    def set_angles(self, dim: int, angles: Union[Tensor, Sequence[float]]) -> None:
        """Replace the angle grid of a dimension with one of the same length."""
        angles = torch.as_tensor(angles, dtype=self._dtype, device=self._device)

        expected = self._angles[dim].shape[0]
        if angles.shape != (expected,):
            raise ValueError(
                f"angles of dimension {dim} must have shape ({expected},), "
                f"got {tuple(angles.shape)}; use resize_angles to change counts"
            )

        self._angles[dim] = angles.clone()
        self._equal_interval[dim] = is_equal_interval(self._angles[dim])

    def set_angle(self, dim: int, index: int, angle: float) -> None:
        self._angles[dim][index] = angle
        self._equal_interval[dim] = is_equal_interval(self._angles[dim])

    def is_equal_interval(self, dim: int) -> bool:
        return self._equal_interval[dim]

    def update_angle_attributes(self) -> None:
        """Recompute the equal-interval flags of all dimensions."""
        for dim, angles in enumerate(self._angles):
            self._equal_interval[dim] = is_equal_interval(angles)
            logger.info(
                "%s dimension %d equal interval: %s",
                type(self).__name__,
                dim,
                self._equal_interval[dim],
            )

    def set_wavelengths(self, wavelengths: Union[Tensor, Sequence[float]]) -> None:
        wavelengths = torch.as_tensor(
            wavelengths, dtype=self._dtype, device=self._device
        )

        if wavelengths.shape != self._wavelengths.shape:
            raise ValueError(
                f"wavelengths must have shape {tuple(self._wavelengths.shape)}, "
                f"got {tuple(wavelengths.shape)}"
            )

        self._wavelengths = wavelengths.clone()

    def set_wavelength(self, index: int, wavelength: float) -> None:
        self._wavelengths[index] = wavelength

    def set_spectra(self, spectra: Tensor) -> None:
        """Replace all spectra with a tensor of shape ``spectra.shape``."""
        spectra = torch.as_tensor(spectra, dtype=self._dtype, device=self._device)

        if spectra.shape != self._spectra.shape:
            raise ValueError(
                f"spectra must have shape {tuple(self._spectra.shape)}, "
                f"got {tuple(spectra.shape)}"
            )

        self._spectra = spectra.clone()

    def resize_angles(self, *num_angles: int) -> None:
        """Reallocate the grid with new angle counts.

        All angles and spectra are discarded and zero-filled.
        """
        if len(num_angles) != len(self._angles):
            raise ValueError(
                f"expected {len(self._angles)} angle counts, got {len(num_angles)}"
            )
        _check_counts(num_angles)

        self._angles = [
            torch.zeros(int(count), dtype=self._dtype, device=self._device)
            for count in num_angles
        ]
        self._spectra = torch.zeros(
            *(int(count) for count in num_angles),
            self.num_wavelengths,
            dtype=self._dtype,
            device=self._device,
        )
        self._equal_interval = [
            is_equal_interval(angles) for angles in self._angles
        ]

        logger.debug("Resized %s angles to %s", type(self).__name__, self.num_angles)

    def resize_wavelengths(self, num_wavelengths: int) -> None:
        """Reallocate the wavelength axis; all spectra become zero."""
        num_wavelengths = _resolve_num_wavelengths(self._color_model, num_wavelengths)

        self._wavelengths = torch.zeros(
            num_wavelengths, dtype=self._dtype, device=self._device
        )
        self._spectra = torch.zeros(
            *self.num_angles,
            num_wavelengths,
            dtype=self._dtype,
            device=self._device,
        )

        logger.debug(
            "Resized %s wavelengths to %d", type(self).__name__, num_wavelengths
        )

    def clamp_angles(self, max_angles: Sequence[float]) -> None:
        """Clamp every grid to ``[0, max_angles[dim]]``."""
        if len(max_angles) != len(self._angles):
            raise ValueError(
                f"expected {len(self._angles)} maximum angles, got {len(max_angles)}"
            )

        for dim, max_angle in enumerate(max_angles):
            self._angles[dim] = torch.clamp(self._angles[dim], 0.0, max_angle)
            self._equal_interval[dim] = is_equal_interval(self._angles[dim])

        logger.debug("Clamped %s angles to %s", type(self).__name__, tuple(max_angles))

    def check_consistency(self) -> None:
        """Raise DimensionMismatchError if spectra and grids disagree."""
        expected_shape = (*self.num_angles, self.num_wavelengths)

        if self._spectra.dim() != len(expected_shape):
            raise DimensionMismatchError(
                f"spectra must have {len(expected_shape)} dimensions, "
                f"got {self._spectra.dim()}",
                expected=len(expected_shape),
                actual=self._spectra.dim(),
            )

        for dim, (expected, actual) in enumerate(
            zip(expected_shape, self._spectra.shape)
        ):
            if expected != actual:
                raise DimensionMismatchError(
                    f"spectra dimension {dim} has {actual} entries, "
                    f"the grid expects {expected}",
                    dimension=dim,
                    expected=expected,
                    actual=actual,
                )

    def is_isotropic(self) -> bool:
        """Return True if the relative-azimuth dimension holds one angle."""
        return self._angles[self._RELATIVE_AZIMUTH_DIMENSION].shape[0] == 1

    def clone(self):
        """Return a deep copy owning its own tensors."""
        return copy.deepcopy(self)

    def _check_spectrum(self, spectrum: Union[Tensor, Sequence[float]]) -> Tensor:
        spectrum = torch.as_tensor(spectrum, dtype=self._dtype, device=self._device)

        if spectrum.shape != (self.num_wavelengths,):
            raise ValueError(
                f"spectrum must have shape ({self.num_wavelengths},), "
                f"got {tuple(spectrum.shape)}"
            )

        return spectrum
