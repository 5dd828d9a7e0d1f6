import logging

import torch

from ..interpolation import is_equal
from ._color_model import ColorModel
from ._sample_grid import SampleGrid

logger = logging.getLogger(__name__)


def has_same_color(samples0: SampleGrid, samples1: SampleGrid) -> bool:
    """Return True if two sample sets share a color model and wavelengths.

    Wavelengths must match exactly for monochromatic, RGB and XYZ data and
    within :func:`~torchbsdf.interpolation.is_equal` tolerance for spectral
    data. The result is symmetric in its arguments.
    """
    same = True

    if samples0.color_model != samples1.color_model:
        logger.info(
            "Color models do not match: %s, %s",
            samples0.color_model.value,
            samples1.color_model.value,
        )
        same = False

    dtype = torch.promote_types(samples0.wavelengths.dtype, samples1.wavelengths.dtype)
    wavelengths0 = samples0.wavelengths.to(dtype)
    wavelengths1 = samples1.wavelengths.to(dtype)

    if wavelengths0.shape != wavelengths1.shape:
        matching = False
    elif samples0.color_model is ColorModel.SPECTRAL:
        matching = bool(torch.all(is_equal(wavelengths0, wavelengths1)))
    else:
        matching = torch.equal(wavelengths0, wavelengths1)

    if not matching:
        logger.info(
            "Wavelengths do not match: %s, %s",
            wavelengths0.tolist(),
            wavelengths1.tolist(),
        )
        same = False

    return same
