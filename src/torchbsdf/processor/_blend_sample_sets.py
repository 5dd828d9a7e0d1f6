import logging
from typing import Union

import torch
from torch import Tensor

from ..brdf import ColorModelMismatchError, SampleGrid, SourceType, has_same_color
from ..interpolation import is_equal, lerp

logger = logging.getLogger(__name__)


def blend_sample_sets(
    samples0: SampleGrid,
    samples1: SampleGrid,
    weight: Union[Tensor, float],
) -> SampleGrid:
    """
    Linearly blend the spectra of two sample sets on the same grid.

    Parameters
    ----------
    samples0, samples1 : SampleSet or SampleSet2D
        Sets of the same type, color and angle grids. Not modified.
    weight : Tensor or float
        Blend weight, 0 selects ``samples0`` and 1 ``samples1``. Tensors
        broadcast against the spectra.

    Returns
    -------
    SampleSet or SampleSet2D
        A new set with the grids of ``samples0``, marked
        :attr:`SourceType.EDITED`.

    Raises
    ------
    ColorModelMismatchError
        If the sets differ in color model or wavelengths.
    ValueError
        If the sets differ in type or angle grids.
    """
    if not has_same_color(samples0, samples1):
        raise ColorModelMismatchError(
            "cannot blend sample sets with different colors",
            color_models=(samples0.color_model, samples1.color_model),
        )

    if type(samples0) is not type(samples1):
        raise ValueError(
            f"cannot blend a {type(samples0).__name__} with a "
            f"{type(samples1).__name__}"
        )

    if samples0.num_angles != samples1.num_angles:
        raise ValueError(
            f"angle counts differ: {samples0.num_angles}, {samples1.num_angles}"
        )

    for dim in range(len(samples0.num_angles)):
        angles0 = samples0.get_angles(dim)
        angles1 = samples1.get_angles(dim).to(angles0.dtype)
        if not bool(torch.all(is_equal(angles0, angles1))):
            raise ValueError(f"angles of dimension {dim} differ")

    blended = samples0.clone()
    blended.set_spectra(
        lerp(samples0.spectra, samples1.spectra.to(samples0.dtype), weight)
    )
    blended.source_type = SourceType.EDITED

    logger.debug("Blended %s %s", type(samples0).__name__, samples0.num_angles)

    return blended
