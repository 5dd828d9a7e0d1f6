import logging
from typing import Sequence, Type, Union

import torch

from ..brdf import Brdf
from ..coordinate_system import (
    CoordinateSystem,
    fix_downward_direction,
    is_downward_direction,
)
from ..sampler import get_spectrum

logger = logging.getLogger(__name__)


def convert_brdf(
    brdf: Brdf,
    coordinate_system: Type[CoordinateSystem],
    num_angles0: int,
    num_angles1: int,
    num_angles2: int,
    num_angles3: int,
    *,
    interpolation: Union[str, Sequence[str]] = "linear",
) -> Brdf:
    """
    Resample a Brdf onto an equal-interval grid of another coordinate system.

    Parameters
    ----------
    brdf : Brdf
        Source data. Not modified.
    coordinate_system : type of CoordinateSystem
        Coordinate system of the result.
    num_angles0, num_angles1, num_angles2, num_angles3 : int
        Angle counts of the result.
    interpolation : str or sequence of str, optional
        Policy used to sample ``brdf``, one entry per source dimension.

    Returns
    -------
    Brdf
        New Brdf with the color model, wavelengths and source type of
        ``brdf``. Nodes whose incoming direction points below the surface
        are zero. Incoming directions within rounding error of the horizon
        are projected onto it.

    Examples
    --------
    >>> specular = convert_brdf(brdf, SpecularCoordinateSystem, 10, 1, 19, 37)
    >>> specular.coordinate_system.NAME
    'specular'
    """
    samples = brdf.sample_set

    converted = Brdf.create(
        coordinate_system,
        num_angles0,
        num_angles1,
        num_angles2,
        num_angles3,
        samples.color_model,
        samples.num_wavelengths,
        dtype=samples.dtype,
        device=samples.device,
    )
    converted_samples = converted.sample_set
    converted_samples.set_wavelengths(samples.wavelengths)

    in_dir, out_dir = converted.grid_directions()
    downward = is_downward_direction(in_dir)
    in_dir = fix_downward_direction(in_dir)

    spectra = get_spectrum(brdf, in_dir, out_dir, interpolation=interpolation)
    spectra = torch.where(downward.unsqueeze(-1), torch.zeros_like(spectra), spectra)

    converted_samples.set_spectra(spectra)
    converted_samples.source_type = samples.source_type

    logger.info(
        "Converted %s %s to %s %s",
        brdf.coordinate_system.NAME,
        samples.num_angles,
        coordinate_system.NAME,
        converted_samples.num_angles,
    )

    return converted
