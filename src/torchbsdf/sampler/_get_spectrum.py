import operator
from typing import List, Optional, Sequence, Tuple, Type, Union

import torch
from torch import Tensor

from ..brdf import Brdf, SampleGrid, SampleSet, SampleSet2D
from ..coordinate_system import CoordinateSystem, SphericalCoordinateSystem
from ..coordinate_system._spherical_geometry import check_direction
from ..interpolation._as_floating_tensors import as_floating_tensors
from ._interpolate_spectrum import (
    check_extrapolate,
    interpolate_samples,
    resolve_interpolation,
)
from ._invalid_direction_error import InvalidDirectionError

Source = Union[Brdf, SampleSet, SampleSet2D]


def _resolve_source(
    source: Source,
    out_dir: Optional[Tensor],
    coordinate_system: Optional[Type[CoordinateSystem]],
) -> Tuple[SampleGrid, Optional[Type[CoordinateSystem]]]:
    if isinstance(source, SampleSet2D):
        if out_dir is not None:
            raise ValueError("a SampleSet2D is sampled with a single direction")
        if coordinate_system is not None:
            raise ValueError("a SampleSet2D is always spherical")
        return source, None

    if isinstance(source, Brdf):
        if (
            coordinate_system is not None
            and coordinate_system is not source.coordinate_system
        ):
            raise ValueError(
                f"Brdf uses {source.coordinate_system.NAME} coordinates, "
                f"got {coordinate_system.NAME}"
            )
        samples = source.sample_set
        coordinate_system = source.coordinate_system
    elif isinstance(source, SampleSet):
        if coordinate_system is None:
            raise ValueError("sampling a SampleSet needs a coordinate_system")
        samples = source
    else:
        raise TypeError(
            f"source must be a Brdf, SampleSet or SampleSet2D, "
            f"got {type(source).__name__}"
        )

    if out_dir is None:
        raise ValueError(f"sampling a {type(source).__name__} needs out_dir")

    return samples, coordinate_system


def _check_incoming(in_dir: Tensor) -> None:
    below = in_dir[..., 2] < 0.0

    if bool(below.any()):
        count = int(below.sum())
        raise InvalidDirectionError(
            f"{count} incoming direction(s) below the surface (z < 0)",
            count=count,
        )


def _query_angles(
    samples: SampleGrid,
    coordinate_system: Optional[Type[CoordinateSystem]],
    in_dir: Tensor,
    out_dir: Optional[Tensor],
) -> List[Tensor]:
    in_dir, = as_floating_tensors(in_dir)
    check_direction("in_dir", in_dir)
    _check_incoming(in_dir)

    if coordinate_system is None:
        if samples.is_isotropic():
            return [torch.acos(torch.clamp(in_dir[..., 2], -1.0, 1.0))]
        return list(SphericalCoordinateSystem.from_xyz_direction(in_dir))

    if samples.is_isotropic():
        return list(coordinate_system.from_xyz_isotropic(in_dir, out_dir))
    return list(coordinate_system.from_xyz(in_dir, out_dir))


def get_spectrum(
    source: Source,
    in_dir: Tensor,
    out_dir: Optional[Tensor] = None,
    *,
    coordinate_system: Optional[Type[CoordinateSystem]] = None,
    interpolation: Union[str, Sequence[str]] = "linear",
    extrapolate: str = "extrapolate",
) -> Tensor:
    """
    Sample the spectrum of a reflectance data set at directions.

    Parameters
    ----------
    source : Brdf, SampleSet or SampleSet2D
        Data to sample. A Brdf converts directions with its own coordinate
        system, a SampleSet needs ``coordinate_system`` and a SampleSet2D
        takes the spherical angles of ``in_dir`` alone.
    in_dir : Tensor
        Incoming unit directions, shape (..., 3), with ``z >= 0``.
    out_dir : Tensor, optional
        Outgoing unit directions, shape (..., 3). Required unless
        ``source`` is a SampleSet2D, in which case it must be omitted.
    coordinate_system : type of CoordinateSystem, optional
        Parameterization of a bare SampleSet.
    interpolation : str or sequence of str, optional
        Interpolation policy, see :func:`interpolate_spectrum`.
    extrapolate : str, optional
        Out-of-grid handling, see :func:`interpolate_spectrum`.

    Returns
    -------
    Tensor
        Spectra of shape (*batch, num_wavelengths), where ``batch`` is the
        broadcast shape of the directions.

    Raises
    ------
    InvalidDirectionError
        If an incoming direction has a negative z component.
    """
    samples, coordinate_system = _resolve_source(source, out_dir, coordinate_system)
    samples.check_consistency()
    policies = resolve_interpolation(interpolation, len(samples.num_angles))
    check_extrapolate(extrapolate)

    angles = _query_angles(samples, coordinate_system, in_dir, out_dir)

    return interpolate_samples(
        samples,
        samples.spectra,
        angles,
        policies,
        extrapolate,
    )


def get_value(
    source: Source,
    in_dir: Tensor,
    out_dir: Optional[Tensor] = None,
    *,
    wavelength_index: int,
    coordinate_system: Optional[Type[CoordinateSystem]] = None,
    interpolation: Union[str, Sequence[str]] = "linear",
    extrapolate: str = "extrapolate",
) -> Tensor:
    """Sample a single wavelength slot; returns shape (*batch,).

    Only the selected slot is interpolated. ``wavelength_index`` must lie in
    ``[0, num_wavelengths)``, otherwise :class:`IndexError` is raised.
    """
    samples, coordinate_system = _resolve_source(source, out_dir, coordinate_system)
    samples.check_consistency()
    policies = resolve_interpolation(interpolation, len(samples.num_angles))
    check_extrapolate(extrapolate)

    index = operator.index(wavelength_index)
    if not 0 <= index < samples.num_wavelengths:
        raise IndexError(
            f"wavelength index {index} out of range for "
            f"{samples.num_wavelengths} wavelength(s)"
        )

    angles = _query_angles(samples, coordinate_system, in_dir, out_dir)

    return interpolate_samples(
        samples,
        samples.spectra[..., index : index + 1],
        angles,
        policies,
        extrapolate,
    )[..., 0]
