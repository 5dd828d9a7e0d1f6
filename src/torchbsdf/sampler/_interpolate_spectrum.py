"""Reconstruction of spectra at arbitrary angles from a sample grid."""

from typing import Callable, List, NamedTuple, Sequence, Union

import torch
from torch import Tensor

from ..brdf import SampleGrid
from ..interpolation import (
    catmull_rom_spline,
    centripetal_catmull_rom_spline,
    hermite_interpolation3,
    hermite_interpolation5,
    lerp,
)
from ..interpolation._as_floating_tensors import as_floating_tensors
from ._extrapolation_error import ExtrapolationError
from ._locate_bracket import locate_bracket

_INTERPOLATIONS = ("linear", "hermite3", "hermite5", "spline")

_EXTRAPOLATIONS = ("extrapolate", "clamp", "error")

_RELATIVE_AZIMUTH_DIMENSION = 1

_HERMITE_KERNELS = {
    "hermite3": hermite_interpolation3,
    "hermite5": hermite_interpolation5,
}


class _Stencil(NamedTuple):
    # Node indices of shape (batch, k) and the reduction of a block whose
    # axis -2 holds the k gathered nodes.
    indices: Tensor
    reduce: Callable[[Tensor], Tensor]


def _expand(parameter: Tensor, values: Tensor) -> Tensor:
    # (batch,) -> (batch, 1, ..., 1) broadcasting against values[..., i, :]
    return parameter.reshape(parameter.shape[0], *([1] * (values.dim() - 2)))


def resolve_interpolation(
    interpolation: Union[str, Sequence[str]],
    ndim: int,
) -> List[str]:
    if isinstance(interpolation, str):
        policies = [interpolation] * ndim
    else:
        policies = list(interpolation)
        if len(policies) != ndim:
            raise ValueError(
                f"expected {ndim} interpolation policies, one per angle "
                f"dimension, got {len(policies)}"
            )

    for policy in policies:
        if policy not in _INTERPOLATIONS:
            raise ValueError(
                f"interpolation must be one of {_INTERPOLATIONS}, got {policy!r}"
            )

    return policies


def check_extrapolate(extrapolate: str) -> None:
    if extrapolate not in _EXTRAPOLATIONS:
        raise ValueError(
            f"extrapolate must be one of {_EXTRAPOLATIONS}, got {extrapolate!r}"
        )


def _spline_stencil(
    angles: Tensor,
    query: Tensor,
    index: Tensor,
    t: Tensor,
    equal_interval: bool,
) -> _Stencil:
    n = angles.shape[0]

    nodes = torch.stack([index - 1, index, index + 1, index + 2], dim=-1)
    ghost_low = nodes[:, 0] < 0
    ghost_high = nodes[:, 3] > n - 1
    indices = torch.clamp(nodes, 0, n - 1)

    # Missing neighbours continue the edge interval linearly
    positions = angles[indices]
    p1 = positions[:, 1]
    p2 = positions[:, 2]
    p0 = torch.where(ghost_low, 2.0 * p1 - p2, positions[:, 0])
    p3 = torch.where(ghost_high, 2.0 * p2 - p1, positions[:, 3])

    inside = (t >= 0.0) & (t <= 1.0)

    def reduce(values: Tensor) -> Tensor:
        v0, v1, v2, v3 = values.unbind(-2)
        v0 = torch.where(_expand(ghost_low, values), 2.0 * v1 - v2, v0)
        v3 = torch.where(_expand(ghost_high, values), 2.0 * v2 - v1, v3)
        weight = _expand(t, values)

        if equal_interval:
            curve = catmull_rom_spline(v0, v1, v2, v3, weight)
        else:
            curve = centripetal_catmull_rom_spline(
                _expand(p0, values),
                _expand(p1, values),
                _expand(p2, values),
                _expand(p3, values),
                v0,
                v1,
                v2,
                v3,
                _expand(query, values),
            )

        return torch.where(_expand(inside, values), curve, lerp(v1, v2, weight))

    return _Stencil(indices, reduce)


def _build_stencil(
    dim: int,
    angles: Tensor,
    query: Tensor,
    policy: str,
    equal_interval: bool,
    extrapolate: str,
) -> _Stencil:
    n = angles.shape[0]

    if n == 1:
        indices = torch.zeros(
            query.shape[0], 1, dtype=torch.int64, device=angles.device
        )
        return _Stencil(indices, lambda values: values[..., 0, :])

    low = angles[0].item()
    high = angles[-1].item()

    if extrapolate == "error":
        outside = (query < low) | (query > high)
        if bool(outside.any()):
            raise ExtrapolationError(
                f"{int(outside.sum())} query angle(s) outside the grid "
                f"[{low}, {high}] of dimension {dim}",
                dimension=dim,
            )
    elif extrapolate == "clamp":
        query = torch.clamp(query, low, high)

    bracket = locate_bracket(angles, query, equal_interval=equal_interval)
    index = bracket.index
    t = bracket.fraction

    if policy == "spline":
        return _spline_stencil(angles, query, index, t, equal_interval)

    indices = torch.stack([index, index + 1], dim=-1)

    if policy == "linear":
        kernel = lerp
    else:
        kernel = _HERMITE_KERNELS[policy]

    def reduce(values: Tensor) -> Tensor:
        return kernel(values[..., 0, :], values[..., 1, :], _expand(t, values))

    return _Stencil(indices, reduce)


def interpolate_grid(
    spectra: Tensor,
    grids: Sequence[Tensor],
    equal_intervals: Sequence[bool],
    angles: Sequence[Tensor],
    policies: Sequence[str],
    extrapolate: str,
) -> Tensor:
    """Interpolate a spectra tensor of shape (*counts, W) at flat queries.

    ``angles`` holds one tensor of shape (batch,) per grid dimension. The
    result has shape (batch, W).
    """
    stencils = [
        _build_stencil(dim, grid, query, policy, equal, extrapolate)
        for dim, (grid, query, policy, equal) in enumerate(
            zip(grids, angles, policies, equal_intervals)
        )
    ]

    ndim = len(stencils)
    index = []
    for dim, stencil in enumerate(stencils):
        shape = [stencil.indices.shape[0]] + [1] * ndim
        shape[dim + 1] = stencil.indices.shape[1]
        index.append(stencil.indices.view(shape))

    # (batch, k0, ..., k_{ndim - 1}, W)
    block = spectra[tuple(index)]

    for stencil in reversed(stencils):
        block = stencil.reduce(block)

    return block


def interpolate_samples(
    samples: SampleGrid,
    spectra: Tensor,
    angles: Sequence[Union[Tensor, float]],
    policies: Sequence[str],
    extrapolate: str,
) -> Tensor:
    ndim = len(samples.num_angles)
    angles = list(angles)

    if len(angles) == ndim - 1 and samples.is_isotropic():
        angles.insert(_RELATIVE_AZIMUTH_DIMENSION, 0.0)
    elif len(angles) != ndim:
        raise ValueError(
            f"expected {ndim} angle tensors for {type(samples).__name__}, "
            f"got {len(angles)}"
        )

    angles = torch.broadcast_tensors(*as_floating_tensors(*angles))
    query_shape = angles[0].shape

    dtype = torch.promote_types(spectra.dtype, angles[0].dtype)
    spectra = spectra.to(dtype)
    flat_angles = [query.to(dtype).reshape(-1) for query in angles]
    grids = [samples.get_angles(dim).to(dtype) for dim in range(ndim)]
    equal_intervals = [samples.is_equal_interval(dim) for dim in range(ndim)]

    result = interpolate_grid(
        spectra,
        grids,
        equal_intervals,
        flat_angles,
        policies,
        extrapolate,
    )

    return result.reshape(*query_shape, spectra.shape[-1])


def interpolate_spectrum(
    samples: SampleGrid,
    angles: Sequence[Union[Tensor, float]],
    *,
    interpolation: Union[str, Sequence[str]] = "linear",
    extrapolate: str = "extrapolate",
) -> Tensor:
    """
    Reconstruct spectra at query angles of a sample set.

    Each angle dimension locates the grid interval of its query and gathers
    a stencil of nodes: one for a dimension with a single angle, two for
    linear and Hermite interpolation, four for splines. The gathered block
    is then reduced one dimension at a time, innermost first.

    Parameters
    ----------
    samples : SampleSet or SampleSet2D
        Source samples. Not modified.
    angles : sequence of Tensor or float
        One query tensor per angle dimension, broadcast against each other.
        For isotropic sets the relative-azimuth angle may be omitted.
    interpolation : str or sequence of str, optional
        ``"linear"`` (default), ``"hermite3"``, ``"hermite5"`` or
        ``"spline"``, or one of these per angle dimension. Splines are
        uniform Catmull-Rom on equal-interval dimensions and centripetal
        Catmull-Rom elsewhere.
    extrapolate : str, optional
        Handling of queries outside a grid:

        - ``"extrapolate"``: continue the edge interval. Linear and spline
          kernels extrapolate linearly, Hermite kernels saturate.
        - ``"clamp"``: clamp queries to the grid range.
        - ``"error"``: raise :class:`ExtrapolationError`.

    Returns
    -------
    Tensor
        Spectra of shape (*query_shape, num_wavelengths).

    Raises
    ------
    DimensionMismatchError
        If the spectra tensor disagrees with the angle grids.
    ExtrapolationError
        If a query lies outside a grid and ``extrapolate == "error"``.
    ValueError
        If an option is unknown or the number of angle tensors is wrong.

    Examples
    --------
    >>> samples = SampleSet2D(2, 1, equal_interval_angles=True)
    >>> samples.set_spectrum(1, 0, [1.0])
    >>> interpolate_spectrum(samples, [torch.tensor(math.pi / 4)])
    tensor([0.5000])
    """
    samples.check_consistency()
    policies = resolve_interpolation(interpolation, len(samples.num_angles))
    check_extrapolate(extrapolate)

    return interpolate_samples(
        samples,
        samples.spectra,
        angles,
        policies,
        extrapolate,
    )
