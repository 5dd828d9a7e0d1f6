from typing import Optional, Union

import torch
from torch import Tensor

from ..interpolation import is_equal_interval
from ..interpolation._as_floating_tensors import as_floating_tensors
from ._angle_bracket import AngleBracket


def locate_bracket(
    angles: Tensor,
    query: Union[Tensor, float],
    *,
    equal_interval: Optional[bool] = None,
) -> AngleBracket:
    """
    Find the grid interval enclosing each query angle.

    Parameters
    ----------
    angles : Tensor
        Strictly increasing angle grid, shape (n,).
    query : Tensor or float
        Query angles, shape (*query_shape).
    equal_interval : bool, optional
        Whether ``angles`` is a uniform subdivision. Uniform grids locate
        the interval arithmetically, others with ``torch.searchsorted``.
        Computed with :func:`~torchbsdf.interpolation.is_equal_interval` if
        omitted.

    Returns
    -------
    AngleBracket
        ``index`` in ``[0, n - 2]`` and ``fraction``, both of shape
        (*query_shape). In-range queries satisfy
        ``angles[index] <= query <= angles[index + 1]``. Queries outside the
        grid use the edge interval, so their fraction lies outside [0, 1].
        A grid of one angle yields index 0 and fraction 0.

    Examples
    --------
    >>> bracket = locate_bracket(torch.tensor([0.0, 1.0, 3.0]), torch.tensor(2.0))
    >>> bracket.index, bracket.fraction
    (tensor(1), tensor(0.5000))
    """
    angles, query = as_floating_tensors(angles, query)
    query_shape = query.shape
    n = angles.shape[0]

    if n == 0:
        raise ValueError("angle grid must not be empty")

    if n == 1:
        return AngleBracket(
            index=torch.zeros(query_shape, dtype=torch.int64, device=query.device),
            fraction=torch.zeros_like(query),
            batch_size=query_shape,
        )

    if equal_interval is None:
        equal_interval = is_equal_interval(angles)

    if equal_interval:
        step = (angles[-1] - angles[0]) / (n - 1)
        index = torch.floor((query - angles[0]) / step).to(torch.int64)
        index = torch.clamp(index, 0, n - 2)

        # Rounding may land one interval off near nodes
        index = torch.where((query < angles[index]) & (index > 0), index - 1, index)
        index = torch.where(
            (query >= angles[index + 1]) & (index < n - 2), index + 1, index
        )
    else:
        index = torch.searchsorted(angles, query.reshape(-1), right=True) - 1
        index = index.reshape(query_shape)
        index = torch.clamp(index, 0, n - 2)

    lower = angles[index]
    width = angles[index + 1] - lower
    safe_width = torch.where(width == 0.0, torch.ones_like(width), width)
    fraction = torch.where(
        width == 0.0, torch.zeros_like(query), (query - lower) / safe_width
    )

    return AngleBracket(index=index, fraction=fraction, batch_size=query_shape)
