from typing import Optional, Union

import torch
from torch import Tensor

from ._as_floating_tensors import as_floating_tensors


def is_equal(
    lhs: Union[Tensor, float],
    rhs: Union[Tensor, float],
    *,
    eps: Optional[float] = None,
) -> Tensor:
    r"""Elementwise floating-point equality with a relative tolerance.

    .. math::
        |a - b| \le \varepsilon \cdot \max(|a|, |b|, 1) \cdot 2

    Parameters
    ----------
    lhs, rhs : Tensor or float
        Values to compare.
    eps : float, optional
        Tolerance unit. Defaults to the machine epsilon of the promoted
        dtype.

    Returns
    -------
    Tensor
        Boolean tensor. The comparison is symmetric in its arguments.
    """
    lhs, rhs = as_floating_tensors(lhs, rhs)

    if eps is None:
        eps = torch.finfo(lhs.dtype).eps

    scale = torch.maximum(torch.maximum(lhs.abs(), rhs.abs()), torch.ones_like(lhs))

    return (lhs - rhs).abs() <= eps * scale * 2.0


def is_equal_interval(angles: Tensor) -> bool:
    """Return True if ``angles`` is a uniform subdivision of its range.

    Sequences of one or two angles are equal interval. Longer sequences must
    be strictly increasing and match
    ``linspace(angles[0], angles[-1], n)`` within :func:`is_equal` tolerance
    scaled by ``n``.
    """
    angles, = as_floating_tensors(angles)
    n = angles.shape[0]

    if n <= 2:
        return n < 2 or bool(angles[1] > angles[0])

    if not bool(torch.all(angles[1:] > angles[:-1])):
        return False

    uniform = torch.linspace(
        angles[0].item(),
        angles[-1].item(),
        n,
        dtype=angles.dtype,
        device=angles.device,
    )
    eps = torch.finfo(angles.dtype).eps * n

    return bool(torch.all(is_equal(angles, uniform, eps=eps)))
