from typing import Union

import torch
from torch import Tensor

from ._as_floating_tensors import as_floating_tensors


def smoothstep(
    edge0: Union[Tensor, float],
    edge1: Union[Tensor, float],
    x: Union[Tensor, float],
) -> Tensor:
    r"""Cubic Hermite step between two edges.

    .. math::
        c = \operatorname{clamp}\left(\frac{x - e_0}{e_1 - e_0}, 0, 1\right),
        \quad s = c^2 (3 - 2c)

    Parameters
    ----------
    edge0 : Tensor or float
        Lower edge.
    edge1 : Tensor or float
        Upper edge. Must differ from ``edge0``.
    x : Tensor or float
        Source values.

    Returns
    -------
    Tensor
        Smoothed weights in [0, 1].
    """
    edge0, edge1, x = as_floating_tensors(edge0, edge1, x)

    coeff = torch.clamp((x - edge0) / (edge1 - edge0), 0.0, 1.0)

    return coeff * coeff * (3.0 - 2.0 * coeff)


def smootherstep(
    edge0: Union[Tensor, float],
    edge1: Union[Tensor, float],
    x: Union[Tensor, float],
) -> Tensor:
    r"""Fifth-order Hermite step between two edges.

    .. math::
        s = c^3 (c (6c - 15) + 10)

    where :math:`c` is the clamped position of ``x`` between the edges.
    First and second derivatives vanish at both edges.
    """
    edge0, edge1, x = as_floating_tensors(edge0, edge1, x)

    coeff = torch.clamp((x - edge0) / (edge1 - edge0), 0.0, 1.0)

    return coeff * coeff * coeff * (coeff * (coeff * 6.0 - 15.0) + 10.0)
