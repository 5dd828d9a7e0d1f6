from typing import Union

import torch
from torch import Tensor

from ._as_floating_tensors import as_floating_tensors


def lerp(
    v0: Union[Tensor, float],
    v1: Union[Tensor, float],
    t: Union[Tensor, float],
) -> Tensor:
    r"""Linearly interpolate between two values.

    .. math::
        \operatorname{lerp}(v_0, v_1, t) = v_0 + (v_1 - v_0) t

    Parameters
    ----------
    v0 : Tensor or float
        Value at ``t = 0``.
    v1 : Tensor or float
        Value at ``t = 1``.
    t : Tensor or float
        Interpolation parameter. Values outside [0, 1] extrapolate.

    Returns
    -------
    Tensor
        Interpolated values, broadcast over all inputs.

    Notes
    -----
    Evaluated with :func:`torch.lerp`, which returns ``v0`` and ``v1``
    exactly at ``t = 0`` and ``t = 1``.
    """
    v0, v1, t = as_floating_tensors(v0, v1, t)
    v0, v1, t = torch.broadcast_tensors(v0, v1, t)

    return torch.lerp(v0, v1, t)
