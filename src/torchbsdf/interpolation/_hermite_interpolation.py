from typing import Union

from torch import Tensor

from ._lerp import lerp
from ._smoothstep import smootherstep, smoothstep


def hermite_interpolation3(
    v0: Union[Tensor, float],
    v1: Union[Tensor, float],
    t: Union[Tensor, float],
) -> Tensor:
    """Interpolate between two values with a cubic Hermite weight.

    Parameters
    ----------
    v0 : Tensor or float
        Value at ``t = 0``.
    v1 : Tensor or float
        Value at ``t = 1``.
    t : Tensor or float
        Interpolation parameter. The weight saturates outside [0, 1].

    Returns
    -------
    Tensor
        ``lerp(v0, v1, smoothstep(0, 1, t))``.
    """
    return lerp(v0, v1, smoothstep(0.0, 1.0, t))


def hermite_interpolation5(
    v0: Union[Tensor, float],
    v1: Union[Tensor, float],
    t: Union[Tensor, float],
) -> Tensor:
    """Interpolate between two values with a fifth-order Hermite weight."""
    return lerp(v0, v1, smootherstep(0.0, 1.0, t))
