from typing import Union

import torch
from torch import Tensor

from ..interpolation._as_floating_tensors import as_floating_tensors

_DOWNWARD_THRESHOLD = -1e-5


def reflect(direction: Tensor, normal: Tensor) -> Tensor:
    r"""Mirror a direction about a normal.

    .. math::
        r = 2 (n \cdot d) n - d

    Both vectors point away from the surface, so the result is the
    specular direction of ``direction``.

    Parameters
    ----------
    direction : Tensor, shape (..., 3)
        Unit direction.
    normal : Tensor, shape (..., 3)
        Unit normal.

    Returns
    -------
    Tensor, shape (..., 3)
    """
    direction, normal = as_floating_tensors(direction, normal)

    cosine = torch.sum(normal * direction, dim=-1, keepdim=True)

    return 2.0 * cosine * normal - direction


def is_downward_direction(direction: Union[Tensor, float]) -> Tensor:
    """Return True where a direction points clearly below the surface.

    Directions with ``z < -1e-5`` are downward; smaller negative values are
    numerical noise around the horizon.
    """
    direction, = as_floating_tensors(direction)

    return direction[..., 2] < _DOWNWARD_THRESHOLD


def fix_downward_direction(direction: Tensor) -> Tensor:
    """Project directions with negative z onto the horizon.

    The z component is set to 0 and the remaining xy vector normalized. A
    vector with no xy component becomes +x. Other directions are returned
    unchanged.
    """
    direction, = as_floating_tensors(direction)
    x, y, z = direction.unbind(-1)

    xy_norm = torch.hypot(x, y)
    flat = xy_norm == 0.0
    safe_norm = torch.where(flat, torch.ones_like(xy_norm), xy_norm)

    fixed = torch.stack(
        [
            torch.where(flat, torch.ones_like(x), x / safe_norm),
            torch.where(flat, torch.zeros_like(y), y / safe_norm),
            torch.zeros_like(z),
        ],
        dim=-1,
    )

    return torch.where((z < 0.0).unsqueeze(-1), fixed, direction)
