"""Spherical angles, rotations and reflection of unit direction tensors."""

import math
from typing import Tuple

import torch
from torch import Tensor

TWO_PI = 2.0 * math.pi


def wrap_azimuth(phi: Tensor) -> Tensor:
    """Map azimuths into [0, 2pi)."""
    phi = torch.remainder(phi, TWO_PI)

    return torch.where(phi >= TWO_PI, phi - TWO_PI, phi)


def spherical_to_xyz(theta: Tensor, phi: Tensor) -> Tensor:
    sin_theta = torch.sin(theta)

    return torch.stack(
        [sin_theta * torch.cos(phi), sin_theta * torch.sin(phi), torch.cos(theta)],
        dim=-1,
    )


def xyz_to_spherical(direction: Tensor) -> Tuple[Tensor, Tensor]:
    # atan2(0, 0) == 0 gives the zero azimuth at the poles
    x, y, z = direction.unbind(-1)
    theta = torch.acos(torch.clamp(z, -1.0, 1.0))
    phi = wrap_azimuth(torch.atan2(y, x))

    return theta, phi


def rotate_z(direction: Tensor, angle: Tensor) -> Tensor:
    x, y, z = direction.unbind(-1)
    cos_a = torch.cos(angle)
    sin_a = torch.sin(angle)

    return torch.stack([x * cos_a - y * sin_a, x * sin_a + y * cos_a, z], dim=-1)


def rotate_y(direction: Tensor, angle: Tensor) -> Tensor:
    x, y, z = direction.unbind(-1)
    cos_a = torch.cos(angle)
    sin_a = torch.sin(angle)

    return torch.stack([x * cos_a + z * sin_a, y, -x * sin_a + z * cos_a], dim=-1)


def check_direction(name: str, direction: Tensor) -> None:
    if direction.shape[-1] != 3:
        raise ValueError(
            f"{name} must have last dimension 3, got {direction.shape[-1]}"
        )
