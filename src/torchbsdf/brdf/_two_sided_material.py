import dataclasses
from typing import Optional, Sequence, Union

import torch
from torch import Tensor

from ..interpolation._as_floating_tensors import as_floating_tensors
from ._brdf import Brdf
from ._color_model_mismatch_error import ColorModelMismatchError
from ._has_same_color import has_same_color

_MIRROR = (1.0, 1.0, -1.0)


@dataclasses.dataclass
class Material:
    """Reflection and optional transmission distribution of one surface side."""

    brdf: Brdf
    btdf: Optional[Brdf] = None


class TwoSidedMaterial:
    """Front and back materials of a surface.

    The back side is sampled in its own frame: directions below the surface
    are mirrored through it before the back BRDF is evaluated.

    Parameters
    ----------
    front_material, back_material : Material
        Independently owned materials of both sides. Their BRDFs must share
        color model and wavelengths.

    Raises
    ------
    ColorModelMismatchError
        If the front and back BRDFs have different colors.
    """

    def __init__(self, front_material: Material, back_material: Material):
        front = front_material.brdf.sample_set
        back = back_material.brdf.sample_set

        if not has_same_color(front, back):
            raise ColorModelMismatchError(
                "front and back BRDFs must share color model and wavelengths",
                color_models=(front.color_model, back.color_model),
            )

        self._front_material = front_material
        self._back_material = back_material

    @property
    def front_material(self) -> Material:
        return self._front_material

    @property
    def back_material(self) -> Material:
        return self._back_material

    def get_spectrum(
        self,
        in_dir: Tensor,
        out_dir: Tensor,
        *,
        interpolation: Union[str, Sequence[str]] = "linear",
    ) -> Tensor:
        """Spectra of the side ``in_dir`` arrives on, shape (..., num_wavelengths).

        Incoming directions with ``z >= 0`` use the front BRDF, the others
        the back BRDF with both directions mirrored.
        """
        in_dir, out_dir = as_floating_tensors(in_dir, out_dir)
        in_dir, out_dir = torch.broadcast_tensors(in_dir, out_dir)

        front_brdf = self._front_material.brdf
        back_brdf = self._back_material.brdf

        front = in_dir[..., 2] >= 0.0
        back = ~front

        result = torch.zeros(
            *in_dir.shape[:-1],
            front_brdf.sample_set.num_wavelengths,
            dtype=front_brdf.sample_set.dtype,
            device=in_dir.device,
        )

        if bool(front.any()):
            result[front] = front_brdf.get_spectrum(
                in_dir[front],
                out_dir[front],
                interpolation=interpolation,
            ).to(result.dtype)

        if bool(back.any()):
            mirror = torch.tensor(_MIRROR, dtype=in_dir.dtype, device=in_dir.device)
            result[back] = back_brdf.get_spectrum(
                in_dir[back] * mirror,
                out_dir[back] * mirror,
                interpolation=interpolation,
            ).to(result.dtype)

        return result
