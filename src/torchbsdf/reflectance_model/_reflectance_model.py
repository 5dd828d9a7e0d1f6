import abc
from typing import Dict

from torch import Tensor


class ReflectanceModel(abc.ABC):
    """Analytic reflectance function of a direction pair.

    Models generate sample data: :func:`torchbsdf.processor.fill_spectra`
    evaluates a model at every node of a Brdf.

    Attributes
    ----------
    name : str
        Human-readable model name.
    """

    name: str = ""

    @abc.abstractmethod
    def get_value(self, in_dir: Tensor, out_dir: Tensor) -> Tensor:
        """Reflectance at unit directions of shape (..., 3); returns (...)."""

    def is_isotropic(self) -> bool:
        return True

    @property
    @abc.abstractmethod
    def parameters(self) -> Dict[str, float]:
        """Named model parameters."""

    def __repr__(self) -> str:
        arguments = ", ".join(
            f"{key}={value!r}" for key, value in self.parameters.items()
        )
        return f"{type(self).__name__}({arguments})"
