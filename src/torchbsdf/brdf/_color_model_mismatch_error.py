from .._bsdf_error import BsdfError


class ColorModelMismatchError(BsdfError):
    """Raised when sample sets with different colors are combined."""

    def __init__(self, message: str, color_models: tuple = None):
        super().__init__(message)
        self.color_models = color_models
