from .._bsdf_error import BsdfError


class ExtrapolationError(BsdfError):
    """Raised when a query lies outside an angle grid with extrapolate='error'."""

    def __init__(self, message: str, dimension: int = None):
        super().__init__(message)
        self.dimension = dimension
