from .._bsdf_error import BsdfError


class InvalidDirectionError(BsdfError):
    """Raised when an incoming direction lies below the surface."""

    def __init__(self, message: str, count: int = None):
        super().__init__(message)
        self.count = count
