from .._bsdf_error import BsdfError


class DimensionMismatchError(BsdfError):
    """Raised when a spectra tensor disagrees with its angle grid."""

    def __init__(
        self,
        message: str,
        dimension: int = None,
        expected: int = None,
        actual: int = None,
    ):
        super().__init__(message)
        self.dimension = dimension
        self.expected = expected
        self.actual = actual
