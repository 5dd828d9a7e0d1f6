import enum
from typing import Optional


class ColorModel(enum.Enum):
    """Interpretation of the wavelength axis of a sample set."""

    MONOCHROMATIC = "monochromatic"
    RGB = "rgb"
    XYZ = "xyz"
    SPECTRAL = "spectral"

    @property
    def num_wavelengths(self) -> Optional[int]:
        """Fixed wavelength count, or None for spectral data."""
        if self is ColorModel.MONOCHROMATIC:
            return 1
        if self is ColorModel.SPECTRAL:
            return None
        return 3


class SourceType(enum.Enum):
    """Origin of the samples held by a sample set."""

    UNKNOWN = "unknown"
    MEASURED = "measured"
    GENERATED = "generated"
    EDITED = "edited"
