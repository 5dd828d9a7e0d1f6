class BsdfError(Exception):
    """Base exception for torchbsdf operations."""

    pass
