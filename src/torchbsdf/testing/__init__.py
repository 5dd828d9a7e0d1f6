"""Testing helpers for code built on torchbsdf."""

from . import strategies

__all__ = [
    "strategies",
]
