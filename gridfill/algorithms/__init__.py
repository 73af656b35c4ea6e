"""
Algorithms module for gridfill.

This module contains the array interpolation algorithms used by GridSampler:
- Bilinear interpolation with edge clamping
"""

from .interpolators import (
    BaseInterpolator,
    BilinearInterpolator
)

__all__ = [
    'BaseInterpolator',
    'BilinearInterpolator'
]
