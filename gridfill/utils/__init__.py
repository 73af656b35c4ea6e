"""
Utility functions module for gridfill.

This module contains helper functions for:
- Grid validation and the error types it raises
- Building samplers from upstream data records
"""

from .validation import (  # noqa: F401
    GridFillError,
    EmptyGridError,
    RaggedGridError,
    DegenerateBoundingBoxError,
    validate_grid,
)
from .grid_from_record import grid_from_record  # noqa: F401
