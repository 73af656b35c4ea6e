"""
gridfill: bilinear sampling of coarse geographic grids.

This library provides:
- GridSampler, an immutable sampler over a scalar grid and its lon/lat
  bounding box, with lookups by normalized coordinates, geographic
  coordinates and raw indices
- grid_from_record, to build a sampler from an upstream data-frame record
- A .gridfill accessor on xarray DataArrays

Small and degenerate grids (2x2, 1xN, 1x1) are sampled with edge clamping so
no lookup ever reads outside the grid.
"""

__version__ = "0.1.0"

from .core import GridSampler  # noqa: F401
from .utils.grid_from_record import grid_from_record  # noqa: F401
from .utils.validation import (  # noqa: F401
    GridFillError,
    EmptyGridError,
    RaggedGridError,
    DegenerateBoundingBoxError,
)
# Importing the accessor module registers .gridfill on xarray objects
from .accessors import GridFillAccessor  # noqa: F401

__all__ = [
    "GridSampler",
    "grid_from_record",
    "GridFillAccessor",
    "GridFillError",
    "EmptyGridError",
    "RaggedGridError",
    "DegenerateBoundingBoxError",
]
