"""
Grid validation module.

This module defines the error types raised by gridfill and the checks that
turn caller-supplied sample grids into a dense, read-only numpy array.
"""

import warnings
from typing import Any

import numpy as np


class GridFillError(ValueError):
    """Base class for all gridfill errors."""


class EmptyGridError(GridFillError):
    """Raised when a grid has no rows or its first row has no columns."""


class RaggedGridError(GridFillError):
    """Raised when the rows of a grid do not all have the same length."""


class DegenerateBoundingBoxError(GridFillError):
    """Raised when a bounding box has zero longitude or latitude span."""


def validate_grid(values: Any) -> np.ndarray:
    """
    Validate a 2D sample grid and return it as a read-only array.

    Parameters
    ----------
    values : array-like
        Row-major grid of numeric samples (``values[row][col]``). Either a
        2D numpy array or a sequence of equal-length row sequences.

    Returns
    -------
    np.ndarray
        A private, non-writeable copy of the grid with shape (height, width).

    Raises
    ------
    EmptyGridError
        If the grid has zero rows or a zero-length first row.
    RaggedGridError
        If the rows have unequal lengths.
    ValueError
        If the grid is not two-dimensional.
    TypeError
        If the samples are not numeric.
    """
    if isinstance(values, np.ndarray):
        if values.ndim != 2:
            if values.ndim == 1 and values.size == 0:
                raise EmptyGridError("Cannot build a sampler from a grid with no rows")
            raise ValueError(f"Grid must be two-dimensional, got {values.ndim} dimensions")
        if values.shape[0] == 0:
            raise EmptyGridError("Cannot build a sampler from a grid with no rows")
        if values.shape[1] == 0:
            raise EmptyGridError("Cannot build a sampler from a grid whose first row is empty")
        grid = np.array(values, copy=True)
    else:
        try:
            rows = [list(row) for row in values]
        except TypeError:
            raise TypeError(
                f"values must be a 2D array or a sequence of rows, got {type(values)}"
            )

        if len(rows) == 0:
            raise EmptyGridError("Cannot build a sampler from a grid with no rows")

        width = len(rows[0])
        if width == 0:
            raise EmptyGridError("Cannot build a sampler from a grid whose first row is empty")

        ragged = [i for i, row in enumerate(rows) if len(row) != width]
        if ragged:
            raise RaggedGridError(
                f"All rows must have {width} columns (the length of row 0); "
                f"rows {ragged} differ"
            )

        grid = np.array(rows)
        if grid.ndim != 2:
            raise ValueError(f"Grid must be two-dimensional, got {grid.ndim} dimensions")

    if not np.issubdtype(grid.dtype, np.number) or np.issubdtype(grid.dtype, np.complexfloating):
        raise TypeError(f"Grid samples must be real numbers, got dtype {grid.dtype}")

    if np.issubdtype(grid.dtype, np.floating) and np.isnan(grid).any():
        warnings.warn(
            f"Grid contains {int(np.isnan(grid).sum())} NaN samples. "
            f"Interpolated values in cells touching them will be NaN.",
            UserWarning
        )

    grid.setflags(write=False)
    return grid


def check_span(minimum: float, maximum: float, axis: str) -> float:
    """Return ``maximum - minimum``, raising if the span is zero."""
    span = maximum - minimum
    if span == 0:
        raise DegenerateBoundingBoxError(
            f"Bounding box has zero {axis} span ({axis}_min == {axis}_max == {minimum}); "
            f"geographic coordinates cannot be normalized"
        )
    return span
