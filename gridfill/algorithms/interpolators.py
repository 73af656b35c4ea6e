"""
Interpolation algorithms module.

This module contains the array interpolation path used by GridSampler.sample,
built on scipy.ndimage.map_coordinates. Interpolators follow a common
interface so the sampler does not depend on a specific implementation.
"""

import numpy as np
from scipy.ndimage import map_coordinates
from abc import ABC, abstractmethod
from typing import Sequence


class BaseInterpolator(ABC):
    """
    Abstract base class for interpolation algorithms.

    All interpolation algorithms should inherit from this class and implement
    the interpolate method.
    """

    def __init__(self, order: int, mode: str = 'nearest', prefilter: bool = False):
        """
        Initialize the interpolator.

        Parameters
        ----------
        order : int
            The order of the spline interpolation (1=bilinear)
        mode : str, optional
            How to handle positions beyond the last sample ('nearest' clamps to the edge)
        prefilter : bool, optional
            Whether to spline-prefilter the input data (irrelevant for order <= 1)
        """
        self.order = order
        self.mode = mode
        self.prefilter = prefilter

    @abstractmethod
    def interpolate(self,
                    data: np.ndarray,
                    coordinates: Sequence[np.ndarray]) -> np.ndarray:
        """
        Interpolate ``data`` at fractional index positions.

        Parameters
        ----------
        data : np.ndarray
            2D input array indexed as ``data[row, col]``
        coordinates : sequence of np.ndarray
            ``(rows, cols)`` arrays of equal shape giving continuous
            grid-index positions

        Returns
        -------
        np.ndarray
            Interpolated values with the shape of the coordinate arrays
        """
        pass


class BilinearInterpolator(BaseInterpolator):
    """
    Bilinear interpolation using scipy.ndimage.map_coordinates with order=1.

    Positions are clamped to ``[0, n - 1]`` on each axis before sampling, so
    the upper corner of the last cell is never read past the edge and 1-wide
    or 1-tall grids collapse to a constant along that axis. NaN positions
    produce NaN.
    """

    def __init__(self):
        super().__init__(order=1, mode='nearest', prefilter=False)

    def interpolate(self,
                    data: np.ndarray,
                    coordinates: Sequence[np.ndarray]) -> np.ndarray:
        data = np.asarray(data, dtype=np.float64)
        if data.ndim != 2:
            raise ValueError(f"Bilinear interpolation needs 2D data, got {data.ndim} dimensions")
        if data.size == 0:
            raise ValueError("Cannot interpolate empty arrays")

        rows, cols = (np.asarray(c, dtype=np.float64) for c in coordinates)
        if rows.shape != cols.shape:
            raise ValueError(
                f"Coordinate arrays must have the same shape, got {rows.shape} and {cols.shape}"
            )

        result = np.full(rows.shape, np.nan, dtype=np.float64)
        valid = ~(np.isnan(rows) | np.isnan(cols))
        if not valid.any():
            return result

        height, width = data.shape
        positions = np.vstack([
            np.clip(rows[valid], 0, height - 1),
            np.clip(cols[valid], 0, width - 1),
        ])

        result[valid] = map_coordinates(
            data,
            positions,
            order=self.order,
            mode=self.mode,
            prefilter=self.prefilter,
        )
        return result
