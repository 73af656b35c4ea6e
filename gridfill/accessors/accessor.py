"""
gridfill Accessor implementation.

This module implements the xarray accessor that provides the .gridfill interface.
"""

import xarray as xr
import numpy as np
import pandas as pd
from typing import Union, Optional, Dict

from gridfill.core import GridSampler


# Column names recognised when target points do not name their coordinates
POINT_LON_NAMES = ['lon', 'longitude', 'lng', 'x']
POINT_LAT_NAMES = ['lat', 'latitude', 'y']


@xr.register_dataarray_accessor("gridfill")
class GridFillAccessor:
    """
    xarray accessor for gridfill functionality.

    This accessor provides methods for:
    - Building a GridSampler from a lat/lon DataArray
    - Grid-to-point bilinear sampling
    """

    def __init__(self, xarray_obj: xr.DataArray):
        self._obj = xarray_obj
        self._name = "gridfill"

    def to_sampler(self,
                   lat_name: Optional[str] = None,
                   lon_name: Optional[str] = None) -> GridSampler:
        """
        Build a GridSampler from this DataArray.

        Parameters
        ----------
        lat_name : str, optional
            Name of the latitude coordinate, inferred if None
        lon_name : str, optional
            Name of the longitude coordinate, inferred if None

        Returns
        -------
        GridSampler
            Sampler over the DataArray's values and coordinate extent
        """
        return GridSampler.from_dataarray(self._obj, lat_name=lat_name, lon_name=lon_name)

    def value_at_coordinate(self, lon: float, lat: float) -> float:
        """Bilinearly interpolated value at a single lon/lat position."""
        return self.to_sampler().value_at_coordinate(lon, lat)

    def interpolate_to(
        self,
        target_points: Union[pd.DataFrame, Dict[str, np.ndarray]],
        x_coord: Optional[str] = None,
        y_coord: Optional[str] = None,
    ) -> pd.DataFrame:
        """
        Sample this grid at scattered points.

        Parameters
        ----------
        target_points : pandas.DataFrame or dict
            Points to sample at, with longitude and latitude columns (or keys).
        x_coord : str, optional
            Name of the longitude column, inferred from common names if None
        y_coord : str, optional
            Name of the latitude column, inferred from common names if None

        Returns
        -------
        pandas.DataFrame
            A copy of the points with a column of sampled values, named after
            the DataArray (or 'value' when it is unnamed)
        """
        if isinstance(target_points, dict):
            points = pd.DataFrame(target_points)
        elif isinstance(target_points, pd.DataFrame):
            points = target_points.copy()
        else:
            raise TypeError(
                f"target_points must be pandas.DataFrame or dict, got {type(target_points)}"
            )

        if x_coord is None:
            x_coord = self._find_column(points, POINT_LON_NAMES, "longitude")
        if y_coord is None:
            y_coord = self._find_column(points, POINT_LAT_NAMES, "latitude")

        for column in (x_coord, y_coord):
            if column not in points.columns:
                raise ValueError(f"Column '{column}' not found in target_points")

        sampler = self.to_sampler()
        values = sampler.sample_coordinates(
            points[x_coord].to_numpy(dtype=np.float64),
            points[y_coord].to_numpy(dtype=np.float64),
        )

        name = self._obj.name if self._obj.name is not None else "value"
        points[str(name)] = values
        return points

    @staticmethod
    def _find_column(points: pd.DataFrame, names, label: str) -> str:
        for column in points.columns:
            if str(column).lower() in names:
                return column
        raise ValueError(f"Could not find {label} column in target_points (looked for {names})")
