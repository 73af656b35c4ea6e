"""
Core grid sampling module.

This module contains the GridSampler class, which owns an immutable grid of
scalar samples together with the geographic bounding box it spans, and
evaluates bilinearly interpolated values at normalized or geographic
coordinates.
"""

import math
import operator
import warnings
from typing import Any, Optional, Tuple, Union

import numpy as np
import xarray as xr

from gridfill.algorithms.interpolators import BilinearInterpolator
from gridfill.utils.validation import check_span, validate_grid


# Coordinate names recognised when building a sampler from an xarray object
LAT_NAMES = ['lat', 'latitude', 'y']
LON_NAMES = ['lon', 'longitude', 'lng', 'x']

ArrayLike = Union[float, np.ndarray, list]


class GridSampler:
    """
    Bilinear sampler over a regular lon/lat grid.

    Row ``0`` of ``values`` lies at ``lat_min`` and row ``height - 1`` at
    ``lat_max``; column ``0`` lies at ``lon_min`` and column ``width - 1`` at
    ``lon_max``. The grid is copied at construction into a read-only array and
    the sampler exposes no mutators, so a single instance can be read from any
    number of threads.
    """

    def __init__(
        self,
        values: Any,
        lat_min: float,
        lat_max: float,
        lon_min: float,
        lon_max: float,
        projection_type: Optional[str] = None,
        resolution: Optional[float] = None,
        time: Optional[Any] = None,
    ):
        """
        Initialize the GridSampler.

        Parameters
        ----------
        values : array-like
            Row-major 2D grid of numeric samples (``values[row][col]``)
        lat_min, lat_max : float
            Latitude of the first and last rows, in degrees
        lon_min, lon_max : float
            Longitude of the first and last columns, in degrees
        projection_type : str, optional
            Projection label of the data frame (e.g. 'wg84'); carried, never read
        resolution : float, optional
            Nominal grid resolution in degrees; carried, never read
        time : any, optional
            Timestamp of the data frame; carried, never read

        Raises
        ------
        EmptyGridError
            If the grid has no rows or an empty first row
        RaggedGridError
            If the rows differ in length
        """
        self._values = validate_grid(values)
        self._height, self._width = self._values.shape

        self._lat_min = float(lat_min)
        self._lat_max = float(lat_max)
        self._lon_min = float(lon_min)
        self._lon_max = float(lon_max)

        self._projection_type = projection_type
        self._resolution = resolution
        self._time = time

        self._interpolator = BilinearInterpolator()

    @classmethod
    def from_dataarray(
        cls,
        data_array: xr.DataArray,
        lat_name: Optional[str] = None,
        lon_name: Optional[str] = None,
    ) -> "GridSampler":
        """
        Build a sampler from a 2D DataArray with 1D latitude/longitude coordinates.

        Parameters
        ----------
        data_array : xr.DataArray
            The gridded field. Metadata is read from ``attrs``
            (``projection_type``, ``resolution``, ``time``).
        lat_name : str, optional
            Name of the latitude coordinate. Inferred from LAT_NAMES if None.
        lon_name : str, optional
            Name of the longitude coordinate. Inferred from LON_NAMES if None.

        Returns
        -------
        GridSampler
            A sampler whose rows run from the smallest to the largest latitude
        """
        if not isinstance(data_array, xr.DataArray):
            raise TypeError(f"data_array must be xr.DataArray, got {type(data_array)}")
        if data_array.ndim != 2:
            raise ValueError(f"data_array must be two-dimensional, got {data_array.ndim} dimensions")

        if lat_name is None:
            lat_name = _find_coordinate(data_array, LAT_NAMES, "latitude")
        if lon_name is None:
            lon_name = _find_coordinate(data_array, LON_NAMES, "longitude")

        for name in (lat_name, lon_name):
            if name not in data_array.coords or data_array[name].ndim != 1:
                raise ValueError(f"Coordinate '{name}' must be a 1D coordinate of data_array")
            if data_array[name].size == 0:
                raise ValueError(f"Coordinate '{name}' is empty")
            if data_array[name].size > 1:
                _warn_if_irregular(np.asarray(data_array[name].values, dtype=np.float64), name)

        lat_dim = data_array[lat_name].dims[0]
        lon_dim = data_array[lon_name].dims[0]
        ordered = data_array.sortby([lat_name, lon_name]).transpose(lat_dim, lon_dim)

        lats = np.asarray(ordered[lat_name].values, dtype=np.float64)
        lons = np.asarray(ordered[lon_name].values, dtype=np.float64)
        attrs = ordered.attrs

        return cls(
            ordered.values,
            lat_min=lats[0],
            lat_max=lats[-1],
            lon_min=lons[0],
            lon_max=lons[-1],
            projection_type=attrs.get("projection_type"),
            resolution=attrs.get("resolution"),
            time=attrs.get("time"),
        )

    @property
    def values(self) -> np.ndarray:
        """Read-only view of the sample grid, shape (height, width)."""
        return self._values

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def shape(self) -> Tuple[int, int]:
        return self._height, self._width

    @property
    def lat_min(self) -> float:
        return self._lat_min

    @property
    def lat_max(self) -> float:
        return self._lat_max

    @property
    def lon_min(self) -> float:
        return self._lon_min

    @property
    def lon_max(self) -> float:
        return self._lon_max

    @property
    def bounds(self) -> Tuple[float, float, float, float]:
        """Bounding box as ``(lon_min, lat_min, lon_max, lat_max)``."""
        return self._lon_min, self._lat_min, self._lon_max, self._lat_max

    @property
    def projection_type(self) -> Optional[str]:
        return self._projection_type

    @property
    def resolution(self) -> Optional[float]:
        return self._resolution

    @property
    def time(self) -> Optional[Any]:
        return self._time

    def value_at(self, u: float, v: float) -> float:
        """
        Bilinearly interpolated value at normalized coordinates.

        ``u`` runs along columns and ``v`` along rows. Both are clamped to
        ``[0, 1]`` first, so any finite or infinite input is accepted and no
        index outside the grid is ever read. ``u = 1`` maps exactly onto the
        last column. A NaN coordinate gives NaN.

        Parameters
        ----------
        u : float
            Normalized horizontal position, 0 at the first column
        v : float
            Normalized vertical position, 0 at the first row

        Returns
        -------
        float
            The interpolated value
        """
        if math.isnan(u) or math.isnan(v):
            return math.nan

        u = max(0.0, min(1.0, u))
        v = max(0.0, min(1.0, v))

        x = u * (self._width - 1)
        y = v * (self._height - 1)

        x0 = math.floor(x)
        y0 = math.floor(y)
        # The upper corner collapses onto the lower one on the last column/row
        x1 = min(x0 + 1, self._width - 1)
        y1 = min(y0 + 1, self._height - 1)

        fx = x - x0
        fy = y - y0

        grid = self._values
        tl = float(grid[y0, x0])
        tr = float(grid[y0, x1])
        bl = float(grid[y1, x0])
        br = float(grid[y1, x1])

        top = tl * (1 - fx) + tr * fx
        bottom = bl * (1 - fx) + br * fx
        return top * (1 - fy) + bottom * fy

    def value_at_coordinate(self, lon: float, lat: float) -> float:
        """
        Interpolated value at a geographic position.

        Points outside the bounding box are clamped to the nearest edge or
        corner value.

        Raises
        ------
        DegenerateBoundingBoxError
            If the longitude or latitude span of the box is zero
        """
        u, v = self._normalize(lon, lat)
        return self.value_at(u, v)

    def raw_value_at(self, col: int, row: int) -> Optional[Union[int, float]]:
        """
        Stored sample at integer indices, or None when out of range.

        Parameters
        ----------
        col : int
            Column index, valid in ``[0, width)``
        row : int
            Row index, valid in ``[0, height)``
        """
        col = operator.index(col)
        row = operator.index(row)
        if col < 0 or col >= self._width or row < 0 or row >= self._height:
            return None
        return self._values[row, col].item()

    def sample(self, u: ArrayLike, v: ArrayLike) -> np.ndarray:
        """
        Vectorized value_at over broadcastable arrays of normalized coordinates.

        Returns
        -------
        np.ndarray
            Float array with the broadcast shape of ``u`` and ``v``
        """
        u, v = np.broadcast_arrays(np.asarray(u, dtype=np.float64),
                                   np.asarray(v, dtype=np.float64))
        if u.size == 0:
            return np.empty(u.shape, dtype=np.float64)

        # NaN survives clip and is masked by the interpolator
        cols = np.clip(u.ravel(), 0.0, 1.0) * (self._width - 1)
        rows = np.clip(v.ravel(), 0.0, 1.0) * (self._height - 1)
        result = self._interpolator.interpolate(self._values, (rows, cols))
        return result.reshape(u.shape)

    def sample_coordinates(self, lon: ArrayLike, lat: ArrayLike) -> np.ndarray:
        """
        Vectorized value_at_coordinate over broadcastable lon/lat arrays.

        Raises
        ------
        DegenerateBoundingBoxError
            If the longitude or latitude span of the box is zero
        """
        u, v = self._normalize(np.asarray(lon, dtype=np.float64),
                               np.asarray(lat, dtype=np.float64))
        return self.sample(u, v)

    def to_dataarray(self, name: Optional[str] = None) -> xr.DataArray:
        """
        Export the grid as a (lat, lon) DataArray.

        Coordinates are evenly spaced from the minimum to the maximum of each
        axis, and the metadata fields are stored in ``attrs`` (None values
        are omitted).
        """
        lats = np.linspace(self._lat_min, self._lat_max, self._height)
        lons = np.linspace(self._lon_min, self._lon_max, self._width)

        attrs = {
            key: value for key, value in (
                ("projection_type", self._projection_type),
                ("resolution", self._resolution),
                ("time", self._time),
            ) if value is not None
        }

        return xr.DataArray(
            np.array(self._values),
            dims=["lat", "lon"],
            coords={"lat": lats, "lon": lons},
            name=name,
            attrs=attrs,
        )

    def _normalize(self, lon, lat):
        """Map geographic coordinates onto the unit square (unclamped)."""
        lon_span = check_span(self._lon_min, self._lon_max, "lon")
        lat_span = check_span(self._lat_min, self._lat_max, "lat")
        return (lon - self._lon_min) / lon_span, (lat - self._lat_min) / lat_span

    def __repr__(self) -> str:
        return (
            f"GridSampler(shape=({self._height}, {self._width}), "
            f"lon=[{self._lon_min}, {self._lon_max}], "
            f"lat=[{self._lat_min}, {self._lat_max}])"
        )


def _find_coordinate(data_array: xr.DataArray, names, label: str) -> str:
    for coord_name in data_array.coords:
        if str(coord_name).lower() in names:
            return str(coord_name)
    raise ValueError(
        f"Could not find a {label} coordinate in data_array "
        f"(looked for {names}); pass its name explicitly"
    )


def _warn_if_irregular(coords: np.ndarray, name: str) -> None:
    steps = np.diff(np.sort(coords))
    if not np.allclose(steps, steps[0], rtol=1e-6, atol=1e-9):
        warnings.warn(
            f"Coordinate '{name}' is not evenly spaced. Geographic lookups map "
            f"positions linearly between the first and last value, so results "
            f"between unevenly spaced samples will be shifted.",
            UserWarning
        )
