"""
Test fixtures for gridfill.

This module contains shared test fixtures for creating common grid scenarios
used throughout the test suite.
"""

import pytest
import numpy as np
import xarray as xr

from gridfill import GridSampler


@pytest.fixture
def frame_record():
    """A 2x2 data-frame record as delivered by the upstream feed."""
    return {
        'latMax': 41.25,
        'latMin': 34.3,
        'lonMax': 115.075,
        'lonMin': 109.75,
        'projectionType': 'wg84',
        'resolution': 0.025,
        'time': '202508210000',
        'value': [
            [0, 10],
            [20, 30],
        ],
    }


@pytest.fixture
def two_by_two_sampler():
    """The 2x2 grid [[0, 10], [20, 30]] over the frame record's bounding box."""
    return GridSampler(
        [[0, 10], [20, 30]],
        lat_min=34.3,
        lat_max=41.25,
        lon_min=109.75,
        lon_max=115.075,
        projection_type='wg84',
        resolution=0.025,
        time='202508210000',
    )


@pytest.fixture
def random_sampler():
    """A 6x9 grid of random samples over a regional box."""
    rng = np.random.default_rng(42)
    return GridSampler(
        rng.random((6, 9)) * 100,
        lat_min=30.0,
        lat_max=45.0,
        lon_min=-10.0,
        lon_max=10.0,
    )


@pytest.fixture
def temperature_grid():
    """A 5x10 temperature DataArray on a regular lat/lon grid."""
    lons = np.linspace(100, 118, 10)
    lats = np.linspace(20, 40, 5)

    # Linear in both axes so bilinear sampling is exact
    data = 0.5 * lons[np.newaxis, :] + 2.0 * lats[:, np.newaxis]

    return xr.DataArray(
        data,
        dims=['lat', 'lon'],
        coords={'lat': lats, 'lon': lons},
        name='temperature',
        attrs={'projection_type': 'wg84', 'resolution': 2.0, 'time': '202508210000'},
    )
