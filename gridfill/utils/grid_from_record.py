"""
Grid from record utility function.

This module provides the grid_from_record function for building a GridSampler
from the flat data-frame record delivered by upstream loaders.
"""

from typing import TYPE_CHECKING, Any, Dict, Mapping

if TYPE_CHECKING:
    from gridfill.core import GridSampler


# Record field -> GridSampler argument. Both the camelCase names used by the
# upstream feed and snake_case spellings are accepted.
BOUND_FIELDS = {
    'lat_min': ('latMin', 'lat_min'),
    'lat_max': ('latMax', 'lat_max'),
    'lon_min': ('lonMin', 'lon_min'),
    'lon_max': ('lonMax', 'lon_max'),
}

METADATA_FIELDS = {
    'projection_type': ('projectionType', 'projection_type'),
    'resolution': ('resolution',),
    'time': ('time',),
}

GRID_FIELDS = ('values', 'value')


def grid_from_record(record: Mapping[str, Any]) -> "GridSampler":
    """
    Create a GridSampler from a data-frame record.

    Parameters
    ----------
    record : mapping
        Record with the bounding box (``latMin``, ``latMax``, ``lonMin``,
        ``lonMax``), the sample grid under ``values`` (or ``value``), and
        optional metadata (``projectionType``, ``resolution``, ``time``).

    Returns
    -------
    GridSampler
        The sampler for the record's data frame

    Raises
    ------
    TypeError
        If record is not a mapping
    ValueError
        If bound fields or the grid are missing, or the grid is given twice
    """
    if not isinstance(record, Mapping):
        raise TypeError(f"record must be a mapping, got {type(record)}")

    from gridfill.core import GridSampler

    kwargs: Dict[str, Any] = {}

    missing = []
    for argument, keys in BOUND_FIELDS.items():
        key = _first_present(record, keys)
        if key is None:
            missing.append(keys[0])
        else:
            kwargs[argument] = record[key]

    grid_keys = [key for key in GRID_FIELDS if key in record]
    if not grid_keys:
        missing.append(GRID_FIELDS[0])
    elif len(grid_keys) > 1:
        raise ValueError(
            f"record contains the grid under both {GRID_FIELDS}; keep only one"
        )

    if missing:
        raise ValueError(f"record is missing required fields: {missing}")

    for argument, keys in METADATA_FIELDS.items():
        key = _first_present(record, keys)
        kwargs[argument] = record[key] if key is not None else None

    return GridSampler(record[grid_keys[0]], **kwargs)


def _first_present(record: Mapping[str, Any], keys):
    for key in keys:
        if key in record:
            return key
    return None
