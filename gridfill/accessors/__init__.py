"""
gridfill Accessor module.

This module defines the xarray accessor that provides the .gridfill interface.
"""

from .accessor import GridFillAccessor

__all__ = ["GridFillAccessor"]
