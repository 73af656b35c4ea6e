"""
Basic tests for gridfill library.

This module contains basic tests to verify the library can be imported and exposes its API.
"""

import pytest


def test_import():
    """Test that gridfill can be imported."""
    try:
        import gridfill
        assert gridfill is not None
    except ImportError:
        pytest.fail("Failed to import gridfill")


def test_version():
    """Test that gridfill has a version."""
    import gridfill
    assert hasattr(gridfill, '__version__')
    assert isinstance(gridfill.__version__, str)


def test_public_api():
    """Test that the public names are exported."""
    import gridfill
    for name in gridfill.__all__:
        assert hasattr(gridfill, name)
