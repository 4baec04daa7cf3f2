from __future__ import annotations

# SML Imports
import sml
from sml import interpolation, linear_algebra


def testPublicApi():
    """Test that the top-level package exposes every public function."""
    for name in sml.__all__:
        assert hasattr(sml, name), name

    assert sml.crossProduct is linear_algebra.crossProduct
    assert sml.lagrangeInterpolate is interpolation.lagrangeInterpolate
    assert issubclass(sml.DimensionError, ValueError)
    assert issubclass(sml.DegenerateInputError, ValueError)


def testVersion():
    """Test that the package carries a version string."""
    assert isinstance(sml.__version__, str)
    assert sml.__version__.count(".") == 2
