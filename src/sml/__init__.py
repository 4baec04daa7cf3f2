"""Simple Maths Library.

Generic vector algebra, Lagrange interpolation and elementary scalar functions, meant to be
embedded in larger numerical codes. Importing the top-level package exposes the whole public
API, e.g.

.. code-block:: python

    from sml import crossProduct, lagrangeInterpolate

Operations record a precondition failure at ERROR level on the ``"sml"`` logger just before
raising. No handler is attached by default, so callers who want that output attach one, e.g.

.. code-block:: python

    from sml.common.logger import Logger

    Logger("sml")  # stdout, or a rotating log file with path=...
"""

from __future__ import annotations

# Local Imports
from .basic_functions import degreesToRadians, modulo, radiansToDegrees
from .common.exceptions import DegenerateInputError, DimensionError
from .constants import PI
from .interpolation import FunctionSamples, lagrangeInterpolate
from .linear_algebra import (
    Axis,
    MutableVector,
    VectorFactory,
    VectorLike,
    addScalar,
    addVectors,
    crossProduct,
    dotProduct,
    norm,
    normalize,
    scale,
    squaredNorm,
    unitVector,
    vectorFactory,
)

__version__ = "1.0.0"

__all__ = [
    "PI",
    "Axis",
    "DegenerateInputError",
    "DimensionError",
    "FunctionSamples",
    "MutableVector",
    "VectorFactory",
    "VectorLike",
    "addScalar",
    "addVectors",
    "crossProduct",
    "degreesToRadians",
    "dotProduct",
    "lagrangeInterpolate",
    "modulo",
    "norm",
    "normalize",
    "radiansToDegrees",
    "scale",
    "squaredNorm",
    "unitVector",
    "vectorFactory",
]
