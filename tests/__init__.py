"""Configure importable things that aren't pytest fixtures."""

from __future__ import annotations

# Third Party Imports
from numpy import finfo

FLOAT_EPS: float = finfo(float).eps
"""``float``: machine epsilon of a double, used as the relative tolerance for near-exact checks."""
