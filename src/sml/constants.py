"""Global math constants.

This module holds the constants shared by the scalar helpers and the vector functions, so that
every conversion uses the same value of :math:`\\pi`.
"""

from __future__ import annotations

# Standard Library Imports
from typing import Final

PI: Final[float] = 3.14159265358979323846
"""``float``: :math:`\\pi` to 20 decimal places."""

# Conversion constants
TWOPI: Final[float] = 2.0 * PI
DEG2RAD: Final[float] = PI / 180.0
RAD2DEG: Final[float] = 180.0 / PI
