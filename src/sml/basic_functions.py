r"""Elementary scalar functions.

These complement the vector functions in :mod:`.linear_algebra` and share the same value of
:math:`\pi`, see :mod:`.constants`.
"""

from __future__ import annotations

# Third Party Imports
from numpy import floor

# Local Imports
from .constants import PI


def modulo(dividend: float, divisor: float) -> float:
    r"""Compute the remainder of `dividend` divided by `divisor`, in the congruence sense.

    The remainder is defined as

    .. math::

        r = a - n \lfloor a / n \rfloor

    so it takes the sign of the divisor and lies in :math:`[0, n)` for :math:`n > 0`. This
    differs from ``math.fmod()``, which follows the sign of the dividend.

    See Also:
        http://mathworld.wolfram.com/Congruence.html

    Args:
        dividend (``float``): number to be divided.
        divisor (``float``): number that divides `dividend`.

    Returns:
        ``float``: remainder of the division.
    """
    return dividend - divisor * floor(dividend / divisor)


def radiansToDegrees(angle: float) -> float:
    r"""Convert an angle from radians to degrees, :math:`\theta_{deg} = \theta_{rad} / \pi * 180`."""
    return angle / PI * 180.0


def degreesToRadians(angle: float) -> float:
    r"""Convert an angle from degrees to radians, :math:`\theta_{rad} = \theta_{deg} * \pi / 180`."""
    return angle * PI / 180.0
