r"""Lagrange polynomial interpolation over scattered samples.

The interpolating polynomial through :math:`N` samples :math:`(x_{i}, y_{i})` is evaluated
directly from its Lagrange form,

.. math::

    P(x) = \sum_{i=1}^{N} y_{i} \prod_{j \neq i} \frac{x - x_{j}}{x_{i} - x_{j}}

See Also:
    https://mathworld.wolfram.com/LagrangeInterpolatingPolynomial.html

Warning:
    The direct form loses accuracy for query points near, or beyond, the boundary of the
    sampled range. Results match direct floating point evaluation of the sum above, nothing
    more. For best results query near the center of the samples.
"""

from __future__ import annotations

# Standard Library Imports
from collections.abc import Mapping
from operator import itemgetter
from typing import TYPE_CHECKING, Union

# Third Party Imports
from numpy import float64

# Local Imports
from .common.exceptions import DegenerateInputError
from .common.logger import smlLogError
from .common.utilities import checkDegenerateInput

# Type Checking Imports
if TYPE_CHECKING:
    # Standard Library Imports
    from collections.abc import Iterable

    # Third Party Imports
    from typing_extensions import TypeAlias


FunctionSamples: TypeAlias = Union["Mapping[float, float]", "Iterable[tuple[float, float]]"]
"""Function samples, either a mapping of ``x -> y`` or an iterable of ``(x, y)`` pairs."""


def orderedSamples(samples: FunctionSamples) -> list[tuple[float64, float]]:
    """Return the samples as ``(x, y)`` pairs sorted by ascending `x`.

    Abscissae are converted to ``numpy.float64`` so that a division by a repeated abscissa
    yields a non-finite value instead of a ``ZeroDivisionError``. Ties keep their input order.

    Args:
        samples (:data:`.FunctionSamples`): function samples; an ``Nx2`` ``ndarray`` works too.

    Returns:
        ``list``: ``(x, y)`` pairs in evaluation order.
    """
    pairs = samples.items() if isinstance(samples, Mapping) else samples
    return sorted(((float64(x), y) for x, y in pairs), key=itemgetter(0))


def _checkSamples(samples: list[tuple[float64, float]]) -> None:
    """Raise a :class:`.DegenerateInputError` for an empty or ambiguous set of samples."""
    if not samples:
        msg = "`lagrangeInterpolate()` requires at least one sample"
        smlLogError(msg)
        raise DegenerateInputError(msg)

    abscissae = [x for x, _ in samples]
    if len(set(abscissae)) != len(abscissae):
        msg = f"`lagrangeInterpolate()` was passed repeated abscissae: {abscissae}"
        smlLogError(msg)
        raise DegenerateInputError(msg)


def lagrangeInterpolate(samples: FunctionSamples, x: float, validate: bool | None = None) -> float:
    """Evaluate the Lagrange polynomial through `samples` at `x`.

    Each sample contributes its ordinate scaled by the basis polynomial of every other sample,
    and the contributions are summed in ascending abscissa order.

    Note:
        Abscissae must be pairwise distinct. Unless validation is turned on, a repeated abscissa
        isn't guarded against and the result is non-finite; an empty set of samples gives 0.0.

    Examples:
        >>> lagrangeInterpolate({0.0: 2.0, 1.0: 3.0, 2.0: 12.0, 5.0: 147.0}, 3.0)
        35.0

    Args:
        samples (:data:`.FunctionSamples`): N samples of the function to interpolate.
        x (``float``): independent value to interpolate at.
        validate (``bool``, optional): whether to reject empty samples and repeated abscissae.
            Defaults to ``None``, which defers to ``BehavioralConfig.validation.DegenerateInput``.

    Raises:
        :class:`.DegenerateInputError`: raised if validating and the samples are degenerate.

    Returns:
        ``float``: interpolated dependent value.
    """
    ordered = orderedSamples(samples)
    if checkDegenerateInput(validate):
        _checkSamples(ordered)

    result = 0.0
    for index, (abscissa, ordinate) in enumerate(ordered):
        term = ordinate
        for other_index, (other_abscissa, _) in enumerate(ordered):
            if other_index != index:
                term = term * ((x - other_abscissa) / (abscissa - other_abscissa))
        result = result + term
    return float(result)
