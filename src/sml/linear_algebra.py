r"""Generic vector-algebra functions.

Every function here works on any "vector-like" value: an object exposing zero-based element
access through ``__getitem__`` and its length through ``__len__``. That covers ``list``,
``tuple`` and ``numpy.ndarray`` without conversion. Results are new vectors built through a
:data:`.VectorFactory`, so the inputs are never mutated.

By default the result container follows the first input vector:

* ``ndarray`` inputs give an ``ndarray`` with a floating point ``dtype``,
* ``list`` inputs give a ``list`` (of the same type, for subclasses),
* anything else, e.g. a ``tuple``, gives an ``ndarray``.

Pass ``factory=`` to any constructing function to pick the result container explicitly.

Note:
    Sums are accumulated strictly left-to-right in ascending index order, rather than with
    ``numpy.dot()`` whose blocked/pairwise summation rounds differently. This keeps results
    reproducible bit-for-bit on a given platform.
"""

from __future__ import annotations

# Standard Library Imports
from enum import IntEnum
from functools import partial
from typing import TYPE_CHECKING, Any, Protocol

# Third Party Imports
from numpy import ndarray, result_type, sqrt, zeros

# Local Imports
from .common.exceptions import DegenerateInputError, DimensionError
from .common.logger import smlLogError
from .common.utilities import checkDegenerateInput

# Type Checking Imports
if TYPE_CHECKING:
    # Standard Library Imports
    from collections.abc import Callable

    # Third Party Imports
    from typing_extensions import TypeAlias


class VectorLike(Protocol):
    """Read-only capabilities required of every vector input."""

    def __getitem__(self, index: int) -> Any:
        """Return the element at `index`, in ``[0, len(self))``."""

    def __len__(self) -> int:
        """Return the number of elements."""


class MutableVector(VectorLike, Protocol):
    """Capabilities required of vectors constructed by a :data:`.VectorFactory`."""

    def __setitem__(self, index: int, value: Any) -> None:
        """Overwrite the element at `index`."""


VectorFactory: TypeAlias = "Callable[[int], MutableVector]"
"""Callable which takes a length and returns a new, zero-filled :class:`.MutableVector`."""


class Axis(IntEnum):
    """Cartesian coordinate axes, valued by their index in a 3-vector."""

    X = 0
    Y = 1
    Z = 2


def _listFactory(container: type, length: int) -> list:
    """Build a zero-filled list-like `container` of `length`."""
    return container([0.0] * length)


def vectorFactory(template: VectorLike | None = None) -> VectorFactory:
    """Return the factory that builds results shaped like `template`.

    Args:
        template (:class:`.VectorLike`, optional): vector the result should resemble. Defaults
            to ``None``, which builds ``ndarray`` vectors.

    Returns:
        :data:`.VectorFactory`: callable creating zero-filled vectors of a given length.
    """
    if isinstance(template, ndarray):
        return partial(zeros, dtype=result_type(template.dtype, float))

    if isinstance(template, list):
        return partial(_listFactory, type(template))

    return partial(zeros, dtype=float)


def _newVector(
    template: VectorLike | None,
    length: int,
    factory: VectorFactory | None,
) -> MutableVector:
    """Create the result vector for an operation, honoring an explicit `factory` if given."""
    if factory is None:
        factory = vectorFactory(template)
    return factory(length)


def _checkEqualLength(operation: str, vector1: VectorLike, vector2: VectorLike) -> None:
    """Raise a :class:`.DimensionError` if the vectors differ in length."""
    if len(vector1) != len(vector2):
        msg = (
            f"`{operation}()` wasn't passed vectors with equal length, {len(vector1)} != {len(vector2)}"
        )
        smlLogError(msg)
        raise DimensionError(msg)


def crossProduct(
    vector1: VectorLike,
    vector2: VectorLike,
    factory: VectorFactory | None = None,
) -> MutableVector:
    r"""Compute the cross product of two 3-vectors.

    The cross product :math:`\bar{R} = \bar{X} \times \bar{Y}` is computed as

    .. math::

        R_{1} = X_{2}Y_{3} - X_{3}Y_{2} \\
        R_{2} = X_{3}Y_{1} - X_{1}Y_{3} \\
        R_{3} = X_{1}Y_{2} - X_{2}Y_{1}

    Args:
        vector1 (:class:`.VectorLike`): 3x1 vector, left operand.
        vector2 (:class:`.VectorLike`): 3x1 vector, right operand.
        factory (:data:`.VectorFactory`, optional): builds the result. Defaults to
            ``None``, which follows the container of `vector1`.

    Raises:
        :class:`.DimensionError`: raised if either vector doesn't have exactly 3 elements.

    Returns:
        :class:`.MutableVector`: 3x1 vector resulting from the cross product.
    """
    if len(vector1) != 3 or len(vector2) != 3:
        msg = (
            f"`crossProduct()` requires two 3-vectors, got lengths {len(vector1)} and {len(vector2)}"
        )
        smlLogError(msg)
        raise DimensionError(msg)

    result = _newVector(vector1, 3, factory)
    result[0] = vector1[1] * vector2[2] - vector1[2] * vector2[1]
    result[1] = vector1[2] * vector2[0] - vector1[0] * vector2[2]
    result[2] = vector1[0] * vector2[1] - vector1[1] * vector2[0]
    return result


def dotProduct(vector1: VectorLike, vector2: VectorLike) -> float:
    r"""Compute the dot (inner) product of two equal-length vectors.

    .. math::

        r = \sum_{i=1}^{N} X_{i} Y_{i}

    The sum starts at zero and accumulates in ascending index order.

    Args:
        vector1 (:class:`.VectorLike`): Nx1 vector.
        vector2 (:class:`.VectorLike`): Nx1 vector.

    Raises:
        :class:`.DimensionError`: raised if the vectors differ in length.

    Returns:
        ``float``: scalar result of the dot product.
    """
    _checkEqualLength("dotProduct", vector1, vector2)

    result = 0.0
    for index in range(len(vector1)):
        result += vector1[index] * vector2[index]
    return result


def squaredNorm(vector: VectorLike) -> float:
    r"""Compute the squared Euclidean norm, :math:`|\bar{X}|^{2} = \bar{X} \cdot \bar{X}`."""
    return dotProduct(vector, vector)


def norm(vector: VectorLike) -> float:
    r"""Compute the Euclidean norm, :math:`|\bar{X}| = \sqrt{\bar{X} \cdot \bar{X}}`.

    Args:
        vector (:class:`.VectorLike`): Nx1 vector.

    Returns:
        ``float``: non-negative norm, zero only for a vector of zeros.
    """
    return sqrt(squaredNorm(vector))


def normalize(
    vector: VectorLike,
    factory: VectorFactory | None = None,
    validate: bool | None = None,
) -> MutableVector:
    r"""Scale a vector to unit length, :math:`\hat{X} = \bar{X} / |\bar{X}|`.

    Warning:
        A vector of zeros has no direction. Unless validation is turned on, it isn't guarded
        against: every element becomes ``nan`` and ``numpy`` emits a ``RuntimeWarning``.

    Args:
        vector (:class:`.VectorLike`): Nx1 vector with a non-zero norm.
        factory (:data:`.VectorFactory`, optional): builds the result. Defaults to
            ``None``, which follows the container of `vector`.
        validate (``bool``, optional): whether to reject a zero-norm vector. Defaults to
            ``None``, which defers to ``BehavioralConfig.validation.DegenerateInput``.

    Raises:
        :class:`.DegenerateInputError`: raised if validating and `vector` has a zero norm.

    Returns:
        :class:`.MutableVector`: Nx1 unit vector.
    """
    magnitude = norm(vector)
    if checkDegenerateInput(validate) and magnitude == 0.0:
        msg = "`normalize()` was passed a vector with zero norm"
        smlLogError(msg)
        raise DegenerateInputError(msg)

    result = _newVector(vector, len(vector), factory)
    for index in range(len(vector)):
        result[index] = vector[index] / magnitude
    return result


def unitVector(axis: Axis | int, factory: VectorFactory | None = None) -> MutableVector:
    """Return a new unit 3-vector along a coordinate axis.

    Args:
        axis (:class:`.Axis`): axis the vector points along, :attr:`.Axis.X` is index 0.
        factory (:data:`.VectorFactory`, optional): builds the result. Defaults to
            ``None``, which builds an ``ndarray``.

    Returns:
        :class:`.MutableVector`: 3x1 vector, 1.0 along `axis` and 0.0 elsewhere.
    """
    axis = Axis(axis)
    result = _newVector(None, 3, factory)
    for index in range(3):
        result[index] = 1.0 if index == axis else 0.0
    return result


def scale(
    vector: VectorLike,
    multiplier: Any,
    factory: VectorFactory | None = None,
) -> MutableVector:
    """Multiply every element by a scalar, as ``multiplier * vector[i]``.

    The multiplier is the left operand, which only matters for element types whose
    multiplication doesn't commute.
    """
    result = _newVector(vector, len(vector), factory)
    for index in range(len(vector)):
        result[index] = multiplier * vector[index]
    return result


def addScalar(
    vector: VectorLike,
    adder: Any,
    factory: VectorFactory | None = None,
) -> MutableVector:
    """Add a scalar to every element, as ``adder + vector[i]``."""
    result = _newVector(vector, len(vector), factory)
    for index in range(len(vector)):
        result[index] = adder + vector[index]
    return result


def addVectors(
    vector1: VectorLike,
    vector2: VectorLike,
    factory: VectorFactory | None = None,
) -> MutableVector:
    """Add two equal-length vectors element-wise.

    Args:
        vector1 (:class:`.VectorLike`): Nx1 vector.
        vector2 (:class:`.VectorLike`): Nx1 vector.
        factory (:data:`.VectorFactory`, optional): builds the result. Defaults to
            ``None``, which follows the container of `vector1`.

    Raises:
        :class:`.DimensionError`: raised if the vectors differ in length.

    Returns:
        :class:`.MutableVector`: Nx1 vector of element-wise sums.
    """
    _checkEqualLength("addVectors", vector1, vector2)

    result = _newVector(vector1, len(vector1), factory)
    for index in range(len(vector1)):
        result[index] = vector1[index] + vector2[index]
    return result
