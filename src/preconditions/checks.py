"""
Precondition checks as plain functions.

Each check compares its inputs against a fixed predicate and raises a typed
failure when the predicate does not hold. The functions keep no state, so they
can be called from any thread.
"""

from typing import Any, Optional, TypeVar

from .exceptions import (
    IllegalArgumentError,
    IllegalStateError,
    IndexOutOfBoundsError,
    NullReferenceError,
)
from .messages import (
    bad_element_index,
    bad_position_index,
    bad_position_indexes,
    format_message,
)

T = TypeVar("T")


def check_argument(expression: Any, message: Any = None, *args: Any) -> None:
    """
    Ensure the truth of an expression involving arguments to the calling function.

    Args:
        expression: Value tested for truthiness
        message: Error message, or ``%``-style template when ``args`` are given
        *args: Values substituted into the template

    Raises:
        IllegalArgumentError: If ``expression`` is falsy
    """
    if not expression:
        raise IllegalArgumentError(format_message(message, args))


def check_state(expression: Any, message: Any = None, *args: Any) -> None:
    """
    Ensure the truth of an expression involving the state of the calling instance,
    but not involving any arguments to the calling function.

    Raises:
        IllegalStateError: If ``expression`` is falsy
    """
    if not expression:
        raise IllegalStateError(format_message(message, args))


def check_not_null(reference: Optional[T], message: Any = None, *args: Any) -> T:
    """
    Ensure that a value passed to the calling function is not None.

    Only ``None`` is rejected; empty containers, zero and ``False`` pass.

    Returns:
        ``reference`` unchanged

    Raises:
        NullReferenceError: If ``reference`` is None
    """
    if reference is None:
        raise NullReferenceError(format_message(message, args))
    return reference


def check_element_index(index: int, size: int, description: str = "Index") -> int:
    """
    Ensure that ``index`` specifies a valid element of a sequence of length ``size``.

    An element index may range from zero, inclusive, to ``size``, exclusive.

    Args:
        index: Caller-supplied index of an element
        size: Length of the sequence
        description: Label for the index in the error message

    Returns:
        ``index`` unchanged

    Raises:
        IndexOutOfBoundsError: If ``index`` is negative or not less than ``size``
        IllegalArgumentError: If ``size`` is negative
    """
    if index < 0 or index >= size:
        raise IndexOutOfBoundsError(bad_element_index(index, size, description))
    return index


def check_position_index(index: int, size: int, description: str = "Position") -> int:
    """
    Ensure that ``index`` specifies a valid position in a sequence of length ``size``.

    A position index may range from zero to ``size``, inclusive.

    Args:
        index: Caller-supplied position, e.g. an insertion point
        size: Length of the sequence
        description: Label for the position in the error message

    Returns:
        ``index`` unchanged

    Raises:
        IndexOutOfBoundsError: If ``index`` is negative or greater than ``size``
        IllegalArgumentError: If ``size`` is negative
    """
    if index < 0 or index > size:
        raise IndexOutOfBoundsError(bad_position_index(index, size, description))
    return index


def check_position_indexes(start: int, end: int, size: int) -> None:
    """
    Ensure that ``start`` and ``end`` delimit a valid range ``[start, end)``
    of a sequence of length ``size``.

    Raises:
        IndexOutOfBoundsError: If either position is out of ``[0, size]``
            or ``end`` is less than ``start``
        IllegalArgumentError: If ``size`` is negative
    """
    if start < 0 or end < start or end > size:
        raise IndexOutOfBoundsError(bad_position_indexes(start, end, size))
