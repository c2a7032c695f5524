"""Precondition checks for arguments, state, null references and index bounds."""

from .checks import (
    check_argument,
    check_element_index,
    check_not_null,
    check_position_index,
    check_position_indexes,
    check_state,
)
from .checker import Preconditions, precondition
from .config import Settings
from .exceptions import (
    FailureKind,
    IllegalArgumentError,
    IllegalStateError,
    IndexOutOfBoundsError,
    MessageFormatError,
    NullReferenceError,
    PreconditionError,
)
from .messages import format_message

__version__ = "1.0.0"

__all__ = [
    "check_argument",
    "check_state",
    "check_not_null",
    "check_element_index",
    "check_position_index",
    "check_position_indexes",
    "Preconditions",
    "precondition",
    "Settings",
    "FailureKind",
    "PreconditionError",
    "IllegalArgumentError",
    "IllegalStateError",
    "NullReferenceError",
    "IndexOutOfBoundsError",
    "MessageFormatError",
    "format_message",
]
