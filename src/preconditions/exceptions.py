"""
Failure kinds and exceptions raised by precondition checks.

Every concrete failure also derives from the closest built-in exception, so
callers can catch ``ValueError`` or ``IndexError`` without importing this
module.
"""

from enum import Enum
from typing import Any, Optional, Tuple


class FailureKind(Enum):
    """Category of a violated precondition."""
    ILLEGAL_ARGUMENT = "illegal-argument"
    ILLEGAL_STATE = "illegal-state"
    NULL_REFERENCE = "null-reference"
    INDEX_OUT_OF_BOUNDS = "index-out-of-bounds"


class PreconditionError(Exception):
    """Base class for every failed check.

    Concrete subclasses set ``kind``; the base class itself carries no kind.
    """

    kind: Optional[FailureKind] = None

    def __init__(self, message: Optional[str] = None):
        self.message = message or ""
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class IllegalArgumentError(PreconditionError, ValueError):
    """An argument, or an expression about arguments, is invalid."""
    kind = FailureKind.ILLEGAL_ARGUMENT


class IllegalStateError(PreconditionError, RuntimeError):
    """An expression about the caller's own state is false."""
    kind = FailureKind.ILLEGAL_STATE


class NullReferenceError(PreconditionError, TypeError):
    """A required value is None."""
    kind = FailureKind.NULL_REFERENCE


class IndexOutOfBoundsError(PreconditionError, IndexError):
    """An index or position lies outside its range, or a range is reversed."""
    kind = FailureKind.INDEX_OUT_OF_BOUNDS


class MessageFormatError(ValueError):
    """Raised when a message template cannot be applied to its arguments."""

    def __init__(self, template: Any, args: Tuple[Any, ...], reason: str):
        self.template = template
        self.template_args = args
        self.reason = reason
        super().__init__(template, args, reason)

    def __str__(self) -> str:
        return (
            f"Cannot format message template {self.template!r} "
            f"with {len(self.template_args)} argument(s): {self.reason}"
        )
