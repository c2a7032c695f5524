"""Message construction for failed checks.

Nothing in this module runs on the success path of a check: callers only
build a message once a violation has been detected.
"""

from typing import Any, Sequence

from .exceptions import IllegalArgumentError, MessageFormatError


def format_message(template: Any, args: Sequence[Any] = ()) -> str:
    """
    Apply printf-style positional arguments to a message template.

    Args:
        template: Message or ``%``-style template; ``None`` means no message
        args: Positional values substituted into the template

    Returns:
        The formatted message, the template verbatim when there are no args,
        or an empty string when there is no template

    Raises:
        MessageFormatError: If the placeholders do not match the arguments
    """
    if template is None:
        return ""

    if not args:
        return str(template)

    try:
        return str(template) % tuple(args)
    except (TypeError, ValueError, KeyError) as exc:
        raise MessageFormatError(template, tuple(args), str(exc)) from exc


def _negative_size(size: int) -> IllegalArgumentError:
    return IllegalArgumentError("Negative size: %s" % (size,))


def bad_element_index(index: int, size: int, description: str) -> str:
    """
    Describe why ``index`` is not a valid element index for ``size``.

    Raises:
        IllegalArgumentError: If the index is non-negative but size is negative
    """
    if index < 0:
        return "%s (%s) must not be negative" % (description, index)
    if size < 0:
        raise _negative_size(size)
    return "%s (%s) must be less than size (%s)" % (description, index, size)


def bad_position_index(index: int, size: int, description: str) -> str:
    """
    Describe why ``index`` is not a valid position index for ``size``.

    Raises:
        IllegalArgumentError: If the index is non-negative but size is negative
    """
    if index < 0:
        return "%s (%s) must not be negative" % (description, index)
    if size < 0:
        raise _negative_size(size)
    return "%s (%s) must not be greater than size (%s)" % (description, index, size)


def bad_position_indexes(start: int, end: int, size: int) -> str:
    """Describe why ``[start, end)`` is not a valid range within ``size``."""
    if start < 0 or start > size:
        return bad_position_index(start, size, "Start Index")
    if end < 0 or end > size:
        return bad_position_index(end, size, "End Index")
    return "End Index (%s) must not be less than start index (%s)" % (end, start)
