"""
Checker objects bundling the precondition checks with a configuration.

A ``Preconditions`` instance holds an immutable ``Settings`` and nothing
else, so one instance can be shared freely between threads.
"""

import logging
from typing import Any, Callable, Optional, TypeVar

from . import checks
from .config import Settings
from .exceptions import PreconditionError
from .logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class Preconditions:
    """
    Precondition checker configured by ``Settings``.

    Methods mirror the functions in ``preconditions.checks``. Index checks
    take their default descriptions from the settings, and failures can be
    logged at DEBUG level before they propagate.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or Settings()
        if self.settings.log_failures and not logger.isEnabledFor(logging.DEBUG):
            logger.setLevel(logging.DEBUG)

    def __repr__(self) -> str:
        return f"Preconditions(settings={self.settings!r})"

    def _run(self, check: Callable[..., T], *args: Any) -> T:
        try:
            return check(*args)
        except PreconditionError as exc:
            if self.settings.log_failures:
                kind = exc.kind.value if exc.kind is not None else "unspecified"
                logger.debug(f"{check.__name__} failed ({kind}): {exc.message}")
            raise

    def check_argument(self, expression: Any, message: Any = None, *args: Any) -> None:
        """Raise ``IllegalArgumentError`` if ``expression`` is falsy."""
        self._run(checks.check_argument, expression, message, *args)

    def check_state(self, expression: Any, message: Any = None, *args: Any) -> None:
        """Raise ``IllegalStateError`` if ``expression`` is falsy."""
        self._run(checks.check_state, expression, message, *args)

    def check_not_null(self, reference: Optional[T], message: Any = None, *args: Any) -> T:
        """Return ``reference``, or raise ``NullReferenceError`` if it is None."""
        return self._run(checks.check_not_null, reference, message, *args)

    def check_element_index(self, index: int, size: int, description: Optional[str] = None) -> int:
        """Return ``index`` if ``0 <= index < size``."""
        if description is None:
            description = self.settings.element_description
        return self._run(checks.check_element_index, index, size, description)

    def check_position_index(self, index: int, size: int, description: Optional[str] = None) -> int:
        """Return ``index`` if ``0 <= index <= size``."""
        if description is None:
            description = self.settings.position_description
        return self._run(checks.check_position_index, index, size, description)

    def check_position_indexes(self, start: int, end: int, size: int) -> None:
        """Ensure ``[start, end)`` is an ordered range within ``size``."""
        self._run(checks.check_position_indexes, start, end, size)


_default = Preconditions()


def precondition() -> Preconditions:
    """Return the shared checker built with default settings."""
    return _default
