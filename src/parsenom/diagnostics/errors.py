"""parsenom exception hierarchy with structured diagnostics.

Inside the engine failures are outcome values, never exceptions. These
exceptions exist for the edges: finish() raises them when a caller wants a
bare value or an error.

Python 3.13+. Zero external dependencies.
"""

from typing import TYPE_CHECKING

from .codes import Diagnostic

if TYPE_CHECKING:
    from parsenom.core.outcome import Fatal, Incomplete, Recoverable

__all__ = [
    "IncompleteInputError",
    "ParseFailedError",
    "ParsenomError",
]


class ParsenomError(Exception):
    """Base exception for all parsenom errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize ParsenomError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class ParseFailedError(ParsenomError):
    """Parser failed, or matched without consuming the whole input.

    Attributes:
        outcome: The failure outcome that caused the error
    """

    def __init__(
        self,
        message: str | Diagnostic,
        outcome: "Recoverable | Fatal | Incomplete",
    ) -> None:
        super().__init__(message)
        self.outcome = outcome


class IncompleteInputError(ParseFailedError):
    """Parser needs more input than was supplied."""

    @property
    def needed(self) -> int:
        """Additional units the parser asked for."""
        return self.outcome.needed  # type: ignore[union-attr]
