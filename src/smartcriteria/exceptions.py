"""Custom exceptions for smartcriteria.

Recoverable problems (unsupported operators, unknown fields, corrupted
subpredicates) are never raised; the compilers report them as diagnostics
and substitute a default. Only the errors below propagate to callers.
"""

from typing import Any, Dict


class CriteriaError(Exception):
    """Base exception for all smartcriteria errors.

    Attributes:
        message: Error message
        details: Additional error context as key-value pairs
    """

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        """Initialize exception with message and additional details.

        Args:
            message: Human-readable error message
            **kwargs: Additional context (e.g., field, value)
        """
        self.message = message
        self.details: Dict[str, Any] = kwargs
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the complete error message with details."""
        if not self.details:
            return self.message

        details_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
        if self.message:
            return f"{self.message} ({details_str})"
        return details_str

    def __repr__(self) -> str:
        """Return detailed representation of the exception."""
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details!r})"


class MalformedCriteriaValueError(CriteriaError):
    """Raised when a stored criteria value is corrupted beyond recovery.

    Example:
        >>> raise MalformedCriteriaValueError("malformed criteria value", field="Date", value="x days")
    """
