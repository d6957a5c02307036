"""Diagnostics sink passed through every build and parse call.

The compilers never write to a process-wide log directly. They report to a
`Diagnostics` instance, which records each entry, hands it to an optional
callback, and forwards it to the package logger unless disabled.
"""

from typing import Any, Callable, Dict, List, Optional

from pydantic import BaseModel, Field

from .logger import get_logger
from .settings import settings as api_settings

__all__ = ("Diagnostic", "Diagnostics")

_log = get_logger(__name__)


class Diagnostic(BaseModel):
    level: str = Field("WARNING", description="Log level name.")
    message: str = Field(..., description="Human-readable description.")
    details: Dict[str, Any] = Field(default_factory=dict, description="Structured context.")


class Diagnostics:
    """Accumulates compiler diagnostics.

    Args:
        callback: called with every `Diagnostic` as it is reported
        log: forward entries to the logger; defaults to the
            CRITERIA_LOG_DIAGNOSTICS setting
    """

    def __init__(
        self,
        callback: Optional[Callable[[Diagnostic], None]] = None,
        log: Optional[bool] = None,
    ) -> None:
        self.entries: List[Diagnostic] = []
        self._callback = callback
        self._log = api_settings.CRITERIA_LOG_DIAGNOSTICS if log is None else log

    def report(self, level: str, message: str, **details: Any) -> Diagnostic:
        diagnostic = Diagnostic(level=level.upper(), message=message, details=details)
        self.entries.append(diagnostic)
        if self._callback is not None:
            self._callback(diagnostic)
        if self._log:
            _log.log(diagnostic.level, message)
        return diagnostic

    def warning(self, message: str, **details: Any) -> Diagnostic:
        return self.report("WARNING", message, **details)

    def error(self, message: str, **details: Any) -> Diagnostic:
        return self.report("ERROR", message, **details)

    @property
    def messages(self) -> List[str]:
        return [d.message for d in self.entries]
