"""Data models for analyzer findings and editor diagnostics."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from .document import Range


class DiagnosticSeverity(Enum):
    """Severity levels understood by the editor."""
    ERROR = 1
    WARNING = 2


@dataclass
class Finding:
    """One result reported by the analyzer. Lines and columns are 1-based."""
    start_line: int
    start_col: int
    end_line: int
    end_col: int
    message: str
    severity: str
    check_id: str

    @classmethod
    def from_result(cls, result: Dict[str, Any]) -> "Finding":
        """
        Build a finding from one entry of the analyzer's ``results`` list.

        Raises:
            KeyError: a required field is missing
            TypeError: a field has the wrong shape or type
            ValueError: a line or column is below 1
        """
        start = result["start"]
        end = result["end"]
        extra = result["extra"]
        return cls(
            start_line=_as_int(start["line"]),
            start_col=_as_int(start["col"]),
            end_line=_as_int(end["line"]),
            end_col=_as_int(end["col"]),
            message=extra["message"],
            severity=extra["severity"],
            check_id=result["check_id"],
        )

    def to_diagnostic(self, source: Optional[str] = None) -> "Diagnostic":
        """Project the finding onto the editor's 0-based coordinates."""
        return Diagnostic(
            range=Range.of(
                self.start_line - 1,
                self.start_col - 1,
                self.end_line - 1,
                self.end_col - 1,
            ),
            message=self.message,
            severity=DiagnosticSeverity.ERROR if self.severity == "ERROR" else DiagnosticSeverity.WARNING,
            code=self.check_id,
            source=source,
        )


@dataclass
class Diagnostic:
    """Editor-facing record of a finding."""
    range: Range
    message: str
    severity: DiagnosticSeverity = DiagnosticSeverity.WARNING
    code: Optional[str] = None
    source: Optional[str] = None

    def to_dict(self) -> dict:
        """Convert to a dictionary with 1-based positions for display."""
        return {
            "line": self.range.start.line + 1,
            "column": self.range.start.character + 1,
            "end_line": self.range.end.line + 1,
            "end_column": self.range.end.character + 1,
            "severity": self.severity.name.lower(),
            "message": self.message,
            "code": self.code,
        }


def _as_int(value: Any) -> int:
    # bool is an int subclass but never a valid position
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Expected integer position, got {value!r}")
    if value < 1:
        raise ValueError(f"Positions are 1-based, got {value}")
    return value
