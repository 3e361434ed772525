"""Tools wrapping the analyzer process and the diagnostics store."""

from .analyzer import AnalyzerError, AnalyzerResult, AnalyzerRunner
from .diagnostics_store import DiagnosticCollection

__all__ = [
    "AnalyzerError",
    "AnalyzerResult",
    "AnalyzerRunner",
    "DiagnosticCollection",
]
