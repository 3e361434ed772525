"""Data models for documents, diagnostics and fixes."""

from .document import Position, Range, TextDocument
from .diagnostic import DiagnosticSeverity, Finding, Diagnostic
from .edit import CodeActionKind, TextEdit, WorkspaceEdit, CodeAction, apply_text_edits

__all__ = [
    "Position",
    "Range",
    "TextDocument",
    "DiagnosticSeverity",
    "Finding",
    "Diagnostic",
    "CodeActionKind",
    "TextEdit",
    "WorkspaceEdit",
    "CodeAction",
    "apply_text_edits",
]
