"""Text edit and code action models."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from .diagnostic import Diagnostic
from .document import Position, Range


class CodeActionKind(Enum):
    """Kinds of code actions offered to the editor."""
    QUICK_FIX = "quickfix"


@dataclass
class TextEdit:
    """Replace a range with new text. An empty range is an insertion."""
    range: Range
    new_text: str


@dataclass
class WorkspaceEdit:
    """Text edits grouped by document URI, applied by the host as one unit."""
    changes: Dict[str, List[TextEdit]] = field(default_factory=dict)

    def replace(self, uri: str, range: Range, new_text: str):
        self.changes.setdefault(uri, []).append(TextEdit(range, new_text))

    def insert(self, uri: str, position: Position, new_text: str):
        self.changes.setdefault(uri, []).append(TextEdit(Range(position, position), new_text))

    def edits_for(self, uri: str) -> List[TextEdit]:
        return list(self.changes.get(uri, []))


@dataclass
class CodeAction:
    """A proposed fix for one or more diagnostics."""
    title: str
    kind: CodeActionKind = CodeActionKind.QUICK_FIX
    edit: Optional[WorkspaceEdit] = None
    diagnostics: List[Diagnostic] = field(default_factory=list)
    is_preferred: bool = False


def apply_text_edits(text: str, edits: List[TextEdit]) -> str:
    """
    Apply edits to a document's text the way a host would.

    All positions refer to the original text, so edits are applied from
    the end of the document backwards.
    """
    line_starts = [0]
    for index, char in enumerate(text):
        if char == "\n":
            line_starts.append(index + 1)

    def offset(position: Position) -> int:
        if position.line >= len(line_starts):
            return len(text)
        start = line_starts[position.line]
        if position.line + 1 < len(line_starts):
            line_end = line_starts[position.line + 1] - 1
            if line_end > start and text[line_end - 1] == "\r":
                line_end -= 1
        else:
            line_end = len(text)
        return min(start + position.character, line_end)

    spans = sorted(
        ((offset(e.range.start), offset(e.range.end), e.new_text) for e in edits),
        key=lambda span: span[0],
        reverse=True,
    )
    for start, end, new_text in spans:
        text = text[:start] + new_text + text[end:]
    return text
