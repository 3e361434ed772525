"""Document and position models shared with the editor host."""

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional


# File suffixes the command-line host knows how to label
LANGUAGE_IDS = {
    ".py": "python",
    ".pyi": "python",
    ".js": "javascript",
    ".ts": "typescript",
}


@dataclass(frozen=True)
class Position:
    """Zero-based position in a document."""
    line: int
    character: int


@dataclass(frozen=True)
class Range:
    """Half-open range between two positions."""
    start: Position
    end: Position

    @classmethod
    def of(cls, start_line: int, start_char: int, end_line: int, end_char: int) -> "Range":
        return cls(Position(start_line, start_char), Position(end_line, end_char))


@dataclass
class TextDocument:
    """
    Snapshot of an open document.

    The host owns the real buffer; this is the view the assistant works on.
    """
    uri: str
    path: str
    language_id: str
    text: str = ""

    @classmethod
    def from_path(cls, path: str, language_id: Optional[str] = None) -> "TextDocument":
        """Load a document from disk, guessing the language from the suffix."""
        file_path = Path(path).resolve()
        if language_id is None:
            language_id = LANGUAGE_IDS.get(file_path.suffix, "plaintext")
        return cls(
            uri=file_path.as_uri(),
            path=str(file_path),
            language_id=language_id,
            text=file_path.read_text(encoding="utf-8"),
        )

    @property
    def lines(self) -> List[str]:
        return [line.rstrip("\r") for line in self.text.split("\n")]

    @property
    def line_count(self) -> int:
        return len(self.lines)

    def line_at(self, line: int) -> str:
        """Text of a line without its line ending."""
        return self.lines[line]

    def get_text(self) -> str:
        return self.text
